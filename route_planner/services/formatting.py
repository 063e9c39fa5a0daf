METERS_PER_MILE = 1609.34


def meters_to_miles(meters: int) -> float:
    return meters / METERS_PER_MILE


def format_total_distance(meters: int) -> str:
    return f"{meters_to_miles(meters):.1f} miles"


def format_total_duration(seconds: int) -> str:
    """Whole minutes, rolled into hours past the hour: "64 min" -> "1 hr 4 min"."""
    minutes = seconds // 60
    if minutes >= 60:
        return f"{minutes // 60} hr {minutes % 60} min"
    return f"{minutes} min"


def format_leg_distance(meters: int) -> str:
    return f"{meters_to_miles(meters):.1f} mi"


def format_leg_duration(seconds: int) -> str:
    # no hour rollover per leg
    return f"{seconds // 60} min"
