from typing import List, Tuple


def _next_value(points: str, index: int) -> Tuple[int, int]:
    shift = 0
    result = 0
    while True:
        if index >= len(points):
            raise ValueError("Truncated polyline")
        b = ord(points[index]) - 63
        index += 1
        result |= (b & 0x1f) << shift
        shift += 5
        if b < 0x20:
            break
    delta = ~(result >> 1) if (result & 1) else (result >> 1)
    return delta, index


def decode_polyline(points: str, precision: int = 5) -> List[Tuple[float, float]]:
    """Decode a Google encoded polyline (the route's overview path) into (lat, lng) pairs.

    Args:
        points: Encoded polyline string, as in ``overview_polyline.points``
        precision: Decimal places encoded; Google uses 5

    Returns:
        List of (latitude, longitude) tuples
    """
    factor = 10 ** precision
    coordinates = []
    index = 0
    lat = 0
    lng = 0

    while index < len(points):
        dlat, index = _next_value(points, index)
        dlng, index = _next_value(points, index)
        lat += dlat
        lng += dlng
        coordinates.append((lat / factor, lng / factor))

    return coordinates
