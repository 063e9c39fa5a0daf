from typing import List

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    GOOGLE_MAPS_API_KEY: str = "your_google_maps_key"
    # Google Directions API (origin/destination/waypoints with optimize:true)
    DIRECTIONS_API_BASE: str = "https://maps.googleapis.com/maps/api/directions/json"
    PROVIDER_TIMEOUT_SECONDS: float = 20.0
    TRAFFIC_MODEL: str = "best_guess"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["https://*.onrender.com", "https://*.vercel.app"]
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

settings = Settings()
