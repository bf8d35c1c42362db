"""Shared dependencies for routers."""
from typing import Optional
from weather_store import WeatherStore

# Set by main.py during app startup
_weather_store: Optional[WeatherStore] = None


def get_weather_store() -> WeatherStore:
    """Dependency to get the weather record store."""
    if _weather_store is None:
        raise RuntimeError("Weather store not initialized. Ensure app is properly started.")
    return _weather_store


def initialize_dependencies(weather_store: WeatherStore):
    """Initialize shared dependencies. Called from main.py during app startup."""
    global _weather_store
    _weather_store = weather_store
