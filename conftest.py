import os

# Must be set before config is imported so the app starts without a Redis server
os.environ.setdefault("WEATHER_STORE_BACKEND", "memory")
os.environ.setdefault("ENVIRONMENT", "test")
