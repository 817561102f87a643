"""
Application configuration read from environment variables
"""
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent
DATA_DIR = BASE_DIR / "data"

# Data files
LISTINGS_DATA_FILE = os.getenv("LISTINGS_DATA_FILE", str(DATA_DIR / "mock_properties.json"))
AMENITY_NAMES_FILE = os.getenv("AMENITY_NAMES_FILE", str(DATA_DIR / "mock_amenities.json"))

# Nearby amenities
AMENITY_CACHE_TTL_MS = int(os.getenv("AMENITY_CACHE_TTL_MS", "3600000"))  # 1 hour
PLACES_PROVIDER = os.getenv("PLACES_PROVIDER", "mock").lower()
GOOGLE_MAPS_API_KEY = os.getenv("GOOGLE_MAPS_API_KEY")
PLACES_REQUEST_TIMEOUT = float(os.getenv("PLACES_REQUEST_TIMEOUT", "10"))
MOCK_PLACES_SEED = os.getenv("MOCK_PLACES_SEED")

# Server
LOCAL_TIMEZONE = os.getenv("LOCAL_TIMEZONE", "Asia/Kolkata")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]
PING_MESSAGE = os.getenv("PING_MESSAGE", "ping")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))

API_VERSION = "1.0.0"


def get_mock_places_seed():
    """Seed for the synthetic amenity generator, None when not configured"""
    if MOCK_PLACES_SEED is None or MOCK_PLACES_SEED == "":
        return None
    return int(MOCK_PLACES_SEED)
