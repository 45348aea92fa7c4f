"""Configuration management for the location resolution core."""
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Base paths
PROJECT_ROOT = Path(__file__).parent.parent.parent
_gazetteer_path = os.getenv("GAZETTEER_PATH")
GAZETTEER_PATH: Optional[Path] = Path(_gazetteer_path) if _gazetteer_path else None


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# Fuzzy matching thresholds (empirical; kept configurable for product review)
FUZZY_SHORT_INPUT_LENGTH: int = int(os.getenv("FUZZY_SHORT_INPUT_LENGTH", "5"))
FUZZY_SHORT_MAX_DISTANCE: int = int(os.getenv("FUZZY_SHORT_MAX_DISTANCE", "2"))
FUZZY_LONG_MAX_DISTANCE: int = int(os.getenv("FUZZY_LONG_MAX_DISTANCE", "3"))

# Country-level view wins when a name is both a country and a city
PREFER_COUNTRIES: bool = _env_bool("PREFER_COUNTRIES", "true")

# Alias channel (alternate spellings, Arabic names) without an explicit language
ALIASES_ALWAYS_ON: bool = _env_bool("ALIASES_ALWAYS_ON", "true")

# Default zoom levels
COUNTRY_ZOOM: int = int(os.getenv("COUNTRY_ZOOM", "6"))
CITY_ZOOM: int = int(os.getenv("CITY_ZOOM", "12"))
COORDINATE_ZOOM: int = int(os.getenv("COORDINATE_ZOOM", "10"))

# Viewport settings
VIEWPORT_EPSILON: float = float(os.getenv("VIEWPORT_EPSILON", "1e-4"))
ANIMATION_DURATION_SECONDS: float = float(os.getenv("ANIMATION_DURATION_SECONDS", "1.5"))
WORLD_LAT: float = float(os.getenv("WORLD_LAT", "20"))
WORLD_LNG: float = float(os.getenv("WORLD_LNG", "0"))
WORLD_ZOOM: int = int(os.getenv("WORLD_ZOOM", "2"))

# Suggestions
SUGGESTION_LIMIT: int = int(os.getenv("SUGGESTION_LIMIT", "8"))
SUGGESTION_MIN_LENGTH: int = 2

# Logging
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# Supported alias languages
LANGUAGES = {
    "en": "English",
    "ar": "Arabic",
}
