"""
Paths and centralized configuration.
All resolution relative to the backend directory.
"""
import os
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

# Repo root: backend/filtrafood/config.py -> parent=filtrafood, parent.parent=backend, parent.parent.parent=repo
_BACKEND_DIR = Path(__file__).resolve().parent.parent
_REPO_ROOT = _BACKEND_DIR.parent

# --- Data paths ---
def get_filters_dir() -> Path:
    override = os.environ.get("FILTERS_DIR", "").strip()
    if override:
        return Path(override)
    return _REPO_ROOT / "data" / "filters"

# --- Open Food Facts (lazy read from env) ---
def get_open_food_facts_base_url() -> str:
    url = os.environ.get("OFF_BASE_URL", "https://world.openfoodfacts.org/api/v2/product")
    return url.rstrip("/")

def get_open_food_facts_user_agent() -> str:
    return os.environ.get("OFF_USER_AGENT", "FiltraFood/1.0 (dietary filter checker)")

def get_ingredient_locales() -> list[str]:
    """Locales tried for ingredients_text_<locale>, in priority order."""
    raw = os.environ.get("INGREDIENT_LOCALES", "fr,en")
    return [loc.strip().lower() for loc in raw.split(",") if loc.strip()]

# Outbound timeout (seconds per attempt) and attempt count
OFF_TIMEOUT = float(os.environ.get("OFF_TIMEOUT", "10"))
OFF_MAX_RETRIES = int(os.environ.get("OFF_MAX_RETRIES", "2"))

# --- Server ---
def get_host() -> str:
    return os.environ.get("HOST", "0.0.0.0")

def get_port() -> int:
    return int(os.environ.get("PORT", "3000"))

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

def _raw_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper()

def get_log_level() -> str:
    """LOG_LEVEL if it names a logging level, INFO otherwise."""
    level = _raw_log_level()
    return level if level in _LOG_LEVELS else "INFO"

# --- Startup logging ---
def log_config() -> None:
    if _raw_log_level() not in _LOG_LEVELS:
        logger.warning("CONFIG: invalid LOG_LEVEL=%r, using INFO", os.environ.get("LOG_LEVEL"))
    filters_dir = get_filters_dir()
    logger.info(
        "CONFIG: filters_dir=%s exists=%s off_base_url=%s off_timeout=%.1fs off_max_retries=%d "
        "ingredient_locales=%s port=%d",
        filters_dir, filters_dir.is_dir(),
        get_open_food_facts_base_url(), OFF_TIMEOUT, OFF_MAX_RETRIES,
        ",".join(get_ingredient_locales()), get_port(),
    )
