import logging
import os

logger = logging.getLogger(__name__)

# Default configuration
DEFAULT_CONFIG = {
    "CONVERSION_RATE": "100",
    "PREVIEW_DELAY_MS": "150",
    "USE_ARABIC_NUMERALS": "1",
    "LOG_LEVEL": "INFO",
}

def setup_environment():
    """Set up environment variables if they don't exist."""
    for key, default_value in DEFAULT_CONFIG.items():
        if key not in os.environ:
            os.environ[key] = default_value

def _get_int(key):
    value = os.environ.get(key, DEFAULT_CONFIG[key])
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid {key}={value!r}, using {DEFAULT_CONFIG[key]}")
        return int(DEFAULT_CONFIG[key])

def get_conversion_rate():
    """Get how many old pounds make one new pound."""
    rate = _get_int("CONVERSION_RATE")
    if rate <= 0:
        logger.warning(f"CONVERSION_RATE must be positive, got {rate}")
        return int(DEFAULT_CONFIG["CONVERSION_RATE"])
    return rate

def get_preview_delay():
    """Get the delay in milliseconds before converting typed input."""
    return max(0, _get_int("PREVIEW_DELAY_MS"))

def use_arabic_numerals():
    """Whether numbers are shown with Arabic-Indic digits by default."""
    value = os.environ.get("USE_ARABIC_NUMERALS", DEFAULT_CONFIG["USE_ARABIC_NUMERALS"])
    return value.strip().lower() in ("1", "true", "yes", "on")

def get_log_level():
    """Get the logging level name from environment variables."""
    level = os.environ.get("LOG_LEVEL", DEFAULT_CONFIG["LOG_LEVEL"]).upper()
    if not isinstance(logging.getLevelName(level), int):
        return DEFAULT_CONFIG["LOG_LEVEL"]
    return level
