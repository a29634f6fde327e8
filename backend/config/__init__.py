import logging

from .settings import Settings
from .constants import (
    LLM_CONFIG,
    INPUT_CONFIG,
    HISTORY_CONFIG,
    GAUGE_CONFIG,
    MESSAGES,
    VERDICT_STYLES,
    NEUTRAL_VERDICT_STYLE,
    BIAS_TONES,
)

settings = Settings()

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("veritas")

REQUIRED_KEYS = ["GEMINI_API_KEY"]

def check_api_keys_on_startup():
    """Check for required API keys on startup."""
    missing_keys = [key_name for key_name in REQUIRED_KEYS if not getattr(settings, key_name, None)]

    if missing_keys:
        logger.warning(f"Missing API keys: {', '.join(missing_keys)}. Analysis requests will fail.")
    else:
        logger.info("All required API keys are configured.")

__all__ = [
    "logger",
    "settings",
    "Settings",
    "check_api_keys_on_startup",
    "LLM_CONFIG",
    "INPUT_CONFIG",
    "HISTORY_CONFIG",
    "GAUGE_CONFIG",
    "MESSAGES",
    "VERDICT_STYLES",
    "NEUTRAL_VERDICT_STYLE",
    "BIAS_TONES",
]
