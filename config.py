import os
from typing import Any, Dict

from dotenv import load_dotenv

from errors import ConfigurationError

load_dotenv()  # Load .env file if present

DEFAULT_GEMINI_MODEL = "gemini-2.5-pro"
API_KEY_NAMES = ("GEMINI_API_KEY", "API_KEY")


def get_api_key(key_names: tuple[str, ...] = API_KEY_NAMES) -> str:
    """Get the Gemini API key from environment, with helpful error message.

    Read on every call so a key added to the environment after startup is
    picked up by the next generation request.
    """
    for name in key_names:
        key = os.getenv(name)
        if key:
            return key
    primary = key_names[0]
    raise ConfigurationError(
        f"{primary} environment variable not set. Set it in environment or create a .env file with:\n"
        f"{primary}=your_key_here"
    )


def has_api_key() -> bool:
    return any(os.getenv(name) for name in API_KEY_NAMES)


def load_settings() -> Dict[str, Any]:
    """Non-secret runtime settings resolved from the environment."""
    return {
        "gemini_model": os.getenv("GEMINI_MODEL", DEFAULT_GEMINI_MODEL),
        "port": int(os.getenv("PORT", 5000)),
        "secret_key": os.getenv("SECRET_KEY", "dev-resume-builder"),
        "debug": os.getenv("FLASK_DEBUG", "false").lower() == "true",
    }
