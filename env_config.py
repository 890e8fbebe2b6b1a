"""Load configuration from .env file. Used for config overrides instead of shell environment."""

import os
from pathlib import Path

from dotenv import load_dotenv

from phrase.schema import ConfigurationError

_PROJECT_ROOT = Path(__file__).resolve().parent

DEFAULT_CONFIG_PATH = _PROJECT_ROOT / "config" / "default.yaml"


def _load_dotenv() -> None:
    """Load .env from project root (existing environment variables win)."""
    load_dotenv(_PROJECT_ROOT / ".env")


def get_config_path() -> Path:
    """Return YAML config path from WEASEL_CONFIG in .env / os.environ, or the bundled default."""
    _load_dotenv()
    path = os.environ.get("WEASEL_CONFIG")
    return Path(path) if path else DEFAULT_CONFIG_PATH


def get_default_seed() -> int | None:
    """Return WEASEL_SEED as an int, or None when unset or blank."""
    _load_dotenv()
    value = os.environ.get("WEASEL_SEED", "").strip()
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError([f"WEASEL_SEED must be an integer, not {value!r}"]) from None
