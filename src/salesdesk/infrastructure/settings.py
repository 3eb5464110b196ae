import os
from pathlib import Path

from dotenv import load_dotenv

from salesdesk.domain.model.picking import PickTimeConfig

# --- Base Directory ---
# Relative paths and .env resolve against the working directory.
BASE_DIR = Path.cwd()

# --- Load Environment Variables ---
load_dotenv(BASE_DIR / ".env")


class ConfigurationError(Exception):
    """An environment setting holds a value that cannot be used."""


def _path_env(name: str, default: str, base_dir: Path = BASE_DIR) -> Path:
    # absolute values win over base_dir
    return base_dir / os.getenv(name, default)


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a whole number, got {raw!r}") from None


# --- Path Configuration ---
DATA_DIR = _path_env("SALESDESK_DATA_DIR", "data")
LOG_DIR = _path_env("SALESDESK_LOG_DIR", "logs")

# --- Logging ---
LOG_LEVEL = os.getenv("SALESDESK_LOG_LEVEL", "INFO").upper()

# --- Business Defaults ---
CURRENCY = os.getenv("SALESDESK_CURRENCY", "USD")


# Numeric settings are parsed on use and raise ConfigurationError when invalid.
def quotation_valid_days() -> int:
    days = _int_env("SALESDESK_QUOTATION_VALID_DAYS", 30)
    if days < 1:
        raise ConfigurationError(
            f"SALESDESK_QUOTATION_VALID_DAYS must be at least 1, got {days}"
        )
    return days


def pick_time() -> PickTimeConfig:
    """Picking time estimate constants."""
    base = _int_env("SALESDESK_PICK_BASE_SECONDS", 60)
    per_unit = _int_env("SALESDESK_PICK_UNIT_SECONDS", 5)
    if base < 0 or per_unit < 0:
        raise ConfigurationError("SALESDESK_PICK_* seconds cannot be negative")
    return PickTimeConfig(base_seconds_per_item=base, seconds_per_additional_unit=per_unit)
