import logging
import os

__all__ = [
    "LOG_LEVEL",
    "SHOW_CUSTOM_DRIP",
    "DEFAULT_COFFEE_G",
    "DEFAULT_RATIO",
    "env_flag",
    "env_float",
    "env_log_level",
]

_TRUE_VALUES = ("1", "true", "yes", "on")


def env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUE_VALUES


def env_float(name: str, default: float) -> float:
    """
    Read a positive number from the environment, falling back to default.
    """
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e
    if value <= 0:
        raise ValueError(f"{name} must be > 0, got {raw!r}")
    return value


def env_log_level(name: str, default: str = "INFO") -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"{name} must be a logging level name, got {raw!r}")
    return level


LOG_LEVEL = env_log_level("KRAFTY_LOG_LEVEL", "INFO")

# Custom Drip ships in one variant of the app only
SHOW_CUSTOM_DRIP = env_flag("KRAFTY_SHOW_CUSTOM_DRIP", False)

# Recipe page starting values; water is derived from these
DEFAULT_COFFEE_G = env_float("KRAFTY_DEFAULT_COFFEE_G", 15.0)
DEFAULT_RATIO = env_float("KRAFTY_DEFAULT_RATIO", 16.0)
