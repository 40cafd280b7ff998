from __future__ import annotations

"""Runtime helpers for working with environment-backed configuration."""


import os
from pathlib import Path
from typing import Optional

from .errors import ConfigurationError

_TRUE_VALUES = {"1", "true", "t", "yes", "y", "on"}
_FALSE_VALUES = {"0", "false", "f", "no", "n", "off"}

_DOTENV_CANDIDATES = (Path(".env"), Path.home() / ".env")
_JSON_ENV_CANDIDATES = (Path("config/runtime_env.json"), Path.home() / ".procattach_env.json")

_DEFAULT_VALUES: dict[str, str] | None = None


def _load_default_values() -> dict[str, str]:
    """Load configuration values from .env-style files or JSON defaults."""
    from .runtime_helpers import DotenvLoader, JsonConfigLoader

    global _DEFAULT_VALUES
    if _DEFAULT_VALUES is not None:
        return _DEFAULT_VALUES

    defaults: dict[str, str] = {}

    def _maybe_set(key: str, value: str) -> None:
        if key not in defaults:
            defaults[key] = value

    for path in _DOTENV_CANDIDATES:
        for key, value in DotenvLoader.load_from_file(path).items():
            _maybe_set(key, value)

    for path in _JSON_ENV_CANDIDATES:
        for key, value in JsonConfigLoader.load_from_file(path).items():
            _maybe_set(key, value)

    _DEFAULT_VALUES = defaults
    return defaults


def reset_default_values() -> None:
    """Forget cached file-backed defaults so the next lookup reloads them."""
    global _DEFAULT_VALUES
    _DEFAULT_VALUES = None


def _default_value(name: str) -> Optional[str]:
    """Return the default value for *name* if declared in config."""

    defaults = _load_default_values()
    return defaults.get(name)


def _normalize(value: str | None, *, strip: bool) -> str | None:
    if value is None:
        return None
    return value.strip() if strip else value


def env_str(
    name: str,
    or_value: str | None = None,
    *,
    required: bool = False,
    strip: bool = True,
    allow_blank: bool = False,
) -> str | None:
    """Fetch an environment variable as a string with validation."""

    value = _normalize(os.getenv(name), strip=strip)

    if value is None or (not allow_blank and value == ""):
        configured_default = _default_value(name)
        if configured_default is not None:
            value = _normalize(configured_default, strip=strip)

    if value is None or (not allow_blank and value == ""):
        if required:
            raise ConfigurationError.missing_value(name, "required environment variable")
        return or_value
    return value


def env_float(name: str, or_value: float | None = None, *, required: bool = False) -> float | None:
    """Fetch an environment variable and coerce it to ``float``."""

    raw = env_str(name, strip=True, allow_blank=False)
    if raw is None:
        if required and or_value is None:
            raise ConfigurationError.missing_value(name, "required environment variable")
        return or_value
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError.invalid_format(name, raw, "a float") from exc


def env_bool(name: str, or_value: bool | None = None, *, required: bool = False) -> bool | None:
    """Fetch an environment variable and coerce it to ``bool``."""

    raw = env_str(name, strip=True, allow_blank=False)
    if raw is None:
        if required and or_value is None:
            raise ConfigurationError.missing_value(name, "required environment variable")
        return or_value

    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Environment variable {name!r} must be a boolean (allowed: {_TRUE_VALUES | _FALSE_VALUES}, got {raw!r})")


def env_seconds(name: str, or_value: float | None = None, *, required: bool = False) -> float | None:
    """Fetch a positive duration in seconds."""

    value = env_float(name, or_value=or_value, required=required)
    if value is None:
        return None
    if value <= 0:
        raise ConfigurationError.invalid_value(name, value, "Durations must be positive")
    return value


__all__ = [
    "ConfigurationError",
    "env_bool",
    "env_float",
    "env_seconds",
    "env_str",
    "reset_default_values",
]
