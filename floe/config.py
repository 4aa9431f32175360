"""
Runtime settings read from the environment.

Environment Variables:
    FLOE_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL - default: WARNING
    FLOE_LOG_FORMAT: json, text - default: json
    FLOE_STRICT_TURNS: true/false - fail on unrecognized turns - default: false
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("json", "text")

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env_bool(env: Mapping[str, str], key: str, default: bool) -> bool:
    val = env.get(key)
    if not val:
        return default
    val = val.strip().lower()
    if val in _TRUE:
        return True
    if val in _FALSE:
        return False
    return default


def _env_choice(env: Mapping[str, str], key: str, choices, default: str, upper: bool) -> str:
    val = env.get(key)
    if not val:
        return default
    val = val.strip().upper() if upper else val.strip().lower()
    return val if val in choices else default


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    log_format: str = "json"
    strict_turns: bool = False

    @staticmethod
    def from_env(env: Optional[Mapping[str, str]] = None) -> "Settings":
        """Read settings; malformed values fall back to defaults."""
        env = os.environ if env is None else env
        return Settings(
            log_level=_env_choice(env, "FLOE_LOG_LEVEL", LOG_LEVELS, "WARNING", upper=True),
            log_format=_env_choice(env, "FLOE_LOG_FORMAT", LOG_FORMATS, "json", upper=False),
            strict_turns=_env_bool(env, "FLOE_STRICT_TURNS", False),
        )
