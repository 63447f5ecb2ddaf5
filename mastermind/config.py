"""
Single place to:
- Hold the default game settings (digit count, digit range, attempt limit)
- Validate settings with Pydantic before a session is built
- Read overrides from env / a local .env file

Env variables (all optional):
MASTERMIND_DIGIT_COUNT      -> digits per code (default 4)
MASTERMIND_DIGIT_MAX_VALUE  -> highest digit value (default 6)
MASTERMIND_MAX_GUESSES      -> attempt limit (default 10)
MASTERMIND_SEED             -> fixed seed, empty means random
MASTERMIND_SEED_SOURCE      -> "local" or "random_org"
MASTERMIND_LOG_LEVEL        -> logging level name (default WARNING)
"""

import logging
import os
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import InvalidConfiguration
from .types import SeedSource

DEFAULT_DIGIT_COUNT = 4
DEFAULT_DIGIT_MAX_VALUE = 6
DEFAULT_MAX_GUESSES = 10

ENV_PREFIX = "MASTERMIND_"


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and value.strip() == "":
        return None
    return value


class SessionConfig(BaseModel):
    # strict: True, "4" and 4.0 are not digit counts; env strings are parsed in load_config
    digit_count: int = Field(DEFAULT_DIGIT_COUNT, ge=1, strict=True, description="How many digits the secret has")
    digit_max_value: int = Field(DEFAULT_DIGIT_MAX_VALUE, ge=1, strict=True, description="Highest allowed digit (lowest is always 1)")
    max_guesses: int = Field(DEFAULT_MAX_GUESSES, ge=1, strict=True, description="How many guesses the player gets")
    seed: Optional[int] = Field(None, strict=True, description="Seed for a reproducible secret; None = fresh randomness")

    model_config = {"frozen": True}


class AppConfig(BaseModel):
    session: SessionConfig = Field(default_factory=SessionConfig)
    seed_source: SeedSource = Field("local", description="Where to get a seed when none is configured")
    log_level: str = Field("WARNING", description="Logging level name for the console app")

    model_config = {"frozen": True}

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, level: str) -> str:
        level = level.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level {level!r}.")
        return level

    def with_overrides(self, **values: Any) -> "AppConfig":
        """
        Copy with some fields replaced, run through the same validators.
        Raises InvalidConfiguration like load_config().
        """
        merged = {"session": self.session, "seed_source": self.seed_source, "log_level": self.log_level}
        merged.update(values)
        try:
            return AppConfig(**merged)
        except ValidationError as exc:
            raise InvalidConfiguration(_describe(exc)) from exc


def build_session_config(**values: Any) -> SessionConfig:
    """
    Validate raw settings into a SessionConfig.
    Pydantic errors come back out as InvalidConfiguration.
    """
    try:
        return SessionConfig(**values)
    except ValidationError as exc:
        raise InvalidConfiguration(_describe(exc)) from exc


def _env_int(field_name: str) -> Optional[int]:
    raw = _blank_to_none(os.getenv(ENV_PREFIX + field_name.upper()))
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        raise InvalidConfiguration(
            f"Invalid configuration: {field_name}: {raw!r} is not a whole number"
        ) from None


def load_config() -> AppConfig:
    # dev convenience; real env vars win over the .env file
    load_dotenv()

    session_values = {}
    for field_name in ("digit_count", "digit_max_value", "max_guesses", "seed"):
        value = _env_int(field_name)
        if value is not None:
            session_values[field_name] = value

    app_values: dict = {}
    seed_source = os.getenv(ENV_PREFIX + "SEED_SOURCE")
    if seed_source:
        app_values["seed_source"] = seed_source.strip().lower()
    log_level = os.getenv(ENV_PREFIX + "LOG_LEVEL")
    if log_level:
        app_values["log_level"] = log_level

    return AppConfig(session=build_session_config(**session_values)).with_overrides(**app_values)


def _describe(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        parts.append(f"{location}: {error['msg']}")
    return "Invalid configuration: " + "; ".join(parts)
