"""Generator configuration using Pydantic Settings.

Values can be provided via environment variables or fall back to the
defaults below. Workers that must produce ids into the same data space
share ``alphabet``, ``seed`` and ``epoch`` and differ in ``worker``.

Environment variable prefix: ``SHORTID_`` (e.g. ``SHORTID_WORKER``).
"""

from datetime import datetime, timezone
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from shortid.alphabet import DEFAULT_ABC


class ShortidSettings(BaseSettings):
    """Runtime generator settings.

    Attributes map directly to environment variables using the ``SHORTID_``
    prefix (case-insensitive). For example, ``worker`` <- ``SHORTID_WORKER``.
    """

    worker: int = Field(
        default=0,
        ge=0,
        le=31,
        description="Worker id, unique per process generating into the same data space",
    )
    seed: int = Field(
        default=1,
        ge=1,
        description="Seed used to shuffle the alphabet, identical across workers",
    )
    alphabet: str = Field(
        default=DEFAULT_ABC,
        min_length=64,
        max_length=64,
        description="64 unique symbols the ids are composed of",
    )
    normalize_alphabet: bool = Field(
        default=False,
        description="Sort the alphabet before shuffling",
    )  # fmt: skip
    epoch: datetime = Field(
        default=datetime(2016, 1, 1, tzinfo=timezone.utc),
        description="Beginning of millisecond counting; ids can be generated for 34 years after it",
    )
    log_level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Log level",
    )  # fmt: skip

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str | None) -> str:
        """Normalize and validate log level."""
        if v is None:
            return "INFO"

        v_upper = str(v).upper()

        allowed = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR"}
        if v_upper not in allowed:
            raise ValueError(f"Invalid log level: {v}. Must be one of: {', '.join(sorted(allowed))}")

        return v_upper

    model_config = SettingsConfigDict(
        env_prefix="SHORTID_",
        case_sensitive=False,
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
    )


@lru_cache
def get_settings() -> ShortidSettings:
    """Return the cached ``ShortidSettings`` instance.

    The first invocation reads environment variables / .env file; subsequent
    calls reuse the same object.
    """

    return ShortidSettings()


__all__ = ["ShortidSettings", "get_settings"]
