"""
Runtime configuration read from environment variables (and a local .env file).

Entry points build one Settings instance at startup and pass its values into
the adapters and use cases; nothing below the infrastructure layer reads the
environment.
"""

import logging
import os
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "QUOTE_TRACKER_"


class Settings(BaseModel):
    symbols: str = "AAPL,MSFT,UBER,GOOG"
    sma_window: int = Field(default=30, ge=1)
    interval: str = "1d"
    workers: int = Field(default=1, ge=1)
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v!r}")
        return level

    @field_validator("interval")
    @classmethod
    def validate_interval(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("interval must be a non-empty string")
        return v.strip()

    @property
    def tickers(self) -> list[str]:
        return split_symbols(self.symbols)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from QUOTE_TRACKER_* variables.

        When *environ* is omitted, a .env file found from the working directory
        is loaded first and os.environ is used.

        Raises:
            pydantic.ValidationError: if a variable holds an invalid value.
        """
        if environ is None:
            load_dotenv(find_dotenv(usecwd=True))
            environ = os.environ
        values = {
            name: environ[ENV_PREFIX + name.upper()]
            for name in cls.model_fields
            if ENV_PREFIX + name.upper() in environ
        }
        return cls(**values)


def split_symbols(symbols: str) -> list[str]:
    """Split a comma-separated symbol list, dropping blank entries."""
    return [s.strip() for s in symbols.split(",") if s.strip()]
