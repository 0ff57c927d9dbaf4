"""Configuration loading for the EDTF command line and HTTP service."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_MAX_INPUT_LENGTH = 1024
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class EdtfConfig:
    log_level: str
    max_input_length: int
    allowed_origins: tuple[str, ...]

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)

    @property
    def cors_origins(self) -> list[str]:
        # No configured origins means the service is open to any caller.
        return list(self.allowed_origins) or ["*"]


def _parse_int(value: str | None, default: int) -> int:
    if value is None or not value.strip():
        return default
    return int(value)


def _parse_origins(value: str | None) -> tuple[str, ...]:
    if not value:
        return tuple()
    return tuple(origin.strip() for origin in value.split(",") if origin.strip())


def load_config() -> EdtfConfig:
    """Load configuration from environment variables."""
    log_level = os.getenv("EDTF_LOG_LEVEL", _DEFAULT_LOG_LEVEL).strip().upper()
    if log_level not in _LOG_LEVELS:
        log_level = _DEFAULT_LOG_LEVEL

    max_input_length = _parse_int(os.getenv("EDTF_MAX_INPUT_LENGTH"), _DEFAULT_MAX_INPUT_LENGTH)
    if max_input_length <= 0:
        raise ValueError("EDTF_MAX_INPUT_LENGTH must be positive")

    return EdtfConfig(
        log_level=log_level,
        max_input_length=max_input_length,
        allowed_origins=_parse_origins(os.getenv("EDTF_ALLOWED_ORIGINS")),
    )
