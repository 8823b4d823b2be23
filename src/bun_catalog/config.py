# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Runtime settings resolved from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .package_manager import DEFAULT_EXECUTABLE
from .printer import MAX_LINE_WIDTH, MIN_LINE_WIDTH

PACKAGE_MANAGER_ENV: Final[str] = "BUN_CATALOG_PACKAGE_MANAGER"
TIMEOUT_ENV: Final[str] = "BUN_CATALOG_TIMEOUT"


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class CatalogSettings(BaseModel):
    """Settings shared by every command invocation."""

    model_config = ConfigDict(frozen=True)

    package_manager: str = Field(default=DEFAULT_EXECUTABLE, min_length=1)
    command_timeout: float | None = Field(default=None, gt=0)
    min_width: int = Field(default=MIN_LINE_WIDTH, gt=0)
    max_width: int = Field(default=MAX_LINE_WIDTH, gt=0)
    fallback_width: int = Field(default=MAX_LINE_WIDTH, gt=0)

    @model_validator(mode="after")
    def _check_width_bounds(self) -> CatalogSettings:
        if self.min_width > self.max_width:
            raise ValueError("min_width must not exceed max_width")
        return self


def load_settings(env: Mapping[str, str] | None = None) -> CatalogSettings:
    """Build :class:`CatalogSettings` from ``env`` (defaults to :data:`os.environ`).

    Raises:
        ConfigError: If an environment override holds an invalid value.
    """

    environment = os.environ if env is None else env
    overrides: dict[str, object] = {}
    if package_manager := environment.get(PACKAGE_MANAGER_ENV, "").strip():
        overrides["package_manager"] = package_manager
    if timeout := environment.get(TIMEOUT_ENV, "").strip():
        overrides["command_timeout"] = timeout
    try:
        return CatalogSettings.model_validate(overrides)
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors(include_url=False)
        )
        raise ConfigError(f"Invalid environment configuration: {details}") from exc


__all__ = ["CatalogSettings", "ConfigError", "load_settings"]
