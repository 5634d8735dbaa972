"""Composite repository configuration using pydantic-settings."""

import logging
from functools import cached_property
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .fanout import FanOutStrategy


class CompositeConfiguration(BaseSettings):
    """Settings for how a composite repository dispatches to its members.

    All settings can be configured via environment variables with the
    DEPOT_COMPOSITE_ prefix. For example:
    - DEPOT_COMPOSITE_FAN_OUT=concurrent
    - DEPOT_COMPOSITE_LOG_LEVEL=INFO

    Attributes:
        fan_out: "sequential" visits members one at a time in insertion
            order. "concurrent" queries all members at once and merges
            the results in insertion order afterwards.
        log_level: Level used for the per-operation diagnostic records.

    Example:
        >>> config = CompositeConfiguration(fan_out="concurrent")
        >>> repo = CompositeRepository([vcs_repo, index_repo], config=config)
    """

    fan_out: Literal["sequential", "concurrent"] = "sequential"
    log_level: str = "DEBUG"

    model_config = SettingsConfigDict(env_prefix="DEPOT_COMPOSITE_")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if not isinstance(getattr(logging, value, None), int):
            raise ValueError(f"Unknown log level: {value}")
        return value

    @cached_property
    def strategy(self) -> FanOutStrategy:
        """The fan-out strategy selected by ``fan_out``."""
        if self.fan_out == "concurrent":
            return FanOutStrategy.concurrent()
        return FanOutStrategy.sequential()

    @property
    def level(self) -> int:
        """Numeric value of ``log_level``."""
        return getattr(logging, self.log_level)
