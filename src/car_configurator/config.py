"""
Module: config

Purpose:
    Application configuration for the console front-end. Immutable
    configuration with validation on construction.

Key Classes:
    - AppConfig: Output directory, default format, logging level

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - cli: Console entry point
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

ENV_OUTPUT_DIR = "CAR_CONFIGURATOR_OUTPUT_DIR"
ENV_FORMAT = "CAR_CONFIGURATOR_FORMAT"
ENV_LOG_LEVEL = "CAR_CONFIGURATOR_LOG_LEVEL"


@dataclass(frozen=True)
class AppConfig:
    """
    Configuration for the console app (immutable).

    Attributes:
        output_dir: Directory generated documents are written to
        default_format: Document format used when none is given
        log_level: Logging level name
        preview: Whether to print the document preview

    Example:
        >>> config = AppConfig(default_format="HTML")
        >>> config.default_format
        'html'
    """

    output_dir: Path = Path("output")
    default_format: str = "pdf"
    log_level: str = "INFO"
    preview: bool = True

    def __post_init__(self) -> None:
        """Normalise and validate configuration on construction."""
        object.__setattr__(self, "output_dir", Path(self.output_dir))
        object.__setattr__(self, "default_format", (self.default_format or "").strip().lower())
        object.__setattr__(self, "log_level", (self.log_level or "").strip().upper())

        if not self.default_format:
            raise ValueError("default_format must not be empty")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}: {self.log_level!r}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> AppConfig:
        """
        Build configuration from environment variables, falling back to defaults.

        Reads CAR_CONFIGURATOR_OUTPUT_DIR, CAR_CONFIGURATOR_FORMAT and
        CAR_CONFIGURATOR_LOG_LEVEL.
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            output_dir=Path(env.get(ENV_OUTPUT_DIR, defaults.output_dir)),
            default_format=env.get(ENV_FORMAT, defaults.default_format),
            log_level=env.get(ENV_LOG_LEVEL, defaults.log_level),
        )
