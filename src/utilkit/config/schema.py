"""
Configuration schema definitions for utilkit.

Defines Pydantic models for each configuration section and the top-level
toolkit configuration. Every field has a default, so an empty document is a
valid configuration.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from utilkit.error.template import (
    DEFAULT_CAUSE_TEMPLATE,
    DEFAULT_FRAME_TEMPLATE,
    DEFAULT_LINE_PREFIX_TEMPLATE,
    DEFAULT_MESSAGE_TEMPLATE,
    DEFAULT_SHORTENER_TEMPLATE,
    TextTemplate,
)


class LoggingConfig(BaseModel):
    """Diagnostic logging settings for the toolkit itself."""

    level: str = Field("INFO")
    log_dir: Optional[Path] = Field(
        None, description="Directory for the diagnostic log file."
    )
    log_file: Optional[str] = Field(
        None, description="Diagnostic log file name; console only when unset."
    )

    @field_validator("level")
    def validate_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"logging.level must be a logging level name, got {value!r}.")
        return level


class TemplateConfig(BaseModel):
    """Templates used to render error log entries."""

    line_prefix: str = Field(
        DEFAULT_LINE_PREFIX_TEMPLATE,
        description="strftime pattern written at the start of every line.",
    )
    cause: str = Field(DEFAULT_CAUSE_TEMPLATE, description="Placeholder: {cause}.")
    message: str = Field(
        DEFAULT_MESSAGE_TEMPLATE, description="Placeholder: {message}."
    )
    frame: str = Field(DEFAULT_FRAME_TEMPLATE, description="Placeholder: {stacktrace}.")
    shortener: str = Field(
        DEFAULT_SHORTENER_TEMPLATE, description="Placeholder: {value}."
    )

    def build(self) -> TextTemplate:
        return TextTemplate(
            cause_template=self.cause,
            message_template=self.message,
            frame_template=self.frame,
            shortener_template=self.shortener,
            line_prefix_template=self.line_prefix,
        )


class ErrorLogConfig(BaseModel):
    """Location and rendering of the error log."""

    log_dir: Path = Field(Path("."), description="Directory holding log.txt.")
    template: TemplateConfig = Field(default_factory=TemplateConfig)


class RandomConfig(BaseModel):
    """Random number generation settings."""

    seed: Optional[int] = Field(
        None, ge=0, description="Seed for reproducible draws; random when unset."
    )


class ToolkitConfig(BaseModel):
    """Top-level configuration object."""

    environment: str = Field(
        "local", description="Configuration environment identifier."
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    error_log: ErrorLogConfig = Field(default_factory=ErrorLogConfig)
    random: RandomConfig = Field(default_factory=RandomConfig)
    metadata: Dict[str, Any] = Field(default_factory=dict)
