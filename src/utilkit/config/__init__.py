"""Configuration loading utilities for utilkit."""

from .loader import load_config
from .schema import (
    ErrorLogConfig,
    LoggingConfig,
    RandomConfig,
    TemplateConfig,
    ToolkitConfig,
)

__all__ = [
    "load_config",
    "ErrorLogConfig",
    "LoggingConfig",
    "RandomConfig",
    "TemplateConfig",
    "ToolkitConfig",
]
