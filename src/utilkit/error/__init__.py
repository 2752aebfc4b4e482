"""Error and message logging to a plain text file."""

from .logger import LOG_FILE_NAME, ErrorLogger
from .records import ExceptionRecord
from .template import TextTemplate

__all__ = ["ErrorLogger", "ExceptionRecord", "LOG_FILE_NAME", "TextTemplate"]
