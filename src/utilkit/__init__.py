"""Personal toolkit of small utility helpers and a plain text error logger."""

from utilkit.error import ErrorLogger, ExceptionRecord, TextTemplate
from utilkit.utils import RandomNumberGenerator, list_files, unique_sample

__all__ = [
    "ErrorLogger",
    "ExceptionRecord",
    "RandomNumberGenerator",
    "TextTemplate",
    "list_files",
    "unique_sample",
]

__version__ = "0.1.0"
