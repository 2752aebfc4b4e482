"""Utility helpers for utilkit."""

from .env import load_env_file
from .io import (
    append_lines,
    delete_file,
    ensure_dir,
    exists,
    list_files,
    read_all,
    read_bytes,
    read_lines,
    write_all,
    write_bytes,
)
from .lists import unique_sample
from .logging import configure_logging
from .randomness import RandomNumberGenerator, seed_everything

__all__ = [
    "RandomNumberGenerator",
    "append_lines",
    "configure_logging",
    "delete_file",
    "ensure_dir",
    "exists",
    "list_files",
    "load_env_file",
    "read_all",
    "read_bytes",
    "read_lines",
    "seed_everything",
    "unique_sample",
    "write_all",
    "write_bytes",
]
