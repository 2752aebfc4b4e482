"""
General IO helpers for file system operations.

Every helper here absorbs ``OSError``: reads fall back to an empty result and
writes report success as a boolean. Failures are logged at WARNING level by
the module logger.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Set

LOGGER = logging.getLogger(__name__)


def ensure_dir(path: Path) -> Path:
    """Create a directory if it does not already exist."""

    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def exists(path: Path | str) -> bool:
    """Return whether ``path`` points at an existing file or directory."""

    try:
        return Path(path).exists()
    except OSError as exc:
        LOGGER.warning("Could not inspect %s: %s", path, exc)
        return False


def read_all(path: Path | str) -> str:
    """Read the full text of a file, or an empty string on failure."""

    try:
        with Path(path).open("r", encoding="utf-8", newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.warning("Could not read %s: %s", path, exc)
        return ""


def read_lines(path: Path | str) -> List[str]:
    """Read a file line by line without line terminators."""

    try:
        with Path(path).open("r", encoding="utf-8") as handle:
            return handle.read().splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.warning("Could not read %s: %s", path, exc)
        return []


def read_bytes(path: Path | str) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        LOGGER.warning("Could not read %s: %s", path, exc)
        return b""


def write_all(path: Path | str, content: str) -> bool:
    """Replace the content of a file with ``content``."""

    path = Path(path)
    try:
        ensure_dir(path.parent)
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(content)
    except OSError as exc:
        LOGGER.warning("Could not write %s: %s", path, exc)
        return False
    return True


def write_bytes(path: Path | str, data: bytes) -> bool:
    path = Path(path)
    try:
        ensure_dir(path.parent)
        path.write_bytes(data)
    except OSError as exc:
        LOGGER.warning("Could not write %s: %s", path, exc)
        return False
    return True


def append_lines(path: Path | str, *lines: str) -> bool:
    """Append each line to the file, terminating every one with a newline."""

    path = Path(path)
    try:
        with path.open("a", encoding="utf-8", newline="") as handle:
            for line in lines:
                handle.write(line)
                handle.write("\n")
    except OSError as exc:
        LOGGER.warning("Could not append to %s: %s", path, exc)
        return False
    return True


def delete_file(path: Path | str) -> bool:
    """Delete a file, returning whether it is gone afterwards."""

    path = Path(path)
    try:
        path.unlink()
    except FileNotFoundError:
        return True
    except OSError as exc:
        LOGGER.warning("Could not delete %s: %s", path, exc)
        return False
    return True


def _normalize_suffixes(suffixes: Optional[Iterable[str]]) -> Set[str]:
    if not suffixes:
        return set()
    return {suffix.lower().lstrip(".") for suffix in suffixes}


def list_files(
    directory: Path | str,
    suffixes: Iterable[str] | None = None,
    recursive: bool = False,
) -> list[Path]:
    """
    List the files inside ``directory``.

    Parameters
    ----------
    directory:
        Directory to list. A missing or unreadable directory yields no files.
    suffixes:
        File extensions to keep, with or without the leading dot. Matching is
        case-insensitive. ``None`` or an empty collection keeps every file.
    recursive:
        Descend into subdirectories. Directories themselves are never listed.
    """

    wanted = _normalize_suffixes(suffixes)
    pending = [Path(directory)]
    files: list[Path] = []

    while pending:
        current = pending.pop()
        try:
            entries = sorted(current.iterdir())
        except OSError as exc:
            LOGGER.debug("Skipping unreadable directory %s: %s", current, exc)
            continue

        for entry in entries:
            if entry.is_dir():
                if recursive:
                    pending.append(entry)
            elif not wanted or entry.suffix.lower().lstrip(".") in wanted:
                files.append(entry)

    return files


__all__ = [
    "append_lines",
    "delete_file",
    "ensure_dir",
    "exists",
    "list_files",
    "read_all",
    "read_bytes",
    "read_lines",
    "write_all",
    "write_bytes",
]
