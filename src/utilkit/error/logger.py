"""
Append-only error and message log backed by a plain text file.

The logger keeps the log in memory and only touches the disk on
:meth:`ErrorLogger.flush`. Every line starts with a timestamp rendered by the
line prefix of the active :class:`TextTemplate`. Exceptions are written as
their type name, message and stack frames, followed by their causes; frames a
cause shares with the exception around it are collapsed into a shortener line
such as ``... 3 more``.

Clearing the log and flushing afterwards deletes the backing file, so the
file may legitimately be absent.

Public operations never raise on I/O problems: loading falls back to an empty
log and :meth:`ErrorLogger.flush` reports failure as ``False``.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional, Union

from utilkit.error.records import ExceptionRecord
from utilkit.error.template import TextTemplate
from utilkit.utils.io import delete_file, exists, read_all, write_all

LOGGER = logging.getLogger(__name__)

LOG_FILE_NAME = "log.txt"

_LINE_BREAK = re.compile(r"\r?\n")

Clock = Callable[[], datetime]


def local_now() -> datetime:
    """Current wall-clock time in the local timezone."""

    return datetime.now().astimezone()


def split_lines(text: str) -> List[str]:
    """
    Split on ``\\n`` or ``\\r\\n`` and drop trailing empty segments.

    Text without any line break is returned as a single segment, even when it
    is empty.
    """

    lines = _LINE_BREAK.split(text)
    if len(lines) == 1:
        return lines
    while lines and lines[-1] == "":
        lines.pop()
    return lines


class ErrorLogger:
    """
    In-memory log of messages and exceptions with a lazily written file.

    The logger tracks whether its content changed since the last flush, so
    :meth:`flush` without intervening activity does not touch the disk. It is
    not safe for concurrent use; serialize access externally.
    """

    def __init__(
        self,
        directory: Union[Path, str],
        template: Optional[TextTemplate] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self._log_file_path = Path(directory) / LOG_FILE_NAME
        self._template = template if template is not None else TextTemplate()
        self._clock: Clock = clock or local_now
        self._dirty = False

        if exists(self._log_file_path):
            self._content = read_all(self._log_file_path)
            LOGGER.debug(
                "Loaded %d characters of log from %s",
                len(self._content),
                self._log_file_path,
            )
        else:
            self._content = ""

    @property
    def log_file_path(self) -> Path:
        return self._log_file_path

    def get_log_file_path(self) -> Path:
        return self._log_file_path

    @property
    def content(self) -> str:
        return self._content

    @property
    def dirty(self) -> bool:
        return self._dirty

    @property
    def template(self) -> TextTemplate:
        return self._template

    def set_template(self, template: Optional[TextTemplate]) -> None:
        """Use ``template`` for future entries; ``None`` is ignored."""

        if template is not None:
            self._template = template

    def _prefix(self) -> str:
        return self._template.line_prefix(self._clock())

    def log_message(self, text: str) -> None:
        """Append ``text``, one timestamped line per line of the message."""

        parts = []
        for line in split_lines(text):
            parts.append(self._prefix())
            parts.append(line)
            parts.append("\n")

        self._content += "".join(parts)
        self._dirty = True

    def log_exception(self, exc: Union[ExceptionRecord, BaseException]) -> None:
        """
        Append an exception: its type name and message, its stack frames and
        finally its chain of causes.
        """

        record = exc if isinstance(exc, ExceptionRecord) else ExceptionRecord.from_exception(exc)

        parts = [self._prefix(), record.type_name]
        self._append_message(record, parts)

        for frame in record.frames:
            parts.append("\n")
            parts.append(self._prefix())
            parts.append(self._template.frame(frame))

        parts.append("\n")

        if record.cause is not None:
            parts.append(self._format_cause(record.cause, len(record.frames)))
            parts.append("\n")

        self._content += "".join(parts)
        self._dirty = True

    def _append_message(self, record: ExceptionRecord, parts: List[str]) -> None:
        message = record.message
        if message is None or not message.strip():
            return

        first, *rest = split_lines(message)
        parts.append(": ")
        parts.append(first)

        for line in rest:
            parts.append("\n")
            parts.append(self._prefix())
            parts.append(self._template.message(line))

    def _format_cause(self, cause: ExceptionRecord, already_logged: int) -> str:
        """
        Render ``cause`` and, recursively, the causes below it.

        ``already_logged`` is the number of frames of the enclosing exception.
        Only the leading frames of the cause that are not shared with it are
        written; the rest is summarized by the shortener.
        """

        parts = [self._prefix(), self._template.cause(cause.type_name)]
        self._append_message(cause, parts)

        for frame in cause.frames[: max(len(cause.frames) - already_logged, 0)]:
            parts.append("\n")
            parts.append(self._prefix())
            parts.append(self._template.frame(frame))

        parts.append("\n")
        parts.append(self._prefix())
        parts.append(self._template.shortener(already_logged))

        if cause.cause is not None:
            parts.append("\n")
            parts.append(self._format_cause(cause.cause, len(cause.frames)))

        return "".join(parts)

    def clear(self) -> None:
        """Empty the log. Flush afterwards to delete the backing file."""

        self._content = ""
        self._dirty = True

    def flush(self) -> bool:
        """
        Synchronize the backing file with the in-memory log.

        Does nothing unless the log changed since the last successful flush.
        A non-empty log overwrites the file; an empty log deletes it. Returns
        ``False`` when writing or deleting failed, in which case the log stays
        marked as changed.
        """

        if not self._dirty:
            return True

        if self._content:
            if not write_all(self._log_file_path, self._content):
                return False
            LOGGER.debug("Wrote log to %s", self._log_file_path)
        elif exists(self._log_file_path):
            if not delete_file(self._log_file_path):
                return False
            LOGGER.debug("Deleted empty log %s", self._log_file_path)

        self._dirty = False
        return True


__all__ = ["ErrorLogger", "LOG_FILE_NAME", "local_now", "split_lines"]
