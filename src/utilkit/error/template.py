"""
Text templates controlling how :class:`ErrorLogger` renders entries.

A template holds five format strings. The line prefix is a ``strftime``
pattern applied to the current time; the other four contain one placeholder
each, replaced verbatim. Placeholders are not validated: a template without
its placeholder simply drops the value.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

CAUSE_PLACEHOLDER = "{cause}"
MESSAGE_PLACEHOLDER = "{message}"
STACKTRACE_PLACEHOLDER = "{stacktrace}"
SHORTENER_PLACEHOLDER = "{value}"

DEFAULT_LINE_PREFIX_TEMPLATE = "[%a %Y-%m-%d %H:%M:%S.%f %Z]: "
DEFAULT_CAUSE_TEMPLATE = "Caused by: " + CAUSE_PLACEHOLDER
DEFAULT_MESSAGE_TEMPLATE = MESSAGE_PLACEHOLDER
DEFAULT_FRAME_TEMPLATE = "at " + STACKTRACE_PLACEHOLDER
DEFAULT_SHORTENER_TEMPLATE = "... " + SHORTENER_PLACEHOLDER + " more"

MESSAGE_INDENT = " " * 8
FRAME_INDENT = " " * 4


@dataclass(frozen=True)
class TextTemplate:
    """
    Immutable set of format strings.

    Indentation is added once at construction: message continuation lines are
    indented by eight spaces, stack frames and the shortener by four, so that
    they read as details of the exception or cause line above them.
    """

    cause_template: str = DEFAULT_CAUSE_TEMPLATE
    message_template: str = DEFAULT_MESSAGE_TEMPLATE
    frame_template: str = DEFAULT_FRAME_TEMPLATE
    shortener_template: str = DEFAULT_SHORTENER_TEMPLATE
    line_prefix_template: str = DEFAULT_LINE_PREFIX_TEMPLATE

    _message: str = field(init=False, repr=False, compare=False)
    _frame: str = field(init=False, repr=False, compare=False)
    _shortener: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_message", MESSAGE_INDENT + self.message_template)
        object.__setattr__(self, "_frame", FRAME_INDENT + self.frame_template)
        object.__setattr__(self, "_shortener", FRAME_INDENT + self.shortener_template)

    @classmethod
    def from_overrides(cls, *templates: str) -> "TextTemplate":
        """
        Build a template from four or five positional strings.

        Four strings are ``cause, message, frame, shortener`` and keep the
        default line prefix. Five strings put the line prefix first.
        """

        if len(templates) == 4:
            cause, message, frame, shortener = templates
            return cls(cause, message, frame, shortener)
        if len(templates) == 5:
            line_prefix, cause, message, frame, shortener = templates
            return cls(cause, message, frame, shortener, line_prefix)
        raise TypeError(
            f"TextTemplate.from_overrides expects 4 or 5 templates, got {len(templates)}"
        )

    def line_prefix(self, time: datetime) -> str:
        return time.strftime(self.line_prefix_template)

    def cause(self, cause_name: str) -> str:
        return self.cause_template.replace(CAUSE_PLACEHOLDER, cause_name)

    def message(self, message_line: str) -> str:
        return self._message.replace(MESSAGE_PLACEHOLDER, message_line)

    def frame(self, frame_text: str) -> str:
        return self._frame.replace(STACKTRACE_PLACEHOLDER, frame_text)

    def shortener(self, count: int) -> str:
        return self._shortener.replace(SHORTENER_PLACEHOLDER, str(count))


__all__ = [
    "CAUSE_PLACEHOLDER",
    "DEFAULT_CAUSE_TEMPLATE",
    "DEFAULT_FRAME_TEMPLATE",
    "DEFAULT_LINE_PREFIX_TEMPLATE",
    "DEFAULT_MESSAGE_TEMPLATE",
    "DEFAULT_SHORTENER_TEMPLATE",
    "MESSAGE_PLACEHOLDER",
    "SHORTENER_PLACEHOLDER",
    "STACKTRACE_PLACEHOLDER",
    "TextTemplate",
]
