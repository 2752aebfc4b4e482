"""Plain data description of an exception and its cause chain."""

from __future__ import annotations

import traceback
from dataclasses import dataclass
from types import TracebackType
from typing import List, Optional, Set, Tuple


def _type_name(exc: BaseException) -> str:
    cls = type(exc)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def _safe_message(exc: BaseException) -> Optional[str]:
    try:
        message = str(exc)
    except Exception:
        return f"<unprintable {type(exc).__name__} object>"
    return message or None


def _format_frame(frame: traceback.FrameSummary) -> str:
    return f"{frame.name} ({frame.filename}:{frame.lineno})"


def _stack_frames(tb: Optional[TracebackType]) -> Tuple[str, ...]:
    """
    Full call stack at the raise point, innermost frame first.

    The traceback only reaches up to the frame that caught the exception; the
    callers of that frame are appended so that an exception and its cause end
    in the same frames, as the shortener expects.
    """

    if tb is None:
        return ()
    summaries: List[traceback.FrameSummary] = []
    caller = tb.tb_frame.f_back
    if caller is not None:
        summaries.extend(traceback.extract_stack(caller))
    summaries.extend(traceback.extract_tb(tb))
    return tuple(_format_frame(summary) for summary in reversed(summaries))


def _next_in_chain(exc: BaseException) -> Optional[BaseException]:
    if exc.__cause__ is not None:
        return exc.__cause__
    if exc.__suppress_context__:
        return None
    return exc.__context__


@dataclass(frozen=True)
class ExceptionRecord:
    """
    One exception of a cause chain.

    ``frames`` lists stack frame descriptions innermost first. ``cause`` links
    to the underlying exception, if any; the chain is finite and acyclic.
    """

    type_name: str
    message: Optional[str] = None
    frames: Tuple[str, ...] = ()
    cause: Optional["ExceptionRecord"] = None

    @classmethod
    def from_exception(cls, exc: BaseException) -> "ExceptionRecord":
        """Describe a live exception, following ``__cause__``/``__context__``."""

        chain: List[BaseException] = []
        seen: Set[int] = set()
        current: Optional[BaseException] = exc
        while current is not None and id(current) not in seen:
            seen.add(id(current))
            chain.append(current)
            current = _next_in_chain(current)

        record: Optional[ExceptionRecord] = None
        for item in reversed(chain):
            record = cls(
                type_name=_type_name(item),
                message=_safe_message(item),
                frames=_stack_frames(item.__traceback__),
                cause=record,
            )
        return record  # type: ignore[return-value]

    def chain(self) -> List["ExceptionRecord"]:
        """Return this record followed by all of its causes."""

        records: List[ExceptionRecord] = []
        current: Optional[ExceptionRecord] = self
        while current is not None:
            records.append(current)
            current = current.cause
        return records


__all__ = ["ExceptionRecord"]
