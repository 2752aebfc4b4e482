from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable

import pytest

from utilkit.error import LOG_FILE_NAME, ErrorLogger, ExceptionRecord, TextTemplate

START = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)
PREFIX = "[12:00:00] "


def _template() -> TextTemplate:
    return TextTemplate(line_prefix_template="[%H:%M:%S] ")


def _fixed_clock() -> datetime:
    return START


def _ticking_clock() -> Callable[[], datetime]:
    state = {"calls": 0}

    def clock() -> datetime:
        now = START + timedelta(seconds=state["calls"])
        state["calls"] += 1
        return now

    return clock


def _logger(directory: Path, clock: Callable[[], datetime] = _fixed_clock) -> ErrorLogger:
    return ErrorLogger(directory, template=_template(), clock=clock)


def _chained_record() -> ExceptionRecord:
    root = ExceptionRecord(
        "pkg.RootError",
        message="disk full",
        frames=("write (io.py:9)", "save (store.py:4)", "handle (app.py:7)", "main (app.py:2)", "<module> (app.py:1)"),
    )
    middle = ExceptionRecord(
        "pkg.StoreError",
        frames=("save (store.py:5)", "handle (app.py:7)", "main (app.py:2)", "<module> (app.py:1)"),
        cause=root,
    )
    return ExceptionRecord(
        "pkg.AppError",
        message="request failed",
        frames=("handle (app.py:8)", "main (app.py:2)", "<module> (app.py:1)"),
        cause=middle,
    )


def test_log_file_lives_in_directory(tmp_path: Path) -> None:
    logger = _logger(tmp_path)

    assert logger.get_log_file_path() == tmp_path / LOG_FILE_NAME
    assert logger.content == ""
    assert logger.dirty is False


def test_single_line_message(tmp_path: Path) -> None:
    logger = _logger(tmp_path)

    logger.log_message("service started")

    assert logger.content == PREFIX + "service started\n"
    assert logger.dirty is True


def test_multi_line_message_timestamps_every_line(tmp_path: Path) -> None:
    logger = _logger(tmp_path, clock=_ticking_clock())

    logger.log_message("one\r\ntwo\nthree")

    assert logger.content == "[12:00:00] one\n[12:00:01] two\n[12:00:02] three\n"


def test_trailing_line_breaks_are_dropped(tmp_path: Path) -> None:
    logger = _logger(tmp_path)

    logger.log_message("done\n\n")
    logger.log_message("")

    assert logger.content == PREFIX + "done\n" + PREFIX + "\n"


def test_exception_without_message_or_cause(tmp_path: Path) -> None:
    logger = _logger(tmp_path)
    record = ExceptionRecord("pkg.Boom", frames=("inner (a.py:3)", "outer (a.py:9)"))

    logger.log_exception(record)

    assert logger.content == (
        PREFIX + "pkg.Boom\n"
        + PREFIX + "    at inner (a.py:3)\n"
        + PREFIX + "    at outer (a.py:9)\n"
    )
    assert ": " not in logger.content
    assert "Caused by" not in logger.content


def test_exception_message_lines(tmp_path: Path) -> None:
    logger = _logger(tmp_path)

    logger.log_exception(ExceptionRecord("Boom", message="first\nsecond"))
    logger.log_exception(ExceptionRecord("Blank", message="   "))

    assert logger.content == (
        PREFIX + "Boom: first\n"
        + PREFIX + "        second\n"
        + PREFIX + "Blank\n"
    )


def test_cause_chain_prints_only_distinct_frames(tmp_path: Path) -> None:
    logger = _logger(tmp_path)

    logger.log_exception(_chained_record())

    assert logger.content == (
        PREFIX + "pkg.AppError: request failed\n"
        + PREFIX + "    at handle (app.py:8)\n"
        + PREFIX + "    at main (app.py:2)\n"
        + PREFIX + "    at <module> (app.py:1)\n"
        + PREFIX + "Caused by: pkg.StoreError\n"
        + PREFIX + "    at save (store.py:5)\n"
        + PREFIX + "    ... 3 more\n"
        + PREFIX + "Caused by: pkg.RootError: disk full\n"
        + PREFIX + "    at write (io.py:9)\n"
        + PREFIX + "    ... 4 more\n"
    )


def test_cause_with_fewer_frames_than_enclosing(tmp_path: Path) -> None:
    logger = _logger(tmp_path)
    record = ExceptionRecord(
        "Outer",
        frames=("a", "b", "c"),
        cause=ExceptionRecord("Inner", frames=("x",)),
    )

    logger.log_exception(record)

    assert logger.content.endswith(PREFIX + "Caused by: Inner\n" + PREFIX + "    ... 3 more\n")
    assert "at x" not in logger.content


def test_formatting_is_repeatable(tmp_path: Path) -> None:
    first = _logger(tmp_path)
    second = _logger(tmp_path)
    record = _chained_record()

    first.log_exception(record)
    second.log_exception(record)
    second.log_exception(record)

    assert first.content * 2 == second.content


def _raise_value_error() -> None:
    raise ValueError("bad value")


def _wrap_value_error() -> None:
    try:
        _raise_value_error()
    except ValueError as exc:
        raise RuntimeError("wrapped") from exc


def test_log_live_exception(tmp_path: Path) -> None:
    logger = _logger(tmp_path)

    try:
        _wrap_value_error()
    except RuntimeError as exc:
        logger.log_exception(exc)

    content = logger.content
    assert content.startswith(PREFIX + "RuntimeError: wrapped\n")
    assert PREFIX + "    at _wrap_value_error (" in content
    assert PREFIX + "Caused by: ValueError: bad value\n" in content
    assert content.count("    at _raise_value_error (") == 1
    assert content.count("    at _wrap_value_error (") == 1
    assert "    ... " in content


def test_set_template_ignores_none(tmp_path: Path) -> None:
    logger = _logger(tmp_path)
    replacement = TextTemplate(line_prefix_template="")

    logger.set_template(None)
    assert logger.template == _template()

    logger.set_template(replacement)
    logger.log_message("plain")
    assert logger.content == "plain\n"


def test_flush_writes_and_reloads(tmp_path: Path) -> None:
    logger = _logger(tmp_path)
    logger.log_message("persist me")

    assert logger.flush() is True
    assert logger.dirty is False
    assert (tmp_path / LOG_FILE_NAME).read_text(encoding="utf-8") == PREFIX + "persist me\n"

    reloaded = _logger(tmp_path)
    assert reloaded.content == PREFIX + "persist me\n"
    assert reloaded.dirty is False

    reloaded.log_message("more")
    assert reloaded.flush()
    assert (tmp_path / LOG_FILE_NAME).read_text(encoding="utf-8") == (
        PREFIX + "persist me\n" + PREFIX + "more\n"
    )


def test_second_flush_does_not_touch_disk(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import utilkit.error.logger as logger_module

    calls = []
    real_write_all = logger_module.write_all

    def counting_write_all(path, content):
        calls.append(path)
        return real_write_all(path, content)

    monkeypatch.setattr(logger_module, "write_all", counting_write_all)
    logger = _logger(tmp_path)
    logger.log_message("once")

    assert logger.flush() is True
    assert logger.flush() is True
    assert len(calls) == 1


def test_clear_then_flush_deletes_file(tmp_path: Path) -> None:
    logger = _logger(tmp_path)
    logger.log_message("temporary")
    assert logger.flush()
    assert logger.log_file_path.exists()

    logger.clear()
    assert logger.dirty is True
    assert logger.flush() is True
    assert not logger.log_file_path.exists()
    assert logger.dirty is False
    assert _logger(tmp_path).content == ""


def test_clear_marks_empty_log_dirty(tmp_path: Path) -> None:
    logger = _logger(tmp_path)

    logger.clear()

    assert logger.dirty is True
    assert logger.flush() is True
    assert not logger.log_file_path.exists()


def test_failed_flush_keeps_log_dirty(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    logger = _logger(blocker)
    logger.log_message("cannot be written")

    assert logger.flush() is False
    assert logger.dirty is True
    assert logger.content == PREFIX + "cannot be written\n"


def test_unusable_directory_never_raises(tmp_path: Path) -> None:
    logger = _logger(tmp_path / ("x" * 300))

    assert logger.content == ""
    assert logger.dirty is False

    logger.log_message("lost")
    assert logger.flush() is False
    assert logger.dirty is True


def test_unreadable_log_file_loads_empty(tmp_path: Path) -> None:
    (tmp_path / LOG_FILE_NAME).write_bytes(b"\xff\xfe not utf-8 \x80")

    logger = _logger(tmp_path)

    assert logger.content == ""
    assert logger.dirty is False


def test_log_file_that_is_a_directory_loads_empty(tmp_path: Path) -> None:
    (tmp_path / LOG_FILE_NAME).mkdir()

    logger = _logger(tmp_path)

    assert logger.content == ""
    assert logger.dirty is False


def test_failed_delete_keeps_log_dirty(tmp_path: Path) -> None:
    (tmp_path / LOG_FILE_NAME).mkdir()
    logger = _logger(tmp_path)

    logger.clear()

    assert logger.flush() is False
    assert logger.dirty is True
    assert (tmp_path / LOG_FILE_NAME).is_dir()
