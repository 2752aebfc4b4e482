"""Command line entrypoint for the utilkit helpers."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from utilkit.config import ToolkitConfig, load_config
from utilkit.error import ErrorLogger, ExceptionRecord
from utilkit.utils import (
    RandomNumberGenerator,
    configure_logging,
    list_files,
    load_env_file,
    unique_sample,
)

LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="utilkit", description="Personal utility toolkit")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a YAML configuration file.",
    )
    parser.add_argument(
        "--env",
        type=str,
        default=None,
        help="Configuration environment override (e.g., local, ci).",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=Path(".env"),
        help="Environment file loaded before reading the configuration.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    log_parser = commands.add_parser("log", help="Append a message to the error log.")
    log_parser.add_argument("message", nargs="+", help="Message text.")

    error_parser = commands.add_parser(
        "log-error", help="Append an error and its causes to the error log."
    )
    error_parser.add_argument("--message", required=True, help="Message of the error.")
    error_parser.add_argument(
        "--cause",
        action="append",
        default=[],
        help="Message of a cause; repeat to chain deeper causes.",
    )
    error_parser.add_argument(
        "--type",
        dest="type_name",
        default="RuntimeError",
        help="Type name written for the error and each cause.",
    )

    commands.add_parser("clear", help="Clear the error log and delete its file.")
    commands.add_parser("path", help="Print the error log file path.")
    commands.add_parser("show", help="Print the error log content.")

    list_parser = commands.add_parser("list", help="List files in a directory.")
    list_parser.add_argument("directory", type=Path)
    list_parser.add_argument(
        "--ext",
        action="append",
        default=None,
        help="File extension to keep; may be repeated.",
    )
    list_parser.add_argument(
        "--recursive",
        action="store_true",
        help="Descend into subdirectories.",
    )

    sample_parser = commands.add_parser("sample", help="Pick unique random items.")
    sample_parser.add_argument("items", nargs="+")
    sample_parser.add_argument("-n", type=int, default=1, help="Number of items.")
    sample_parser.add_argument("--seed", type=int, default=None)

    random_parser = commands.add_parser("random", help="Draw a random integer.")
    random_parser.add_argument("low", type=int)
    random_parser.add_argument("high", type=int)
    random_parser.add_argument("--seed", type=int, default=None)
    return parser


def _load_toolkit_config(config_path: Optional[Path], environment: Optional[str]) -> ToolkitConfig:
    if config_path is None:
        return ToolkitConfig()
    return load_config(config_path, environment)


def _build_error_logger(config: ToolkitConfig) -> ErrorLogger:
    return ErrorLogger(
        config.error_log.log_dir,
        template=config.error_log.template.build(),
    )


def _error_chain(type_name: str, message: str, causes: List[str]) -> ExceptionRecord:
    """Build an error whose first cause is ``causes[0]``, the next one below it, and so on."""

    record: Optional[ExceptionRecord] = None
    for text in reversed([message, *causes]):
        record = ExceptionRecord(type_name, message=text, cause=record)
    return record  # type: ignore[return-value]


def _flush_or_exit(error_logger: ErrorLogger) -> None:
    if not error_logger.flush():
        LOGGER.error("Could not synchronize %s", error_logger.get_log_file_path())
        raise SystemExit(1)


def _rng(config: ToolkitConfig, seed: Optional[int]) -> RandomNumberGenerator:
    return RandomNumberGenerator(seed if seed is not None else config.random.seed)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    load_env_file(args.env_file)
    config = _load_toolkit_config(args.config, args.env)
    configure_logging(
        level=config.logging.level,
        log_dir=config.logging.log_dir,
        log_file=config.logging.log_file,
    )
    LOGGER.debug("Running %s with environment %s", args.command, config.environment)

    if args.command == "log":
        error_logger = _build_error_logger(config)
        error_logger.log_message(" ".join(args.message))
        _flush_or_exit(error_logger)
    elif args.command == "log-error":
        error_logger = _build_error_logger(config)
        record = _error_chain(args.type_name, args.message, args.cause)
        error_logger.log_exception(record)
        _flush_or_exit(error_logger)
        LOGGER.info("Logged %s with %d chained causes", record.type_name, len(record.chain()) - 1)
    elif args.command == "clear":
        error_logger = _build_error_logger(config)
        error_logger.clear()
        _flush_or_exit(error_logger)
    elif args.command == "path":
        print(_build_error_logger(config).get_log_file_path())
    elif args.command == "show":
        print(_build_error_logger(config).content, end="")
    elif args.command == "list":
        for path in list_files(args.directory, args.ext, recursive=args.recursive):
            print(path)
    elif args.command == "sample":
        for item in unique_sample(args.items, args.n, _rng(config, args.seed)):
            print(item)
    elif args.command == "random":
        print(_rng(config, args.seed).integer(args.low, args.high))
    else:
        raise ValueError(f"Unknown command {args.command}")


if __name__ == "__main__":  # pragma: no cover
    main()
