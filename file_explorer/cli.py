from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional

from file_explorer.config.settings import parse_log_level, settings
from file_explorer.container import container
from file_explorer.entities.session import Session
from file_explorer.exceptions import ConfigurationError
from file_explorer.shell import Shell, make_console

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _configure_logging(level: int, log_file: Optional[str]) -> None:
    # Logs never go to stdout, where command output is printed
    if log_file:
        logging.basicConfig(level=level, format=LOG_FORMAT, filename=log_file)
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mini-explorer",
        description="Interactive file explorer console.",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=None,
        help="Starting directory (default: current working directory)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level, e.g. DEBUG or INFO (default: FILE_EXPLORER_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable coloured output",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        level = parse_log_level(args.log_level) if args.log_level else settings.log_level
    except ConfigurationError as e:
        print(str(e), file=sys.stderr)
        return 2
    _configure_logging(level, settings.log_file)

    console = make_console(color=settings.color and not args.no_color)
    repository = container.get_file_repository()

    start = os.getcwd()
    if args.directory is not None:
        start = os.path.abspath(args.directory)
        if not repository.can_enter_directory(start):
            console.print(f"Directory not found: {args.directory}")
            return 1

    session = Session(start)
    console.print(f"Current Directory: {session.cwd}")

    shell = Shell(
        container.get_command_registry(),
        session=session,
        console=console,
        prompt=settings.prompt,
    )
    try:
        return shell.run()
    except KeyboardInterrupt:
        console.print()
        return 130


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
