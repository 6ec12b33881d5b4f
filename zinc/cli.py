"""CLI entrypoint for the zinc translator."""

from __future__ import annotations

import argparse
import logging
import sys

from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from dotenv import load_dotenv

from zinc.configuration import (
    DEFAULT_CONFIG_PATH,
    build_settings,
    load_config,
)
from zinc.constants import EXIT_OK, NAME, VERSION
from zinc.exceptions import ZincError
from zinc.logging import configure_console_logging, setup_file_logger
from zinc.orchestrator import BuildOrchestrator

LOGGER = logging.getLogger("zinc.cli")

KEEP_FLAGS = {"-k", "--keep-translation"}
VERBOSE_FLAGS = {"-v", "--verbose"}
# -k/-v only count in the two slots right after the script path.
_FLAG_SLOTS = slice(1, 3)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=NAME,
        description=(
            "Translate a ZINC script to C++, compile it and run the result."
        ),
    )
    parser.add_argument(
        "source",
        type=str,
        help="Path to the ZINC script (relative to the current directory).",
    )
    parser.add_argument(
        "-k",
        "--keep-translation",
        action="store_true",
        help="Keep the intermediate C++ file after a successful build.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print progress and diagnostic lines.",
    )
    parser.add_argument(
        "--config",
        type=str,
        required=False,
        help=(
            "Path to a YAML config. If omitted, uses the bundled "
            "configs/default_config.yaml."
        ),
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored log tags.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"{NAME} (ZINC) {VERSION}",
    )
    return parser


def _scan_flags(argv: Sequence[str]) -> Tuple[bool, bool]:
    keep = verbose = False
    for arg in argv[_FLAG_SLOTS]:
        if arg in KEEP_FLAGS:
            keep = True
        elif arg in VERBOSE_FLAGS:
            verbose = True
    return keep, verbose


def _report(exc: ZincError) -> int:
    stream = sys.stderr if exc.to_stderr else sys.stdout
    print(str(exc), file=stream)
    return exc.exit_code


def main(argv: Optional[List[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    parser = _build_parser()
    args, unknown = parser.parse_known_args(argv)

    try:
        load_dotenv()
    except Exception:
        pass

    keep, verbose = _scan_flags(argv)
    config_path = Path(args.config) if args.config else DEFAULT_CONFIG_PATH
    try:
        config = load_config(config_path)
        settings = build_settings(
            config,
            source=args.source,
            keep_translation=keep,
            verbose=verbose,
            color=False if args.no_color else None,
            config_root=config_path.resolve().parent,
        )
    except ZincError as exc:
        return _report(exc)

    configure_console_logging(settings.verbose, color=settings.logging.color)
    if settings.logging.file is not None:
        setup_file_logger(settings.logging.file)

    LOGGER.info("Verbose output: [%s]", settings.verbose)
    LOGGER.info("Keep translation: [%s]", settings.keep_translation)
    if settings.verbose:
        for arg in unknown:
            LOGGER.warning("Unknown argument `%s`", arg)
    LOGGER.info("Full path [%s]", settings.input_path)

    orchestrator = BuildOrchestrator(settings)
    try:
        orchestrator.run_file()
    except ZincError as exc:
        return _report(exc)
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
