"""Command-line wrapper: ``sidebar-config validate|normalize|diff``.

Exit codes:

- validate:  0 no FATAL diagnostic, 1 FATAL present, 2 structural error.
- normalize: 0 success, 2 structural error.
- diff:      0 non-breaking, 1 a published internal link was removed,
             2 structural error.

Diagnostics and changes go to stdout, one per line.  Errors and logging go
to stderr.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence

from sidebar_config import __version__, api
from sidebar_config.config import ProcessingConfig
from sidebar_config.documents import dump_document, read_document
from sidebar_config.exceptions import SidebarConfigError

__all__ = ["main"]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_ERROR = 2

LOG_LEVEL_ENV = "SIDEBAR_CONFIG_LOG_LEVEL"
MAX_WORKERS_ENV = "SIDEBAR_CONFIG_MAX_WORKERS"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_MAX_WORKERS = 4


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sidebar-config",
        description="Validate, normalize and diff documentation sidebar configuration.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help=(
            f"Worker threads used to resolve sections "
            f"(default: ${MAX_WORKERS_ENV} or {DEFAULT_MAX_WORKERS})"
        ),
    )
    commands = parser.add_subparsers(dest="command", required=True)

    validate = commands.add_parser("validate", help="Check one or more sidebar documents")
    validate.add_argument("configs", nargs="+", help="JSON or YAML configuration files")

    normalize = commands.add_parser("normalize", help="Print the canonical configuration")
    normalize.add_argument("config", help="JSON or YAML configuration file")
    normalize.add_argument(
        "--format", choices=("json", "yaml"), default="json", help="Output format"
    )

    diff = commands.add_parser("diff", help="Compare two sidebar snapshots")
    diff.add_argument("before", help="Earlier configuration file")
    diff.add_argument("after", help="Later configuration file")
    return parser


def _log_level(args: argparse.Namespace) -> int:
    if args.verbose:
        return logging.DEBUG
    if args.quiet:
        return logging.ERROR
    name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    levels = logging.getLevelNamesMapping()
    if name not in levels:
        msg = f"{LOG_LEVEL_ENV} must be a logging level name such as INFO, got {name!r}"
        raise ValueError(msg)
    return levels[name]


def _max_workers(args: argparse.Namespace) -> int:
    if args.workers is not None:
        return args.workers
    value = os.getenv(MAX_WORKERS_ENV)
    if value is None:
        return DEFAULT_MAX_WORKERS
    try:
        return int(value)
    except ValueError:
        msg = f"{MAX_WORKERS_ENV} must be an integer, got {value!r}"
        raise ValueError(msg) from None


def _configure_logging(level: int) -> None:
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _run_validate(args: argparse.Namespace, config: ProcessingConfig) -> int:
    documents = [read_document(path) for path in args.configs]
    reports = api.validate_documents(documents, config=config)
    prefix_files = len(args.configs) > 1
    failed = False
    for path, report in zip(args.configs, reports, strict=True):
        for diagnostic in report.diagnostics:
            line = str(diagnostic)
            print(f"{path}: {line}" if prefix_files else line)
        logger.info(
            "%s: %d fatal, %d warning(s)", path, len(report.fatals), len(report.warnings)
        )
        failed = failed or not report.passed
    return EXIT_FAILED if failed else EXIT_OK


def _run_normalize(args: argparse.Namespace, config: ProcessingConfig) -> int:
    document = api.normalize(read_document(args.config), config=config)
    sys.stdout.write(dump_document(document, args.format))
    return EXIT_OK


def _run_diff(args: argparse.Namespace, config: ProcessingConfig) -> int:
    report = api.diff(read_document(args.before), read_document(args.after), config=config)
    for change in report.changes:
        print(change)
    for diagnostic in report.diagnostics:
        print(diagnostic)
    logger.info("%d change(s) between %s and %s", len(report.changes), args.before, args.after)
    return EXIT_FAILED if report.breaking else EXIT_OK


_COMMANDS = {
    "validate": _run_validate,
    "normalize": _run_normalize,
    "diff": _run_diff,
}


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        _configure_logging(_log_level(args))
        config = ProcessingConfig(max_workers=_max_workers(args))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    try:
        return _COMMANDS[args.command](args, config)
    except SidebarConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    raise SystemExit(main())
