"""Command line interface: ``wiregen --source-dirs src --output src/app/wiring.py``.

Exit codes:
    0  module generated
    1  dependency validation failed, nothing written
    2  usage error or output could not be written
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

from wiregen import __version__
from wiregen.application.reporters import ConsoleConfig, ConsoleReporter
from wiregen.application.services import generate_wiring
from wiregen.domain.exceptions.validation import ValidationError
from wiregen.domain.model.configuration import GeneratorConfig, ScanConfig

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_VALIDATION_FAILED = 1
EXIT_ERROR = 2


def _split_list(value: str) -> tuple[str, ...]:
    """Comma separated list, blanks dropped."""
    return tuple(item.strip() for item in value.split(",") if item.strip())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wiregen",
        description=(
            "Scan sources for @bind/@singleton/Inject declarations, validate the wiring "
            "and generate the register_dependencies() module."
        ),
    )
    parser.add_argument(
        "--source-dirs",
        required=True,
        type=_split_list,
        help="Comma separated directories to scan",
    )
    parser.add_argument(
        "--output",
        required=True,
        type=Path,
        help="Path of the generated module",
    )
    parser.add_argument(
        "--imports",
        default=(),
        type=_split_list,
        help="Comma separated modules the generated module imports",
    )
    parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Parse every file, do not read or write the scan cache",
    )
    parser.add_argument(
        "--cache-file",
        type=Path,
        default=None,
        help="Scan cache location (default: $WIREGEN_CACHE_DIR or the user cache directory)",
    )
    parser.add_argument(
        "--jobs",
        type=int,
        default=None,
        help="Parser threads (default: CPU count + 4, at most 32)",
    )
    parser.add_argument(
        "--no-assertions",
        action="store_true",
        help="Do not emit assert_all_injections()",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="-v: progress, -vv: every registration decision",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def setup_logging(verbosity: int) -> None:
    """Route wiregen logs to stderr through rich."""
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=verbosity > 1,
        markup=False,
    )
    root = logging.getLogger("wiregen")
    root.setLevel(level)
    # Clear existing handlers to prevent duplication on repeated main() calls
    root.handlers.clear()
    root.addHandler(handler)


def config_from_args(args: argparse.Namespace) -> GeneratorConfig:
    """Build run configuration from parsed arguments.

    Raises:
        ValueError: If the arguments describe an invalid configuration
    """
    scan = ScanConfig() if args.jobs is None else ScanConfig(max_workers=args.jobs)
    return GeneratorConfig(
        source_dirs=tuple(Path(d) for d in args.source_dirs),
        output=args.output,
        imports=tuple(args.imports),
        scan=scan,
        use_cache=not args.no_cache,
        cache_file=args.cache_file,
        include_assertions=not args.no_assertions,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run wiregen.

    Args:
        argv: Arguments without program name (sys.argv[1:] if None)

    Returns:
        Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = config_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    reporter = ConsoleReporter(
        ConsoleConfig(color=sys.stdout.isatty(), show_bindings=args.verbose > 0)
    )

    try:
        report = generate_wiring(config)
    except ValidationError as e:
        sys.stdout.write(reporter.report_failure(e))
        return EXIT_VALIDATION_FAILED
    except OSError as e:
        logger.error("Cannot write %s: %s", config.output, e)
        return EXIT_ERROR

    sys.stdout.write(reporter.report_success(report))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
