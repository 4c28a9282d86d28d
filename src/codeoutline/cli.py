"""Command-line entry point: outline one source file into a text report."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from codeoutline import __version__
from codeoutline.frontend.registry import FrontendRegistry, UnsupportedFrontendError
from codeoutline.models.errors import ParseUnavailable
from codeoutline.outline.pipeline import OutlinePipeline
from codeoutline.settings import Settings

logger = logging.getLogger("codeoutline.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codeoutline",
        description="Write the structural outline of a source file as a text report",
    )
    parser.add_argument("input", nargs="?", help="Source file to outline")
    parser.add_argument("-o", "--output", help="Report file (default: stdout)")
    parser.add_argument("--frontend", help="Frontend name (default: chosen by file suffix)")
    parser.add_argument("--recursive", action="store_true", default=None,
                        help="Outline nested declarations as children")
    parser.add_argument("--log-level", help="Override LOG_LEVEL")
    parser.add_argument("--list-frontends", action="store_true",
                        help="List available frontends and exit")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run Parse → Build → Serialize → write for one file; return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = Settings()

    logging.basicConfig(level=(args.log_level or settings.log_level).upper())

    if args.list_frontends:
        for name in FrontendRegistry.available():
            print(name)
        return 0
    if not args.input:
        parser.error("Input file is required")

    input_path = Path(args.input)
    pipeline = OutlinePipeline(settings, recursive=args.recursive)
    try:
        result = pipeline.outline_file(input_path, frontend_name=args.frontend)
    except UnsupportedFrontendError as exc:
        logger.error("%s", exc)
        return 2
    except OSError as exc:
        logger.error("Cannot read %s: %s", input_path, exc)
        return 2
    except UnicodeDecodeError as exc:
        logger.error("Cannot decode %s as %s: %s", input_path, settings.source_encoding, exc)
        return 2
    except ParseUnavailable as exc:
        logger.error("%s", exc)
        for diagnostic in exc.diagnostics:
            logger.error(
                "  %s:%d:%d: %s",
                exc.file_identifier, diagnostic.start_line, diagnostic.start_column,
                diagnostic.message,
            )
        return 1

    if args.output:
        Path(args.output).write_text(result.report, encoding="utf-8")
        logger.info("Wrote outline of %s to %s", input_path, args.output)
    else:
        sys.stdout.write(result.report + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
