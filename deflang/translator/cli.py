"""Command line interface for the deflang translator."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from ..core.config import Settings, get_settings
from ..core.errors import DeflangError
from ..core.logging import get_logger, setup_logging
from .translator import Translator, convert_src_file

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deflang",
        description="Translate a .src function definition into JavaScript."
    )
    parser.add_argument(
        "source",
        type=Path,
        help="Path to the .src file to translate.",
    )
    parser.add_argument(
        "output",
        type=Path,
        nargs="?",
        help="Optional destination for the generated .js file (defaults to alongside the source).",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Allow overwriting an existing output file.",
    )
    parser.add_argument(
        "--fragment-only",
        dest="standalone",
        action="store_false",
        help="Write only the generated function, without the runtime preamble and test trailer.",
    )
    parser.add_argument(
        "--emit",
        choices=("program", "tokens", "ast"),
        default="program",
        help="What to produce: the translated program (default), or a token/AST dump on stdout.",
    )
    parser.add_argument(
        "--encoding",
        default=None,
        help="Encoding to use when reading and writing files (default: DEFLANG_ENCODING or utf-8).",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress informational output.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log pipeline progress to stderr.",
    )
    return parser


def _dump(args: argparse.Namespace, settings: Settings, encoding: str) -> None:
    if not args.source.exists():
        raise FileNotFoundError(f"Source file not found: {args.source}")

    result = Translator(settings).translate(args.source.read_text(encoding=encoding))
    if args.emit == "tokens":
        for token in result.tokens:
            print(repr(token))
    else:
        print(result.tree.model_dump_json(indent=2))


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(settings, level="DEBUG" if args.verbose else None)
    encoding = args.encoding or settings.ENCODING

    try:
        if args.emit != "program":
            _dump(args, settings, encoding)
            return 0

        written_path, _ = convert_src_file(
            args.source,
            output_path=args.output,
            overwrite=args.overwrite,
            encoding=encoding,
            standalone=args.standalone,
            settings=settings,
        )
    except (OSError, UnicodeError, LookupError) as exc:
        # missing or existing files, undecodable source, unknown --encoding
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except DeflangError as exc:
        logger.debug(f"Translation failed: {exc}", extra={"extra_data": exc.details})
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not args.quiet:
        print(f"Wrote {written_path}")

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
