"""CLI command handlers for wpslug.

Each public ``handle_*`` function corresponds to a CLI subcommand and
encapsulates the wiring and output for that command.  :func:`main` is
the console-script entry point.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from wpslug.config import Settings, load_settings
from wpslug.errors import ActionableError
from wpslug.logging import configure_file_logging, logger, set_level
from wpslug.shaping import shape_slug
from wpslug.text import sanitize


def _read_titles(args: argparse.Namespace) -> list[str]:
    """Titles from the command line, or one per stdin line."""
    if args.titles:
        return list(args.titles)
    try:
        return [line.rstrip("\r\n") for line in sys.stdin]
    except UnicodeDecodeError as exc:
        raise ActionableError.from_exception(
            exc,
            "stdin",
            "read titles",
            suggestion="Pipe UTF-8 encoded text into wpslug",
        ) from None


def handle_slugify(args: argparse.Namespace, settings: Settings) -> None:
    """Print one slug per title, shaped by settings and flag overrides."""
    max_length = settings.slug.max_length if args.max_length is None else args.max_length
    if max_length < 0:
        raise ActionableError.validation(
            field_name="--max-length",
            reason=f"is {max_length} — must be >= 0",
        )
    if args.stopwords is None:
        stopwords = settings.slug.stopwords
    else:
        stopwords = [w.strip() for w in args.stopwords.split(",") if w.strip()]

    titles = _read_titles(args)
    slugs = [
        shape_slug(sanitize(title), max_length=max_length, stopwords=stopwords)
        for title in titles
    ]
    logger.info("Slugified %d title(s)", len(titles))

    if args.format == "json":
        records = [{"title": t, "slug": s} for t, s in zip(titles, slugs, strict=True)]
        print(json.dumps(records, ensure_ascii=False))
        return
    for slug in slugs:
        print(slug)


def handle_sanitize(args: argparse.Namespace) -> None:
    """Print each title's word list as a JSON array, one per line."""
    titles = _read_titles(args)
    for title in titles:
        print(json.dumps(sanitize(title), ensure_ascii=False))
    logger.info("Sanitized %d title(s)", len(titles))


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="wpslug",
        description="WordPress-compatible slugs for arbitrary Unicode titles",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        metavar="PATH",
        help="Settings file (default: config/settings.toml if present)",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=None,
        metavar="DIR",
        help="Also write a timestamped log file to DIR",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log at DEBUG level",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # -- slugify -------------------------------------------------------------
    slugify_p = sub.add_parser("slugify", help="Print a slug for each title")
    slugify_p.add_argument("titles", nargs="*", help="Titles (default: read lines from stdin)")
    slugify_p.add_argument(
        "--max-length",
        type=int,
        default=None,
        metavar="N",
        help="Truncate slugs to N characters at a word boundary (0 = no limit)",
    )
    slugify_p.add_argument(
        "--stopwords",
        type=str,
        default=None,
        metavar="WORDS",
        help="Comma-separated words to drop, e.g. 'a,an,the'",
    )
    slugify_p.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )

    # -- sanitize ------------------------------------------------------------
    sanitize_p = sub.add_parser("sanitize", help="Print the word list for each title")
    sanitize_p.add_argument("titles", nargs="*", help="Titles (default: read lines from stdin)")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    file_handler: logging.FileHandler | None = None
    try:
        settings = load_settings(args.config)
        level = logging.DEBUG if args.verbose else settings.logging.level_number
        set_level(level)

        log_dir = args.log_dir or settings.logging.log_dir
        if log_dir:
            file_handler = configure_file_logging(log_dir, level=level)

        if args.command == "slugify":
            handle_slugify(args, settings)
        else:
            handle_sanitize(args)
    except ActionableError as exc:
        logger.error("%s", exc.error)
        print(json.dumps(exc.to_dict(), ensure_ascii=False), file=sys.stderr)
        sys.exit(2)
    finally:
        if file_handler is not None:
            logger.removeHandler(file_handler)
            file_handler.close()
