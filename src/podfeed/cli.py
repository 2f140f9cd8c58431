"""Command line entry point: render or validate JSON feed descriptions."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from . import config
from .encoder import encode_feed_str, write_feed
from .errors import FeedError, FeedLoadError, FeedValidationError
from .loader import feed_from_dict, load_feed
from .logging import configure_logging
from .models import Feed
from .utils.env import load_default_env_files
from .validation import collect_problems

log = logging.getLogger(__name__)


class CLIError(RuntimeError):
    """Raised when the CLI cannot execute the requested command."""


def _read_feed(source: str) -> Feed:
    try:
        if source == "-":
            return feed_from_dict(json.load(sys.stdin))
        path = Path(source)
        if not path.is_file():
            raise CLIError(f"Feed description not found: {path}")
        return load_feed(path)
    except json.JSONDecodeError as exc:
        raise CLIError(f"{source}: invalid JSON ({exc})") from exc
    except FeedLoadError as exc:
        raise CLIError(str(exc)) from exc


def _print_problems(problems: Sequence[tuple[str, str]]) -> None:
    for path, message in problems:
        print(f"{path}: {message}", file=sys.stderr)


def _handle_render(args: argparse.Namespace) -> int:
    feed = _read_feed(args.feed)
    indent = " " * args.indent if args.indent is not None else None
    options = {
        "indent": indent,
        "validate": False if args.no_validate else None,
        "strict_urls": True if args.strict_urls else None,
    }
    try:
        if args.output:
            declaration = True if args.xml_declaration is None else args.xml_declaration
            write_feed(feed, args.output, xml_declaration=declaration, **options)
        else:
            document = encode_feed_str(feed, xml_declaration=args.xml_declaration, **options)
            sys.stdout.write(document)
            sys.stdout.write("\n")
    except FeedValidationError as exc:
        print("Feed failed validation:", file=sys.stderr)
        _print_problems(exc.problems)
        return 1
    except FeedError as exc:
        raise CLIError(str(exc)) from exc
    return 0


def _handle_validate(args: argparse.Namespace) -> int:
    feed = _read_feed(args.feed)
    strict = args.strict_urls or config.STRICT_URLS
    problems = collect_problems(feed, strict_urls=strict)
    if problems:
        _print_problems(problems)
        print(f"{len(problems)} problem(s) found", file=sys.stderr)
        return 1
    print("Feed is valid")
    return 0


def _add_feed_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "feed",
        metavar="FEED.json",
        help="JSON feed description ('-' reads from stdin).",
    )
    parser.add_argument(
        "--strict-urls",
        action="store_true",
        help="Require absolute http(s) URLs and UUID-shaped GUIDs.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="podfeed",
        description="Render podcast RSS feeds from JSON descriptions.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser("render", help="Encode a feed as RSS XML")
    _add_feed_argument(render_parser)
    render_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write the document atomically to this file instead of stdout.",
    )
    render_parser.add_argument(
        "--indent",
        type=int,
        metavar="N",
        help="Spaces per nesting level (0 = compact; default: PODFEED_INDENT).",
    )
    render_parser.add_argument(
        "--xml-declaration",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Prepend an XML declaration (default: on for files, PODFEED_XML_DECLARATION for stdout).",
    )
    render_parser.add_argument(
        "--no-validate",
        action="store_true",
        help="Skip required-field validation.",
    )
    render_parser.set_defaults(func=_handle_render)

    validate_parser = subparsers.add_parser("validate", help="Report problems without encoding")
    _add_feed_argument(validate_parser)
    validate_parser.set_defaults(func=_handle_validate)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    load_default_env_files()
    config.refresh_from_env()
    configure_logging()

    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "render" and args.indent is not None and args.indent < 0:
        parser.error("--indent must not be negative")
    try:
        return args.func(args)
    except CLIError as exc:
        log.debug("Command %s failed: %s", args.command, exc)
        parser.error(str(exc))


if __name__ == "__main__":  # pragma: no cover - manual execution
    raise SystemExit(main())
