"""CLI entry point for the developer-utility converters."""

import argparse
import sys
from pathlib import Path
from typing import Callable, Dict, Optional

from convkit.catalogue import CONVERTERS
from convkit.codecs.base64_codec import decode_text, encode_text
from convkit.codecs.hashing import ALGORITHMS, generate_hashes
from convkit.codecs.images import extract_image, file_to_image
from convkit.codecs.timestamps import current_timestamp, date_to_timestamp, timestamp_to_date
from convkit.errors import ConverterError
from convkit.formatters.js_format import beautify_js
from convkit.formatters.json_format import format_json, minify_json
from convkit.formatters.markdown_render import render_markdown
from convkit.formatters.sql_format import format_sql
from convkit.formatters.svg_react import DEFAULT_COMPONENT_NAME, svg_to_react
from convkit.utils.config import settings
from convkit.utils.logger import get_logger
from convkit.web.converter import convert_html_to_markdown
from convkit.web.geolocation import IpApiGeoLocation

log = get_logger(__name__)


def read_input(source: Optional[str]) -> str:
    """Read the file at *source*, or stdin when it is missing or ``-``."""
    if not source or source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _image_summary(image) -> str:
    return f"{image.mime_type} | {image.size_label}\n{image.data_url}"


def _hashes(args: argparse.Namespace) -> str:
    results = generate_hashes(read_input(args.input), args.algorithm)
    return "\n".join(f"{r.algorithm}: {r.hash}" for r in results)


def _geolocate(args: argparse.Namespace) -> str:
    location = IpApiGeoLocation().lookup(args.ip)
    return "\n".join(f"{key}: {value}" for key, value in location.to_dict().items())


def _list_converters(args: argparse.Namespace) -> str:
    return "\n".join(f"{c.id:<20} {c.title} -- {c.description}" for c in CONVERTERS)


COMMANDS: Dict[str, Callable[[argparse.Namespace], str]] = {
    "html-to-markdown": lambda a: convert_html_to_markdown(read_input(a.input)),
    "js-beautify": lambda a: beautify_js(read_input(a.input)),
    "base64-encode": lambda a: encode_text(read_input(a.input)),
    "base64-decode": lambda a: decode_text(read_input(a.input)),
    "base64-to-image": lambda a: _image_summary(extract_image(read_input(a.input))),
    "image-to-base64": lambda a: _image_summary(file_to_image(a.path)),
    "hash": _hashes,
    "json-format": lambda a: (minify_json if a.minify else format_json)(read_input(a.input)),
    "sql-format": lambda a: format_sql(read_input(a.input)),
    "svg-to-react": lambda a: svg_to_react(read_input(a.input), a.name),
    "markdown-to-html": lambda a: render_markdown(read_input(a.input)),
    "timestamp-to-date": lambda a: timestamp_to_date(a.value),
    "date-to-timestamp": lambda a: str(date_to_timestamp(a.value)),
    "now": lambda a: str(current_timestamp()),
    "geolocate": _geolocate,
    "list": _list_converters,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Developer-utility converters")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable DEBUG logging")
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    for name in ("html-to-markdown", "js-beautify", "base64-encode", "base64-decode",
                 "base64-to-image", "sql-format", "markdown-to-html"):
        cmd = sub.add_parser(name, help=f"Run the {name} converter")
        cmd.add_argument("input", nargs="?", help="Input file (default: stdin)")

    cmd = sub.add_parser("image-to-base64", help="Encode an image file as a data URL")
    cmd.add_argument("path", help="Image file")

    cmd = sub.add_parser("hash", help="Hash text with one or more algorithms")
    cmd.add_argument("input", nargs="?", help="Input file (default: stdin)")
    cmd.add_argument("--algorithm", "-a", action="append",
                     choices=[algo.id for algo in ALGORITHMS],
                     help="Algorithm id (repeatable; default md5, sha1, sha256)")

    cmd = sub.add_parser("json-format", help="Pretty-print or minify JSON")
    cmd.add_argument("input", nargs="?", help="Input file (default: stdin)")
    cmd.add_argument("--minify", action="store_true", help="Minify instead of indenting")

    cmd = sub.add_parser("svg-to-react", help="Generate a React component from SVG")
    cmd.add_argument("input", nargs="?", help="Input file (default: stdin)")
    cmd.add_argument("--name", default=DEFAULT_COMPONENT_NAME, help="Component name")

    cmd = sub.add_parser("timestamp-to-date", help="Unix timestamp -> UTC date")
    cmd.add_argument("value")
    cmd = sub.add_parser("date-to-timestamp", help="ISO date -> Unix timestamp")
    cmd.add_argument("value")
    sub.add_parser("now", help="Print the current Unix timestamp")

    cmd = sub.add_parser("geolocate", help="Look up the location of an IP address")
    cmd.add_argument("ip")

    sub.add_parser("list", help="List the available converters")

    cmd = sub.add_parser("serve", help="Start the HTTP API")
    cmd.add_argument("--host", default=settings.api_host)
    cmd.add_argument("--port", type=int, default=settings.api_port)
    cmd.add_argument("--reload", action="store_true", default=settings.api_reload)
    return parser


def serve(host: str, port: int, reload: bool) -> None:
    import uvicorn

    uvicorn.run("convkit.api.app:app", host=host, port=port, reload=reload)


def run_command(args: argparse.Namespace) -> int:
    """Run one converter command and print its result; return the exit code."""
    try:
        output = COMMANDS[args.command](args)
    except ConverterError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(output)
    return 0


def main(argv: Optional[list] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        import logging
        for name in list(logging.root.manager.loggerDict):
            if name.startswith("convkit") or name == __name__:
                logging.getLogger(name).setLevel(logging.DEBUG)

    if args.command == "serve":
        serve(args.host, args.port, args.reload)
    elif args.command:
        sys.exit(run_command(args))
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
