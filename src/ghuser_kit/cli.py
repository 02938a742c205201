# src/ghuser_kit/cli.py

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import asdict

from .decoding import decode_base64_to_text, parse_data_url
from .github import (
    GitHubUsersClient,
    LookupOutcome,
    lookup_creation_date,
    token_from_url,
)
from .observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook
from .parsers import parse_csv

logger = logging.getLogger(__name__)


async def _lookup(
    username: str, token: str | None, metrics_hook: MetricsHook
) -> LookupOutcome:
    async with GitHubUsersClient(metrics_hook=metrics_hook) as client:
        return await lookup_creation_date(username, token=token, client=client)


def _created_at(args: argparse.Namespace) -> int:
    token = args.token
    if token is None and args.page_url:
        token = token_from_url(args.page_url)
    outcome = asyncio.run(_lookup(args.username, token, args.metrics_hook))
    if outcome.ok:
        print(outcome.text)
        return 0
    print(outcome.text, file=sys.stderr)
    return 1


def _parse_csv(args: argparse.Namespace) -> int:
    if args.path in (None, "-"):
        text = sys.stdin.read()
    else:
        with open(args.path, encoding="utf-8", newline="") as f:
            text = f.read()
    table = parse_csv(text, metrics_hook=args.metrics_hook)
    logger.debug("Parsed %d rows", len(table.rows))
    print(json.dumps(asdict(table), ensure_ascii=False))
    return 0


def _decode_data_url(args: argparse.Namespace) -> int:
    data_url = parse_data_url(args.url, metrics_hook=args.metrics_hook)
    if data_url is None:
        print("Not a data URL", file=sys.stderr)
        return 1
    print(json.dumps(asdict(data_url), ensure_ascii=False))
    return 0


def _decode_base64(args: argparse.Namespace) -> int:
    print(decode_base64_to_text(args.text, metrics_hook=args.metrics_hook))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ghuser-kit",
        description="Look up GitHub account creation dates and decode small text payloads.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    sub = parser.add_subparsers(dest="command", required=True)

    created = sub.add_parser("created-at", help="Print a user's account creation date.")
    created.add_argument("username")
    auth = created.add_mutually_exclusive_group()
    auth.add_argument("--token", default=None, help="API token sent as Authorization.")
    auth.add_argument(
        "--page-url",
        default=None,
        help="URL whose 'token' query parameter supplies the API token.",
    )
    created.set_defaults(handler=_created_at)

    csv_cmd = sub.add_parser("parse-csv", help="Parse delimited text and print JSON.")
    csv_cmd.add_argument("path", nargs="?", default=None, help="File to read (default: stdin).")
    csv_cmd.set_defaults(handler=_parse_csv)

    data_url = sub.add_parser("decode-data-url", help="Decode a data: URL and print JSON.")
    data_url.add_argument("url")
    data_url.set_defaults(handler=_decode_data_url)

    b64 = sub.add_parser("decode-base64", help="Decode base64 to UTF-8 text.")
    b64.add_argument("text")
    b64.set_defaults(handler=_decode_base64)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args.metrics_hook = LoggingMetricsHook() if args.verbose else NoOpMetricsHook()
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
