#!/usr/bin/env python3
"""Login Sentry - Entry point"""

import argparse
import json
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from login_sentry import (
    VERSION, DEFAULT_YEAR, DetectionEngine, LoginSentryError,
    build_report, load_lookup, open_source, print_report,
)
from login_sentry.patterns import AUTHORIZED_USERS_FILE, BANNED_IPS_FILE

logger = logging.getLogger('login_sentry')


def setup_logging(verbose: bool):
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Login Sentry - Detect break-in attempts in auth logs",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("source", help="Log file path or http(s) URL to scan")
    parser.add_argument("-b", "--banned", default=BANNED_IPS_FILE,
                        help=f"Banned IP list (default: {BANNED_IPS_FILE})")
    parser.add_argument("-a", "--authorized", default=AUTHORIZED_USERS_FILE,
                        help=f"Authorized user list (default: {AUTHORIZED_USERS_FILE})")
    parser.add_argument("-y", "--year", type=int, default=DEFAULT_YEAR,
                        help=f"Year for log timestamps (default: {DEFAULT_YEAR})")
    parser.add_argument("--strict", action="store_true",
                        help="Stop at the first malformed line")
    parser.add_argument("-o", "--output", help="Output file (JSON)")
    parser.add_argument("-j", "--json", action="store_true", help="JSON output only")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"LoginSentry v{VERSION}")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    console = Console()

    try:
        banned = load_lookup(args.banned)
        authorized = load_lookup(args.authorized)
        engine = DetectionEngine(banned, authorized, year=args.year, strict=args.strict)
        report = engine.scan(open_source(args.source))
    except LoginSentryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    data = build_report(report)
    if args.json:
        print(json.dumps(data, indent=2))
    else:
        print_report(report, console)

    if args.output:
        with open(args.output, 'w') as f:
            json.dump(data, f, indent=2)
        if not args.json:
            console.print(f"\n[green]Report saved to:[/] {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
