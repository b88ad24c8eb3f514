import argparse
from typing import List, Optional

from . import __version__
from .models import Config

DEFAULT_TIMEOUT_MS = 250

def _non_negative_int(raw: str) -> int:
    try:
        val = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a whole number: {raw!r}")
    if val < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {val}")
    return val

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="steam-rss",
        description="Get RSS feeds for Steam games.",
    )
    ap.add_argument("-a", "--appid", type=_non_negative_int, action="append", default=[],
                    help="A game's AppID, can be used multiple times.")
    ap.add_argument("--url", action="append", default=[],
                    help="A game's store URL, can be used multiple times.")
    ap.add_argument("--user", action="append", default=[],
                    help="A person's steamcommunity.com ID or full URL, can be used multiple times.")
    ap.add_argument("--opml", action="store_true", help="Output the feeds as OPML.")
    ap.add_argument("-v", "--verify", action="store_true",
                    help="Verify potential feeds by downloading them and checking if they return XML.")
    ap.add_argument("-t", "--timeout", type=_non_negative_int, default=DEFAULT_TIMEOUT_MS,
                    help=f"The time in milliseconds to sleep between HTTP requests (default: {DEFAULT_TIMEOUT_MS}).")
    ap.add_argument("--verbose", action="store_true", help="Enable verbose logs (INFO).")
    ap.add_argument("--debug", action="store_true", help="Enable debug logs (very chatty).")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap

def parse_config(argv: Optional[List[str]] = None) -> Config:
    args = build_parser().parse_args(argv)
    return Config(
        appids=args.appid,
        urls=args.url,
        users=args.user,
        opml=args.opml,
        verify=args.verify,
        timeout_ms=args.timeout,
        verbose=args.verbose,
        debug=args.debug,
    )
