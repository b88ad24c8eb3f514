#!/usr/bin/env python3
import sys
from typing import List, Optional

import requests

from .cli import parse_config
from .errors import SteamRssError
from .pipeline import run_pipeline
from .reporting import emit_feeds
from .utils import SteamClient, http_session, setup_logger

def main(argv: Optional[List[str]] = None) -> int:
    cfg = parse_config(argv)
    logger = setup_logger(verbose=cfg.verbose, debug=cfg.debug)
    client = SteamClient(http_session(), delay=cfg.timeout_ms / 1000.0)
    try:
        feeds = run_pipeline(cfg, client, logger)
    except (SteamRssError, requests.RequestException) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    emit_feeds(feeds, cfg.opml, sys.stdout, logger)
    return 0

if __name__ == "__main__":
    sys.exit(main())
