import xml.etree.ElementTree as ET
from typing import Iterable, List, TextIO, Tuple

from .models import FeedCandidate

def build_opml(entries: Iterable[Tuple[str, str]]) -> str:
    """Serialize (title, feed URL) pairs as an OPML 2.0 subscription list."""
    root = ET.Element("opml", version="2.0")
    body = ET.SubElement(root, "body")
    for title, url in entries:
        ET.SubElement(body, "outline", text=title, title=title, type="rss", xmlUrl=url)
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + ET.tostring(root, encoding="unicode")

def emit_feeds(feeds: List[FeedCandidate], opml: bool, out: TextIO, logger) -> int:
    """Write the feeds to `out`. Returns how many were written."""
    if not feeds:
        logger.warning("No feeds found.")
        return 0

    if opml:
        print(build_opml((f.text or f.url, f.url) for f in feeds), file=out)
    else:
        for f in feeds:
            print(f.url, file=out)
    return len(feeds)
