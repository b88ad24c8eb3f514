from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

@dataclass
class Config:
    appids: List[int] = field(default_factory=list)
    urls: List[str] = field(default_factory=list)
    users: List[str] = field(default_factory=list)
    opml: bool = False
    verify: bool = False
    timeout_ms: int = 250             # milliseconds slept after every HTTP request
    verbose: bool = False
    debug: bool = False

class Origin(Enum):
    DIRECT_APPID = "appid"
    STORE_URL = "url"
    USER_SCRAPE = "user"

@dataclass(frozen=True)
class GameRecord:
    appid: int
    name: str
    friendly_url_name: Optional[str] = None

@dataclass(frozen=True)
class FeedCandidate:
    """
    A URL that may serve a Steam RSS feed.

    `fallback_url` is the friendly-name variant of the feed (e.g. /games/Portal/rss/
    instead of /games/400/rss/), tried when `url` doesn't return XML.
    `text` is the OPML label: a placeholder until verification sets the feed's title.
    """
    url: str
    origin: Origin
    fallback_url: Optional[str] = None
    text: Optional[str] = None

@dataclass(frozen=True)
class FetchResult:
    status: int
    content_type: str
    body: str

    @property
    def is_xml(self) -> bool:
        return self.content_type == "text/xml"
