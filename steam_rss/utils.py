import logging, time
from typing import Callable, Union
import requests

from .models import FetchResult

UA = "Steam Feeds (https://git.bauke.xyz/Bauke/steam-rss)"

FEED_URL = "https://steamcommunity.com/games/{appid}/rss/"
USER_GAMES_URL = "https://steamcommunity.com/id/{userid}/games/?tab=all"

def feed_url_for_appid(appid: Union[int, str]) -> str:
    """Accepts a numeric AppID or a friendly URL name, both work as the path token."""
    return FEED_URL.format(appid=appid)

def games_url_for_userid(userid: str) -> str:
    return USER_GAMES_URL.format(userid=userid)

def setup_logger(verbose: bool=False, debug: bool=False) -> logging.Logger:
    level = logging.WARNING
    if verbose: level = logging.INFO
    if debug:   level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-7s | %(message)s",
        datefmt="%H:%M:%S"
    )
    return logging.getLogger("steam_rss")

def http_session() -> requests.Session:
    s = requests.Session()
    s.headers.update({"User-Agent": UA})
    return s

def response_text(r: requests.Response) -> str:
    # requests assumes ISO-8859-1 for text/* without a charset; Steam serves UTF-8
    if "charset=" not in r.headers.get("Content-Type", "").lower():
        r.encoding = "utf-8"
    return r.text

def media_type(header: str) -> str:
    # "text/xml; charset=utf-8" -> "text/xml"
    return (header or "").split(";", 1)[0].strip().lower()

class SteamClient:
    """
    The one HTTP client of a run. Every GET is followed by a fixed sleep so we
    stay polite towards steamcommunity.com, whatever the response was.
    """

    def __init__(self, session: requests.Session, delay: float,
                 sleep: Callable[[float], None] = time.sleep, timeout: int = 30):
        self.session = session
        self.delay = delay
        self.timeout = timeout
        self._sleep = sleep
        self.logger = logging.getLogger("steam_rss.http")

    def get(self, url: str) -> FetchResult:
        try:
            r = self.session.get(url, timeout=self.timeout)
            r.raise_for_status()
            res = FetchResult(
                status=r.status_code,
                content_type=media_type(r.headers.get("Content-Type", "")),
                body=response_text(r),
            )
            self.logger.debug(f"GET {url} -> {res.status} {res.content_type or '(no content type)'}")
            return res
        finally:
            if self.delay > 0:
                self._sleep(self.delay)
