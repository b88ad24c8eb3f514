from dataclasses import replace
from typing import Iterable, List, Optional

from .errors import MalformedFeedError
from .input_parser import appid_from_store_url, resolve_user
from .models import Config, FeedCandidate, FetchResult, Origin
from .steam_fetch import scrape_user_games
from .utils import SteamClient, feed_url_for_appid

TITLE_OPEN, TITLE_CLOSE = "<title>", "</title>"

def appid_candidate(appid: int, origin: Origin) -> FeedCandidate:
    return FeedCandidate(
        url=feed_url_for_appid(appid),
        origin=origin,
        text=f"Steam AppID {appid}",
    )

def collect_candidates(client: SteamClient, appids: Iterable[int], urls: Iterable[str],
                       users: Iterable[str], logger) -> List[FeedCandidate]:
    """
    Turn the raw inputs into feed candidates: appids, then store URLs, then users.
    Nothing is de-duplicated; the same AppID given twice yields two candidates.
    """
    out: List[FeedCandidate] = []

    for appid in appids:
        out.append(appid_candidate(appid, Origin.DIRECT_APPID))

    for url in urls:
        appid = appid_from_store_url(url)
        if appid is None:
            logger.debug(f"Not a store URL — skipping: {url!r}")
            continue
        out.append(appid_candidate(appid, Origin.STORE_URL))

    for user in users:
        userid = resolve_user(user)
        if userid is None:
            logger.debug(f"Not a Steam user ID or profile URL — skipping: {user!r}")
            continue
        for g in scrape_user_games(client, userid, logger):
            out.append(FeedCandidate(
                url=feed_url_for_appid(g.appid),
                origin=Origin.USER_SCRAPE,
                fallback_url=feed_url_for_appid(g.friendly_url_name) if g.friendly_url_name else None,
                text=g.name,
            ))

    return out

def extract_title(body: str) -> str:
    """Text between the first <title> and the first </title> after it. Not XML-aware."""
    start = body.find(TITLE_OPEN)
    if start == -1:
        raise MalformedFeedError(f"no {TITLE_OPEN} in feed body")
    start += len(TITLE_OPEN)
    end = body.find(TITLE_CLOSE, start)
    if end == -1:
        raise MalformedFeedError(f"no {TITLE_CLOSE} in feed body")
    return body[start:end]

def verify_candidate(client: SteamClient, cand: FeedCandidate, logger) -> Optional[FeedCandidate]:
    """
    Returns the confirmed candidate (possibly moved to its friendly URL and
    relabelled with the feed title), or None if it should be dropped.
    """
    fetched = cand.url
    res: FetchResult = client.get(fetched)
    if not res.is_xml and cand.fallback_url:
        # Some games only serve their feed under the friendly name.
        fetched = cand.fallback_url
        res = client.get(fetched)
        if res.is_xml:
            cand = replace(cand, url=cand.fallback_url)
    if not res.is_xml:
        logger.debug(f"Not a feed ({res.content_type or 'no content type'}): {fetched}")
        return None

    try:
        title = extract_title(res.body)
    except MalformedFeedError as e:
        logger.warning(f"Malformed feed body at {cand.url}: {e}")
        return None
    return replace(cand, text=title)

def verify_candidates(client: SteamClient, candidates: List[FeedCandidate], logger) -> List[FeedCandidate]:
    verified = []
    total = len(candidates)
    for i, cand in enumerate(candidates, 1):
        v = verify_candidate(client, cand, logger)
        if v is not None:
            verified.append(v)
        logger.info(f"{i} of {total} processed.")
    return verified

def run_pipeline(cfg: Config, client: SteamClient, logger) -> List[FeedCandidate]:
    candidates = collect_candidates(client, cfg.appids, cfg.urls, cfg.users, logger)
    logger.info(f"Collected {len(candidates)} potential feed(s).")
    if not cfg.verify:
        return candidates
    logger.info(f"Verifying {len(candidates)} potential feed(s)…")
    return verify_candidates(client, candidates, logger)
