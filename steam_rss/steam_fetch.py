import json
import re
from typing import List, Optional

from .errors import GamesListParseError
from .models import GameRecord
from .utils import SteamClient, games_url_for_userid

# Greedy: the array runs up to the last "];" on its line that is followed by
# another "var" declaration on the page.
RG_GAMES_REGEX = re.compile(r"var rgGames = (?P<json>\[.+\]);\s+var")

def parse_games_list(html: str) -> Optional[List[GameRecord]]:
    """
    Pull the rgGames array out of a steamcommunity.com/id/<user>/games page.

    Returns None when the page has no such array (private profile or changed
    layout). Raises GamesListParseError when the array is there but isn't the
    JSON we expect.
    """
    m = RG_GAMES_REGEX.search(html)
    if not m:
        return None
    try:
        arr = json.loads(m.group("json"))
    except json.JSONDecodeError as e:
        raise GamesListParseError(f"Couldn't decode rgGames JSON: {e}") from e
    if not isinstance(arr, list):
        raise GamesListParseError("rgGames is not a JSON array")

    games = []
    for g in arr:
        try:
            appid, name = g["appid"], g["name"]
        except (KeyError, TypeError) as e:
            raise GamesListParseError(f"Unexpected rgGames entry: {g!r}") from e
        if isinstance(appid, bool) or not isinstance(appid, int) or not isinstance(name, str):
            raise GamesListParseError(f"Unexpected rgGames entry: {g!r}")
        # friendlyURL is `false` for most games
        friendly = g.get("friendlyURL")
        games.append(GameRecord(
            appid=appid,
            name=name,
            friendly_url_name=friendly if isinstance(friendly, str) and friendly else None,
        ))
    return games

def scrape_user_games(client: SteamClient, userid: str, logger) -> List[GameRecord]:
    url = games_url_for_userid(userid)
    logger.info(f"Fetching games for user {userid} …")
    body = client.get(url).body
    games = parse_games_list(body)
    if games is None:
        logger.warning(f"Couldn't scan games from: {url}")
        logger.warning('Make sure "Game Details" in Privacy Settings is set to Public.')
        return []
    logger.debug(f"rgGames parsed {len(games)} games from {url}")
    return games
