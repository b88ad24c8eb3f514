class SteamRssError(Exception):
    """Base class for errors raised by steam_rss."""

class GamesListParseError(SteamRssError):
    """The rgGames array embedded in a user's games page couldn't be decoded."""

class MalformedFeedError(SteamRssError):
    """A response served as text/xml has no <title>...</title> to label the feed with."""
