import re
from typing import Optional

STORE_URL_RE = re.compile(r"^https?://store\.steampowered\.com/app/(?P<appid>[0-9]+)", re.IGNORECASE)
USER_ID_RE = re.compile(r"\w+", re.IGNORECASE)
USER_URL_RE = re.compile(r"https?://steamcommunity\.com/id/(?P<userid>\w+)", re.IGNORECASE)

def appid_from_store_url(url: str) -> Optional[int]:
    m = STORE_URL_RE.match(url)
    if not m:
        return None
    return int(m.group("appid"))

def looks_like_user_id(text: str) -> bool:
    return USER_ID_RE.fullmatch(text) is not None

def userid_from_profile_url(url: str) -> Optional[str]:
    m = USER_URL_RE.search(url)
    return m.group("userid") if m else None

def resolve_user(value: str) -> Optional[str]:
    """
    Accepts a bare vanity ID ("gabelogannewell") or any string containing
    https://steamcommunity.com/id/<vanity>. Returns None for anything else.
    """
    if looks_like_user_id(value):
        return value
    return userid_from_profile_url(value)
