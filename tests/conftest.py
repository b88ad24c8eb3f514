import logging

import pytest
import requests

from steam_rss.utils import SteamClient


class FakeResponse:
    def __init__(self, status_code=200, content_type="text/html", text=""):
        self.status_code = status_code
        self.headers = {"Content-Type": content_type} if content_type else {}
        self.text = text

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


def real_response(content_type, body: bytes, status_code=200):
    """A requests.Response built the way HTTPAdapter.build_response fills it in."""
    r = requests.Response()
    r.status_code = status_code
    r.headers["Content-Type"] = content_type
    r._content = body
    r.encoding = requests.utils.get_encoding_from_headers(r.headers)
    return r


class FakeSession:
    """Serves canned responses by URL and records every request in order."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append(url)
        route = self.routes.get(url)
        if route is None:
            return FakeResponse(404, "text/html", "Not Found")
        if isinstance(route, Exception):
            raise route
        return route


class SleepRecorder:
    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)


@pytest.fixture
def logger():
    return logging.getLogger("steam_rss.tests")


@pytest.fixture
def sleeps():
    return SleepRecorder()


@pytest.fixture
def make_client(sleeps):
    def _make(routes=None, delay=0.25):
        return SteamClient(FakeSession(routes), delay=delay, sleep=sleeps)
    return _make


def feed_xml(title):
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        f'<rss version="2.0"><channel><title>{title}</title>'
        "<item><title>Patch notes</title></item></channel></rss>"
    )


def games_page(games_json):
    return (
        "<html><script>\n"
        f"\t\tvar rgGames = {games_json};\n"
        "\t\tvar rgCards = [];\n"
        "</script></html>"
    )
