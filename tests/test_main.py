import pytest
import requests

from steam_rss import main as main_mod

from .conftest import FakeResponse, FakeSession, feed_xml

FEED_400 = "https://steamcommunity.com/games/400/rss/"


@pytest.fixture
def session(monkeypatch):
    s = FakeSession()
    monkeypatch.setattr(main_mod, "http_session", lambda: s)
    return s


def test_no_inputs_is_success(session, capsys):
    assert main_mod.main([]) == 0
    assert capsys.readouterr().out == ""


def test_plain_output(session, capsys):
    assert main_mod.main(["--appid", "400", "--appid", "400"]) == 0
    assert capsys.readouterr().out == FEED_400 + "\n" + FEED_400 + "\n"


def test_verified_opml_is_idempotent(session, capsys):
    session.routes[FEED_400] = FakeResponse(200, "text/xml", feed_xml("Portal"))
    argv = ["--appid", "400", "--verify", "--opml", "--timeout", "0"]
    assert main_mod.main(argv) == 0
    first = capsys.readouterr().out
    assert main_mod.main(argv) == 0
    assert capsys.readouterr().out == first
    assert 'xmlUrl="https://steamcommunity.com/games/400/rss/"' in first
    assert 'text="Portal"' in first


def test_transport_error_exits_nonzero(session, capsys):
    session.routes[FEED_400] = requests.ConnectionError("connection refused")
    assert main_mod.main(["--appid", "400", "--verify", "-t", "0"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error: connection refused" in captured.err
