"""Tests for the page fetcher."""

import httpx
import pytest

from npb_data.exceptions import FetchError
from npb_data.config import config
from npb_data.fetchers.http import fetch_html, new_client, player_url, roster_url
from npb_data.fetchers.player import get_player_detail

URL = "https://npb.jp/bis/teams/rst_g.html"


def test_roster_url() -> None:
    assert roster_url("db") == "https://npb.jp/bis/teams/rst_db.html"
    assert roster_url("g", base_url="http://localhost:8080") == "http://localhost:8080/bis/teams/rst_g.html"


def test_player_url() -> None:
    assert player_url("11215114") == "https://npb.jp/bis/players/11215114.html"


@pytest.mark.asyncio
async def test_fetch_returns_text(make_client) -> None:
    async with make_client({"/bis/teams/rst_g.html": "<p>巨人</p>"}) as client:
        assert await fetch_html(URL, client=client) == "<p>巨人</p>"


@pytest.mark.asyncio
async def test_fetch_decodes_utf8_despite_declared_charset(transport_factory) -> None:
    transport = transport_factory(
        {"/bis/teams/rst_g.html": "<p>読売ジャイアンツ</p>"},
        content_type="text/html; charset=Shift_JIS",
    )
    async with httpx.AsyncClient(transport=transport) as client:
        assert await fetch_html(URL, client=client) == "<p>読売ジャイアンツ</p>"


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [404, 500, 503])
async def test_fetch_raises_on_error_status(make_client, status: int) -> None:
    async with make_client({"/bis/teams/rst_g.html": status}) as client:
        with pytest.raises(FetchError) as exc_info:
            await fetch_html(URL, client=client)

    assert exc_info.value.status_code == status
    assert exc_info.value.url == URL
    assert str(status) in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_wraps_transport_errors() -> None:
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(refuse)) as client:
        with pytest.raises(FetchError) as exc_info:
            await fetch_html(URL, client=client)

    assert exc_info.value.status_code is None
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
    assert "ConnectError" in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_replaces_invalid_utf8_bytes() -> None:
    def broken(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<p>\xff\xfe ok</p>")

    async with httpx.AsyncClient(transport=httpx.MockTransport(broken)) as client:
        text = await fetch_html(URL, client=client)

    assert text.startswith("<p>")
    assert text.endswith(" ok</p>")


def _moved(body: str):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/bis/players/11215114.html":
            return httpx.Response(301, headers={"Location": "/bis/players/moved.html"})
        if request.url.path == "/bis/players/moved.html":
            return httpx.Response(200, content=body.encode("utf-8"))
        return httpx.Response(404)

    return handler


@pytest.mark.asyncio
async def test_fetch_follows_redirects_on_caller_client() -> None:
    # A plain AsyncClient does not follow redirects on its own
    async with httpx.AsyncClient(transport=httpx.MockTransport(_moved("<p>移動先</p>"))) as client:
        text = await fetch_html(player_url("11215114"), client=client)

    assert text == "<p>移動先</p>"


@pytest.mark.asyncio
async def test_redirected_profile_is_parsed(player_detail_html) -> None:
    async with httpx.AsyncClient(transport=httpx.MockTransport(_moved(player_detail_html))) as client:
        detail = await get_player_detail("11215114", client=client)

    assert detail.name == "田中 将大"
    assert detail.player_id == "11215114"


@pytest.mark.asyncio
async def test_default_client_follows_redirects() -> None:
    async with new_client() as client:
        assert client.follow_redirects is True
        assert client.headers["User-Agent"] == config.scraper.user_agent
