"""
Pytest configuration and shared fixtures.

Provides fixture HTML modelled on the npb.jp roster and profile pages, and
an ``httpx.MockTransport``-backed client factory so scraper tests never
touch the network. Tests that do hit npb.jp are marked ``live``.

Usage:
    @pytest.mark.asyncio
    async def test_something(make_client, roster_html):
        async with make_client({"/bis/teams/rst_g.html": roster_html}) as client:
            players = await get_team_roster("g", client=client)
"""

from collections.abc import Callable

import httpx
import pytest

# ============================================================================
# Fixture HTML
# ============================================================================

_HEAD_CELLS = "<th>生年月日</th><th>身長</th><th>体重</th><th>投</th><th>打</th><th>備考</th>"


def header_row(label: str) -> str:
    return f'<tr class="rosterMainHead"><th>背番号</th><th class="rosterPos">{label}</th>{_HEAD_CELLS}</tr>'


def player_row(
    number: str,
    name: str,
    href: str | None,
    note: str | None = "",
    row_class: str = "rosterPlayer",
) -> str:
    name_cell = f'<a href="{href}">{name}</a>' if href is not None else name
    note_cell = f"<td>{note}</td>" if note is not None else ""
    return (
        f'<tr class="{row_class}">'
        f"<td>{number}</td><td>{name_cell}</td>"
        "<td>1990.04.01</td><td>180</td><td>85</td><td>右</td><td>左</td>"
        f"{note_cell}</tr>"
    )


def roster_page(*tables: str) -> str:
    body = "".join(f'<table class="rosterlisttbl">{t}</table>' for t in tables)
    return (
        '<!DOCTYPE html><html><head><meta charset="utf-8"><title>選手一覧</title></head>'
        "<body><table class=\"nav\"><tr><td>ナビ</td><td>x</td></tr></table>"
        f"{body}</body></html>"
    )


GIANTS_ACTIVE_TABLE = "".join(
    [
        header_row("監督"),
        # Manager: eight cells but no profile link
        player_row("83", "阿部　慎之助", None),
        header_row("投手"),
        player_row("11", "田中　将大", "/bis/players/11215114.html"),
        player_row(
            "15",
            "ケラー",
            "/bis/players/51555138.html",
            note="2025.07.01 自由契約",
            row_class="rosterRetire",
        ),
        # Malformed: only five cells
        '<tr class="rosterPlayer"><td>99</td><td><a href="/bis/players/99999999.html">欠損</a></td>'
        "<td>1990.01.01</td><td>180</td><td>80</td></tr>",
        header_row("捕手"),
        player_row("27", "岸田　行倫", "/bis/players/41045148.html", note=None),
        header_row("内野手"),
        player_row("6", "坂本\n        勇人", "/bis/players/11815133.html"),
        header_row("外野手"),
        player_row("8", "丸　佳浩", "/bis/players/01105136.html"),
    ]
)

GIANTS_DEVELOPMENTAL_TABLE = "".join(
    [
        # Row before any section header has no position
        player_row("001", "見出し前", "/bis/players/00000001.html"),
        header_row("投手"),
        player_row("011", "育成　太郎", "/bis/players/31335153.html"),
        header_row("外野手"),
        # Link present but not a profile link
        player_row("022", "リンク違い", "/bis/teams/index_g.html"),
    ]
)

GIANTS_ROSTER_HTML = roster_page(GIANTS_ACTIVE_TABLE, GIANTS_DEVELOPMENTAL_TABLE)

PLAYER_DETAIL_HTML = """<!DOCTYPE html>
<html><head><meta charset="utf-8"><title>田中 将大（読売ジャイアンツ） | 個人年度別成績 | NPB.jp</title></head>
<body>
<div id="pc_v_photo"></div>
<ul id="pc_v_name_header">
  <li id="pc_v_no">11</li>
  <li id="pc_v_name">田中　将大</li>
  <li id="pc_v_kana">たなか・まさひろ</li>
  <li id="pc_v_team">読売ジャイアンツ</li>
</ul>
</body></html>
"""

EMPTY_PLAYER_HTML = "<html><body><p>ページが見つかりません</p></body></html>"


def simple_roster_html(code: str, names: list[str]) -> str:
    """One pitcher section per team, with per-team unique IDs."""
    rows = [header_row("投手")]
    for i, name in enumerate(names):
        rows.append(player_row(str(i + 10), name, f"/bis/players/{code}{i:04d}.html"))
    return roster_page("".join(rows), header_row("投手"))


# ============================================================================
# HTTP Fixtures
# ============================================================================


class RecordingTransport(httpx.MockTransport):
    """MockTransport that serves pages by path and records every request."""

    def __init__(self, pages: dict[str, str | int], content_type: str = "text/html; charset=utf-8"):
        self.pages = pages
        self.requested: list[str] = []
        self.content_type = content_type
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requested.append(request.url.path)
        page = self.pages.get(request.url.path)
        if page is None:
            return httpx.Response(404, content=b"not found")
        if isinstance(page, int):
            return httpx.Response(page, content=b"error")
        return httpx.Response(
            200,
            content=page.encode("utf-8"),
            headers={"Content-Type": self.content_type},
        )


@pytest.fixture
def transport_factory() -> Callable[..., RecordingTransport]:
    return RecordingTransport


@pytest.fixture
def make_client() -> Callable[..., httpx.AsyncClient]:
    """
    Build an AsyncClient over a RecordingTransport.

    The transport is reachable as ``client._transport`` for request
    assertions; prefer passing your own RecordingTransport via ``transport=``.
    """

    def _make(pages: dict[str, str | int] | None = None, transport: httpx.MockTransport | None = None):
        return httpx.AsyncClient(transport=transport or RecordingTransport(pages or {}))

    return _make


@pytest.fixture
def giants_roster_html() -> str:
    return GIANTS_ROSTER_HTML


@pytest.fixture
def player_detail_html() -> str:
    return PLAYER_DETAIL_HTML
