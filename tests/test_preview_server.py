"""Tests for the ansi_preview_server FastAPI app."""

import pytest
from fastapi.testclient import TestClient

from ansi_preview_server import MAX_COLUMNS, build_app, parse_args


@pytest.fixture
def client() -> TestClient:
    return TestClient(build_app(["*"]))


def test_index(client) -> None:
    res = client.get("/")
    assert res.status_code == 200
    assert "text/html" in res.headers["content-type"]
    assert "<title>ANSI preview</title>" in res.text


def test_render(client) -> None:
    res = client.post("/render", content=b"\x1b[0m\x1b[5;30;42mHI\x1b[0m")
    assert res.status_code == 200
    assert res.text == (
        '<div style="color:#aaa;background-color:#000;">'
        '<span style="color:#000;background-color:#0a0;">HI</span></div>'
    )


def test_render_options(client) -> None:
    res = client.post(
        "/render",
        params={"palette": "xterm", "charset": "latin-1", "width": 1},
        content=b"\x1b[33m\xae\xaf",
    )
    assert res.status_code == 200
    assert '<span style="color:#808000;">®</span>\n' in res.text
    assert '<span style="color:#808000;">¯</span>' in res.text


def test_grid(client) -> None:
    res = client.post("/grid", content=b"\x1b[31mA")
    assert res.status_code == 200
    assert res.headers["content-type"] == "application/json"
    assert res.json()["lines"][0][0]["fg"] == "#a00"


def test_strict_errors_map_to_422(client) -> None:
    res = client.post("/render", params={"strict": "true"}, content=b"\x1b[5z")
    assert res.status_code == 422
    assert "unrecognized CSI final byte" in res.json()["detail"]


def test_unknown_charset(client) -> None:
    res = client.post("/grid", params={"charset": "no-such-codec"}, content=b"x")
    assert res.status_code == 400


def test_unknown_palette(client) -> None:
    res = client.post("/render", params={"palette": "vga"}, content=b"x")
    assert res.status_code == 422


def test_parse_args() -> None:
    args = parse_args(["--port", "9000", "--cors", "http://localhost"])
    assert args.port == 9000
    assert args.cors == ["http://localhost"]
    assert args.host == "127.0.0.1"


def test_server_defaults() -> None:
    app = build_app(["*"], width=1, palette="xterm", charset="latin-1")
    res = TestClient(app).post("/render", content=b"\x1b[33m\xae\xaf")
    assert '<span style="color:#808000;">®</span>\n' in res.text


def test_unknown_default_charset() -> None:
    with pytest.raises(ValueError):
        build_app(["*"], charset="no-such-codec")


def test_parse_args_defaults() -> None:
    args = parse_args(["-w", "132", "-p", "xterm", "-c", "utf-8"])
    assert (args.width, args.palette, args.charset) == (132, "xterm", "utf-8")


def test_cursor_floods_are_bounded(client) -> None:
    res = client.post("/grid", content=b"\x1b[30000000Cx\x1b[3000000By")
    assert res.status_code == 200
    lines = res.json()["lines"]
    # the write at the last column wraps, then the line limit ends the session
    assert len(lines) == 2
    assert len(lines[0]) == MAX_COLUMNS
    assert lines[0][-1]["char"] == "x"


def test_long_sequences_are_dropped(client) -> None:
    res = client.post("/render", content=b"\x1b[" + b"1;" * 100 + b"31mX")
    assert res.status_code == 200
    assert '<span style="color:#aaa;">X</span>' in res.text
