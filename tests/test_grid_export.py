"""Tests for ansigrid.grid_export."""

import orjson

from ansigrid.grid_export import screen_to_dict, screen_to_json_bytes


def test_screen_to_dict(decode) -> None:
    grid = screen_to_dict(decode(b"\x1b[1;7;31;44mA\x1b[0m\nb", width=40))
    assert grid["width"] == 40
    assert grid["lines"] == [
        [
            {
                "char": "A",
                "fg": "#a00",
                "bg": "#00a",
                "bold": True,
                "underline": False,
                "inverse": True,
            }
        ],
        [
            {
                "char": "b",
                "fg": None,
                "bg": None,
                "bold": False,
                "underline": False,
                "inverse": False,
            }
        ],
    ]


def test_json_bytes(decode) -> None:
    data = screen_to_json_bytes(decode(b"\x1b[38;2;1;2;3mz"))
    assert data.endswith(b"\n")
    assert orjson.loads(data)["lines"][0][0]["fg"] == "#010203"


def test_json_bytes_options(decode) -> None:
    data = screen_to_json_bytes(decode(b""), opts=orjson.OPT_SORT_KEYS)
    assert data == b'{"lines":[[]],"width":80}'
