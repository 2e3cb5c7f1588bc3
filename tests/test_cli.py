"""Tests for the decode_ansi command line tool."""

import orjson
import pytest

from decode_ansi import parse_args, run_decoder
from decoder_core import LogLevel
from ansigrid.charset import CodecCharset, Utf8Charset
from ansigrid.palette import PaletteName
from ansigrid.policy import ControlBytePolicy


@pytest.fixture
def art(tmp_path):
    path = tmp_path / "art.ans"
    path.write_bytes(b"\x1b[0m\x1b[5;33;42mHI\x1b[0m")
    return path


def test_defaults() -> None:
    args = parse_args([])
    assert args.input_path == "-"
    assert args.output_path is None
    assert args.output_format == "html"
    assert args.width == 80
    assert not args.strict
    assert args.palette is PaletteName.CGA16
    assert isinstance(args.charset, CodecCharset)
    assert args.charset.encoding == "cp437"
    assert args.control_bytes is ControlBytePolicy.GLYPH
    assert args.log_level is LogLevel.WARNING


def test_options() -> None:
    args = parse_args(
        ["in.ans", "-w", "132", "--strict", "-p", "xterm", "-c", "utf-8", "-f", "json"]
    )
    assert args.width == 132
    assert args.strict
    assert args.palette is PaletteName.XTERM16
    assert isinstance(args.charset, Utf8Charset)
    assert args.output_format == "json"

    config = args.decoder_config()
    assert config.width == 132
    assert config.strict


def test_unknown_charset_is_rejected() -> None:
    with pytest.raises(SystemExit):
        parse_args(["-c", "no-such-codec"])


def test_html_output(art, tmp_path) -> None:
    out = tmp_path / "art.html"
    assert run_decoder(parse_args([str(art), "-o", str(out)])) == 0
    assert out.read_text(encoding="utf-8") == (
        '<div style="color:#aaa;background-color:#000;">'
        '<span style="color:#a50;background-color:#0a0;">HI</span></div>\n'
    )


def test_text_output(art, tmp_path) -> None:
    out = tmp_path / "art.txt"
    assert run_decoder(parse_args([str(art), "-f", "text", "-o", str(out)])) == 0
    assert out.read_text(encoding="utf-8") == "HI\n"


def test_json_output(art, tmp_path) -> None:
    out = tmp_path / "art.json"
    assert run_decoder(parse_args([str(art), "-f", "json", "-o", str(out)])) == 0
    grid = orjson.loads(out.read_bytes())
    assert [cell["char"] for cell in grid["lines"][0]] == ["H", "I"]


def test_strict_failure(tmp_path) -> None:
    path = tmp_path / "bad.ans"
    path.write_bytes(b"\x1b[5z")
    out = tmp_path / "bad.html"
    assert run_decoder(parse_args([str(path), "--strict", "-o", str(out)])) == 1
    assert run_decoder(parse_args([str(path), "-o", str(out)])) == 0


def test_missing_input(tmp_path) -> None:
    assert run_decoder(parse_args([str(tmp_path / "missing.ans")])) == 1


def test_invalid_limit(art) -> None:
    assert run_decoder(parse_args([str(art), "--max-lines", "0"])) == 1


def test_column_limit(tmp_path) -> None:
    path = tmp_path / "wide.ans"
    path.write_bytes(b"\x1b[9999Cx")
    out = tmp_path / "wide.txt"
    args = parse_args([str(path), "-f", "text", "--max-columns", "5", "-o", str(out)])
    assert args.decoder_config().max_columns == 5
    assert run_decoder(args) == 0
    assert out.read_text(encoding="utf-8") == "    x\n"
