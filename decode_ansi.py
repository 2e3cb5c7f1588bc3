import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Sequence

# ---------------------------------------------------------------------------
# Shared CLI utilities
# ---------------------------------------------------------------------------
from decoder_core import (
    LogLevel,
    STDIN_MARKER,
    charset_option,
    input_source,
    output_stream,
    setup_logging,
)

# ---------------------------------------------------------------------------
# Decoder library
# ---------------------------------------------------------------------------
from ansigrid.charset import Charset
from ansigrid.decoder import AnsiDecoder, DecoderConfig
from ansigrid.errors import AnsiDecodeError
from ansigrid.grid_export import screen_to_json_bytes
from ansigrid.markup import OutputFormat, markup_for
from ansigrid.palette import PaletteName
from ansigrid.policy import ControlBytePolicy
from ansigrid.renderer import render

JSON_FORMAT = "json"


# ---------------------------------------------------------------------------
# CLI argument parsing
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class CliArgs:
    input_path: str
    output_path: str | None
    output_format: str
    width: int
    strict: bool
    palette: PaletteName
    charset: Charset
    control_bytes: ControlBytePolicy
    max_lines: int | None
    max_columns: int | None
    max_sequence_length: int | None
    log_level: LogLevel

    def decoder_config(self) -> DecoderConfig:
        return DecoderConfig(
            width=self.width,
            strict=self.strict,
            palette=self.palette,
            charset=self.charset,
            control_bytes=self.control_bytes,
            max_sequence_length=self.max_sequence_length,
            max_lines=self.max_lines,
            max_columns=self.max_columns,
        )


def parse_args(argv: Sequence[str] | None = None) -> CliArgs:
    p = argparse.ArgumentParser("ANSI art / terminal capture converter")
    p.add_argument(
        "input_path",
        nargs="?",
        default=STDIN_MARKER,
        help=f"Input ANSI byte stream ({STDIN_MARKER}=stdin)",
    )
    p.add_argument("-o", "--output", default=None, help="Output file (default: stdout)")
    p.add_argument(
        "-f",
        "--format",
        default=OutputFormat.HTML.value,
        choices=[fmt.value for fmt in OutputFormat] + [JSON_FORMAT],
        help="Output format",
    )
    p.add_argument("-w", "--width", type=int, default=80, help="Columns before wrapping")
    p.add_argument(
        "--strict",
        action="store_true",
        help="Fail on malformed or unsupported sequences",
    )
    p.add_argument(
        "-p",
        "--palette",
        default=PaletteName.CGA16.value,
        choices=[name.value for name in PaletteName],
        help="16-color palette",
    )
    p.add_argument(
        "-c",
        "--charset",
        type=charset_option,
        default="cp437",
        help="Python codec name of the input (cp437, latin-1, utf-8, ...)",
    )
    p.add_argument(
        "--control-bytes",
        default=ControlBytePolicy.GLYPH.value,
        choices=[policy.value for policy in ControlBytePolicy],
        help="Treatment of unhandled control bytes",
    )
    p.add_argument("--max-lines", type=int, default=None, help="Screen height limit")
    p.add_argument(
        "--max-columns", type=int, default=None, help="Rightmost cursor column limit"
    )
    p.add_argument(
        "--max-sequence-length",
        type=int,
        default=None,
        help="Longest accepted escape sequence body",
    )
    p.add_argument(
        "-l",
        "--log-level",
        default=LogLevel.WARNING.value,
        choices=[lvl.value for lvl in LogLevel],
        help="Logging level",
    )
    ns = p.parse_args(argv)
    return CliArgs(
        input_path=ns.input_path,
        output_path=ns.output,
        output_format=ns.format,
        width=ns.width,
        strict=ns.strict,
        palette=PaletteName(ns.palette),
        charset=ns.charset,
        control_bytes=ControlBytePolicy(ns.control_bytes),
        max_lines=ns.max_lines,
        max_columns=ns.max_columns,
        max_sequence_length=ns.max_sequence_length,
        log_level=LogLevel(ns.log_level),
    )


# ---------------------------------------------------------------------------
# Decoder runner
# ---------------------------------------------------------------------------


def convert(args: CliArgs) -> bytes:
    """Decode the input and return the encoded output document."""
    decoder = AnsiDecoder(args.decoder_config())
    screen = decoder.read(input_source(args.input_path))
    if args.output_format == JSON_FORMAT:
        return screen_to_json_bytes(screen)
    markup = markup_for(args.output_format, decoder.palette)
    return (render(screen, markup) + "\n").encode("utf-8")


def run_decoder(args: CliArgs) -> int:
    """Convert the input and write it to the output - returns an exit status."""
    setup_logging(args.log_level)

    try:
        data = convert(args)
        out = output_stream(args.output_path)
        try:
            out.write(data)
            out.flush()
        finally:
            if args.output_path not in (None, STDIN_MARKER):
                out.close()
        return 0

    except KeyboardInterrupt:
        return 0  # graceful termination

    except (AnsiDecodeError, OSError, ValueError) as exc:
        logging.error("Conversion failed: %s", exc)
        return 1


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: Sequence[str] | None = None) -> None:  # pragma: no cover
    sys.exit(run_decoder(parse_args(argv)))


if __name__ == "__main__":
    main()
