import argparse
import logging
import sys
from typing import Sequence

import uvicorn
from fastapi import FastAPI, HTTPException, Query, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, ORJSONResponse

# --- shared core -----------------------------------------------------------
from decoder_core import LogLevel, charset_option, setup_logging

# --- decoder library -------------------------------------------------------
from ansigrid.decoder import AnsiDecoder, DecoderConfig
from ansigrid.errors import AnsiDecodeError
from ansigrid.grid_export import screen_to_json_bytes
from ansigrid.markup import HtmlMarkup
from ansigrid.palette import PaletteName
from ansigrid.policy import ControlBytePolicy
from ansigrid.renderer import render
from ansigrid.screen import Screen

MAX_UPLOAD_BYTES = 4 * 1024 * 1024

# uploads come from the network, so every session is bounded
MAX_LINES = 10_000
MAX_COLUMNS = 1_000
MAX_SEQUENCE_LENGTH = 64


# ---------------------------------------------------------------------------
# HTML (upload + preview UI)
# ---------------------------------------------------------------------------
INDEX_HTML = """<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>ANSI preview</title>
    <style>
      :root {
        --bg: #1e1e1e;
        --fg: #e0e0e0;
        --panel-border: #444;
        --accent: #479cff;
      }
      html,
      body {
        margin: 0;
        background: var(--bg);
        color: var(--fg);
        font-family: system-ui, sans-serif;
      }
      form {
        display: flex;
        gap: 0.6rem;
        align-items: center;
        padding: 0.6rem 0.8rem;
        border-bottom: 1px solid var(--panel-border);
      }
      button {
        background: var(--accent);
        color: #fff;
        border: none;
        padding: 0.3rem 0.8rem;
        cursor: pointer;
      }
      #art {
        padding: 1rem;
      }
      #art > div {
        display: inline-block;
        white-space: pre;
        font-family: "Perfect DOS VGA 437", "Courier New", monospace;
        line-height: 1;
      }
    </style>
  </head>
  <body>
    <form id="upload">
      <input type="file" id="file" />
      <label>Width <input type="number" id="width" value="80" min="1" /></label>
      <label>
        Palette
        <select id="palette">
          <option value="cga">CGA</option>
          <option value="xterm">xterm</option>
        </select>
      </label>
      <label>
        Charset
        <select id="charset">
          <option value="cp437">CP437</option>
          <option value="latin-1">ISO-8859-1</option>
          <option value="utf-8">UTF-8</option>
        </select>
      </label>
      <button type="submit">Render</button>
    </form>
    <main id="art"></main>
    <script>
      document.getElementById("upload").addEventListener("submit", async (ev) => {
        ev.preventDefault();
        const file = document.getElementById("file").files[0];
        if (!file) return;
        const params = new URLSearchParams({
          width: document.getElementById("width").value,
          palette: document.getElementById("palette").value,
          charset: document.getElementById("charset").value,
        });
        const res = await fetch(`/render?${params}`, {
          method: "POST",
          body: await file.arrayBuffer(),
        });
        const art = document.getElementById("art");
        if (res.ok) {
          art.innerHTML = await res.text();
        } else {
          art.textContent = (await res.json()).detail;
        }
      });
    </script>
  </body>
</html>"""

# ---------------------------------------------------------------------------
# CLI / argparse helpers
# ---------------------------------------------------------------------------


def parse_args(argv: Sequence[str] | None = None):
    p = argparse.ArgumentParser("ANSI Preview Server")
    p.add_argument("--host", default="127.0.0.1", help="Bind host (default: 127.0.0.1)")
    p.add_argument("--port", type=int, default=8000, help="Web server port")
    p.add_argument(
        "--cors",
        nargs="*",
        default=["*"],
        help="Allowed CORS origins (default: '*')",
    )
    p.add_argument("-w", "--width", type=int, default=80, help="Default render width")
    p.add_argument(
        "-p",
        "--palette",
        default=PaletteName.CGA16.value,
        choices=[name.value for name in PaletteName],
        help="Default 16-color palette",
    )
    p.add_argument(
        "-c",
        "--charset",
        default="cp437",
        help="Default Python codec name of uploads (cp437, latin-1, utf-8, ...)",
    )
    p.add_argument(
        "-l",
        "--log-level",
        default=LogLevel.INFO.value,
        choices=[lvl.value for lvl in LogLevel],
        help="Logging level",
    )
    return p.parse_args(argv)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def decode_body(
    body: bytes, width: int, palette: PaletteName, charset: str, strict: bool
) -> tuple[Screen, AnsiDecoder]:
    """Decode an uploaded byte stream, mapping failures to HTTP errors."""
    if len(body) > MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail="Upload too large")
    try:
        config = DecoderConfig(
            width=width,
            strict=strict,
            palette=palette,
            charset=charset_option(charset),
            control_bytes=ControlBytePolicy.GLYPH,
            max_sequence_length=MAX_SEQUENCE_LENGTH,
            max_lines=MAX_LINES,
            max_columns=MAX_COLUMNS,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    decoder = AnsiDecoder(config)
    try:
        return decoder.read(body), decoder
    except AnsiDecodeError as exc:
        logging.info("Rejected upload: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc


# ---------------------------------------------------------------------------
# FastAPI app factory
# ---------------------------------------------------------------------------


def build_app(
    allowed_origins: list[str],
    width: int = 80,
    palette: PaletteName = PaletteName.CGA16,
    charset: str = "cp437",
) -> FastAPI:
    """Create the app; *width*, *palette* and *charset* are the query defaults."""
    palette = PaletteName(palette)
    charset_option(charset)  # unknown codecs fail at startup

    app = FastAPI(title="ANSI Preview Server", default_response_class=ORJSONResponse)

    # CORS ------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # Routes ----------------------------------------------------------------
    @app.get("/", response_class=HTMLResponse)
    async def index(_: Request):
        return HTMLResponse(INDEX_HTML)

    @app.post("/render", response_class=HTMLResponse)
    async def render_html(
        request: Request,
        width: int = Query(width),
        palette: PaletteName = Query(palette),
        charset: str = Query(charset),
        strict: bool = Query(False),
    ):
        """Return the uploaded ANSI stream as an HTML fragment."""
        screen, decoder = decode_body(
            await request.body(), width, palette, charset, strict
        )
        return HTMLResponse(render(screen, HtmlMarkup(decoder.palette)))

    @app.post("/grid", response_class=Response)
    async def grid(
        request: Request,
        width: int = Query(width),
        palette: PaletteName = Query(palette),
        charset: str = Query(charset),
        strict: bool = Query(False),
    ):
        """Return the decoded cells as JSON (bytes, UTF-8)."""
        screen, _ = decode_body(await request.body(), width, palette, charset, strict)
        return Response(screen_to_json_bytes(screen), media_type="application/json")

    return app


# ---------------------------------------------------------------------------
# Main routine
# ---------------------------------------------------------------------------


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(LogLevel(args.log_level))

    logging.info("ANSI preview 👉 http://%s:%d", args.host, args.port)

    try:
        uvicorn.run(
            build_app(args.cors, args.width, args.palette, args.charset),
            host=args.host,
            port=args.port,
            log_level="info",
        )
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
