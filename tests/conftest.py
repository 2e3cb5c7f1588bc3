import pytest

from ansigrid.decoder import AnsiDecoder, DecoderConfig
from ansigrid.palette import Palette, PaletteName


@pytest.fixture
def cga() -> Palette:
    return Palette(PaletteName.CGA16)


@pytest.fixture
def decode():
    """Decode bytes with the given config overrides and return the screen."""

    def _decode(data: bytes, **config):
        return AnsiDecoder(DecoderConfig(**config)).read(data)

    return _decode
