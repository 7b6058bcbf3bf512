import logging
import struct

import pytest

from bmpcanvas import Canvas
from bmpcanvas.buffer import DrawBitmap, WHITE
from bmpcanvas.fonts.font2bf2 import write_bf2
from bmpcanvas.text import BF2Font, TextRenderer

from .helpers import painted

# 10x3 glyph: top row has the leftmost and rightmost pixels, bottom row x=4
WIDE_A = bytes([0x80, 0x40, 0x00, 0x00, 0x08, 0x00])


@pytest.fixture
def wide_font(tmp_path):
    path = tmp_path / "wide.bf2"
    glyphs = {ord("A"): {"width": 10, "data": WIDE_A}}
    write_bf2(path, glyphs, {"height": 3, "max_width": 10})
    return path


def test_header_and_index(wide_font):
    with BF2Font(str(wide_font)) as font:
        assert font.max_w == 10
        assert font.height == 3
        assert font.bpr == 2
        assert font.count == 1
        assert not font.prop
        width, offset = font.get(ord("A"))
        assert offset == 0
        assert font.read(offset) == WIDE_A
        assert font.get(ord("B")) is None


def test_invalid_magic(tmp_path):
    path = tmp_path / "bad.bf2"
    path.write_bytes(b"XX" + bytes(10))
    with pytest.raises(ValueError):
        BF2Font(str(path))


def test_truncated_header(tmp_path):
    path = tmp_path / "short.bf2"
    path.write_bytes(b"B2\x01\x00")
    with pytest.raises(ValueError, match="Invalid BF2"):
        BF2Font(str(path))


def test_truncated_index(tmp_path):
    path = tmp_path / "noindex.bf2"
    # Header claims two 6-byte entries, only one follows
    header = struct.pack("<2sBBBBHBBH", b"B2", 1, 0, 8, 1, 2, 1, 8, 0)
    path.write_bytes(header + struct.pack("<HB", ord("!"), 8) + bytes(3))
    with pytest.raises(ValueError, match="truncated index"):
        BF2Font(str(path))


def test_truncated_glyph_data(wide_font):
    wide_font.write_bytes(wide_font.read_bytes()[:-4])
    with BF2Font(str(wide_font)) as font:
        with pytest.raises(ValueError, match="truncated glyph"):
            font.read(font.get(ord("A"))[1])
        with pytest.raises(ValueError):
            font.to_atlas()


def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        BF2Font(str(tmp_path / "missing.bf2"))


def test_to_atlas(wide_font):
    with BF2Font(str(wide_font)) as font:
        atlas = font.to_atlas()
    assert (atlas.width, atlas.height, atlas.first) == (10, 3, 32)
    assert len(atlas) == 95
    assert atlas.glyph(atlas.index_of("B")) is None
    # 30 bits packed contiguously, columns mirrored
    glyph = atlas.glyph(atlas.index_of("A"))
    assert len(glyph) == 4
    bits = int.from_bytes(glyph, "big") >> 2
    expected = (1 << (29 - 9)) | (1 << (29 - 0)) | (1 << (29 - (20 + 5)))
    assert bits == expected


def test_proportional_font_uses_fixed_grid(tmp_path, caplog):
    path = tmp_path / "prop.bf2"
    header = struct.pack("<2sBBBBHBBH", b"B2", 1, 0x01, 8, 1, 1, 1, 4, 0)
    entry = struct.pack("<HB", ord("!"), 3) + (0).to_bytes(3, "little")
    path.write_bytes(header + entry + b"\x80")

    with caplog.at_level(logging.INFO, logger="bmpcanvas.text.bf2"):
        with BF2Font(str(path)) as font:
            assert font.prop
            atlas = font.to_atlas()
    assert atlas.width == 8
    # Leftmost pixel mirrored to the last column
    assert atlas.glyph(1) == b"\x01"
    assert "proportional" in caplog.text


def test_render_loaded_font(wide_font):
    bmp = DrawBitmap(32, 8)
    text = TextRenderer(bmp)
    text.load_font(str(wide_font))
    assert text.measure_width("AA") == 20
    assert text.measure_height() == 3

    text.draw("AB", (0, 0), WHITE)
    # Top glyph row lands on y=2, bottom row on y=0; nothing drawn for "B"
    assert painted(bmp) == {(0, 2), (9, 2), (4, 0)}


def test_canvas_font_argument(wide_font):
    canvas = Canvas(16, 4, font=str(wide_font))
    assert canvas.measure_text("A") == (10, 3)
    canvas.text("A", (1, 1))
    assert painted(canvas.bitmap) == {(1, 3), (10, 3), (5, 1)}


def test_32bit_codepoint_index(tmp_path):
    path = tmp_path / "wide32.bf2"
    header = struct.pack("<2sBBBBHBBH", b"B2", 1, 0x02, 8, 1, 1, 1, 8, 0)
    entry = struct.pack("<IB", ord("!"), 0) + (0).to_bytes(3, "little")
    path.write_bytes(header + entry + b"\x81")

    with BF2Font(str(path)) as font:
        assert font.entry_size == 8
        atlas = font.to_atlas()
    assert atlas.glyph(1) == b"\x81"
