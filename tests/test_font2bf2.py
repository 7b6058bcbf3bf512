import pytest

from bmpcanvas import Canvas
from bmpcanvas.fonts import font2bf2
from bmpcanvas.text import BF2Font

from .helpers import painted

BDF_SOURCE = """\
STARTFONT 2.1
FONT -test-fixed-medium-r-normal--8-80-75-75-c-80-iso10646-1
SIZE 8 75 75
FONTBOUNDINGBOX 8 8 0 0
STARTPROPERTIES 2
FONT_ASCENT 8
FONT_DESCENT 0
ENDPROPERTIES
CHARS 2
STARTCHAR A
ENCODING 65
SWIDTH 1000 0
DWIDTH 8 0
BBX 8 8 0 0
BITMAP
18
24
42
7E
42
42
42
00
ENDCHAR
STARTCHAR U+00E9
ENCODING 233
SWIDTH 1000 0
DWIDTH 8 0
BBX 8 8 0 0
BITMAP
08
10
3C
42
7E
40
3C
00
ENDCHAR
ENDFONT
"""

A_ROWS = bytes([0x18, 0x24, 0x42, 0x7E, 0x42, 0x42, 0x42, 0x00])


@pytest.fixture
def bdf_file(tmp_path):
    path = tmp_path / "test8.bdf"
    path.write_text(BDF_SOURCE)
    return path


def test_write_bf2_range_only(tmp_path):
    glyphs = {
        ord("A"): {"width": 8, "data": A_ROWS},
        0xE9: {"width": 8, "data": bytes(8)},
    }
    path = tmp_path / "out.bf2"
    assert font2bf2.write_bf2(path, glyphs, {"height": 8, "max_width": 8}) == 1

    with BF2Font(str(path)) as font:
        assert font.count == 1
        assert font.get(0xE9) is None
        assert font.read(font.get(ord("A"))[1]) == A_ROWS


def test_write_bf2_without_glyphs(tmp_path, capsys):
    path = tmp_path / "empty.bf2"
    assert font2bf2.write_bf2(path, {}, {"height": 8, "max_width": 8}) == 0
    assert not path.exists()
    assert "No glyphs" in capsys.readouterr().out


def test_preview(capsys):
    glyphs = {ord("A"): {"width": 8, "data": A_ROWS}}
    font2bf2.preview_glyphs(glyphs, {"height": 8, "max_width": 8}, "AZ")
    out = capsys.readouterr().out
    assert "···██···" in out
    assert "'Z' (U+005A): NOT FOUND" in out


def test_main_requires_output_or_preview(bdf_file):
    with pytest.raises(SystemExit):
        font2bf2.main([str(bdf_file)])


def test_main_missing_input(tmp_path):
    assert font2bf2.main([str(tmp_path / "nope.bdf"), str(tmp_path / "out.bf2")]) == 1


def test_main_rejects_other_formats(tmp_path):
    src = tmp_path / "font.ttf"
    src.write_bytes(b"")
    assert font2bf2.main([str(src), str(tmp_path / "out.bf2")]) == 1


def test_load_bdf_font(bdf_file):
    pytest.importorskip("bdflib")
    glyphs, props = font2bf2.load_bdf_font(bdf_file)
    assert props["height"] == 8
    assert props["max_width"] == 8
    assert glyphs[ord("A")]["data"] == A_ROWS
    assert glyphs[ord("A")]["width"] == 8
    assert 0xE9 in glyphs


def test_convert_and_render(bdf_file, tmp_path):
    pytest.importorskip("bdflib")
    out = tmp_path / "fonts" / "test8.bf2"
    assert font2bf2.main([str(bdf_file), str(out), "--preview", "A"]) == 0

    canvas = Canvas(8, 8, font=str(out))
    canvas.text("A", (0, 0))
    points = painted(canvas.bitmap)
    # Top BDF row 0x18 (MSB = leftmost) lands on y=7
    assert {p for p in points if p[1] == 7} == {(3, 7), (4, 7)}
    assert {p for p in points if p[1] == 4} == {(x, 4) for x in range(1, 7)}
    assert not {p for p in points if p[1] == 0}
