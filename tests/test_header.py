import pytest

from bmpcanvas.buffer import header as hdr
from bmpcanvas.buffer import new_bitmap


@pytest.mark.parametrize("width, height, bpp", [
    (40, 40, 24),
    (21, 3, 24),
    (5, 7, 32),
    (3, 2, 8),
    (1, 1, 16),
])
def test_new_bitmap_header_fields(width, height, bpp):
    buf = new_bitmap(width, height, bpp)

    assert len(buf) == hdr.HEADER_SIZE + hdr.padded_row_width(width, bpp) * height
    assert buf[0:2] == b"BM"
    assert hdr.get_width(buf) == width
    assert hdr.get_height(buf) == height
    assert hdr.get_bits_per_pixel(buf) == bpp
    assert hdr.get_file_size(buf) == len(buf)
    assert hdr.get_planes(buf) == 1
    assert hdr.get_info_header_size(buf) == 40
    assert hdr.get_pixel_array_offset(buf) == 54


def test_unset_fields_are_zero():
    buf = new_bitmap(8, 8)
    assert hdr.get_compression(buf) == 0
    assert hdr.get_image_size(buf) == 0
    assert hdr.get_colors_used(buf) == 0
    assert hdr.get_important_colors(buf) == 0
    # Pixel array starts zeroed
    assert not any(buf[hdr.HEADER_SIZE:])


def test_fields_are_little_endian():
    buf = new_bitmap(0x0102, 3)
    assert buf[hdr.OFFSET_WIDTH:hdr.OFFSET_WIDTH + 4] == b"\x02\x01\x00\x00"
    assert buf[hdr.OFFSET_BITS_PER_PIXEL:hdr.OFFSET_BITS_PER_PIXEL + 2] == b"\x18\x00"
    assert buf[hdr.OFFSET_PIXEL_ARRAY:hdr.OFFSET_PIXEL_ARRAY + 4] == b"\x36\x00\x00\x00"


@pytest.mark.parametrize("width, bpp, expected", [
    (1, 24, 4),
    (2, 24, 8),
    (4, 24, 12),
    (21, 24, 64),
    (3, 8, 4),
    (5, 32, 20),
])
def test_padded_row_width(width, bpp, expected):
    assert hdr.padded_row_width(width, bpp) == expected


@pytest.mark.parametrize("width, padding", [(1, 1), (2, 2), (3, 3), (4, 0), (21, 1)])
def test_padding_per_line(width, padding):
    buf = new_bitmap(width, 5, 24)
    assert hdr.padding_per_line(buf) == padding
    assert hdr.padding_size(buf) == padding * 5


def test_read_write_field_widths():
    buf = bytearray(8)
    hdr.write_field(buf, 0, 1, 0xAB)
    hdr.write_field(buf, 1, 2, 0xBEEF)
    hdr.write_field(buf, 3, 4, 0xDEADBEEF)
    assert buf[:7] == b"\xAB\xEF\xBE\xEF\xBE\xAD\xDE"
    assert hdr.read_field(buf, 0, 1) == 0xAB
    assert hdr.read_field(buf, 1, 2) == 0xBEEF
    assert hdr.read_field(buf, 3, 4) == 0xDEADBEEF


def test_bits_per_pixel_reads_low_byte_only():
    buf = new_bitmap(2, 2, 24)
    buf[hdr.OFFSET_BITS_PER_PIXEL + 1] = 0x01
    assert hdr.get_bits_per_pixel(buf) == 24


def test_has_signature():
    buf = new_bitmap(2, 2)
    assert hdr.has_signature(buf)
    buf[1] = ord("X")
    assert not hdr.has_signature(buf)
    assert not hdr.has_signature(b"B")


def test_read_header():
    header = hdr.read_header(new_bitmap(40, 30, 24))
    assert header["signature"] == b"BM"
    assert header["width"] == 40
    assert header["height"] == 30
    assert header["bits_per_pixel"] == 24
    assert header["file_size"] == 54 + 120 * 30
    assert header["compression"] == 0
