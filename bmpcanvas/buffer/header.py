"""
BMP Header Codec
================
Fixed-offset field access for the 54-byte BMP header.

Layout:
    [File header: 14 bytes]
    [Info header: 40 bytes (BITMAPINFOHEADER)]
    [Pixel array: height x padded scan lines]

File Header (14 bytes):
    - Signature: "BM" (2 bytes)
    - File size: 4 bytes
    - Reserved: 4 bytes
    - Pixel array offset: 4 bytes

Info Header (40 bytes):
    - Header size: 4 bytes (always 40)
    - Width / Height: 4 bytes each
    - Planes: 2 bytes (always 1)
    - Bits per pixel: 2 bytes
    - Compression: 4 bytes (always 0)
    - Image size: 4 bytes
    - X/Y resolution: 4 bytes each
    - Colors used / important: 4 bytes each

All multi-byte fields are little-endian unsigned integers.
"""

import struct

# =============================================================================
# Sizes
# =============================================================================

SIGNATURE = b"BM"
FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40
HEADER_SIZE = FILE_HEADER_SIZE + INFO_HEADER_SIZE

# =============================================================================
# Field Offsets
# =============================================================================

OFFSET_FILE_SIZE = 2
OFFSET_PIXEL_ARRAY = 10
OFFSET_INFO_HEADER_SIZE = 14
OFFSET_WIDTH = 18
OFFSET_HEIGHT = 22
OFFSET_PLANES = 26
OFFSET_BITS_PER_PIXEL = 28
OFFSET_COMPRESSION = 30
OFFSET_IMAGE_SIZE = 34
OFFSET_COLORS_USED = 46
OFFSET_IMPORTANT_COLORS = 50

_ROW_ALIGN = 4
_FORMATS = {1: "<B", 2: "<H", 4: "<I"}


# =============================================================================
# Raw Field Codec
# =============================================================================

def read_field(buf, offset: int, width: int) -> int:
    """Decode an unsigned little-endian field of 1, 2 or 4 bytes."""
    return struct.unpack_from(_FORMATS[width], buf, offset)[0]


def write_field(buf: bytearray, offset: int, width: int, value: int) -> None:
    """Encode an unsigned little-endian field of 1, 2 or 4 bytes in place."""
    struct.pack_into(_FORMATS[width], buf, offset, value)


def has_signature(buf) -> bool:
    return len(buf) >= 2 and buf[0:2] == SIGNATURE


# =============================================================================
# Field Readers
# =============================================================================

def get_file_size(buf) -> int: return read_field(buf, OFFSET_FILE_SIZE, 4)

def get_pixel_array_offset(buf) -> int: return read_field(buf, OFFSET_PIXEL_ARRAY, 4)

def get_info_header_size(buf) -> int: return read_field(buf, OFFSET_INFO_HEADER_SIZE, 4)

def get_width(buf) -> int: return read_field(buf, OFFSET_WIDTH, 4)

def get_height(buf) -> int: return read_field(buf, OFFSET_HEIGHT, 4)

def get_planes(buf) -> int: return read_field(buf, OFFSET_PLANES, 2)

def get_compression(buf) -> int: return read_field(buf, OFFSET_COMPRESSION, 4)

def get_image_size(buf) -> int: return read_field(buf, OFFSET_IMAGE_SIZE, 4)

def get_colors_used(buf) -> int: return read_field(buf, OFFSET_COLORS_USED, 4)

def get_important_colors(buf) -> int: return read_field(buf, OFFSET_IMPORTANT_COLORS, 4)


def get_bits_per_pixel(buf) -> int:
    """Bit depth. The field is 2 bytes wide but only the low byte is used."""
    return read_field(buf, OFFSET_BITS_PER_PIXEL, 1)


# =============================================================================
# Derived Quantities
# =============================================================================

def padded_row_width(width: int, bits_per_pixel: int) -> int:
    """Scan line length in bytes, rounded up to a 4-byte boundary."""
    row_width = width * (bits_per_pixel // 8)
    return row_width + (_ROW_ALIGN - row_width % _ROW_ALIGN) % _ROW_ALIGN


def padding_per_line(buf) -> int:
    """Zero bytes appended to every scan line (0-3)."""
    width = get_width(buf)
    bpp = get_bits_per_pixel(buf)
    return padded_row_width(width, bpp) - width * (bpp // 8)


def padding_size(buf) -> int:
    """Total padding bytes in the pixel array."""
    return padding_per_line(buf) * get_height(buf)


def read_header(buf) -> dict:
    """Decode every header field into a dict."""
    return {
        "signature": bytes(buf[0:2]),
        "file_size": get_file_size(buf),
        "pixel_array_offset": get_pixel_array_offset(buf),
        "info_header_size": get_info_header_size(buf),
        "width": get_width(buf),
        "height": get_height(buf),
        "planes": get_planes(buf),
        "bits_per_pixel": get_bits_per_pixel(buf),
        "compression": get_compression(buf),
        "image_size": get_image_size(buf),
        "colors_used": get_colors_used(buf),
        "important_colors": get_important_colors(buf),
    }
