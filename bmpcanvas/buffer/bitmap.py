"""
Bitmap - In-Memory BMP Image Buffer
===================================
Owns a complete BMP file image (header + padded pixel array) and provides
bounds-checked pixel access.

Supports:
- Any byte-aligned bit depth (24-bit BGR is the common case)
- 4-byte scan line padding on every read/write path

Pixel addressing:
    offset = y * padded_row_width + x * bytes_per_pixel + pixel_array_offset

Rows are not flipped: y=0 is the first stored scan line, which BMP viewers
display as the bottom row.
"""

import logging
from typing import NamedTuple

from . import header as hdr

log = logging.getLogger(__name__)

# =============================================================================
# Value Types
# =============================================================================


class Point(NamedTuple):
    x: int
    y: int


class Color(NamedTuple):
    r: int
    g: int
    b: int


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)

# =============================================================================
# Errors
# =============================================================================


class UnsupportedFormatError(ValueError):
    """Raised when an image cannot be created with the requested parameters."""


class PixelOutOfBoundsError(IndexError):
    """Raised when reading a pixel that does not exist in the image."""


# =============================================================================
# Buffer Factory
# =============================================================================

_MAX_U32 = 0xFFFFFFFF
_MAX_BPP = 0xFF  # read back from a single byte
_BGR_SPAN = 2    # last channel byte relative to the pixel offset


def new_bitmap(width: int, height: int, bits_per_pixel: int = 24) -> bytearray:
    """
    Allocate a zeroed BMP buffer with a populated header.

    Args:
        width: Image width in pixels
        height: Image height in pixels
        bits_per_pixel: Color depth, a positive multiple of 8

    Returns:
        bytearray of HEADER_SIZE + padded_row_width * height bytes

    Raises:
        UnsupportedFormatError: On zero dimensions or a non byte-aligned depth
    """
    if not isinstance(width, int) or not isinstance(height, int):
        raise UnsupportedFormatError("width and height must be integers")
    if width <= 0 or height <= 0:
        raise UnsupportedFormatError(f"degenerate image size {width}x{height}")
    if width > _MAX_U32 or height > _MAX_U32:
        raise UnsupportedFormatError(f"image size {width}x{height} exceeds 32-bit header fields")
    if not isinstance(bits_per_pixel, int) or bits_per_pixel <= 0 or bits_per_pixel % 8:
        raise UnsupportedFormatError(f"bits per pixel must be a positive multiple of 8, got {bits_per_pixel}")
    if bits_per_pixel > _MAX_BPP:
        raise UnsupportedFormatError(f"bits per pixel must be at most {_MAX_BPP}, got {bits_per_pixel}")

    length = hdr.padded_row_width(width, bits_per_pixel) * height + hdr.HEADER_SIZE
    if length > _MAX_U32:
        raise UnsupportedFormatError(f"file size {length} exceeds the 32-bit header field")
    buf = bytearray(length)

    buf[0:2] = hdr.SIGNATURE
    hdr.write_field(buf, hdr.OFFSET_PIXEL_ARRAY, 4, hdr.HEADER_SIZE)
    hdr.write_field(buf, hdr.OFFSET_WIDTH, 4, width)
    hdr.write_field(buf, hdr.OFFSET_HEIGHT, 4, height)
    hdr.write_field(buf, hdr.OFFSET_BITS_PER_PIXEL, 2, bits_per_pixel)
    hdr.write_field(buf, hdr.OFFSET_FILE_SIZE, 4, length)
    hdr.write_field(buf, hdr.OFFSET_PLANES, 2, 1)
    hdr.write_field(buf, hdr.OFFSET_INFO_HEADER_SIZE, 4, hdr.INFO_HEADER_SIZE)

    log.debug("allocated %dx%d@%dbpp bitmap (%d bytes)", width, height, bits_per_pixel, length)
    return buf


# =============================================================================
# Bitmap
# =============================================================================


class Bitmap:
    """
    BMP image buffer with pixel access.

    The header is fixed after creation, so layout values are decoded once
    and cached. The signature is re-checked on every pixel access.
    """

    def __init__(self, width: int, height: int, bits_per_pixel: int = 24):
        self._buffer = new_bitmap(width, height, bits_per_pixel)
        self._load_layout()

    @classmethod
    def wrap(cls, buffer: bytearray) -> "Bitmap":
        """View an existing BMP buffer without copying it."""
        bmp = cls.__new__(cls)
        bmp._buffer = buffer
        bmp._load_layout()
        return bmp

    def _load_layout(self):
        buf = self._buffer
        self._width = hdr.get_width(buf)
        self._height = hdr.get_height(buf)
        self._bpp = hdr.get_bits_per_pixel(buf)
        self._bytes_pp = self._bpp // 8
        self._stride = hdr.padded_row_width(self._width, self._bpp)
        self._data_offset = hdr.get_pixel_array_offset(buf)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._width}x{self._height}, {self._bpp}bpp)"

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def width(self) -> int: return self._width

    @property
    def height(self) -> int: return self._height

    @property
    def bits_per_pixel(self) -> int: return self._bpp

    @property
    def bytes_per_pixel(self) -> int: return self._bytes_pp

    @property
    def padded_row_width(self) -> int: return self._stride

    @property
    def padding_per_line(self) -> int: return hdr.padding_per_line(self._buffer)

    @property
    def padding_size(self) -> int: return hdr.padding_size(self._buffer)

    @property
    def buffer(self) -> bytearray: return self._buffer

    @property
    def header(self) -> dict: return hdr.read_header(self._buffer)

    # =========================================================================
    # Pixel Ops
    # =========================================================================

    def pixel_exists(self, point) -> bool:
        if not hdr.has_signature(self._buffer):
            log.warning("invalid file signature, buffer is not a bitmap")
            return False
        x, y = point
        return 0 <= x < self._width and 0 <= y < self._height

    def locate(self, point) -> int:
        """Byte offset of a pixel. Performs no bounds validation."""
        x, y = point
        return y * self._stride + x * self._bytes_pp + self._data_offset

    def get_pixel(self, point) -> Color:
        """
        Read the color at a point.

        Raises:
            PixelOutOfBoundsError: If the point is outside the image
        """
        if not self.pixel_exists(point):
            raise PixelOutOfBoundsError(f"point ({point[0]}, {point[1]}) is out of bounds")
        idx = self.locate(point)
        if idx + _BGR_SPAN >= len(self._buffer):
            raise PixelOutOfBoundsError(f"point ({point[0]}, {point[1]}) is out of bounds")
        b, g, r = self._buffer[idx:idx + 3]
        return Color(r, g, b)

    def pixel(self, point, color: Color) -> None:
        """Write a color at a point. Out-of-bounds writes are dropped."""
        if not self.pixel_exists(point):
            log.debug("dropped write outside image at (%d, %d)", point[0], point[1])
            return
        idx = self.locate(point)
        if idx + _BGR_SPAN >= len(self._buffer):
            log.debug("dropped write past end of buffer at index %d", idx)
            return
        r, g, b = color
        self._buffer[idx] = b
        self._buffer[idx + 1] = g
        self._buffer[idx + 2] = r

    # =========================================================================
    # Buffer Ops
    # =========================================================================

    def clear(self, color: Color = BLACK) -> None:
        """Fill every pixel with a color, keeping scan line padding zeroed."""
        r, g, b = color
        # Depths below 24 bits keep the leading BGR bytes, wider ones zero-fill
        px = bytes((b, g, r))[:self._bytes_pp].ljust(self._bytes_pp, b"\x00")
        row = px * self._width
        row += bytes(self._stride - len(row))
        start = self._data_offset
        self._buffer[start:start + self._stride * self._height] = row * self._height
