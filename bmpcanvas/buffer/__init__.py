"""
Buffer subsystem - BMP image buffers and drawing primitives.

Modules:
    header: Fixed-offset header field codec
    bitmap: Image buffer allocation and pixel access
    draw: Shape drawing primitives (lines, rectangles, circles, polygons)
"""
from .bitmap import (
    Bitmap,
    Point,
    Color,
    new_bitmap,
    UnsupportedFormatError,
    PixelOutOfBoundsError,
    BLACK,
    WHITE,
    RED,
    GREEN,
    BLUE,
)
from .draw import DrawBitmap

__all__ = [
    "Bitmap",
    "DrawBitmap",
    "Point",
    "Color",
    "new_bitmap",
    "UnsupportedFormatError",
    "PixelOutOfBoundsError",
    "BLACK",
    "WHITE",
    "RED",
    "GREEN",
    "BLUE",
]
