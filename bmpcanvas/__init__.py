"""
bmpcanvas
=========
In-memory BMP image construction: header encoding, pixel access and
shape/text rasterization over an uncompressed bitmap byte buffer.

Architecture
------------
The library is organized into layers:

    Canvas          High-level drawing + persistence
       │
       ├── DrawBitmap       Shape primitives (lines, circles, polygons)
       │      │
       │      └── Bitmap         Pixel access over the BMP buffer
       │             │
       │             └── header      Fixed-offset header codec
       │
       └── TextRenderer  Glyph and string rendering
              │
              └── FontAtlas      Built-in 8x8 font or BF2 font file

Quick Start
-----------
    from bmpcanvas import Canvas, RED, GREEN

    canvas = Canvas(40, 40)
    canvas.pixel((20, 20), RED)
    canvas.rect((1, 1), (38, 38), GREEN)
    canvas.text("Hi", (4, 4))
    canvas.save("example.bmp")

Module Structure
----------------
    bmpcanvas/
    ├── canvas.py            High-level interface
    ├── buffer/
    │   ├── header.py        Header field codec
    │   ├── bitmap.py        Image buffer and pixel access
    │   └── draw.py          Shape drawing primitives
    ├── text/
    │   ├── atlas.py         Glyph lookup table
    │   ├── font8x8.py       Built-in font data
    │   ├── bf2.py           BF2 font format parser
    │   └── renderer.py      Text rendering engine
    └── fonts/
        └── font2bf2.py      BDF to BF2 font converter
"""

# Core buffer classes
from .buffer import (
    Bitmap,
    DrawBitmap,
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

# Text rendering
from .text import FontAtlas, BUILTIN_FONT, BF2Font, TextRenderer

# High-level interface
from .canvas import Canvas

__all__ = [
    # High-level
    "Canvas",
    # Graphics
    "DrawBitmap",
    "Bitmap",
    "new_bitmap",
    "Point",
    "Color",
    # Text
    "TextRenderer",
    "FontAtlas",
    "BUILTIN_FONT",
    "BF2Font",
    # Errors
    "UnsupportedFormatError",
    "PixelOutOfBoundsError",
    # Colors
    "BLACK",
    "WHITE",
    "RED",
    "GREEN",
    "BLUE",
]

__version__ = "1.0.0"
