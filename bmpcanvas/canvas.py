"""
Canvas - High-Level Bitmap Drawing Interface
============================================
Unified interface combining the drawing buffer and text rendering.

This is the primary entry point for most users. It provides:
- All drawing primitives (points, lines, shapes, text)
- Persistence of the finished image (bytes or file)
- Dependency injection for testing and customization

Usage:
    # Simple
    from bmpcanvas import Canvas, RED

    canvas = Canvas(100, 80)
    canvas.circle((14, 60), 10, RED)
    canvas.text("Hello!", (14, 7))
    canvas.save("hello.bmp")

    # With dependency injection
    from bmpcanvas.buffer import DrawBitmap
    from bmpcanvas.text import TextRenderer

    bmp = DrawBitmap(100, 80, bits_per_pixel=32)
    canvas = Canvas(buffer=bmp, text_renderer=TextRenderer(bmp))
"""

import logging
from typing import TYPE_CHECKING

from .buffer import BLACK, WHITE, RED, GREEN, BLUE

if TYPE_CHECKING:
    from .buffer import DrawBitmap, Color
    from .text import TextRenderer

__all__ = ["Canvas", "BLACK", "WHITE", "RED", "GREEN", "BLUE"]

log = logging.getLogger(__name__)


class Canvas:
    """
    High-level bitmap drawing interface.

    Combines a DrawBitmap and a TextRenderer into one API. Supports both
    simple usage and full customization via dependency injection.
    """

    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        bits_per_pixel: int = 24,
        buffer: "DrawBitmap | None" = None,
        text_renderer: "TextRenderer | None" = None,
        font: str | None = None,
    ):
        """
        Initialize Canvas.

        Args:
            width: Image width in pixels (ignored if buffer is given).
            height: Image height in pixels (ignored if buffer is given).
            bits_per_pixel: Color depth (ignored if buffer is given).
            buffer: DrawBitmap instance. If None, creates one.
            text_renderer: TextRenderer instance. If None, creates one.
            font: Path to a BF2 font replacing the built-in 8x8 font.

        Raises:
            UnsupportedFormatError: If a new buffer cannot be created
        """
        if buffer is None:
            from .buffer import DrawBitmap
            self._buffer = DrawBitmap(width, height, bits_per_pixel)
        else:
            self._buffer = buffer

        if text_renderer is None:
            from .text import TextRenderer
            self._text = TextRenderer(self._buffer)
        else:
            self._text = text_renderer

        if font:
            self.load_font(font)

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def width(self) -> int:
        return self._buffer.width

    @property
    def height(self) -> int:
        return self._buffer.height

    @property
    def bits_per_pixel(self) -> int:
        return self._buffer.bits_per_pixel

    @property
    def bitmap(self) -> "DrawBitmap":
        """Access underlying drawing buffer."""
        return self._buffer

    @property
    def buffer(self) -> bytearray:
        return self._buffer.buffer

    # =========================================================================
    # Drawing Operations (Delegated to DrawBitmap)
    # =========================================================================

    def clear(self, c: "Color" = BLACK):
        self._buffer.clear(c)

    def pixel(self, p, c: "Color" = WHITE):
        self._buffer.pixel(p, c)

    def get_pixel(self, p) -> "Color":
        return self._buffer.get_pixel(p)

    def line(self, p0, p1, c: "Color" = WHITE):
        self._buffer.line(p0, p1, c)

    def rect(self, p0, p1, c: "Color" = WHITE):
        self._buffer.rect(p0, p1, c)

    def circle(self, center, r, c: "Color" = WHITE):
        self._buffer.circle(center, r, c)

    def polygon(self, points, c: "Color" = WHITE):
        self._buffer.polygon(points, c)

    def triangle(self, p0, p1, p2, c: "Color" = WHITE):
        self._buffer.triangle(p0, p1, p2, c)

    # =========================================================================
    # Text Operations (Delegated to TextRenderer)
    # =========================================================================

    def load_font(self, path: str):
        """Replace the built-in font with a BF2 font."""
        self._text.load_font(path)

    def char(self, index: int, position, color: "Color" = WHITE):
        self._text.draw_char(index, position, color)

    def text(self, string: str, position, color: "Color" = WHITE) -> int:
        """Draw text string. Returns width drawn."""
        return self._text.draw(string, position, color)

    def measure_text(self, string: str) -> tuple:
        """Return (width, height) of text."""
        return self._text.measure_width(string), self._text.measure_height()

    # =========================================================================
    # Persistence
    # =========================================================================

    def to_bytes(self) -> bytes:
        """The complete BMP file image."""
        return bytes(self._buffer.buffer)

    def save(self, path) -> int:
        """
        Write the BMP file image verbatim.

        Returns:
            Number of bytes written
        """
        with open(path, "wb") as f:
            written = f.write(self._buffer.buffer)
        log.info("wrote %s (%d bytes)", path, written)
        return written
