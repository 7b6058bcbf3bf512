"""
TextRenderer - Monospace Bitmap Font Rendering
==============================================
Renders glyphs from a FontAtlas onto a Bitmap.

Features:
- Built-in 8x8 printable-ASCII font
- BF2 font loading via load_font()
- Fixed-advance layout (no kerning, no wrapping)

Usage:
    from bmpcanvas.buffer import DrawBitmap, WHITE
    from bmpcanvas.text import TextRenderer

    bmp = DrawBitmap(64, 16)
    text = TextRenderer(bmp)
    text.draw("Hello!", (0, 4), WHITE)
"""

from ..buffer.bitmap import Point, WHITE
from .atlas import BUILTIN_FONT, FontAtlas
from .bf2 import BF2Font


class TextRenderer:
    """
    Glyph and string renderer.

    Args:
        bitmap: Bitmap instance to render onto
        atlas: FontAtlas to draw glyphs from (default: built-in 8x8)
    """

    def __init__(self, bitmap, atlas: FontAtlas = BUILTIN_FONT):
        self._bmp = bitmap
        self._atlas = atlas

    @property
    def atlas(self) -> FontAtlas:
        return self._atlas

    def load_font(self, path: str) -> FontAtlas:
        """
        Replace the active atlas with one built from a BF2 font file.

        Raises:
            ValueError: If the file is not a valid BF2 font
            OSError: If the file cannot be opened
        """
        with BF2Font(path) as font:
            self._atlas = font.to_atlas()
        return self._atlas

    # =========================================================================
    # Measurement
    # =========================================================================

    def measure_width(self, text: str) -> int:
        return len(text) * self._atlas.width

    def measure_height(self) -> int:
        return self._atlas.height

    # =========================================================================
    # Drawing
    # =========================================================================

    def draw_char(self, index: int, position, color=WHITE) -> None:
        """
        Draw one glyph with its top-left bit grid anchored at position.

        Rows are consumed bottom-up so the glyph's first row lands on the
        highest y, matching the unflipped bottom-up scan line order. Columns
        are mirrored: glyph column 0 maps to the largest x offset.
        Out-of-range indices draw nothing.
        """
        bitmap = self._atlas.glyph(index)
        if bitmap is None:
            return

        w, h = self._atlas.width, self._atlas.height
        x0, y0 = position
        for row in range(h - 1, -1, -1):
            for col in range(w):
                bit_index = (h - 1 - row) * w + col
                byte_index = bit_index >> 3
                if byte_index >= len(bitmap):
                    continue
                if bitmap[byte_index] & (0x80 >> (bit_index & 7)):
                    self._bmp.pixel(Point(x0 + (w - 1 - col), y0 + row), color)

    def draw(self, text: str, position, color=WHITE) -> int:
        """
        Draw a string left to right.

        Each character maps to glyph index ord(ch) - atlas.first; characters
        outside the atlas are skipped but still advance the cursor.

        Returns:
            Total advance width in pixels
        """
        x, y = position
        cursor = x
        for ch in text:
            self.draw_char(self._atlas.index_of(ch), (cursor, y), color)
            cursor += self._atlas.width
        return cursor - x
