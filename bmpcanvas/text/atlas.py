"""
FontAtlas - Fixed-Size Glyph Lookup Table
=========================================
Maps small non-negative glyph indices to bit-packed monospace glyphs.

Glyph packing (shared by every atlas):
    - width x height bits, no per-row padding
    - linear bit index = row * width + col, MSB first within each byte
    - row 0 is the top of the glyph
    - col 0 is the RIGHTMOST pixel (columns are mirrored on render)

Index 0 corresponds to codepoint `first` (32, space, for ASCII atlases).
"""

from . import font8x8


class FontAtlas:
    """
    Read-only glyph table.

    Attributes:
        width: Glyph width in pixels
        height: Glyph height in pixels
        first: Codepoint of glyph index 0
    """

    def __init__(self, width: int, height: int, glyphs, first: int = 32):
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid glyph size {width}x{height}")
        size = (width * height + 7) // 8
        glyphs = tuple(None if g is None else bytes(g) for g in glyphs)
        for i, g in enumerate(glyphs):
            if g is not None and len(g) != size:
                raise ValueError(f"glyph {i} is {len(g)} bytes, expected {size}")

        self.width = width
        self.height = height
        self.first = first
        self._glyphs = glyphs

    def __len__(self) -> int:
        return len(self._glyphs)

    def glyph(self, index: int):
        """
        Look up a glyph bitmap.

        Returns:
            Packed glyph bytes, or None if the index is out of range or the
            glyph is missing
        """
        if 0 <= index < len(self._glyphs):
            return self._glyphs[index]
        return None

    def index_of(self, ch: str) -> int:
        """Glyph index for a character (may be out of range)."""
        return ord(ch) - self.first


BUILTIN_FONT = FontAtlas(
    font8x8.FONT_WIDTH,
    font8x8.FONT_HEIGHT,
    font8x8.GLYPHS,
    first=font8x8.FIRST_CODEPOINT,
)
