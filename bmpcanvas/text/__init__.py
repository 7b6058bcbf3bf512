"""
Text rendering subsystem.

Modules:
    atlas: Glyph lookup table and the built-in 8x8 font
    bf2: BF2 font format parser
    renderer: Glyph and string renderer
"""
from .atlas import FontAtlas, BUILTIN_FONT
from .bf2 import BF2Font
from .renderer import TextRenderer

__all__ = ["FontAtlas", "BUILTIN_FONT", "BF2Font", "TextRenderer"]
