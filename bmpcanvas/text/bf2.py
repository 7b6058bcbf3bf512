"""
BF2 Font Format Parser
======================
Loads fonts in the BF2 (Binary Font v2) format and converts them into a
FontAtlas for bitmap text rendering.

Format Layout:
    [Header: 12 bytes]
    [Index: count x entry_size bytes]
    [Bitmap data: variable]

Header Structure (12 bytes):
    - Magic: "B2" (2 bytes)
    - Version: 1 byte
    - Flags: 1 byte (bit 0=proportional, bit 1=32-bit codepoints)
    - Max width: 1 byte
    - Height: 1 byte
    - Glyph count: 2 bytes (little-endian)
    - Bytes per row: 1 byte
    - Default width: 1 byte
    - Reserved: 2 bytes

Index entries are (codepoint, width, 24-bit offset), sorted by codepoint.
Glyph bitmaps are height x bytes_per_row bytes, row-major, MSB = leftmost.
"""

import logging
import struct

from .atlas import FontAtlas

log = logging.getLogger(__name__)

BF2_MAGIC = b"B2"
BF2_HEADER_SIZE = 12
FLAG_PROPORTIONAL = 0x01
FLAG_32BIT_CODEPOINTS = 0x02


class BF2Font:
    """
    BF2 font file reader.

    Keeps the font file open for on-demand glyph data reading.
    Use close() or context manager to release the file handle.

    Attributes:
        height: Glyph height in pixels
        max_w: Maximum glyph width in pixels
        def_w: Default width for missing glyphs
        count: Number of glyphs in the font
        bpr: Bytes per row of glyph bitmap data
        prop: True if proportional (variable-width) font
    """

    def __init__(self, path: str):
        """
        Open and parse a BF2 font file.

        Args:
            path: File system path to the .bf2 font file

        Raises:
            ValueError: If the file is not a valid BF2 font
            OSError: If the file cannot be opened
        """
        self.file = open(path, "rb")
        try:
            self._parse_header()
        except (ValueError, struct.error) as e:
            self.file.close()
            raise ValueError(f"Invalid BF2 font file: {path}: {e}") from e

        log.debug("loaded BF2 font %s: %d glyphs, %dx%d", path, self.count, self.max_w, self.height)

    def _parse_header(self):
        if self.file.read(2) != BF2_MAGIC:
            raise ValueError("bad magic")

        hdr = self.file.read(BF2_HEADER_SIZE - 2)
        (_, flags, self.max_w, self.height, self.count,
         self.bpr, self.def_w, _) = struct.unpack("<BBBBHBBH", hdr)

        self.prop = bool(flags & FLAG_PROPORTIONAL)
        self.entry_size = 8 if (flags & FLAG_32BIT_CODEPOINTS) else 6
        self._data_start = BF2_HEADER_SIZE + self.count * self.entry_size

        self.index = {}
        idx_data = self.file.read(self.count * self.entry_size)
        if len(idx_data) != self.count * self.entry_size:
            raise ValueError(f"truncated index ({len(idx_data)} of {self.count * self.entry_size} bytes)")
        fmt = "<IBBBB" if self.entry_size == 8 else "<HBBBB"

        for i in range(self.count):
            off = i * self.entry_size
            cp, w, o0, o1, o2 = struct.unpack(fmt, idx_data[off:off + self.entry_size])
            self.index[cp] = (w, o0 | (o1 << 8) | (o2 << 16))

    def get(self, cp: int):
        """
        Look up a glyph by codepoint.

        Returns:
            (width, data_offset) tuple, or None if not found
        """
        return self.index.get(cp)

    def read(self, offset: int) -> bytes:
        """
        Read glyph bitmap data (height x bytes_per_row) at an offset.

        Raises:
            ValueError: If the glyph data is cut short
        """
        size = self.height * self.bpr
        self.file.seek(self._data_start + offset)
        data = self.file.read(size)
        if len(data) < size:
            raise ValueError(f"truncated glyph data at offset {offset} ({len(data)} of {size} bytes)")
        return data

    def to_atlas(self, first: int = 0x20, last: int = 0x7E) -> FontAtlas:
        """
        Build a monospace FontAtlas covering codepoints first..last.

        Glyphs are laid out on a max_w x height grid. Codepoints absent from
        the font become empty atlas slots. Proportional fonts lose their
        per-glyph widths: every glyph advances by max_w.

        Raises:
            ValueError: If glyph data is truncated
        """
        w, h = self.max_w, self.height
        if self.prop:
            log.info("proportional BF2 font laid out on a fixed %d px grid", w)
        glyphs = []
        for cp in range(first, last + 1):
            info = self.get(cp)
            if info is None:
                glyphs.append(None)
                continue
            glyphs.append(self._pack(self.read(info[1]), w, h))

        missing = glyphs.count(None)
        if missing:
            log.info("BF2 font is missing %d of %d atlas glyphs", missing, len(glyphs))
        return FontAtlas(w, h, glyphs, first=first)

    def _pack(self, data: bytes, w: int, h: int) -> bytes:
        """Repack row-padded glyph rows into contiguous, column-mirrored bits."""
        out = bytearray((w * h + 7) // 8)
        for row in range(h):
            row_off = row * self.bpr
            for px in range(w):
                if not (data[row_off + (px >> 3)] & (0x80 >> (px & 7))):
                    continue
                bit = row * w + (w - 1 - px)
                out[bit >> 3] |= 0x80 >> (bit & 7)
        return bytes(out)

    def close(self):
        """Close the font file handle."""
        self.file.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
        return False
