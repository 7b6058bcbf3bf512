#!/usr/bin/env python3
"""
BDF to BF2 Font Converter
=========================
Converts BDF bitmap fonts into monospace BF2 files usable as a bmpcanvas
FontAtlas (TextRenderer.load_font / Canvas(font=...)).

Features:
- Input: BDF fonts (parsed with bdflib)
- Output: BF2, one glyph per codepoint in a contiguous range
- Glyphs are placed on a fixed max_width x height grid on the baseline
- Preview rendered glyphs in terminal

BF2 Format:
    Header (12 bytes):
        magic: 2 bytes ("B2")
        version: 1 byte (1)
        flags: 1 byte (bit 0: proportional)
        max_width: 1 byte
        height: 1 byte
        glyph_count: 2 bytes (little-endian)
        bytes_per_row: 1 byte
        default_width: 1 byte
        reserved: 2 bytes

    Index table (glyph_count * 6 bytes, sorted by codepoint):
        codepoint: 2 bytes (little-endian)
        width: 1 byte
        offset: 3 bytes (little-endian, position in glyph data)

    Glyph data:
        Each glyph: height * bytes_per_row bytes (row-major, MSB first)

Requirements:
    pip install bdflib

Usage:
    # Printable ASCII (the range the text renderer maps characters into)
    bmpcanvas-font2bf2 spleen-8x16.bdf spleen-8x16.bf2

    # Preview specific characters
    bmpcanvas-font2bf2 spleen-8x16.bdf spleen-8x16.bf2 --preview "Hello!"

    # Preview only (no output file required)
    bmpcanvas-font2bf2 spleen-8x16.bdf --preview "Test"
"""

import argparse
import struct
import sys
from math import ceil
from pathlib import Path
from typing import Dict, Tuple

# Printable ASCII, the range covered by TextRenderer's default mapping
FIRST_CODEPOINT = 0x20
LAST_CODEPOINT = 0x7E

BF2_MAGIC = b"B2"
BF2_VERSION = 1


# =============================================================================
# BDF Parser (using bdflib)
# =============================================================================

def load_bdf_font(bdf_path: Path) -> Tuple[Dict, dict]:
    """
    Load a BDF font and lay every glyph out on a fixed grid.

    Args:
        bdf_path: Path to BDF file

    Returns:
        Tuple of (glyphs dict, properties dict)
        glyphs: {codepoint: {'width': int, 'data': bytes}}
        properties: {'height', 'max_width', 'ascent', 'descent'}
    """
    from bdflib import reader

    with open(bdf_path, 'rb') as f:
        font = reader.read_bdf(f)

    props = font.properties
    font_ascent = props.get(b'FONT_ASCENT', 8)
    font_descent = props.get(b'FONT_DESCENT', 0)
    font_height = font_ascent + font_descent

    max_width = max((glyph.advance for glyph in font.glyphs), default=0)
    bytes_per_row = ceil(max_width / 8)
    baseline_row = font_ascent - 1

    glyphs = {}
    for glyph in font.glyphs:
        if glyph.codepoint is None or glyph.codepoint > 0xFFFF:
            continue

        # BDF data is stored bottom-to-top
        glyph_data = list(reversed(glyph.data))
        glyph_bottom = baseline_row - glyph.bbY
        glyph_top = glyph_bottom - glyph.bbH + 1

        # BDF rows are left-aligned to the bounding box width
        shift = (bytes_per_row * 8) - glyph.bbW
        rows = []
        for y in range(font_height):
            row_bits = 0
            src_row = y - glyph_top
            if 0 <= src_row < len(glyph_data):
                src_bits = glyph_data[src_row]
                if shift > glyph.bbX:
                    row_bits = src_bits << (shift - glyph.bbX)
                else:
                    row_bits = src_bits >> (glyph.bbX - shift)
                row_bits &= (1 << (bytes_per_row * 8)) - 1
            rows.append(row_bits.to_bytes(bytes_per_row, 'big'))

        glyphs[glyph.codepoint] = {
            'width': glyph.advance,
            'data': b''.join(rows),
        }

    properties = {
        'height': font_height,
        'max_width': max_width,
        'ascent': font_ascent,
        'descent': font_descent,
    }
    return glyphs, properties


# =============================================================================
# BF2 Writer
# =============================================================================

def write_bf2(output_path: Path, glyphs: Dict, properties: dict,
              first: int = FIRST_CODEPOINT, last: int = LAST_CODEPOINT) -> int:
    """
    Write a monospace BF2 font with the glyphs in first..last.

    Args:
        output_path: Output file path
        glyphs: Dict of {codepoint: {'width': int, 'data': bytes}}
        properties: Dict with 'height', 'max_width'
        first: First codepoint to include
        last: Last codepoint to include

    Returns:
        Number of glyphs written (0 if none were available)
    """
    height = properties['height']
    max_width = properties['max_width']
    bytes_per_row = ceil(max_width / 8)

    codepoints = [cp for cp in range(first, last + 1) if cp in glyphs]
    if not codepoints:
        print("Error: No glyphs to write!")
        return 0

    print(f"Writing BF2: {len(codepoints)} glyphs, {max_width}x{height}, monospace")

    glyph_data = bytearray()
    index_entries = []
    for cp in codepoints:
        offset = len(glyph_data)
        # Index entry: codepoint (2), width (1, zero when monospace), offset (3)
        index_entries.append(struct.pack('<HB', cp, 0) + offset.to_bytes(3, 'little'))
        glyph_data.extend(glyphs[cp]['data'])

    header = struct.pack(
        '<2sBBBBHBBH',
        BF2_MAGIC,
        BF2_VERSION,
        0,  # flags: monospace, 16-bit codepoints
        max_width,
        height,
        len(codepoints),
        bytes_per_row,
        max_width,
        0,  # reserved
    )

    with open(output_path, 'wb') as f:
        f.write(header)
        for entry in index_entries:
            f.write(entry)
        f.write(glyph_data)

    size_kb = output_path.stat().st_size / 1024
    print(f"Created: {output_path} ({size_kb:.1f} KB)")
    return len(codepoints)


# =============================================================================
# Preview
# =============================================================================

def preview_glyphs(glyphs: Dict, properties: dict, text: str) -> None:
    """Print ASCII art preview of glyphs."""
    height = properties['height']
    max_width = properties['max_width']
    bytes_per_row = ceil(max_width / 8)

    print(f"\nPreview ({max_width}x{height}):")
    print("-" * 40)

    for char in text:
        cp = ord(char)
        if cp not in glyphs:
            print(f"'{char}' (U+{cp:04X}): NOT FOUND")
            continue

        data = glyphs[cp]['data']
        print(f"'{char}' (U+{cp:04X}):")
        for row in range(height):
            row_bytes = data[row * bytes_per_row:(row + 1) * bytes_per_row]
            line = ""
            for col in range(max_width):
                if (row_bytes[col // 8] >> (7 - col % 8)) & 1:
                    line += "█"
                else:
                    line += "·"
            print(f"  {line}")
        print()


# =============================================================================
# Main
# =============================================================================

def _parse_codepoint(value: str) -> int:
    return int(value[2:], 16) if value.upper().startswith('U+') else int(value, 0)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description='Convert BDF fonts to monospace BF2 atlases for bmpcanvas',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  bmpcanvas-font2bf2 spleen-8x16.bdf spleen-8x16.bf2
  bmpcanvas-font2bf2 spleen-8x16.bdf spleen-8x16.bf2 --preview "Hello!"
  bmpcanvas-font2bf2 spleen-8x16.bdf --preview "Test"
        """
    )

    parser.add_argument('input', type=Path, help='Input BDF font file')
    parser.add_argument('output', type=Path, nargs='?', help='Output BF2 file (optional for preview-only)')
    parser.add_argument('--first', type=_parse_codepoint, default=FIRST_CODEPOINT,
                        help='First codepoint to include (default: U+0020)')
    parser.add_argument('--last', type=_parse_codepoint, default=LAST_CODEPOINT,
                        help='Last codepoint to include (default: U+007E)')
    parser.add_argument('--preview', type=str,
                        help='Preview specific characters after conversion')

    args = parser.parse_args(argv)

    if args.output is None and not args.preview:
        parser.error("--preview is required when no output file is specified")

    if not args.input.exists():
        print(f"Error: Input file not found: {args.input}")
        return 1
    if args.input.suffix.lower() != '.bdf':
        print(f"Error: Unsupported font format: {args.input.suffix}")
        print("Supported: .bdf")
        return 1

    print(f"Loading BDF: {args.input}")
    glyphs, properties = load_bdf_font(args.input)
    print(f"Loaded {len(glyphs)} glyphs, {properties['max_width']}x{properties['height']}")

    if args.preview:
        preview_glyphs(glyphs, properties, args.preview)

    if args.output is None:
        return 0

    args.output.parent.mkdir(parents=True, exist_ok=True)
    written = write_bf2(args.output, glyphs, properties, args.first, args.last)
    return 0 if written else 1


if __name__ == '__main__':
    sys.exit(main())
