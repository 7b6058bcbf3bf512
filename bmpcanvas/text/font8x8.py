"""
Built-in 8x8 monospace font, printable ASCII (U+0020 - U+007E).

One glyph per entry, 8 bytes, one byte per row from top to bottom.
Within a row the least significant bit is the leftmost pixel.
Derived from the public domain font8x8 "basic" set.
"""

FONT_WIDTH = 8
FONT_HEIGHT = 8
FIRST_CODEPOINT = 0x20

GLYPHS = (
    b"\x00\x00\x00\x00\x00\x00\x00\x00",  # U+0020 (space)
    b"\x18\x3C\x3C\x18\x18\x00\x18\x00",  # U+0021 !
    b"\x36\x36\x00\x00\x00\x00\x00\x00",  # U+0022 "
    b"\x36\x36\x7F\x36\x7F\x36\x36\x00",  # U+0023 #
    b"\x0C\x3E\x03\x1E\x30\x1F\x0C\x00",  # U+0024 $
    b"\x00\x63\x33\x18\x0C\x66\x63\x00",  # U+0025 %
    b"\x1C\x36\x1C\x6E\x3B\x33\x6E\x00",  # U+0026 &
    b"\x06\x06\x03\x00\x00\x00\x00\x00",  # U+0027 '
    b"\x18\x0C\x06\x06\x06\x0C\x18\x00",  # U+0028 (
    b"\x06\x0C\x18\x18\x18\x0C\x06\x00",  # U+0029 )
    b"\x00\x66\x3C\xFF\x3C\x66\x00\x00",  # U+002A *
    b"\x00\x0C\x0C\x3F\x0C\x0C\x00\x00",  # U+002B +
    b"\x00\x00\x00\x00\x00\x0C\x0C\x06",  # U+002C ,
    b"\x00\x00\x00\x3F\x00\x00\x00\x00",  # U+002D -
    b"\x00\x00\x00\x00\x00\x0C\x0C\x00",  # U+002E .
    b"\x60\x30\x18\x0C\x06\x03\x01\x00",  # U+002F /
    b"\x3E\x63\x73\x7B\x6F\x67\x3E\x00",  # U+0030 0
    b"\x0C\x0E\x0C\x0C\x0C\x0C\x3F\x00",  # U+0031 1
    b"\x1E\x33\x30\x1C\x06\x33\x3F\x00",  # U+0032 2
    b"\x1E\x33\x30\x1C\x30\x33\x1E\x00",  # U+0033 3
    b"\x38\x3C\x36\x33\x7F\x30\x78\x00",  # U+0034 4
    b"\x3F\x03\x1F\x30\x30\x33\x1E\x00",  # U+0035 5
    b"\x1C\x06\x03\x1F\x33\x33\x1E\x00",  # U+0036 6
    b"\x3F\x33\x30\x18\x0C\x0C\x0C\x00",  # U+0037 7
    b"\x1E\x33\x33\x1E\x33\x33\x1E\x00",  # U+0038 8
    b"\x1E\x33\x33\x3E\x30\x18\x0E\x00",  # U+0039 9
    b"\x00\x0C\x0C\x00\x00\x0C\x0C\x00",  # U+003A :
    b"\x00\x0C\x0C\x00\x00\x0C\x0C\x06",  # U+003B ;
    b"\x18\x0C\x06\x03\x06\x0C\x18\x00",  # U+003C <
    b"\x00\x00\x3F\x00\x00\x3F\x00\x00",  # U+003D =
    b"\x06\x0C\x18\x30\x18\x0C\x06\x00",  # U+003E >
    b"\x1E\x33\x30\x18\x0C\x00\x0C\x00",  # U+003F ?
    b"\x3E\x63\x7B\x7B\x7B\x03\x1E\x00",  # U+0040 @
    b"\x0C\x1E\x33\x33\x3F\x33\x33\x00",  # U+0041 A
    b"\x3F\x66\x66\x3E\x66\x66\x3F\x00",  # U+0042 B
    b"\x3C\x66\x03\x03\x03\x66\x3C\x00",  # U+0043 C
    b"\x1F\x36\x66\x66\x66\x36\x1F\x00",  # U+0044 D
    b"\x7F\x46\x16\x1E\x16\x46\x7F\x00",  # U+0045 E
    b"\x7F\x46\x16\x1E\x16\x06\x0F\x00",  # U+0046 F
    b"\x3C\x66\x03\x03\x73\x66\x7C\x00",  # U+0047 G
    b"\x33\x33\x33\x3F\x33\x33\x33\x00",  # U+0048 H
    b"\x1E\x0C\x0C\x0C\x0C\x0C\x1E\x00",  # U+0049 I
    b"\x78\x30\x30\x30\x33\x33\x1E\x00",  # U+004A J
    b"\x67\x66\x36\x1E\x36\x66\x67\x00",  # U+004B K
    b"\x0F\x06\x06\x06\x46\x66\x7F\x00",  # U+004C L
    b"\x63\x77\x7F\x7F\x6B\x63\x63\x00",  # U+004D M
    b"\x63\x67\x6F\x7B\x73\x63\x63\x00",  # U+004E N
    b"\x1C\x36\x63\x63\x63\x36\x1C\x00",  # U+004F O
    b"\x3F\x66\x66\x3E\x06\x06\x0F\x00",  # U+0050 P
    b"\x1E\x33\x33\x33\x3B\x1E\x38\x00",  # U+0051 Q
    b"\x3F\x66\x66\x3E\x36\x66\x67\x00",  # U+0052 R
    b"\x1E\x33\x07\x0E\x38\x33\x1E\x00",  # U+0053 S
    b"\x3F\x2D\x0C\x0C\x0C\x0C\x1E\x00",  # U+0054 T
    b"\x33\x33\x33\x33\x33\x33\x3F\x00",  # U+0055 U
    b"\x33\x33\x33\x33\x33\x1E\x0C\x00",  # U+0056 V
    b"\x63\x63\x63\x6B\x7F\x77\x63\x00",  # U+0057 W
    b"\x63\x63\x36\x1C\x1C\x36\x63\x00",  # U+0058 X
    b"\x33\x33\x33\x1E\x0C\x0C\x1E\x00",  # U+0059 Y
    b"\x7F\x63\x31\x18\x4C\x66\x7F\x00",  # U+005A Z
    b"\x1E\x06\x06\x06\x06\x06\x1E\x00",  # U+005B [
    b"\x03\x06\x0C\x18\x30\x60\x40\x00",  # U+005C backslash
    b"\x1E\x18\x18\x18\x18\x18\x1E\x00",  # U+005D ]
    b"\x08\x1C\x36\x63\x00\x00\x00\x00",  # U+005E ^
    b"\x00\x00\x00\x00\x00\x00\x00\xFF",  # U+005F _
    b"\x0C\x0C\x18\x00\x00\x00\x00\x00",  # U+0060 `
    b"\x00\x00\x1E\x30\x3E\x33\x6E\x00",  # U+0061 a
    b"\x07\x06\x06\x3E\x66\x66\x3B\x00",  # U+0062 b
    b"\x00\x00\x1E\x33\x03\x33\x1E\x00",  # U+0063 c
    b"\x38\x30\x30\x3E\x33\x33\x6E\x00",  # U+0064 d
    b"\x00\x00\x1E\x33\x3F\x03\x1E\x00",  # U+0065 e
    b"\x1C\x36\x06\x0F\x06\x06\x0F\x00",  # U+0066 f
    b"\x00\x00\x6E\x33\x33\x3E\x30\x1F",  # U+0067 g
    b"\x07\x06\x36\x6E\x66\x66\x67\x00",  # U+0068 h
    b"\x0C\x00\x0E\x0C\x0C\x0C\x1E\x00",  # U+0069 i
    b"\x30\x00\x30\x30\x30\x33\x33\x1E",  # U+006A j
    b"\x07\x06\x66\x36\x1E\x36\x67\x00",  # U+006B k
    b"\x0E\x0C\x0C\x0C\x0C\x0C\x1E\x00",  # U+006C l
    b"\x00\x00\x33\x7F\x7F\x6B\x63\x00",  # U+006D m
    b"\x00\x00\x1F\x33\x33\x33\x33\x00",  # U+006E n
    b"\x00\x00\x1E\x33\x33\x33\x1E\x00",  # U+006F o
    b"\x00\x00\x3B\x66\x66\x3E\x06\x0F",  # U+0070 p
    b"\x00\x00\x6E\x33\x33\x3E\x30\x78",  # U+0071 q
    b"\x00\x00\x3B\x6E\x66\x06\x0F\x00",  # U+0072 r
    b"\x00\x00\x3E\x03\x1E\x30\x1F\x00",  # U+0073 s
    b"\x08\x0C\x3E\x0C\x0C\x2C\x18\x00",  # U+0074 t
    b"\x00\x00\x33\x33\x33\x33\x6E\x00",  # U+0075 u
    b"\x00\x00\x33\x33\x33\x1E\x0C\x00",  # U+0076 v
    b"\x00\x00\x63\x6B\x7F\x7F\x36\x00",  # U+0077 w
    b"\x00\x00\x63\x36\x1C\x36\x63\x00",  # U+0078 x
    b"\x00\x00\x33\x33\x33\x3E\x30\x1F",  # U+0079 y
    b"\x00\x00\x3F\x19\x0C\x26\x3F\x00",  # U+007A z
    b"\x38\x0C\x0C\x07\x0C\x0C\x38\x00",  # U+007B {
    b"\x18\x18\x18\x00\x18\x18\x18\x00",  # U+007C |
    b"\x07\x0C\x0C\x38\x0C\x0C\x07\x00",  # U+007D }
    b"\x6E\x3B\x00\x00\x00\x00\x00\x00",  # U+007E ~
)
