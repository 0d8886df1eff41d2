"""Per-cell text shaping for one viewport row.

Turns a raw content line into exactly ``width`` terminal columns: clipped on
the left by the horizontal offset, truncated on the right, padded with blanks.
"""

from __future__ import annotations

import unicodedata


def cell_glyph(ch: str) -> str:
    """Return the printable stand-in for ``ch``.

    Tabs draw as one blank; C0 controls, DEL and C1 controls draw as ``?``.
    """
    if ch == "\t":
        return " "
    code = ord(ch)
    if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
        return "?"
    return ch


def char_display_width(ch: str) -> int:
    """Return terminal column width for one printable character.

    Combining marks consume no columns, East Asian wide/fullwidth characters
    consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def shape_row(line: str, x: int, width: int) -> str:
    """Return the visible slice of ``line`` for horizontal offset ``x``.

    Cell ``c`` starts at rune ``c - x``: a negative ``x`` skips ``-x`` runes,
    a positive one leaves ``x`` leading blanks. The result always spans
    ``width`` columns. A wide rune that would cross the right edge becomes a
    blank.
    """
    if width <= 0:
        return ""

    out: list[str] = []
    col = 0
    if x > 0:
        col = min(x, width)
        out.append(" " * col)
        start = 0
    else:
        start = -x

    for ch in line[start:]:
        if col >= width:
            break
        glyph = cell_glyph(ch)
        w = char_display_width(glyph)
        if col + w > width:
            break
        out.append(glyph)
        col += w

    if col < width:
        out.append(" " * (width - col))
    return "".join(out)
