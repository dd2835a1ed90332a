"""
Row Primitives
==============

Every line of the table is one of three shapes:

    rule        ┣━━━┷━━━┫          left + fills joined by a joint + right
    title       ┃Sum.   ┃          label padded to the frame
    cells row   ┃   │ 5 ┃ 1 C      one 3-glyph cell per column + optional tag

A frame of `width` columns is always 4 * width + 1 glyphs wide.
"""

from typing import List, Optional, Sequence

from . import glyphs


def inner_width(width: int) -> int:
    """Glyphs between the left and right frame of a `width`-column row."""
    return width * glyphs.CELL_WIDTH + width - 1


def rule(width: int, left: str, fill: str, joint: str, right: str) -> str:
    """A horizontal line: `width` fills of three glyphs joined by `joint`."""
    return left + joint.join([fill * glyphs.CELL_WIDTH] * width) + right


def title(width: int, label: str) -> str:
    """A full-width header row such as ┃Pos.   ┃."""
    return glyphs.HEAVY_VERTICAL + label.ljust(inner_width(width)) + glyphs.HEAVY_VERTICAL


def cell(value: str = " ") -> str:
    """One centred cell: ' 7 '."""
    return f" {value} "


def position_cell(position: int) -> str:
    """Position numbers are centred when single digit, right aligned otherwise."""
    if position < 10:
        return cell(str(position))
    return str(position).rjust(glyphs.CELL_WIDTH)


def place(width: int, values: Sequence[int], offset: int = 0) -> List[str]:
    """
    Cells of a `width`-column row holding `values` left to right,
    the last one `offset` columns away from the right edge.

    Example:
        place(4, [1, 7], offset=1) == ['   ', ' 1 ', ' 7 ', '   ']
    """
    leading = width - offset - len(values)
    if leading < 0 or offset < 0:
        raise ValueError(
            f"Placing {len(values)} digits at offset {offset} failed because the frame has {width} columns"
        )
    return (
        [cell()] * leading
        + [cell(str(value)) for value in values]
        + [cell()] * offset
    )


def cells_row(cells: Sequence[str], tag: Optional[str] = None) -> str:
    """Join cells into a framed row, with the tag after the closing glyph."""
    row = glyphs.HEAVY_VERTICAL + glyphs.CELL_SEPARATOR.join(cells) + glyphs.HEAVY_VERTICAL
    if tag:
        row += " " + tag
    return row


# Named rules, one per structural role

def heavy_close(width: int) -> str:
    """┣━━━┷━━━┫ - closes a section."""
    return rule(width, glyphs.HEAVY_TEE_LEFT, glyphs.HEAVY_HORIZONTAL, glyphs.UP_JOINT, glyphs.HEAVY_TEE_RIGHT)


def heavy_open(width: int) -> str:
    """┣━━━┯━━━┫ - opens a grid under a title."""
    return rule(width, glyphs.HEAVY_TEE_LEFT, glyphs.HEAVY_HORIZONTAL, glyphs.DOWN_JOINT, glyphs.HEAVY_TEE_RIGHT)


def heavy_cross(width: int) -> str:
    """┣━━━┿━━━┫ - under the multiplicand and multiplier."""
    return rule(width, glyphs.HEAVY_TEE_LEFT, glyphs.HEAVY_HORIZONTAL, glyphs.HEAVY_CROSS, glyphs.HEAVY_TEE_RIGHT)


def medium_separator(width: int) -> str:
    """┠───┼───┨ - between blocks of the operations grid."""
    return rule(width, glyphs.LIGHT_TEE_LEFT, glyphs.MEDIUM_FILL, glyphs.LIGHT_CROSS, glyphs.LIGHT_TEE_RIGHT)


def dotted_separator(width: int) -> str:
    """┠┈┈┈┼┈┈┈┨ - between sibling rows."""
    return rule(width, glyphs.LIGHT_TEE_LEFT, glyphs.DOTTED_FILL, glyphs.LIGHT_CROSS, glyphs.LIGHT_TEE_RIGHT)


def dashed_separator(width: int) -> str:
    """┠┄┄┄┬┄┄┄┨ - inside the position title."""
    return rule(width, glyphs.LIGHT_TEE_LEFT, glyphs.DASHED_FILL, glyphs.DASHED_DOWN_JOINT, glyphs.LIGHT_TEE_RIGHT)
