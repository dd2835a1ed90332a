"""
Table Renderer
==============

Turns a long multiplication breakdown into the box-drawn table.

Example (5 x 7):

    ┏━━━━━━━┓
    ┃Pos.   ┃
    ┠┄┄┄┬┄┄┄┨
    ┃ 2 │ 1 ┃
    ┣━━━┷━━━┫
    ┃Ops.   ┃
    ┣━━━┯━━━┫
    ┃   │ 5 ┃
    ┃ x │ 7 ┃
    ┣━━━┿━━━┫
    ┃ 3 │   ┃ 1 ^
    ┠┈┈┈┼┈┈┈┨
    ┃   │ 5 ┃ 1 R
    ┣━━━┷━━━┫
    ┃Sum.   ┃
    ┣━━━┯━━━┫
    ┃   │ 5 ┃ 1 C
    ┠┈┈┈┼┈┈┈┨
    ┃ 3 │   ┃ 2 C
    ┣━━━┷━━━┫
    ┃Pro.   ┃
    ┣━━━┯━━━┫
    ┃ 3 │ 5 ┃ P
    ┗━━━┷━━━┛

Each section appends lines to one buffer, in a fixed order.
Nothing is mutated after it has been appended.
"""

import sys
import importlib.util
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from . import glyphs
from . import rows


# ============================================================================
# Dynamic Import Helper (for numbered modules)
# ============================================================================

def import_layer(layer_name: str):
    """Import a numbered layer dynamically, reusing it if already loaded."""
    if layer_name in sys.modules:
        return sys.modules[layer_name]

    project_root = Path(__file__).parent.parent
    init_path = project_root / layer_name / "__init__.py"

    if not init_path.exists():
        raise ImportError(f"Layer {layer_name} not found")

    spec = importlib.util.spec_from_file_location(layer_name, init_path)
    module = importlib.util.module_from_spec(spec)
    sys.modules[layer_name] = module
    spec.loader.exec_module(module)
    return module


breakdown_layer = import_layer("01_breakdown")


@dataclass
class RenderOptions:
    """What goes around the grids (the grids themselves are fixed)."""
    show_symbols: bool = True
    show_author: bool = True
    validate_product: bool = False


# ============================================================================
# Constant sections
# ============================================================================

def symbols(text: List[str], validate_product: bool = False) -> None:
    """Legend of the abbreviations, followed by a blank line."""
    text.append("")
    text.append(glyphs.SYMBOLS_TITLE)
    text.append("=" * len(glyphs.SYMBOLS_TITLE))
    text.extend(glyphs.SYMBOLS)
    if validate_product:
        text.append(glyphs.VALIDATION_SYMBOL)
    text.append("")


def author(text: List[str]) -> None:
    """Footer, preceded by a blank line."""
    text.append("")
    text.extend(glyphs.AUTHOR)


# ============================================================================
# Frame
# ============================================================================

def top_border(width: int, text: List[str]) -> None:
    text.append(rows.rule(
        width, glyphs.TOP_LEFT, glyphs.HEAVY_HORIZONTAL, glyphs.HEAVY_HORIZONTAL, glyphs.TOP_RIGHT,
    ))


def bottom_border(width: int, text: List[str]) -> None:
    text.append(rows.rule(
        width, glyphs.BOTTOM_LEFT, glyphs.HEAVY_HORIZONTAL, glyphs.UP_JOINT, glyphs.BOTTOM_RIGHT,
    ))


def position_title(width: int, text: List[str]) -> None:
    """Pos. header and the column numbers, counting down to 1."""
    text.append(rows.title(width, "Pos."))
    text.append(rows.dashed_separator(width))
    text.append(rows.cells_row([rows.position_cell(n) for n in range(width, 0, -1)]))
    text.append(rows.heavy_close(width))


def operation_title(width: int, text: List[str]) -> None:
    text.append(rows.title(width, "Ops."))
    text.append(rows.heavy_open(width))


def sum_title(width: int, text: List[str]) -> None:
    text.append(rows.title(width, "Sum."))
    text.append(rows.heavy_open(width))


# ============================================================================
# Grids
# ============================================================================

def multiplication(breakdown, text: List[str]) -> None:
    """
    The operands, right aligned. The multiplication sign takes
    the leftmost cell of the multiplier row.
    """
    width = breakdown.frame_width
    digits = breakdown_layer.digits

    text.append(rows.cells_row(rows.place(width, digits(breakdown.multiplicand))))

    multiplier_cells = rows.place(width, digits(breakdown.multiplier))
    multiplier_cells[0] = rows.cell(glyphs.MULTIPLICATION_SIGN)
    text.append(rows.cells_row(multiplier_cells))

    text.append(rows.heavy_cross(width))


def operations(breakdown, text: List[str]) -> None:
    """
    One carry row and one unit row per multiplier digit.

    Block i (1-based) has its units ending i - 1 columns from the
    right edge; its carries sit one column further left.
    """
    width = breakdown.frame_width
    blocks = breakdown.blocks()

    for index, (units, carries) in enumerate(blocks):
        row_number = index + 1

        text.append(rows.cells_row(
            rows.place(width, carries, offset=row_number),
            tag=f"{row_number} {glyphs.CARRY_TAG}",
        ))
        text.append(rows.dotted_separator(width))
        text.append(rows.cells_row(
            rows.place(width, units, offset=index),
            tag=f"{row_number} {glyphs.ROW_TAG}",
        ))

        if row_number < len(blocks):
            text.append(rows.medium_separator(width))

    text.append(rows.heavy_close(width))


def column_rows(columns: List[int], width: int, text: List[str]) -> None:
    """
    One row per column value, units column first. The digits of
    the value of column j end in the j-th cell from the right.
    """
    digits = breakdown_layer.digits

    for index, value in enumerate(columns):
        text.append(rows.cells_row(
            rows.place(width, digits(value), offset=index),
            tag=f"{index + 1} {glyphs.COLUMN_TAG}",
        ))
        if index + 1 < len(columns):
            text.append(rows.dotted_separator(width))


def long_sum(breakdown, text: List[str]) -> None:
    """Column sums, every subtotal pass still holding two digits, and the product."""
    width = breakdown.frame_width

    column_rows(breakdown.additions, width, text)

    for number, columns in enumerate(breakdown.intermediate_subtotals, start=1):
        text.append(rows.heavy_close(width))
        text.append(rows.title(width, f"Sub {number}."))
        text.append(rows.heavy_open(width))
        column_rows(columns, width, text)

    text.append(rows.heavy_close(width))
    text.append(rows.title(width, "Pro."))
    text.append(rows.heavy_open(width))
    text.append(rows.cells_row(
        [rows.cell(str(digit)) for digit in breakdown.product_digits],
        tag=glyphs.PRODUCT_TAG,
    ))


def product_validation(breakdown, text: List[str]) -> None:
    """The product computed directly, to check the P row against."""
    width = breakdown.frame_width
    product = breakdown.multiplicand * breakdown.multiplier

    text.append(rows.medium_separator(width))
    text.append(rows.cells_row(
        rows.place(width, breakdown_layer.digits(product)),
        tag=glyphs.VALIDATION_TAG,
    ))


# ============================================================================
# Entry point
# ============================================================================

def render_table(
    multiplicand: Union[str, int],
    multiplier: Union[str, int],
    options: Optional[RenderOptions] = None,
) -> str:
    """
    Render the long multiplication table of two decimal numbers.

    Args:
        multiplicand: Digit string (or non-negative int)
        multiplier: Digit string (or non-negative int)
        options: Legend / footer / validation row switches

    Returns:
        The complete table, newline terminated

    Raises:
        ValueError: If an operand is not a non-negative decimal number

    Example:
        table = render_table("13", "26")
        assert "┃ 0 │ 3 │ 3 │ 8 ┃ P" in table
    """
    options = options or RenderOptions()
    breakdown = breakdown_layer.break_down(
        breakdown_layer.parse_magnitude(multiplicand, "multiplicand"),
        breakdown_layer.parse_magnitude(multiplier, "multiplier"),
    )
    width = breakdown.frame_width

    text: List[str] = []
    if options.show_symbols:
        symbols(text, options.validate_product)
    top_border(width, text)
    position_title(width, text)
    operation_title(width, text)
    multiplication(breakdown, text)
    operations(breakdown, text)
    sum_title(width, text)
    long_sum(breakdown, text)
    if options.validate_product:
        product_validation(breakdown, text)
    bottom_border(width, text)
    if options.show_author:
        author(text)

    return "\n".join(text) + "\n"
