"""
Table Glyphs and Constant Text
==============================

Every box-drawing character used by the table, plus the legend
and the footer. Output compatibility depends on these exact
code points.

Weights:
    heavy   ━ ┃ ┏ ┓ ┗ ┛ ┣ ┫ ┯ ┷ ┿   section boundaries
    medium  ─ ┼ ┠ ┨                 between blocks of the operations grid
    dotted  ┈ ┄ ┬                   inside a carry/unit pair, between sums,
                                    inside the position title
"""

# Corners
TOP_LEFT = "┏"
TOP_RIGHT = "┓"
BOTTOM_LEFT = "┗"
BOTTOM_RIGHT = "┛"

# Frame
HEAVY_HORIZONTAL = "━"
HEAVY_VERTICAL = "┃"
HEAVY_TEE_LEFT = "┣"
HEAVY_TEE_RIGHT = "┫"
LIGHT_TEE_LEFT = "┠"
LIGHT_TEE_RIGHT = "┨"

# Joints between cells
DOWN_JOINT = "┯"
UP_JOINT = "┷"
HEAVY_CROSS = "┿"
LIGHT_CROSS = "┼"
DASHED_DOWN_JOINT = "┬"

# Fills
MEDIUM_FILL = "─"
DOTTED_FILL = "┈"
DASHED_FILL = "┄"

# Cell separator inside a data row
CELL_SEPARATOR = "│"

MULTIPLICATION_SIGN = "x"

CELL_WIDTH = 3


SYMBOLS_TITLE = "Symbols"

SYMBOLS = [
    "Pos. = Position.",
    "Ops. = Operations of the long multiplication.",
    "Sum. = Sum of each column of the multiplication.",
    "Sub n. = Subtotal of the last sum.",
    "Pro. = Product of the multiplication.",
    "n ^ = Carry-over.",
    "n R = The row number.",
    "n C = The column number of the sum of the rows.",
    "* Replace 'n' for a number.",
    "P = The product of multiplication.",
]

VALIDATION_SYMBOL = "V = Validate the product of multiplication."

AUTHOR = [
    "---",
    "Author: Israel Roldan",
    "E-mail: israel.alberto.rv@gmail.com",
    "License: GPL-3.0",
    "Project: https://github.com/airvzxf/long-multiplication-calculator",
]

# Row tags
CARRY_TAG = "^"
ROW_TAG = "R"
COLUMN_TAG = "C"
PRODUCT_TAG = "P"
VALIDATION_TAG = "V"
