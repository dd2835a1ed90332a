"""
01_BREAKDOWN - Long Multiplication Arithmetic
=============================================

Question this layer answers:
"What are the digits, carries and column sums?"

Pure functions, no formatting, no I/O:
- Digit lengths (frame width of the table)
- Single-digit products split into unit and carry
- Column addition of every unit and carry
- Subtotal passes until every column holds one digit

```python
breakdown = break_down(13, 26)
breakdown.additions   # [8, 13, 2, 0]
breakdown.product     # 338
```

Column arrays are least-significant first:
index 0 is the units column.
"""

from .length import digit_length, joint_length, digits
from .magnitude import parse_magnitude
from .breakdown import (
    Breakdown,
    CarryOverflowError,
    multiply_digits,
    column_addition,
    subtotal_pass,
    collapse,
    break_down,
)

__all__ = [
    "digit_length",
    "joint_length",
    "digits",
    "parse_magnitude",
    "Breakdown",
    "CarryOverflowError",
    "multiply_digits",
    "column_addition",
    "subtotal_pass",
    "collapse",
    "break_down",
]
