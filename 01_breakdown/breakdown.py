"""
Long Multiplication Breakdown
=============================

The arithmetic behind every row of the table.

Algorithm (13 x 26):

         1 3
     x   2 6
    ━━━━━━━━━
       0 1      Carries: 6 x 1 and 6 x 3       (block 1)
    ┈┈┈┈┈┈┈┈┈
         6 8    Units:   6 x 1 and 6 x 3
    ─────────
     0 0        Carries: 2 x 1 and 2 x 3       (block 2)
    ┈┈┈┈┈┈┈┈┈
       2 6      Units:   2 x 1 and 2 x 3
    ━━━━━━━━━
     0 2 13 8   Column addition (most significant first)
     0 3 3 8    Subtotal: 338

Conventions:
- One block per multiplier digit, least significant multiplier digit first
- Inside a block, most significant multiplicand digit first
- Column arrays are least-significant first (index 0 = units column)
"""

from dataclasses import dataclass
from typing import List, Tuple

from .length import digit_length, joint_length, digits


class CarryOverflowError(ArithmeticError):
    """A carry left the most significant column of the frame."""


def multiply_digits(multiplicand: int, multiplier: int) -> Tuple[List[int], List[int]]:
    """
    Multiply every multiplicand digit by every multiplier digit.

    Returns:
        (units, carries), both of length
        digit_length(multiplicand) * digit_length(multiplier),
        grouped in one block per multiplier digit.

    Example:
        multiply_digits(25, 3) == ([6, 5], [0, 1])
        multiply_digits(13, 26) == ([6, 8, 2, 6], [0, 1, 0, 0])
    """
    multiplicand_digits = digits(multiplicand)
    units: List[int] = []
    carries: List[int] = []

    for multiplier_digit in reversed(digits(multiplier)):
        block_units = []
        block_carries = []
        for multiplicand_digit in reversed(multiplicand_digits):
            product = multiplier_digit * multiplicand_digit
            block_units.append(product % 10)
            block_carries.append(product // 10)

        # The loop runs from the units digit; the row reads left to right
        block_units.reverse()
        block_carries.reverse()
        units.extend(block_units)
        carries.extend(block_carries)

    return units, carries


def column_addition(multiplicand: int, multiplier: int) -> List[int]:
    """
    Sum every unit and carry that lands in each column.

    Block k is shifted k columns toward the most significant end.
    A carry always lands one column left of its unit.

    Example:
        column_addition(13, 26) == [8, 13, 2, 0]
        column_addition(123, 456) == [8, 8, 10, 15, 4, 0]
    """
    block_size = digit_length(multiplicand)
    units, carries = multiply_digits(multiplicand, multiplier)
    additions = [0] * joint_length(multiplicand, multiplier)

    for index, (unit, carry) in enumerate(zip(units, carries)):
        block, position = divmod(index, block_size)
        column = block + (block_size - 1 - position)
        additions[column] += unit
        additions[column + 1] += carry

    return additions


def subtotal_pass(columns: List[int]) -> List[int]:
    """
    Carry the tens of every column into its more significant neighbour.

    Every column is split from the input values, so a column that
    receives a carry may still hold two digits afterwards.

    Raises:
        CarryOverflowError: If the most significant column needs to carry

    Example:
        subtotal_pass([1, 10, 19, 27, 27, 27, 26, 17, 8])
            == [1, 0, 10, 8, 9, 9, 8, 9, 9]
    """
    result = [0] * len(columns)

    for index, value in enumerate(columns):
        if value < 10:
            result[index] += value
            continue

        if index + 1 >= len(columns):
            raise CarryOverflowError(
                f"Column {index + 1} holds {value} and has no column to carry into"
            )
        result[index] += value % 10
        result[index + 1] += value // 10

    return result


def collapse(columns: List[int]) -> List[List[int]]:
    """
    Apply subtotal passes until every column holds a single digit.

    Returns every pass in order. The last one is the product,
    least significant digit first. There is always at least one pass.
    """
    passes = [subtotal_pass(columns)]
    while any(value > 9 for value in passes[-1]):
        passes.append(subtotal_pass(passes[-1]))
    return passes


@dataclass(frozen=True)
class Breakdown:
    """
    Everything the table shows for one multiplication.

    Example:
        breakdown = break_down(25, 3)
        breakdown.units == [6, 5]
        breakdown.product_digits == [0, 7, 5]
    """
    multiplicand: int
    multiplier: int
    units: List[int]
    carries: List[int]
    additions: List[int]
    subtotals: List[List[int]]

    @property
    def block_size(self) -> int:
        return digit_length(self.multiplicand)

    @property
    def frame_width(self) -> int:
        return joint_length(self.multiplicand, self.multiplier)

    def blocks(self) -> List[Tuple[List[int], List[int]]]:
        """(units, carries) of each block, in the order they are typeset."""
        size = self.block_size
        return [
            (self.units[start:start + size], self.carries[start:start + size])
            for start in range(0, len(self.units), size)
        ]

    @property
    def intermediate_subtotals(self) -> List[List[int]]:
        """Passes that still hold a two-digit column ("Sub n." rows)."""
        return [columns for columns in self.subtotals if any(v > 9 for v in columns)]

    @property
    def product_digits(self) -> List[int]:
        """Product digits, most significant first, padded to the frame width."""
        return list(reversed(self.subtotals[-1]))

    @property
    def product(self) -> int:
        value = 0
        for digit in self.product_digits:
            value = value * 10 + digit
        return value


def break_down(multiplicand: int, multiplier: int) -> Breakdown:
    """Build the full breakdown of multiplicand x multiplier."""
    units, carries = multiply_digits(multiplicand, multiplier)
    additions = column_addition(multiplicand, multiplier)
    return Breakdown(
        multiplicand=multiplicand,
        multiplier=multiplier,
        units=units,
        carries=carries,
        additions=additions,
        subtotals=collapse(additions),
    )
