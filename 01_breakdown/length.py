"""
Digit Lengths
=============

The number of decimal digits of the operands fixes the width
of every grid in the table.

    digit_length(0)        -> 1
    digit_length(1234)     -> 4
    joint_length(123, 45)  -> 5
"""

from typing import List


def digit_length(number: int) -> int:
    """Number of decimal digits of a magnitude. Zero has one digit."""
    length = 1
    while number >= 10:
        number //= 10
        length += 1
    return length


def joint_length(number_a: int, number_b: int) -> int:
    """Frame width: the digits of both operands together."""
    return digit_length(number_a) + digit_length(number_b)


def digits(number: int) -> List[int]:
    """
    Decimal digits of a magnitude, most significant first.

    Example:
        digits(3057) == [3, 0, 5, 7]
        digits(0) == [0]
    """
    result = [number % 10]
    number //= 10
    while number:
        result.append(number % 10)
        number //= 10
    result.reverse()
    return result
