"""
Magnitude Parsing
=================

Converts the operands received from the outside (digit strings)
into non-negative integers.

Why parse here?
- One place decides what a valid operand is
- Every layer above works with plain ints
- Errors name the operand that was wrong
"""

import re
from typing import Union

DIGIT_STRING = re.compile(r"^[0-9]+$")


def parse_magnitude(value: Union[str, int], name: str = "operand") -> int:
    """
    Parse a decimal digit string (or an int) into a magnitude.

    Args:
        value: Digit string such as "13597", or a non-negative int
        name: Operand name used in error messages

    Returns:
        The non-negative integer value

    Raises:
        ValueError: If the value is not a non-negative decimal number

    Example:
        parse_magnitude("0042") == 42
        parse_magnitude(" 7 ") == 7
    """
    if isinstance(value, bool):
        raise ValueError(f"Parsing the {name} failed because a boolean is not a number")

    if isinstance(value, int):
        if value < 0:
            raise ValueError(
                f"Parsing the {name} failed because negative numbers are not supported: {value}"
            )
        return value

    if not isinstance(value, str):
        raise ValueError(
            f"Parsing the {name} failed because {type(value).__name__} is not a digit string"
        )

    text = value.strip()
    if not text:
        raise ValueError(f"Parsing the {name} failed because it is empty")

    if not DIGIT_STRING.match(text):
        raise ValueError(
            f"Parsing the {name} failed because '{value}' contains characters other than 0-9"
        )

    return int(text)
