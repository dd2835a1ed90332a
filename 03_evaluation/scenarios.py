"""
Worked Examples
===============

Multiplications with known breakdowns. Used by the runtime's
examples mode and by the tests.

Column additions are least-significant first (index 0 = units).
"""

from typing import List, Dict, Any

DATASET_NAME = "long-multiplication-worked-examples"
DATASET_DESCRIPTION = "Multiplications with hand-checked breakdowns"


WORKED_EXAMPLES: List[Dict[str, Any]] = [
    # Single block
    {
        "name": "single_digit_multiplier",
        "inputs": {"multiplicand": "25", "multiplier": "3"},
        "expected": {
            "units": [6, 5],
            "carries": [0, 1],
            "additions": [5, 7, 0],
            "product_row": "075",
            "product": 75,
        },
        "tags": ["single_block"],
    },
    {
        "name": "one_digit_each",
        "inputs": {"multiplicand": "3", "multiplier": "2"},
        "expected": {
            "units": [6],
            "carries": [0],
            "additions": [6, 0],
            "product_row": "06",
            "product": 6,
        },
        "tags": ["single_block", "padded_product"],
    },
    {
        "name": "one_digit_with_carry",
        "inputs": {"multiplicand": "5", "multiplier": "7"},
        "expected": {
            "units": [5],
            "carries": [3],
            "additions": [5, 3],
            "product_row": "35",
            "product": 35,
        },
        "tags": ["single_block"],
    },

    # Several blocks, one subtotal pass
    {
        "name": "two_by_two",
        "inputs": {"multiplicand": "13", "multiplier": "26"},
        "expected": {
            "units": [6, 8, 2, 6],
            "carries": [0, 1, 0, 0],
            "additions": [8, 13, 2, 0],
            "product_row": "0338",
            "product": 338,
        },
        "tags": ["subtotal"],
    },
    {
        "name": "three_by_three",
        "inputs": {"multiplicand": "123", "multiplier": "456"},
        "expected": {
            "additions": [8, 8, 10, 15, 4, 0],
            "product_row": "056088",
            "product": 56088,
        },
        "tags": ["subtotal"],
    },

    # A subtotal pass that still holds two digits (Sub 1. is rendered)
    {
        "name": "five_by_four",
        "inputs": {"multiplicand": "13597", "multiplier": "8642"},
        "expected": {
            "additions": [4, 17, 11, 24, 18, 23, 15, 10, 0],
            "subtotals": [
                [4, 7, 2, 5, 10, 4, 7, 1, 1],
                [4, 7, 2, 5, 0, 5, 7, 1, 1],
            ],
            "product_row": "117505274",
            "product": 117505274,
        },
        "tags": ["sub_rows"],
    },
    {
        "name": "two_subtotal_passes",
        "inputs": {"multiplicand": "800875", "multiplier": "66172"},
        "expected": {
            "subtotals": [
                [0, 0, 5, 10, 9, 4, 5, 9, 9, 2, 5],
                [0, 0, 5, 0, 10, 4, 5, 9, 9, 2, 5],
                [0, 0, 5, 0, 0, 5, 5, 9, 9, 2, 5],
            ],
            "product_row": "52995500500",
            "product": 52995500500,
        },
        "tags": ["sub_rows"],
    },

    # Commuted operands give the same sums and product
    {
        "name": "long_multiplicand",
        "inputs": {"multiplicand": "78924358", "multiplier": "357"},
        "expected": {"product": 78924358 * 357},
        "tags": ["commutative"],
    },
    {
        "name": "long_multiplier",
        "inputs": {"multiplicand": "357", "multiplier": "78924358"},
        "expected": {"product": 78924358 * 357},
        "tags": ["commutative"],
    },

    # One operation row pair per multiplier digit
    {
        "name": "thirteen_blocks",
        "inputs": {"multiplicand": "7", "multiplier": "9876543210123"},
        "expected": {"product": 7 * 9876543210123, "blocks": 13},
        "tags": ["many_blocks"],
    },

    # Zero operands
    {
        "name": "zero_multiplicand",
        "inputs": {"multiplicand": "0", "multiplier": "456"},
        "expected": {"additions": [0, 0, 0, 0], "product_row": "0000", "product": 0},
        "tags": ["zero"],
    },
]


def get_scenarios_by_tag(tag: str) -> List[Dict[str, Any]]:
    """Get all worked examples with a specific tag."""
    return [s for s in WORKED_EXAMPLES if tag in s.get("tags", [])]


def get_scenario_by_name(name: str) -> Dict[str, Any]:
    """Get a specific worked example by name."""
    for scenario in WORKED_EXAMPLES:
        if scenario["name"] == name:
            return scenario
    raise ValueError(f"Scenario not found: {name}")
