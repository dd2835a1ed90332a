"""
Table Judge
===========

Checks a rendered table for correctness.

This is a DETERMINISTIC judge (rule-based): it reads the text
back, the same way a person would, and compares it with the
arithmetic. Same input always gives the same verdict.
"""

import sys
import importlib.util
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import List, Optional, Tuple, Union


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

TABLE_START = "┏"
TABLE_END = "┗"
ROW_START = "┃"
CELL_SEPARATOR = "│"
CLOSING_GLYPHS = "┃┫┨┓┛"

# A data row: its cells and the tag written after the frame ("" if none)
Row = Tuple[List[str], str]


class JudgmentCriteria(Enum):
    """Criteria for judging a rendered table."""
    PRODUCT_CORRECT = auto()      # Does the P row read a x b?
    FRAME_CONSISTENT = auto()     # Is every line exactly one frame wide?
    OPERATIONS_COMPLETE = auto()  # One carry/unit pair per multiplier digit?
    VALIDATION_MATCHES = auto()   # Does the V row (if any) read a x b?


@dataclass
class Judgment:
    """A judge's assessment on one criterion."""
    criteria: JudgmentCriteria
    passed: bool
    score: float  # 0.0 to 1.0
    explanation: str


# ============================================================
# READING A TABLE BACK
# ============================================================

def table_lines(content: str) -> List[str]:
    """Lines from the top border to the bottom border, inclusive."""
    lines = content.splitlines()
    start = next((i for i, line in enumerate(lines) if line.startswith(TABLE_START)), None)
    end = next((i for i, line in enumerate(lines) if line.startswith(TABLE_END)), None)
    if start is None or end is None or end < start:
        return []
    return lines[start:end + 1]


def frame_body(line: str) -> str:
    """The part of a line up to its closing glyph (drops the row tag)."""
    closing = max(line.rfind(glyph) for glyph in CLOSING_GLYPHS)
    return line[:closing + 1]


def read_rows(content: str) -> List[Row]:
    """
    Parse every data row of a table into (cells, tag).

    Example:
        "┃ 0 │ 6 ┃ P"  ->  (["0", "6"], "P")
        "┃   │ 5 ┃"    ->  (["", "5"], "")
    """
    rows: List[Row] = []
    for line in table_lines(content):
        if not line.startswith(ROW_START) or CELL_SEPARATOR not in line:
            continue
        body = frame_body(line)
        tag = line[len(body):].strip()
        cells = [cell.strip() for cell in body[1:-1].split(CELL_SEPARATOR)]
        rows.append((cells, tag))
    return rows


def read_number(cells: List[str]) -> Optional[int]:
    """Join the digit cells of a row into a number (blank cells skipped)."""
    text = "".join(cells)
    if not text.isdigit():
        return None
    return int(text)


def find_row(rows: List[Row], tag: str) -> Optional[List[str]]:
    for cells, row_tag in rows:
        if row_tag == tag:
            return cells
    return None


# ============================================================
# THE JUDGE
# ============================================================

class TableJudge:
    """
    Rule-based judge for rendered long multiplication tables.

    This is DETERMINISTIC - same input always gives same output.
    Use for testing and regression detection.
    """

    def judge_product(self, rows: List[Row], expected: int) -> Judgment:
        """Judge whether the P row reassembles to the product."""
        cells = find_row(rows, "P")
        if cells is None:
            return Judgment(
                criteria=JudgmentCriteria.PRODUCT_CORRECT,
                passed=False,
                score=0.0,
                explanation="No product row found",
            )

        value = read_number(cells)
        if value != expected:
            return Judgment(
                criteria=JudgmentCriteria.PRODUCT_CORRECT,
                passed=False,
                score=0.0,
                explanation=f"Product row reads {value}, expected {expected}",
            )

        return Judgment(
            criteria=JudgmentCriteria.PRODUCT_CORRECT,
            passed=True,
            score=1.0,
            explanation=f"Product row reads {expected}",
        )

    def judge_frame(self, content: str, width: int) -> Judgment:
        """Judge whether every line and every data row fits the frame."""
        lines = table_lines(content)
        if not lines:
            return Judgment(
                criteria=JudgmentCriteria.FRAME_CONSISTENT,
                passed=False,
                score=0.0,
                explanation="No table borders found",
            )

        expected_glyphs = 4 * width + 1
        issues = []
        for number, line in enumerate(lines, start=1):
            body = frame_body(line)
            if len(body) != expected_glyphs:
                issues.append(f"Line {number}: {len(body)} glyphs, expected {expected_glyphs}")

        for cells, tag in read_rows(content):
            if len(cells) != width:
                issues.append(f"Row '{tag}': {len(cells)} cells, expected {width}")

        if issues:
            return Judgment(
                criteria=JudgmentCriteria.FRAME_CONSISTENT,
                passed=False,
                score=max(0.0, 1.0 - len(issues) / len(lines)),
                explanation=f"Frame violations: {issues[0]}...",
            )

        return Judgment(
            criteria=JudgmentCriteria.FRAME_CONSISTENT,
            passed=True,
            score=1.0,
            explanation=f"All {len(lines)} lines are {width} columns wide",
        )

    def judge_operations(self, rows: List[Row], multiplier_length: int) -> Judgment:
        """Judge whether there is one carry row and one unit row per multiplier digit."""
        carry_rows = [tag for _, tag in rows if tag.endswith(" ^")]
        unit_rows = [tag for _, tag in rows if tag.endswith(" R")]
        expected_tags = [str(n) for n in range(1, multiplier_length + 1)]

        carries_ok = [tag.split()[0] for tag in carry_rows] == expected_tags
        units_ok = [tag.split()[0] for tag in unit_rows] == expected_tags

        if not (carries_ok and units_ok):
            return Judgment(
                criteria=JudgmentCriteria.OPERATIONS_COMPLETE,
                passed=False,
                score=0.5 if (carries_ok or units_ok) else 0.0,
                explanation=(
                    f"Found {len(carry_rows)} carry rows and {len(unit_rows)} unit rows, "
                    f"expected {multiplier_length} of each"
                ),
            )

        return Judgment(
            criteria=JudgmentCriteria.OPERATIONS_COMPLETE,
            passed=True,
            score=1.0,
            explanation=f"{multiplier_length} carry/unit row pairs",
        )

    def judge_validation(self, rows: List[Row], expected: int) -> Judgment:
        """Judge the V row. A table without one passes."""
        cells = find_row(rows, "V")
        if cells is None:
            return Judgment(
                criteria=JudgmentCriteria.VALIDATION_MATCHES,
                passed=True,
                score=1.0,
                explanation="No validation row rendered",
            )

        value = read_number(cells)
        passed = value == expected
        return Judgment(
            criteria=JudgmentCriteria.VALIDATION_MATCHES,
            passed=passed,
            score=1.0 if passed else 0.0,
            explanation=f"Validation row reads {value}, expected {expected}",
        )

    def evaluate(
        self,
        content: str,
        multiplicand: Union[str, int],
        multiplier: Union[str, int],
    ) -> List[Judgment]:
        """
        Comprehensive evaluation of a rendered table.

        Returns judgments on all criteria.
        """
        multiplicand = breakdown_layer.parse_magnitude(multiplicand, "multiplicand")
        multiplier = breakdown_layer.parse_magnitude(multiplier, "multiplier")
        expected = multiplicand * multiplier
        rows = read_rows(content)

        return [
            self.judge_product(rows, expected),
            self.judge_frame(content, breakdown_layer.joint_length(multiplicand, multiplier)),
            self.judge_operations(rows, breakdown_layer.digit_length(multiplier)),
            self.judge_validation(rows, expected),
        ]

    def all_passed(self, judgments: List[Judgment]) -> bool:
        return all(j.passed for j in judgments)

    def overall_score(self, judgments: List[Judgment]) -> float:
        """Calculate overall score from judgments."""
        if not judgments:
            return 0.0
        return sum(j.score for j in judgments) / len(judgments)

    def summary(self, judgments: List[Judgment]) -> str:
        """Generate a summary of judgments."""
        lines = ["Evaluation Summary:", "-" * 40]

        for j in judgments:
            status = "✓" if j.passed else "✗"
            lines.append(f"  {status} {j.criteria.name}: {j.score:.2f} - {j.explanation}")

        overall = self.overall_score(judgments)
        lines.append("-" * 40)
        lines.append(f"  Overall Score: {overall:.2f}")

        return "\n".join(lines)
