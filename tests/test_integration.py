"""
Integration Test: Full Table Render
===================================
Tests the complete system from operands to finished table.
"""

import pytest
import random
import sys
import importlib.util
from pathlib import Path

# Setup path for numbered module imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def import_numbered_layer(folder_name: str):
    """Import a numbered layer folder dynamically."""
    folder_path = project_root / folder_name
    init_path = folder_path / "__init__.py"

    if not init_path.exists():
        raise ImportError(f"No __init__.py in {folder_name}")

    spec = importlib.util.spec_from_file_location(folder_name, init_path)
    module = importlib.util.module_from_spec(spec)
    sys.modules[folder_name] = module
    spec.loader.exec_module(module)
    return module


breakdown_module = import_numbered_layer("01_breakdown")
render_module = import_numbered_layer("02_render")
eval_module = import_numbered_layer("03_evaluation")

break_down = breakdown_module.break_down
render_table = render_module.render_table
RenderOptions = render_module.RenderOptions
TableJudge = eval_module.TableJudge
WORKED_EXAMPLES = eval_module.WORKED_EXAMPLES


TABLE_5_X_7 = (
    "\n"
    "Symbols\n"
    "=======\n"
    "Pos. = Position.\n"
    "Ops. = Operations of the long multiplication.\n"
    "Sum. = Sum of each column of the multiplication.\n"
    "Sub n. = Subtotal of the last sum.\n"
    "Pro. = Product of the multiplication.\n"
    "n ^ = Carry-over.\n"
    "n R = The row number.\n"
    "n C = The column number of the sum of the rows.\n"
    "* Replace 'n' for a number.\n"
    "P = The product of multiplication.\n"
    "\n"
    "┏━━━━━━━┓\n"
    "┃Pos.   ┃\n"
    "┠┄┄┄┬┄┄┄┨\n"
    "┃ 2 │ 1 ┃\n"
    "┣━━━┷━━━┫\n"
    "┃Ops.   ┃\n"
    "┣━━━┯━━━┫\n"
    "┃   │ 5 ┃\n"
    "┃ x │ 7 ┃\n"
    "┣━━━┿━━━┫\n"
    "┃ 3 │   ┃ 1 ^\n"
    "┠┈┈┈┼┈┈┈┨\n"
    "┃   │ 5 ┃ 1 R\n"
    "┣━━━┷━━━┫\n"
    "┃Sum.   ┃\n"
    "┣━━━┯━━━┫\n"
    "┃   │ 5 ┃ 1 C\n"
    "┠┈┈┈┼┈┈┈┨\n"
    "┃ 3 │   ┃ 2 C\n"
    "┣━━━┷━━━┫\n"
    "┃Pro.   ┃\n"
    "┣━━━┯━━━┫\n"
    "┃ 3 │ 5 ┃ P\n"
    "┗━━━┷━━━┛\n"
    "\n"
    "---\n"
    "Author: Israel Roldan\n"
    "E-mail: israel.alberto.rv@gmail.com\n"
    "License: GPL-3.0\n"
    "Project: https://github.com/airvzxf/long-multiplication-calculator\n"
)

TABLE_13597_X_8642 = (
    "\n"
    "Symbols\n"
    "=======\n"
    "Pos. = Position.\n"
    "Ops. = Operations of the long multiplication.\n"
    "Sum. = Sum of each column of the multiplication.\n"
    "Sub n. = Subtotal of the last sum.\n"
    "Pro. = Product of the multiplication.\n"
    "n ^ = Carry-over.\n"
    "n R = The row number.\n"
    "n C = The column number of the sum of the rows.\n"
    "* Replace 'n' for a number.\n"
    "P = The product of multiplication.\n"
    "\n"
    "┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓\n"
    "┃Pos.                               ┃\n"
    "┠┄┄┄┬┄┄┄┬┄┄┄┬┄┄┄┬┄┄┄┬┄┄┄┬┄┄┄┬┄┄┄┬┄┄┄┨\n"
    "┃ 9 │ 8 │ 7 │ 6 │ 5 │ 4 │ 3 │ 2 │ 1 ┃\n"
    "┣━━━┷━━━┷━━━┷━━━┷━━━┷━━━┷━━━┷━━━┷━━━┫\n"
    "┃Ops.                               ┃\n"
    "┣━━━┯━━━┯━━━┯━━━┯━━━┯━━━┯━━━┯━━━┯━━━┫\n"
    "┃   │   │   │   │ 1 │ 3 │ 5 │ 9 │ 7 ┃\n"
    "┃ x │   │   │   │   │ 8 │ 6 │ 4 │ 2 ┃\n"
    "┣━━━┿━━━┿━━━┿━━━┿━━━┿━━━┿━━━┿━━━┿━━━┫\n"
    "┃   │   │   │ 0 │ 0 │ 1 │ 1 │ 1 │   ┃ 1 ^\n"
    "┠┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┨\n"
    "┃   │   │   │   │ 2 │ 6 │ 0 │ 8 │ 4 ┃ 1 R\n"
    "┠───┼───┼───┼───┼───┼───┼───┼───┼───┨\n"
    "┃   │   │ 0 │ 1 │ 2 │ 3 │ 2 │   │   ┃ 2 ^\n"
    "┠┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┨\n"
    "┃   │   │   │ 4 │ 2 │ 0 │ 6 │ 8 │   ┃ 2 R\n"
    "┠───┼───┼───┼───┼───┼───┼───┼───┼───┨\n"
    "┃   │ 0 │ 1 │ 3 │ 5 │ 4 │   │   │   ┃ 3 ^\n"
    "┠┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┨\n"
    "┃   │   │ 6 │ 8 │ 0 │ 4 │ 2 │   │   ┃ 3 R\n"
    "┠───┼───┼───┼───┼───┼───┼───┼───┼───┨\n"
    "┃ 0 │ 2 │ 4 │ 7 │ 5 │   │   │   │   ┃ 4 ^\n"
    "┠┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┨\n"
    "┃   │ 8 │ 4 │ 0 │ 2 │ 6 │   │   │   ┃ 4 R\n"
    "┣━━━┷━━━┷━━━┷━━━┷━━━┷━━━┷━━━┷━━━┷━━━┫\n"
    "┃Sum.                               ┃\n"
    "┣━━━┯━━━┯━━━┯━━━┯━━━┯━━━┯━━━┯━━━┯━━━┫\n"
    "┃   │   │   │   │   │   │   │   │ 4 ┃ 1 C\n"
    "┠┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┨\n"
    "┃   │   │   │   │   │   │ 1 │ 7 │   ┃ 2 C\n"
    "┠┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┨\n"
    "┃   │   │   │   │   │ 1 │ 1 │   │   ┃ 3 C\n"
    "┠┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┨\n"
    "┃   │   │   │   │ 2 │ 4 │   │   │   ┃ 4 C\n"
    "┠┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┨\n"
    "┃   │   │   │ 1 │ 8 │   │   │   │   ┃ 5 C\n"
    "┠┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┨\n"
    "┃   │   │ 2 │ 3 │   │   │   │   │   ┃ 6 C\n"
    "┠┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┨\n"
    "┃   │ 1 │ 5 │   │   │   │   │   │   ┃ 7 C\n"
    "┠┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┨\n"
    "┃ 1 │ 0 │   │   │   │   │   │   │   ┃ 8 C\n"
    "┠┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┨\n"
    "┃ 0 │   │   │   │   │   │   │   │   ┃ 9 C\n"
    "┣━━━┷━━━┷━━━┷━━━┷━━━┷━━━┷━━━┷━━━┷━━━┫\n"
    "┃Sub 1.                             ┃\n"
    "┣━━━┯━━━┯━━━┯━━━┯━━━┯━━━┯━━━┯━━━┯━━━┫\n"
    "┃   │   │   │   │   │   │   │   │ 4 ┃ 1 C\n"
    "┠┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┨\n"
    "┃   │   │   │   │   │   │   │ 7 │   ┃ 2 C\n"
    "┠┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┨\n"
    "┃   │   │   │   │   │   │ 2 │   │   ┃ 3 C\n"
    "┠┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┨\n"
    "┃   │   │   │   │   │ 5 │   │   │   ┃ 4 C\n"
    "┠┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┨\n"
    "┃   │   │   │ 1 │ 0 │   │   │   │   ┃ 5 C\n"
    "┠┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┨\n"
    "┃   │   │   │ 4 │   │   │   │   │   ┃ 6 C\n"
    "┠┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┨\n"
    "┃   │   │ 7 │   │   │   │   │   │   ┃ 7 C\n"
    "┠┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┨\n"
    "┃   │ 1 │   │   │   │   │   │   │   ┃ 8 C\n"
    "┠┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┨\n"
    "┃ 1 │   │   │   │   │   │   │   │   ┃ 9 C\n"
    "┣━━━┷━━━┷━━━┷━━━┷━━━┷━━━┷━━━┷━━━┷━━━┫\n"
    "┃Pro.                               ┃\n"
    "┣━━━┯━━━┯━━━┯━━━┯━━━┯━━━┯━━━┯━━━┯━━━┫\n"
    "┃ 1 │ 1 │ 7 │ 5 │ 0 │ 5 │ 2 │ 7 │ 4 ┃ P\n"
    "┗━━━┷━━━┷━━━┷━━━┷━━━┷━━━┷━━━┷━━━┷━━━┛\n"
    "\n"
    "---\n"
    "Author: Israel Roldan\n"
    "E-mail: israel.alberto.rv@gmail.com\n"
    "License: GPL-3.0\n"
    "Project: https://github.com/airvzxf/long-multiplication-calculator\n"
)


class TestFullTables:
    """Complete tables, byte for byte."""

    def test_one_digit_each(self):
        assert render_table("5", "7") == TABLE_5_X_7

    def test_subtotal_section(self):
        assert render_table("13597", "8642") == TABLE_13597_X_8642

    def test_validation_adds_legend_line_and_row(self):
        table = render_table("5", "7", RenderOptions(validate_product=True))

        assert table == TABLE_5_X_7.replace(
            "P = The product of multiplication.\n",
            "P = The product of multiplication.\n"
            "V = Validate the product of multiplication.\n",
        ).replace(
            "┃ 3 │ 5 ┃ P\n",
            "┃ 3 │ 5 ┃ P\n"
            "┠───┼───┨\n"
            "┃ 3 │ 5 ┃ V\n",
        )


class TestCommutativity:
    """Swapping the operands changes the grid, not the sums."""

    def test_same_additions_and_product(self):
        forward = break_down(78924358, 357)
        backward = break_down(357, 78924358)

        assert forward.additions == backward.additions
        assert forward.product_digits == backward.product_digits
        assert forward.product == 78924358 * 357

    def test_different_operation_rows(self):
        forward = render_table("78924358", "357")
        backward = render_table("357", "78924358")

        assert forward.count(" ^\n") == 3
        assert backward.count(" ^\n") == 8


class TestManyBlocks:
    """A long multiplier gives one carry/unit pair per digit."""

    def test_thirteen_blocks(self):
        table = render_table("7", "9876543210123")

        for n in range(1, 14):
            assert f" {n} ^\n" in table
            assert f" {n} R\n" in table
        assert " 14 ^\n" not in table

    def test_product(self):
        breakdown = break_down(7, 9876543210123)
        assert breakdown.product == 69135802470861


class TestWorkedExamples:
    """Every worked example renders a table the judge accepts."""

    @pytest.mark.parametrize("scenario", WORKED_EXAMPLES, ids=lambda s: s["name"])
    def test_breakdown_matches(self, scenario):
        inputs = scenario["inputs"]
        expected = scenario["expected"]
        breakdown = break_down(int(inputs["multiplicand"]), int(inputs["multiplier"]))

        assert breakdown.product == expected["product"]
        if "units" in expected:
            assert breakdown.units == expected["units"]
            assert breakdown.carries == expected["carries"]
        if "additions" in expected:
            assert breakdown.additions == expected["additions"]
        if "subtotals" in expected:
            assert breakdown.subtotals == expected["subtotals"]
        if "product_row" in expected:
            assert "".join(str(d) for d in breakdown.product_digits) == expected["product_row"]
        if "blocks" in expected:
            assert len(breakdown.blocks()) == expected["blocks"]

    @pytest.mark.parametrize("scenario", WORKED_EXAMPLES, ids=lambda s: s["name"])
    def test_judge_accepts_table(self, scenario):
        inputs = scenario["inputs"]
        judge = TableJudge()
        table = render_table(
            inputs["multiplicand"],
            inputs["multiplier"],
            RenderOptions(validate_product=True),
        )

        judgments = judge.evaluate(table, inputs["multiplicand"], inputs["multiplier"])

        assert judge.all_passed(judgments), judge.summary(judgments)


class TestRandomTables:
    """Random operands always give a consistent table."""

    def test_random_operands(self):
        rng = random.Random(2024)
        judge = TableJudge()

        for _ in range(25):
            multiplicand = str(rng.randint(0, 10 ** rng.randint(1, 12)))
            multiplier = str(rng.randint(0, 10 ** rng.randint(1, 12)))
            table = render_table(multiplicand, multiplier, RenderOptions(validate_product=True))

            judgments = judge.evaluate(table, multiplicand, multiplier)
            assert judge.all_passed(judgments), f"{multiplicand} x {multiplier}"


class TestStructureScript:
    """The verification script passes on this tree."""

    def test_every_layer_verified(self):
        path = project_root / "tests" / "verify_structure.py"
        spec = importlib.util.spec_from_file_location("verify_structure", path)
        script = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(script)

        results = script.check_layers()

        assert [layer for layer, _, _ in results] == [
            "01_breakdown", "02_render", "03_evaluation", "04_runtime",
        ]
        assert all(status == "✓" for _, status, _ in results), results


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
