"""
03_evaluation - Table Verification Layer
========================================

Question this layer answers:
"Is a rendered table correct?"

Rule-based Judge (03_evaluation/judge.py):
   - Deterministic: same table → same verdict
   - Reads the text back (P row, V row, frame widths, row tags)
   - Good for unit tests, CI and the runtime's batch mode

   ```python
   from 03_evaluation import TableJudge
   judge = TableJudge()
   judgments = judge.evaluate(table, "13597", "8642")
   print(judge.summary(judgments))
   ```

Worked examples (03_evaluation/scenarios.py):
   - Hand-checked breakdowns for known multiplications
"""

from .judge import TableJudge, Judgment, JudgmentCriteria, read_rows, table_lines
from .scenarios import (
    WORKED_EXAMPLES,
    DATASET_NAME,
    DATASET_DESCRIPTION,
    get_scenarios_by_tag,
    get_scenario_by_name,
)

__all__ = [
    # Rule-based judge
    "TableJudge",
    "Judgment",
    "JudgmentCriteria",
    "read_rows",
    "table_lines",
    # Worked examples
    "WORKED_EXAMPLES",
    "DATASET_NAME",
    "DATASET_DESCRIPTION",
    "get_scenarios_by_tag",
    "get_scenario_by_name",
]
