"""
04_runtime - Command Line Layer
===============================

This is THE SHELL - the program a user runs.

Run methods:
    python -m 04_runtime.runner --multiplicand 13597 --multiplier 8642
    python -m 04_runtime.runner --multiplicand 13597 --multiplier 8642 --output store --file table.txt
    python -m 04_runtime.runner --mode examples
    python -m 04_runtime.runner --mode batch --count 20

What the runtime does:
- Argument parsing and configuration
- Console display and file storage
- Session timing and self-checks

What the runtime does NOT do:
- Arithmetic (that's 01_breakdown)
- Layout (that's 02_render)
- Verification rules (that's 03_evaluation)
"""

from .runner import TableRuntime, RuntimeConfig, Session, main
from .config import load_config, Config, OutputConfig, TableConfig

__all__ = [
    "TableRuntime",
    "RuntimeConfig",
    "Session",
    "main",
    "load_config",
    "Config",
    "OutputConfig",
    "TableConfig",
]
