"""
Long Multiplication Calculator
==============================

Root package for the layered architecture.

Since Python modules can't start with numbers, we use importlib
to provide clean access to all layers.
"""

import sys
from pathlib import Path

# Ensure project root is in path
_project_root = Path(__file__).parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))


def _import_layer(folder_name: str):
    """Import a numbered layer folder as a module."""
    import importlib.util

    folder_path = _project_root / folder_name
    init_path = folder_path / "__init__.py"

    if init_path.exists():
        spec = importlib.util.spec_from_file_location(folder_name, init_path)
        module = importlib.util.module_from_spec(spec)
        sys.modules[folder_name] = module
        spec.loader.exec_module(module)
        return module
    return None


# Layer imports available as:
# from long_multiplication import layer_01_breakdown, layer_02_render, etc.

layer_01_breakdown = _import_layer("01_breakdown")
layer_02_render = _import_layer("02_render")
layer_03_evaluation = _import_layer("03_evaluation")
layer_04_runtime = _import_layer("04_runtime")

render_table = layer_02_render.render_table


def main() -> int:
    """Console script entrypoint."""
    return layer_04_runtime.main()


__version__ = "0.1.0"
__all__ = [
    "layer_01_breakdown",
    "layer_02_render",
    "layer_03_evaluation",
    "layer_04_runtime",
    "render_table",
    "main",
]
