"""
02_RENDER - Table Layout Layer
==============================

Question this layer answers:
"How is the breakdown typeset?"

One entry point:

```python
from 02_render import render_table
print(render_table("13597", "8642"))
```

Sections, always in this order:
    symbols, top border, Pos., Ops., operands, operations grid,
    Sum., column sums, Sub n. passes, Pro., [V], bottom border, author

This layer does NOT:
- Do arithmetic (that's 01_breakdown)
- Print or write files (that's 04_runtime)
"""

from .table import (
    RenderOptions,
    render_table,
    symbols,
    top_border,
    bottom_border,
    position_title,
    operation_title,
    multiplication,
    operations,
    sum_title,
    long_sum,
    product_validation,
    author,
)
from . import glyphs

__all__ = [
    "RenderOptions",
    "render_table",
    "symbols",
    "top_border",
    "bottom_border",
    "position_title",
    "operation_title",
    "multiplication",
    "operations",
    "sum_title",
    "long_sum",
    "product_validation",
    "author",
    "glyphs",
]
