"""objtasks: object exercise solutions and a CSS selector builder."""
from __future__ import annotations

__version__ = "0.1.0"

from objtasks.config import ObjTasksConfig  # noqa: E402
from objtasks.interchange import from_json, to_json  # noqa: E402
from objtasks.selector import (  # noqa: E402
    CombinedSelector,
    OrderError,
    Selector,
    SelectorBuilder,
    SelectorError,
    UniquenessError,
    css_selector_builder,
)
from objtasks.shapes import Rectangle  # noqa: E402

__all__ = [
    "__version__",
    "ObjTasksConfig",
    "Rectangle",
    "to_json",
    "from_json",
    "css_selector_builder",
    "SelectorBuilder",
    "Selector",
    "CombinedSelector",
    "SelectorError",
    "OrderError",
    "UniquenessError",
]
