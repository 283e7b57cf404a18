from objtasks.selector.builder import SelectorBuilder, css_selector_builder
from objtasks.selector.errors import OrderError, SelectorError, UniquenessError
from objtasks.selector.model import (
    COMBINATORS,
    Category,
    CombinedSelector,
    Renderable,
    Selector,
)

__all__ = [
    "SelectorBuilder",
    "css_selector_builder",
    "SelectorError",
    "OrderError",
    "UniquenessError",
    "COMBINATORS",
    "Category",
    "CombinedSelector",
    "Renderable",
    "Selector",
]
