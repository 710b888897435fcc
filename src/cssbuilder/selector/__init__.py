from cssbuilder.selector.builder import SelectorBuilder
from cssbuilder.selector.chain import build_chain
from cssbuilder.selector.errors import (
    ChainSyntaxError,
    CombinationError,
    DuplicateFragmentError,
    OrderViolationError,
    SelectorError,
)
from cssbuilder.selector.model import Combinator, FragmentKind
from cssbuilder.selector import facade

__all__ = [
    "SelectorBuilder",
    "build_chain",
    "facade",
    "Combinator",
    "FragmentKind",
    "SelectorError",
    "DuplicateFragmentError",
    "OrderViolationError",
    "CombinationError",
    "ChainSyntaxError",
]
