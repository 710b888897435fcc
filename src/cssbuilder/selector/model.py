"""Selector model: fragment kinds with their ranks, and combinator symbols."""

from __future__ import annotations

from enum import Enum, StrEnum


class FragmentKind(Enum):
    """A kind of compound-selector fragment.

    The value is the fragment's rank. Fragments must be appended in
    non-decreasing rank order:
        0 = element, 1 = id, 2 = class, 3 = attribute,
        4 = pseudo-class, 5 = pseudo-element
    """

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def rank(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")

    @property
    def unique(self) -> bool:
        """True for kinds that may occur at most once per selector."""
        return self in _UNIQUE_KINDS


_UNIQUE_KINDS = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)


class Combinator(StrEnum):
    """The conventional CSS combinators."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
