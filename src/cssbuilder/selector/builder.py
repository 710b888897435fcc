"""Chainable builder for a single compound CSS selector.

A builder accumulates the fragments of one compound selector::

    element#id.class[attr]:pseudo-class::pseudo-element

and optionally a combinator linking it to another, already built selector.
Each fragment method mutates the builder and returns it, so calls chain:

    SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus")
"""

from __future__ import annotations

import logging

from cssbuilder.config import SelectorConfig
from cssbuilder.selector.errors import (
    CombinationError,
    DuplicateFragmentError,
    OrderViolationError,
)
from cssbuilder.selector.model import Combinator, FragmentKind

__all__ = ["SelectorBuilder"]

logger = logging.getLogger(__name__)

_COMBINATOR_SYMBOLS = frozenset(c.value for c in Combinator)


class SelectorBuilder:
    """Accumulates selector fragments under ordering and uniqueness rules."""

    def __init__(self, config: SelectorConfig | None = None) -> None:
        self.config = config or SelectorConfig()
        self._element: str | None = None
        self._id: str | None = None
        self._classes: list[str] = []
        self._attributes: list[str] = []
        self._pseudo_classes: list[str] = []
        self._pseudo_element: str | None = None
        self._combinator: str | None = None
        self._linked: str | None = None
        self._last_rank = -1

    # --- fragments ------------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        self._accept(FragmentKind.ELEMENT, self._element)
        self._element = value
        return self

    def id(self, value: str) -> SelectorBuilder:
        self._accept(FragmentKind.ID, self._id)
        self._id = value
        return self

    def class_(self, value: str) -> SelectorBuilder:
        self._accept(FragmentKind.CLASS)
        self._classes.append(value)
        return self

    def attr(self, value: str) -> SelectorBuilder:
        self._accept(FragmentKind.ATTRIBUTE)
        self._attributes.append(value)
        return self

    def pseudo_class(self, value: str) -> SelectorBuilder:
        self._accept(FragmentKind.PSEUDO_CLASS)
        self._pseudo_classes.append(value)
        return self

    def pseudo_element(self, value: str) -> SelectorBuilder:
        self._accept(FragmentKind.PSEUDO_ELEMENT, self._pseudo_element)
        self._pseudo_element = value
        return self

    def _accept(self, kind: FragmentKind, current: str | None = None) -> None:
        """Validate appending *kind*, then record its rank.

        The duplicate check runs first, so repeating a unique fragment is
        always reported as a duplicate regardless of what came between.
        """
        if kind.unique and current is not None:
            logger.debug("Rejected duplicate %s fragment", kind.label)
            raise DuplicateFragmentError(kind.label)
        if kind.rank < self._last_rank:
            logger.debug(
                "Rejected %s fragment after rank %d", kind.label, self._last_rank
            )
            raise OrderViolationError(kind.label)
        self._last_rank = kind.rank

    # --- combination ----------------------------------------------------------

    def combine(self, other: SelectorBuilder, combinator: str) -> SelectorBuilder:
        """Link *other* to this selector with *combinator*.

        *other* is rendered immediately; later changes to it are not seen.
        The combinator symbol is passed through verbatim unless the config
        enables ``strict_combinators``.
        """
        if self.config.strict_combinators and combinator not in _COMBINATOR_SYMBOLS:
            raise CombinationError(f"Unknown combinator: {combinator!r}")
        if not self.config.allow_recombine and self._combinator is not None:
            raise CombinationError("Selector has already been combined")

        linked = other.stringify()
        if self._combinator is not None:
            logger.debug("Overwriting combination %r", self._combinator)
        logger.debug("Combining with %r via %r", linked, combinator)
        self._combinator = combinator
        self._linked = linked
        return self

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        parts = [
            self._element or "",
            f"#{self._id}" if self._id is not None else "",
            *(f".{value}" for value in self._classes),
            *(f"[{value}]" for value in self._attributes),
            *(f":{value}" for value in self._pseudo_classes),
            f"::{self._pseudo_element}" if self._pseudo_element is not None else "",
            " ",
        ]
        if self._combinator and self._linked:
            parts.append(f"{self._combinator} {self._linked}")
        return "".join(parts).strip()

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.stringify()!r})"
