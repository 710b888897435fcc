"""Selector builder error types."""

from __future__ import annotations


class SelectorError(Exception):
    """Base error for all selector building failures."""


class DuplicateFragmentError(SelectorError):
    """Raised when element, id or pseudo-element is set a second time."""

    MESSAGE = (
        "Element, id and pseudo-element should not occur more than one time "
        "inside the selector"
    )

    def __init__(self, fragment: str) -> None:
        self.fragment = fragment
        super().__init__(self.MESSAGE)


class OrderViolationError(SelectorError):
    """Raised when a fragment is appended after a higher-ranked one."""

    MESSAGE = (
        "Selector parts should be arranged in the following order: element, "
        "id, class, attribute, pseudo-class, pseudo-element"
    )

    def __init__(self, fragment: str) -> None:
        self.fragment = fragment
        super().__init__(self.MESSAGE)


class CombinationError(SelectorError):
    """Raised when ``combine`` is refused by a strict SelectorConfig."""


class ChainSyntaxError(SelectorError):
    """Raised when a token list cannot be assembled into a selector chain."""

    def __init__(self, message: str, position: int | None = None) -> None:
        self.position = position
        super().__init__(message)
