"""Stateless entry points that start a selector chain from any fragment.

    from cssbuilder.selector import facade as css

    css.id("main").class_("container").stringify()  # '#main.container'
"""

from __future__ import annotations

from cssbuilder.selector.builder import SelectorBuilder

__all__ = [
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
]


def element(value: str) -> SelectorBuilder:
    return SelectorBuilder().element(value)


def id(value: str) -> SelectorBuilder:  # noqa: A001
    return SelectorBuilder().id(value)


def class_(value: str) -> SelectorBuilder:
    return SelectorBuilder().class_(value)


def attr(value: str) -> SelectorBuilder:
    return SelectorBuilder().attr(value)


def pseudo_class(value: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_class(value)


def pseudo_element(value: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_element(value)


def combine(
    selector1: SelectorBuilder, combinator: str, selector2: SelectorBuilder
) -> SelectorBuilder:
    """Combine two selectors, returning *selector1* with *selector2* linked.

    The combinator sits between the operands here, unlike
    ``SelectorBuilder.combine(other, combinator)``.
    """
    return selector1.combine(selector2, combinator)
