"""Assemble a combined selector from a flat list of tokens.

Token syntax:
    element=div  id=main  class=container  attr=href$=".png"
    pseudo-class=focus  pseudo-element=before
    +  ~  >  descendant     (combinators; a lone space also means descendant)

Example:
    element=div + element=table ~ element=tr descendant element=td
"""

from __future__ import annotations

from typing import Iterable

from cssbuilder.config import SelectorConfig
from cssbuilder.selector.builder import SelectorBuilder
from cssbuilder.selector.errors import ChainSyntaxError
from cssbuilder.selector.model import Combinator

__all__ = ["build_chain"]

# Token kind -> SelectorBuilder method name.
_FRAGMENT_METHODS = {
    "element": "element",
    "id": "id",
    "class": "class_",
    "attr": "attr",
    "pseudo-class": "pseudo_class",
    "pseudo-element": "pseudo_element",
}

_COMBINATOR_TOKENS = {
    "+": Combinator.ADJACENT_SIBLING.value,
    "~": Combinator.GENERAL_SIBLING.value,
    ">": Combinator.CHILD.value,
    "descendant": Combinator.DESCENDANT.value,
    " ": Combinator.DESCENDANT.value,
}


def _apply_fragment(builder: SelectorBuilder, token: str, position: int) -> None:
    kind, sep, value = token.partition("=")
    if not sep:
        raise ChainSyntaxError(
            f"Expected 'kind=value' or a combinator, got {token!r}", position
        )
    method = _FRAGMENT_METHODS.get(kind.strip().lower())
    if method is None:
        raise ChainSyntaxError(f"Unknown fragment kind: {kind!r}", position)
    getattr(builder, method)(value)


def build_chain(
    tokens: Iterable[str], config: SelectorConfig | None = None
) -> SelectorBuilder:
    """Build a selector chain from *tokens*.

    Compounds are combined right to left, so ``A + B ~ C`` is assembled as
    ``A.combine(B.combine(C, "~"), "+")`` and the returned builder is ``A``.
    Fragment ordering and duplicate errors propagate from the builder.
    """
    compounds: list[SelectorBuilder] = []
    combinators: list[str] = []
    current: SelectorBuilder | None = None
    position = -1

    for position, token in enumerate(tokens):
        symbol = _COMBINATOR_TOKENS.get(token)
        if symbol is not None:
            if current is None:
                raise ChainSyntaxError(
                    f"Combinator {token!r} must follow a selector", position
                )
            compounds.append(current)
            combinators.append(symbol)
            current = None
            continue
        if current is None:
            current = SelectorBuilder(config)
        _apply_fragment(current, token, position)

    if current is None:
        if position < 0:
            raise ChainSyntaxError("Empty selector chain")
        raise ChainSyntaxError("Selector chain ends with a combinator", position)
    compounds.append(current)

    result = compounds[-1]
    for builder, symbol in zip(reversed(compounds[:-1]), reversed(combinators)):
        result = builder.combine(result, symbol)
    return result
