"""cssbuilder - chainable CSS selector builder and small object helpers."""

__version__ = "0.1.0"

from cssbuilder.config import SelectorConfig  # noqa: E402
from cssbuilder.objects import Rectangle, from_json, to_json  # noqa: E402
from cssbuilder.selector import (  # noqa: E402
    SelectorBuilder,
    build_chain,
    facade,
)

__all__ = [
    "__version__",
    "SelectorConfig",
    "SelectorBuilder",
    "build_chain",
    "facade",
    "Rectangle",
    "to_json",
    "from_json",
]
