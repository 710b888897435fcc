from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class SelectorConfig:
    strict_combinators: bool = False  # reject symbols other than ' ', '+', '~', '>'
    allow_recombine: bool = True  # False: a second combine() raises instead of overwriting

    @classmethod
    def from_env(cls) -> SelectorConfig:
        """Create config from environment variables.

        Reads CSSBUILDER_STRICT_COMBINATORS and CSSBUILDER_ALLOW_RECOMBINE.
        Unset or empty variables keep the defaults.
        """
        return cls(
            strict_combinators=_env_flag("CSSBUILDER_STRICT_COMBINATORS", False),
            allow_recombine=_env_flag("CSSBUILDER_ALLOW_RECOMBINE", True),
        )
