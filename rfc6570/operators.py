"""Expression operators (RFC 6570 section 3.2).

The table below is the single source of truth for both glyph recognition
during parsing and rendering rules during expansion.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

__all__ = ["Operator"]


class Operator(Enum):
    """Expansion style selected by an expression's leading glyph.

    Each member carries:
        glyph: Character that selects the operator inside ``{...}``.
        prefix: Emitted once before the first rendered fragment.
        separator: Joins rendered fragments.
        named: Fragments are rendered as ``name=value`` pairs.
        allow_reserved: Reserved characters are left unencoded.
    """

    #: ``{var}``
    SIMPLE = ("", "", ",", False, False)
    #: ``{+var}``
    RESERVED = ("+", "", ",", False, True)
    #: ``{#var}``
    FRAGMENT = ("#", "#", ",", False, True)
    #: ``{.var}``
    LABEL = (".", ".", ".", False, False)
    #: ``{/var}``
    PATH = ("/", "/", "/", False, False)
    #: ``{;var}``
    PARAMETER = (";", ";", ";", True, False)
    #: ``{?var}``
    QUERY = ("?", "?", "&", True, False)
    #: ``{&var}``
    CONTINUATION = ("&", "&", "&", True, False)

    def __init__(
        self,
        glyph: str,
        prefix: str,
        separator: str,
        named: bool,
        allow_reserved: bool,
    ) -> None:
        self.glyph = glyph
        self.prefix = prefix
        self.separator = separator
        self.named = named
        self.allow_reserved = allow_reserved

    @property
    def includes_empty_values(self) -> bool:
        """Whether an empty named value keeps its ``=`` (``name=``).

        Only PARAMETER drops it and renders a bare ``name``.
        """
        return self is not Operator.PARAMETER

    @classmethod
    def from_glyph(cls, char: str) -> Optional["Operator"]:
        """Return the operator selected by ``char``, or None.

        SIMPLE has no glyph and is never returned here.
        """
        if not char:
            return None
        return _BY_GLYPH.get(char)


_BY_GLYPH: Dict[str, Operator] = {op.glyph: op for op in Operator if op.glyph}
