"""Parsed template structure.

Immutable containers produced by the parser and consumed by the expansion
engine. A parsed template is a tuple of ``Literal`` and ``Expression``
components in source order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from rfc6570.operators import Operator

__all__ = [
    "MAX_PREFIX_LENGTH",
    "Prefix",
    "Explode",
    "Modifier",
    "VarSpec",
    "Literal",
    "Expression",
    "Component",
]

#: Largest prefix length the grammar allows (``max-length = %x31-39 0*3DIGIT``).
MAX_PREFIX_LENGTH = 9999


@dataclass(frozen=True)
class Prefix:
    """``:n`` modifier: keep the first ``length`` characters of a text value."""

    length: int

    def __post_init__(self) -> None:
        if not 1 <= self.length <= MAX_PREFIX_LENGTH:
            raise ValueError(
                f"Prefix length must be in [1, {MAX_PREFIX_LENGTH}], got {self.length}"
            )

    def __str__(self) -> str:
        return f":{self.length}"


@dataclass(frozen=True)
class Explode:
    """``*`` modifier: render composite values as separate fragments."""

    def __str__(self) -> str:
        return "*"


Modifier = Union[Prefix, Explode]


@dataclass(frozen=True)
class VarSpec:
    """Variable name with an optional modifier.

    Attributes:
        name: Variable name as written in the template (pct-triplets kept).
        modifier: ``Prefix``, ``Explode`` or None.
    """

    name: str
    modifier: Optional[Modifier] = None

    @property
    def explode(self) -> bool:
        return isinstance(self.modifier, Explode)

    @property
    def prefix_length(self) -> Optional[int]:
        if isinstance(self.modifier, Prefix):
            return self.modifier.length
        return None

    def __str__(self) -> str:
        return self.name + (str(self.modifier) if self.modifier else "")


@dataclass(frozen=True)
class Literal:
    """Literal run of template text, copied verbatim on expansion."""

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Expression:
    """One ``{...}`` expression: operator plus ordered variable specs."""

    operator: Operator
    varspecs: Tuple[VarSpec, ...]

    def __post_init__(self) -> None:
        if not self.varspecs:
            raise ValueError("Expression requires at least one variable spec")

    def __str__(self) -> str:
        return (
            "{"
            + self.operator.glyph
            + ",".join(str(spec) for spec in self.varspecs)
            + "}"
        )


Component = Union[Literal, Expression]
