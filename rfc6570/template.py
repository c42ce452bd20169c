"""Template facade.

``Template`` pairs the raw template string with its parsed components. It is
validated on construction and immutable afterwards, so one instance can be
expanded from many threads at once.

Usage:
    from rfc6570 import Template

    tpl = Template("/users/{id}/posts{?page,limit}")
    tpl.expand(id="123", page="1")  # "/users/123/posts?page=1"
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from rfc6570.components import Component, Expression
from rfc6570.errors import TemplateError
from rfc6570.expansion import expand_components
from rfc6570.parser import parse
from rfc6570.values import coerce_bindings

__all__ = ["Template"]


@dataclass(frozen=True, order=True)
class Template:
    """A parsed URI template.

    Equality, hashing and ordering use the raw template string only.

    Attributes:
        raw: Template string as given.
        components: Parsed literal and expression components.

    Raises:
        TemplateError: If ``raw`` is not a valid template (one of its
            subclasses describes the defect).
    """

    raw: str
    components: Tuple[Component, ...] = field(
        init=False, compare=False, repr=False
    )

    def __post_init__(self) -> None:
        if not isinstance(self.raw, str):
            raise TypeError(f"Template must be a str, got {type(self.raw).__name__}")
        object.__setattr__(self, "components", parse(self.raw))

    @classmethod
    def try_parse(cls, raw: str) -> Optional["Template"]:
        """Return a Template for ``raw``, or None if it does not parse."""
        try:
            return cls(raw)
        except TemplateError:
            return None

    @property
    def variable_names(self) -> List[str]:
        """Names referenced by the template, in first-seen order, without repeats."""
        seen: Dict[str, None] = {}
        for component in self.components:
            if isinstance(component, Expression):
                for spec in component.varspecs:
                    seen.setdefault(spec.name, None)
        return list(seen)

    @property
    def is_literal(self) -> bool:
        """True when the template has no expressions."""
        return not any(isinstance(c, Expression) for c in self.components)

    def expand(
        self, bindings: Optional[Mapping[str, Any]] = None, **kwargs: Any
    ) -> str:
        """Expand the template.

        Values may be ``Text``/``ListValue``/``AssocList`` or native objects
        (``str``, numbers, lists, tuples, mappings); ``None`` counts as
        undefined. Keyword arguments override entries of ``bindings``.

        Args:
            bindings: Mapping of variable names to values.
            **kwargs: Additional variables.

        Returns:
            Expanded string, already percent-encoded.

        Example:
            >>> Template("{/list*}{?keys*}").expand(
            ...     list=["red", "green"], keys={"semi": ";", "dot": "."}
            ... )
            '/red/green?semi=%3B&dot=.'
        """
        merged: Dict[str, Any] = dict(bindings or {})
        merged.update(kwargs)
        return expand_components(self.components, coerce_bindings(merged))

    def __str__(self) -> str:
        return self.raw
