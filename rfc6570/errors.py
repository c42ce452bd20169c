"""Exception hierarchy for template parsing and expansion.

Parse errors are raised by the parser the moment the first structural defect
is found; a template that fails to parse is never partially usable. All of
them derive from ``TemplateError`` (itself a ``ValueError``) so callers can
catch the whole family at once.
"""

from __future__ import annotations

from typing import Optional

__all__ = [
    "TemplateError",
    "InvalidTemplate",
    "InvalidExpression",
    "InvalidVariableName",
    "InvalidModifier",
    "ExpansionFailed",
]


class TemplateError(ValueError):
    """Base class for all URI template errors.

    Attributes:
        message: Human-readable description without the category label.
        fragment: Offending piece of the template, when known.
        position: 0-based offset into the template string, when known.
    """

    label = "URI template error"

    def __init__(
        self,
        message: str,
        *,
        fragment: Optional[str] = None,
        position: Optional[int] = None,
    ) -> None:
        self.message = message
        self.fragment = fragment
        self.position = position
        super().__init__(f"{self.label}: {message}")


class InvalidTemplate(TemplateError):
    """Malformed top-level structure: unclosed ``{`` or a stray ``}``."""

    label = "Invalid URI template"


class InvalidExpression(TemplateError):
    """Empty expression body or an empty variable-spec list."""

    label = "Invalid expression"


class InvalidVariableName(TemplateError):
    """Variable name containing a character outside the varname grammar."""

    label = "Invalid variable name"


class InvalidModifier(TemplateError):
    """Prefix length outside 1-9999, non-numeric, or combined with explode."""

    label = "Invalid modifier"


class ExpansionFailed(TemplateError):
    """Expansion hit an internal invariant breach.

    The engine never raises this for well-formed input; undefined variables
    are skipped, not reported.
    """

    label = "Template expansion failed"
