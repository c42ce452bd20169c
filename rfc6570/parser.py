"""Template parser.

Turns a raw template string into an immutable tuple of components in one
left-to-right pass. The first structural defect found is the one reported.

Grammar (RFC 6570 section 2):

    expression = "{" [ operator ] variable-list "}"
    variable-list = varspec *( "," varspec )
    varspec = varname [ modifier-level4 ]
    varname = varchar *( varchar )  ; ALPHA / DIGIT / "_" / "." / pct-encoded
    modifier-level4 = ":" max-length / "*"
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from rfc6570.components import (
    MAX_PREFIX_LENGTH,
    Component,
    Explode,
    Expression,
    Literal,
    Modifier,
    Prefix,
    VarSpec,
)
from rfc6570.errors import (
    InvalidExpression,
    InvalidModifier,
    InvalidTemplate,
    InvalidVariableName,
    TemplateError,
)
from rfc6570.logging import get_logger
from rfc6570.operators import Operator

__all__ = [
    "parse",
    "is_valid_varname",
]

_logger = get_logger(__name__)

_VARNAME_RE = re.compile(r"(?:[A-Za-z0-9_.]|%[0-9A-Fa-f]{2})+")
_PREFIX_RE = re.compile(r"[0-9]{1,4}")


def parse(raw: str) -> Tuple[Component, ...]:
    """Parse a template string into literal and expression components.

    Args:
        raw: Template string.

    Returns:
        Components in source order. Empty for an empty string; a single
        ``Literal`` for a template without expressions.

    Raises:
        InvalidTemplate: Unclosed ``{`` or a ``}`` outside an expression.
        InvalidExpression: Empty expression or empty variable spec.
        InvalidVariableName: Name outside the varname grammar.
        InvalidModifier: Bad prefix length or prefix combined with explode.

    Examples:
        >>> [str(c) for c in parse("/users/{id}{?page,limit}")]
        ['/users/', '{id}', '{?page,limit}']
    """
    try:
        return _parse(raw)
    except TemplateError as exc:
        _logger.debug("Rejected template %r: %s", raw, exc)
        raise


def is_valid_varname(name: str) -> bool:
    """Check ``name`` against the varname grammar."""
    return _VARNAME_RE.fullmatch(name) is not None


def _parse(raw: str) -> Tuple[Component, ...]:
    components: List[Component] = []
    literal_start = 0
    index = 0
    length = len(raw)

    while index < length:
        char = raw[index]
        if char == "{":
            if index > literal_start:
                components.append(Literal(raw[literal_start:index]))
            closing = raw.find("}", index + 1)
            if closing == -1:
                raise InvalidTemplate(
                    f"Unclosed expression starting at position {index}",
                    fragment=raw[index:],
                    position=index,
                )
            components.append(_parse_expression(raw[index + 1 : closing], index))
            index = closing + 1
            literal_start = index
        elif char == "}":
            raise InvalidTemplate(
                f"Unexpected '}}' at position {index}",
                fragment=char,
                position=index,
            )
        else:
            index += 1

    if literal_start < length:
        components.append(Literal(raw[literal_start:]))

    return tuple(components)


def _parse_expression(body: str, position: int) -> Expression:
    """Parse the text between braces of an expression opened at ``position``."""
    if not body:
        raise InvalidExpression(
            f"Empty expression at position {position}",
            fragment="{}",
            position=position,
        )

    operator = Operator.from_glyph(body[0])
    if operator is None:
        operator = Operator.SIMPLE
        spec_list = body
    else:
        spec_list = body[1:]

    if not spec_list:
        raise InvalidExpression(
            f"No variables in expression at position {position}",
            fragment="{" + body + "}",
            position=position,
        )

    offset = position + 1 + len(operator.glyph)
    varspecs: List[VarSpec] = []
    for candidate in spec_list.split(","):
        if not candidate:
            raise InvalidExpression(
                f"Empty variable spec in expression at position {position}",
                fragment="{" + body + "}",
                position=offset,
            )
        varspecs.append(_parse_varspec(candidate, offset))
        offset += len(candidate) + 1

    return Expression(operator=operator, varspecs=tuple(varspecs))


def _parse_varspec(text: str, position: int) -> VarSpec:
    """Parse one comma-separated variable spec starting at ``position``."""
    name = text
    modifier: Optional[Modifier] = None

    if name.endswith("*"):
        name = name[:-1]
        if ":" in name:
            raise InvalidModifier(
                f"Prefix and explode cannot be combined: '{text}'",
                fragment=text,
                position=position,
            )
        modifier = Explode()
    elif ":" in name:
        name, _, digits = name.partition(":")
        if _PREFIX_RE.fullmatch(digits) is None or int(digits) == 0:
            raise InvalidModifier(
                f"Invalid prefix length: '{digits}' "
                f"(expected an integer from 1 to {MAX_PREFIX_LENGTH})",
                fragment=text,
                position=position,
            )
        modifier = Prefix(int(digits))

    if not is_valid_varname(name):
        raise InvalidVariableName(
            f"Invalid variable name: '{name}'",
            fragment=text,
            position=position,
        )

    return VarSpec(name=name, modifier=modifier)
