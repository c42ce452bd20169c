"""Expansion engine.

Renders parsed components against a binding of names to variable values.

Rules per expression (RFC 6570 section 3.2.1):
- Undefined variables (absent, empty list, empty associative list) are
  skipped without error.
- If nothing was rendered the expression contributes nothing, not even the
  operator prefix.
- Otherwise rendered fragments are joined with the operator separator and
  the operator prefix is emitted once in front.
"""

from __future__ import annotations

from typing import Iterable, List, Mapping

from rfc6570.components import Component, Expression, Literal, VarSpec
from rfc6570.encoding import percent_encode
from rfc6570.errors import ExpansionFailed
from rfc6570.operators import Operator
from rfc6570.values import AssocList, ListValue, Text, VariableValue

__all__ = [
    "expand_components",
    "expand_expression",
]

_VALUE_TYPES = (Text, ListValue, AssocList)


def expand_components(
    components: Iterable[Component],
    bindings: Mapping[str, VariableValue],
) -> str:
    """Expand parsed components into a string.

    Args:
        components: Output of ``rfc6570.parser.parse``.
        bindings: Mapping of variable names to value shapes.

    Returns:
        Expanded string; percent-encoding already applied.

    Raises:
        ExpansionFailed: If a component is not a Literal or Expression, or a
            bound value is not one of the value shapes.
    """
    parts: List[str] = []
    for component in components:
        if isinstance(component, Literal):
            parts.append(component.text)
        elif isinstance(component, Expression):
            parts.append(expand_expression(component, bindings))
        else:
            raise ExpansionFailed(
                f"Unknown template component: {type(component).__name__}"
            )
    return "".join(parts)


def expand_expression(
    expression: Expression,
    bindings: Mapping[str, VariableValue],
) -> str:
    """Expand a single expression, or return "" when every variable is undefined."""
    op = expression.operator
    fragments: List[str] = []

    for varspec in expression.varspecs:
        value = bindings.get(varspec.name)
        if value is None:
            continue
        if not isinstance(value, _VALUE_TYPES):
            raise ExpansionFailed(
                f"Unsupported value for '{varspec.name}': {type(value).__name__}"
            )
        if not value.is_defined:
            continue
        fragments.append(_render(varspec, value, op))

    if not fragments:
        return ""
    return op.prefix + op.separator.join(fragments)


def _render(varspec: VarSpec, value: VariableValue, op: Operator) -> str:
    if isinstance(value, Text):
        return _render_text(varspec, value.value, op)
    if isinstance(value, ListValue):
        return _render_list(varspec, value.items, op)
    return _render_assoc(varspec, value.pairs, op)


def _render_text(varspec: VarSpec, text: str, op: Operator) -> str:
    length = varspec.prefix_length
    if length is not None:
        # Truncate by character before encoding
        text = text[:length]

    encoded = percent_encode(text, op.allow_reserved)
    if not op.named:
        return encoded
    if not text:
        return varspec.name + "=" if op.includes_empty_values else varspec.name
    return f"{varspec.name}={encoded}"


def _render_list(varspec: VarSpec, items: tuple, op: Operator) -> str:
    encoded = [percent_encode(item, op.allow_reserved) for item in items]

    if varspec.explode:
        if op.named:
            return op.separator.join(f"{varspec.name}={item}" for item in encoded)
        return op.separator.join(encoded)

    joined = ",".join(encoded)
    return f"{varspec.name}={joined}" if op.named else joined


def _render_assoc(varspec: VarSpec, pairs: tuple, op: Operator) -> str:
    encoded = [
        (percent_encode(key, op.allow_reserved), percent_encode(val, op.allow_reserved))
        for key, val in pairs
    ]

    if varspec.explode:
        return op.separator.join(f"{key}={val}" for key, val in encoded)

    joined = ",".join(part for pair in encoded for part in pair)
    return f"{varspec.name}={joined}" if op.named else joined
