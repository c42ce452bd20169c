"""Variable values bound to template names.

A binding value has one of three shapes:

- ``Text``: a single string, always defined (even when empty).
- ``ListValue``: ordered strings, defined only when non-empty.
- ``AssocList``: ordered ``(key, value)`` pairs with unique keys, defined
  only when non-empty. Pair order is the caller's order and is what the
  expansion emits.

``to_value`` and ``coerce_bindings`` turn native Python objects into these
shapes so callers can pass plain ``str``, ``list`` and ``dict`` values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

__all__ = [
    "Text",
    "ListValue",
    "AssocList",
    "VariableValue",
    "to_value",
    "coerce_bindings",
]


def _checked_text(obj: Any, what: str) -> str:
    """Return ``obj`` if it is text that can be percent-encoded.

    Raises:
        TypeError: If ``obj`` is not a ``str``.
        ValueError: If ``obj`` has no UTF-8 form (lone surrogates).
    """
    if not isinstance(obj, str):
        raise TypeError(f"{what} must be a str, got {type(obj).__name__}")
    try:
        obj.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise ValueError(f"{what} is not valid Unicode text: {obj!r}") from exc
    return obj


@dataclass(frozen=True)
class Text:
    """Single string value.

    Raises:
        TypeError: If ``value`` is not a ``str``.
        ValueError: If ``value`` contains a lone surrogate.
    """

    value: str

    def __post_init__(self) -> None:
        _checked_text(self.value, "Text value")

    @property
    def is_defined(self) -> bool:
        return True

    @property
    def string_value(self) -> Optional[str]:
        return self.value

    @property
    def list_value(self) -> Optional[List[str]]:
        return None

    @property
    def dict_value(self) -> Optional[Dict[str, str]]:
        return None


@dataclass(frozen=True)
class ListValue:
    """Ordered list of strings.

    Raises:
        TypeError: If an item is not a ``str``.
        ValueError: If an item contains a lone surrogate.
    """

    items: Tuple[str, ...]

    def __init__(self, items: Iterable[str] = ()) -> None:
        object.__setattr__(
            self, "items", tuple(_checked_text(item, "List item") for item in items)
        )

    @property
    def is_defined(self) -> bool:
        return bool(self.items)

    @property
    def string_value(self) -> Optional[str]:
        return None

    @property
    def list_value(self) -> Optional[List[str]]:
        return list(self.items)

    @property
    def dict_value(self) -> Optional[Dict[str, str]]:
        return None


@dataclass(frozen=True)
class AssocList:
    """Ordered associative list of ``(key, value)`` pairs.

    Accepts a mapping (iterated in its own order) or an iterable of pairs.

    Raises:
        TypeError: If a key or value is not a ``str``.
        ValueError: If a key appears more than once, or a key or value
            contains a lone surrogate.
    """

    pairs: Tuple[Tuple[str, str], ...]

    def __init__(
        self,
        pairs: Union[Mapping[str, str], Iterable[Tuple[str, str]]] = (),
    ) -> None:
        if isinstance(pairs, Mapping):
            raw_pairs = list(pairs.items())
        else:
            raw_pairs = list(pairs)
        items = tuple(
            (_checked_text(k, "Key"), _checked_text(v, f"Value for key '{k}'"))
            for k, v in raw_pairs
        )
        seen = set()
        for key, _ in items:
            if key in seen:
                raise ValueError(f"Duplicate key '{key}' in associative list")
            seen.add(key)
        object.__setattr__(self, "pairs", items)

    @property
    def is_defined(self) -> bool:
        return bool(self.pairs)

    @property
    def string_value(self) -> Optional[str]:
        return None

    @property
    def list_value(self) -> Optional[List[str]]:
        return None

    @property
    def dict_value(self) -> Optional[Dict[str, str]]:
        return dict(self.pairs)


VariableValue = Union[Text, ListValue, AssocList]

_VALUE_TYPES = (Text, ListValue, AssocList)


def _scalar(obj: Any) -> str:
    """Render a scalar item as text."""
    if isinstance(obj, str):
        return obj
    if isinstance(obj, (int, float)) and not isinstance(obj, bool):
        return str(obj)
    raise TypeError(
        f"Unsupported template value item of type {type(obj).__name__}; "
        "expected str, int or float"
    )


def to_value(obj: Any) -> Optional[VariableValue]:
    """Coerce a native Python object into a variable value.

    Args:
        obj: A value shape, ``str``, ``int``/``float``, mapping, list/tuple,
            or None.

    Returns:
        The corresponding value shape, or None for ``None`` (treated as an
        absent binding).

    Raises:
        TypeError: If ``obj`` (or one of its items) has an unsupported type.

    Examples:
        >>> to_value("x")
        Text(value='x')
        >>> to_value(["a", 1])
        ListValue(items=('a', '1'))
        >>> to_value({"k": "v"})
        AssocList(pairs=(('k', 'v'),))
    """
    if obj is None:
        return None
    if isinstance(obj, _VALUE_TYPES):
        return obj
    if isinstance(obj, Mapping):
        return AssocList((_scalar(k), _scalar(v)) for k, v in obj.items())
    if isinstance(obj, (list, tuple)):
        return ListValue(_scalar(item) for item in obj)
    return Text(_scalar(obj))


def coerce_bindings(bindings: Mapping[str, Any]) -> Dict[str, VariableValue]:
    """Coerce every entry of ``bindings``, dropping ``None`` values."""
    out: Dict[str, VariableValue] = {}
    for name, raw in bindings.items():
        value = to_value(raw)
        if value is not None:
            out[name] = value
    return out
