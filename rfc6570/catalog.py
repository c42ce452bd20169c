"""YAML loader for named template catalogs.

A catalog declares request targets once and expands them by name:

    base: https://api.example.com
    templates:
      user: /users/{id}
      posts: /users/{id}/posts{?page,limit}

``base`` is optional and is prepended literally to every template before
parsing, so it may itself contain expressions.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Mapping, Optional

import yaml

from rfc6570.errors import TemplateError
from rfc6570.logging import get_logger
from rfc6570.template import Template

__all__ = [
    "TemplateCatalog",
    "load_catalog_yaml",
]

_logger = get_logger(__name__)

_RECOGNIZED_KEYS = {"base", "templates"}


class TemplateCatalog:
    """Read-only collection of named templates.

    Args:
        templates: Mapping of names to parsed templates, kept in given order.
    """

    def __init__(self, templates: Optional[Mapping[str, Template]] = None) -> None:
        self._templates: Dict[str, Template] = dict(templates or {})

    def names(self) -> List[str]:
        return list(self._templates)

    def get(self, name: str) -> Template:
        """Return the template registered under ``name``.

        Raises:
            KeyError: If no template has that name.
        """
        try:
            return self._templates[name]
        except KeyError:
            raise KeyError(
                f"Unknown template '{name}'. Known templates: {sorted(self._templates)}"
            ) from None

    def expand(
        self,
        name: str,
        bindings: Optional[Mapping[str, Any]] = None,
        **kwargs: Any,
    ) -> str:
        """Expand the template registered under ``name``."""
        return self.get(name).expand(bindings, **kwargs)

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def __len__(self) -> int:
        return len(self._templates)

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __repr__(self) -> str:
        return f"TemplateCatalog({self.names()!r})"


def load_catalog_yaml(yaml_str: str) -> TemplateCatalog:
    """Load and validate a template catalog from a YAML string.

    Raises:
        ValueError: If the document shape is wrong, or two keys name the same
            template once converted to strings. Template syntax errors are
            raised as the matching ``TemplateError`` subclass, with the
            template name prepended to the message.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    extra = set(map(str, data.keys())) - _RECOGNIZED_KEYS
    if extra:
        raise ValueError(
            f"Unrecognized top-level key(s) in catalog: {', '.join(sorted(extra))}. "
            f"Allowed keys are {sorted(_RECOGNIZED_KEYS)}"
        )

    base = data.get("base")
    if base is None:
        base = ""
    if not isinstance(base, str):
        raise ValueError("'base' must be a string")

    entries = data.get("templates")
    if entries is None:
        entries = {}
    if not isinstance(entries, dict):
        raise ValueError("'templates' must be a mapping of names to template strings")

    templates: Dict[str, Template] = {}
    for key, raw in entries.items():
        # YAML 1.1 turns keys like "on" into booleans; keep names as strings
        name = str(key)
        if name in templates:
            raise ValueError(f"Duplicate template name '{name}' in catalog")
        if not isinstance(raw, str):
            raise ValueError(f"Template '{name}' must be a string, got {raw!r}")
        try:
            templates[name] = Template(base + raw)
        except TemplateError as exc:
            raise type(exc)(
                f"template '{name}': {exc.message}",
                fragment=exc.fragment,
                position=exc.position,
            ) from exc

    _logger.debug("Loaded template catalog with %d template(s)", len(templates))
    return TemplateCatalog(templates)
