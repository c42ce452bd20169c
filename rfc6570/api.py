"""Function-level API over ``Template``.

Parsed templates are cached (see ``rfc6570.config.TEMPLATE_CACHE_CONFIG``) so
repeated calls with the same template string parse it once.

Usage:
    from rfc6570 import api

    api.expand("https://api.github.com{/end}", {"end": "users"})
    api.expand("https://api.github.com{/end}", end="gists")
    api.validate("{var:0}")  # False
"""

from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Any, Dict, List, Mapping, Optional

from rfc6570.config import TEMPLATE_CACHE_CONFIG
from rfc6570.errors import TemplateError
from rfc6570.template import Template

__all__ = [
    "as_template",
    "expand",
    "validate",
    "variables",
    "clear_template_cache",
    "template_cache_info",
]

_cache: "OrderedDict[str, Template]" = OrderedDict()
_cache_lock = threading.Lock()
_hits = 0
_misses = 0


def as_template(raw: str) -> Template:
    """Return the parsed Template for ``raw``, reusing a cached instance.

    Raises:
        TemplateError: If ``raw`` is not a valid template.
    """
    global _hits, _misses

    maxsize = TEMPLATE_CACHE_CONFIG.effective_maxsize()
    if maxsize == 0:
        return Template(raw)

    with _cache_lock:
        cached = _cache.get(raw)
        if cached is not None:
            _cache.move_to_end(raw)
            _hits += 1
            return cached
        _misses += 1

    template = Template(raw)

    with _cache_lock:
        _cache[raw] = template
        _cache.move_to_end(raw)
        while len(_cache) > maxsize:
            _cache.popitem(last=False)
    return template


def expand(
    raw: str, var_dict: Optional[Mapping[str, Any]] = None, **kwargs: Any
) -> str:
    """Expand the template string ``raw`` with the given variables.

    Keyword arguments override entries of ``var_dict``.

    Raises:
        TemplateError: If ``raw`` is not a valid template.
    """
    return as_template(raw).expand(var_dict, **kwargs)


def validate(raw: str) -> bool:
    """Return True if ``raw`` parses as a template."""
    try:
        as_template(raw)
    except TemplateError:
        return False
    return True


def variables(raw: str) -> List[str]:
    """Return the variable names referenced by ``raw`` in first-seen order."""
    return as_template(raw).variable_names


def clear_template_cache() -> None:
    """Drop every cached template and reset the counters."""
    global _hits, _misses
    with _cache_lock:
        _cache.clear()
        _hits = 0
        _misses = 0


def template_cache_info() -> Dict[str, int]:
    """Return cache statistics: hits, misses, size and maxsize."""
    with _cache_lock:
        return {
            "hits": _hits,
            "misses": _misses,
            "size": len(_cache),
            "maxsize": TEMPLATE_CACHE_CONFIG.effective_maxsize(),
        }
