"""Global pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Any, Dict

import pytest

from rfc6570.api import clear_template_cache
from rfc6570.config import TEMPLATE_CACHE_CONFIG


@pytest.fixture
def rfc_vars() -> Dict[str, Any]:
    """Variable set used by the examples in RFC 6570 section 3.2."""
    return {
        "count": ["one", "two", "three"],
        "dom": ["example", "com"],
        "dub": "me/too",
        "hello": "Hello World!",
        "half": "50%",
        "var": "value",
        "who": "fred",
        "base": "http://example.com/home/",
        "path": "/foo/bar",
        "list": ["red", "green", "blue"],
        "keys": {"semi": ";", "dot": ".", "comma": ","},
        "v": "6",
        "x": "1024",
        "y": "768",
        "empty": "",
        "empty_keys": {},
        "undef": None,
    }


@pytest.fixture(autouse=True)
def _fresh_template_cache():
    """Start every test with an empty parse cache and default cache config."""
    maxsize, enabled = TEMPLATE_CACHE_CONFIG.maxsize, TEMPLATE_CACHE_CONFIG.enabled
    clear_template_cache()
    yield
    TEMPLATE_CACHE_CONFIG.maxsize = maxsize
    TEMPLATE_CACHE_CONFIG.enabled = enabled
    clear_template_cache()
