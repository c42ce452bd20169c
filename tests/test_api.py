"""Tests for rfc6570.api convenience functions and the template cache."""

import pytest

from rfc6570 import api
from rfc6570.config import TEMPLATE_CACHE_CONFIG
from rfc6570.errors import InvalidTemplate
from rfc6570.template import Template


class TestExpand:
    """Tests for api.expand."""

    def test_var_dict(self) -> None:
        assert api.expand("https://api.github.com{/end}", {"end": "users"}) == (
            "https://api.github.com/users"
        )

    def test_kwargs(self) -> None:
        assert api.expand("https://api.github.com{/end}", end="gists") == (
            "https://api.github.com/gists"
        )

    def test_kwargs_win(self) -> None:
        assert api.expand("https://{var}", {"var": "val1"}, var="val2") == "https://val2"

    def test_invalid_template_raises(self) -> None:
        with pytest.raises(InvalidTemplate):
            api.expand("{unclosed", {})


class TestValidateAndVariables:
    """Tests for api.validate and api.variables."""

    @pytest.mark.parametrize("raw", ["", "/x", "{a}{+b}{#c:3}{?d*}"])
    def test_valid(self, raw: str) -> None:
        assert api.validate(raw) is True

    @pytest.mark.parametrize(
        "raw", ["{", "}", "{}", "{var:0}", "{var:abc}", "{var:3*}", "{var-name}"]
    )
    def test_invalid(self, raw: str) -> None:
        assert api.validate(raw) is False

    def test_variables(self) -> None:
        assert api.variables("{/a}{?b,a}") == ["a", "b"]


class TestTemplateCache:
    """Tests for the parse cache behind the function API."""

    def test_same_instance_reused(self) -> None:
        first = api.as_template("/users/{id}")
        second = api.as_template("/users/{id}")
        assert first is second
        assert isinstance(first, Template)
        info = api.template_cache_info()
        assert info["hits"] == 1
        assert info["misses"] == 1
        assert info["size"] == 1

    def test_lru_eviction(self) -> None:
        TEMPLATE_CACHE_CONFIG.maxsize = 2
        a = api.as_template("{a}")
        api.as_template("{b}")
        api.as_template("{a}")  # refresh "a"
        api.as_template("{c}")  # evicts "b"
        assert api.template_cache_info()["size"] == 2
        assert api.as_template("{a}") is a
        misses = api.template_cache_info()["misses"]
        api.as_template("{b}")
        assert api.template_cache_info()["misses"] == misses + 1

    def test_disabled_cache(self) -> None:
        TEMPLATE_CACHE_CONFIG.enabled = False
        first = api.as_template("{x}")
        second = api.as_template("{x}")
        assert first == second
        assert first is not second
        assert api.template_cache_info()["size"] == 0
        assert api.template_cache_info()["maxsize"] == 0

    def test_invalid_templates_not_cached(self) -> None:
        assert api.validate("{bad") is False
        assert api.template_cache_info()["size"] == 0

    def test_clear(self) -> None:
        api.as_template("{x}")
        api.clear_template_cache()
        assert api.template_cache_info() == {
            "hits": 0,
            "misses": 0,
            "size": 0,
            "maxsize": TEMPLATE_CACHE_CONFIG.maxsize,
        }
