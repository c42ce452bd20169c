"""Tests for rfc6570.encoding."""

import pytest

from rfc6570.encoding import RESERVED, UNRESERVED, percent_encode


class TestPercentEncode:
    """Tests for percent_encode with both allowed sets."""

    def test_unreserved_pass_through(self) -> None:
        """Letters, digits and -._~ are never encoded."""
        text = "".join(sorted(UNRESERVED))
        assert percent_encode(text, False) == text
        assert percent_encode(text, True) == text

    def test_reserved_encoded_without_allowance(self) -> None:
        """Every reserved character is escaped in unreserved mode."""
        assert percent_encode(":/?#[]@!$&'()*+,;=", False) == (
            "%3A%2F%3F%23%5B%5D%40%21%24%26%27%28%29%2A%2B%2C%3B%3D"
        )

    def test_reserved_kept_with_allowance(self) -> None:
        """Reserved characters survive in reserved mode."""
        text = ":/?#[]@!$&'()*+,;="
        assert percent_encode(text, True) == text

    @pytest.mark.parametrize("allow_reserved", [False, True])
    def test_space_and_percent_always_encoded(self, allow_reserved: bool) -> None:
        """Space and '%' are outside both allowed sets."""
        assert percent_encode("50% off", allow_reserved) == "50%25%20off"

    def test_utf8_bytes_uppercase_hex(self) -> None:
        """Non-ASCII characters become their UTF-8 bytes in uppercase hex."""
        assert percent_encode("é", False) == "%C3%A9"
        assert percent_encode("你好", True) == "%E4%BD%A0%E5%A5%BD"

    def test_other_ascii_encoded_in_both_modes(self) -> None:
        """Characters like quote, angle brackets and braces are always escaped."""
        assert percent_encode('"<>{}|\\^`', True) == "%22%3C%3E%7B%7D%7C%5C%5E%60"

    def test_empty_string(self) -> None:
        assert percent_encode("", False) == ""

    def test_character_sets_disjoint(self) -> None:
        """Reserved and unreserved sets do not overlap."""
        assert not (RESERVED & UNRESERVED)
