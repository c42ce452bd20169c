"""Percent-encoding for expanded values.

Provides percent_encode() which escapes a value under one of two allowed
character sets (RFC 3986 section 2):

- unreserved: ALPHA / DIGIT / "-" / "." / "_" / "~"
- unreserved + reserved: adds ":/?#[]@!$&'()*+,;="

Anything else, including space and "%", becomes the UTF-8 bytes of the
character written as ``%XX`` with uppercase hex digits.
"""

from __future__ import annotations

from urllib.parse import quote

__all__ = [
    "UNRESERVED",
    "RESERVED",
    "percent_encode",
]

UNRESERVED = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-._~"
)
RESERVED = frozenset(":/?#[]@!$&'()*+,;=")

# quote() always leaves ALPHA / DIGIT / "_.-~" alone; "safe" adds to that.
_RESERVED_SAFE = "".join(sorted(RESERVED))


def percent_encode(text: str, allow_reserved: bool) -> str:
    """Percent-encode ``text``.

    Args:
        text: Value to encode.
        allow_reserved: Leave reserved characters unencoded when True.

    ``text`` must have a UTF-8 form. The value shapes in ``rfc6570.values``
    reject strings with lone surrogates, so expansion never reaches this
    limit.

    Returns:
        Encoded string.

    Examples:
        >>> percent_encode("Hello World!", False)
        'Hello%20World%21'
        >>> percent_encode("Hello World!", True)
        'Hello%20World!'
        >>> percent_encode("50%", True)
        '50%25'
    """
    return quote(text, safe=_RESERVED_SAFE if allow_reserved else "")
