"""RFC 6901 segment escaping and the URI fragment encoding layered on top.

Fragment pointers (``#/a%20b``) are pointer-escaped first and percent-encoded
second; decoding runs the same steps in reverse.
"""

from __future__ import annotations

from urllib.parse import quote, unquote

# Characters ``encodeURIComponent`` leaves alone beyond ``quote``'s defaults.
_URI_SAFE = "!*'()"


def escape(raw: str) -> str:
    """Escape a single segment (RFC 6901)."""
    return raw.replace("~", "~0").replace("/", "~1")


def unescape(encoded: str) -> str:
    """Unescape a single segment (RFC 6901)."""
    return encoded.replace("~1", "/").replace("~0", "~")


def uri_encode(segment: str) -> str:
    return quote(segment, safe=_URI_SAFE)


def uri_decode(segment: str) -> str:
    return unquote(segment)


def encode_segment(raw: str, is_fragment: bool = False) -> str:
    encoded = escape(raw)
    return uri_encode(encoded) if is_fragment else encoded


def decode_segment(encoded: str, is_fragment: bool = False) -> str:
    if is_fragment:
        encoded = uri_decode(encoded)
    return unescape(encoded)
