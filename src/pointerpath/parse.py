"""Normalise pointer strings and segment lists into decoded segments.

Root pointers are ``""``, ``"#"``, ``"/"`` and ``"#/"``; all of them yield an
empty segment list.  Note that ``"/"`` is treated as the root rather than as
the RFC 6901 pointer to the empty-string key.
"""

from __future__ import annotations

from collections.abc import Sequence

from .escape import decode_segment, encode_segment
from .types import ROOT_POINTERS, ParsedPointer, PointerLike


def parse_pointer(pointer: PointerLike) -> ParsedPointer:
    """Split *pointer* and report whether it used the ``#`` fragment form.

    A sequence is taken as already-decoded segments and copied as-is.
    """
    if not isinstance(pointer, str):
        return ParsedPointer(segments=tuple(pointer), is_fragment=False)

    is_fragment = pointer.startswith("#")
    if pointer in ROOT_POINTERS:
        return ParsedPointer(segments=(), is_fragment=is_fragment)

    body = pointer[1:] if is_fragment else pointer
    if body.startswith("/"):
        body = body[1:]
    return ParsedPointer(
        segments=tuple(decode_segment(piece, is_fragment) for piece in body.split("/")),
        is_fragment=is_fragment,
    )


def split(pointer: PointerLike) -> list[str]:
    """Return the decoded segments of *pointer* as a new list.

    >>> split("/a~1b/0")
    ['a/b', '0']
    >>> split("#/my%20value")
    ['my value']
    """
    return list(parse_pointer(pointer).segments)


def is_root(pointer: PointerLike) -> bool:
    if isinstance(pointer, str):
        return pointer in ROOT_POINTERS
    return len(pointer) == 0


def split_last(pointer: PointerLike) -> tuple[str, str | None]:
    """Return ``(parent_pointer, last_segment)`` for *pointer*.

    The parent keeps the fragment form of the input.  For a root pointer the
    last segment is ``None``.
    """
    parsed = parse_pointer(pointer)
    if not parsed.segments:
        return build_pointer((), parsed.is_fragment), None
    return build_pointer(parsed.segments[:-1], parsed.is_fragment), parsed.segments[-1]


def build_pointer(segments: Sequence[str], is_fragment: bool = False) -> str:
    """Build a pointer string from raw segments.

    An empty segment list gives ``"/"`` (or ``"#/"``), which is a root pointer.
    """
    prefix = "#/" if is_fragment else "/"
    return prefix + "/".join(encode_segment(segment, is_fragment) for segment in segments)
