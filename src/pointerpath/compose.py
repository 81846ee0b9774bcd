"""Combine pointers, bare keys and relative segments into one pointer.

Two calling conventions are supported::

    join("/root", "my key", "../other")   # variadic pointers/keys
    join(["a/b", "c"], True)              # one raw segment list, URI mode

In variadic mode every string is split like a pointer, so ``"../object"``
contributes ``["..", "object"]`` and ``".."`` removes the previously collected
segment.  Popping past the root is a no-op: the result stays at the root.

In fragment mode every string argument is read as a fragment, so
``join("#/a", "b%20c")`` gives ``"#/a/b%20c"`` rather than encoding the ``%``
again.  Fragment mode is on when ``is_uri`` is true or, if ``is_uri`` is unset,
when any argument starts with ``#``.
"""

from __future__ import annotations

from collections.abc import Sequence

from .parse import build_pointer, parse_pointer
from .types import CURRENT_SEGMENT, PARENT_SEGMENT


def join(
    first: str | Sequence[str],
    *rest: str | Sequence[str] | bool,
    is_uri: bool | None = None,
) -> str:
    """Join pointers and keys into a single normalised pointer string.

    ``is_uri`` forces (or suppresses) the ``#`` fragment form.  It may also be
    given as a trailing positional ``bool``.  When left unset in variadic
    mode, the fragment form is used if any argument starts with ``#``.
    """
    parts = list(rest)
    if parts and isinstance(parts[-1], bool):
        trailing = parts.pop()
        if is_uri is None:
            is_uri = trailing

    if not isinstance(first, str) and not parts:
        return build_pointer(_checked_segments(first), bool(is_uri))

    args = [first, *parts]
    for arg in args:
        if isinstance(arg, bool) or not isinstance(arg, (str, Sequence)):
            raise TypeError(f"Cannot join {type(arg).__name__} into a pointer")
        if not isinstance(arg, str):
            _checked_segments(arg)
    if is_uri is None:
        is_uri = any(isinstance(arg, str) and arg.startswith("#") for arg in args)

    segments: list[str] = []
    for arg in args:
        if is_uri and isinstance(arg, str) and not arg.startswith("#"):
            arg = "#" + arg
        for segment in parse_pointer(arg).segments:
            if segment == PARENT_SEGMENT:
                if segments:
                    segments.pop()
            elif segment and segment != CURRENT_SEGMENT:
                segments.append(segment)

    return build_pointer(segments, is_uri)


def _checked_segments(segments: Sequence[str]) -> Sequence[str]:
    for segment in segments:
        if not isinstance(segment, str):
            raise TypeError(f"Pointer segments must be str, got {type(segment).__name__}")
    return segments
