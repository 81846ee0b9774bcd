"""Read, write and delete values in nested data by pointer.

Object-like nodes are mappings; array-like nodes are lists and tuples.
Strings and bytes are always leaves.

* ``get`` never raises for a missing path and returns *default* instead.
* ``set`` creates intermediate containers on demand: a list when the next
  segment is numeric or the append marker ``[]``, a dict otherwise.
* Growing a list past its end fills the gap with ``None``, at most
  ``MAX_GAP_FILL`` slots at a time.
* List indices follow RFC 6901: ``"01"`` is not an index.
* ``delete`` removes list items with splice semantics (the list shrinks) and
  is a no-op for a missing path.

``set`` and ``delete`` mutate in place and return the top-level data.  The
root is only replaced when it was ``None``, so always use the return value.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, MutableMapping, MutableSequence
from typing import Any, TypeVar

from pydantic import TypeAdapter

from .errors import PointerRangeError, PointerTypeError
from .parse import split
from .types import APPEND_MARKER, MAX_GAP_FILL, ContainerKind, PointerLike

_DIGITS = re.compile(r"[0-9]+")
# RFC 6901 array index: no leading zeros.
_INDEX = re.compile(r"0|[1-9][0-9]*")

_missing = object()

T = TypeVar("T")


def choose_container_kind(next_segment: str) -> ContainerKind:
    """Pick the container ``set`` creates to hold *next_segment*."""
    if next_segment == APPEND_MARKER or _DIGITS.fullmatch(next_segment):
        return ContainerKind.ARRAY
    return ContainerKind.MAPPING


def get(data: Any, pointer: PointerLike, default: Any = None) -> Any:
    """Return the value at *pointer*, or *default* if any step is missing.

    >>> get({"a": [{"b": 1}]}, "/a/0/b")
    1
    >>> get({}, "/missing/deep/path") is None
    True
    """
    current = data
    for segment in split(pointer):
        current = _child(current, segment)
        if current is _missing:
            return default
    return current


def get_as(
    data: Any,
    pointer: PointerLike,
    target: type[T] | TypeAdapter[T],
    *,
    default: Any = None,
) -> T:
    """Resolve *pointer* like :func:`get` and validate the result.

    Raises
    ------
    pydantic.ValidationError
        If the resolved value (or *default*, when missing) does not conform
        to *target*.
    """
    adapter: TypeAdapter[T] = target if isinstance(target, TypeAdapter) else TypeAdapter(target)
    return adapter.validate_python(get(data, pointer, default))


def set(data: Any, pointer: PointerLike, value: Any) -> Any:
    """Write *value* at *pointer* and return the top-level data.

    Missing (or ``None``) intermediate nodes are created.  When *data* itself
    is ``None`` a new root container is created and returned.  A root pointer
    leaves *data* untouched.

    Raises
    ------
    PointerTypeError
        If the path runs through a scalar, uses a key on a list, or hits a
        read-only container.
    PointerRangeError
        If a list index lies more than ``MAX_GAP_FILL`` slots past the end.
    """
    segments = split(pointer)
    if not segments:
        return data
    if data is None:
        data = _new_container(segments[0])

    current = data
    for i, segment in enumerate(segments[:-1]):
        child = _child(current, segment)
        if child is _missing or child is None:
            child = _new_container(segments[i + 1])
            _assign(current, segment, child)
        current = child
    _assign(current, segments[-1], value)
    return data


def delete(data: Any, pointer: PointerLike) -> Any:
    """Remove the value at *pointer* and return *data*.

    List items are removed with ``del`` so later items shift left.  A missing
    path is a no-op.

    Raises
    ------
    PointerTypeError
        If *data* is not a mutable container.
    """
    segments = split(pointer)
    if not segments:
        return data
    if not isinstance(data, MutableMapping) and not _is_array(data):
        raise PointerTypeError(f"Cannot delete from {type(data).__name__}")

    parent = data
    for segment in segments[:-1]:
        parent = _child(parent, segment)
        if parent is _missing:
            return data

    last = segments[-1]
    if _child(parent, last) is _missing:
        return data
    if isinstance(parent, MutableMapping):
        del parent[last]
    elif isinstance(parent, MutableSequence):
        del parent[int(last)]
    else:
        raise PointerTypeError(f"Cannot delete from read-only {type(parent).__name__}")
    return data


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _is_index(segment: str) -> bool:
    return _INDEX.fullmatch(segment) is not None


def _is_array(node: Any) -> bool:
    return isinstance(node, (list, tuple))


def _child(node: Any, segment: str) -> Any:
    """Return the child of *node* at *segment*, or ``_missing``."""
    if isinstance(node, Mapping):
        return node.get(segment, _missing)
    if _is_array(node):
        if not _is_index(segment):
            return _missing
        idx = int(segment)
        return node[idx] if idx < len(node) else _missing
    return _missing


def _new_container(next_segment: str) -> list[Any] | dict[str, Any]:
    if choose_container_kind(next_segment) is ContainerKind.ARRAY:
        return []
    return {}


def _assign(node: Any, segment: str, value: Any) -> None:
    """Store *value* under *segment* in *node*, growing lists as needed."""
    if isinstance(node, MutableMapping):
        node[segment] = value
    elif _is_array(node):
        if not isinstance(node, MutableSequence):
            raise PointerTypeError(f"Cannot write into read-only {type(node).__name__}")
        if segment == APPEND_MARKER:
            node.append(value)
        elif _is_index(segment):
            idx = int(segment)
            gap = idx - len(node)
            if gap > MAX_GAP_FILL:
                raise PointerRangeError(
                    f"Array index {idx} is {gap} slots past the end (limit {MAX_GAP_FILL})"
                )
            if gap >= 0:
                node.extend([None] * (gap + 1))
            node[idx] = value
        else:
            raise PointerTypeError(f"Invalid array index: {segment!r}")
    else:
        raise PointerTypeError(
            f"Cannot traverse into {type(node).__name__} with segment {segment!r}"
        )
