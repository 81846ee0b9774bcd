from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

PointerLike: TypeAlias = str | Sequence[str]

APPEND_MARKER = "[]"
PARENT_SEGMENT = ".."
CURRENT_SEGMENT = "."

ROOT_POINTERS = frozenset({"", "#", "/", "#/"})

# Most ``None`` slots ``set`` inserts ahead of a new list index.
MAX_GAP_FILL = 1024


class ContainerKind(str, Enum):
    ARRAY = "array"
    MAPPING = "mapping"


@dataclass(frozen=True, slots=True)
class ParsedPointer:
    """A pointer split into decoded segments.

    ``is_fragment`` records whether the source string used the ``#`` URI
    fragment form.
    """

    segments: tuple[str, ...]
    is_fragment: bool = False
