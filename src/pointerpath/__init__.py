from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pointerpath")
except PackageNotFoundError:  # pragma: no cover - local source tree without installed metadata
    __version__ = "0.1.0"

from .access import choose_container_kind, delete, get, get_as, set
from .errors import PointerError, PointerRangeError, PointerTypeError
from .escape import decode_segment, encode_segment, escape, unescape, uri_decode, uri_encode
from .compose import join
from .parse import build_pointer, is_root, parse_pointer, split, split_last
from .types import APPEND_MARKER, MAX_GAP_FILL, ContainerKind, ParsedPointer, PointerLike

__all__ = [
    "APPEND_MARKER",
    "ContainerKind",
    "MAX_GAP_FILL",
    "ParsedPointer",
    "PointerError",
    "PointerLike",
    "PointerRangeError",
    "PointerTypeError",
    "build_pointer",
    "choose_container_kind",
    "decode_segment",
    "delete",
    "encode_segment",
    "escape",
    "get",
    "get_as",
    "is_root",
    "join",
    "parse_pointer",
    "set",
    "split",
    "split_last",
    "unescape",
    "uri_decode",
    "uri_encode",
]
