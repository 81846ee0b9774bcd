"""Tests for pointerpath.compose."""

from __future__ import annotations

import pytest

from pointerpath.compose import join
from pointerpath.parse import split

# ===================================================================
# Variadic mode
# ===================================================================


class TestJoinVariadic:
    def test_keys_and_pointers(self):
        assert join("root", "my key", "/to/target") == "/root/my key/to/target"

    def test_pointers(self):
        assert join("/a/b", "/c") == "/a/b/c"

    def test_escaped_segments_survive(self):
        assert join("/a~1b", "c") == "/a~1b/c"

    def test_single_argument_normalises(self):
        assert join("a") == "/a"

    def test_empty_segments_dropped(self):
        assert join("/a/", "/b") == "/a/b"

    def test_current_segment_ignored(self):
        assert join("/a", "./b") == "/a/b"

    def test_segment_list_argument(self):
        assert join("/a", ["b/c", "d"]) == "/a/b~1c/d"


class TestJoinRelative:
    def test_parent_pops(self):
        assert join("/a/b", "..", "c") == "/a/c"

    def test_mixed_relative_pointer(self):
        assert join("/root/child", "../object") == "/root/object"

    def test_parent_inside_pointer(self):
        assert join("/a/b/../c") == "/a/c"

    def test_overpop_clamps_at_root(self):
        assert join("/a", "../../..", "b") == "/b"

    def test_overpop_to_root(self):
        assert join("/a", "../..") == "/"


class TestJoinFragment:
    def test_fragment_roundtrip(self):
        assert join("#/my value/to%20parent", "../to~1child") == "#/my%20value/to~1child"

    def test_fragment_from_later_argument(self):
        assert join("/a", "#/b%20c") == "#/a/b%20c"

    def test_explicit_is_uri_overrides(self):
        assert join("#/a%20b", is_uri=False) == "/a b"

    def test_trailing_bool_sets_uri(self):
        assert join("/a b", "c", True) == "#/a%20b/c"

    def test_plain_argument_read_as_fragment(self):
        assert join("#/a", "b%20c") == "#/a/b%20c"

    def test_plain_argument_decoded_before_relative(self):
        assert join("#/a/b", "../my%20key") == "#/a/my%20key"

    def test_explicit_uri_decodes_plain_arguments(self):
        assert join("/a%20b", is_uri=True) == "#/a%20b"

    def test_plain_mode_keeps_percent_literal(self):
        assert join("/a", "b%20c") == "/a/b%20c"


# ===================================================================
# Array mode
# ===================================================================


class TestJoinArray:
    def test_segments_escaped_not_split(self):
        assert join(["a/b", "c~d"]) == "/a~1b/c~0d"

    def test_uri_mode(self):
        assert join(["my value", "x"], True) == "#/my%20value/x"

    def test_uri_keyword(self):
        assert join(["my value"], is_uri=True) == "#/my%20value"

    def test_relative_segments_are_literal(self):
        assert join(["..", "."]) == "/../."

    def test_empty_list(self):
        assert join([]) == "/"

    def test_roundtrip_through_split(self):
        segments = ["a/b", "~", "my key", "0", "%20"]
        assert split(join(segments)) == segments

    def test_fragment_roundtrip_through_split(self):
        segments = ["a/b", "~", "my key", "ü", "%"]
        assert split(join(segments, True)) == segments


class TestJoinErrors:
    def test_non_string_argument(self):
        with pytest.raises(TypeError, match="Cannot join int"):
            join("/a", 3)

    def test_non_string_segment(self):
        with pytest.raises(TypeError, match="segments must be str"):
            join(["a", 1])

    def test_non_string_segment_in_variadic_list(self):
        with pytest.raises(TypeError, match="segments must be str"):
            join("/a", ["b", 1])
