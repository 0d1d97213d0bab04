import pytest

from yamlls.completion import (
    alias_prefix_at,
    anchor_detail,
    byte_offset_of,
    is_anchor_name_char,
    mask_alias_context,
)

TWO_ANCHORS_EMPTY = "first: &alpha 1\nsecond: &beta 2\nref: *\n"
TWO_ANCHORS_PREFIX = "first: &alpha 1\nsecond: &beta 2\nref: *al\n"


def test_prefix_empty_right_after_star():
    # LSP (2, 6) -> parser line 3, byte col 7.
    assert alias_prefix_at(TWO_ANCHORS_EMPTY, 3, 7) == ("", 7)


def test_prefix_after_typed_chars():
    # LSP (2, 8) -> parser line 3, byte col 9; prefix starts at col 7 (LSP 6).
    assert alias_prefix_at(TWO_ANCHORS_PREFIX, 3, 9) == ("al", 7)


def test_prefix_none_in_plain_value():
    assert alias_prefix_at("first: &alpha 1\nplain: value\n", 2, 11) is None


def test_prefix_none_inside_anchor_name():
    assert alias_prefix_at("first: &alpha 1\n", 1, 11) is None


def test_prefix_none_at_line_start():
    assert alias_prefix_at("*abc\n", 1, 1) is None


def test_prefix_when_star_at_line_start():
    assert alias_prefix_at("*abc\n", 1, 3) == ("a", 2)


def test_prefix_column_clamped_past_line_end():
    assert alias_prefix_at("ref: *ab\n", 1, 100) == ("ab", 7)


def test_prefix_multibyte_name_uses_byte_columns():
    text = "ref: *éa\n"
    end_col = len("ref: *éa".encode()) + 1
    assert alias_prefix_at(text, 1, end_col) == ("éa", 7)


def test_prefix_second_document_line():
    text = "first: &a 1\n---\nsecond: &b 2\nref: *\n"
    assert alias_prefix_at(text, 4, 7) == ("", 7)


def test_mask_replaces_star_and_prefix():
    text = "a: 1\nref: *al\n"
    masked = mask_alias_context(text, 2, 7, "al")
    assert masked == "a: 1\nref:    \n"
    assert len(masked.encode()) == len(text.encode())


def test_mask_empty_prefix_replaces_star_only():
    assert mask_alias_context(TWO_ANCHORS_EMPTY, 3, 7, "") == (
        "first: &alpha 1\nsecond: &beta 2\nref:  \n"
    )


def test_mask_stops_at_newline():
    assert mask_alias_context("a: *\nb: 1\n", 1, 5, "xyz") == "a:  \nb: 1\n"


def test_mask_out_of_range_leaves_text():
    assert mask_alias_context("a\n", 10, 7, "x") == "a\n"


def test_byte_offset_of_second_line():
    assert byte_offset_of("a\nbc\n", 2, 2) == 3


def test_byte_offset_of_clamps_low_line_and_col():
    assert byte_offset_of("abc", 0, 0) == 0


def test_byte_offset_of_clamps_to_length():
    assert byte_offset_of("a\nbc", 2, 50) == 4
    assert byte_offset_of("a\n", 10, 1) == 2


def test_byte_offset_of_counts_bytes():
    assert byte_offset_of("é\nx", 2, 1) == 3


def test_anchor_detail_mentions_line():
    assert anchor_detail(1) == "anchor at line 1"


@pytest.mark.parametrize(
    "ch, expected",
    [
        ("a", True),
        ("_", True),
        ("-", True),
        ("é", True),
        (0xC3, True),
        (" ", False),
        ("\t", False),
        ("\n", False),
        (",", False),
        ("[", False),
        ("}", False),
        ("&", False),
        ("*", False),
        ("!", False),
        (ord("*"), False),
    ],
)
def test_is_anchor_name_char(ch, expected):
    assert is_anchor_name_char(ch) is expected