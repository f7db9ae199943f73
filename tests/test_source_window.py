"""Tests for source window extraction."""

import pytest

from faultline.core.source_window import SourceLine, SourceWindow, extract_window


def _numbers(lines):
    return [line.number for line in lines]


def test_window_around_middle_line(ten_line_source):
    window = extract_window(ten_line_source, 5)

    assert window is not None
    assert window.before == (("line 2", 2), ("line 3", 3), ("line 4", 4))
    assert window.current == SourceLine("line 5", 5)
    assert window.after == (("line 6", 6), ("line 7", 7), ("line 8", 8))


def test_window_at_start_of_file(ten_line_source):
    window = extract_window(ten_line_source, 1)

    assert window.before == ()
    assert window.current == ("line 1", 1)
    assert _numbers(window.after) == [2, 3, 4]


def test_window_near_start_returns_only_existing_lines(ten_line_source):
    window = extract_window(ten_line_source, 3)

    assert _numbers(window.before) == [1, 2]
    assert _numbers(window.after) == [4, 5, 6]


def test_window_at_end_of_file(ten_line_source):
    window = extract_window(ten_line_source, 10)

    assert _numbers(window.before) == [7, 8, 9]
    assert window.current == ("line 10", 10)
    assert window.after == ()


def test_window_near_end_returns_only_existing_lines(ten_line_source):
    window = extract_window(ten_line_source, 9)
    assert _numbers(window.after) == [10]


@pytest.mark.parametrize("line_number", [0, -1, 11, 500])
def test_out_of_range_line_has_no_window(ten_line_source, line_number):
    assert extract_window(ten_line_source, line_number) is None


@pytest.mark.parametrize("source_text", [None, ""])
def test_missing_source_has_no_window(source_text):
    assert extract_window(source_text, 1) is None


def test_missing_line_has_no_window(ten_line_source):
    assert extract_window(ten_line_source, None) is None


def test_line_terminators_are_stripped():
    window = extract_window("first\r\nsecond  \r\nthird", 2)

    assert window.before == (("first", 1),)
    assert window.current == ("second  ", 2)
    assert window.after == (("third", 3),)


def test_blank_lines_are_kept():
    window = extract_window("a\n\nb\n", 2)

    assert window.current == ("", 2)
    assert window.before == (("a", 1),)
    assert window.after == (("b", 3),)


def test_single_line_source():
    window = extract_window("only line\n", 1)
    assert window == SourceWindow(before=(), current=SourceLine("only line", 1), after=())


def test_trailing_newline_does_not_add_a_line():
    assert extract_window("a\nb\n", 3) is None


def test_context_size_is_configurable(ten_line_source):
    narrow = extract_window(ten_line_source, 5, context=1)
    assert _numbers(narrow.before) == [4]
    assert _numbers(narrow.after) == [6]

    none = extract_window(ten_line_source, 5, context=0)
    assert none.before == ()
    assert none.after == ()
    assert none.current == ("line 5", 5)


def test_lines_property_is_in_order(ten_line_source):
    window = extract_window(ten_line_source, 2)
    assert _numbers(window.lines) == [1, 2, 3, 4, 5]


def test_gutter_width_counts_digits_at_and_below_target(numbered_source):
    assert extract_window(numbered_source(10), 5).gutter_width == 1
    # Window 6..11 prints 8, 9, 10 and 11 among others.
    assert extract_window(numbered_source(11), 9).gutter_width == 2
    assert extract_window(numbered_source(100), 99).gutter_width == 3
    # The largest printed number comes from the lines after the target.
    assert extract_window(numbered_source(12), 8).gutter_width == 2
    assert extract_window(numbered_source(9), 9).gutter_width == 1
