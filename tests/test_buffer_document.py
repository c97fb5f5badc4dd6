from __future__ import annotations

from typing import List

import pytest

from neocoder.buffer import (
    BufferChange,
    DocumentBuffer,
    SelectionRange,
    clamp_selection,
    split_lines,
)


@pytest.mark.parametrize(
    "content, expected",
    [
        ("", 1),
        ("one line", 1),
        ("a\nb", 2),
        ("a\nb\n", 3),
        ("a\r\nb\r\nc", 3),
        ("a\rb", 2),
        ("a\r\n\nb\rc", 4),
        ("\n\n", 3),
    ],
)
def test_line_count_matches_logical_lines(content: str, expected: int) -> None:
    buffer = DocumentBuffer(content)

    assert buffer.line_count() == expected
    assert buffer.line_count() == len(split_lines(content))
    assert buffer.line_numbers == tuple(range(1, expected + 1))


def test_set_content_recomputes_line_numbers() -> None:
    buffer = DocumentBuffer("single")

    buffer.set_content("one\ntwo\nthree")

    assert buffer.get_content() == "one\ntwo\nthree"
    assert buffer.line_numbers == (1, 2, 3)

    buffer.set_content("")

    assert buffer.line_numbers == (1,)


def test_insert_at_clamps_past_end_of_empty_content() -> None:
    buffer = DocumentBuffer("")

    used = buffer.insert_at("hi", 50)

    assert used == 0
    assert buffer.content == "hi"
    assert buffer.line_count() == 1


def test_insert_at_clamps_negative_offset_to_start() -> None:
    buffer = DocumentBuffer("world")

    used = buffer.insert_at("hello ", -7)

    assert used == 0
    assert buffer.content == "hello world"


def test_insert_at_middle_with_newlines_updates_lines() -> None:
    buffer = DocumentBuffer("ac")

    buffer.insert_at("\nb\n", 1)

    assert buffer.content == "a\nb\nc"
    assert buffer.line_count() == 3


@pytest.mark.parametrize("offset", [-10, 0, 3, 5, 999])
def test_inserting_empty_text_is_a_no_op(offset: int) -> None:
    buffer = DocumentBuffer("hello")

    buffer.insert_at("", offset)

    assert buffer.content == "hello"


def test_each_mutation_notifies_listeners_once() -> None:
    buffer = DocumentBuffer("x")
    changes: List[BufferChange] = []
    buffer.add_listener(changes.append)

    buffer.set_content("y")
    buffer.insert_at("z", 1)

    assert [change.content for change in changes] == ["y", "yz"]
    assert [change.label for change in changes] == ["set_content", "insert_at"]
    assert [change.version for change in changes] == [1, 2]


def test_construction_does_not_notify() -> None:
    changes: List[BufferChange] = []
    buffer = DocumentBuffer("initial")
    buffer.add_listener(changes.append)

    buffer.remove_listener(changes.append)
    buffer.set_content("changed")

    assert changes == []
    assert buffer.version == 1


def test_offset_for_line_handles_mixed_endings() -> None:
    buffer = DocumentBuffer("ab\r\ncd\nef\rgh")

    assert buffer.offset_for_line(1) == 0
    assert buffer.offset_for_line(2) == 4
    assert buffer.offset_for_line(3) == 7
    assert buffer.offset_for_line(4) == 10
    assert buffer.offset_for_line(0) is None
    assert buffer.offset_for_line(5) is None


def test_line_spans_exclude_terminators() -> None:
    buffer = DocumentBuffer("ab\r\ncd")

    spans = buffer.line_spans()

    assert [(s.number, s.start, s.end, s.text) for s in spans] == [
        (1, 0, 2, "ab"),
        (2, 4, 6, "cd"),
    ]


def test_clamp_selection_keeps_range_inside_content() -> None:
    assert clamp_selection(SelectionRange(8, 4), 10) == SelectionRange(8, 2)
    assert clamp_selection(SelectionRange(-3, 2), 10) == SelectionRange(0, 2)
    assert clamp_selection(SelectionRange(50, 0), 10) == SelectionRange(10, 0)
    assert clamp_selection(SelectionRange(2, -1), 10) == SelectionRange(2, 0)
