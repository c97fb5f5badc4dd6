from __future__ import annotations

import pytest

from neocoder.actions import format_document, indent_unit
from neocoder.buffer import DocumentBuffer


def test_format_indents_function_body() -> None:
    formatted = format_document("func f() {\nprint(1)\n}", indent_unit(4))

    assert formatted == "func f() {\n    print(1)\n}"


def test_format_nested_blocks_and_strips_existing_indent() -> None:
    content = "a {\n\t  b {\n  c\n      }\n}"

    formatted = format_document(content, indent_unit(2))

    assert formatted == "a {\n  b {\n    c\n  }\n}"


def test_brace_changes_depth_once_per_line() -> None:
    formatted = format_document("{{{\nx\n}}}\ny", "  ")

    assert formatted == "{{{\n  x\n}}}\ny"


def test_closing_and_opening_on_same_line() -> None:
    formatted = format_document("if a {\nx\n} else {\ny\n}", "  ")

    assert formatted == "if a {\n  x\n} else {\n  y\n}"


def test_depth_never_goes_negative() -> None:
    formatted = format_document("}\n}\nx {\ny", "  ")

    assert formatted == "}\n}\nx {\n  y"


def test_braces_in_strings_are_counted() -> None:
    formatted = format_document('s = "{"\nnext', "  ")

    assert formatted == 's = "{"\n  next'


def test_format_normalizes_line_endings() -> None:
    formatted = format_document("a {\r\nb\rc\n}", "  ")

    assert formatted == "a {\n  b\n  c\n}"


def test_format_keeps_trailing_empty_line() -> None:
    assert format_document("x\n", "  ") == "x\n"


@pytest.mark.parametrize(
    "content",
    [
        "func f() {\nprint(1)\n}",
        "a {\n b {\n  c\n }\n}\n",
        "class A {\r\n  void f() {\r\n return;\r\n}\r\n}",
        "",
    ],
)
@pytest.mark.parametrize("tab_size", [2, 4, 8])
def test_format_reaches_fixed_point(content: str, tab_size: int) -> None:
    unit = indent_unit(tab_size)
    once = format_document(content, unit)

    assert format_document(once, unit) == once


@pytest.mark.parametrize("tab_size, width", [(0, 2), (2, 2), (4, 4), (8, 8), (12, 8)])
def test_indent_unit_is_clamped(tab_size: int, width: int) -> None:
    assert indent_unit(tab_size) == " " * width


def test_format_accepts_buffer() -> None:
    buffer = DocumentBuffer("x {\ny\n}")

    assert format_document(buffer, "\t") == "x {\n\ty\n}"
