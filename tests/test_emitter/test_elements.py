"""Tests for rendering layout elements: raw text, includes, blocks, comments."""

from __future__ import annotations

import pytest

from cwriter.emitter import render, write_element, write_elements
from cwriter.ir import (
    NEWLINE,
    SEMICOLON,
    Attribute,
    Braced,
    Concat,
    ImportAttribute,
    Include,
    IncludeStyle,
    Indentation,
    Indented,
    LineComment,
    Raw,
)
from cwriter.writer import Writer


def rendered(element) -> str:
    writer = Writer()
    write_element(element, writer)
    return writer.getvalue()


class TestRaw:
    def test_raw_is_verbatim(self) -> None:
        assert rendered(Raw("int x = 1;")) == "int x = 1;"

    def test_raw_is_not_indented(self) -> None:
        writer = Writer()
        writer.indent()
        write_element(Raw("x"), writer)
        assert writer.getvalue() == "x"

    def test_constants(self) -> None:
        assert rendered(NEWLINE) == "\n"
        assert rendered(SEMICOLON) == ";"

    def test_indentation(self) -> None:
        writer = Writer(indentation="\t")
        writer.indent()
        write_element(Indentation(), writer)
        assert writer.getvalue() == "\t"


class TestInclude:
    def test_include_with_quotes(self) -> None:
        assert rendered(Include("foo", IncludeStyle.QUOTES)) == '#include "foo"\n'

    def test_include_with_angle_brackets(self) -> None:
        assert rendered(Include("foo", IncludeStyle.ANGLE_BRACKETS)) == "#include <foo>\n"


class TestIndented:
    def test_indented(self) -> None:
        assert rendered(Indented([Include("foo")])) == '    #include "foo"\n'

    def test_every_child_is_prefixed(self) -> None:
        assert rendered(Indented([Include("a"), Include("b")])) == '    #include "a"\n    #include "b"\n'

    def test_nested(self) -> None:
        assert rendered(Indented([Indented([Raw("x")])])) == "        x"

    def test_custom_indentation(self) -> None:
        assert render(Indented([Include("foo")]), indentation="\t") == '\t#include "foo"\n'

    def test_nested_depth_uses_one_unit_per_level(self) -> None:
        tree = Indented(
            [
                Concat([Raw("a"), NEWLINE]),
                Indented([Concat([Raw("b"), NEWLINE]), Indented([Raw("c")])]),
            ]
        )
        assert render(tree, indentation="\t") == "\ta\n\t\tb\n\t\t\tc"

    def test_empty_body_restores_indentation(self) -> None:
        writer = Writer()
        write_element(Indented([]), writer)
        assert writer.getvalue() == ""
        assert writer.current_indentation == ""

    def test_restores_outer_indentation(self) -> None:
        writer = Writer()
        writer.indent()
        write_element(Indented([Raw("x")]), writer)
        assert writer.current_indentation == "    "

    def test_restores_indentation_when_child_fails(self) -> None:
        writer = Writer()
        with pytest.raises(TypeError):
            write_element(Indented([Raw("x"), "not an element"]), writer)  # type: ignore[list-item]
        assert writer.current_indentation == ""


class TestBraced:
    def test_braced(self) -> None:
        assert rendered(Braced([Include("foo")])) == '{\n    #include "foo"\n}'

    def test_braced_multiple_children(self) -> None:
        result = rendered(Braced([Include("foo"), Include("bar")]))
        assert result == '{\n    #include "foo"\n    #include "bar"\n}'

    def test_empty_braced(self) -> None:
        assert rendered(Braced()) == "{}"

    def test_empty_callable_body(self) -> None:
        assert rendered(Braced(lambda: [])) == "{}"

    def test_nested_braced_closes_at_its_own_level(self) -> None:
        inner = Concat([Raw("if (x) "), Braced([Concat([Raw("y();"), NEWLINE])]), NEWLINE])
        result = rendered(Braced([inner]))
        assert result == "{\n    if (x) {\n        y();\n    }\n}"

    def test_restores_indentation(self) -> None:
        writer = Writer()
        write_element(Braced([Raw("x")]), writer)
        write_element(Braced([]), writer)
        assert writer.current_indentation == ""


class TestConcat:
    def test_concat_in_indented_block(self) -> None:
        result = rendered(
            Indented(
                [
                    Concat([Raw("a"), NEWLINE]),
                    Concat([Raw("b"), NEWLINE]),
                    Concat([Raw("c"), Raw("d")]),
                ]
            )
        )
        assert result == "    a\n    b\n    cd"

    def test_concat_adds_nothing(self) -> None:
        assert rendered(Concat([Raw("x"), SEMICOLON])) == "x;"

    def test_empty_concat(self) -> None:
        assert rendered(Concat()) == ""


class TestLineComment:
    def test_single_line(self) -> None:
        assert rendered(LineComment("generated")) == "// generated\n"

    def test_multiple_lines(self) -> None:
        result = rendered(LineComment("this is a comment.\nit spans multiple lines"))
        assert result == "// this is a comment.\n// it spans multiple lines\n"

    def test_multiple_lines_in_indented_block(self) -> None:
        result = rendered(Indented([LineComment("one\ntwo")]))
        assert result == "    // one\n    // two\n"

    def test_empty_comment(self) -> None:
        assert rendered(LineComment("")) == "// \n"

    def test_only_newlines_split_lines(self) -> None:
        assert rendered(LineComment("a\x0cb\u2028c")) == "// a\x0cb\u2028c\n"

    def test_crlf_line_breaks(self) -> None:
        assert rendered(LineComment("one\r\ntwo")) == "// one\n// two\n"

    def test_trailing_newline_adds_no_empty_line(self) -> None:
        assert rendered(LineComment("one\n")) == "// one\n"


class TestAttributes:
    def test_attribute(self) -> None:
        assert rendered(Attribute("foo")) == "__attribute__(foo)"

    def test_import_attribute_without_module_name(self) -> None:
        assert rendered(ImportAttribute("foo")) == '__attribute__(__import_name__("foo"))'

    def test_import_attribute_with_module_name(self) -> None:
        result = rendered(ImportAttribute("foo", module_name="bar"))
        assert result == '__attribute__(__import_name__("foo"), __module_name__("bar"))'


class TestDispatch:
    def test_unknown_element(self) -> None:
        with pytest.raises(TypeError, match="Unsupported element"):
            rendered("int x;")

    def test_write_elements_in_order(self) -> None:
        writer = Writer()
        write_elements([Raw("a"), Raw("b"), NEWLINE], writer)
        assert writer.getvalue() == "ab\n"

    def test_render_single_element(self) -> None:
        assert render(Raw("x")) == "x"

    def test_render_generator(self) -> None:
        assert render(Raw(c) for c in "abc") == "abc"
