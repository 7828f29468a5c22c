"""Tests for the indentation-tracking writer."""

from __future__ import annotations

import io

import pytest

from cwriter.writer import DEFAULT_INDENTATION, TextSink, Writer


class FailingSink:
    """A sink that rejects every write, like a full disk."""

    def write(self, text: str) -> int:
        raise OSError("No space left on device")


class TestWriter:
    def test_defaults(self) -> None:
        writer = Writer()
        assert writer.indentation == DEFAULT_INDENTATION == "    "
        assert writer.current_indentation == ""
        assert writer.getvalue() == ""

    def test_write_accumulates(self) -> None:
        writer = Writer()
        writer.write("int ")
        writer.write("x;")
        assert writer.getvalue() == "int x;"

    def test_custom_stream(self) -> None:
        stream = io.StringIO()
        writer = Writer(stream)
        writer.write("abc")
        assert stream.getvalue() == "abc"
        assert writer.getvalue() == "abc"

    def test_getvalue_requires_retaining_sink(self) -> None:
        class Discard:
            def write(self, text: str) -> None:
                pass

        writer = Writer(Discard())
        writer.write("lost")
        with pytest.raises(TypeError):
            writer.getvalue()

    def test_sink_errors_propagate(self) -> None:
        writer = Writer(FailingSink())
        with pytest.raises(OSError, match="No space left"):
            writer.write("x")

    def test_is_a_text_sink(self) -> None:
        assert isinstance(Writer(), TextSink)
        assert isinstance(io.StringIO(), TextSink)


class TestIndentation:
    def test_indent_and_dedent(self) -> None:
        writer = Writer()
        writer.indent()
        writer.indent()
        assert writer.current_indentation == "        "
        writer.dedent()
        assert writer.current_indentation == "    "
        writer.dedent()
        assert writer.current_indentation == ""

    def test_custom_unit(self) -> None:
        writer = Writer(indentation="\t")
        writer.indent()
        assert writer.current_indentation == "\t"

    def test_dedent_without_indent(self) -> None:
        with pytest.raises(ValueError):
            Writer().dedent()

    def test_indented_context_restores_prefix(self) -> None:
        writer = Writer(indentation="  ")
        with writer.indented():
            assert writer.current_indentation == "  "
            with writer.indented():
                assert writer.current_indentation == "    "
        assert writer.current_indentation == ""

    def test_indented_context_restores_prefix_on_error(self) -> None:
        writer = Writer()
        with pytest.raises(RuntimeError):
            with writer.indented():
                raise RuntimeError("boom")
        assert writer.current_indentation == ""

    def test_prefix_is_multiple_of_unit(self) -> None:
        writer = Writer(indentation="abc")
        for _ in range(3):
            writer.indent()
        assert len(writer.current_indentation) % len(writer.indentation) == 0
        assert writer.current_indentation == "abcabcabc"
