"""Render syntax elements into a :class:`~cwriter.writer.Writer`.

:func:`write_element` is the single dispatch point over the closed set of
element classes in :mod:`cwriter.ir`. Composite elements evaluate their body
at render time and recurse; types are spelled by
:mod:`cwriter.declarators`.

Example
-------
::

    from cwriter.emitter import render
    from cwriter.ir import Function, Include, IncludeStyle, RawType

    source = render([
        Include("stdio.h", IncludeStyle.ANGLE_BRACKETS),
        Function("main", RawType("int")),
    ])
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from cwriter.declarators import write_type
from cwriter.ir import (
    NEWLINE,
    SEMICOLON,
    Attribute,
    Braced,
    Concat,
    Element,
    Field,
    Function,
    ImportAttribute,
    Include,
    IncludeStyle,
    Indentation,
    Indented,
    LineComment,
    Parameter,
    ParameterList,
    Raw,
    Struct,
    Typedef,
)
from cwriter.writer import DEFAULT_INDENTATION, Writer

__all__ = [
    "render",
    "write_element",
    "write_elements",
]

logger = logging.getLogger(__name__)


def _write_include(include: Include, writer: Writer) -> None:
    writer.write("#include ")
    if include.style is IncludeStyle.QUOTES:
        writer.write(f'"{include.file}"')
    else:
        writer.write(f"<{include.file}>")
    write_element(NEWLINE, writer)


def _write_line_comment(comment: LineComment, writer: Writer) -> None:
    """Write one ``//`` line per line of text.

    Only LF or CRLF starts a new line, and a single trailing newline does
    not add an empty comment line. The enclosing block has
    already indented the first line; later lines carry the prefix themselves.
    """
    lines = comment.text.replace("\r\n", "\n").split("\n")
    if len(lines) > 1 and not lines[-1]:
        lines.pop()
    for index, line in enumerate(lines):
        if index > 0:
            writer.write(writer.current_indentation)
        writer.write(f"// {line}")
        write_element(NEWLINE, writer)


def _write_indented(children: list[Element], writer: Writer) -> None:
    with writer.indented():
        for child in children:
            # A nested block prefixes its own children.
            if not isinstance(child, Indented):
                writer.write(writer.current_indentation)
            write_element(child, writer)


def _write_braced(children: list[Element], writer: Writer) -> None:
    writer.write("{")
    if children:
        write_element(NEWLINE, writer)
        _write_indented(children, writer)
        writer.write(writer.current_indentation)
    writer.write("}")


def _write_parameter_list(parameters: list[Parameter], writer: Writer) -> None:
    writer.write("(")
    for index, parameter in enumerate(parameters):
        if index > 0:
            writer.write(", ")
        write_element(parameter, writer)
    writer.write(")")


def _write_function(function: Function, writer: Writer) -> None:
    write_type(function.return_type, function.name, writer)
    _write_parameter_list(function.parameters, writer)
    body = function.children()
    if body:
        writer.write(" ")
        _write_braced(body, writer)
    else:
        write_element(SEMICOLON, writer)
    write_element(NEWLINE, writer)


def _write_struct(struct: Struct, writer: Writer) -> None:
    writer.write(f"struct {struct.name} ")
    _write_braced(struct.children(), writer)
    write_element(SEMICOLON, writer)
    write_element(NEWLINE, writer)


def write_element(element: Element, writer: Writer) -> None:
    """Render a single element.

    :param element: Any element from :mod:`cwriter.ir`.
    :param writer: Destination writer; its indentation is unchanged afterwards.
    :raises TypeError: If ``element`` is not a known element.
    """
    if isinstance(element, Raw):
        writer.write(element.text)
    elif isinstance(element, Indentation):
        writer.write(writer.current_indentation)
    elif isinstance(element, Include):
        _write_include(element, writer)
    elif isinstance(element, LineComment):
        _write_line_comment(element, writer)
    elif isinstance(element, Indented):
        _write_indented(element.children(), writer)
    elif isinstance(element, Braced):
        _write_braced(element.children(), writer)
    elif isinstance(element, Concat):
        for child in element.children():
            write_element(child, writer)
    elif isinstance(element, Parameter):
        write_type(element.type, element.name, writer)
    elif isinstance(element, ParameterList):
        _write_parameter_list(element.parameters, writer)
    elif isinstance(element, Field):
        write_type(element.type, element.name, writer)
        write_element(SEMICOLON, writer)
        write_element(NEWLINE, writer)
    elif isinstance(element, Function):
        _write_function(element, writer)
    elif isinstance(element, Typedef):
        writer.write("typedef ")
        write_type(element.type, element.name, writer)
        write_element(SEMICOLON, writer)
        write_element(NEWLINE, writer)
    elif isinstance(element, Struct):
        _write_struct(element, writer)
    elif isinstance(element, Attribute):
        writer.write(f"__attribute__({element.contents})")
    elif isinstance(element, ImportAttribute):
        write_element(element.to_attribute(), writer)
    else:
        raise TypeError(f"Unsupported element: {element!r}")


def write_elements(elements: Iterable[Element], writer: Writer) -> None:
    """Render elements in order into ``writer``."""
    count = 0
    for element in elements:
        write_element(element, writer)
        count += 1
    logger.debug("Rendered %d top-level elements", count)


def render(elements: Element | Iterable[Element], indentation: str = DEFAULT_INDENTATION) -> str:
    """Render one element or a sequence of elements to a string.

    :param elements: A single element or an iterable of elements.
    :param indentation: Indentation unit for nested blocks.
    :returns: The rendered C text.
    """
    writer = Writer(indentation=indentation)
    if isinstance(elements, Iterable):
        write_elements(elements, writer)
    else:
        write_element(elements, writer)
    return writer.getvalue()
