"""Render type declarations as C declarator syntax.

C spells a type around the declared name: pointers go to the left of the
identifier and arrays to the right, with parentheses wherever a pointer has
to bind before a following array suffix. Given the declarator sequence
``[Pointer(is_const=True), Array(2), Array(3)]`` and the identifier ``test``
this module produces ``int (*const test)[2][3]``.

The left part is built by walking the declarators in reverse, the right part
by walking them forward. A ``(`` is opened on the left for every array whose
predecessor is a pointer and the matching ``)`` is closed on the right just
before that array's brackets.
"""

from __future__ import annotations

import io
import logging

from cwriter.ir import (
    Array,
    Declarator,
    Pointer,
    RawType,
    StructTag,
    Type,
    TypeDeclaration,
    TypeName,
    TypeSpecifier,
)
from cwriter.writer import TextSink

__all__ = [
    "declaration_to_c",
    "specifier_to_c",
    "type_to_c",
    "write_type",
    "write_type_declaration",
]

logger = logging.getLogger(__name__)


def specifier_to_c(specifier: TypeSpecifier) -> str:
    """Spell a type specifier (``int``, ``struct Foo``)."""
    if isinstance(specifier, TypeName):
        return specifier.name
    elif isinstance(specifier, StructTag):
        return f"struct {specifier.name}"
    else:
        raise TypeError(f"Unsupported type specifier: {specifier!r}")


def _follows_pointer(declarators: tuple[Declarator, ...], index: int) -> bool:
    return index > 0 and isinstance(declarators[index - 1], Pointer)


def _write_left(declarators: tuple[Declarator, ...], has_identifier: bool, stream: TextSink) -> None:
    for index in reversed(range(len(declarators))):
        declarator = declarators[index]
        if isinstance(declarator, Pointer):
            stream.write("*")
            if declarator.is_const:
                stream.write("const")
                # In an abstract declarator nothing may follow the last pointer.
                if has_identifier or any(isinstance(d, Pointer) for d in declarators[:index]):
                    stream.write(" ")
        elif isinstance(declarator, Array):
            if _follows_pointer(declarators, index):
                stream.write("(")
        else:
            raise TypeError(f"Unsupported declarator: {declarator!r}")


def _write_right(declarators: tuple[Declarator, ...], stream: TextSink) -> None:
    after_pointer = False
    for declarator in declarators:
        if isinstance(declarator, Array):
            if after_pointer:
                stream.write(")")
            stream.write("[")
            if declarator.size is not None:
                if declarator.size < 0:
                    logger.warning("Rendering array declarator with negative size %d", declarator.size)
                stream.write(str(declarator.size))
            stream.write("]")
        after_pointer = isinstance(declarator, Pointer)


def write_type_declaration(
    declaration: TypeDeclaration,
    identifier: str | None,
    stream: TextSink,
) -> None:
    """Write the C spelling of ``declaration`` bound to ``identifier``.

    Without an identifier the result is an abstract declarator (``int*``),
    usable in casts and typedef targets.

    :param declaration: The type to spell.
    :param identifier: Name being declared, or None.
    :param stream: Sink receiving the text; a :class:`~cwriter.writer.Writer`
        or any object with ``write(str)``.
    """
    for qualifier in declaration.qualifiers:
        stream.write(qualifier.keyword)
        stream.write(" ")
    stream.write(specifier_to_c(declaration.specifier))
    if identifier is not None:
        stream.write(" ")
    declarators = tuple(declaration.declarators)
    _write_left(declarators, identifier is not None, stream)
    if identifier is not None:
        stream.write(identifier)
    _write_right(declarators, stream)


def declaration_to_c(declaration: TypeDeclaration, identifier: str | None = None) -> str:
    """Return the C spelling of ``declaration`` bound to ``identifier``."""
    buffer = io.StringIO()
    write_type_declaration(declaration, identifier, buffer)
    return buffer.getvalue()


def write_type(t: Type, identifier: str | None, stream: TextSink) -> None:
    """Write a raw or structured type bound to ``identifier``."""
    if isinstance(t, RawType):
        stream.write(t.spelling)
        if identifier is not None:
            stream.write(f" {identifier}")
    elif isinstance(t, TypeDeclaration):
        write_type_declaration(t, identifier, stream)
    else:
        raise TypeError(f"Unsupported type: {t!r}")


def type_to_c(t: Type, identifier: str | None = None) -> str:
    """Return the C spelling of a raw or structured type."""
    buffer = io.StringIO()
    write_type(t, identifier, buffer)
    return buffer.getvalue()
