"""In-memory representation of C declarations.

This module defines everything a code generator assembles before rendering:
the type model consumed by the declarator renderer and the closed set of
syntax elements that :func:`cwriter.emitter.write_element` knows how to emit.

Type Model
----------
* :class:`TypeName` / :class:`StructTag` - type specifiers (``int``,
  ``struct Foo``)
* :class:`TypeQualifier` - qualifiers applied to the specifier (``const``)
* :class:`Pointer` / :class:`Array` - declarators, applied in order
* :class:`TypeDeclaration` - qualifiers + specifier + declarators
* :class:`RawType` - an opaque type spelling emitted verbatim

Elements
--------
* :class:`Raw`, :class:`Indentation`, :data:`NEWLINE`, :data:`SEMICOLON`
* :class:`Include`, :class:`LineComment`
* :class:`Indented`, :class:`Braced`, :class:`Concat`
* :class:`Parameter`, :class:`ParameterList`, :class:`Field`
* :class:`Function`, :class:`Typedef`, :class:`Struct`
* :class:`Attribute`, :class:`ImportAttribute`

Example
-------
::

    from cwriter.ir import Array, Field, Pointer, Struct, TypeDeclaration, TypeName

    matrix = TypeDeclaration(TypeName("int"), [Pointer(is_const=True), Array(2), Array(3)])
    point = Struct("Point", [Field("x", TypeDeclaration(TypeName("int"))), Field("m", matrix)])
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Union

# =============================================================================
# Type Specifiers and Qualifiers
# =============================================================================


@dataclass(frozen=True)
class TypeName:
    """A bare type name such as ``int``, ``size_t`` or ``unsigned long``."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class StructTag:
    """A tagged struct reference, spelled ``struct <name>``."""

    name: str

    def __str__(self) -> str:
        return f"struct {self.name}"


class TypeQualifier(enum.Enum):
    """Qualifiers that prefix a type specifier."""

    CONST = "const"

    @property
    def keyword(self) -> str:
        return self.value


# =============================================================================
# Declarators
# =============================================================================


@dataclass(frozen=True)
class Pointer:
    """Pointer declarator.

    :param is_const: Whether the pointer itself is const (``*const``), as
        opposed to the pointee.
    """

    is_const: bool = False


@dataclass(frozen=True)
class Array:
    """Array declarator.

    :param size: Number of elements, or None for an incomplete array (``[]``).
        Sizes are expected to be non-negative.
    """

    size: int | None = None


# =============================================================================
# Types
# =============================================================================


@dataclass(frozen=True)
class TypeDeclaration:
    """A structured C type: qualifiers, a specifier and ordered declarators.

    Declarators are listed in the order C nests them around the identifier,
    innermost first. ``[Pointer(), Array(3)]`` is a pointer to an array of
    three elements, ``[Array(3), Pointer()]`` an array of three pointers.

    Sequences are stored as tuples, so a declaration is an immutable value.

    :param specifier: The base type.
    :param declarators: Pointer and array declarators, innermost first.
    :param qualifiers: Qualifiers emitted before the specifier.

    Examples
    --------
    ::

        # char *
        TypeDeclaration(TypeName("char"), [Pointer()])

        # const struct Foo
        TypeDeclaration(StructTag("Foo"), qualifiers=[TypeQualifier.CONST])
    """

    specifier: TypeSpecifier
    declarators: Sequence[Declarator] = ()
    qualifiers: Sequence[TypeQualifier] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "declarators", tuple(self.declarators))
        object.__setattr__(self, "qualifiers", tuple(self.qualifiers))

    def __str__(self) -> str:
        # Local import: the renderer module imports this one.
        from cwriter.declarators import declaration_to_c

        return declaration_to_c(self)


@dataclass(frozen=True)
class RawType:
    """An unparsed type spelling, emitted exactly as given.

    When bound to an identifier the identifier follows after one space, so
    ``RawType("int")`` with ``"x"`` renders ``int x``.
    """

    spelling: str

    def __str__(self) -> str:
        return self.spelling


# =============================================================================
# Elements
# =============================================================================


class IncludeStyle(enum.Enum):
    """Delimiters of an ``#include`` directive."""

    QUOTES = "quotes"
    ANGLE_BRACKETS = "angle_brackets"


# Children of a composite element: a sequence, or a callable producing one
# each time the element is rendered.
Body = Union[Sequence["Element"], Callable[[], Iterable["Element"]]]


def produce(body: Body) -> list[Element]:
    """Evaluate a body into a list of elements.

    Callables are invoked on every call; results are never cached.
    """
    if callable(body):
        return list(body())
    return list(body)


@dataclass
class Indentation:
    """Writes the writer's current indentation prefix."""


@dataclass
class Raw:
    """Literal text, written verbatim without indentation."""

    text: str


NEWLINE = Raw("\n")
SEMICOLON = Raw(";")


@dataclass
class Include:
    """An ``#include`` directive followed by a newline."""

    file: str
    style: IncludeStyle = IncludeStyle.QUOTES


@dataclass
class LineComment:
    """A ``//`` comment; multi-line text becomes one comment line per line."""

    text: str


@dataclass
class Indented:
    """Renders each child one indentation level deeper, prefixed by the indentation."""

    body: Body = ()

    def children(self) -> list[Element]:
        return produce(self.body)


@dataclass
class Braced:
    """A ``{ ... }`` block whose children are indented.

    An empty body renders as ``{}``. No newline follows the closing brace.
    """

    body: Body = ()

    def children(self) -> list[Element]:
        return produce(self.body)


@dataclass
class Concat:
    """Renders children back to back, without separators or indentation.

    Groups fragments that must share a single line inside an
    :class:`Indented` block.
    """

    body: Body = ()

    def children(self) -> list[Element]:
        return produce(self.body)


@dataclass
class Parameter:
    """A function parameter.

    :param name: Parameter name, or None for an unnamed parameter (``void``).
    :param type: Parameter type.
    """

    name: str | None
    type: Type


@dataclass
class ParameterList:
    """A parenthesized, comma-separated parameter list."""

    parameters: list[Parameter] = field(default_factory=list)


@dataclass
class Field:
    """A struct field, terminated by ``;`` and a newline."""

    name: str
    type: Type


@dataclass
class Function:
    """A function declaration, or a definition when the body is non-empty.

    A prototype taking no arguments is spelled ``(void)`` only when given an
    explicit unnamed ``void`` parameter; no parameters renders ``()``.

    :param name: Function name.
    :param return_type: Return type; the name is bound as its identifier.
    :param parameters: Parameters in order.
    :param body: Statements of the definition. Empty means declaration only.
    """

    name: str
    return_type: Type
    parameters: list[Parameter] = field(default_factory=list)
    body: Body = ()

    def children(self) -> list[Element]:
        return produce(self.body)


@dataclass
class Typedef:
    """``typedef <type> <name>;``"""

    name: str
    type: Type


@dataclass
class Struct:
    """A struct definition; ``body`` usually holds :class:`Field` elements."""

    name: str
    body: Body = ()

    def children(self) -> list[Element]:
        return produce(self.body)


@dataclass
class Attribute:
    """``__attribute__(<contents>)`` without a trailing newline."""

    contents: str


@dataclass
class ImportAttribute:
    """An import attribute naming an imported symbol and optionally its module.

    Renders ``__attribute__(__import_name__("foo"), __module_name__("bar"))``.
    """

    import_name: str
    module_name: str | None = None

    def to_attribute(self) -> Attribute:
        contents = f'__import_name__("{self.import_name}")'
        if self.module_name is not None:
            contents += f', __module_name__("{self.module_name}")'
        return Attribute(contents)


# =============================================================================
# Type Aliases
# =============================================================================

TypeSpecifier = Union[TypeName, StructTag]
Declarator = Union[Pointer, Array]
Type = Union[RawType, TypeDeclaration]

Element = Union[
    Indentation,
    Raw,
    Include,
    LineComment,
    Indented,
    Braced,
    Concat,
    Parameter,
    ParameterList,
    Field,
    Function,
    Typedef,
    Struct,
    Attribute,
    ImportAttribute,
]
