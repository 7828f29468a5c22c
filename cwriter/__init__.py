"""cwriter - build C declarations in memory and render them as source text."""

from cwriter.builder import Part, build, for_each, when
from cwriter.declarators import declaration_to_c, specifier_to_c, type_to_c, write_type, write_type_declaration
from cwriter.emitter import render, write_element, write_elements
from cwriter.ir import (
    NEWLINE,
    SEMICOLON,
    Array,
    Attribute,
    Body,
    Braced,
    Concat,
    Declarator,
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
    Pointer,
    Raw,
    RawType,
    Struct,
    StructTag,
    Type,
    TypeDeclaration,
    Typedef,
    TypeName,
    TypeQualifier,
    TypeSpecifier,
)
from cwriter.writer import DEFAULT_INDENTATION, TextSink, Writer

__all__ = [
    # Types
    "TypeName",
    "StructTag",
    "TypeSpecifier",
    "TypeQualifier",
    "Pointer",
    "Array",
    "Declarator",
    "TypeDeclaration",
    "RawType",
    "Type",
    # Elements
    "Element",
    "Body",
    "Indentation",
    "Raw",
    "NEWLINE",
    "SEMICOLON",
    "Include",
    "IncludeStyle",
    "LineComment",
    "Indented",
    "Braced",
    "Concat",
    "Parameter",
    "ParameterList",
    "Field",
    "Function",
    "Typedef",
    "Struct",
    "Attribute",
    "ImportAttribute",
    # Declarators
    "declaration_to_c",
    "specifier_to_c",
    "type_to_c",
    "write_type",
    "write_type_declaration",
    # Rendering
    "DEFAULT_INDENTATION",
    "TextSink",
    "Writer",
    "render",
    "write_element",
    "write_elements",
    # Builder
    "Part",
    "build",
    "for_each",
    "when",
]
