"""Assemble element lists declaratively.

Generators describe a file as one expression with optional and repeated
parts. :func:`build` flattens nested lists and drops ``None``, :func:`when`
selects a branch and :func:`for_each` expands a loop. Nothing is rendered
while building.

Example
-------
::

    from cwriter.builder import build, for_each, when
    from cwriter.ir import Field, Include, IncludeStyle, RawType, Struct

    elements = build(
        Include("stdint.h", IncludeStyle.ANGLE_BRACKETS),
        when(with_header, Include("foo.h")),
        Struct("Foo", lambda: for_each(names, lambda n: Field(n, RawType("int32_t")))),
    )
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable
from typing import TypeVar, Union

from cwriter.ir import Element

__all__ = [
    "Part",
    "build",
    "for_each",
    "when",
]

T = TypeVar("T")

# An element, nothing, or any (nested) iterable of those.
Part = Union[Element, None, Iterable["Part"]]

_ELEMENT_TYPES: tuple[type, ...] = typing.get_args(Element)


def _flatten(part: Part, out: list[Element]) -> None:
    if part is None:
        return
    if isinstance(part, _ELEMENT_TYPES):
        out.append(part)  # type: ignore[arg-type]
    elif isinstance(part, (str, bytes)):
        raise TypeError(f"Expected an element, got {type(part).__name__}: {part!r}; wrap text in Raw")
    elif isinstance(part, Iterable):
        for item in part:
            _flatten(item, out)
    else:
        raise TypeError(f"Expected an element, got {type(part).__name__}: {part!r}")


def build(*parts: Part) -> list[Element]:
    """Flatten ``parts`` into one ordered list of elements.

    :param parts: Elements, ``None`` (skipped) or iterables of parts.
    :returns: The elements in order of appearance.
    :raises TypeError: If a part is neither an element, None nor iterable.
    """
    out: list[Element] = []
    for part in parts:
        _flatten(part, out)
    return out


def when(condition: object, *parts: Part, otherwise: Part = None) -> list[Element]:
    """Include ``parts`` if ``condition`` is true, else ``otherwise``.

    ::

        build(when(debug, Include("debug.h"), otherwise=Include("release.h")))
    """
    if condition:
        return build(*parts)
    return build(otherwise)


def for_each(items: Iterable[T], produce: Callable[[T], Part]) -> list[Element]:
    """Concatenate what ``produce`` returns for every item."""
    return build(*(produce(item) for item in items))
