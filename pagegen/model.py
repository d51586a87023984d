"""Typed HTML document model."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, ClassVar, Tuple, Union

from .small_tree import EMPTY, SmallTree


class InputKind(str, Enum):
    TEXT = "text"
    RADIO = "radio"
    SUBMIT = "submit"


class FormMethod(str, Enum):
    GET = "GET"
    POST = "POST"


@dataclass(frozen=True)
class StyleRef:
    """A single CSS class name."""

    name: str


StyleRefTree = SmallTree[StyleRef]


@dataclass(frozen=True)
class Alt:
    value: str


@dataclass(frozen=True)
class Action:
    value: str


@dataclass(frozen=True)
class Href:
    value: str


@dataclass(frozen=True)
class Id:
    value: str


@dataclass(frozen=True)
class InputType:
    kind: InputKind


@dataclass(frozen=True)
class Class:
    """Classes set on the tag itself; merged in front of the ambient classes."""

    classes: StyleRefTree


@dataclass(frozen=True)
class Method:
    method: FormMethod


@dataclass(frozen=True)
class Name:
    value: str


@dataclass(frozen=True)
class Src:
    value: str


@dataclass(frozen=True)
class Value:
    value: str


@dataclass(frozen=True)
class KeyValue:
    """Free-form attribute; the value is HTML-escaped on output."""

    key: str
    value: str


@dataclass(frozen=True)
class KeyUnencodedValue:
    """Free-form attribute; the value is trusted and written as is."""

    key: str
    value: str


Attribute = Union[
    Alt,
    Action,
    Href,
    Id,
    InputType,
    Class,
    Method,
    Name,
    Src,
    Value,
    KeyValue,
    KeyUnencodedValue,
]

AttributeTree = SmallTree[Attribute]


@dataclass(frozen=True)
class GeneratorContext:
    """Context handed to generated nodes."""

    name: str = ""

    EMPTY: ClassVar["GeneratorContext"]


GeneratorContext.EMPTY = GeneratorContext()

AppendLine = Callable[[int, str], None]
Generator = Callable[
    [GeneratorContext, int, StyleRefTree, AttributeTree, AppendLine], None
]


@dataclass(frozen=True)
class Text:
    text: str


@dataclass(frozen=True)
class Tag:
    """Paired tag; rendered self-closing when it has no children."""

    name: str
    attributes: AttributeTree = EMPTY
    children: Tuple["Element", ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))


@dataclass(frozen=True)
class ClosedTag:
    name: str
    attributes: AttributeTree = EMPTY


@dataclass(frozen=True)
class WithClass:
    """Sets the ambient classes for every tag below it."""

    classes: StyleRefTree
    children: Tuple["Element", ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))


@dataclass(frozen=True)
class WithAttributes:
    """Sets the ambient attributes for every tag below it."""

    attributes: AttributeTree
    children: Tuple["Element", ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))


@dataclass(frozen=True, eq=False)
class Generated:
    """Escape hatch for output produced by code at render time.

    The generator is called as ``generator(context, indent, classes,
    attributes, append)`` and writes its lines through ``append(indent,
    line)``. Whatever it raises reaches the caller of ``render``.
    """

    generator: Generator


Element = Union[Text, Tag, ClosedTag, WithClass, WithAttributes, Generated]


@dataclass(frozen=True)
class Link:
    rel: str
    href: str


@dataclass(frozen=True)
class Meta:
    name: str
    content: str


@dataclass(frozen=True, eq=False)
class Page:
    title: str
    links: Tuple[Link, ...] = ()
    metas: Tuple[Meta, ...] = ()
    body: Tuple[Element, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "links", tuple(self.links))
        object.__setattr__(self, "metas", tuple(self.metas))
        object.__setattr__(self, "body", tuple(self.body))


__all__ = [
    "Action",
    "Alt",
    "AppendLine",
    "Attribute",
    "AttributeTree",
    "Class",
    "ClosedTag",
    "Element",
    "FormMethod",
    "Generated",
    "Generator",
    "GeneratorContext",
    "Href",
    "Id",
    "InputKind",
    "InputType",
    "KeyUnencodedValue",
    "KeyValue",
    "Link",
    "Meta",
    "Method",
    "Name",
    "Page",
    "Src",
    "StyleRef",
    "StyleRefTree",
    "Tag",
    "Text",
    "Value",
    "WithClass",
    "WithAttributes",
]
