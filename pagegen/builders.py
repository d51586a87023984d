"""Factory helpers for building pages without spelling out every node."""

from __future__ import annotations

from typing import Iterable, Sequence, Union

from .model import (
    Action,
    Alt,
    Attribute,
    AttributeTree,
    ClosedTag,
    Element,
    FormMethod,
    Generated,
    Generator,
    Href,
    InputKind,
    InputType,
    KeyUnencodedValue,
    KeyValue,
    Link,
    Meta,
    Method,
    Name,
    Page,
    Src,
    StyleRef,
    StyleRefTree,
    Tag,
    Text,
    Value,
    WithAttributes,
    WithClass,
)
from .small_tree import EMPTY, One, SmallTree, Three, Two, tree_of

ClassesArg = Union[StyleRefTree, Iterable[Union[str, StyleRef]]]
AttributesArg = Union[AttributeTree, Iterable[Attribute]]


def _as_classes(classes: ClassesArg) -> StyleRefTree:
    if isinstance(classes, SmallTree):
        return classes
    return tree_of(style_ref(c) if isinstance(c, str) else c for c in classes)


def _as_attributes(attributes: AttributesArg | None) -> AttributeTree:
    if attributes is None:
        return EMPTY
    if isinstance(attributes, SmallTree):
        return attributes
    return tree_of(attributes)


def style_ref(name: str) -> StyleRef:
    return StyleRef(name)


def attribute(key: str, value: str) -> KeyValue:
    return KeyValue(key, value)


def unencoded_attribute(key: str, value: str) -> KeyUnencodedValue:
    return KeyUnencodedValue(key, value)


def tag(name: str, attributes: AttributesArg | None, elements: Sequence[Element]) -> Tag:
    return Tag(name, _as_attributes(attributes), tuple(elements))


def closed_tag(name: str, attributes: AttributesArg | None = None) -> ClosedTag:
    return ClosedTag(name, _as_attributes(attributes))


def text(txt: str) -> Text:
    return Text(txt)


def image(src: str, alt: str) -> ClosedTag:
    return ClosedTag("img", Two(Src(src), Alt(alt)))


def header1(elements: Sequence[Element]) -> Tag:
    return tag("h1", EMPTY, elements)


def header2(elements: Sequence[Element]) -> Tag:
    return tag("h2", EMPTY, elements)


def header3(elements: Sequence[Element]) -> Tag:
    return tag("h3", EMPTY, elements)


line_break = ClosedTag("br", EMPTY)


def form(action: str, method: FormMethod, elements: Sequence[Element]) -> Tag:
    return tag("form", Two(Action(action), Method(method)), elements)


def field_set(elements: Sequence[Element]) -> Tag:
    return tag("fieldset", EMPTY, elements)


def input_field(kind: InputKind, name: str, value: str) -> ClosedTag:
    return ClosedTag("input", Three(InputType(kind), Name(name), Value(value)))


def text_field(name: str, value: str) -> ClosedTag:
    return input_field(InputKind.TEXT, name, value)


def radio_field(name: str, value: str) -> ClosedTag:
    return input_field(InputKind.RADIO, name, value)


def submit_field(name: str, value: str) -> ClosedTag:
    return input_field(InputKind.SUBMIT, name, value)


def text_header1(txt: str) -> Tag:
    return header1([Text(txt)])


def text_header2(txt: str) -> Tag:
    return header2([Text(txt)])


def text_header3(txt: str) -> Tag:
    return header3([Text(txt)])


def paragraph(elements: Sequence[Element]) -> Tag:
    return tag("p", EMPTY, elements)


def anchor(href: str, elements: Sequence[Element]) -> Tag:
    return tag("a", One(Href(href)), elements)


def text_link(href: str, description: str) -> Tag:
    return anchor(href, [Text(description)])


def image_link(href: str, src: str, alt: str) -> Tag:
    return anchor(href, [image(src, alt)])


def generated(generator: Generator) -> Generated:
    return Generated(generator)


def with_class(classes: ClassesArg, elements: Sequence[Element]) -> WithClass:
    return WithClass(_as_classes(classes), tuple(elements))


def with_class_(classes: ClassesArg, element: Element) -> WithClass:
    return with_class(classes, [element])


def with_attributes(attributes: AttributesArg, elements: Sequence[Element]) -> WithAttributes:
    return WithAttributes(_as_attributes(attributes), tuple(elements))


def with_attributes_(attributes: AttributesArg, element: Element) -> WithAttributes:
    return with_attributes(attributes, [element])


def link(rel: str, href: str) -> Link:
    return Link(rel, href)


def stylesheet(href: str) -> Link:
    return Link("stylesheet", href)


def meta(name: str, content: str) -> Meta:
    return Meta(name, content)


def viewport(content: str) -> Meta:
    return Meta("viewport", content)


def page(
    title: str,
    links: Iterable[Link] = (),
    metas: Iterable[Meta] = (),
    body: Iterable[Element] = (),
) -> Page:
    return Page(title=title, links=tuple(links), metas=tuple(metas), body=tuple(body))


__all__ = [
    "anchor",
    "attribute",
    "closed_tag",
    "field_set",
    "form",
    "generated",
    "header1",
    "header2",
    "header3",
    "image",
    "image_link",
    "input_field",
    "line_break",
    "link",
    "meta",
    "page",
    "paragraph",
    "radio_field",
    "stylesheet",
    "style_ref",
    "submit_field",
    "tag",
    "text",
    "text_field",
    "text_header1",
    "text_header2",
    "text_header3",
    "text_link",
    "unencoded_attribute",
    "viewport",
    "with_attributes",
    "with_attributes_",
    "with_class",
    "with_class_",
]
