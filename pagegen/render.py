"""Serialize a Page into indented, escaped HTML text."""

from __future__ import annotations

import html
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .model import (
    Action,
    Alt,
    Attribute,
    AttributeTree,
    Class,
    ClosedTag,
    Element,
    Generated,
    GeneratorContext,
    Href,
    Id,
    InputType,
    KeyUnencodedValue,
    KeyValue,
    Method,
    Name,
    Page,
    Src,
    StyleRefTree,
    Tag,
    Text,
    Value,
    WithAttributes,
    WithClass,
)
from .small_tree import EMPTY, is_empty, join

INDENT_STEP = 2


@dataclass(frozen=True)
class RenderWarning:
    """An attribute the renderer dropped instead of writing."""

    tag: str
    attribute: str
    reason: str

    def __str__(self) -> str:
        key = self.attribute or "<no key>"
        return f"<{self.tag}>: dropped attribute {key!r} ({self.reason})"


@dataclass(frozen=True)
class RenderResult:
    html: str
    warnings: Tuple[RenderWarning, ...]


def html_encode(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return html.escape(value, quote=True)


def url_encode(value: Optional[str]) -> Optional[str]:
    # Hrefs are written as given; callers pass already encoded URLs.
    return value


def render_style_refs(classes: StyleRefTree) -> str:
    """Join the non-empty class names in tree order with single spaces."""
    return " ".join(ref.name for ref in classes if ref.name)


class _HtmlWriter:
    """Output buffer for one render call."""

    def __init__(self) -> None:
        self._parts: List[str] = []
        self.warnings: List[RenderWarning] = []

    def text(self) -> str:
        return "".join(self._parts)

    def append(self, indent: int, line: str) -> None:
        self._parts.append(" " * indent)
        self._parts.append(line)
        self._parts.append("\n")

    def _kv(self, tag: str, key: str, value: Optional[str]) -> None:
        if not value:
            self.warnings.append(RenderWarning(tag, key, "empty value"))
            return
        self._parts.append(f' {key}="{value}"')

    def _class_kv(self, tag: str, classes: StyleRefTree) -> None:
        self._kv(tag, "class", render_style_refs(classes))

    def _render_attribute(self, tag: str, attr: Attribute, classes: StyleRefTree) -> bool:
        if isinstance(attr, InputType):
            self._kv(tag, "type", attr.kind.value)
        elif isinstance(attr, Method):
            self._kv(tag, "method", attr.method.value)
        elif isinstance(attr, Action):
            self._kv(tag, "action", url_encode(attr.value))
        elif isinstance(attr, Href):
            self._kv(tag, "href", url_encode(attr.value))
        elif isinstance(attr, Src):
            self._kv(tag, "src", url_encode(attr.value))
        elif isinstance(attr, Value):
            self._kv(tag, "value", html_encode(attr.value))
        elif isinstance(attr, Alt):
            self._kv(tag, "alt", html_encode(attr.value))
        elif isinstance(attr, Name):
            self._kv(tag, "name", attr.value)
        elif isinstance(attr, Id):
            self._kv(tag, "id", attr.value)
        elif isinstance(attr, Class):
            self._class_kv(tag, join(attr.classes, classes))
            return True
        elif isinstance(attr, (KeyValue, KeyUnencodedValue)):
            if not attr.key:
                self.warnings.append(RenderWarning(tag, "", "empty key"))
            elif isinstance(attr, KeyValue):
                self._kv(tag, attr.key, html_encode(attr.value))
            else:
                self._kv(tag, attr.key, attr.value)
        else:
            raise TypeError(f"Unsupported attribute: {attr!r}")
        return False

    def render_attributes(self, tag: str, attributes: AttributeTree, classes: StyleRefTree) -> bool:
        """Write every attribute; return True if a class clause was handled."""
        has_class = False
        for attr in attributes:
            has_class = self._render_attribute(tag, attr, classes) or has_class
        return has_class

    def render_tag(
        self,
        closed: bool,
        indent: int,
        tag: str,
        attributes: AttributeTree,
        classes: StyleRefTree,
    ) -> None:
        self._parts.append(" " * indent)
        self._parts.append(f"<{tag}")
        has_class = self.render_attributes(tag, attributes, classes)
        if not has_class and not is_empty(classes):
            self._class_kv(tag, classes)
        self._parts.append("/>\n" if closed else ">\n")

    def render_end_tag(self, indent: int, tag: str) -> None:
        self.append(indent, f"</{tag}>")

    def render_elements(
        self,
        indent: int,
        classes: StyleRefTree,
        attributes: AttributeTree,
        elements: Sequence[Element],
    ) -> None:
        for element in elements:
            if isinstance(element, Text):
                self.append(indent, html_encode(element.text) or "")
            elif isinstance(element, Tag):
                merged = join(element.attributes, attributes)
                if element.children:
                    self.render_tag(False, indent, element.name, merged, classes)
                    self.render_elements(indent + INDENT_STEP, classes, attributes, element.children)
                    self.render_end_tag(indent, element.name)
                else:
                    self.render_tag(True, indent, element.name, merged, classes)
            elif isinstance(element, ClosedTag):
                merged = join(element.attributes, attributes)
                self.render_tag(True, indent, element.name, merged, classes)
            elif isinstance(element, WithClass):
                self.render_elements(indent, element.classes, attributes, element.children)
            elif isinstance(element, WithAttributes):
                self.render_elements(indent, classes, element.attributes, element.children)
            elif isinstance(element, Generated):
                element.generator(GeneratorContext.EMPTY, indent, classes, attributes, self.append)
            else:
                raise TypeError(f"Unsupported element: {element!r}")

    def render_page(self, page: Page) -> None:
        head = INDENT_STEP
        head_children = 2 * INDENT_STEP
        self.append(0, "<html>")
        self.append(head, "<head>")
        for link in page.links:
            self.append(head_children, f'<link rel="{link.rel}" href="{url_encode(link.href)}"/>')
        for meta in page.metas:
            self.append(head_children, f'<meta name="{meta.name}" content="{meta.content}"/>')
        self.append(head_children, f"<title>{html_encode(page.title) or ''}</title>")
        self.append(head, "</head>")
        self.append(head, "<body>")
        self.render_elements(head_children, EMPTY, EMPTY, page.body)
        self.append(head, "</body>")
        self.append(0, "</html>")


def render_with_warnings(page: Page) -> RenderResult:
    """Render ``page`` and report every attribute that was dropped."""
    writer = _HtmlWriter()
    writer.render_page(page)
    return RenderResult(html=writer.text(), warnings=tuple(writer.warnings))


def render(page: Page) -> str:
    """Render ``page`` into a complete HTML document."""
    writer = _HtmlWriter()
    writer.render_page(page)
    return writer.text()


__all__ = [
    "INDENT_STEP",
    "RenderResult",
    "RenderWarning",
    "html_encode",
    "render",
    "render_style_refs",
    "render_with_warnings",
    "url_encode",
]
