"""A minimal, forgiving XML event scanner."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Union

MAX_ATTRIBUTES = 128

_SPACE = " \t\n\v\f\r"
_QUOTES = "\"'"


@dataclass(frozen=True)
class StartElement:
    """An opening tag with its attributes in document order."""

    name: str
    attributes: tuple[tuple[str, str], ...] = ()

    def attribute(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return the value of the first attribute called name."""
        for key, value in self.attributes:
            if key == name:
                return value
        return default


@dataclass(frozen=True)
class EndElement:
    """A closing tag, or the end of a self-closing tag."""

    name: str


@dataclass(frozen=True)
class Content:
    """Text between tags, with leading white space removed."""

    text: str


Event = Union[StartElement, EndElement, Content]


def _content_events(span: str) -> Iterator[Event]:
    text = span.lstrip(_SPACE)
    if text:
        yield Content(text)


def _element_events(body: str) -> Iterator[Event]:
    is_start = True
    is_end = False
    if body.startswith("/"):
        body = body[1:]
        is_start = False
        is_end = True

    # Comments, declarations and processing instructions are skipped.
    if not body or body[0] in "?!":
        return

    n = len(body)
    i = 0
    while i < n and body[i] not in _SPACE:
        i += 1
    name = body[:i]

    attributes: list[tuple[str, str]] = []
    while not is_end and i < n:
        while i < n and body[i] in _SPACE:
            i += 1
        if i == n:
            break
        if body[i] == "/":
            is_end = True
            break

        start = i
        while i < n and body[i] not in _SPACE and body[i] != "=":
            i += 1
        attr_name = body[start:i]

        while i < n and body[i] not in _QUOTES:
            i += 1
        if i == n:
            break
        quote = body[i]
        i += 1

        start = i
        while i < n and body[i] != quote:
            i += 1
        attr_value = body[start:i]
        if i < n:
            i += 1

        if len(attributes) < MAX_ATTRIBUTES:
            attributes.append((attr_name, attr_value))

    if is_start:
        yield StartElement(name, tuple(attributes))
    if is_end:
        yield EndElement(name)


def iter_xml(text: str) -> Iterator[Event]:
    """Scan text and yield start, end and content events in document order.

    Text after the last tag is not reported. At most MAX_ATTRIBUTES
    attributes are kept per element.
    """
    in_tag = False
    span_start = 0
    for pos, ch in enumerate(text):
        if ch == "<" and not in_tag:
            yield from _content_events(text[span_start:pos])
            span_start = pos + 1
            in_tag = True
        elif ch == ">" and in_tag:
            yield from _element_events(text[span_start:pos])
            span_start = pos + 1
            in_tag = False