"""Attribute value shapes and deferred-encoding markup.

Attribute values come in three shapes:
- PlainText: an ordinary string, escaped as a whole when rendered.
- PreEncodedContent: anything implementing the markupsafe ``__html__``
  protocol, emitted verbatim when rendered.
- OtherValue: everything else (booleans, numbers, None), never rewritten.

DeferredMarkup is the result of resolving a marker inside pre-encoded
content: the resolver's output is escaped at render time while the rest of
the original content is emitted as-is.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Union, assert_never

from markupsafe import escape

HtmlEncoder = Callable[[str], str]


def encode_html(text: str) -> str:
    """Escape text for HTML output using markupsafe."""
    return str(escape(text))


@dataclass(frozen=True)
class PlainText:
    text: str


@dataclass(frozen=True)
class PreEncodedContent:
    content: Any

    @property
    def html(self) -> str:
        """Return the already-encoded HTML of the content."""
        return str(self.content.__html__())


@dataclass(frozen=True)
class OtherValue:
    value: Any


AttributeValue = Union[PlainText, PreEncodedContent, OtherValue]


def classify(value: Any) -> AttributeValue:
    """Tag a raw attribute value with its shape.

    ``markupsafe.Markup`` subclasses ``str``, so the ``__html__`` check must
    come first.

    Args:
        value: Raw attribute value.

    Returns:
        The tagged value.
    """
    if hasattr(value, "__html__"):
        return PreEncodedContent(value)
    if isinstance(value, str):
        return PlainText(value)
    return OtherValue(value)


@dataclass(frozen=True)
class EscapedSegment:
    """Text that is escaped when the markup is rendered."""

    text: str


@dataclass(frozen=True)
class LiteralSegment:
    """Text that is already safe and is emitted verbatim."""

    text: str


Segment = Union[EscapedSegment, LiteralSegment]


@dataclass(frozen=True)
class DeferredMarkup:
    """Immutable sequence of escaped and literal segments.

    Escaping happens only in ``to_html``, with the encoder supplied at that
    point. The object implements ``__html__`` so Jinja2 and markupsafe treat
    it as safe content.

    Attributes:
        segments: Ordered segments making up the value.
    """

    segments: tuple[Segment, ...]

    def to_html(self, encoder: HtmlEncoder = encode_html) -> str:
        """Serialize the markup, escaping only the escaped segments.

        Args:
            encoder: Function used to escape EscapedSegment text.

        Returns:
            The serialized HTML string.
        """
        parts = []
        for segment in self.segments:
            if isinstance(segment, EscapedSegment):
                parts.append(str(encoder(segment.text)))
            elif isinstance(segment, LiteralSegment):
                parts.append(segment.text)
            else:
                assert_never(segment)
        return "".join(parts)

    def __html__(self) -> str:
        return self.to_html()

    def __str__(self) -> str:
        return self.to_html()


def render_value(value: Any, encoder: HtmlEncoder = encode_html) -> str:
    """Serialize an attribute value for output.

    Plain text is escaped as a whole, pre-encoded content is emitted as-is
    (deferred markup escapes its own segments with ``encoder``), and other
    values are converted to text and escaped.

    Args:
        value: Raw attribute value.
        encoder: Function used to escape text.

    Returns:
        The serialized value.
    """
    if isinstance(value, DeferredMarkup):
        return value.to_html(encoder)
    shape = classify(value)
    if isinstance(shape, PlainText):
        return str(encoder(shape.text))
    elif isinstance(shape, PreEncodedContent):
        return shape.html
    elif isinstance(shape, OtherValue):
        return str(encoder(str(shape.value)))
    else:
        assert_never(shape)
