"""HTML utility functions for Tilde.

This module is the final-render point for elements and attributes: it is
where plain values are escaped and deferred markup applies its escaping.

Following the Single Responsibility Principle, this module focuses
exclusively on HTML string output.

Functions:
    join_root_url: Join a base URL with a path.
    render_attribute: Serialize one attribute honoring its value style.
    render_start_tag: Serialize an element's start tag.
"""

from __future__ import annotations

from .attributes import AttributeValueStyle, Element, ElementAttribute
from .values import HtmlEncoder, encode_html, render_value


def join_root_url(root_url: str, path: str) -> str:
    """Safely join a root URL and a path, avoiding double slashes.

    Args:
        root_url: Base URL (e.g., https://example.com/blog or /approot).
        path: Path beginning with or without a leading slash.

    Returns:
        Combined URL with proper slash handling.

    Examples:
        >>> join_root_url('/approot', '/home/index.html')
        '/approot/home/index.html'

        >>> join_root_url('https://example.com/', 'about')
        'https://example.com/about'
    """
    if not root_url:
        return path
    base = root_url.rstrip("/")
    suffix = path if path.startswith("/") else f"/{path}"
    return f"{base}{suffix}"


def render_attribute(
    attribute: ElementAttribute, encoder: HtmlEncoder = encode_html
) -> str:
    """Serialize an attribute as ``name="value"`` according to its value style.

    Args:
        attribute: The attribute to render.
        encoder: Function used to escape plain text and deferred segments.

    Returns:
        The rendered attribute.

    Examples:
        >>> from tilde.attributes import ElementAttribute
        >>> render_attribute(ElementAttribute("href", "/a?b=1&c=2"))
        'href="/a?b=1&amp;c=2"'
    """
    style = attribute.value_style
    if style is AttributeValueStyle.MINIMIZED:
        return attribute.name
    value = render_value(attribute.value, encoder)
    if style is AttributeValueStyle.SINGLE_QUOTES:
        return f"{attribute.name}='{value}'"
    if style is AttributeValueStyle.NO_QUOTES:
        return f"{attribute.name}={value}"
    return f'{attribute.name}="{value}"'


def render_start_tag(element: Element, encoder: HtmlEncoder = encode_html) -> str:
    """Serialize an element's start tag with all of its attributes.

    Elements without a tag name render as an empty string.
    """
    if element.tag_name is None:
        return ""
    parts = [element.tag_name]
    parts.extend(render_attribute(attr, encoder) for attr in element.attributes)
    return f"<{' '.join(parts)}>"
