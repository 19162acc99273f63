"""Minimal element and attribute model.

Key classes:
- AttributeValueStyle: How an attribute value is quoted when rendered.
- ElementAttribute: A single name/value pair with its value style.
- AttributeList: Ordered attributes with case-insensitive lookup.
- Element: A tag name plus its attributes.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any


class AttributeValueStyle(Enum):
    """Quoting style for a rendered attribute value."""

    DOUBLE_QUOTES = "double"
    SINGLE_QUOTES = "single"
    NO_QUOTES = "none"
    MINIMIZED = "minimized"


@dataclass(frozen=True)
class ElementAttribute:
    """A single element attribute.

    Attributes:
        name: Attribute name as written (case preserved).
        value: Raw value: a string, pre-encoded content, or anything else.
        value_style: Quoting style used when rendering.
    """

    name: str
    value: Any = None
    value_style: AttributeValueStyle = AttributeValueStyle.DOUBLE_QUOTES

    def with_value(self, value: Any) -> ElementAttribute:
        """Return a copy with a new value and the same name and style."""
        return replace(self, value=value)


class AttributeList:
    """Ordered list of attributes with case-insensitive name lookup.

    Duplicate names are allowed, as in parsed markup.
    """

    def __init__(
        self, attributes: Iterable[ElementAttribute | tuple[str, Any]] = ()
    ):
        self._items: list[ElementAttribute] = []
        for attribute in attributes:
            if isinstance(attribute, ElementAttribute):
                self._items.append(attribute)
            else:
                self.add(*attribute)

    def add(
        self,
        name: str,
        value: Any = None,
        value_style: AttributeValueStyle = AttributeValueStyle.DOUBLE_QUOTES,
    ) -> ElementAttribute:
        """Append an attribute and return it."""
        attribute = ElementAttribute(name, value, value_style)
        self._items.append(attribute)
        return attribute

    def get(self, name: str) -> ElementAttribute | None:
        """Return the first attribute with the given name, ignoring case."""
        for attribute in self._items:
            if attribute.name.lower() == name.lower():
                return attribute
        return None

    def indexes_of(self, name: str) -> list[int]:
        """Return the positions of all attributes with the given name, ignoring case."""
        return [
            index
            for index, attribute in enumerate(self._items)
            if attribute.name.lower() == name.lower()
        ]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def __getitem__(self, index: int) -> ElementAttribute:
        return self._items[index]

    def __setitem__(self, index: int, attribute: ElementAttribute) -> None:
        self._items[index] = attribute

    def __iter__(self) -> Iterator[ElementAttribute]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"AttributeList({self._items!r})"


@dataclass
class Element:
    """An element being rendered.

    Attributes:
        tag_name: Element name, or None when the element is suppressed.
        attributes: The element's attributes in source order.
    """

    tag_name: str | None
    attributes: AttributeList = field(default_factory=AttributeList)
