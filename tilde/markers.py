"""Marker detection for application-relative URLs.

A value is application-relative when, after leading HTML attribute
whitespace is removed, it starts with exactly ``~/``. ``~ /``, ``~\\``
and a bare ``~`` are ordinary text.
"""

from __future__ import annotations

from typing import NamedTuple

# HTML attribute whitespace: tab, line feed, form feed, carriage return, space
ATTRIBUTE_WHITESPACE = "\t\n\x0c\r "

MARKER = "~/"


class MarkerSpan(NamedTuple):
    """Offsets of a marker candidate within a raw value.

    Attributes:
        start: Index of the ``~``.
        end: Index just past the last non-whitespace character.
    """

    start: int
    end: int


def trim_attribute_whitespace(value: str) -> str:
    """Strip HTML attribute whitespace from both ends of a value."""
    return value.strip(ATTRIBUTE_WHITESPACE)


def is_eligible_marker(candidate: str) -> bool:
    """Check whether a candidate begins with the ``~/`` marker.

    Args:
        candidate: Raw candidate text, possibly with leading whitespace.

    Returns:
        True if the candidate starts with ``~/`` after leading whitespace.

    Examples:
        >>> is_eligible_marker("  ~/home/index.html")
        True

        >>> is_eligible_marker("~ /home/index.html")
        False
    """
    return candidate.lstrip(ATTRIBUTE_WHITESPACE).startswith(MARKER)


def locate_marker(value: str) -> MarkerSpan | None:
    """Find where the marker candidate of a value begins and ends.

    Only the very start of the value is considered; a ``~/`` later in the
    value is never a marker.

    Args:
        value: Raw attribute value.

    Returns:
        The span of the trimmed candidate, or None if there is no marker.
    """
    if not is_eligible_marker(value):
        return None
    start = len(value) - len(value.lstrip(ATTRIBUTE_WHITESPACE))
    end = len(value.rstrip(ATTRIBUTE_WHITESPACE))
    return MarkerSpan(start, end)
