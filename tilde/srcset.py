"""Multi-candidate (srcset-like) attribute handling.

A srcset value holds comma-separated entries, each with a URL and an
optional width (e.g. "480w") or pixel density (e.g. "2x") descriptor.
Only the URL of each entry is checked for the ``~/`` marker; descriptors
are kept as written.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .markers import is_eligible_marker, trim_attribute_whitespace
from .resolver import ResolverAdapter
from .values import DeferredMarkup, LiteralSegment, Segment

CANDIDATE_SEPARATOR = ", "

# Leading URL token, then the descriptor with its separating whitespace
_CANDIDATE_RE = re.compile(r"(?P<url>[^\t\n\x0c\r ]+)(?P<descriptor>.*)", re.DOTALL)


@dataclass(frozen=True)
class Candidate:
    """One entry of a multi-candidate attribute.

    Attributes:
        url: The leading URL token.
        descriptor: Everything after the URL, including its leading whitespace.
    """

    url: str
    descriptor: str = ""

    @property
    def has_marker(self) -> bool:
        return is_eligible_marker(self.url)

    def __str__(self) -> str:
        return f"{self.url}{self.descriptor}"


def split_candidates(value: str) -> list[Candidate]:
    """Split a srcset-like value into candidates.

    Entries are split on commas and trimmed; empty entries are dropped.

    Examples:
        >>> split_candidates("a.png 1x, b.png 2x")
        [Candidate(url='a.png', descriptor=' 1x'), Candidate(url='b.png', descriptor=' 2x')]
    """
    candidates = []
    for entry in value.split(","):
        entry = trim_attribute_whitespace(entry)
        if not entry:
            continue
        match = _CANDIDATE_RE.match(entry)
        candidates.append(Candidate(match.group("url"), match.group("descriptor")))
    return candidates


def resolve_candidates(value: str, adapter: ResolverAdapter) -> str | None:
    """Resolve every marked candidate of a plain-text srcset value.

    Args:
        value: Plain-text attribute value.
        adapter: Adapter used to resolve each marked URL.

    Returns:
        The rejoined value, or None if no candidate carried a marker.
    """
    candidates = split_candidates(value)
    if not any(candidate.has_marker for candidate in candidates):
        return None
    entries = []
    for candidate in candidates:
        if candidate.has_marker:
            url = adapter.resolve(candidate.url)
            entries.append(f"{url}{candidate.descriptor}")
        else:
            entries.append(str(candidate))
    return CANDIDATE_SEPARATOR.join(entries)


def resolve_encoded_candidates(
    html: str, adapter: ResolverAdapter
) -> DeferredMarkup | None:
    """Resolve every marked candidate of a pre-encoded srcset value.

    Only the text added by the resolver is escaped when the result is
    rendered; the original content is emitted verbatim.

    Args:
        html: Already-encoded attribute value.
        adapter: Adapter used to resolve each marked URL.

    Returns:
        The rejoined markup, or None if no candidate carried a marker.
    """
    candidates = split_candidates(html)
    if not any(candidate.has_marker for candidate in candidates):
        return None
    segments: list[Segment] = []
    for index, candidate in enumerate(candidates):
        if index:
            segments.append(LiteralSegment(CANDIDATE_SEPARATOR))
        if candidate.has_marker:
            prefix, remainder = adapter.resolve_deferred(candidate.url)
            segments.append(prefix)
            segments.append(LiteralSegment(f"{remainder.text}{candidate.descriptor}"))
        else:
            segments.append(LiteralSegment(str(candidate)))
    return DeferredMarkup(tuple(segments))
