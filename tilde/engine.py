"""URL resolution engine for element attributes.

This module decides which attributes of an element are inspected and
dispatches each value to the single-URL or multi-candidate path.

Key class:
- UrlResolutionProcessor: Rewrites ``~/`` values on an element in place.

Design principles:
- Single Responsibility: marker detection, resolver handling and srcset
  splitting live in their own modules.
- Dependency Inversion: the processor depends on the UrlResolver protocol
  and receives its configuration explicitly.
"""

from __future__ import annotations

from typing import Any, assert_never

from .attributes import Element
from .config import ResolutionConfig
from .markers import locate_marker
from .protocols import UrlResolver
from .resolver import AppRootUrlResolver, ResolverAdapter
from .srcset import resolve_candidates, resolve_encoded_candidates
from .values import DeferredMarkup, OtherValue, PlainText, PreEncodedContent, classify


class UrlResolutionProcessor:
    """Resolves application-relative URLs in element attributes.

    Attributes:
        config: Which attributes are inspected and how.
        resolver: The URL resolver used for every marker.
    """

    def __init__(
        self,
        resolver: UrlResolver | None = None,
        config: ResolutionConfig | None = None,
    ):
        """Initialize the processor.

        Args:
            resolver: URL resolver; defaults to an AppRootUrlResolver for
                ``config.app_root``.
            config: Resolution settings; defaults to ResolutionConfig().
        """
        self.config = config or ResolutionConfig()
        self.resolver = resolver or AppRootUrlResolver(self.config.app_root)
        self._adapter = ResolverAdapter(self.resolver)

    def process(self, element: Element) -> None:
        """Rewrite every eligible attribute of an element in place.

        Elements without a tag name are left untouched. A contract violation
        propagates before the failing attribute is replaced; attributes
        rewritten earlier keep their new values.

        Args:
            element: Element whose attributes are rewritten.

        Raises:
            ResolutionContractViolation: If the resolver breaks its contract.
        """
        if element.tag_name is None or not self.config.enabled:
            return
        for name in self.config.attributes_for(element.tag_name):
            self.process_attribute(element, name)

    def process_attribute(self, element: Element, name: str) -> None:
        """Rewrite every attribute named ``name`` (ignoring case) on an element."""
        multi = self.config.is_multi_url(name)
        attributes = element.attributes
        for index in attributes.indexes_of(name):
            attribute = attributes[index]
            value = self.resolve_value(attribute.value, multi=multi)
            if value is not attribute.value:
                attributes[index] = attribute.with_value(value)

    def resolve_value(self, value: Any, multi: bool = False) -> Any:
        """Resolve a single attribute value.

        Args:
            value: Raw attribute value.
            multi: Treat the value as comma-separated candidates.

        Returns:
            The original value when nothing was resolved, a ``str`` for plain
            text input, or DeferredMarkup for pre-encoded input.
        """
        shape = classify(value)
        if isinstance(shape, PlainText):
            resolved = self._resolve_text(shape.text, multi)
        elif isinstance(shape, PreEncodedContent):
            resolved = self._resolve_encoded(shape.html, multi)
        elif isinstance(shape, OtherValue):
            resolved = None
        else:
            assert_never(shape)
        return value if resolved is None else resolved

    def resolve_url(self, value: Any) -> Any:
        """Resolve a single-URL value such as ``href`` or ``src``."""
        return self.resolve_value(value)

    def resolve_srcset(self, value: Any) -> Any:
        """Resolve a multi-candidate value such as ``srcset``."""
        return self.resolve_value(value, multi=True)

    def _resolve_text(self, text: str, multi: bool) -> str | None:
        if multi:
            return resolve_candidates(text, self._adapter)
        span = locate_marker(text)
        if span is None:
            return None
        return self._adapter.resolve(text[span.start : span.end])

    def _resolve_encoded(self, html: str, multi: bool) -> DeferredMarkup | None:
        if multi:
            return resolve_encoded_candidates(html, self._adapter)
        span = locate_marker(html)
        if span is None:
            return None
        return DeferredMarkup(
            self._adapter.resolve_deferred(html[span.start : span.end])
        )
