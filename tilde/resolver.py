"""Resolver adapter for application-relative URLs.

This module wraps the host-supplied UrlResolver, calls it once per marker,
checks its output and splits that output for deferred encoding.

Key classes:
- ResolverAdapter: Calls the resolver and validates its output.
- AppRootUrlResolver: Resolves ``~/`` against a fixed application root.
- CallableUrlResolver: Adapts a plain function to the UrlResolver protocol.
- ResolutionContractViolation: Raised when a resolver breaks its contract.
"""

from __future__ import annotations

from collections.abc import Callable

from .html_utils import join_root_url
from .markers import MARKER
from .protocols import UrlResolver
from .values import EscapedSegment, LiteralSegment


class ResolutionContractViolation(Exception):
    """Error raised when a resolver's output does not end with the path it was given.

    Attributes:
        relative_url: The application-relative URL that failed to resolve.
        resolver_name: Name of the resolver abstraction.
        method_name: Name of the resolver method that was called.
        resolved: The value the resolver returned.
    """

    def __init__(
        self,
        relative_url: str,
        resolved: str,
        resolver_name: str = UrlResolver.__name__,
        method_name: str = UrlResolver.content.__name__,
    ):
        self.relative_url = relative_url
        self.resolved = resolved
        self.resolver_name = resolver_name
        self.method_name = method_name
        super().__init__(
            f"Unexpected return value from '{resolver_name}.{method_name}' "
            f"for URL '{relative_url}'. If application-relative URL resolution "
            "is no longer needed, set 'enabled: false' in tilde.yaml to disable it."
        )


class ResolverAdapter:
    """Calls a UrlResolver and checks the result.

    Each public method calls the resolver exactly once. The resolver must
    return a string ending with the text that followed ``~/``; anything else
    raises ResolutionContractViolation.

    Attributes:
        resolver: The wrapped UrlResolver.
    """

    def __init__(self, resolver: UrlResolver):
        self.resolver = resolver

    def resolve(self, marker_text: str) -> str:
        """Resolve a marker and return the resolver's output.

        Args:
            marker_text: Candidate text starting with ``~/``.

        Returns:
            The resolved URL.

        Raises:
            ResolutionContractViolation: If the output does not end with the
                text after the marker.
        """
        resolved, _ = self._content(marker_text)
        return resolved

    def resolve_deferred(
        self, marker_text: str
    ) -> tuple[EscapedSegment, LiteralSegment]:
        """Resolve a marker and split the output for deferred encoding.

        Args:
            marker_text: Candidate text starting with ``~/``, taken from
                already-encoded content.

        Returns:
            The resolver-added prefix (escaped at render time) and the
            original remainder (emitted verbatim).

        Raises:
            ResolutionContractViolation: If the output does not end with the
                text after the marker.
        """
        resolved, remainder = self._content(marker_text)
        prefix = resolved[: len(resolved) - len(remainder)]
        return EscapedSegment(prefix), LiteralSegment(remainder)

    def _content(self, marker_text: str) -> tuple[str, str]:
        """Call the resolver once and validate its output."""
        remainder = marker_text[len(MARKER) :]
        resolved = self.resolver.content(marker_text)
        if not isinstance(resolved, str) or not resolved.endswith(remainder):
            raise ResolutionContractViolation(marker_text, resolved)
        return resolved, remainder


class AppRootUrlResolver:
    """Resolves ``~/`` paths against an application root path or URL.

    Attributes:
        app_root: Root the application is served from (e.g. "/approot" or
            "https://cdn.example.com/app").
    """

    def __init__(self, app_root: str = ""):
        self.app_root = app_root

    def content(self, path: str) -> str:
        """Replace the leading ``~`` with the application root.

        Examples:
            >>> AppRootUrlResolver("/approot").content("~/home/index.html")
            '/approot/home/index.html'
        """
        if not path.startswith(MARKER):
            return path
        return join_root_url(self.app_root, path[1:])


class CallableUrlResolver:
    """Adapts a plain function to the UrlResolver protocol."""

    def __init__(self, func: Callable[[str], str]):
        self._func = func

    def content(self, path: str) -> str:
        return self._func(path)
