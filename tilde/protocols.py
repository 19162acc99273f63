"""Protocol definitions for Tilde.

This module defines the interfaces (protocols) the engine depends on,
following the Dependency Inversion Principle (DIP) of SOLID.

These protocols enable:
- Loose coupling between the engine and the host's URL generation
- Easy testing through mock implementations
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol, runtime_checkable


@runtime_checkable
class UrlResolver(Protocol):
    """Protocol for resolving application-relative paths to URLs.

    Implementations decide how ``~/`` maps to a concrete URL (virtual
    directory, CDN host, routing table, ...). The engine only requires that
    the output ends with the part of the path that followed ``~/``.
    """

    @abstractmethod
    def content(self, path: str) -> str:
        """Resolve an application-relative path.

        Args:
            path: Path starting with ``~/``.

        Returns:
            The resolved URL.
        """
        ...
