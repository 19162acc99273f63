"""Tilde: application-relative URL resolution for element attributes.

This package rewrites attribute values that start with the ``~/`` marker
into concrete URLs produced by an injected resolver, without double-encoding
values that are already HTML-safe.

Architecture follows the same layering as the rest of the toolchain:
- markers: detects the ``~/`` marker.
- resolver: adapts the injected URL resolver and validates its output.
- srcset: splits and rejoins multi-candidate attributes.
- engine: the eligibility gate and element processor.
- html_utils / templates: the final-render points (string and Jinja2).
"""

from .config import ResolutionConfig
from .engine import UrlResolutionProcessor
from .resolver import (
    AppRootUrlResolver,
    CallableUrlResolver,
    ResolutionContractViolation,
)

__all__ = [
    "AppRootUrlResolver",
    "CallableUrlResolver",
    "ResolutionConfig",
    "ResolutionContractViolation",
    "UrlResolutionProcessor",
    "__version__",
]
__version__ = "0.1.0"
