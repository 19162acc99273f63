"""Jinja2 integration for Tilde.

This module exposes the resolution engine to Jinja2 templates.

Installed names:
- app_url (filter): resolve a single ``~/`` URL.
- app_srcset (filter): resolve every candidate of a srcset value.
- render_element (global): render a start tag with its URL attributes resolved.

Plain strings come back as plain strings and are autoescaped by Jinja2 as
usual. Values marked safe come back as DeferredMarkup, whose ``__html__``
escapes only the text the resolver added.
"""

from __future__ import annotations

from typing import Any

from jinja2 import BaseLoader, Environment, select_autoescape
from markupsafe import Markup

from .attributes import AttributeList, Element
from .engine import UrlResolutionProcessor
from .html_utils import render_start_tag

__all__ = ["create_environment", "install_url_helpers"]


def install_url_helpers(
    env: Environment, processor: UrlResolutionProcessor
) -> Environment:
    """Install the URL filters and globals in a Jinja environment.

    Args:
        env: Environment to extend.
        processor: Processor used by the filters.

    Returns:
        The same environment, for chaining.
    """

    def render_element(tag_name: str, **attributes: Any) -> Markup:
        element = Element(tag_name, AttributeList(attributes.items()))
        processor.process(element)
        return Markup(render_start_tag(element))

    env.filters["app_url"] = processor.resolve_url
    env.filters["app_srcset"] = processor.resolve_srcset
    env.globals["render_element"] = render_element
    return env


def create_environment(
    processor: UrlResolutionProcessor, loader: BaseLoader | None = None
) -> Environment:
    """Create an autoescaping Jinja environment with the URL helpers installed.

    Args:
        processor: Processor used by the filters.
        loader: Optional template loader.

    Returns:
        The configured environment.
    """
    env = Environment(
        loader=loader,
        autoescape=select_autoescape(["html", "xml"], default_for_string=True),
        enable_async=False,
    )
    return install_url_helpers(env, processor)
