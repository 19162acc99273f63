"""Command-line interface for Tilde.

This module defines the CLI commands using Click framework.

Commands:
- resolve: Resolve one attribute value and print the rendered attribute.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import click
from markupsafe import Markup

from . import __version__
from .attributes import AttributeList, Element
from .config import ConfigError, load_resolution_config
from .engine import UrlResolutionProcessor
from .html_utils import render_attribute
from .resolver import ResolutionContractViolation


@click.group()
@click.version_option(version=__version__, prog_name="tilde")
def cli():
    """Resolve application-relative (~/) URLs in element attributes."""


@cli.command()
@click.argument("value")
@click.option("--tag", default="a", show_default=True, help="Element name")
@click.option("--attribute", default=None, help="Attribute name (defaults to the element's first URL attribute)")
@click.option("--app-root", default=None, help="Application root (overrides tilde.yaml)")
@click.option("--pre-encoded", is_flag=True, help="Treat VALUE as already HTML-encoded")
def resolve(
    value: str,
    tag: str,
    attribute: str | None,
    app_root: str | None,
    pre_encoded: bool,
):
    """Resolve VALUE as an attribute of TAG and print the rendered attribute."""
    try:
        config = load_resolution_config(Path.cwd())
    except ConfigError as exc:
        raise click.ClickException(f"Invalid tilde.yaml: {exc}") from None
    if app_root is not None:
        config = replace(config, app_root=app_root)

    names = config.attributes_for(tag)
    name = attribute or (names[0] if names else None)
    if name is None:
        raise click.ClickException(f"No URL attributes configured for <{tag}>")

    element = Element(
        tag, AttributeList([(name, Markup(value) if pre_encoded else value)])
    )
    processor = UrlResolutionProcessor(config=config)
    try:
        if config.enabled:
            processor.process_attribute(element, name)
    except ResolutionContractViolation as exc:
        click.echo(click.style("Resolution failed:", fg="red", bold=True), err=True)
        click.echo(click.style(f"  URL: {exc.relative_url}", fg="yellow"), err=True)
        click.echo(click.style(f"  Error: {exc}", fg="white"), err=True)
        raise SystemExit(1) from None
    click.echo(render_attribute(element.attributes[0]))


def main():
    """Entry point for the CLI application."""
    cli()
