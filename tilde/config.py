"""Configuration for Tilde.

This module loads resolution settings from ``tilde.yaml`` and turns them into
a ResolutionConfig value that is passed explicitly to the engine.

Key items:
- DEFAULT_URL_ATTRIBUTES: URL-bearing attributes per HTML element.
- ResolutionConfig: Typed configuration consumed by UrlResolutionProcessor.
- load_config: Loads ``tilde.yaml`` over DEFAULT_CONFIG.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

CONFIG_FILENAME = "tilde.yaml"

# Element name -> attributes that hold a URL
DEFAULT_URL_ATTRIBUTES: dict[str, tuple[str, ...]] = {
    "a": ("href",),
    "applet": ("archive",),
    "area": ("href",),
    "audio": ("src",),
    "base": ("href",),
    "blockquote": ("cite",),
    "button": ("formaction",),
    "del": ("cite",),
    "embed": ("src",),
    "form": ("action",),
    "html": ("manifest",),
    "iframe": ("src",),
    "img": ("src", "srcset"),
    "input": ("src", "formaction"),
    "ins": ("cite",),
    "link": ("href",),
    "menuitem": ("icon",),
    "object": ("archive", "data"),
    "q": ("cite",),
    "script": ("src",),
    "source": ("src", "srcset"),
    "track": ("src",),
    "video": ("poster", "src"),
}

DEFAULT_MULTI_URL_ATTRIBUTES = frozenset({"srcset"})

DEFAULT_CONFIG: dict[str, Any] = {
    "enabled": True,
    "app_root": "",
    "url_attributes": DEFAULT_URL_ATTRIBUTES,
    "multi_url_attributes": sorted(DEFAULT_MULTI_URL_ATTRIBUTES),
}


class ConfigError(Exception):
    """Error raised when the configuration has an invalid shape.

    Attributes:
        key: The configuration key that is invalid.
        message: Human-readable error message.
    """

    def __init__(self, key: str, message: str):
        self.key = key
        self.message = message
        super().__init__(f"{key}: {message}")


@dataclass(frozen=True)
class ResolutionConfig:
    """Settings for the URL resolution engine.

    Attributes:
        enabled: When False the engine leaves every element unchanged.
        app_root: Application root used by the default resolver.
        url_attributes: Element name -> attribute names to inspect.
        multi_url_attributes: Attribute names holding comma-separated candidates.
    """

    enabled: bool = True
    app_root: str = ""
    url_attributes: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: dict(DEFAULT_URL_ATTRIBUTES)
    )
    multi_url_attributes: frozenset[str] = DEFAULT_MULTI_URL_ATTRIBUTES

    def attributes_for(self, tag_name: str) -> tuple[str, ...]:
        """Return the URL attribute names inspected for an element."""
        return self.url_attributes.get(tag_name.lower(), ())

    def is_multi_url(self, attribute_name: str) -> bool:
        """Check whether an attribute holds comma-separated URL candidates."""
        return attribute_name.lower() in self.multi_url_attributes

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ResolutionConfig:
        """Build a config from a plain mapping such as parsed YAML.

        Args:
            data: Mapping with any of the ResolutionConfig keys.

        Returns:
            The typed configuration.

        Raises:
            ConfigError: If a value has the wrong shape.
        """
        url_attributes = data.get("url_attributes", DEFAULT_URL_ATTRIBUTES)
        if not isinstance(url_attributes, Mapping):
            raise ConfigError(
                "url_attributes", "expected a mapping of element name to attributes"
            )
        normalized: dict[str, tuple[str, ...]] = {}
        for tag, names in url_attributes.items():
            if isinstance(names, str):
                names = [names]
            if not isinstance(names, (list, tuple)):
                raise ConfigError(
                    "url_attributes", f"expected a list of attributes for '{tag}'"
                )
            normalized[str(tag).lower()] = tuple(str(name).lower() for name in names)

        multi = data.get("multi_url_attributes", DEFAULT_MULTI_URL_ATTRIBUTES)
        if isinstance(multi, str) or not isinstance(multi, (list, tuple, set, frozenset)):
            raise ConfigError("multi_url_attributes", "expected a list of attributes")

        return cls(
            enabled=bool(data.get("enabled", True)),
            app_root=str(data.get("app_root") or ""),
            url_attributes=normalized,
            multi_url_attributes=frozenset(str(name).lower() for name in multi),
        )


def load_config(project_root: Path) -> dict[str, Any]:
    """Load resolution configuration from tilde.yaml.

    Args:
        project_root: Root directory of the project.

    Returns:
        Dictionary containing configuration values, with defaults applied.
    """
    config_path = project_root / CONFIG_FILENAME
    config = DEFAULT_CONFIG.copy()
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
            if isinstance(loaded, dict):
                config.update(loaded)
    return config


def load_resolution_config(project_root: Path) -> ResolutionConfig:
    """Load tilde.yaml and return it as a ResolutionConfig."""
    return ResolutionConfig.from_mapping(load_config(project_root))
