"""Typed dataclasses describing the admin display configuration."""

from __future__ import annotations

import dataclasses as dc


class ConfigError(ValueError):
    """Raised when the admin configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class AnimationConfig:
    """Entrance animation applied to composed panel content.

    Attributes
    ----------
    type : str
        Animate.css class name (for example ``"fadeInUp"``); empty disables
        the animation entirely.
    delay : float
        Seconds before the animation starts; ``0`` omits the declaration.
    duration : float
        Seconds the animation runs for; ``0`` omits the declaration.
    """

    type: str = ""
    delay: float = 0.0
    duration: float = 0.0

    @property
    def enabled(self) -> bool:
        """Return ``True`` when an animation type is configured."""
        return bool(self.type)


@dc.dataclass(frozen=True, slots=True)
class Config:
    """Display settings consumed by page assembly.

    Instances are frozen so a request always reads one consistent snapshot,
    even when the surrounding application reloads its configuration.
    """

    title: str = "Admin"
    logo: str = ""
    mini_logo: str = ""
    color_scheme: str = "skin-black"
    url_prefix: str = "admin"
    index: str = "/"
    asset_url: str = ""
    custom_head_html: str = ""
    custom_foot_html: str = ""
    animation: AnimationConfig = dc.field(default_factory=AnimationConfig)

    def asset_prefix(self) -> str:
        """Return the URL prefix with a leading slash, or ``""`` at the root.

        Examples
        --------
        >>> Config(url_prefix="admin").asset_prefix()
        '/admin'
        >>> Config(url_prefix="/").asset_prefix()
        ''
        """
        prefix = self.url_prefix.strip("/")
        return f"/{prefix}" if prefix else ""

    def url(self, suffix: str) -> str:
        """Join ``suffix`` onto the asserted prefix."""
        return self.asset_prefix() + suffix

    def index_url(self) -> str:
        """Return the home page URL of the admin site.

        Examples
        --------
        >>> Config(url_prefix="admin", index="/dashboard").index_url()
        '/admin/dashboard'
        >>> Config(url_prefix="admin").index_url()
        '/admin'
        >>> Config(url_prefix="").index_url()
        '/'
        """
        index = "/" + self.index.strip("/")
        if index == "/":
            return self.asset_prefix() or "/"
        return self.url(index)


__all__ = ["AnimationConfig", "Config", "ConfigError"]
