"""Load the admin display configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from .helpers import _build_animation_config, _optional_str
from .models import Config

if typ.TYPE_CHECKING:
    from pathlib import Path

_STRING_FIELDS = (
    "title",
    "logo",
    "mini_logo",
    "color_scheme",
    "url_prefix",
    "index",
    "asset_url",
    "custom_head_html",
    "custom_foot_html",
)


def load_config(path: Path) -> Config:
    """Load the YAML file describing the admin display settings.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration (for example
        ``admin.yaml``).

    Returns
    -------
    Config
        Frozen configuration snapshot; keys missing from the file keep the
        :class:`Config` defaults.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    ConfigError
        If the animation block carries non-numeric or negative timings.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_config(Path("admin.yaml"))  # doctest: +SKIP
    >>> config.index_url()  # doctest: +SKIP
    '/admin'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    overrides: dict[str, typ.Any] = {}
    for field in _STRING_FIELDS:
        if field not in raw:
            continue
        value = raw[field]
        # Markup fields keep their whitespace; only absent values are dropped.
        if field.startswith("custom_") or field.endswith("logo"):
            overrides[field] = "" if value is None else str(value)
        else:
            overrides[field] = _optional_str(value) or ""
    return Config(animation=_build_animation_config(raw.get("animation")), **overrides)


__all__ = ["load_config"]
