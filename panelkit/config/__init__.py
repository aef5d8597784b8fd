"""Load and validate the admin display configuration.

This subpackage turns an ``admin.yaml`` file into the frozen :class:`Config`
snapshot consumed by page assembly and panel composition. The primary entry
point is :func:`load_config`.

Examples
--------
>>> from pathlib import Path
>>> from panelkit.config import load_config
>>> config = load_config(Path("admin.yaml"))  # doctest: +SKIP
>>> config.animation.type  # doctest: +SKIP
'fadeInUp'
"""

from .loader import load_config
from .models import AnimationConfig, Config, ConfigError

__all__ = ["AnimationConfig", "Config", "ConfigError", "load_config"]
