"""Configuration adapter: layered loading and the ``[ajax_onload]`` section.

Contents:
    * :mod:`.loader` - Cached lib_layered_config loading with bundled defaults
    * :mod:`.settings` - ``[ajax_onload]`` section model
"""

from __future__ import annotations

from .loader import DEFAULT_CONFIG_FILE, get_config
from .settings import OnLoadSettings, load_onload_settings

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "OnLoadSettings",
    "get_config",
    "load_onload_settings",
]
