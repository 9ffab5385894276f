"""Layered configuration for the onload generator.

``defaultconfig.toml`` beside this module is the lowest layer; app, host,
user, ``.env`` and environment layers found by lib_layered_config sit on top.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Final

from lib_layered_config import Config, read_config

from ajax_onload import __init__conf__

#: Bundled defaults shipped inside the wheel.
DEFAULT_CONFIG_FILE: Final[Path] = Path(__file__).with_name("defaultconfig.toml")


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Read and merge every configuration layer once per process.

    Call ``get_config.cache_clear()`` to pick up changed files.

    Example:
        >>> get_config().get("ajax_onload.script_tag", default=True)
        True
    """
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        default_file=DEFAULT_CONFIG_FILE,
    )


__all__ = ["DEFAULT_CONFIG_FILE", "get_config"]
