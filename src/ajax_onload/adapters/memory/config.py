"""In-memory configuration source for tests."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from lib_layered_config import Config


def config_in_memory(onload: Mapping[str, Any] | None = None) -> Callable[[], Config]:
    """Return a GetConfig callable serving a fixed ``[ajax_onload]`` section.

    Args:
        onload: Contents of the ``[ajax_onload]`` section. None serves an
            empty configuration, so every setting keeps its default.

    Example:
        >>> get_config = config_in_memory({"script_tag": False})
        >>> get_config()["ajax_onload"]["script_tag"]
        False
    """
    data: dict[str, Any] = {} if onload is None else {"ajax_onload": dict(onload)}
    config = Config(data, {})

    def get_config() -> Config:
        return config

    return get_config


__all__ = ["config_in_memory"]
