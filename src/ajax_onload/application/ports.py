"""Application ports: callable Protocols the adapters satisfy structurally.

``Config`` and ``OnLoadSettings`` are imported for type checking only, so
the application layer never imports adapter code at runtime.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.config.settings import OnLoadSettings


class GetConfig(Protocol):
    """Return the merged layered configuration."""

    def __call__(self) -> Config: ...


class LoadOnLoadSettings(Protocol):
    """Build OnLoadSettings from a configuration dictionary."""

    def __call__(self, config_dict: Mapping[str, Any]) -> OnLoadSettings: ...


class WriteOutput(Protocol):
    """Append generated script text to the page output buffer."""

    def __call__(self, text: str) -> None: ...


class InitLogging(Protocol):
    """Prepare the logging runtime from configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "GetConfig",
    "InitLogging",
    "LoadOnLoadSettings",
    "WriteOutput",
]
