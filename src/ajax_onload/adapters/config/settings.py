"""Onload rendering settings model and loader.

Provides the OnLoadSettings Pydantic model for the ``[ajax_onload]`` section
and the loader that builds it from configuration dictionaries.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, ValidationError

from ajax_onload.domain.errors import ConfigurationError

#: Top-level configuration section holding the rendering defaults.
SETTINGS_SECTION = "ajax_onload"


class OnLoadSettings(BaseModel):
    """Validated, immutable defaults for the ``render`` command.

    Example:
        >>> settings = OnLoadSettings(script_tag=False)
        >>> settings.script_tag
        False
        >>> OnLoadSettings().test_mode
        False
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    script_tag: bool = True
    test_mode: bool = False


def load_onload_settings(config_dict: Mapping[str, Any]) -> OnLoadSettings:
    """Load OnLoadSettings from a configuration dictionary.

    Single-parse validation at the boundary: lib_layered_config supplies
    the merged dictionary, Pydantic coerces values such as ``"false"`` coming
    from environment variables.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.

    Returns:
        Settings with defaults for missing values.

    Raises:
        ConfigurationError: If the section is not a table or holds invalid values.

    Example:
        >>> load_onload_settings({"ajax_onload": {"script_tag": "false"}}).script_tag
        False
        >>> load_onload_settings({}).script_tag
        True
    """
    section: Any = config_dict.get(SETTINGS_SECTION, {})
    if not isinstance(section, Mapping):
        raise ConfigurationError(f"[{SETTINGS_SECTION}] must be a table, got {type(section).__name__}")

    try:
        return OnLoadSettings.model_validate(dict(cast(Mapping[str, Any], section)))
    except ValidationError as exc:
        problems = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors())
        raise ConfigurationError(f"Invalid [{SETTINGS_SECTION}] configuration: {problems}") from exc


__all__ = [
    "SETTINGS_SECTION",
    "OnLoadSettings",
    "load_onload_settings",
]
