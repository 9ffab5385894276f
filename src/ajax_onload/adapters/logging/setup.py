"""Centralized logging initialization for all entry points.

Module execution, the console script, and tests all initialise lib_log_rich
through :func:`init_logging` so runtime behaviour is identical across
invocation paths.

Contents:
    * :class:`LoggingConfigModel` - validated ``[lib_log_rich]`` section.
    * :func:`init_logging` - idempotent logging initialization with layered config.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from ajax_onload import __init__conf__


class LoggingConfigModel(BaseModel):
    """Pydantic model for the ``[lib_log_rich]`` config section.

    Unknown keys pass through untouched to ``lib_log_rich.RuntimeConfig``.

    Example:
        >>> LoggingConfigModel(service="pages").service
        'pages'
        >>> LoggingConfigModel().environment
        'prod'
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the ``[lib_log_rich]`` section onto a RuntimeConfig.

    The service name falls back to the package name when not configured.
    """
    log_raw: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", log_raw) if log_raw else {})
    passthrough = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)

    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Initialize the lib_log_rich runtime once per process.

    The first call loads ``.env`` files so ``LOG_*`` variables are visible,
    initialises the runtime from the ``[lib_log_rich]`` section and bridges
    stdlib ``logging`` into it. Later calls return immediately.

    Args:
        config: Already-loaded layered configuration object.

    Example:
        >>> from lib_layered_config import Config
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
