"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..adapters.config.loader import get_config
from ..adapters.config.settings import load_onload_settings
from ..adapters.logging.setup import init_logging
from ..adapters.output.stdout import write_output

if TYPE_CHECKING:
    from ..adapters.memory.output import OutputSpy
    from ..application.ports import GetConfig, InitLogging, LoadOnLoadSettings, WriteOutput

    _assert_get_config: GetConfig = get_config
    _assert_load_onload_settings: LoadOnLoadSettings = load_onload_settings
    _assert_write_output: WriteOutput = write_output
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    load_onload_settings: LoadOnLoadSettings
    write_output: WriteOutput
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire layered config, lib_log_rich and stdout into AppServices."""
    return AppServices(
        get_config=get_config,
        load_onload_settings=load_onload_settings,
        write_output=write_output,
        init_logging=init_logging,
    )


def build_testing(*, spy: OutputSpy | None = None, onload: Mapping[str, Any] | None = None) -> AppServices:
    """Wire in-memory adapters into AppServices.

    Usable directly as the CLI services factory (``obj=build_testing``) or
    through a lambda when a spy or settings are needed.

    Args:
        spy: OutputSpy capturing page-output writes. A fresh one is created
            when None; pass your own to assert on the captured blocks.
        onload: ``[ajax_onload]`` section served by the in-memory config.

    Example:
        >>> from ajax_onload.adapters.memory import OutputSpy
        >>> spy = OutputSpy()
        >>> services = build_testing(spy=spy, onload={"script_tag": False})
        >>> services.load_onload_settings(services.get_config().as_dict()).script_tag
        False
    """
    from ..adapters.memory import OutputSpy, config_in_memory, init_logging_in_memory

    output_spy = spy if spy is not None else OutputSpy()

    return AppServices(
        get_config=config_in_memory(onload),
        load_onload_settings=load_onload_settings,
        write_output=output_spy.write_output,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    "get_config",
    "AppServices",
    "build_production",
    "build_testing",
]
