"""Tests for the logging configuration model.

init_logging itself is exercised through the CLI integration tests.
"""

from __future__ import annotations

import pytest

from ajax_onload.adapters.logging.setup import LoggingConfigModel


@pytest.mark.os_agnostic
def test_logging_config_model_allows_extra_fields() -> None:
    """Extra fields pass through for lib_log_rich RuntimeConfig."""
    parsed = LoggingConfigModel.model_validate({"service": "pages", "environment": "dev", "console_level": "DEBUG"})

    assert parsed.service == "pages"
    assert parsed.environment == "dev"
    extra = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)
    assert extra == {"console_level": "DEBUG"}


@pytest.mark.os_agnostic
def test_logging_config_model_defaults() -> None:
    """Empty input leaves the service to the package name and targets prod."""
    parsed = LoggingConfigModel.model_validate({})

    assert parsed.service is None
    assert parsed.environment == "prod"
