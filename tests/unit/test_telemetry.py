"""Tests for tracing helpers, telemetry configuration and logging setup."""

import logging

import pytest
from fastapi import FastAPI
from opentelemetry.sdk.trace.export import ConsoleSpanExporter

from monitor_search.core.config import Settings
from monitor_search.core.lifespan import create_lifespan
from monitor_search.shared.telemetry.logging import (
    SERVICE_LOGGER,
    STORE_LOGGERS,
    setup_logging,
)
from monitor_search.shared.telemetry.telemetry import (
    TelemetryConfig,
    build_span_exporter,
    get_telemetry,
    set_telemetry,
)
from monitor_search.shared.telemetry.tracing import add_span_attributes, traced


@traced("test.sync")
def _double(value: int) -> int:
    return value * 2


@traced()
async def _fail(phrase: str) -> None:
    raise RuntimeError(f"boom {phrase}")


@pytest.fixture
def restore_log_levels():
    names = (SERVICE_LOGGER, *STORE_LOGGERS)
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


def test_traced_sync_returns_result() -> None:
    assert _double(21) == 42
    assert _double.__name__ == "_double"


async def test_traced_async_reraises() -> None:
    with pytest.raises(RuntimeError, match="boom any"):
        await _fail(phrase="any")


def test_add_span_attributes_without_active_span() -> None:
    add_span_attributes(issue_count=1)


def test_disabled_telemetry_sets_up_nothing() -> None:
    telemetry = TelemetryConfig("monitor-search", "1.0.0", enabled=False)
    assert telemetry.setup_telemetry() is None
    telemetry.instrument(FastAPI(), None)
    telemetry.shutdown()
    assert telemetry.tracer_provider is None


def test_telemetry_from_settings() -> None:
    settings = Settings(
        app_name="search-test",
        telemetry_enabled=True,
        telemetry_environment="staging",
    )
    telemetry = TelemetryConfig.from_settings(settings)
    assert telemetry.service_name == "search-test"
    assert telemetry.enabled is True
    assert telemetry.environment == "staging"


class TestBuildSpanExporter:
    def test_none_exports_nothing(self) -> None:
        assert build_span_exporter("none", None) is None

    def test_console(self) -> None:
        assert isinstance(build_span_exporter("console", None), ConsoleSpanExporter)

    @pytest.mark.parametrize("exporter_type", ["otlp", "jaeger"])
    def test_falls_back_to_console(self, exporter_type: str) -> None:
        exporter = build_span_exporter(exporter_type, None)
        assert isinstance(exporter, ConsoleSpanExporter)


def test_global_telemetry_instance() -> None:
    telemetry = TelemetryConfig("monitor-search", "1.0.0", enabled=False)
    set_telemetry(telemetry)
    assert get_telemetry() is telemetry
    set_telemetry(None)
    assert get_telemetry() is None


class TestSetupLogging:
    def test_service_level_follows_debug(self, restore_log_levels) -> None:
        assert setup_logging(Settings(debug=True)) == logging.DEBUG
        assert logging.getLogger(SERVICE_LOGGER).level == logging.DEBUG
        assert setup_logging(Settings(debug=False)) == logging.INFO
        assert logging.getLogger(SERVICE_LOGGER).level == logging.INFO

    def test_store_loggers_quiet_unless_echo(self, restore_log_levels) -> None:
        setup_logging(Settings(database_echo=False))
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
        setup_logging(Settings(database_echo=True))
        assert logging.getLogger("sqlalchemy.engine").level == logging.INFO


async def test_lifespan_runs_without_telemetry(
    configured_store: str, restore_log_levels
) -> None:
    app = FastAPI()
    async with create_lifespan(app):
        pass
    assert get_telemetry() is None
