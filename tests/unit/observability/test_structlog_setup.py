"""Unit tests for logging configuration."""

from __future__ import annotations

import logging

import structlog

from pgrest_filters.config import SearchSettings
from pgrest_filters.observability import (
    MAX_LOGGED_FRAGMENT,
    configure_logging,
    get_logger,
    truncate_fragments,
)


class TestConfigureLogging:
    def test_sets_root_level(self) -> None:
        configure_logging(logging.WARNING, force=True)
        assert logging.getLogger().level == logging.WARNING

    def test_accepts_level_name(self) -> None:
        configure_logging("debug", force=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_name_falls_back_to_info(self) -> None:
        configure_logging("nonsense", force=True)
        assert logging.getLogger().level == logging.INFO

    def test_second_call_is_noop(self) -> None:
        configure_logging(logging.ERROR, force=True)
        configure_logging(logging.DEBUG)
        assert logging.getLogger().level == logging.ERROR

    def test_level_from_settings(self) -> None:
        configure_logging(settings=SearchSettings(log_level="warning"), force=True)
        assert logging.getLogger().level == logging.WARNING

    def test_explicit_level_wins_over_settings(self) -> None:
        configure_logging(logging.DEBUG, settings=SearchSettings(log_level="ERROR"), force=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_single_handler(self) -> None:
        configure_logging(force=True)
        configure_logging(force=True)
        assert len(logging.getLogger().handlers) == 1


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with structlog.testing.capture_logs() as logs:
            get_logger("pgrest_filters.test", table="products").info("hello")
        assert logs == [{"event": "hello", "log_level": "info", "table": "products"}]


class TestTruncateFragments:
    def test_long_fragment_is_cut(self) -> None:
        event = truncate_fragments(None, "debug", {"fragment": "x" * 500})
        assert event["fragment"] == "x" * MAX_LOGGED_FRAGMENT + "..."

    def test_short_values_untouched(self) -> None:
        event = {"fragment": "age=gt.1", "value": "2021-13-01", "column": "c" * 500}
        assert truncate_fragments(None, "debug", dict(event)) == event
