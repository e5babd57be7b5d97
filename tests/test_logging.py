"""Tests for opt-in logging and log hooks."""

from __future__ import annotations

import json
import logging
from typing import Any

import pytest
import structlog
from klaw_exhaustive import UnreachableVariantReached, assert_unreachable, configure
from klaw_exhaustive._logging import (
    PACKAGE_LOGGER,
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)


class Node:
    def __init__(self) -> None:
        self.next: Any = self


def _hit(value: Any) -> None:
    with pytest.raises(UnreachableVariantReached):
        assert_unreachable(value)


def _capture() -> list[dict[str, Any]]:
    received: list[dict[str, Any]] = []
    add_log_hook(received.append)
    return received


def _reached(events: list[dict[str, Any]]) -> list[dict[str, Any]]:
    return [e for e in events if e.get('event') == 'unreachable_variant_reached']


class TestUnreachableEvents:
    """Tests for the event emitted by assert_unreachable."""

    def test_silent_by_default(self) -> None:
        """Without configure(log_level=...) nothing reaches the hooks."""
        received = _capture()
        _hit({'kind': 'Stopped'})
        assert received == []

    def test_event_fields(self) -> None:
        configure(log_level='DEBUG')
        received = _capture()

        _hit({'kind': 'Stopped'})

        events = _reached(received)
        assert len(events) == 1
        assert events[0]['type_name'] == 'dict'
        assert events[0]['strategy'] == 'serialized'
        assert events[0]['level'] == 'debug'

    def test_composite_logs_warning(self) -> None:
        configure(log_level='DEBUG')
        received = _capture()

        _hit(Node())

        events = _reached(received)
        assert len(events) == 1
        assert events[0]['strategy'] == 'composite'
        assert events[0]['level'] == 'warning'

    def test_level_filters_debug_events(self) -> None:
        """At WARNING only composite representations are logged."""
        configure(log_level='WARNING')
        received = _capture()

        _hit('Stopped')
        _hit(Node())

        assert [e['strategy'] for e in _reached(received)] == ['composite']


class TestLogHooks:
    """Tests for logging hooks functionality."""

    def test_remove_hook(self) -> None:
        """remove_log_hook() stops hook from being called."""
        calls: list[str] = []

        def hook(event_dict: dict[str, Any]) -> None:
            calls.append('called')

        configure_logging(level='DEBUG')
        add_log_hook(hook)

        logger = get_logger('klaw_exhaustive.test')
        logger.info('First')
        assert len(calls) == 1

        remove_log_hook(hook)
        logger.info('Second')
        assert len(calls) == 1

    def test_clear_hooks(self) -> None:
        """clear_log_hooks() removes all hooks."""
        calls: list[str] = []

        configure_logging(level='DEBUG')
        add_log_hook(lambda event_dict: calls.append('hook1'))
        add_log_hook(lambda event_dict: calls.append('hook2'))

        logger = get_logger('klaw_exhaustive.test')
        logger.info('First')
        assert calls == ['hook1', 'hook2']

        clear_log_hooks()
        logger.info('Second')
        assert calls == ['hook1', 'hook2']

    def test_hook_exception_does_not_mask_assertion(self) -> None:
        """A failing hook never replaces UnreachableVariantReached."""
        calls: list[str] = []

        def bad_hook(event_dict: dict[str, Any]) -> None:
            raise RuntimeError('Hook failed')

        configure(log_level='DEBUG')
        add_log_hook(bad_hook)
        add_log_hook(lambda event_dict: calls.append('good'))

        _hit(3)

        assert calls == ['good']

    def test_hook_receives_copy_of_event_dict(self) -> None:
        """Hooks receive a copy, not the original event dict."""
        received: list[dict[str, Any]] = []

        def mutating_hook(event_dict: dict[str, Any]) -> None:
            event_dict['mutated'] = True
            received.append(event_dict)

        def observing_hook(event_dict: dict[str, Any]) -> None:
            received.append(event_dict)

        configure_logging(level='DEBUG')
        add_log_hook(mutating_hook)
        add_log_hook(observing_hook)

        get_logger('klaw_exhaustive.test').info('Test')

        assert received[0].get('mutated') is True
        assert 'mutated' not in received[1]


class TestLoggingScope:
    """Tests that opt-in logging stays inside the package."""

    def test_global_structlog_config_untouched(self) -> None:
        """configure(log_level=...) leaves the host's structlog setup alone."""
        structlog.reset_defaults()
        configure(log_level='DEBUG')
        _hit('Stopped')
        assert not structlog.is_configured()

    def test_handler_attached_to_package_logger_only(self) -> None:
        root_handlers = list(logging.getLogger().handlers)
        configure(log_level='DEBUG')

        package_logger = logging.getLogger(PACKAGE_LOGGER)
        assert len(package_logger.handlers) == 1
        assert package_logger.propagate is False
        assert logging.getLogger().handlers == root_handlers

    def test_json_output_by_default(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure(log_level='DEBUG')
        _hit({'kind': 'Stopped'})

        line = capsys.readouterr().err.strip().splitlines()[-1]
        event = json.loads(line)
        assert event['event'] == 'unreachable_variant_reached'
        assert event['strategy'] == 'serialized'

    def test_console_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """json_logs=False switches the handler to the console renderer."""
        config = configure(log_level='DEBUG', json_logs=False)
        assert config.json_logs is False

        _hit({'kind': 'Stopped'})

        line = capsys.readouterr().err.strip().splitlines()[-1]
        assert 'unreachable_variant_reached' in line
        assert not line.startswith('{')
