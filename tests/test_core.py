"""Tests for the core plumbing: task scopes, event bus, errors, auth, logging."""

import asyncio
import logging

import pytest

from catalogue.shared.core import events
from catalogue.shared.core.configuration import LoggingConfig
from catalogue.shared.core.errors import RemoteCallError
from catalogue.shared.core.event_bus import EventBus
from catalogue.shared.core.logging_config import setup_logging
from catalogue.shared.core.task_scope import TaskScope
from catalogue.shared.domain.auth import StaticAuthenticator


class TestTaskScope:

    @pytest.mark.asyncio
    async def test_run_returns_value_while_open(self):
        scope = TaskScope("test")

        async def work():
            return 42

        result = await scope.run(work())

        assert result.usable
        assert result.value == 42

    @pytest.mark.asyncio
    async def test_close_during_call_cancels_and_marks_stale(self):
        scope = TaskScope("test")
        started = asyncio.Event()
        finished = []

        async def slow():
            started.set()
            await asyncio.sleep(10)
            finished.append(True)
            return "late"

        pending = asyncio.ensure_future(scope.run(slow()))
        await started.wait()
        assert scope.pending_count == 1
        scope.close()
        result = await pending

        assert result.stale
        assert result.value is None
        assert finished == []

    @pytest.mark.asyncio
    async def test_result_arriving_after_close_is_stale(self):
        scope = TaskScope("test")

        async def closes_scope_then_returns():
            scope.close()
            return "value"

        result = await scope.run(closes_scope_then_returns())

        assert result.stale

    @pytest.mark.asyncio
    async def test_run_on_closed_scope_never_starts_the_call(self):
        scope = TaskScope("test")
        scope.close()
        calls = []

        async def work():
            calls.append(1)

        result = await scope.run(work())

        assert result.stale
        assert calls == []

    @pytest.mark.asyncio
    async def test_spawn_is_cancelled_on_close(self):
        scope = TaskScope("test")
        task = scope.spawn(asyncio.sleep(10))

        scope.close()
        scope.close()

        with pytest.raises(asyncio.CancelledError):
            await task
        assert scope.spawn(asyncio.sleep(0)) is None

    def test_scope_ids_are_unique(self):
        assert TaskScope().scope_id != TaskScope().scope_id


class TestEventBus:

    @pytest.mark.asyncio
    async def test_publish_reaches_every_subscriber(self):
        bus = EventBus()
        received = []

        async def first(payload):
            received.append(("first", payload["source"]))

        async def second(payload):
            received.append(("second", payload["source"]))

        bus.subscribe(events.TOPIC_SETTINGS_UPDATED, first)
        bus.subscribe(events.TOPIC_SETTINGS_UPDATED, second)
        await bus.publish(events.TOPIC_SETTINGS_UPDATED, events.create_settings_updated_event({}, "save"))

        assert sorted(received) == [("first", "save"), ("second", "save")]

    @pytest.mark.asyncio
    async def test_failing_handler_does_not_stop_others(self):
        bus = EventBus()
        received = []

        async def broken(payload):
            raise RuntimeError("handler bug")

        async def healthy(payload):
            received.append(payload)

        bus.subscribe("topic", broken)
        bus.subscribe("topic", healthy)
        await bus.publish("topic", {"n": 1})

        assert received == [{"n": 1}]

    def test_subscription_close_unsubscribes(self):
        bus = EventBus()

        async def handler(payload):
            pass

        subscription = bus.subscribe("topic", handler)
        assert bus.subscriber_count("topic") == 1
        subscription.close()
        subscription.close()
        assert bus.subscriber_count("topic") == 0


class TestRemoteCallError:

    def test_message_is_never_empty(self):
        assert RemoteCallError().message == "API call failed"
        assert RemoteCallError("   ").message == "API call failed"
        assert str(RemoteCallError("Sheet locked", status_code=423)) == "Sheet locked"


class TestAuthenticator:

    def test_exact_credentials_only(self):
        auth = StaticAuthenticator()
        assert auth.check("Admin", "MarketingComfort25")
        assert not auth.check("admin", "MarketingComfort25")
        assert not auth.check("Admin", "marketingcomfort25")
        assert not auth.check("Admin ", "MarketingComfort25")
        assert not auth.check("Ädmin", "")


class TestLogging:

    def test_setup_logging_writes_to_configured_dir(self, tmp_path):
        root = logging.getLogger()
        saved_handlers, saved_level = list(root.handlers), root.level
        try:
            log_file = setup_logging(LoggingConfig(log_dir=str(tmp_path), level="INFO"), force=True)
            logging.getLogger("catalogue.test").warning("written to file")
            for handler in root.handlers:
                handler.flush()

            assert log_file == tmp_path / "catalogue.log"
            assert "written to file" in log_file.read_text(encoding="utf-8")
            assert root.level == logging.INFO
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
