"""Tests for SettingsStore load/save/merge and subscriber notification."""

import httpx
import pytest

from catalogue.shared.core.event_bus import EventBus
from catalogue.shared.domain.models import DisplaySettings
from catalogue.shared.domain.settings import SettingsStore


@pytest.fixture
def settings_store(gateway):
    return SettingsStore(gateway, EventBus())


class TestMerge:

    def test_text_fields_overwrite_when_non_empty(self, settings_store):
        merged = settings_store.merge({"primaryColor": "#111111", "fontFamily": "   "})

        assert merged.primary_color == "#111111"
        assert merged.font_family == DisplaySettings().font_family

    def test_numeric_fields_parse_strings(self, settings_store):
        merged = settings_store.merge({"baseFontSizePx": "18", "categoryGridColumns": "4"})

        assert merged.base_font_size_px == 18
        assert merged.category_grid_columns == 4

    @pytest.mark.parametrize("bad", ["abc", "", None, 0, -2, "2.5"])
    def test_invalid_grid_columns_keep_previous_value(self, settings_store, bad):
        settings_store.merge({"categoryGridColumns": 4})

        merged = settings_store.merge({"categoryGridColumns": bad})

        assert merged.category_grid_columns == 4

    def test_invalid_font_size_keeps_previous_value(self, settings_store):
        merged = settings_store.merge({"baseFontSizePx": "huge"})
        assert merged.base_font_size_px == 16

    def test_unknown_keys_and_non_mappings_are_ignored(self, settings_store):
        before = settings_store.current
        assert settings_store.merge({"somethingElse": 1}) == before
        assert settings_store.merge(["not", "a", "mapping"]) == before


class TestLoad:

    @pytest.mark.asyncio
    async def test_load_merges_remote_settings(self, settings_store, endpoint):
        endpoint.actions["getSettings"] = {
            "success": True,
            "settings": {"primaryColor": "#ff0000", "categoryGridColumns": 2},
        }

        settings = await settings_store.load()

        assert endpoint.actions_sent == ["getSettings"]
        assert settings.primary_color == "#ff0000"
        assert settings.category_grid_columns == 2
        assert settings.secondary_color == "#28a745"
        assert settings_store.loaded

    @pytest.mark.asyncio
    async def test_load_failure_keeps_defaults_and_marks_loaded(self, settings_store, endpoint):
        endpoint.actions["getSettings"] = httpx.ConnectError("offline")

        settings = await settings_store.load()

        assert settings == DisplaySettings()
        assert settings_store.loaded

    @pytest.mark.asyncio
    async def test_load_notifies_subscribers(self, settings_store, endpoint):
        endpoint.actions["getSettings"] = {"settings": {"fontFamily": "Georgia"}}
        seen = []

        async def on_settings(settings):
            seen.append(settings.font_family)

        settings_store.subscribe(on_settings)
        await settings_store.load()

        assert seen == ["Georgia"]


class TestSave:

    @pytest.mark.asyncio
    async def test_save_sends_wire_settings_and_merges(self, settings_store, endpoint):
        endpoint.actions["updateSettings"] = {"success": True, "message": "Saved"}
        new = DisplaySettings(primary_color="#123456", category_grid_columns=5)

        result = await settings_store.save(new)

        assert result.success
        assert result.message == "Saved"
        sent = endpoint.posted[0]
        assert sent["action"] == "updateSettings"
        assert sent["settings"]["primaryColor"] == "#123456"
        assert sent["settings"]["categoryGridColumns"] == 5
        assert settings_store.current.primary_color == "#123456"

    @pytest.mark.asyncio
    async def test_save_prefers_echoed_settings(self, settings_store, endpoint):
        endpoint.actions["updateSettings"] = {
            "success": True,
            "settings": {"primaryColor": "#abcdef"},
        }

        await settings_store.save(DisplaySettings(primary_color="#123456"))

        assert settings_store.current.primary_color == "#abcdef"

    @pytest.mark.asyncio
    async def test_failed_save_leaves_settings_untouched(self, settings_store, endpoint):
        endpoint.actions["updateSettings"] = {"error": "denied"}
        notified = []

        async def on_settings(settings):
            notified.append(settings)

        settings_store.subscribe(on_settings)
        result = await settings_store.save(DisplaySettings(primary_color="#000000"))

        assert not result.success
        assert result.message == "denied"
        assert settings_store.current == DisplaySettings()
        assert notified == []

    @pytest.mark.asyncio
    async def test_save_without_success_flag_is_a_failure(self, settings_store, endpoint):
        endpoint.actions["updateSettings"] = {"status": "ok"}

        result = await settings_store.save(DisplaySettings(primary_color="#000000"))

        assert not result.success
        assert settings_store.current.primary_color == "#007BFF"

    @pytest.mark.asyncio
    async def test_closed_subscription_stops_notifications(self, settings_store, endpoint):
        endpoint.actions["updateSettings"] = {"success": True}
        calls = []

        async def on_settings(settings):
            calls.append(settings)

        subscription = settings_store.subscribe(on_settings)
        await settings_store.save(DisplaySettings())
        subscription.close()
        await settings_store.save(DisplaySettings())

        assert len(calls) == 1


@pytest.mark.asyncio
async def test_store_start_loads_settings_once(store, endpoint):
    endpoint.actions["getSettings"] = {"settings": {"secondaryColor": "#333333"}}

    await store.start()
    await store.start()

    assert endpoint.actions_sent == ["getSettings"]
    assert store.settings.current.secondary_color == "#333333"


@pytest.mark.asyncio
async def test_store_settings_version_follows_loads_and_saves(store, endpoint):
    assert store.settings_version == 0

    await store.start()
    await store.settings.save(DisplaySettings(category_grid_columns=2))

    assert store.settings_version == 2


@pytest.mark.asyncio
async def test_failed_save_keeps_settings_version(store, endpoint):
    endpoint.actions["updateSettings"] = {"error": "denied"}

    await store.settings.save(DisplaySettings(category_grid_columns=2))

    assert store.settings_version == 0
