"""Tests for shared/settings_store.py — JSON settings persistence."""

from __future__ import annotations

import json

from weather_insert.models import Provider, Settings, Units

from shared.settings_store import load_settings, save_settings


class TestLoadSettings:
    def test_missing_file_gives_defaults(self, settings_path) -> None:
        assert load_settings(settings_path) == Settings()

    def test_partial_file_merged_over_defaults(self, settings_path) -> None:
        settings_path.parent.mkdir(parents=True)
        settings_path.write_text(json.dumps({"location": "Tokyo", "units": "metric"}))
        settings = load_settings(settings_path)
        assert settings.location == "Tokyo"
        assert settings.units is Units.METRIC
        assert settings.provider is Provider.OPEN_METEO
        assert settings.show_wind is True

    def test_unknown_keys_ignored(self, settings_path) -> None:
        settings_path.parent.mkdir(parents=True)
        settings_path.write_text(json.dumps({"location": "Oslo", "theme": "dark"}))
        assert load_settings(settings_path).location == "Oslo"

    def test_corrupt_file_gives_defaults(self, settings_path, caplog) -> None:
        settings_path.parent.mkdir(parents=True)
        settings_path.write_text("{not json")
        assert load_settings(settings_path) == Settings()
        assert "Ignoring unreadable settings file" in caplog.text

    def test_invalid_value_gives_defaults(self, settings_path) -> None:
        settings_path.parent.mkdir(parents=True)
        settings_path.write_text(json.dumps({"provider": "darksky"}))
        assert load_settings(settings_path) == Settings()


class TestSaveSettings:
    def test_round_trip(self, settings_path) -> None:
        settings = Settings(
            location="Lima",
            units=Units.METRIC,
            provider=Provider.WTTR,
            template="{icon} {temp} | Humidity: {humidity}",
            show_wind=False,
            show_humidity=True,
        )
        save_settings(settings, settings_path)
        assert settings_path.exists()
        assert load_settings(settings_path) == settings

    def test_enums_saved_as_values(self, settings_path) -> None:
        save_settings(Settings(provider=Provider.WTTR), settings_path)
        saved = json.loads(settings_path.read_text(encoding="utf-8"))
        assert saved["provider"] == "wttr"
        assert saved["units"] == "imperial"
