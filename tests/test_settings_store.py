import json
import logging

from schooladmin.settings_store import Settings, SettingsStore, export_data, import_data


def test_load_creates_defaults_when_missing(tmp_path):
    path = tmp_path / "settings.json"
    settings = SettingsStore(path).load()
    assert settings == Settings()
    assert path.exists()
    assert json.loads(path.read_text(encoding="utf-8"))["school_name"] == "SchoolAdmin Academy"


def test_save_then_load(tmp_path):
    store = SettingsStore(tmp_path / "nested" / "settings.json")
    settings = Settings(school_name="Hillside High", sms_notifications=True, appearance_mode="Dark")
    store.save(settings)
    loaded = store.load()
    assert loaded == settings
    assert loaded.dark_mode


def test_from_dict_coerces_and_falls_back():
    settings = Settings.from_dict(
        {
            "school_name": None,
            "auto_backup": "no",
            "push_notifications": "yes",
            "maintenance_mode": "maybe",
            "backup_frequency": "yearly",
            "appearance_mode": "Sepia",
            "unknown_key": 1,
        }
    )
    defaults = Settings()
    assert settings.school_name == defaults.school_name
    assert settings.auto_backup is False
    assert settings.push_notifications is True
    assert settings.maintenance_mode is defaults.maintenance_mode
    assert settings.backup_frequency == "daily"
    assert settings.appearance_mode == "Light"


def test_non_object_file_gives_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert SettingsStore(path).load() == Settings()


def test_save_is_logged(tmp_path, caplog):
    with caplog.at_level(logging.INFO, logger="schooladmin.settings_store"):
        SettingsStore(tmp_path / "settings.json").save(Settings())
    assert "Saving settings" in caplog.text


def test_export_and_import_are_logged_stubs(caplog):
    with caplog.at_level(logging.INFO, logger="schooladmin.settings_store"):
        assert export_data() is None
        assert import_data() is None
    assert "Exporting data..." in caplog.text
    assert "Importing data..." in caplog.text
