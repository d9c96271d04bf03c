import json

from backend import settings as app_settings


def test_defaults_written_on_first_load():
    assert app_settings.get_value("routine_id") == "PPL"
    assert app_settings.get_value("weight_unit") == "kg"
    assert app_settings.get_value("prefill_previous") is True
    with app_settings.settings_path().open() as fh:
        assert json.load(fh) == app_settings.DEFAULT_SETTINGS


def test_set_value_persists():
    app_settings.set_value("weight_unit", "lb")
    app_settings.set_value("theme", "dark")
    app_settings.reset_cache()
    assert app_settings.get_value("weight_unit") == "lb"
    assert app_settings.get_value("theme") == "dark"
    stored = json.loads(app_settings.settings_path().read_text())
    assert {"key": "theme", "value": "dark", "type": "str"} in stored


def test_corrupt_file_falls_back_to_defaults():
    path = app_settings.settings_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("{broken")
    assert app_settings.load_settings() == app_settings.DEFAULT_SETTINGS
    assert json.loads(path.read_text()) == app_settings.DEFAULT_SETTINGS


def test_missing_key_uses_default():
    app_settings.save_settings([{"key": "weight_unit", "value": "lb", "type": "str"}])
    assert app_settings.get_value("routine_id") == "PPL"
    assert app_settings.get_value("unknown") is None


def test_get_settings_is_cached():
    first = app_settings.get_settings()
    app_settings.settings_path().write_text("[]")
    assert app_settings.get_settings() is first
    app_settings.reset_cache()
    assert app_settings.get_settings() == []
