"""Tests for the configuration check script."""
import check_config


def test_check_env_var_missing(monkeypatch):
    monkeypatch.delenv('SOME_UNSET_VAR', raising=False)

    ok, status, value = check_config.check_env_var('SOME_UNSET_VAR')

    assert ok is False
    assert status == "MISSING"


def test_check_env_var_placeholder(monkeypatch):
    monkeypatch.setenv('SECRET_KEY', 'change-this-key')

    ok, status, _ = check_config.check_env_var('SECRET_KEY', sensitive=True)

    assert ok is False
    assert status == "PLACEHOLDER"


def test_check_env_var_masks_sensitive(monkeypatch):
    monkeypatch.setenv('MONGO_URI', 'mongodb://db.internal:27017/testmaker')

    ok, status, value = check_config.check_env_var('MONGO_URI', sensitive=True)

    assert ok is True
    assert value == "mongodb://..."


def test_main_reports_missing_required(monkeypatch):
    monkeypatch.delenv('SECRET_KEY', raising=False)
    monkeypatch.setenv('MONGO_URI', 'mongodb://db.internal:27017/testmaker')

    assert check_config.main() == 1


def test_config_list_covers_settings():
    """Every setting the app reads is reported by the check."""
    from src.infrastructure.config import Settings

    checked = {name for name, _, _ in check_config.CONFIGS}

    assert set(Settings.model_fields) - {"APP_NAME"} <= checked


def test_main_reports_optional_settings(monkeypatch, capsys):
    monkeypatch.setenv('SECRET_KEY', 'a-real-secret-value')
    monkeypatch.setenv('MONGO_URI', 'mongodb://db.internal:27017/testmaker')
    monkeypatch.setenv('SAMPLE_ANSWER_COUNT', '3')

    assert check_config.main() == 0

    output = capsys.readouterr().out
    assert "SAMPLE_ANSWER_COUNT" in output
    assert "DEBUG" in output
