# tests/test_config.py
"""
Tests for tooling configuration.
"""
from bf_i18n.config import Config


def test_defaults_and_type_conversions(tmp_path):
    config = Config(tmp_path / "missing.ini")

    assert config.get('conversion', 'from_mode') == 'rails'
    assert config.get('conversion', 'to_mode') == 'laravel'
    assert config.get('conversion', 'strict') is False
    assert config.get('validation', 'reference_locale') == 'en'
    assert config.get('logging', 'log_level') == 'WARNING'

    # Missing keys fall back cleanly
    assert config.get('missing', 'key', fallback=123) == 123


def test_file_overrides_defaults(tmp_path):
    path = tmp_path / "bf_i18n.ini"
    path.write_text(
        "[conversion]\nfrom_mode = laravel\nstrict = true\n\n[logging]\nlog_level = debug\n",
        encoding="utf-8",
    )
    config = Config(path)

    assert config.get('conversion', 'from_mode') == 'laravel'
    assert config.get('conversion', 'to_mode') == 'laravel'
    assert config.get('conversion', 'strict') is True
    assert config.get('logging', 'log_level') == 'DEBUG'


def test_environment_variable_selects_file(tmp_path, monkeypatch):
    path = tmp_path / "custom.ini"
    path.write_text("[validation]\nreference_locale = ja\n", encoding="utf-8")
    monkeypatch.setenv("BF_I18N_CONFIG", str(path))

    assert Config().get('validation', 'reference_locale') == 'ja'
