import pytest

from demo_app.config import DEFAULT_PORT, Settings, load_settings, parse_port


def test_default_port_when_unset():
    assert load_settings({}).port == DEFAULT_PORT == 3000


def test_port_from_environment():
    assert load_settings({"PORT": "8080"}).port == 8080


def test_reads_os_environ_by_default(monkeypatch):
    monkeypatch.setenv("PORT", "5000")
    assert load_settings().port == 5000


@pytest.mark.parametrize("raw", ["", "   ", "abc", "80.5", "0", "-1", "65536"])
def test_invalid_port_falls_back_to_default(raw):
    assert parse_port(raw) == 3000


def test_other_settings_are_fixed():
    settings = load_settings({"PORT": "9000", "HOST": "127.0.0.1", "LOG_LEVEL": "debug"})
    assert settings == Settings(port=9000)
    assert settings.host == "0.0.0.0"
    assert settings.log_level == "info"
