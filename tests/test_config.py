"""Tests for environment-driven capture settings."""
from zwiftcap.config import CaptureSettings, get_settings


def test_defaults(monkeypatch):
    for name in ("ZWIFT_SERVER_PORT", "ZWIFT_INTERFACE", "ZWIFT_TRAILER_LENGTH", "ZWIFT_LOG_RING_SIZE"):
        monkeypatch.delenv(name, raising=False)
    settings = CaptureSettings(_env_file=None)
    assert settings.server_port == 3022
    assert settings.interface is None
    assert settings.trailer_length == 4
    assert settings.log_ring_size == 200
    assert settings.bpf_filter == "udp port 3022"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("ZWIFT_SERVER_PORT", "4000")
    monkeypatch.setenv("ZWIFT_INTERFACE", "eth1")
    settings = CaptureSettings(_env_file=None)
    assert settings.server_port == 4000
    assert settings.interface == "eth1"
    assert settings.bpf_filter == "udp port 4000"


def test_field_names_accepted():
    settings = CaptureSettings(server_port=5000, trailer_length=2)
    assert settings.server_port == 5000
    assert settings.trailer_length == 2


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
