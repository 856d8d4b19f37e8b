"""Settings — tests for defaults and location-services key handling."""

from emergency_planner.config import Settings


def test_defaults_without_environment():
    settings = Settings(_env_file=None)
    assert settings.server_name == "emergency-medicare-planner"
    assert settings.log_level == "INFO"
    assert settings.log_format == "text"
    assert settings.google_maps_api_key is None
    assert settings.location_services_configured is False


def test_blank_key_counts_as_unset(monkeypatch):
    monkeypatch.setenv("GOOGLE_MAPS_API_KEY", "   ")
    assert Settings(_env_file=None).google_maps_api_key is None


def test_key_read_from_environment(monkeypatch):
    monkeypatch.setenv("GOOGLE_MAPS_API_KEY", "abc123")
    settings = Settings(_env_file=None)
    assert settings.google_maps_api_key == "abc123"
    assert settings.location_services_configured is True
