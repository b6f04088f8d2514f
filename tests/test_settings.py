"""
Unit Tests for Application Settings Configuration

Tests for:
- Default values for every settings group
- Loading nested settings from environment variables
- Custom validators (database URL, log level, market)
- Settings caching and clearing
"""

import pytest
from pydantic import SecretStr, ValidationError

from spotify_tui.config.settings import (
    DatabaseSettings,
    DispatchSettings,
    Settings,
    SpotifySettings,
    clear_settings_cache,
    get_settings,
)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Run without the developer's .env file or exported variables."""
    monkeypatch.chdir(tmp_path)
    for name in ("ENVIRONMENT", "DEBUG", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


class TestDatabaseSettings:
    def test_create_with_defaults(self):
        """Should create DatabaseSettings with default values."""
        db = DatabaseSettings()

        assert db.url == "sqlite:///data/spotify-tui.db"
        assert db.busy_timeout_ms == 5000
        assert db.connection_timeout_s == 10

    def test_invalid_url_scheme_raises_error(self):
        """Should raise ValidationError for non-SQLite URLs."""
        with pytest.raises(ValidationError, match="Database URL must start with"):
            DatabaseSettings(url="postgresql://localhost/db")

    def test_busy_timeout_alias(self):
        assert DatabaseSettings(busy_timeout=2000).busy_timeout_ms == 2000

    def test_busy_timeout_bounds(self):
        with pytest.raises(ValidationError):
            DatabaseSettings(busy_timeout_ms=999)


class TestSpotifySettings:
    def test_defaults(self):
        spotify = SpotifySettings()

        assert spotify.client_id == ""
        assert spotify.client_secret.get_secret_value() == ""
        assert spotify.market is None
        assert spotify.token_url == "https://accounts.spotify.com/api/token"
        assert spotify.api_base_url == "https://api.spotify.com/v1"

    def test_secrets_are_masked(self):
        spotify = SpotifySettings(client_secret=SecretStr("hunter2"))

        assert "hunter2" not in repr(spotify)

    @pytest.mark.parametrize(("raw", "expected"), [(" se ", "SE"), ("", None)])
    def test_market_normalized(self, raw, expected):
        assert SpotifySettings(market=raw).market == expected

    def test_invalid_market(self):
        with pytest.raises(ValidationError):
            SpotifySettings(market="SWE")

    def test_settings_are_frozen(self):
        spotify = SpotifySettings()

        with pytest.raises(ValidationError):
            spotify.client_id = "other"


class TestDispatchSettings:
    def test_defaults(self):
        dispatch = DispatchSettings()

        assert dispatch.large_search_limit == 20
        assert dispatch.small_search_limit == 4
        assert dispatch.token_expiry_margin_seconds == 10
        assert dispatch.request_timeout_seconds == 30.0

    @pytest.mark.parametrize("limit", [0, 51])
    def test_search_limit_bounds(self, limit):
        with pytest.raises(ValidationError):
            DispatchSettings(large_search_limit=limit)


class TestSettings:
    def test_defaults(self):
        settings = Settings()

        assert settings.environment == "development"
        assert settings.debug is False
        assert settings.log_level == "INFO"

    def test_log_level_uppercased(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError, match="Invalid log level"):
            Settings(log_level="verbose")

    def test_nested_environment_variables(self, monkeypatch):
        """Should read nested groups using the double-underscore delimiter."""
        monkeypatch.setenv("SPOTIFY__CLIENT_ID", "env-client")
        monkeypatch.setenv("SPOTIFY__MARKET", "de")
        monkeypatch.setenv("DISPATCH__LARGE_SEARCH_LIMIT", "35")
        monkeypatch.setenv("DATABASE__URL", "sqlite:///:memory:")

        settings = Settings()

        assert settings.spotify.client_id == "env-client"
        assert settings.spotify.market == "DE"
        assert settings.dispatch.large_search_limit == 35
        assert settings.database.url == "sqlite:///:memory:"

    def test_get_settings_is_cached(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "WARNING")

        first = get_settings()
        monkeypatch.setenv("LOG_LEVEL", "ERROR")

        assert get_settings() is first
        clear_settings_cache()
        assert get_settings().log_level == "ERROR"
