"""Centralized constants for configuration keys, database schema, and other shared values.

This module provides reusable constants that reduce magic strings and improve maintainability.
"""

from __future__ import annotations


class ConfigKeys:
    """Keys stored in the persisted client configuration."""

    DEVICE_ID = "device_id"
    REFRESH_TOKEN = "refresh_token"


class DatabaseTables:
    """Database table names."""

    CLIENT_CONFIG = "client_config"


class SQLPragmas:
    """SQLite PRAGMA statements."""

    JOURNAL_MODE_WAL = "PRAGMA journal_mode=WAL"
    BUSY_TIMEOUT = "PRAGMA busy_timeout={timeout}"


class SpotifyEndpoints:
    """Spotify accounts and Web API base URLs."""

    API_BASE_URL = "https://api.spotify.com/v1"
    TOKEN_URL = "https://accounts.spotify.com/api/token"  # nosec B105 - public endpoint


class SpotifyLimits:
    """Limits imposed by the Web API and the defaults used by list views."""

    LARGE_SEARCH_LIMIT = 20
    SMALL_SEARCH_LIMIT = 4
    MAX_IDS_PER_REQUEST = 50

    # Owner id of the playlists Spotify curates for each user.
    SPOTIFY_OWNER_ID = "spotify"
