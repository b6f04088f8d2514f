"""Infrastructure layer - external systems integration.

This layer contains implementations for:
- Spotify (httpx Web API client, OAuth refresh-token exchange)
- Persistence (SQLite client configuration store)
"""

from spotify_tui.infrastructure.persistence.config_store import SQLiteClientConfigStore
from spotify_tui.infrastructure.persistence.database import Database
from spotify_tui.infrastructure.spotify.oauth import SpotifyOAuth
from spotify_tui.infrastructure.spotify.web_api_client import SpotifyWebApiClient

__all__ = [
    "Database",
    "SQLiteClientConfigStore",
    "SpotifyOAuth",
    "SpotifyWebApiClient",
]
