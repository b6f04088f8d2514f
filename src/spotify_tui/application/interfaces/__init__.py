"""
Application Interfaces (Ports)

Abstract interfaces that define contracts between the application
layer and infrastructure adapters. These are the "ports" in
hexagonal architecture.
"""

from spotify_tui.application.interfaces.authorization import AuthorizationProvider
from spotify_tui.application.interfaces.config_store import ClientConfigStore
from spotify_tui.application.interfaces.spotify_client import SpotifyClient

__all__ = [
    "AuthorizationProvider",
    "ClientConfigStore",
    "SpotifyClient",
]
