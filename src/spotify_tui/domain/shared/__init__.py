"""
Shared Domain Kernel

Contains exceptions, messages and constrained types shared across the package.
"""

from spotify_tui.domain.shared.exceptions import (
    ConfigPersistenceError,
    CredentialRefreshError,
    DomainError,
    NoDeviceSelectedError,
    SpotifyApiError,
)

__all__ = [
    "DomainError",
    "SpotifyApiError",
    "NoDeviceSelectedError",
    "CredentialRefreshError",
    "ConfigPersistenceError",
]
