"""Port interface for the OAuth authorization exchange."""

from __future__ import annotations

from abc import ABC, abstractmethod

from spotify_tui.domain.spotify.models import TokenInfo


class AuthorizationProvider(ABC):
    """Obtains fresh access tokens from the accounts service."""

    @abstractmethod
    async def refresh_access_token(self) -> TokenInfo | None:
        """Exchange the stored refresh token.

        Returns:
            The new token, or ``None`` when the exchange failed.
        """
        ...
