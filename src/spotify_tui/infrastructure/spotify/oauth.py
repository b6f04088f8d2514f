"""Refresh-token exchange against the Spotify accounts service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError as PydanticValidationError

from spotify_tui.application.interfaces.authorization import AuthorizationProvider
from spotify_tui.domain.shared.constants import ConfigKeys
from spotify_tui.domain.shared.exceptions import ConfigPersistenceError
from spotify_tui.domain.shared.messages import ErrorMessages, LogTemplates
from spotify_tui.domain.spotify.models import TokenInfo

if TYPE_CHECKING:
    from spotify_tui.application.interfaces.config_store import ClientConfigStore
    from spotify_tui.config.settings import SpotifySettings

logger = logging.getLogger(__name__)

TOKEN_TIMEOUT: float = 15.0


class SpotifyOAuth(AuthorizationProvider):
    """Exchanges the stored refresh token for a new access token.

    A refresh token stored in the config store takes precedence over the one
    from settings, because Spotify may rotate it on any exchange.
    """

    def __init__(
        self,
        settings: SpotifySettings,
        *,
        config_store: ClientConfigStore | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings
        self._config_store = config_store
        self._client = http_client
        self._owns_client = http_client is None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=TOKEN_TIMEOUT)
        return self._client

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
        self._client = None

    async def _current_refresh_token(self) -> str | None:
        if self._config_store is not None:
            stored = await self._config_store.get(ConfigKeys.REFRESH_TOKEN)
            if stored:
                return stored
        return self._settings.refresh_token.get_secret_value() or None

    async def refresh_access_token(self) -> TokenInfo | None:
        client_id = self._settings.client_id
        if not client_id:
            logger.error(ErrorMessages.CLIENT_ID_REQUIRED)
            return None

        refresh_token = await self._current_refresh_token()
        if refresh_token is None:
            logger.error(ErrorMessages.NO_REFRESH_TOKEN)
            return None

        data = {"grant_type": "refresh_token", "refresh_token": refresh_token}
        client_secret = self._settings.client_secret.get_secret_value()
        auth: tuple[str, str] | None = None
        if client_secret:
            auth = (client_id, client_secret)
        else:
            # Public (PKCE) clients identify themselves in the form body.
            data["client_id"] = client_id

        try:
            if auth is not None:
                response = await self._get_client().post(
                    self._settings.token_url, data=data, auth=auth
                )
            else:
                response = await self._get_client().post(self._settings.token_url, data=data)
        except httpx.HTTPError as e:
            logger.warning(LogTemplates.CREDENTIAL_REFRESH_FAILED, e)
            return None

        if response.is_error:
            logger.warning(LogTemplates.TOKEN_EXCHANGE_REJECTED, response.status_code, response.text)
            return None

        try:
            token_info = TokenInfo.model_validate(response.json())
        except (ValueError, PydanticValidationError) as e:
            logger.warning(LogTemplates.CREDENTIAL_REFRESH_FAILED, e)
            return None

        if token_info.refresh_token and token_info.refresh_token != refresh_token:
            await self._store_rotated_refresh_token(token_info.refresh_token)

        return token_info

    async def _store_rotated_refresh_token(self, refresh_token: str) -> None:
        if self._config_store is None:
            return
        logger.info(LogTemplates.REFRESH_TOKEN_ROTATED)
        try:
            await self._config_store.set(ConfigKeys.REFRESH_TOKEN, refresh_token)
        except ConfigPersistenceError as e:
            # The new access token is still valid; the old refresh token may
            # keep working until Spotify revokes it.
            logger.warning(LogTemplates.REFRESH_TOKEN_NOT_SAVED, e)
