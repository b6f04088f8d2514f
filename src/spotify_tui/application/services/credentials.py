"""Access-token lifecycle."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, SecretStr

from spotify_tui.domain.shared.exceptions import CredentialRefreshError
from spotify_tui.domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from spotify_tui.domain.spotify.models import TokenInfo

    from ..interfaces.authorization import AuthorizationProvider

logger = logging.getLogger(__name__)

DEFAULT_EXPIRY_MARGIN_SECONDS = 10


class Credential(BaseModel):
    """An access token and the monotonic instant after which it must not be used."""

    model_config = ConfigDict(frozen=True)

    access_token: SecretStr
    expires_at: float


class CredentialManager:
    """Owns the current credential and replaces it wholesale on refresh.

    The manager never schedules itself: whoever drives the dispatcher checks
    :meth:`is_expired` and submits a refresh command in time.
    """

    def __init__(
        self,
        *,
        authorization: AuthorizationProvider,
        expiry_margin_seconds: int = DEFAULT_EXPIRY_MARGIN_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._authorization = authorization
        self._margin = expiry_margin_seconds
        self._clock = clock
        self._credential: Credential | None = None

    @property
    def credential(self) -> Credential | None:
        return self._credential

    @property
    def access_token(self) -> str | None:
        if self._credential is None:
            return None
        return self._credential.access_token.get_secret_value()

    def install(self, token_info: TokenInfo) -> Credential:
        """Adopt a freshly issued token.

        The expiry is pulled ``margin`` seconds ahead of the real one so a
        request never goes out with a token that dies in flight.
        """
        issued_at = self._clock()
        self._credential = Credential(
            access_token=SecretStr(token_info.access_token),
            expires_at=issued_at + token_info.expires_in - self._margin,
        )
        logger.debug(LogTemplates.CREDENTIAL_INSTALLED, token_info.expires_in)
        return self._credential

    def is_expired(self) -> bool:
        if self._credential is None:
            return True
        return self._clock() >= self._credential.expires_at

    async def refresh(self) -> Credential:
        """Run the authorization exchange and swap in the new credential.

        Raises:
            CredentialRefreshError: If the exchange produced no token. The
                previous credential stays installed.
        """
        logger.debug(LogTemplates.CREDENTIAL_REFRESHING)
        token_info = await self._authorization.refresh_access_token()
        if token_info is None:
            raise CredentialRefreshError()

        credential = self.install(token_info)
        logger.info(LogTemplates.CREDENTIAL_REFRESHED, token_info.expires_in)
        return credential
