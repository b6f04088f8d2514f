"""Base exception classes for domain-level errors."""

from __future__ import annotations

from spotify_tui.domain.shared.messages import ErrorMessages


class DomainError(Exception):
    """Base exception for all domain-level errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class SpotifyApiError(DomainError):
    """Raised when a remote Web API call fails for any reason.

    Network errors, authorization failures, rate limiting and missing
    resources all surface as this single type; ``status_code`` is ``None``
    when the request never produced an HTTP response.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message, code="SPOTIFY_API_ERROR")
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.message} (status {self.status_code})"


class NoDeviceSelectedError(DomainError):
    """Raised when a playback command runs without a selected output device."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or ErrorMessages.NO_DEVICE_SELECTED, code="NO_DEVICE_SELECTED")


class CredentialRefreshError(DomainError):
    """Raised when the access token could not be refreshed."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message or ErrorMessages.TOKEN_REFRESH_FAILED, code="CREDENTIAL_REFRESH_FAILED"
        )


class ConfigPersistenceError(DomainError):
    """Raised when the client configuration could not be written."""

    def __init__(self, key: str, message: str | None = None) -> None:
        msg = message or f"Could not persist configuration value '{key}'"
        super().__init__(msg, code="CONFIG_PERSISTENCE_ERROR")
        self.key = key
