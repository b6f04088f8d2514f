"""Dependency Injection Container

Manages the application's dependency graph, providing lazy initialization
and lifecycle management for the dispatcher and its collaborators.
Components are created on-demand and cached for reuse throughout the application.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ..application.interfaces.authorization import AuthorizationProvider
    from ..application.interfaces.config_store import ClientConfigStore
    from ..application.interfaces.spotify_client import SpotifyClient
    from ..application.services.credentials import CredentialManager
    from ..application.services.dispatch_loop import DispatchLoop
    from ..application.services.dispatcher import CommandDispatcher
    from ..application.services.shared_state import SharedState
    from ..infrastructure.persistence.database import Database
    from .settings import Settings


@dataclass
class Container:
    """Dependency injection container.

    This container manages all application dependencies and their lifecycle.
    Components are lazily initialized when first accessed.
    """

    settings: Settings

    # Persistence layer
    _database: Database | None = None
    _config_store: ClientConfigStore | None = None

    # Infrastructure adapters
    _authorization: AuthorizationProvider | None = None
    _spotify_client: SpotifyClient | None = None

    # Application services
    _shared_state: SharedState | None = None
    _credentials: CredentialManager | None = None
    _dispatcher: CommandDispatcher | None = None
    _dispatch_loop: DispatchLoop | None = None

    # === Persistence ===

    @property
    def database(self) -> Database:
        """Get the database connection manager."""
        if self._database is None:
            from ..infrastructure.persistence.database import Database

            self._database = Database(self.settings.database.url, settings=self.settings.database)
        return self._database

    @property
    def config_store(self) -> ClientConfigStore:
        """Get the persisted client configuration."""
        if self._config_store is None:
            from ..infrastructure.persistence.config_store import SQLiteClientConfigStore

            self._config_store = SQLiteClientConfigStore(self.database)
        return self._config_store

    # === Infrastructure Adapters ===

    @property
    def authorization(self) -> AuthorizationProvider:
        """Get the refresh-token exchange."""
        if self._authorization is None:
            from ..infrastructure.spotify.oauth import SpotifyOAuth

            self._authorization = SpotifyOAuth(
                self.settings.spotify, config_store=self.config_store
            )
        return self._authorization

    @property
    def spotify_client(self) -> SpotifyClient:
        """Get the Web API client."""
        if self._spotify_client is None:
            from ..infrastructure.spotify.web_api_client import SpotifyWebApiClient

            credentials = self.credentials
            self._spotify_client = SpotifyWebApiClient(
                lambda: credentials.access_token,
                base_url=self.settings.spotify.api_base_url,
                timeout=self.settings.dispatch.request_timeout_seconds,
            )
        return self._spotify_client

    # === Application Services ===

    @property
    def shared_state(self) -> SharedState:
        """Get the lock-guarded application state."""
        if self._shared_state is None:
            from ..application.services.shared_state import SharedState

            self._shared_state = SharedState()
        return self._shared_state

    @property
    def credentials(self) -> CredentialManager:
        """Get the credential lifecycle manager."""
        if self._credentials is None:
            from ..application.services.credentials import CredentialManager

            self._credentials = CredentialManager(
                authorization=self.authorization,
                expiry_margin_seconds=self.settings.dispatch.token_expiry_margin_seconds,
            )
        return self._credentials

    @property
    def dispatcher(self) -> CommandDispatcher:
        """Get the command dispatcher."""
        if self._dispatcher is None:
            from ..application.services.dispatcher import CommandDispatcher

            self._dispatcher = CommandDispatcher(
                spotify_client=self.spotify_client,
                credentials=self.credentials,
                config_store=self.config_store,
                large_search_limit=self.settings.dispatch.large_search_limit,
                small_search_limit=self.settings.dispatch.small_search_limit,
            )
        return self._dispatcher

    @property
    def dispatch_loop(self) -> DispatchLoop:
        """Get the background dispatch loop."""
        if self._dispatch_loop is None:
            from ..application.services.dispatch_loop import DispatchLoop

            self._dispatch_loop = DispatchLoop(
                dispatcher=self.dispatcher, state=self.shared_state
            )
        return self._dispatch_loop

    # === Lifecycle ===

    async def initialize(self) -> None:
        """Initialize all async resources and start the dispatch loop."""
        await self.database.initialize()
        await self.config_store.load()
        self.dispatch_loop.start()

    async def shutdown(self) -> None:
        """Shutdown and cleanup all resources."""
        if self._dispatch_loop is not None:
            await self._dispatch_loop.stop()

        for name, resource in (
            ("spotify client", self._spotify_client),
            ("authorization", self._authorization),
        ):
            close = getattr(resource, "close", None)
            if close is None:
                continue
            try:
                await close()
            except Exception as exc:
                logger.warning("Failed closing %s: %r", name, exc)

        if self._database is not None:
            await self._database.close()


def create_container(settings: Settings) -> Container:
    """Create a new dependency injection container."""
    return Container(settings)
