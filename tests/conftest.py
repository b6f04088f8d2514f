from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio

# ============================================================================
# Database Fixtures
# ============================================================================


@pytest_asyncio.fixture
async def in_memory_database():
    """Create an in-memory SQLite database for testing."""
    from spotify_tui.infrastructure.persistence.database import Database

    db = Database(":memory:")
    await db.initialize()
    yield db
    await db.close()


@pytest_asyncio.fixture
async def config_store(in_memory_database):
    """Create a client configuration store with in-memory database."""
    from spotify_tui.infrastructure.persistence.config_store import SQLiteClientConfigStore

    store = SQLiteClientConfigStore(in_memory_database)
    await store.load()
    return store


# ============================================================================
# Dispatcher Fixtures
# ============================================================================


@pytest.fixture
def spotify():
    """Mock Web API client.

    By default nothing is playing and no track is saved.
    """
    from spotify_tui.application.interfaces.spotify_client import SpotifyClient

    client = AsyncMock(spec=SpotifyClient)
    client.current_playback.return_value = None
    client.current_user_saved_tracks_contains.side_effect = lambda ids: [False] * len(ids)
    return client


@pytest.fixture
def mock_config_store():
    """Mock configuration store with a selected device."""
    from spotify_tui.application.interfaces.config_store import ClientConfigStore

    store = MagicMock(spec=ClientConfigStore)
    store.device_id = "device-1"
    store.set_device_id = AsyncMock()
    return store


@pytest.fixture
def mock_credentials():
    """Mock credential manager."""
    credentials = MagicMock()
    credentials.refresh = AsyncMock()
    credentials.access_token = "access-token"
    return credentials


@pytest.fixture
def shared_state():
    from spotify_tui.application.services.shared_state import SharedState

    return SharedState()


@pytest.fixture
def dispatcher(spotify, mock_credentials, mock_config_store):
    from spotify_tui.application.services.dispatcher import CommandDispatcher

    return CommandDispatcher(
        spotify_client=spotify,
        credentials=mock_credentials,
        config_store=mock_config_store,
        clock=lambda: 100.0,
    )
