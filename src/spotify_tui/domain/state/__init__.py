"""
Application State

The shared aggregate, its navigation routes and paged collections.
"""

from spotify_tui.domain.state.app_state import (
    AppState,
    ArtistView,
    Library,
    SearchResults,
    SelectedAlbum,
    SelectedFullAlbum,
    TrackTable,
)
from spotify_tui.domain.state.navigation import (
    ActiveBlock,
    AlbumTableContext,
    ArtistBlock,
    Route,
    RouteId,
    TrackTableContext,
)
from spotify_tui.domain.state.pagination import ScrollableResultPages

__all__ = [
    "ActiveBlock",
    "AlbumTableContext",
    "AppState",
    "ArtistBlock",
    "ArtistView",
    "Library",
    "Route",
    "RouteId",
    "ScrollableResultPages",
    "SearchResults",
    "SelectedAlbum",
    "SelectedFullAlbum",
    "TrackTable",
    "TrackTableContext",
]
