"""Commands that change how the client talks to the Web API."""

from __future__ import annotations

from spotify_tui.application.commands.base import BaseCommand
from spotify_tui.domain.shared.types import SearchLimit


class RefreshAuthenticationCommand(BaseCommand):
    """Exchange the refresh token for a new access token."""


class UpdateSearchLimitsCommand(BaseCommand):
    """Change the page sizes used for list views and for search facets."""

    large_search_limit: SearchLimit
    small_search_limit: SearchLimit
