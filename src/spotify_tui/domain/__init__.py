"""
Domain Layer

Contains pure models and state, free of I/O:
- shared/: Cross-cutting exceptions, messages and constrained types
- spotify/: Web API resource models and value objects
- state/: The application state aggregate, navigation and paged collections
"""

from spotify_tui.domain.shared.exceptions import DomainError
from spotify_tui.domain.state.app_state import AppState

__all__ = [
    "AppState",
    "DomainError",
]
