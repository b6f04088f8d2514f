"""
Application Services

The dispatcher and its collaborators: the lock-guarded state, the
credential manager and the background dispatch loop.
"""

from spotify_tui.application.services.credentials import Credential, CredentialManager
from spotify_tui.application.services.dispatch_loop import DispatchLoop
from spotify_tui.application.services.dispatcher import CommandDispatcher
from spotify_tui.application.services.shared_state import SharedState

__all__ = [
    "CommandDispatcher",
    "Credential",
    "CredentialManager",
    "DispatchLoop",
    "SharedState",
]
