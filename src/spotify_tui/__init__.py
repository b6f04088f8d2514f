"""Command dispatch and state synchronization core for a Spotify terminal client."""

__version__ = "0.1.0"
