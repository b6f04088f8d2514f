"""Spotify Web API and accounts-service adapters."""
