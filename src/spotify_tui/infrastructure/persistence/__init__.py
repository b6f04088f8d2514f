"""SQLite persistence for the client configuration."""
