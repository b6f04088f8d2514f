"""Centralized message constants for error messages, validation, and user feedback."""

from __future__ import annotations


class ErrorMessages:
    """Error messages for exceptions and validation failures."""

    # Playback Errors
    NO_DEVICE_SELECTED = "No device_id selected"

    # Authentication Errors
    TOKEN_REFRESH_FAILED = "Failed to refresh authentication token"
    NO_REFRESH_TOKEN = "No refresh token available; run the authorization flow first"
    NO_ACCESS_TOKEN = "No access token available; refresh authentication first"
    CLIENT_ID_REQUIRED = "SPOTIFY__CLIENT_ID environment variable is required"

    # Remote API Errors
    EMPTY_API_RESPONSE = "Empty response from Spotify API"
    UNEXPECTED_API_RESPONSE = "Unexpected response from Spotify API: {detail}"
    API_REQUEST_FAILED = "Spotify API request failed: {method} {path}"
    API_TRANSPORT_FAILED = "Could not reach Spotify API: {error}"

    # Configuration Errors
    INVALID_DATABASE_URL = "Database URL must start with sqlite://"
    INVALID_LOG_LEVEL = "Invalid log level: {level}. Must be one of {valid_levels}"


class LogTemplates:
    """Log message templates for structured logging.

    Use these with logger.info(), logger.error(), etc. and pass values as parameters
    for proper log formatting and structured logging support.
    """

    # Application Lifecycle
    APP_STARTING = "Starting spotify-tui (environment: %s)"
    APP_STOPPED = "spotify-tui stopped"
    APP_FATAL_ERROR = "Fatal error: %s"

    # Database Lifecycle
    DATABASE_INITIALIZED = "Database initialized at %s"
    DATABASE_CLOSED = "Database manager closed"

    # Client Configuration
    CONFIG_LOADED = "Loaded client configuration (device_id=%s)"
    CONFIG_DEVICE_SAVED = "Saved device_id %s to client configuration"
    CONFIG_WRITE_FAILED = "Failed to write configuration key %s: %r"

    # Credentials
    CREDENTIAL_INSTALLED = "Installed access token (expires in %ss)"
    CREDENTIAL_REFRESHING = "Refreshing access token"
    CREDENTIAL_REFRESHED = "Access token refreshed (expires in %ss)"
    CREDENTIAL_REFRESH_FAILED = "Failed to refresh authentication token: %s"
    REFRESH_TOKEN_ROTATED = "Spotify rotated the refresh token; storing the new one"
    REFRESH_TOKEN_NOT_SAVED = "Could not store the rotated refresh token: %s"
    TOKEN_EXCHANGE_REJECTED = "Token endpoint returned %d: %s"

    # Dispatch
    DISPATCH_STARTED = "Dispatching %s"
    DISPATCH_FINISHED = "Finished %s in %.3fs"
    DISPATCH_FAILED = "Command %s failed: %s"
    DISPATCH_UNEXPECTED_ERROR = "Unexpected error while dispatching %s"
    DISPATCH_NO_HANDLER = "No handler registered for %s"
    DISPATCH_LOOP_STARTED = "Dispatch loop started"
    DISPATCH_LOOP_STOPPED = "Dispatch loop stopped"
    DISPATCH_LOOP_ALREADY_RUNNING = "Dispatch loop is already running"
    DISPATCH_COMMAND_QUEUED = "Queued %s (pending=%d)"

    # Handler details
    SEARCH_LIMITS_UPDATED = "Search limits updated (large=%d, small=%d)"
    LIKED_SET_UPDATED = "Liked set updated for %d track(s)"
    MADE_FOR_YOU_FILTERED = "Made-for-you search '%s' kept %d playlist(s)"
    RECOMMENDATIONS_RESOLVED = "Resolved %d recommended track(s)"
    PLAYBACK_STARTED = "Started playback on device %s"

    # Remote API
    API_REQUEST = "%s %s"
    API_ERROR_RESPONSE = "Spotify API returned %d for %s %s"
    API_TRANSPORT_ERROR = "Transport error for %s %s: %r"
    API_CLIENT_CLOSED = "Spotify HTTP client closed"
