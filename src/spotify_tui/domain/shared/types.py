"""Reusable Pydantic Annotated types for domain-wide validation.

Every constrained type used across the package is defined here once,
so models can simply annotate their fields::

    from spotify_tui.domain.shared.types import NonEmptyStr, SearchLimit

    class MyModel(BaseModel):
        playlist_id: NonEmptyStr
        limit: SearchLimit
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

# ── Numeric constraints ─────────────────────────────────────────────

NonNegativeInt = Annotated[int, Field(ge=0)]
"""Integer >= 0."""

NonNegativeFloat = Annotated[float, Field(ge=0.0)]
"""Float >= 0.0."""

VolumePercent = Annotated[int, Field(ge=0, le=100)]
"""Device volume in percent: 0 … 100."""

PositionMs = Annotated[int, Field(ge=0)]
"""Playback position in milliseconds."""

SearchLimit = Annotated[int, Field(ge=1, le=50)]
"""Page size accepted by the Web API: 1 … 50."""


# ── String constraints ──────────────────────────────────────────────

NonEmptyStr = Annotated[str, Field(min_length=1)]
"""String with at least one character."""

MarketStr = Annotated[str, Field(pattern=r"^[A-Z]{2}$")]
"""ISO 3166-1 alpha-2 country code used as the ``market`` parameter."""

HttpUrlStr = Annotated[str, Field(pattern=r"^https?://")]
"""String that starts with http:// or https://."""


# ── Settings-specific constraints ──────────────────────────────────

BusyTimeoutMs = Annotated[int, Field(ge=1000, le=30000)]
"""Database busy timeout in milliseconds: 1 000 … 30 000."""

ConnectionTimeoutS = Annotated[int, Field(ge=1, le=60)]
"""Database connection timeout in seconds: 1 … 60."""

ExpiryMarginSeconds = Annotated[int, Field(ge=0, le=300)]
"""Seconds subtracted from a token lifetime to absorb clock skew."""
