"""
Artwork cache entry model.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(frozen=True)
class ArtworkEntry:
    """Resolved artwork URL for a media reference."""
    key: str
    url: str
    resolved_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
