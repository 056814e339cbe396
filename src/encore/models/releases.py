"""
Release and release link models.

These mirror the records served by the backend's ``/releases`` endpoints.
Only ``id`` and ``soundcloud_url`` are used for artwork resolution.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ReleaseLink:
    """Streaming or download link attached to a release."""
    id: int
    release_id: int
    platform: str
    url: str
    created_at: Optional[str] = None
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReleaseLink":
        """Build a link from an API payload. The platform name is kept as sent."""
        platform = data.get('platform') or ''
        return cls(
            id=int(data['id']),
            release_id=int(data['release_id']),
            platform=platform,
            url=data.get('url', ''),
            created_at=data.get('created_at'),
        )


@dataclass
class Release:
    """Release record as returned by the backend API."""
    id: int
    title: str
    url_title: str
    soundcloud_url: str = ""
    release_date: Optional[str] = None
    collaborators: Optional[str] = None
    cover_art_full: Optional[str] = None
    cover_art_thumbnail: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    links: List[ReleaseLink] = field(default_factory=list)
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Release":
        """
        Build a release from an API payload.
        
        Args:
            data: Release JSON object
            
        Returns:
            Release instance
            
        Raises:
            KeyError: If ``id``, ``title`` or ``url_title`` is missing
        """
        return cls(
            id=int(data['id']),
            title=data['title'],
            url_title=data['url_title'],
            soundcloud_url=data.get('soundcloud_url') or "",
            release_date=data.get('release_date'),
            collaborators=data.get('collaborators'),
            cover_art_full=data.get('cover_art_full'),
            cover_art_thumbnail=data.get('cover_art_thumbnail'),
            created_at=data.get('created_at'),
            updated_at=data.get('updated_at'),
            links=[ReleaseLink.from_dict(link) for link in data.get('links') or []],
        )
    
    @property
    def has_soundcloud_url(self) -> bool:
        return bool(self.soundcloud_url and self.soundcloud_url.strip())
