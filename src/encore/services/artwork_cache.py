"""
In-memory artwork cache shared by every resolution in a process.
"""

import threading
from typing import Dict, List, Optional
from ..models.artwork import ArtworkEntry


class ArtworkCache:
    """Maps media references to resolved artwork entries.
    
    Entries live until the owning process or session clears the cache.
    Failures are never stored.
    """
    
    def __init__(self):
        self._entries: Dict[str, ArtworkEntry] = {}
        self._lock = threading.Lock()
    
    def get(self, media_url: str) -> Optional[ArtworkEntry]:
        """Return the entry for a media reference, or None."""
        with self._lock:
            return self._entries.get(media_url)
    
    def store(self, media_url: str, url: str) -> ArtworkEntry:
        """
        Store a resolved artwork URL.
        
        Entries are immutable: if the key is already present the existing
        entry is kept and returned.
        
        Args:
            media_url: Media reference used as the key
            url: Resolved artwork URL
            
        Returns:
            The entry now held for the key
        """
        with self._lock:
            existing = self._entries.get(media_url)
            if existing is not None:
                return existing
            entry = ArtworkEntry(key=media_url, url=url)
            self._entries[media_url] = entry
            return entry
    
    def keys(self) -> List[str]:
        with self._lock:
            return list(self._entries)
    
    def clear(self):
        """Drop every entry (end of session)."""
        with self._lock:
            self._entries.clear()
    
    def __contains__(self, media_url) -> bool:
        with self._lock:
            return media_url in self._entries
    
    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
