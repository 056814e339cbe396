"""
Tests for the artwork cache.
"""

import pytest
import sys
import threading
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from encore.models.artwork import ArtworkEntry
from encore.services.artwork_cache import ArtworkCache


class TestArtworkCache:
    """Tests for ArtworkCache class."""
    
    def test_empty_cache(self):
        """Test a new cache is empty."""
        cache = ArtworkCache()
        
        assert len(cache) == 0
        assert cache.get("https://soundcloud.com/a/b") is None
        assert "https://soundcloud.com/a/b" not in cache
    
    def test_store_and_get(self):
        """Test storing an entry."""
        cache = ArtworkCache()
        entry = cache.store("key", "https://i1.sndcdn.com/x.png")
        
        assert isinstance(entry, ArtworkEntry)
        assert entry.key == "key"
        assert cache.get("key") is entry
        assert "key" in cache
        assert cache.keys() == ["key"]
    
    def test_store_existing_key_keeps_first_entry(self):
        """Test that entries are not replaced once stored."""
        cache = ArtworkCache()
        first = cache.store("key", "first")
        second = cache.store("key", "second")
        
        assert second is first
        assert cache.get("key").url == "first"
        assert len(cache) == 1
    
    def test_get_does_not_mutate(self):
        """Test that lookups never create entries."""
        cache = ArtworkCache()
        cache.get("missing")
        assert len(cache) == 0
    
    def test_clear(self):
        """Test clearing the cache."""
        cache = ArtworkCache()
        cache.store("a", "1")
        cache.store("b", "2")
        
        cache.clear()
        
        assert len(cache) == 0
        assert cache.get("a") is None
    
    def test_concurrent_store_single_entry(self):
        """Test that racing writers leave exactly one entry."""
        cache = ArtworkCache()
        entries = []
        
        def writer(value):
            entries.append(cache.store("key", value))
        
        threads = [threading.Thread(target=writer, args=(str(i),)) for i in range(10)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        
        assert len(cache) == 1
        assert all(entry is entries[0] for entry in entries)
