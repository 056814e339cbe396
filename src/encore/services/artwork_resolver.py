"""
Artwork resolver that maps SoundCloud track URLs to high resolution artwork.
"""

import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Dict, Optional
from ..clients.soundcloud import SoundCloudClient
from ..core.config import ARTWORK_CONFIG
from ..core.logger import get_logger
from ..core.validation import validate_media_reference
from ..utils.artwork_url import upgrade_thumbnail_url
from .artwork_cache import ArtworkCache

logger = get_logger("services.artwork_resolver")


class ArtworkResolver:
    """Read-through resolver backed by an owned ArtworkCache.
    
    Concurrent misses for the same key share a single in-flight request.
    Nothing is retried and nothing is remembered about failures, so the
    next call after a failure fetches again.
    """
    
    def __init__(
        self,
        cache: Optional[ArtworkCache] = None,
        client: Optional[SoundCloudClient] = None,
        max_workers: Optional[int] = None
    ):
        """
        Initialize the resolver.
        
        Args:
            cache: Cache to read and populate (a new one is created if omitted)
            client: oEmbed client (a new SoundCloudClient if omitted)
            max_workers: Thread pool size for submit()
        """
        self.cache = cache if cache is not None else ArtworkCache()
        self.client = client or SoundCloudClient()
        self.max_workers = max_workers or ARTWORK_CONFIG["MAX_WORKERS"]
        
        self._in_flight: Dict[str, Future] = {}
        self._lock = threading.Lock()
        self._executor: Optional[ThreadPoolExecutor] = None
    
    def cached_url(self, media_url: str) -> Optional[str]:
        """Return the cached artwork URL without touching the network."""
        entry = self.cache.get(media_url)
        return entry.url if entry else None
    
    def resolve(self, media_url: str) -> str:
        """
        Resolve a track URL to its high resolution artwork URL.
        
        Args:
            media_url: SoundCloud track URL
            
        Returns:
            Artwork URL
            
        Raises:
            InvalidReference: If media_url is missing or empty (no request is made)
            ArtworkUnavailable: If oEmbed fails or has no thumbnail
        """
        validate_media_reference(media_url)
        
        entry = self.cache.get(media_url)
        if entry is not None:
            logger.debug(f"Artwork cache hit for {media_url}")
            return entry.url
        
        with self._lock:
            # Re-check under the lock: the owner populates the cache before
            # releasing its in-flight slot.
            entry = self.cache.get(media_url)
            if entry is not None:
                return entry.url
            
            future = self._in_flight.get(media_url)
            is_owner = future is None
            if is_owner:
                future = Future()
                self._in_flight[media_url] = future
        
        if not is_owner:
            logger.debug(f"Waiting on in-flight artwork request for {media_url}")
            return future.result()
        
        logger.debug(f"Artwork cache miss for {media_url}")
        try:
            thumbnail_url = self.client.fetch_thumbnail_url(media_url)
            entry = self.cache.store(media_url, upgrade_thumbnail_url(thumbnail_url))
            future.set_result(entry.url)
        except Exception as e:
            logger.warning(f"Artwork unavailable for {media_url}: {e}")
            future.set_exception(e)
            raise
        finally:
            if not future.done():
                future.cancel()
            with self._lock:
                self._in_flight.pop(media_url, None)
        
        return entry.url
    
    def submit(self, media_url: str) -> Future:
        """
        Resolve in the background.
        
        The returned future yields the artwork URL or raises the same errors
        as resolve(). Dropping the future is fine: a successful result is
        still cached.
        """
        return self._get_executor().submit(self.resolve, media_url)
    
    def _get_executor(self) -> ThreadPoolExecutor:
        with self._lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self.max_workers,
                    thread_name_prefix="encore-artwork"
                )
            return self._executor
    
    def close(self):
        """Shut down the worker pool and close the HTTP client."""
        with self._lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=True)
        self.client.close()
    
    def __enter__(self):
        return self
    
    def __exit__(self, exc_type, exc, tb):
        self.close()
