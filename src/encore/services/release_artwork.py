"""
Release artwork service for the release listing pages.
"""

import concurrent.futures
from typing import Dict, Iterable, Optional
from ..core.exceptions import ArtworkUnavailable
from ..core.logger import get_logger
from ..models.releases import Release
from .artwork_resolver import ArtworkResolver

logger = get_logger("services.release_artwork")


class ReleaseArtworkService:
    """Builds the release id to artwork URL mapping used as card backgrounds."""
    
    def __init__(self, resolver: ArtworkResolver):
        self.resolver = resolver
    
    def artwork_for_release(self, release: Release) -> Optional[str]:
        """
        Get the artwork URL for one release.
        
        Returns:
            Artwork URL, or None when the release has no SoundCloud URL or
            the artwork is unavailable (the page renders without a background)
        """
        if not release.has_soundcloud_url:
            return None
        
        try:
            return self.resolver.resolve(release.soundcloud_url)
        except ArtworkUnavailable as e:
            logger.warning(f"Failed to fetch artwork for release {release.id}: {e}")
            return None
    
    def artwork_for_releases(self, releases: Iterable[Release]) -> Dict[int, str]:
        """
        Resolve artwork for many releases concurrently.
        
        Results are collected in completion order. Releases without a
        SoundCloud URL or whose artwork is unavailable are left out.
        
        Args:
            releases: Releases to render
            
        Returns:
            Mapping of release id to artwork URL
        """
        futures = {}
        for release in releases:
            if release.has_soundcloud_url:
                futures[self.resolver.submit(release.soundcloud_url)] = release
        
        artwork_urls = {}
        for future in concurrent.futures.as_completed(futures):
            release = futures[future]
            try:
                artwork_urls[release.id] = future.result()
            except ArtworkUnavailable as e:
                logger.warning(f"Failed to fetch artwork for release {release.id}: {e}")
        
        return artwork_urls
