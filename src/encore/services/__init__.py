"""
Core services for Encore.
"""

from .artwork_cache import ArtworkCache
from .artwork_resolver import ArtworkResolver
from .release_artwork import ReleaseArtworkService

__all__ = [
    'ArtworkCache',
    'ArtworkResolver',
    'ReleaseArtworkService'
]
