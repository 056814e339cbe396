"""
Data models for Encore.
"""

from .artwork import ArtworkEntry
from .releases import Release, ReleaseLink

__all__ = [
    'ArtworkEntry',
    'Release',
    'ReleaseLink'
]
