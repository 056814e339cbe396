"""
Utility modules for Encore.
"""

from .artwork_url import upgrade_thumbnail_url

__all__ = [
    'upgrade_thumbnail_url'
]
