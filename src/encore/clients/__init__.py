"""
Client modules for external APIs.
"""

from .soundcloud import SoundCloudClient

__all__ = [
    'SoundCloudClient'
]
