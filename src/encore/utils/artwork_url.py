"""
Artwork URL transformation utilities.
"""

from ..core.config import ARTWORK_CONFIG


def upgrade_thumbnail_url(thumbnail_url: str) -> str:
    """
    Convert a SoundCloud thumbnail URL to its 1080x1080 PNG variant.
    
    The size marker is replaced at its first occurrence only and the
    extension only when it ends the URL. Each substitution is applied
    independently, so an already upgraded URL comes back unchanged.
    
    Args:
        thumbnail_url: ``thumbnail_url`` from the oEmbed response
        
    Returns:
        High resolution artwork URL
    """
    source_size = ARTWORK_CONFIG["SOURCE_SIZE"]
    source_ext = ARTWORK_CONFIG["SOURCE_EXTENSION"]
    
    url = thumbnail_url.replace(source_size, ARTWORK_CONFIG["TARGET_SIZE"], 1)
    if url.endswith(source_ext):
        url = url[:-len(source_ext)] + ARTWORK_CONFIG["TARGET_EXTENSION"]
    return url
