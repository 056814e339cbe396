"""
SoundCloud Client Module
A client for the SoundCloud oEmbed endpoint.
"""

import requests
from typing import Dict, Any
from ..core.config import SOUNDCLOUD_CONFIG, ERROR_MESSAGES
from ..core.exceptions import ArtworkUnavailable
from ..core.logger import get_logger

logger = get_logger("clients.soundcloud")


class SoundCloudClient:
    """SoundCloud oEmbed client. Makes one attempt per call, never retries."""
    
    def __init__(self, session: requests.Session = None):
        self.oembed_url = SOUNDCLOUD_CONFIG["OEMBED_URL"]
        self.user_agent = SOUNDCLOUD_CONFIG["USER_AGENT"]
        self.timeout = SOUNDCLOUD_CONFIG["TIMEOUT"]
        
        self.session = session or requests.Session()
        self.session.headers.update({
            'User-Agent': self.user_agent,
            'Accept': 'application/json'
        })
    
    def build_oembed_params(self, media_url: str) -> Dict[str, str]:
        """Build oEmbed query parameters. requests URL-encodes the track URL."""
        return {
            'format': 'json',
            'url': media_url
        }
    
    def fetch_oembed(self, media_url: str) -> Dict[str, Any]:
        """
        Fetch oEmbed metadata for a track.
        
        Args:
            media_url: SoundCloud track URL
            
        Returns:
            Decoded oEmbed JSON object
            
        Raises:
            ArtworkUnavailable: On timeout, network error, non-2xx status or a
                body that is not a JSON object
        """
        params = self.build_oembed_params(media_url)
        logger.debug(f"Requesting oEmbed metadata for {media_url}")
        
        try:
            response = self.session.get(self.oembed_url, params=params, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise ArtworkUnavailable(
                ERROR_MESSAGES["TIMEOUT"].format(timeout=self.timeout),
                media_url=media_url
            ) from e
        except requests.exceptions.RequestException as e:
            raise ArtworkUnavailable(
                ERROR_MESSAGES["NETWORK_ERROR"].format(error=e),
                media_url=media_url
            ) from e
        
        if not response.ok:
            raise ArtworkUnavailable(
                ERROR_MESSAGES["HTTP_STATUS"].format(status=response.status_code),
                media_url=media_url,
                status_code=response.status_code
            )
        
        try:
            data = response.json()
        except ValueError as e:
            raise ArtworkUnavailable(
                ERROR_MESSAGES["MALFORMED_PAYLOAD"],
                media_url=media_url,
                status_code=response.status_code
            ) from e
        
        if not isinstance(data, dict):
            raise ArtworkUnavailable(
                ERROR_MESSAGES["MALFORMED_PAYLOAD"],
                media_url=media_url,
                status_code=response.status_code
            )
        
        return data
    
    def fetch_thumbnail_url(self, media_url: str) -> str:
        """
        Fetch the thumbnail URL advertised by oEmbed for a track.
        
        Raises:
            ArtworkUnavailable: If the request fails or ``thumbnail_url`` is missing
        """
        data = self.fetch_oembed(media_url)
        thumbnail_url = data.get('thumbnail_url')
        
        if not thumbnail_url or not isinstance(thumbnail_url, str):
            raise ArtworkUnavailable(ERROR_MESSAGES["MISSING_THUMBNAIL"], media_url=media_url)
        
        return thumbnail_url
    
    def close(self):
        """Close the underlying HTTP session."""
        self.session.close()
