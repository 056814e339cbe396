"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
from pathlib import Path
from unittest.mock import Mock

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

TRACK_URL = "https://soundcloud.com/test-artist/test-track"
THUMBNAIL_URL = "https://i1.sndcdn.com/artworks-XYZ-t500x500.jpg"
ARTWORK_URL = "https://i1.sndcdn.com/artworks-XYZ-t1080x1080.png"


def make_response(status_code=200, payload=None, json_error=None):
    """Build a fake requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    if json_error is not None:
        response.json = Mock(side_effect=json_error)
    else:
        response.json = Mock(return_value=payload if payload is not None else {})
    return response


@pytest.fixture
def mock_session():
    """Mock requests.Session returning a valid oEmbed payload."""
    session = Mock()
    session.headers = {}
    session.get = Mock(return_value=make_response(payload={
        "version": 1.0,
        "type": "rich",
        "provider_name": "SoundCloud",
        "title": "Test Track by Test Artist",
        "thumbnail_url": THUMBNAIL_URL,
    }))
    return session


@pytest.fixture
def soundcloud_client(mock_session):
    """SoundCloudClient backed by the mock session."""
    from encore.clients.soundcloud import SoundCloudClient
    return SoundCloudClient(session=mock_session)


@pytest.fixture
def mock_soundcloud_client():
    """Mock SoundCloud client."""
    client = Mock()
    client.fetch_thumbnail_url = Mock(return_value=THUMBNAIL_URL)
    client.close = Mock()
    return client


@pytest.fixture
def resolver(mock_soundcloud_client):
    """ArtworkResolver with a fresh cache and a mock client."""
    from encore.services.artwork_resolver import ArtworkResolver
    from encore.services.artwork_cache import ArtworkCache
    resolver = ArtworkResolver(cache=ArtworkCache(), client=mock_soundcloud_client, max_workers=4)
    yield resolver
    resolver.close()


@pytest.fixture
def sample_release_data():
    """Sample release payload from the backend API."""
    return {
        "id": 7,
        "title": "Night Drive",
        "url_title": "night-drive",
        "soundcloud_url": TRACK_URL,
        "collaborators": "Someone Else",
        "release_date": "2024-05-17",
        "created_at": "2024-05-01T10:00:00Z",
        "updated_at": "2024-05-02T10:00:00Z",
        "links": [
            {
                "id": 1,
                "release_id": 7,
                "platform": "spotify",
                "url": "https://open.spotify.com/track/abc",
                "created_at": "2024-05-01T10:00:00Z",
            },
            {
                "id": 2,
                "release_id": 7,
                "platform": "soundcloud",
                "url": TRACK_URL,
                "created_at": "2024-05-01T10:00:00Z",
            },
        ],
    }


@pytest.fixture
def sample_release(sample_release_data):
    """Sample release model."""
    from encore.models.releases import Release
    return Release.from_dict(sample_release_data)
