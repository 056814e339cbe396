"""
Configuration for Encore.
Contains all constants, settings, and global parameters.
"""

import os

# Project Information
PROJECT_NAME = "Encore"
PROJECT_VERSION = "1.0.0"
PROJECT_DESCRIPTION = "SoundCloud artwork resolver for release pages"

# SoundCloud oEmbed Configuration
SOUNDCLOUD_CONFIG = {
    "OEMBED_URL": os.getenv("ENCORE_OEMBED_URL", "https://soundcloud.com/oembed"),
    "USER_AGENT": f"{PROJECT_NAME}/{PROJECT_VERSION}",
    "TIMEOUT": float(os.getenv("ENCORE_OEMBED_TIMEOUT", "10")),
}

# Artwork Configuration
ARTWORK_CONFIG = {
    "SOURCE_SIZE": "-t500x500",
    "TARGET_SIZE": "-t1080x1080",
    "SOURCE_EXTENSION": ".jpg",
    "TARGET_EXTENSION": ".png",
    "MAX_WORKERS": int(os.getenv("ENCORE_MAX_WORKERS", "8")),  # concurrent resolutions per resolver
}

# Logging Configuration
LOGGING_CONFIG = {
    "LEVEL": os.getenv("ENCORE_LOG_LEVEL", "INFO").upper(),
}

# Error Messages
ERROR_MESSAGES = {
    "INVALID_REFERENCE": "A non-empty media URL is required.",
    "HTTP_STATUS": "SoundCloud oEmbed returned HTTP {status}.",
    "MALFORMED_PAYLOAD": "SoundCloud oEmbed returned a malformed payload.",
    "MISSING_THUMBNAIL": "Thumbnail not found in SoundCloud oEmbed response.",
    "TIMEOUT": "SoundCloud oEmbed request timed out after {timeout}s.",
    "NETWORK_ERROR": "Network error while contacting SoundCloud: {error}",
}
