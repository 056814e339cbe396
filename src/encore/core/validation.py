"""
Configuration and input validation utilities.
"""

import importlib
from typing import List, Tuple
from urllib.parse import urlparse
from .config import (
    SOUNDCLOUD_CONFIG,
    ARTWORK_CONFIG,
    LOGGING_CONFIG,
    ERROR_MESSAGES,
)
from .exceptions import ConfigurationError, InvalidReference


def check_dependencies() -> Tuple[bool, List[str]]:
    """
    Check if all required dependencies are installed.
    
    Returns:
        Tuple of (all_installed, list_of_missing_dependencies)
    """
    required_packages = {
        "requests": "requests",
        "rich": "rich",
    }
    
    missing = []
    for module_name, package_name in required_packages.items():
        try:
            importlib.import_module(module_name)
        except ImportError:
            missing.append(package_name)
    
    return len(missing) == 0, missing


def validate_configuration() -> Tuple[bool, List[str]]:
    """
    Validate application configuration.
    
    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    errors = []
    
    deps_ok, missing_deps = check_dependencies()
    if not deps_ok:
        errors.append(
            f"Missing required dependencies: {', '.join(missing_deps)}. "
            f"Please install them with: pip install -e ."
        )
    
    # Validate SoundCloud config
    oembed_url = urlparse(SOUNDCLOUD_CONFIG["OEMBED_URL"])
    if oembed_url.scheme not in ("http", "https") or not oembed_url.netloc:
        errors.append("OEMBED_URL must be an absolute http(s) URL")
    
    if SOUNDCLOUD_CONFIG["TIMEOUT"] <= 0:
        errors.append("SoundCloud TIMEOUT must be > 0")
    
    # Validate artwork config
    for key in ("SOURCE_SIZE", "TARGET_SIZE", "SOURCE_EXTENSION", "TARGET_EXTENSION"):
        if not ARTWORK_CONFIG[key]:
            errors.append(f"Artwork {key} must not be empty")
    
    if ARTWORK_CONFIG["MAX_WORKERS"] < 1:
        errors.append("MAX_WORKERS must be >= 1")
    
    # Validate logging config
    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if LOGGING_CONFIG["LEVEL"] not in valid_log_levels:
        errors.append(f"LOG_LEVEL must be one of: {', '.join(valid_log_levels)}")
    
    is_valid = len(errors) == 0
    return is_valid, errors


def validate_and_raise():
    """
    Validate configuration and raise ConfigurationError if invalid.
    """
    is_valid, errors = validate_configuration()
    if not is_valid:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ConfigurationError(error_msg)


def validate_media_reference(media_url) -> str:
    """
    Validate a media reference before any request is built from it.
    
    The reference is returned unchanged since it is also the cache key.
    Platform ownership is not checked here; the oEmbed endpoint rejects
    URLs it does not recognize.
    
    Args:
        media_url: Track URL on the streaming platform
        
    Returns:
        The validated reference
        
    Raises:
        InvalidReference: If the reference is missing, not a string, or blank
    """
    if not isinstance(media_url, str) or not media_url.strip():
        raise InvalidReference(ERROR_MESSAGES["INVALID_REFERENCE"], media_url=media_url)
    
    return media_url
