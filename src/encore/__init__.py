"""
Encore - SoundCloud artwork resolution for the release pages.
"""

__version__ = "1.0.0"
