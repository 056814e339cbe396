"""
User interface modules for Encore.
"""

from .cli import EncoreCLI
from .display import DisplayManager

__all__ = [
    'EncoreCLI',
    'DisplayManager'
]
