"""
Configuration Package

Environment and file settings.
"""

from .settings import Settings

__all__ = [
    "Settings",
]
