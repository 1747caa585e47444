"""
Configuration package for platform-specific settings.

Provides the abstract configuration interface with its validation rules
and the desktop implementation that reads environment variables.
"""
from .base import BaseConfiguration, ConfigurationError, DEFAULT_IDENTITIES
from .desktop import DesktopConfiguration

__all__ = [
    'BaseConfiguration',
    'ConfigurationError',
    'DEFAULT_IDENTITIES',
    'DesktopConfiguration'
]
