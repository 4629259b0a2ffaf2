"""
Configuration package for the worker vacation service.

Exposes the cached application settings loaded from the environment.
"""

from app.config.settings import Settings, get_settings, settings

__all__ = ['Settings', 'get_settings', 'settings']
