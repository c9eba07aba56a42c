"""
Configuration module for the Apixu client.
"""

from config.settings import Settings, get_settings, reload_settings

__all__ = ["Settings", "get_settings", "reload_settings"]
