"""
Utilities module.
"""
from slidingtiles.utils.settings import Settings, get_settings

__all__ = ['Settings', 'get_settings']
