"""
Settings manager for game configuration
"""
import copy
import json
import logging
import os

logger = logging.getLogger(__name__)


class Settings:
    """Manages game settings stored in a JSON file."""

    DEFAULT_SETTINGS = {
        'frontend': 'pygame',
        'animation': {
            'duration_ms': 500,
            'poll_timeout_ms': 10
        },
        'video': {
            'cell_size': 72
        },
        'logging': {
            'level': 'WARNING'
        }
    }

    def __init__(self, settings_file='settings.json'):
        """Initialize settings manager."""
        self.settings_file = settings_file
        self.settings = self.load()

    def load(self):
        """Load settings from file, falling back to defaults."""
        if os.path.exists(self.settings_file):
            try:
                with open(self.settings_file, 'r') as f:
                    loaded_settings = json.load(f)
                    return self._merge_with_defaults(loaded_settings)
            except (OSError, ValueError) as e:
                logger.warning(f"Error loading settings from {self.settings_file}: {e}")
                logger.warning("Using default settings")
                return copy.deepcopy(self.DEFAULT_SETTINGS)
        else:
            logger.debug(f"No settings file at {self.settings_file}, using defaults")
            return copy.deepcopy(self.DEFAULT_SETTINGS)

    def _merge_with_defaults(self, loaded):
        """Merge loaded settings with defaults to ensure all keys exist."""
        result = copy.deepcopy(self.DEFAULT_SETTINGS)

        for key, value in loaded.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                # Merge nested dicts
                result[key].update(value)
            else:
                result[key] = value

        return result

    def save(self, settings=None):
        """Save settings to file."""
        if settings is not None:
            self.settings = settings

        try:
            with open(self.settings_file, 'w') as f:
                json.dump(self.settings, f, indent=2)
            logger.info(f"Settings saved to {self.settings_file}")
            return True
        except OSError as e:
            logger.error(f"Error saving settings: {e}")
            return False

    def get(self, key, default=None):
        """Get a setting value by dotted key, e.g. ``animation.duration_ms``."""
        keys = key.split('.')
        value = self.settings

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key, value, persist=True):
        """Set a setting value by dotted key."""
        keys = key.split('.')
        settings = self.settings

        for k in keys[:-1]:
            if k not in settings:
                settings[k] = {}
            settings = settings[k]

        settings[keys[-1]] = value
        if persist:
            self.save()

    def get_frontend(self):
        """Get the configured frontend name."""
        return self.settings.get('frontend', 'pygame')

    def reset_to_defaults(self):
        """Reset all settings to defaults."""
        self.settings = copy.deepcopy(self.DEFAULT_SETTINGS)
        self.save()


# Global settings instance
_settings_instance = None


def get_settings(settings_file=None):
    """
    Get global settings instance.

    Args:
        settings_file: Path to load from on first use (default ``settings.json``)
    """
    global _settings_instance
    if _settings_instance is None:
        if settings_file is None:
            _settings_instance = Settings()
        else:
            _settings_instance = Settings(settings_file)
    return _settings_instance
