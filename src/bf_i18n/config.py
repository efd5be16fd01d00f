# src/bf_i18n/config.py
import configparser
import os
from pathlib import Path
from typing import Any


class Config:
    """Configuration manager for the bf-i18n command-line tools"""

    def __init__(self, config_path: Path = None):
        self.config = configparser.ConfigParser()
        self.config_path = config_path or Path(os.environ.get("BF_I18N_CONFIG", "bf_i18n.ini"))

        # Set defaults
        self._set_defaults()

        # Load config file if it exists
        if self.config_path.exists():
            self.config.read(self.config_path, encoding="utf-8")

    def _set_defaults(self):
        """Set default configuration values"""
        self.config.add_section('conversion')
        self.config.set('conversion', 'from_mode', 'rails')
        self.config.set('conversion', 'to_mode', 'laravel')
        self.config.set('conversion', 'output_format', 'json')
        self.config.set('conversion', 'strict', 'false')

        self.config.add_section('validation')
        self.config.set('validation', 'reference_locale', 'en')

        self.config.add_section('logging')
        self.config.set('logging', 'log_level', 'WARNING')

    def get(self, section: str, key: str, fallback: Any = None) -> Any:
        """Get configuration value with type conversion"""
        try:
            value = self.config.get(section, key)
            if section == 'conversion' and key == 'strict':
                return value.lower() == 'true'
            if section == 'logging' and key == 'log_level':
                return value.upper()
            return value
        except (configparser.NoSectionError, configparser.NoOptionError):
            return fallback


# Global config instance
config = Config()
