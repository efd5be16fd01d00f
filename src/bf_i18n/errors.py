# src/bf_i18n/errors.py
"""
Exceptions raised by bf-i18n.

Resolution misses (unknown keys, locales or plural forms) never raise;
they degrade to the fallback chain, the default value and finally the
literal key.  Only configuration mistakes, invalid locale assignments
and tooling I/O problems surface as exceptions.
"""
from typing import Any, List


class I18nError(Exception):
    """Base exception for bf-i18n errors"""
    pass


class ConfigurationError(I18nError):
    """Raised when I18n construction options fail validation

    Attributes:
        errors: The ``OptionError`` entries reported by ``validate_options``
    """

    def __init__(self, errors: List[Any]):
        self.errors = list(errors)
        details = "; ".join(f"{e.field}: {e.message}" for e in self.errors)
        super().__init__(f"Invalid i18n options: {details}")


class InvalidLocaleError(I18nError, ValueError):
    """Raised when a locale assignment is empty or not a string"""
    pass


class PluralSyntaxError(I18nError, ValueError):
    """Raised by strict parsing of a malformed pipe-delimited plural string"""
    pass


class TranslationFileError(I18nError):
    """Raised when a translation file cannot be located or decoded"""
    pass
