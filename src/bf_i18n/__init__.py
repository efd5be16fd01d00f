# src/bf_i18n/__init__.py
"""
bf-i18n - backend-framework compatible internationalisation.

Resolves translation keys written for either of two backend conventions
(Rails-style ``%{var}`` with key-based plurals, Laravel-style ``:var``
with pipe-delimited plurals) and converts translation trees between them.

Main Components:
- i18n: I18n facade (configuration, current locale, listeners, missing keys)
- translator: Fallback-chain key resolution
- interpolator: Placeholder substitution and syntax conversion
- pluralizer: Key-based and pipe-based plural selection (CLDR rules via Babel)
- compatibility: Pre-conversion fidelity report
- converter: Tree conversion between modes
- validator: Cross-locale consistency checks
- parser: JSON/YAML translation files
- options / config: Option validation and tooling configuration
"""
from .compatibility import CompatibilityChecker, check_compatibility
from .converter import convert_translations, laravel_plural_to_rails
from .errors import (
    ConfigurationError,
    I18nError,
    InvalidLocaleError,
    PluralSyntaxError,
    TranslationFileError,
)
from .i18n import I18n, create_i18n
from .interpolator import Interpolator, create_laravel_interpolator, create_rails_interpolator
from .locale_detection import detect_locale
from .models import (
    CompatibilityIssue,
    CompatibilityReport,
    InterpolationOptions,
    LaravelPluralRule,
    MissingKeyInfo,
    ValidationIssue,
    ValidationResult,
)
from .modes import BUILT_IN_MODE_CONFIGS, Mode, ModeConfig, get_mode_config
from .nodes import NodeKind, classify_node
from .options import validate_options
from .pluralizer import Pluralizer, create_laravel_pluralizer, create_rails_pluralizer
from .translator import Translator
from .validator import validate_translations

__version__ = "1.0.0"
__author__ = "bf-i18n Team"
__description__ = "Rails/Laravel compatible i18n resolution and conversion"

__all__ = [
    "I18n",
    "create_i18n",
    "Translator",
    "Interpolator",
    "create_rails_interpolator",
    "create_laravel_interpolator",
    "Pluralizer",
    "create_rails_pluralizer",
    "create_laravel_pluralizer",
    "CompatibilityChecker",
    "check_compatibility",
    "convert_translations",
    "laravel_plural_to_rails",
    "validate_translations",
    "validate_options",
    "detect_locale",
    "classify_node",
    "NodeKind",
    "Mode",
    "ModeConfig",
    "BUILT_IN_MODE_CONFIGS",
    "get_mode_config",
    "InterpolationOptions",
    "LaravelPluralRule",
    "CompatibilityIssue",
    "CompatibilityReport",
    "MissingKeyInfo",
    "ValidationIssue",
    "ValidationResult",
    "I18nError",
    "ConfigurationError",
    "InvalidLocaleError",
    "PluralSyntaxError",
    "TranslationFileError",
]
