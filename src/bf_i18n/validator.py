# src/bf_i18n/validator.py
"""
Cross-locale consistency checks.

Every locale is compared against a reference locale: keys missing from
a locale and values of a different kind are errors; extra keys and
blank strings are warnings.
"""
import logging
from typing import Any, Mapping

from .models import ValidationIssue, ValidationResult
from .nodes import flatten_keys, lookup

logger = logging.getLogger(__name__)


def _kind(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "list"
    return "mapping"


def validate_translations(translations: Mapping[str, Mapping[str, Any]],
                          reference_locale: str) -> ValidationResult:
    """
    Validate every locale of *translations* against *reference_locale*.

    Args:
        translations: Locale code → namespace root.
        reference_locale: Locale whose keys every other locale must have.

    Returns:
        ValidationResult: ``valid`` is False when any error was found.
    """
    result = ValidationResult()

    reference = translations.get(reference_locale)
    if reference is None:
        result.errors.append(ValidationIssue(
            type="missing_key",
            locale=reference_locale,
            key="",
            message=f'Reference locale "{reference_locale}" not found in translations',
        ))
        return result

    reference_keys = flatten_keys(reference)

    for locale, tree in translations.items():
        if locale == reference_locale or tree is None:
            continue

        locale_keys = flatten_keys(tree)
        locale_key_set = set(locale_keys)
        reference_key_set = set(reference_keys)

        for key in reference_keys:
            if key not in locale_key_set:
                result.errors.append(ValidationIssue(
                    type="missing_key",
                    locale=locale,
                    key=key,
                    message=f'Missing key "{key}" in locale "{locale}"',
                ))

        for key in locale_keys:
            if key not in reference_key_set:
                result.warnings.append(ValidationIssue(
                    type="missing_key",
                    locale=locale,
                    key=key,
                    message=f'Extra key "{key}" in locale "{locale}" not found in reference',
                ))

        for key in reference_keys:
            segments = key.split(".")
            found, value = lookup(tree, segments)
            if not found:
                continue
            _, reference_value = lookup(reference, segments)

            if _kind(reference_value) != _kind(value):
                result.errors.append(ValidationIssue(
                    type="type_mismatch",
                    locale=locale,
                    key=key,
                    message=(
                        f'Type mismatch for "{key}": expected {_kind(reference_value)}, '
                        f"got {_kind(value)}"
                    ),
                ))

            if isinstance(value, str) and not value.strip():
                result.warnings.append(ValidationIssue(
                    type="empty_value",
                    locale=locale,
                    key=key,
                    message=f'Empty value for "{key}" in locale "{locale}"',
                ))

    logger.debug(f"Validated {len(translations)} locales against {reference_locale}: "
                 f"{len(result.errors)} errors, {len(result.warnings)} warnings")
    return result
