# src/bf_i18n/compatibility.py
"""
Pre-conversion compatibility checks between Rails and Laravel trees.

Everything reported here is a warning except a pipe plural string that
cannot be parsed at all, which is an error.  A report is compatible
exactly when it holds no errors.
"""
import logging
import re
from typing import Any, List, Mapping

from .errors import PluralSyntaxError
from .interpolator import Interpolator
from .models import CompatibilityIssue, CompatibilityReport
from .modes import Mode, ModeLike, interpolation_options_for, mode_name
from .nodes import NodeKind, classify_node, join_key
from .pluralizer import Pluralizer

logger = logging.getLogger(__name__)

_LARAVEL_VARIABLE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")
_RANGE_MARKER = re.compile(r"\[\d+,(\d+|\*)\]")
_EXACT_MARKER = re.compile(r"\{(\d+)\}")


class CompatibilityChecker:
    """Walks a translation tree and collects conversion issues."""

    def __init__(self, from_mode: ModeLike, to_mode: ModeLike):
        self.from_mode = mode_name(from_mode)
        self.to_mode = mode_name(to_mode)
        self.interpolator = Interpolator(interpolation_options_for(self.from_mode))
        self.warnings: List[CompatibilityIssue] = []
        self.errors: List[CompatibilityIssue] = []

    def check(self, translations: Mapping[str, Any]) -> CompatibilityReport:
        self.warnings = []
        self.errors = []
        self._walk(translations, "")
        report = CompatibilityReport(warnings=self.warnings, errors=self.errors)
        logger.debug(
            f"Compatibility {self.from_mode}->{self.to_mode}: "
            f"{len(report.warnings)} warnings, {len(report.errors)} errors"
        )
        return report

    def _walk(self, node: Mapping[str, Any], prefix: str) -> None:
        for key, value in node.items():
            self._check_value(value, join_key(prefix, key))

    def _check_value(self, value: Any, key: str) -> None:
        kind = classify_node(value)
        if kind is NodeKind.PLURAL_FORM:
            self._check_plural_object(value, key)
        elif kind is NodeKind.NAMESPACE:
            self._walk(value, key)
        elif isinstance(value, (list, tuple)):
            # list items are reported as key.0, key.1, ...
            for index, item in enumerate(value):
                self._check_value(item, join_key(key, str(index)))
        elif isinstance(value, str):
            self._check_string(value, key)

    def _check_string(self, value: str, key: str) -> None:
        self._check_interpolation(value, key)
        if self.from_mode == Mode.LARAVEL.value and "|" in value:
            self._check_pipe_plural(value, key)

    def _check_interpolation(self, value: str, key: str) -> None:
        if self.to_mode != Mode.LARAVEL.value:
            return
        for variable in self.interpolator.extract_variables(value):
            if not _LARAVEL_VARIABLE.match(variable):
                self.warnings.append(CompatibilityIssue(
                    key=key,
                    type="invalid_variable_name",
                    message=f'Variable name "{variable}" may not be valid in Laravel mode',
                    suggestion="Consider using alphanumeric variable names only",
                ))

    def _check_pipe_plural(self, value: str, key: str) -> None:
        if self.to_mode != Mode.RAILS.value:
            return

        if _RANGE_MARKER.search(value):
            self.warnings.append(CompatibilityIssue(
                key=key,
                type="unsupported_range_plural",
                message='Range-based plural syntax "[n,m]" will be converted to nearest Rails plural form',
                suggestion="Review the converted plural forms for accuracy",
            ))

        for number in _EXACT_MARKER.findall(value):
            if int(number) > 2:
                self.warnings.append(CompatibilityIssue(
                    key=key,
                    type="unsupported_plural_form",
                    message=f'Exact match "{{{int(number)}}}" has no direct equivalent in Rails',
                    suggestion='This will be mapped to "other" form in Rails',
                ))

        try:
            Pluralizer.pipe_to_key(value)
        except PluralSyntaxError as e:
            logger.debug(f"Unparseable plural string at {key}: {e}")
            self.errors.append(CompatibilityIssue(
                key=key,
                type="interpolation_syntax",
                message=f"Invalid Laravel plural syntax: {value[:50]}",
                suggestion="Check the pipe-delimited plural format",
            ))

    def _check_plural_object(self, forms: Mapping[str, Any], key: str) -> None:
        if self.from_mode != Mode.RAILS.value or self.to_mode != Mode.LARAVEL.value:
            return

        if "two" in forms or "few" in forms:
            self.warnings.append(CompatibilityIssue(
                key=key,
                type="unsupported_plural_form",
                message='Plural forms "two" and "few" will be approximated in Laravel format',
                suggestion="Laravel uses simpler plural rules; review the output",
            ))

        for text in forms.values():
            if isinstance(text, str):
                self._check_interpolation(text, key)


def check_compatibility(translations: Mapping[str, Any], from_mode: ModeLike,
                        to_mode: ModeLike) -> CompatibilityReport:
    """Check one locale's translations for conversion from *from_mode* to *to_mode*."""
    return CompatibilityChecker(from_mode, to_mode).check(translations)
