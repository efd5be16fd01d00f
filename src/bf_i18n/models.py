# src/bf_i18n/models.py
"""
Data models for bf-i18n.

This module defines the value types passed between the resolution
pipeline, the format converter and the tooling layer.  They are created
per call and carry no identity beyond their contents.

Classes:
    InterpolationOptions: Placeholder affixes of one mode
    LaravelPluralRule: One parsed segment of a pipe-delimited plural string
    CompatibilityIssue: A single warning or error found before conversion
    CompatibilityReport: Result of a compatibility check
    MissingKeyInfo: First observation of an unresolved translation key
    ValidationIssue: A cross-locale consistency problem
    ValidationResult: Result of a cross-locale validation run
"""
import math
from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

TranslationValue = Union[str, int, float, bool, None, List[Any], Dict[str, Any]]
"""Recursive translation value: primitive, list of values, or mapping of values."""

TranslationTree = Dict[str, Dict[str, TranslationValue]]
"""Mapping from locale code to that locale's namespace root."""

ISSUE_TYPES = (
    "unsupported_plural_form",
    "unsupported_range_plural",
    "interpolation_syntax",
    "nested_in_flat_format",
    "invalid_variable_name",
    "custom",
)


@dataclass(frozen=True)
class InterpolationOptions:
    """
    Placeholder affixes.

    An empty ``suffix`` means the placeholder has no closing delimiter and
    ends at the first character outside ``[a-zA-Z0-9_]``.
    """
    prefix: str = "%{"
    suffix: str = "}"

    def wrap(self, name: str) -> str:
        """Return the full delimited placeholder for *name*."""
        return f"{self.prefix}{name}{self.suffix}"


@dataclass(frozen=True)
class LaravelPluralRule:
    """
    One segment of a pipe-delimited plural string.

    A rule is an exact-count match (``exact``), a range match
    (``range_start``..``range_end``, where ``range_end`` may be ``math.inf``)
    or, when neither is set, a bare text kept only as the last-resort result.
    """
    text: str
    exact: Optional[int] = None
    range_start: Optional[int] = None
    range_end: Optional[float] = None

    @property
    def is_open_ended(self) -> bool:
        return self.range_start is not None and self.range_end == math.inf

    def matches(self, count: float) -> bool:
        if self.exact is not None and self.exact == count:
            return True
        if self.range_start is not None and self.range_end is not None:
            return self.range_start <= count <= self.range_end
        return False


@dataclass
class CompatibilityIssue:
    """
    A warning or error reported by the compatibility checker.

    Attributes:
        key (str): Dot-path of the offending translation
        type (str): One of ``ISSUE_TYPES``
        message (str): Human-readable description
        suggestion (Optional[str]): Suggested follow-up, if any
    """
    key: str
    type: str
    message: str
    suggestion: Optional[str] = None


@dataclass
class CompatibilityReport:
    """
    Advisory output describing fidelity loss before a conversion.

    ``compatible`` is derived from ``errors``; warnings never affect it.
    """
    warnings: List[CompatibilityIssue] = field(default_factory=list)
    errors: List[CompatibilityIssue] = field(default_factory=list)

    @property
    def compatible(self) -> bool:
        return len(self.errors) == 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "compatible": self.compatible,
            "warnings": [asdict(w) for w in self.warnings],
            "errors": [asdict(e) for e in self.errors],
        }


@dataclass
class MissingKeyInfo:
    key: str
    locale: str
    timestamp: datetime


@dataclass
class ValidationIssue:
    """
    A cross-locale consistency problem.

    Attributes:
        type (str): 'missing_key', 'type_mismatch' or 'empty_value'
        locale (str): Locale in which the problem was found
        key (str): Dot-path of the translation ('' for locale-level problems)
        message (str): Human-readable description
    """
    type: str
    locale: str
    key: str
    message: str


@dataclass
class ValidationResult:
    errors: List[ValidationIssue] = field(default_factory=list)
    warnings: List[ValidationIssue] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return len(self.errors) == 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valid": self.valid,
            "errors": [asdict(e) for e in self.errors],
            "warnings": [asdict(w) for w in self.warnings],
        }
