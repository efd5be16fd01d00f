# src/bf_i18n/interpolator.py
"""
Placeholder interpolation for Rails (``%{name}``) and Laravel (``:name``)
style strings.

Usage::

    from bf_i18n.interpolator import Interpolator, create_laravel_interpolator

    Interpolator().interpolate("Hello, %{name}!", {"name": "Ann"})
    create_laravel_interpolator().interpolate("Hello, :name!", {"name": "Ann"})
    Interpolator.rails_to_laravel("Hello, %{name}!")  # → "Hello, :name!"

Placeholders whose name is not in the supplied values are left untouched.
"""
import re
from typing import Any, List, Mapping, Optional

from .models import InterpolationOptions
from .modes import LARAVEL_INTERPOLATION, RAILS_INTERPOLATION

IDENTIFIER = r"[a-zA-Z_][a-zA-Z0-9_]*"


class Interpolator:
    """Substitutes named placeholders using one mode's affixes."""

    def __init__(self, options: Optional[InterpolationOptions] = None):
        self.options = options or RAILS_INTERPOLATION
        self.pattern = self._build_pattern()

    def _build_pattern(self) -> "re.Pattern[str]":
        prefix = re.escape(self.options.prefix)
        if self.options.suffix:
            return re.compile(f"{prefix}({IDENTIFIER}){re.escape(self.options.suffix)}")
        # No closing delimiter: the name ends at the first non-identifier character
        return re.compile(f"{prefix}({IDENTIFIER})")

    def interpolate(self, text: str, values: Optional[Mapping[str, Any]] = None) -> str:
        """
        Replace every known placeholder in *text*.

        Args:
            text: String containing placeholders.
            values: Substitution values; ``None`` renders as an empty string.

        Returns:
            The interpolated string.  Unknown placeholders are kept verbatim.
        """
        if not values:
            return text

        def _substitute(match: "re.Match[str]") -> str:
            name = match.group(1)
            if name not in values:
                return match.group(0)
            return _to_text(values[name])

        return self.pattern.sub(_substitute, text)

    def extract_variables(self, text: str) -> List[str]:
        """Return unique placeholder names in order of first occurrence."""
        names: List[str] = []
        for match in self.pattern.finditer(text):
            if match.group(1) not in names:
                names.append(match.group(1))
        return names

    @staticmethod
    def convert(text: str, from_options: InterpolationOptions,
                to_options: InterpolationOptions) -> str:
        """
        Rewrite placeholders from one syntax to another.

        Each discovered name is replaced literally, one name at a time, so a
        source placeholder that also appears inside an already-rewritten
        target placeholder is rewritten again.
        """
        result = text
        for name in Interpolator(from_options).extract_variables(text):
            result = result.replace(from_options.wrap(name), to_options.wrap(name))
        return result

    @staticmethod
    def rails_to_laravel(text: str) -> str:
        return Interpolator.convert(text, RAILS_INTERPOLATION, LARAVEL_INTERPOLATION)

    @staticmethod
    def laravel_to_rails(text: str) -> str:
        return Interpolator.convert(text, LARAVEL_INTERPOLATION, RAILS_INTERPOLATION)


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        # booleans render lowercase
        return "true" if value else "false"
    return str(value)


def create_rails_interpolator() -> Interpolator:
    return Interpolator(RAILS_INTERPOLATION)


def create_laravel_interpolator() -> Interpolator:
    return Interpolator(LARAVEL_INTERPOLATION)
