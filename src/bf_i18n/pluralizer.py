# src/bf_i18n/pluralizer.py
"""
Plural form selection for both framework conventions.

Rails stores plurals as a mapping keyed by CLDR category::

    {"zero": "No items", "one": "One item", "other": "%{count} items"}

Laravel stores them as one pipe-delimited string::

    "{0} No items|{1} One item|[2,*] :count items"

The CLDR category for a count comes from Babel's plural rules for the
bound locale.  The module also converts between the two representations;
``key_to_pipe`` keeps only zero/one/other.
"""
import logging
import math
import re
from typing import Any, Callable, Dict, List, Mapping, Optional

from babel import Locale, UnknownLocaleError

from .errors import PluralSyntaxError
from .models import LaravelPluralRule, TranslationValue
from .nodes import MISSING, is_mapping

logger = logging.getLogger(__name__)

CategorySelector = Callable[[float], str]

_EXACT_RULE = re.compile(r"^\{(\d+)\}\s*(.*)$", re.DOTALL)
_RANGE_RULE = re.compile(r"^\[(\d+),(\d+|\*)\]\s*(.*)$", re.DOTALL)
_OPENERS = "[{"
_CLOSERS = "]}"


def babel_category_selector(locale: str) -> CategorySelector:
    """
    Return Babel's CLDR plural-category function for *locale*.

    Unknown or malformed locale identifiers use English rules.
    """
    try:
        babel_locale = Locale.parse(locale.replace("-", "_"))
    except (UnknownLocaleError, ValueError, TypeError):
        logger.debug("No CLDR plural rules for locale %r, using English rules", locale)
        babel_locale = Locale("en")
    return babel_locale.plural_form


class Pluralizer:
    """
    Resolves plural forms for one locale.

    Args:
        type: ``'key'`` for Rails plural objects, ``'pipe'`` for Laravel strings.
        locale: Locale whose CLDR rules select categories.
        selector_factory: Builds the category selector for a locale
            (defaults to Babel).
    """

    def __init__(self, type: str = "key", locale: str = "en",
                 selector_factory: Callable[[str], CategorySelector] = babel_category_selector):
        self.type = type
        self.locale = locale
        self._selector_factory = selector_factory
        self._select = selector_factory(locale)

    def category(self, count: float) -> str:
        """Return the CLDR plural category of *count* for the bound locale."""
        return self._select(count)

    # ── key based (Rails) ─────────────────────────────────────────────────

    def resolve_key_based(self, forms: Mapping[str, TranslationValue],
                          count: float) -> Any:
        """
        Pick a form from a plural object.

        An explicit ``zero`` form wins for a count of 0 regardless of the
        locale's category; otherwise the CLDR category, then ``other``.
        A stored ``None`` form is returned as is.

        Returns:
            The selected form, or ``nodes.MISSING`` when none applies.
        """
        if count == 0 and "zero" in forms:
            return forms["zero"]
        category = self.category(count)
        if category in forms:
            return forms[category]
        return forms.get("other", MISSING)

    # ── pipe based (Laravel) ──────────────────────────────────────────────

    def parse_pipe_separated(self, text: str, strict: bool = False) -> List[LaravelPluralRule]:
        """
        Parse a pipe-delimited plural string into ordered rules.

        Pipes nested inside ``[...]`` or ``{...}`` do not split.  Each
        trimmed segment is ``{N} text`` (exact), ``[N,M] text`` or
        ``[N,*] text`` (range).  With exactly two untagged segments the first
        is the singular (exact 1) and the second matches everything.  Other
        untagged segments carry only text.

        Raises:
            PluralSyntaxError: When *strict* and brackets are unbalanced or a
                segment opens with a bracket that is not a valid marker.
        """
        parts = _split_by_pipe(text, strict)
        rules = []
        for index, part in enumerate(parts):
            rules.append(_parse_rule(part.strip(), index, len(parts), strict))
        return rules

    def resolve_pipe_based(self, text: str, count: float) -> str:
        """
        Pick the text of the first matching rule.

        Rules are tried in order; the first exact or range match wins.  When
        no rule matches, the last parsed rule's text is returned.
        """
        rules = self.parse_pipe_separated(text)
        for rule in rules:
            if rule.matches(count):
                return rule.text
        return rules[-1].text if rules else text

    def resolve(self, value: TranslationValue, count: float) -> Any:
        """Resolve *value* according to this pluralizer's type; ``nodes.MISSING`` if no form applies."""
        if self.type == "pipe":
            if isinstance(value, str):
                return self.resolve_pipe_based(value, count)
            return value
        if is_mapping(value):
            return self.resolve_key_based(value, count)
        return value

    # ── representation conversion ─────────────────────────────────────────

    @staticmethod
    def key_to_pipe(forms: Mapping[str, str]) -> str:
        """Build a pipe string from zero/one/other; two/few/many are dropped."""
        parts = []
        if "zero" in forms:
            parts.append(f"{{0}} {forms['zero']}")
        if "one" in forms:
            parts.append(f"{{1}} {forms['one']}")
        if "other" in forms:
            parts.append(f"[2,*] {forms['other']}")
        return "|".join(parts)

    @staticmethod
    def pipe_to_key(text: str) -> Optional[Dict[str, str]]:
        """
        Build a plural object from a pipe string.

        ``{0}`` maps to zero, ``{1}`` to one and an open-ended range to
        other.  An untagged ``singular|plural`` pair maps to one/other.

        Returns:
            The plural object, or ``None`` when no form could be extracted.

        Raises:
            PluralSyntaxError: If the string is structurally malformed.
        """
        rules = Pluralizer("pipe").parse_pipe_separated(text, strict=True)
        result: Dict[str, str] = {}
        for rule in rules:
            if rule.exact == 0:
                result["zero"] = rule.text
            elif rule.exact == 1:
                result["one"] = rule.text
            elif rule.is_open_ended:
                result["other"] = rule.text

        if len(rules) == 2 and not result:
            result["one"] = rules[0].text
            result["other"] = rules[1].text

        return result or None

    def with_locale(self, locale: str) -> "Pluralizer":
        """Return a new pluralizer of the same type bound to *locale*."""
        return Pluralizer(self.type, locale, self._selector_factory)


def _split_by_pipe(text: str, strict: bool) -> List[str]:
    parts = []
    current = []
    depth = 0
    for char in text:
        if char in _OPENERS:
            depth += 1
        elif char in _CLOSERS:
            if depth == 0 and strict:
                raise PluralSyntaxError(f"Unmatched {char!r} in plural string: {text!r}")
            depth = max(depth - 1, 0)

        if char == "|" and depth == 0:
            parts.append("".join(current))
            current = []
        else:
            current.append(char)

    if depth and strict:
        raise PluralSyntaxError(f"Unclosed bracket in plural string: {text!r}")
    if current:
        parts.append("".join(current))
    return parts


def _parse_rule(part: str, index: int, total: int, strict: bool) -> LaravelPluralRule:
    exact = _EXACT_RULE.match(part)
    if exact:
        return LaravelPluralRule(text=exact.group(2), exact=int(exact.group(1)))

    ranged = _RANGE_RULE.match(part)
    if ranged:
        end = math.inf if ranged.group(2) == "*" else int(ranged.group(2))
        return LaravelPluralRule(text=ranged.group(3), range_start=int(ranged.group(1)), range_end=end)

    if strict and part[:1] in _OPENERS:
        raise PluralSyntaxError(f"Invalid plural marker in segment: {part!r}")

    if total == 2:
        if index == 0:
            return LaravelPluralRule(text=part, exact=1)
        return LaravelPluralRule(text=part, range_start=0, range_end=math.inf)

    return LaravelPluralRule(text=part)


def create_rails_pluralizer(locale: str = "en") -> Pluralizer:
    return Pluralizer("key", locale)


def create_laravel_pluralizer(locale: str = "en") -> Pluralizer:
    return Pluralizer("pipe", locale)
