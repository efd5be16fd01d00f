# src/bf_i18n/translator.py
"""
Key resolution for bf-i18n.

The translator walks a locale fallback chain, looks the dotted key up in
each locale's nested mapping, resolves plurals and interpolates.  The
first locale that yields a value wins; nothing is merged across locales.
"""
import json
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from .interpolator import Interpolator
from .models import TranslationTree, TranslationValue
from .nodes import MISSING, deep_merge, lookup
from .pluralizer import Pluralizer

logger = logging.getLogger(__name__)

MissingTranslationHandler = Callable[[str, str], Optional[str]]


class Translator:
    """
    Resolves translation keys against a shared translation tree.

    Attributes:
        translations (TranslationTree): Locale code → namespace root (shared, not copied)
        locale (str): Current locale
        fallback_locales (List[str]): Locales tried after the requested one
    """

    def __init__(self, translations: TranslationTree, locale: str, fallback_locales: Sequence[str],
                 interpolator: Interpolator, pluralizer: Pluralizer,
                 missing_translation_handler: Optional[MissingTranslationHandler] = None,
                 debug: bool = False):
        self.translations = translations
        self.locale = locale
        self.fallback_locales = list(fallback_locales)
        self.interpolator = interpolator
        self.pluralizer = pluralizer
        self.missing_translation_handler = missing_translation_handler
        self.debug = debug

    def set_locale(self, locale: str) -> None:
        self.locale = locale
        self.pluralizer = self.pluralizer.with_locale(locale)

    def get_available_locales(self) -> List[str]:
        return list(self.translations.keys())

    def build_fallback_chain(self, locale: str) -> List[str]:
        """
        Return the ordered, de-duplicated locales to try for *locale*.

        ``en-US`` is followed by ``en``, then by the configured fallbacks.
        """
        chain = [locale]
        if "-" in locale:
            language = locale.split("-")[0]
            if language not in chain:
                chain.append(language)
        for fallback in self.fallback_locales:
            if fallback not in chain:
                chain.append(fallback)
        return chain

    def exists(self, key: str, locale: Optional[str] = None) -> bool:
        """True when any locale in the chain holds a value (of any type) at *key*."""
        segments = key.split(".")
        for loc in self.build_fallback_chain(locale or self.locale):
            root = self.translations.get(loc)
            if root is None:
                continue
            found, _ = lookup(root, segments)
            if found:
                return True
        return False

    def translate(self, key: str, scope: Union[str, Sequence[str], None] = None,
                  default: Union[str, Sequence[str], None] = None, count: Optional[float] = None,
                  locale: Optional[str] = None, values: Optional[Mapping[str, Any]] = None) -> str:
        """
        Translate *key*.

        Args:
            key: Dotted translation key.
            scope: Key prefix, one segment or a sequence of segments.
            default: Text (or first of a sequence) used when nothing resolves.
            count: Selects a plural form; also available as ``count`` placeholder.
            locale: Starting locale for this call only.
            values: Interpolation values.

        Returns:
            The translated string, or the scoped key itself if it cannot be
            resolved.
        """
        target_locale = locale or self.locale
        full_key = self._apply_scope(key, scope)
        variables: Dict[str, Any] = dict(values or {})
        if count is not None:
            variables["count"] = count

        segments = full_key.split(".")
        for loc in self.build_fallback_chain(target_locale):
            result = self._translate_for_locale(segments, loc, count, variables)
            if result is not MISSING:
                return result

        if default is not None:
            text = default if isinstance(default, str) else next(iter(default), None)
            if text is not None:
                return self.interpolator.interpolate(text, variables)

        if self.missing_translation_handler is not None:
            handled = self.missing_translation_handler(full_key, target_locale)
            if handled is not None:
                return handled

        if self.debug:
            logger.warning(f"Missing translation: {full_key} (locale: {target_locale})")

        return full_key

    @staticmethod
    def _apply_scope(key: str, scope: Union[str, Sequence[str], None]) -> str:
        if not scope:
            return key
        parts = [scope] if isinstance(scope, str) else list(scope)
        return ".".join([*parts, key])

    def _translate_for_locale(self, segments: List[str], locale: str, count: Optional[float],
                              variables: Mapping[str, Any]) -> Any:
        root = self.translations.get(locale)
        if root is None:
            return MISSING

        found, value = lookup(root, segments)
        if not found:
            return MISSING

        if count is not None:
            value = self.pluralizer.resolve(value, count)
            if value is MISSING:
                return MISSING

        if not isinstance(value, str):
            return _stringify(value)

        return self.interpolator.interpolate(value, variables)

    def add_translations(self, locale: str, translations: Mapping[str, TranslationValue]) -> None:
        """Deep-merge *translations* into *locale*, creating the locale if needed."""
        root = self.translations.setdefault(locale, {})
        deep_merge(root, translations)


def _stringify(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
