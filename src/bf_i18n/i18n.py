# src/bf_i18n/i18n.py
"""
Internationalisation (i18n) facade.

:class:`I18n` validates its options once, owns the translation tree and
the current locale, and routes every lookup through a
:class:`~bf_i18n.translator.Translator`.

Usage::

    from bf_i18n import I18n

    i18n = I18n(
        translations={"en": {"greeting": "Hello, %{name}!"},
                      "ja": {"greeting": "こんにちは、%{name}さん"}},
        default_locale="en",
    )
    i18n.t("greeting", name="Ann")   # → "Hello, Ann!"
    i18n.locale = "ja"
    i18n.t("greeting", name="Ann")   # → "こんにちは、Annさん"

Keys use dotted notation: ``namespace.context.identifier``.  A key that
cannot be resolved comes back unchanged and is recorded as missing.
"""
import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from .errors import ConfigurationError, InvalidLocaleError
from .interpolator import Interpolator
from .locale_detection import detect_locale
from .models import InterpolationOptions, MissingKeyInfo, TranslationTree, TranslationValue
from .modes import ModeConfig, get_mode_config
from .nodes import plain_copy
from .options import I18nOptions, validate_options
from .pluralizer import Pluralizer
from .translator import Translator

logger = logging.getLogger(__name__)

ChangeListener = Callable[[], None]


class I18n:
    """
    Translation entry point for one application.

    Locale-change listeners run synchronously, in registration order.  A
    listener may assign the locale again; listeners are only re-notified
    when the value actually changes, and avoiding endless ping-pong
    between listeners is up to the caller.

    Raises:
        ConfigurationError: If the options do not validate.
    """

    def __init__(self, **options: Any):
        result = validate_options(options)
        if not result.ok:
            raise ConfigurationError(result.errors)
        self.options: I18nOptions = result.options

        self._listeners: Dict[ChangeListener, None] = {}
        self._missing_keys: Dict[str, MissingKeyInfo] = {}
        self._locale = self._determine_initial_locale()

        self.translator = Translator(
            translations=self.options.translations,
            locale=self._locale,
            fallback_locales=self._normalize_fallback_locales(),
            interpolator=self._create_interpolator(),
            pluralizer=self._create_pluralizer(),
            missing_translation_handler=self.options.missing_translation_handler,
            debug=self.options.debug,
        )
        logger.debug(f"I18n ready: mode={self.mode}, locale={self._locale}")

    # ── construction helpers ──────────────────────────────────────────────

    def _determine_initial_locale(self) -> str:
        if self.options.locale:
            return self.options.locale
        if self.options.detect_locale:
            return detect_locale(
                available_locales=list(self.options.translations.keys()),
                fallback=self.options.default_locale,
            )
        return self.options.default_locale

    def _mode_config(self) -> ModeConfig:
        return get_mode_config(self.options.mode)

    def _create_interpolator(self) -> Interpolator:
        mode_config = self._mode_config()
        overrides = self.options.interpolation
        prefix = overrides.prefix if overrides and overrides.prefix is not None else mode_config.interpolation_prefix
        suffix = overrides.suffix if overrides and overrides.suffix is not None else mode_config.interpolation_suffix
        return Interpolator(InterpolationOptions(prefix=prefix, suffix=suffix))

    def _create_pluralizer(self) -> Pluralizer:
        overrides = self.options.pluralization
        plural_type = (overrides.type if overrides and overrides.type else None) \
            or self._mode_config().pluralization_type
        # 'icu' and 'custom' are accepted but resolve like 'key'
        if plural_type not in ("key", "pipe"):
            plural_type = "key"
        return Pluralizer(plural_type, self._locale)

    def _normalize_fallback_locales(self) -> List[str]:
        configured = self.options.fallback_locale
        if configured is None:
            configured = []
        elif isinstance(configured, str):
            configured = [configured]

        chain: List[str] = []
        for loc in [*configured, self.options.default_locale]:
            if loc not in chain:
                chain.append(loc)
        return chain

    # ── locale ────────────────────────────────────────────────────────────

    @property
    def mode(self) -> str:
        return self.options.mode

    @property
    def locale(self) -> str:
        return self._locale

    @locale.setter
    def locale(self, new_locale: str) -> None:
        if not isinstance(new_locale, str) or not new_locale.strip():
            raise InvalidLocaleError("Locale must be a non-empty string")

        trimmed = new_locale.strip()
        if trimmed != self._locale:
            logger.debug(f"Locale changed: {self._locale} -> {trimmed}")
            self._locale = trimmed
            self.translator.set_locale(trimmed)
            self._notify_change()

    @property
    def available_locales(self) -> List[str]:
        return self.translator.get_available_locales()

    def has_locale(self, locale: str) -> bool:
        return locale in self.available_locales

    # ── translation ───────────────────────────────────────────────────────

    def t(self, key: str, /, *, scope: Union[str, Sequence[str], None] = None,
          default: Union[str, Sequence[str], None] = None, count: Optional[float] = None,
          locale: Optional[str] = None, **values: Any) -> str:
        """
        Look up a translated string.

        Args:
            key: Dotted translation key (e.g. ``'users.index.title'``).
            scope: Key prefix, one segment or a sequence of segments.
            default: Text used when the key resolves nowhere.
            count: Selects a plural form; also interpolated as ``count``.
            locale: Override locale for this call only.
            **values: Interpolation values.

        Returns:
            The translated string, or the key itself if not found.
        """
        result = self.translator.translate(
            key, scope=scope, default=default, count=count, locale=locale, values=values,
        )

        target_locale = locale or self._locale
        if result == key and not self.exists(key, target_locale):
            self._track_missing(key, target_locale)

        return result

    def exists(self, key: str, locale: Optional[str] = None) -> bool:
        return self.translator.exists(key, locale)

    def add_translations(self, locale: str, translations: Mapping[str, TranslationValue]) -> None:
        """Deep-merge *translations* into *locale* and notify listeners."""
        self.translator.add_translations(locale, plain_copy(translations))
        self._notify_change()

    def get_translations(self) -> TranslationTree:
        """Return the live translation tree (not a copy)."""
        return self.options.translations

    # ── change listeners ──────────────────────────────────────────────────

    def on_change(self, callback: ChangeListener) -> Callable[[], None]:
        """
        Register *callback* for locale and translation changes.

        Returns:
            A function that unregisters the callback.
        """
        self._listeners[callback] = None

        def unsubscribe() -> None:
            self._listeners.pop(callback, None)

        return unsubscribe

    def _notify_change(self) -> None:
        for listener in list(self._listeners):
            listener()

    # ── missing key tracking ──────────────────────────────────────────────

    def _track_missing(self, key: str, locale: str) -> None:
        map_key = f"{locale}:{key}"
        if map_key not in self._missing_keys:
            logger.debug(f"Missing translation recorded: {map_key}")
            self._missing_keys[map_key] = MissingKeyInfo(key=key, locale=locale, timestamp=datetime.now())

    def get_missing_keys(self) -> List[MissingKeyInfo]:
        return list(self._missing_keys.values())

    def clear_missing_keys(self) -> None:
        self._missing_keys.clear()

    def has_missing_keys(self) -> bool:
        return bool(self._missing_keys)


def create_i18n(**options: Any) -> I18n:
    """Create an :class:`I18n` instance."""
    return I18n(**options)
