# src/bf_i18n/locale_detection.py
"""
Environment locale detection.

Reads the user's preferred locales from the POSIX locale environment
variables (``LANGUAGE``, ``LC_ALL``, ``LC_MESSAGES``, ``LANG``) and then
from :func:`locale.getlocale`, and picks the best match among the
available translation locales.
"""
import locale
import os
from typing import List, Mapping, Optional, Sequence

_IGNORED = {"c", "posix"}


def normalize_locale(value: str) -> str:
    """Lowercase and use ``-`` as separator (``en_US`` → ``en-us``)."""
    return value.lower().replace("_", "-")


def get_language_code(value: str) -> str:
    """Return the language part of a locale (``en-US`` → ``en``)."""
    return value.split("-")[0]


def _clean(raw: str) -> Optional[str]:
    # ja_JP.UTF-8@euro → ja-JP
    value = raw.split(".")[0].split("@")[0].strip()
    if not value or value.lower() in _IGNORED:
        return None
    return value.replace("_", "-")


def get_environment_locales(environ: Optional[Mapping[str, str]] = None) -> List[str]:
    """
    Return the user's preferred locales, most preferred first.

    Args:
        environ: Environment mapping to read; defaults to ``os.environ``.
    """
    env = os.environ if environ is None else environ
    found: List[str] = []

    candidates = env.get("LANGUAGE", "").split(":")
    candidates += [env.get(var, "") for var in ("LC_ALL", "LC_MESSAGES", "LANG")]
    if environ is None:
        try:
            candidates.append(locale.getlocale()[0] or "")
        except ValueError:
            # Unparseable locale settings; rely on the variables above
            pass

    for raw in candidates:
        value = _clean(raw)
        if value and value not in found:
            found.append(value)
    return found


def _find_best_match(preferred: str, available: Sequence[str]) -> Optional[str]:
    normalized = normalize_locale(preferred)
    for candidate in available:
        if normalize_locale(candidate) == normalized:
            return candidate

    language = get_language_code(normalized)
    for candidate in available:
        if get_language_code(normalize_locale(candidate)) == language:
            return candidate
    return None


def detect_locale(available_locales: Optional[Sequence[str]] = None, fallback: str = "en",
                  environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Detect the best locale for the current environment.

    Args:
        available_locales: Locales translations exist for.  When empty the
            first preferred locale is returned as-is (normalized).
        fallback: Returned when nothing is detected or nothing matches.
        environ: Environment mapping to read; defaults to ``os.environ``.

    Returns:
        str: An entry of *available_locales*, the normalized preferred
        locale, or *fallback*.
    """
    preferred = get_environment_locales(environ)
    if not preferred:
        return fallback

    if not available_locales:
        return normalize_locale(preferred[0])

    for candidate in preferred:
        match = _find_best_match(candidate, available_locales)
        if match:
            return match
    return fallback
