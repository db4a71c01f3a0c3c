"""Locale identifier utilities.

Centralizes locale canonicalization and fallback-chain derivation used
throughout the codebase. Locale identifiers are opaque strings: they are
matched verbatim against filename tokens ("about.fr.html") and locale-data
file stems ("fr.yml"), so canonicalization never rewrites separators or case.

Python 3.13+. Uses Babel for locale identifier parsing.
"""

from __future__ import annotations

import functools
from collections.abc import Iterable

from babel.core import parse_locale

__all__ = [
    "canonical_locale",
    "canonical_locales",
    "fallback_chain",
    "parent_locales",
]


def canonical_locale(locale_code: object) -> str:
    """Convert a locale identifier to its canonical string form.

    Accepts any object with a string form (config files commonly hand over
    plain strings, enum members or symbols) and strips surrounding whitespace.

    Args:
        locale_code: Locale identifier (e.g., "en", " fr ", "pt_BR")

    Returns:
        Canonical identifier

    Raises:
        ValueError: If the identifier is empty or contains a path separator

    Example:
        >>> canonical_locale(" fr ")
        'fr'
        >>> canonical_locale("pt_BR")
        'pt_BR'
    """
    code = str(locale_code).strip()
    if not code:
        msg = "Locale code cannot be empty"
        raise ValueError(msg)
    if "/" in code or "\\" in code:
        msg = f"Path separators not allowed in locale: '{code}'"
        raise ValueError(msg)
    return code


def canonical_locales(locale_codes: Iterable[object]) -> tuple[str, ...]:
    """Canonicalize a sequence of locales, dropping duplicates.

    dict.fromkeys() removes duplicates while keeping first-seen order.

    Example:
        >>> canonical_locales(["en", "fr", " en"])
        ('en', 'fr')
    """
    return tuple(dict.fromkeys(canonical_locale(code) for code in locale_codes))


@functools.lru_cache(maxsize=128)
def parent_locales(locale_code: str) -> tuple[str, ...]:
    """Derive the less specific ancestors of a locale, most specific first.

    Uses Babel's identifier parser, so "zh_Hant_TW" yields ("zh_Hant", "zh")
    and "de-AT" yields ("de",). Identifiers Babel cannot parse have no
    ancestors.

    Args:
        locale_code: Canonical locale identifier

    Returns:
        Tuple of ancestor identifiers (never includes locale_code itself)
    """
    sep = "-" if "-" in locale_code else "_"
    try:
        language, territory, script, variant = parse_locale(locale_code, sep=sep)[:4]
    except ValueError:
        return ()

    candidates: list[str] = []
    if script and (territory or variant):
        candidates.append(f"{language}{sep}{script}")
    if territory or script or variant:
        candidates.append(language)
    return tuple(code for code in dict.fromkeys(candidates) if code != locale_code)


def fallback_chain(
    locale_code: str,
    default_locale: str | None = None,
) -> tuple[str, ...]:
    """Build the translation fallback chain for a locale.

    The chain is the locale itself, then its ancestors, then the default
    locale (typically the locale mounted at the site root).

    Args:
        locale_code: Requested locale
        default_locale: Last-resort locale, or None

    Returns:
        Ordered tuple without duplicates

    Example:
        >>> fallback_chain("de_AT", "en")
        ('de_AT', 'de', 'en')
        >>> fallback_chain("en", "en")
        ('en',)
    """
    chain = [locale_code, *parent_locales(locale_code)]
    if default_locale is not None:
        chain.append(default_locale)
    return tuple(dict.fromkeys(chain))
