"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating SiteLocalization call sites.

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias

__all__ = [
    "CanonicalPath",
    "LocaleCode",
    "LocalizedPath",
    "PageId",
    "TranslationKey",
]

LocaleCode: TypeAlias = str
"""Opaque locale identifier (e.g., 'en', 'fr', 'pt_BR')."""

PageId: TypeAlias = str
"""Basename of a localizable template without its extension (e.g., 'about')."""

CanonicalPath: TypeAlias = str
"""Locale-agnostic lookup key with a leading slash (e.g., '/about.html')."""

LocalizedPath: TypeAlias = str
"""Final localized URL path with a leading slash (e.g., '/fr/a-propos.html')."""

TranslationKey: TypeAlias = str
"""Dotted translation key (e.g., 'paths.about')."""
