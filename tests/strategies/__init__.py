"""Hypothesis strategies for sitei18n property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules.

Usage:
    from tests.strategies import known_locale_sets, resource_paths
    from tests.strategies.localization import path_translations
"""

from .localization import (
    known_locale_sets,
    locale_codes,
    page_paths,
    path_segments,
    path_translations,
    resource_paths,
)

__all__ = [
    "known_locale_sets",
    "locale_codes",
    "page_paths",
    "path_segments",
    "path_translations",
    "resource_paths",
]
