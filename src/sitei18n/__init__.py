"""sitei18n - Locale-aware resource resolution for static-site builds.

Expands localizable templates into one page per locale, translates their
output paths, and rewrites internal links to each page's localized variant.

Public API:
    SiteLocalization - Site-wide orchestration (discovery, expansion, lookups)
    I18nOptions - Validated localization options
    TemplateHelpers - Helpers bound to the page being rendered
    TranslationStore - YAML/JSON-backed translations with fallback chains
    Resource, ProxyResource - Sitemap resource types

Exceptions:
    I18nError - Base exception class
    LocalePathNotFoundError - No localized path for a page id / locale
    NoOtherLocaleError - No other locale to switch to
    PathResolutionError - A path resolver could not resolve a link
    ConfigurationError - Invalid options
    LocaleDataError - Unreadable or malformed locale data file
    LocaleDataNotReadyError - Lookup before SiteLocalization.prepare()

Submodules:
    sitei18n.localization - Discovery, translations, localizer, expander,
        indexes, link resolution and partials
    sitei18n.diagnostics - Error types and diagnostic codes
    sitei18n.runtime - RWLock
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .config import I18nOptions
from .diagnostics import (
    ConfigurationError,
    I18nError,
    LocaleDataError,
    LocaleDataNotReadyError,
    LocalePathNotFoundError,
    NoOtherLocaleError,
    PathResolutionError,
)
from .helpers import TemplateHelpers
from .localization import SiteLocalization, TranslationStore
from .sitemap import ProxyResource, Resource

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("sitei18n")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConfigurationError",
    "I18nError",
    "I18nOptions",
    "LocaleDataError",
    "LocaleDataNotReadyError",
    "LocalePathNotFoundError",
    "NoOtherLocaleError",
    "PathResolutionError",
    "ProxyResource",
    "Resource",
    "SiteLocalization",
    "TemplateHelpers",
    "TranslationStore",
    "__version__",
]
