"""Localization package for SiteLocalization.

Provides the full resource-resolution stack: locale discovery, translation
lookup, path localization, resource expansion, lookup indexes, link
resolution and partial lookup, plus the site-wide orchestrator.

Submodules:
    types        - PEP 695 type aliases (LocaleCode, PageId, CanonicalPath, ...)
    discovery    - LocaleDataSource protocol, DirectoryLocaleSource, LocaleDiscovery
    translations - Translator protocol, LocaleScope, TranslationStore
    localizer    - PathLocalizer, LocalizedPageDescriptor
    expander     - ResourceExpander, ExpansionResult
    index        - LookupIndex, PageIndex
    links        - PathResolver protocol, LinkResolver
    partials     - PartialLookup protocol, PartialLocator
    orchestrator - SiteLocalization (site-wide orchestration)

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from sitei18n.localization.discovery import (
    DirectoryLocaleSource,
    LocaleDataFile,
    LocaleDataSource,
    LocaleDiscovery,
)
from sitei18n.localization.expander import ExpansionResult, ResourceExpander
from sitei18n.localization.index import LookupIndex, PageIndex
from sitei18n.localization.links import LinkResolver, PathResolver
from sitei18n.localization.localizer import LocalizedPageDescriptor, PathLocalizer
from sitei18n.localization.orchestrator import SiteLocalization
from sitei18n.localization.partials import PartialLocator, PartialLookup
from sitei18n.localization.translations import LocaleScope, TranslationStore, Translator
from sitei18n.localization.types import (
    CanonicalPath,
    LocaleCode,
    LocalizedPath,
    PageId,
    TranslationKey,
)

__all__ = [
    # Main orchestrator
    "SiteLocalization",
    # Locale discovery
    "DirectoryLocaleSource",
    "LocaleDataFile",
    "LocaleDataSource",
    "LocaleDiscovery",
    # Translation lookup
    "LocaleScope",
    "TranslationStore",
    "Translator",
    # Path localization and expansion
    "ExpansionResult",
    "LocalizedPageDescriptor",
    "PathLocalizer",
    "ResourceExpander",
    # Lookup and link resolution
    "LinkResolver",
    "LookupIndex",
    "PageIndex",
    "PathResolver",
    # Partials
    "PartialLocator",
    "PartialLookup",
    # Type aliases for user code type annotations
    "CanonicalPath",
    "LocaleCode",
    "LocalizedPath",
    "PageId",
    "TranslationKey",
]
