"""Site-wide localization state for one build pipeline.

SiteLocalization ties the components together:

    discovery -> translation store -> path localizer -> resource expander
              -> published lookup index -> link resolver

Lifecycle:
    1. Construct with options (CONFIGURED phase)
    2. prepare() loads locale data and picks the mount locale (READY phase)
    3. manipulate_resource_list() expands the pipeline's resources and
       publishes the lookup index
    4. on_locale_files_changed() re-runs discovery and expansion over the
       last resource list

Thread Safety:
    Rebuilds are serialized by a single-writer lock and publish a complete
    generation (locales, mount locale, indexes) by swapping one reference
    under the write side of an RWLock. Lookups read that reference under the
    read side and never observe a half-built index.

Python 3.13+. Uses PyYAML (through TranslationStore) for locale data.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from sitei18n.config import I18nOptions
from sitei18n.diagnostics import (
    ConfigurationError,
    Diagnostic,
    DiagnosticCode,
    LocaleDataNotReadyError,
    LocalePathNotFoundError,
    NoOtherLocaleError,
)
from sitei18n.enums import LocalizationPhase
from sitei18n.localization.discovery import DirectoryLocaleSource, LocaleDiscovery
from sitei18n.localization.expander import ResourceExpander
from sitei18n.localization.index import LookupIndex, PageIndex
from sitei18n.localization.links import LinkResolver
from sitei18n.localization.localizer import PathLocalizer
from sitei18n.localization.partials import PartialLocator
from sitei18n.localization.translations import TranslationStore
from sitei18n.runtime import RWLock

if TYPE_CHECKING:
    from sitei18n.localization.discovery import LocaleDataSource
    from sitei18n.localization.links import PathResolver
    from sitei18n.localization.partials import PartialLookup
    from sitei18n.localization.types import LocaleCode, LocalizedPath, PageId
    from sitei18n.sitemap import Resource

__all__ = ["SiteLocalization"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _Generation:
    """Everything one expansion pass publishes."""

    locales: tuple[LocaleCode, ...] = ()
    mount_locale: LocaleCode | None = None
    index: LookupIndex = field(default_factory=LookupIndex)
    pages: PageIndex = field(default_factory=PageIndex)


class SiteLocalization:
    """Localization of a site's resources, links and helpers.

    Args:
        options: Localization options (defaults: autodiscover from locales/)
        root: Site root the locale data directory is resolved against
        source: Locale-data file listing; overrides ``root``
        translations: Translation store; a fresh one is created if None
        path_resolver: Pipeline link resolution used by resolve_link()
        relative_links: Site default for relative links

    Example:
        >>> site = SiteLocalization(I18nOptions(), root="site")
        >>> site.prepare()
        >>> resources = site.manipulate_resource_list(resources)
        >>> site.localized_path("/about.html", "fr")
        '/fr/a-propos.html'
    """

    __slots__ = (
        "_claimed",
        "_discovery",
        "_generation",
        "_ignored_before",
        "_last_resources",
        "_lock",
        "_options",
        "_path_resolver",
        "_phase",
        "_rebuild_lock",
        "_relative_links",
        "_source",
        "_store",
    )

    def __init__(
        self,
        options: I18nOptions | None = None,
        *,
        root: str | Path = ".",
        source: LocaleDataSource | None = None,
        translations: TranslationStore | None = None,
        path_resolver: PathResolver | None = None,
        relative_links: bool = False,
    ) -> None:
        self._options = options if options is not None else I18nOptions()
        self._source = (
            source if source is not None else DirectoryLocaleSource(root, self._options.data)
        )
        self._discovery = LocaleDiscovery(self._options, self._source)
        self._store = (
            translations
            if translations is not None
            else TranslationStore(fallbacks=not self._options.no_fallbacks)
        )
        self._path_resolver = path_resolver
        self._relative_links = relative_links

        self._phase = LocalizationPhase.CONFIGURED
        self._generation = _Generation()
        self._last_resources: tuple[Resource, ...] | None = None
        self._ignored_before: frozenset[int] = frozenset()
        self._claimed: frozenset[int] = frozenset()
        self._lock = RWLock()
        self._rebuild_lock = threading.Lock()

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"SiteLocalization(phase={self._phase!s}, "
            f"locales={self._generation.locales!r}, "
            f"mount_locale={self._generation.mount_locale!r})"
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def options(self) -> I18nOptions:
        """Localization options."""
        return self._options

    @property
    def phase(self) -> LocalizationPhase:
        """Current lifecycle phase."""
        return self._phase

    @property
    def translations(self) -> TranslationStore:
        """Translation store shared by path localization and helpers."""
        return self._store

    @property
    def discovery(self) -> LocaleDiscovery:
        """Known-locale computation."""
        return self._discovery

    @property
    def lookup_index(self) -> LookupIndex:
        """Currently published canonical path index."""
        return self._published().index

    @property
    def page_index(self) -> PageIndex:
        """Currently published page id index."""
        return self._published().pages

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def prepare(self) -> None:
        """Load locale data and choose the mount locale.

        Must run before expansion or any lookup. Calling it again reloads
        locale data.
        """
        with self._rebuild_lock:
            self._store.load_files(self._source.files())
            self._refresh()
            self._phase = LocalizationPhase.READY

        generation = self._published()
        logger.info(
            "Locales: %s (Default %s)",
            ", ".join(generation.locales),
            generation.mount_locale,
        )

    def known_locales(self) -> tuple[LocaleCode, ...]:
        """Known locales, in order (explicit list or discovered files)."""
        return self._discovery.known_locales()

    def mount_locale(self) -> LocaleCode | None:
        """Locale served at the site root, or None without locales."""
        return self._choose_mount_locale(self.known_locales())

    def manipulate_resource_list(self, resources: Sequence[Resource]) -> list[Resource]:
        """Expand the pipeline's resource list and publish a new index.

        Args:
            resources: Complete resource list of the build pass

        Returns:
            The resource list with claimed resources ignored and localized
            proxy resources appended

        Raises:
            LocaleDataNotReadyError: If prepare() has not run
        """
        self._require_ready("manipulate_resource_list")
        with self._rebuild_lock:
            # Sources ignored by an earlier pass are not pipeline-ignored.
            self._ignored_before = frozenset(
                id(r)
                for r in resources
                if r.ignored and (id(r) not in self._claimed or id(r) in self._ignored_before)
            )
            self._last_resources = tuple(resources)
            return self._rebuild(self._last_resources)

    def on_locale_files_changed(
        self,
        updated: Iterable[str | Path] = (),
        removed: Iterable[str | Path] = (),
    ) -> list[Resource] | None:
        """File-watcher callback for the locale data directory.

        Clears the locale cache, reloads translations and, once a resource
        list has been expanded, re-expands it so the published index only
        holds current locales.

        Returns:
            The re-expanded resource list, or None when nothing had been
            expanded yet
        """
        self._discovery.on_file_changed(updated, removed)
        if self._phase is not LocalizationPhase.READY:
            return None

        with self._rebuild_lock:
            self._store.reload(self._source.files())
            return self._refresh()

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def localized_path(self, path: str, locale: LocaleCode) -> LocalizedPath | None:
        """Localized variant of a root-relative path for ``locale``, or None."""
        self._require_ready("localized_path")
        return self._published().index.localized_path(
            path, locale, index_file=self._options.index_file
        )

    def link_resolver(
        self,
        path_resolver: PathResolver | None = None,
        *,
        relative_links: bool | None = None,
    ) -> LinkResolver:
        """LinkResolver bound to this site's published index.

        Raises:
            ConfigurationError: If no path resolver is given or configured
        """
        base = path_resolver if path_resolver is not None else self._path_resolver
        if base is None:
            msg = "resolve_link needs a path resolver"
            raise ConfigurationError(
                Diagnostic(
                    code=DiagnosticCode.INVALID_OPTION,
                    message=msg,
                    hint="Pass path_resolver= to SiteLocalization",
                )
            )
        return LinkResolver(
            base,
            self.localized_path,
            relative_links=self._relative_links if relative_links is None else relative_links,
        )

    def resolve_link(
        self,
        original: str | Resource,
        locale: LocaleCode,
        *,
        relative: bool | None = None,
        **options: Any,
    ) -> str:
        """Resolve a link to its variant for ``locale``; see LinkResolver."""
        self._require_ready("resolve_link")
        return self.link_resolver().resolve_link(
            original, locale, relative=relative, **options
        )

    def locale_path(self, page_id: PageId, locale: LocaleCode | None = None) -> LocalizedPath:
        """Root-relative path of a page id in ``locale``.

        Args:
            page_id: Untranslated page id (``about``)
            locale: Target locale; defaults to the current locale

        Raises:
            LocalePathNotFoundError: If the page has no variant in the locale
        """
        self._require_ready("locale_path")
        target = locale if locale is not None else self._store.current_locale
        path = None if target is None else self._published().pages.path_for(page_id, target)
        if path is None:
            msg = f"No localized path for page '{page_id}' in locale '{target}'"
            raise LocalePathNotFoundError(
                Diagnostic(
                    code=DiagnosticCode.LOCALE_PATH_NOT_FOUND,
                    message=msg,
                    hint="Page ids are template basenames without extension",
                    locale=target,
                )
            )
        return path

    def switch_locale_path(
        self,
        page_id: PageId,
        locale: LocaleCode | None = None,
        *,
        current_locale: LocaleCode,
    ) -> LocalizedPath:
        """Path of the same page in another locale.

        Args:
            page_id: Page being rendered
            locale: Target locale; defaults to the first other locale
            current_locale: Locale of the page being rendered

        Raises:
            NoOtherLocaleError: If no locale is given and no other exists
            LocalePathNotFoundError: If the page has no variant there
        """
        target = locale if locale is not None else self.other_locale(current_locale)
        if target is None:
            msg = f"No locale other than '{current_locale}' to switch to"
            raise NoOtherLocaleError(
                Diagnostic(
                    code=DiagnosticCode.NO_OTHER_LOCALE,
                    message=msg,
                    locale=current_locale,
                )
            )
        return self.locale_path(page_id, target)

    def other_locales(self, current_locale: LocaleCode) -> tuple[LocaleCode, ...]:
        """Known locales except ``current_locale``, in order."""
        return tuple(code for code in self.known_locales() if code != current_locale)

    def other_locale(self, current_locale: LocaleCode) -> LocaleCode | None:
        """First known locale other than ``current_locale``, or None."""
        others = self.other_locales(current_locale)
        return others[0] if others else None

    def partial_locator(self, base: PartialLookup) -> PartialLocator:
        """PartialLocator preferring this site's localizable templates."""
        return PartialLocator(base, self._options.templates_dir)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _choose_mount_locale(self, locales: Sequence[LocaleCode]) -> LocaleCode | None:
        if self._options.mount_at_root is not None:
            return self._options.mount_at_root
        return locales[0] if locales else None

    def _require_ready(self, operation: str) -> None:
        if self._phase is not LocalizationPhase.READY:
            msg = f"{operation}() called before locale data was prepared"
            raise LocaleDataNotReadyError(
                Diagnostic(
                    code=DiagnosticCode.LOCALE_DATA_NOT_READY,
                    message=msg,
                    hint="Call SiteLocalization.prepare() first",
                )
            )

    def _published(self) -> _Generation:
        with self._lock.read():
            return self._generation

    def _publish(self, generation: _Generation) -> None:
        with self._lock.write():
            self._generation = generation

    def _refresh(self) -> list[Resource] | None:
        """Re-expand the last resource list, or publish locales only."""
        if self._last_resources is None:
            locales = self.known_locales()
            mount = self._choose_mount_locale(locales)
            self._store.default_locale = mount
            self._publish(_Generation(locales=locales, mount_locale=mount))
            return None
        for resource in self._last_resources:
            resource.ignored = id(resource) in self._ignored_before
        return self._rebuild(self._last_resources)

    def _rebuild(self, resources: Sequence[Resource]) -> list[Resource]:
        """Expand and publish. Caller holds _rebuild_lock."""
        locales = self.known_locales()
        mount = self._choose_mount_locale(locales)
        self._store.default_locale = mount

        localizer = PathLocalizer(self._options, self._store, mount)
        result = ResourceExpander(self._options, localizer, locales).expand(resources)
        source_paths = {descriptor.source_path for descriptor in result.descriptors}
        self._claimed = frozenset(id(r) for r in resources if r.path in source_paths)
        self._publish(
            _Generation(
                locales=locales,
                mount_locale=mount,
                index=result.index,
                pages=result.pages,
            )
        )
        logger.debug(
            "Published lookup index: %d path(s), %d page(s), locales %s",
            len(result.index),
            len(result.pages),
            ", ".join(locales) or "<none>",
        )
        return list(result.resources)
