"""Template helpers bound to the page being rendered.

A TemplateHelpers instance is created per rendered page and exposes the
localization operations templates call, with the page's locale and page id
filled in.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sitei18n.diagnostics import ConfigurationError, Diagnostic, DiagnosticCode

if TYPE_CHECKING:
    from sitei18n.localization.orchestrator import SiteLocalization
    from sitei18n.localization.partials import PartialLookup
    from sitei18n.localization.types import LocaleCode, LocalizedPath, PageId
    from sitei18n.sitemap import Resource

__all__ = ["TemplateHelpers"]


class TemplateHelpers:
    """Localization helpers for one page.

    Args:
        site: Site-wide localization state
        locale: Locale the page is rendered in
        page_id: Untranslated page id, for locale_path() defaults
        partials: Pipeline partial lookup, for locate_partial()

    Example:
        >>> helpers = TemplateHelpers.for_resource(site, resource)
        >>> helpers.t("nav.home")
        'Accueil'
        >>> helpers.switch_locale_path()
        '/about.html'
    """

    __slots__ = ("_locale", "_page_id", "_partials", "_site")

    def __init__(
        self,
        site: SiteLocalization,
        locale: LocaleCode,
        *,
        page_id: PageId | None = None,
        partials: PartialLookup | None = None,
    ) -> None:
        self._site = site
        self._locale = locale
        self._page_id = page_id
        self._partials = partials

    @classmethod
    def for_resource(
        cls,
        site: SiteLocalization,
        resource: Resource,
        *,
        partials: PartialLookup | None = None,
    ) -> TemplateHelpers:
        """Helpers for a resource, using the locale and page id it carries.

        Resources without a locale (not localized) use the mount locale.
        """
        locale = resource.locale
        if locale is None:
            locale = site.mount_locale()
        if locale is None:
            msg = f"Resource '{resource.path}' has no locale and the site has none"
            raise ConfigurationError(
                Diagnostic(code=DiagnosticCode.INVALID_OPTION, message=msg, path=resource.path)
            )
        page_id = resource.metadata.get("locals", {}).get("page_id")
        return cls(site, locale, page_id=page_id, partials=partials)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"TemplateHelpers(locale={self._locale!r}, page_id={self._page_id!r})"

    @property
    def lang(self) -> LocaleCode:
        """Locale of the page."""
        return self._locale

    @property
    def page_id(self) -> PageId | None:
        """Untranslated page id of the page, if localized."""
        return self._page_id

    @property
    def langs(self) -> tuple[LocaleCode, ...]:
        """All known locales."""
        return self._site.known_locales()

    def t(self, key: str, *, default: str | None = None, locale: LocaleCode | None = None) -> str:
        """Translate ``key`` in the page's locale (or ``locale``)."""
        return self._site.translations.translate(
            key, default=default, locale=locale if locale is not None else self._locale
        )

    def url_for(
        self,
        path_or_resource: str | Resource,
        *,
        relative: bool | None = None,
        **options: Any,
    ) -> str:
        """URL of a link target, rewritten to its variant in the page's locale."""
        return self._site.resolve_link(
            path_or_resource, self._locale, relative=relative, **options
        )

    def locale_path(
        self,
        page_id: PageId | None = None,
        locale: LocaleCode | None = None,
    ) -> LocalizedPath:
        """Path of a page id (default: this page) in a locale (default: this one)."""
        return self._site.locale_path(
            self._require_page_id(page_id), locale if locale is not None else self._locale
        )

    def switch_locale_path(
        self,
        locale: LocaleCode | None = None,
        page_id: PageId | None = None,
    ) -> LocalizedPath:
        """Path of this page (or ``page_id``) in another locale."""
        return self._site.switch_locale_path(
            self._require_page_id(page_id), locale, current_locale=self._locale
        )

    def other_locales(self) -> tuple[LocaleCode, ...]:
        """Known locales except the page's locale."""
        return self._site.other_locales(self._locale)

    def other_locale(self) -> LocaleCode | None:
        """First known locale other than the page's locale."""
        return self._site.other_locale(self._locale)

    def locate_partial(self, name: str, *, try_static: bool = False) -> str | None:
        """Locate a partial, preferring the page's locale variant.

        Raises:
            ConfigurationError: If no partial lookup was given
        """
        if self._partials is None:
            msg = "locate_partial needs a partial lookup"
            raise ConfigurationError(
                Diagnostic(code=DiagnosticCode.INVALID_OPTION, message=msg)
            )
        return self._site.partial_locator(self._partials).locate_partial(
            name, self._locale, try_static=try_static
        )

    def _require_page_id(self, page_id: PageId | None) -> PageId:
        if page_id is not None:
            return page_id
        if self._page_id is None:
            msg = "This page is not localized; pass a page_id"
            raise ConfigurationError(
                Diagnostic(code=DiagnosticCode.INVALID_OPTION, message=msg, locale=self._locale)
            )
        return self._page_id
