"""Localization-aware link resolution.

LinkResolver wraps the pipeline's own path resolver: it resolves a link to
its canonical root-relative form, swaps in the localized variant from the
lookup index, and resolves the result with the caller's relative-link
setting. Any failure caused by localization falls back to resolving the
original link.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol

from sitei18n.diagnostics import PathResolutionError

if TYPE_CHECKING:
    from sitei18n.localization.types import LocaleCode, LocalizedPath
    from sitei18n.sitemap import Resource

__all__ = ["LinkResolver", "PathResolver"]

logger = logging.getLogger(__name__)


class PathResolver(Protocol):
    """Protocol for the pipeline's link resolution (``url_for``).

    Implementations turn a path or resource into a URL, relative to the page
    being rendered when ``relative`` is True, and raise PathResolutionError
    when they cannot.
    """

    def resolve(
        self,
        path_or_resource: str | Resource,
        *,
        relative: bool,
        locale: LocaleCode | None = None,
        **options: Any,
    ) -> str:
        """Resolve a path or resource to a URL."""


class LinkResolver:
    """Two-stage resolver: localized candidate first, base resolver always.

    Args:
        base: The pipeline's path resolver
        localized_path: Lookup of a root-relative href for a locale
            (normally SiteLocalization.localized_path)
        relative_links: Site default for relative links, used when the
            caller does not say
    """

    __slots__ = ("_base", "_localized_path", "_relative_links")

    def __init__(
        self,
        base: PathResolver,
        localized_path: Callable[[str, LocaleCode], LocalizedPath | None],
        *,
        relative_links: bool = False,
    ) -> None:
        self._base = base
        self._localized_path = localized_path
        self._relative_links = relative_links

    @property
    def base(self) -> PathResolver:
        """The wrapped path resolver."""
        return self._base

    def resolve_link(
        self,
        original: str | Resource,
        locale: LocaleCode,
        *,
        relative: bool | None = None,
        **options: Any,
    ) -> str:
        """Resolve ``original`` to its variant for ``locale``.

        Args:
            original: Link target as written in the template
            locale: Locale of the page being rendered
            relative: Relative-link setting; None uses the site default
            **options: Passed through to the base resolver

        Returns:
            Localized URL when the lookup index has one, else the URL of
            the original link

        Raises:
            PathResolutionError: Only when the base resolver cannot resolve
                the original link itself
        """
        should_relativize = self._relative_links if relative is None else relative

        href = self._base.resolve(original, relative=False, locale=locale, **options)
        localized = self._localized_path(href, locale)

        target = href if localized is None else localized
        try:
            return self._base.resolve(target, relative=should_relativize, locale=locale, **options)
        except PathResolutionError as e:
            logger.warning(
                "Link %s for %s could not be resolved (%s); using original link",
                target,
                href,
                e,
            )
            return self._base.resolve(
                original, relative=should_relativize, locale=locale, **options
            )
