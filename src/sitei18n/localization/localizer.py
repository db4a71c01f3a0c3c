"""Localized output path computation.

PathLocalizer turns a canonical resource path into the URL path a locale
serves it under: directory segments and the page id are translated through
``paths.<segment>`` keys, the locale's URL prefix is prepended (nothing for
the locale mounted at the root) and the localizable templates folder is
removed.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import posixpath
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sitei18n.constants import PATH_SEPARATOR, PATHS_KEY_PREFIX
from sitei18n.enums import LocalizationStrategy
from sitei18n.sitemap import LocalizedProxyResource

if TYPE_CHECKING:
    from sitei18n.config import I18nOptions
    from sitei18n.localization.translations import Translator
    from sitei18n.localization.types import (
        CanonicalPath,
        LocaleCode,
        LocalizedPath,
        PageId,
    )

__all__ = [
    "LocalizedPageDescriptor",
    "PathLocalizer",
    "canonical_path_for",
    "normalize_path",
    "strip_templates_dir",
]

_REPEATED_SEPARATORS = re.compile(r"/{2,}")


def normalize_path(path: str) -> str:
    """Normalize a URL path to a single leading slash and no empty segments.

    Example:
        >>> normalize_path("/fr//./a-propos.html")
        '/fr/a-propos.html'
        >>> normalize_path("about.html")
        '/about.html'
    """
    collapsed = _REPEATED_SEPARATORS.sub(PATH_SEPARATOR, PATH_SEPARATOR + path)
    normalized = posixpath.normpath(collapsed)
    return PATH_SEPARATOR if normalized == "." else normalized


def strip_templates_dir(path: str, templates_dir: str) -> str:
    """Remove the first occurrence of the templates folder from a path.

    Example:
        >>> strip_templates_dir("/fr/localizable/about.html", "localizable")
        '/fr/about.html'
    """
    marker = f"{PATH_SEPARATOR}{templates_dir}{PATH_SEPARATOR}"
    return normalize_path(path).replace(marker, PATH_SEPARATOR, 1)


def canonical_path_for(source_path: str, templates_dir: str) -> CanonicalPath:
    """Lookup key for a source path: templates folder prefix stripped.

    Example:
        >>> canonical_path_for("localizable/about.html", "localizable")
        '/about.html'
        >>> canonical_path_for("blog/post.html", "localizable")
        '/blog/post.html'
    """
    normalized = normalize_path(source_path)
    prefix = f"{PATH_SEPARATOR}{templates_dir}"
    if normalized == prefix:
        return PATH_SEPARATOR
    if normalized.startswith(prefix + PATH_SEPARATOR):
        return normalized[len(prefix) :]
    return normalized


def _translation_key(segment: str) -> str:
    return f"{PATHS_KEY_PREFIX}.{segment}"


@dataclass(frozen=True, slots=True)
class LocalizedPageDescriptor:
    """One (localizable resource x locale) output of an expansion pass.

    Attributes:
        path: Final localized URL path (``/fr/a-propos.html``)
        source_path: Path of the source resource (``localizable/about.html``)
        locale: Locale the page is rendered in
        page_id: Untranslated page id (``about``)
        canonical_path: Locale-agnostic lookup key (``/about.html``)
        strategy: How the source declared itself localizable
    """

    path: LocalizedPath
    source_path: str
    locale: LocaleCode
    page_id: PageId
    canonical_path: CanonicalPath
    strategy: LocalizationStrategy

    def to_resource(self) -> LocalizedProxyResource:
        """Materialize as a proxy resource serving the source under ``path``."""
        resource = LocalizedProxyResource(
            path=self.path.lstrip(PATH_SEPARATOR), target=self.source_path
        )
        resource.add_metadata(
            options={"lang": self.locale},
            locals={"lang": self.locale, "page_id": self.page_id},
        )
        return resource


class PathLocalizer:
    """Computes localized output paths for one build generation.

    Args:
        options: Localization options (URL prefix template, aliases,
            templates folder)
        translator: Translation lookup for ``paths.<segment>`` keys
        mount_locale: Locale served at the site root, or None
    """

    __slots__ = ("_mount_locale", "_options", "_translator")

    def __init__(
        self,
        options: I18nOptions,
        translator: Translator,
        mount_locale: LocaleCode | None,
    ) -> None:
        self._options = options
        self._translator = translator
        self._mount_locale = mount_locale

    @property
    def mount_locale(self) -> LocaleCode | None:
        """Locale whose URL prefix is ``/``."""
        return self._mount_locale

    def prefix_for(self, locale: LocaleCode) -> str:
        """URL prefix of ``locale``: ``/`` when mounted at the root."""
        if locale == self._mount_locale:
            return PATH_SEPARATOR
        return self._options.prefix_for(locale)

    def localize(
        self,
        path: str,
        source_path: str,
        page_id: PageId,
        locale: LocaleCode,
        *,
        strategy: LocalizationStrategy = LocalizationStrategy.FOLDER,
        canonical_path: CanonicalPath | None = None,
    ) -> LocalizedPageDescriptor:
        """Compute the localized descriptor of one resource for one locale.

        Translations run inside a locale scope for ``locale``; the previous
        current locale is restored even if a translation raises.

        Args:
            path: Resource path with localization markers removed
                (``/about.html`` or ``blog/post.html``)
            source_path: Path of the source resource
            page_id: Page id whose translation replaces it in the basename
            locale: Target locale
            strategy: Localization strategy that claimed the resource
            canonical_path: Lookup key; derived from ``source_path`` if None

        Returns:
            LocalizedPageDescriptor with the final path
        """
        with self._translator.use_locale(locale):
            # Page ids never borrow another locale's slug.
            localized_page_id = self._translator.translate(
                _translation_key(page_id), default=page_id, fallback=False
            )

            directory, _, basename = path.rpartition(PATH_SEPARATOR)
            segments = [
                self._translator.translate(_translation_key(segment), default=segment)
                for segment in directory.split(PATH_SEPARATOR)
                if segment
            ]

        if page_id:
            basename = basename.replace(page_id, localized_page_id, 1)
        composed = PATH_SEPARATOR.join(["", *segments, basename])

        localized = strip_templates_dir(
            normalize_path(self.prefix_for(locale) + composed),
            self._options.templates_dir,
        )

        return LocalizedPageDescriptor(
            path=localized,
            source_path=source_path,
            locale=locale,
            page_id=page_id,
            canonical_path=(
                canonical_path
                if canonical_path is not None
                else canonical_path_for(source_path, self._options.templates_dir)
            ),
            strategy=strategy,
        )
