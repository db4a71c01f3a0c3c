"""Resource list expansion into per-locale proxy resources.

Two mutually exclusive strategies claim localizable resources:

- Extension: ``about.fr.html`` is the ``fr`` variant of ``about.html``.
  The locale token must be a known locale.
- Folder: ``localizable/about.html`` is rendered once per known locale.

Extension claims are decided first; a resource claimed by the extension
strategy is never expanded again by the folder strategy.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import posixpath
from collections.abc import Sequence
from dataclasses import dataclass
from fnmatch import fnmatchcase
from typing import TYPE_CHECKING

from sitei18n.constants import MIN_LOCALE_EXTENSION_PARTS, PATH_SEPARATOR
from sitei18n.enums import LocalizationStrategy
from sitei18n.localization.index import LookupIndex, PageIndex
from sitei18n.localization.localizer import canonical_path_for
from sitei18n.sitemap import LocalizedProxyResource, Resource

if TYPE_CHECKING:
    from sitei18n.config import I18nOptions
    from sitei18n.localization.localizer import LocalizedPageDescriptor, PathLocalizer
    from sitei18n.localization.types import LocaleCode, PageId

__all__ = [
    "ExpansionResult",
    "LocaleExtension",
    "ResourceExpander",
    "parse_locale_extension",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LocaleExtension:
    """A path parsed as ``<base>.<locale>.<ext>``.

    Attributes:
        locale: Locale token taken from the filename
        path: Path with the locale token removed (``blog/post.html``)
        page_id: Basename without the locale token and extension (``post``)
    """

    locale: LocaleCode
    path: str
    page_id: PageId


def parse_locale_extension(
    path: str,
    known_locales: Sequence[LocaleCode],
) -> LocaleExtension | None:
    """Parse a locale-extension filename.

    Returns:
        LocaleExtension, or None when the path has fewer than three
        dot-separated parts or its locale token is not a known locale

    Example:
        >>> parse_locale_extension("blog/post.fr.html", ("en", "fr"))
        LocaleExtension(locale='fr', path='blog/post.html', page_id='post')
        >>> parse_locale_extension("post.de.html", ("en", "fr")) is None
        True
    """
    parts = path.split(".")
    if len(parts) < MIN_LOCALE_EXTENSION_PARTS:
        return None

    locale = parts.pop(-2)
    if locale not in known_locales:
        return None

    return LocaleExtension(
        locale=locale,
        path=".".join(parts),
        page_id=posixpath.basename(".".join(parts[:-1])),
    )


@dataclass(frozen=True, slots=True)
class ExpansionResult:
    """Output of one expansion pass.

    Attributes:
        resources: Input resources (claimed ones ignored) followed by the
            generated proxy resources
        index: Canonical path -> locale -> localized path
        pages: Page id -> locale -> localized path
        descriptors: Every generated descriptor, folder strategy first
    """

    resources: tuple[Resource, ...]
    index: LookupIndex
    pages: PageIndex
    descriptors: tuple[LocalizedPageDescriptor, ...]


class ResourceExpander:
    """Expands localizable resources for one build generation.

    Args:
        options: Localization options (templates folder)
        localizer: Path localizer bound to the generation's mount locale
        known_locales: Locales of this generation, in order
    """

    __slots__ = ("_known_locales", "_localizer", "_options")

    def __init__(
        self,
        options: I18nOptions,
        localizer: PathLocalizer,
        known_locales: Sequence[LocaleCode],
    ) -> None:
        self._options = options
        self._localizer = localizer
        self._known_locales = tuple(known_locales)

    def parse_locale_extension(self, path: str) -> LocaleExtension | None:
        """parse_locale_extension() against this generation's locales."""
        return parse_locale_extension(path, self._known_locales)

    def is_localizable_folder_path(self, path: str) -> bool:
        """True when ``path`` lies below the localizable templates folder."""
        pattern = posixpath.join(self._options.templates_dir, "**")
        return fnmatchcase(path.lstrip(PATH_SEPARATOR), pattern)

    def expand(self, resources: Sequence[Resource]) -> ExpansionResult:
        """Expand a full resource list.

        Proxies generated by an earlier pass are dropped and regenerated, so
        expanding an already expanded list yields the same index. With no
        known locales nothing is claimed and the list passes through.

        Args:
            resources: The pipeline's complete resource list

        Returns:
            ExpansionResult with claimed resources ignored
        """
        sources = [r for r in resources if not isinstance(r, LocalizedProxyResource)]
        if not self._known_locales:
            logger.debug("No known locales; skipping localization of %d resources", len(sources))
            return ExpansionResult(tuple(sources), LookupIndex(), PageIndex(), ())

        extension_claims: list[tuple[Resource, LocaleExtension]] = []
        for resource in sources:
            parsed = self.parse_locale_extension(resource.path)
            if parsed is not None:
                extension_claims.append((resource, parsed))
        claimed = {id(resource) for resource, _ in extension_claims}

        folder_resources = [
            r
            for r in sources
            if id(r) not in claimed and self.is_localizable_folder_path(r.path)
        ]

        descriptors: list[LocalizedPageDescriptor] = []
        templates_dir = self._options.templates_dir

        for resource in folder_resources:
            page_id = posixpath.splitext(posixpath.basename(resource.path))[0]
            path = canonical_path_for(resource.path, templates_dir)
            descriptors.extend(
                self._localizer.localize(
                    path,
                    resource.path,
                    page_id,
                    locale,
                    strategy=LocalizationStrategy.FOLDER,
                    canonical_path=path,
                )
                for locale in self._known_locales
            )
            resource.ignore()

        for resource, parsed in extension_claims:
            descriptors.append(
                self._localizer.localize(
                    parsed.path,
                    resource.path,
                    parsed.page_id,
                    parsed.locale,
                    strategy=LocalizationStrategy.EXTENSION,
                    canonical_path=canonical_path_for(parsed.path, templates_dir),
                )
            )
            resource.ignore()

        logger.debug(
            "Expanded %d folder and %d extension resource(s) into %d localized page(s)",
            len(folder_resources),
            len(extension_claims),
            len(descriptors),
        )

        generated = tuple(descriptor.to_resource() for descriptor in descriptors)
        return ExpansionResult(
            resources=(*sources, *generated),
            index=LookupIndex.from_descriptors(descriptors),
            pages=PageIndex.from_descriptors(descriptors),
            descriptors=tuple(descriptors),
        )
