"""Immutable lookup tables produced by an expansion pass.

Components:
    LookupIndex - canonical path -> {locale -> localized path}
    PageIndex - page id -> {locale -> localized path}

Both are built once from a sequence of descriptors and never mutated
afterwards; a rebuild produces a new instance that replaces the old one.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from sitei18n.constants import DEFAULT_INDEX_FILE, PATH_SEPARATOR

if TYPE_CHECKING:
    from sitei18n.localization.localizer import LocalizedPageDescriptor
    from sitei18n.localization.types import (
        CanonicalPath,
        LocaleCode,
        LocalizedPath,
        PageId,
    )

__all__ = ["LookupIndex", "PageIndex"]


def _freeze(
    table: dict[str, dict[LocaleCode, LocalizedPath]],
) -> Mapping[str, Mapping[LocaleCode, LocalizedPath]]:
    return MappingProxyType({key: MappingProxyType(value) for key, value in table.items()})


class LookupIndex(Mapping[str, Mapping[str, str]]):
    """Read-only map from canonical path to each locale's localized path.

    Collisions (same canonical path, same locale) keep the last descriptor.

    Example:
        >>> index = LookupIndex.from_descriptors(descriptors)
        >>> index.localized_path("/about.html", "fr")
        '/fr/a-propos.html'
        >>> index.localized_path("/contact.html", "fr") is None
        True
    """

    __slots__ = ("_table",)

    def __init__(
        self,
        table: Mapping[CanonicalPath, Mapping[LocaleCode, LocalizedPath]] | None = None,
    ) -> None:
        """Initialize from a nested mapping (copied)."""
        self._table = _freeze({key: dict(value) for key, value in (table or {}).items()})

    @classmethod
    def from_descriptors(cls, descriptors: Iterable[LocalizedPageDescriptor]) -> LookupIndex:
        """Build an index keyed by each descriptor's canonical path."""
        table: dict[CanonicalPath, dict[LocaleCode, LocalizedPath]] = {}
        for descriptor in descriptors:
            table.setdefault(descriptor.canonical_path, {})[descriptor.locale] = descriptor.path
        return cls(table)

    def __getitem__(self, key: str) -> Mapping[str, str]:
        return self._table[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"LookupIndex(paths={len(self._table)})"

    def localized_path(
        self,
        path: str,
        locale: LocaleCode,
        *,
        index_file: str = DEFAULT_INDEX_FILE,
    ) -> LocalizedPath | None:
        """Localized path of ``path`` for ``locale``, or None.

        Directory links (trailing slash) are looked up with ``index_file``
        appended, so ``/blog/`` finds ``/blog/index.html``.
        """
        lookup_path = path + index_file if path.endswith(PATH_SEPARATOR) else path
        entry = self._table.get(lookup_path)
        return None if entry is None else entry.get(locale)

    def locales_for(self, path: CanonicalPath) -> tuple[LocaleCode, ...]:
        """Locales with a localized variant of ``path``."""
        return tuple(self._table.get(path, {}))


class PageIndex(Mapping[str, Mapping[str, str]]):
    """Read-only map from page id to each locale's localized path.

    Backs locale_path() and switch_locale_path(). Like LookupIndex, the last
    descriptor wins on (page id, locale) collisions.
    """

    __slots__ = ("_table",)

    def __init__(
        self,
        table: Mapping[PageId, Mapping[LocaleCode, LocalizedPath]] | None = None,
    ) -> None:
        """Initialize from a nested mapping (copied)."""
        self._table = _freeze({key: dict(value) for key, value in (table or {}).items()})

    @classmethod
    def from_descriptors(cls, descriptors: Iterable[LocalizedPageDescriptor]) -> PageIndex:
        """Build an index keyed by each descriptor's page id."""
        table: dict[PageId, dict[LocaleCode, LocalizedPath]] = {}
        for descriptor in descriptors:
            table.setdefault(descriptor.page_id, {})[descriptor.locale] = descriptor.path
        return cls(table)

    def __getitem__(self, key: str) -> Mapping[str, str]:
        return self._table[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"PageIndex(pages={len(self._table)})"

    def path_for(self, page_id: PageId, locale: LocaleCode) -> LocalizedPath | None:
        """Localized path of a page id in ``locale``, or None."""
        entry = self._table.get(page_id)
        return None if entry is None else entry.get(locale)
