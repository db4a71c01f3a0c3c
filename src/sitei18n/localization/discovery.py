"""Locale discovery from configuration or locale-data files.

Components:
    LocaleDataFile - Immutable record of one watched locale-data file
    LocaleDataSource - Protocol for listing locale-data files (structural typing)
    DirectoryLocaleSource - Filesystem implementation rooted at the site
    LocaleDiscovery - Cached, invalidatable known-locale computation

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from threading import RLock
from typing import TYPE_CHECKING, Protocol

from sitei18n.constants import LOCALE_DATA_EXTENSIONS
from sitei18n.locale_utils import canonical_locale

if TYPE_CHECKING:
    from sitei18n.config import I18nOptions
    from sitei18n.localization.types import LocaleCode

__all__ = [
    "DirectoryLocaleSource",
    "LocaleDataFile",
    "LocaleDataSource",
    "LocaleDiscovery",
    "locale_from_filename",
]

logger = logging.getLogger(__name__)


def locale_from_filename(filename: str) -> str | None:
    """Derive a locale identifier from a locale-data filename.

    Returns:
        The filename without its data-format extension, or None when the
        file is not a locale-data file.

    Example:
        >>> locale_from_filename("fr.yml")
        'fr'
        >>> locale_from_filename("notes.txt") is None
        True
    """
    for extension in LOCALE_DATA_EXTENSIONS:
        if filename.endswith(extension) and len(filename) > len(extension):
            return filename[: -len(extension)]
    return None


@dataclass(frozen=True, slots=True)
class LocaleDataFile:
    """One locale-data file known to the file watcher.

    Attributes:
        relative_path: POSIX path relative to the locale data directory
            (``fr.yml`` or ``fr/blog.yml``)
        full_path: Absolute path used for reading
    """

    relative_path: str
    full_path: Path

    @property
    def is_top_level(self) -> bool:
        """True when the file sits directly in the locale data directory."""
        return len(PurePosixPath(self.relative_path).parts) == 1


class LocaleDataSource(Protocol):
    """Protocol for listing locale-data files.

    Implementations wrap whatever file watcher the build pipeline uses.
    """

    def files(self) -> Iterable[LocaleDataFile]:
        """Return every locale-data file currently present."""


@dataclass(frozen=True, slots=True)
class DirectoryLocaleSource:
    """Locale-data files found below ``<root>/<data_dir>``.

    Only files with a locale-data extension (.yml, .yaml, .json) are listed,
    in sorted order. A missing directory yields no files.

    Example:
        >>> source = DirectoryLocaleSource("site", "locales")
        >>> [f.relative_path for f in source.files()]
        ['en.yml', 'fr.yml']
    """

    root: str | Path
    data_dir: str
    _resolved: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Resolve the data directory once."""
        object.__setattr__(self, "_resolved", (Path(self.root) / self.data_dir).resolve())

    @property
    def directory(self) -> Path:
        """Absolute locale data directory."""
        return self._resolved

    def files(self) -> tuple[LocaleDataFile, ...]:
        """List locale-data files, sorted by relative path."""
        if not self._resolved.is_dir():
            return ()
        found = [
            LocaleDataFile(
                relative_path=path.relative_to(self._resolved).as_posix(),
                full_path=path,
            )
            for path in self._resolved.rglob("*")
            if path.is_file() and path.name.endswith(LOCALE_DATA_EXTENSIONS)
        ]
        return tuple(sorted(found, key=lambda f: f.relative_path))


class LocaleDiscovery:
    """Known-locale computation with an invalidatable cache.

    Explicit ``langs`` options win verbatim (order kept). Otherwise every
    top-level locale-data file contributes its stem, sorted
    lexicographically. Nested files (``fr/blog.yml``) carry translations but
    never introduce a locale.

    Thread-safe via an internal RLock around the cache.

    Example:
        >>> discovery = LocaleDiscovery(I18nOptions(), DirectoryLocaleSource("site", "locales"))
        >>> discovery.known_locales()
        ('en', 'fr')
    """

    __slots__ = ("_cache_lock", "_cached", "_options", "_source")

    def __init__(self, options: I18nOptions, source: LocaleDataSource) -> None:
        """Initialize discovery.

        Args:
            options: Localization options (``langs`` short-circuits scanning)
            source: Locale-data file listing
        """
        self._options = options
        self._source = source
        self._cached: tuple[LocaleCode, ...] | None = None
        self._cache_lock = RLock()

    @property
    def source(self) -> LocaleDataSource:
        """Locale-data file listing backing this discovery."""
        return self._source

    def known_locales(self) -> tuple[LocaleCode, ...]:
        """Return the ordered known locales, computing them on first use."""
        with self._cache_lock:
            if self._cached is None:
                self._cached = self._discover()
                logger.debug("Known locales: %s", ", ".join(self._cached) or "<none>")
            return self._cached

    def invalidate(self) -> None:
        """Drop the cached locale set; the next call rescans."""
        with self._cache_lock:
            self._cached = None

    def on_file_changed(
        self,
        updated: Iterable[str | Path],
        removed: Iterable[str | Path],
    ) -> None:
        """File-watcher callback for the locale data directory."""
        updated_paths, removed_paths = list(updated), list(removed)
        logger.debug(
            "Locale data changed (%d updated, %d removed); clearing locale cache",
            len(updated_paths),
            len(removed_paths),
        )
        self.invalidate()

    def _discover(self) -> tuple[LocaleCode, ...]:
        if self._options.langs is not None:
            return self._options.langs

        discovered: set[LocaleCode] = set()
        for data_file in self._source.files():
            if not data_file.is_top_level:
                continue
            stem = locale_from_filename(PurePosixPath(data_file.relative_path).name)
            if stem is None:
                continue
            try:
                discovered.add(canonical_locale(stem))
            except ValueError:
                logger.warning("Ignoring locale data file with unusable name: %s", data_file)
        return tuple(sorted(discovered))
