"""Translation lookup with fallback chains and a scoped current locale.

Components:
    Translator - Protocol the path localizer translates through
    LocaleScope - Context manager swapping the current locale (scope guard)
    TranslationStore - YAML/JSON-backed key/value store

Locale data files hold one mapping per locale under a top-level locale key,
so a file may contribute to several locales and a locale may be spread over
several files::

    # locales/fr.yml
    fr:
      paths:
        about: a-propos

Python 3.13+. Uses PyYAML for locale data parsing and Babel (via
locale_utils) for fallback chains.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping, Sequence
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING, Any, Protocol, TypeAlias

import yaml

from sitei18n.diagnostics import Diagnostic, DiagnosticCode, LocaleDataError
from sitei18n.locale_utils import canonical_locale, fallback_chain
from sitei18n.runtime import RWLock

if TYPE_CHECKING:
    from sitei18n.localization.discovery import LocaleDataFile
    from sitei18n.localization.types import LocaleCode, TranslationKey

__all__ = [
    "LocaleScope",
    "TranslationStore",
    "Translator",
    "parse_locale_file",
]

logger = logging.getLogger(__name__)

# Each thread and async task sees its own current locale; LocaleScope
# restores the previous value through the ContextVar token.
_current_locale: ContextVar[str | None] = ContextVar("sitei18n_current_locale", default=None)

TranslationTree: TypeAlias = dict[str, Any]


class LocaleScope:
    """Context manager making a locale current for the enclosed block.

    The previous locale is restored on every exit path, including
    exceptions raised inside the block.

    Usage:
        with store.use_locale("fr"):
            store.translate("paths.about", default="about")
    """

    __slots__ = ("_locale", "_token")

    def __init__(self, locale: LocaleCode) -> None:
        """Initialize scope for a locale."""
        self._locale = locale
        self._token: Token[str | None] | None = None

    def __enter__(self) -> LocaleCode:
        """Make the locale current."""
        self._token = _current_locale.set(self._locale)
        return self._locale

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Restore the previously current locale."""
        if self._token is not None:
            _current_locale.reset(self._token)
            self._token = None


class Translator(Protocol):
    """Protocol for locale-sensitive key/value translation."""

    @property
    def current_locale(self) -> LocaleCode | None:
        """Locale translations are looked up in when none is given."""

    def use_locale(self, locale: LocaleCode) -> LocaleScope:
        """Scope guard making ``locale`` current."""

    def translate(
        self,
        key: TranslationKey,
        *,
        default: str | None = None,
        fallback: bool | Sequence[LocaleCode] = True,
        locale: LocaleCode | None = None,
    ) -> str:
        """Translate ``key``; see TranslationStore.translate."""


def _load_document(data_file: LocaleDataFile) -> object:
    text = data_file.full_path.read_text(encoding="utf-8")
    if data_file.relative_path.endswith(".json"):
        return json.loads(text)
    return yaml.safe_load(text)


def parse_locale_file(data_file: LocaleDataFile) -> dict[LocaleCode, TranslationTree]:
    """Read one locale data file into ``{locale: tree}``.

    Args:
        data_file: File to read

    Returns:
        Mapping from canonical locale to its nested translation tree. An
        empty document yields an empty mapping.

    Raises:
        LocaleDataError: If the file cannot be read, is not valid YAML/JSON,
            or its top level is not a mapping of locale -> mapping
    """
    source_path = str(data_file.full_path)
    try:
        document = _load_document(data_file)
    except (OSError, UnicodeDecodeError) as e:
        diagnostic = Diagnostic(
            code=DiagnosticCode.LOCALE_DATA_UNREADABLE,
            message=f"Cannot read locale data file: {e}",
            path=source_path,
        )
        raise LocaleDataError(diagnostic, source_path=source_path) from e
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        diagnostic = Diagnostic(
            code=DiagnosticCode.LOCALE_DATA_MALFORMED,
            message=f"Locale data file is not valid: {e}",
            path=source_path,
        )
        raise LocaleDataError(diagnostic, source_path=source_path) from e

    if document is None:
        return {}
    if not isinstance(document, Mapping) or not all(
        isinstance(tree, Mapping) for tree in document.values()
    ):
        diagnostic = Diagnostic(
            code=DiagnosticCode.LOCALE_DATA_MALFORMED,
            message="Locale data must map each locale to a mapping of translations",
            hint="Nest translations under the locale: 'fr: {paths: {about: a-propos}}'",
            path=source_path,
        )
        raise LocaleDataError(diagnostic, source_path=source_path)

    try:
        return {canonical_locale(locale): dict(tree) for locale, tree in document.items()}
    except ValueError as e:
        diagnostic = Diagnostic(
            code=DiagnosticCode.LOCALE_DATA_MALFORMED,
            message=str(e),
            path=source_path,
        )
        raise LocaleDataError(diagnostic, source_path=source_path) from e


def _deep_merge(target: TranslationTree, source: Mapping[str, Any]) -> None:
    for raw_key, value in source.items():
        key = str(raw_key)
        existing = target.get(key)
        if isinstance(existing, dict) and isinstance(value, Mapping):
            _deep_merge(existing, value)
        elif isinstance(value, Mapping):
            target[key] = {}
            _deep_merge(target[key], value)
        else:
            target[key] = value


class TranslationStore:
    """Key/value translations per locale with fallback chains.

    Lookups walk dotted keys through the nested tree of a locale. When a key
    is missing, the fallback chain (``de_AT -> de -> default locale``) is
    consulted unless fallbacks are disabled globally or for the call.

    The translation tree is replaced wholesale on reload and published under
    an RWLock, so concurrent lookups never observe a partial reload.

    Example:
        >>> store = TranslationStore(default_locale="en")
        >>> store.add_translations("fr", {"paths": {"about": "a-propos"}})
        >>> with store.use_locale("fr"):
        ...     store.translate("paths.about", default="about")
        'a-propos'
        >>> store.translate("paths.about", default="about")
        'about'
    """

    __slots__ = ("_default_locale", "_fallbacks", "_files", "_lock", "_translations")

    def __init__(
        self,
        *,
        default_locale: LocaleCode | None = None,
        fallbacks: bool = True,
    ) -> None:
        """Initialize an empty store.

        Args:
            default_locale: Last locale of every fallback chain and the
                current locale outside any LocaleScope
            fallbacks: Enable fallback chains (``no_fallbacks`` disables)
        """
        self._default_locale = default_locale
        self._fallbacks = fallbacks
        self._files: tuple[LocaleDataFile, ...] = ()
        self._translations: dict[LocaleCode, TranslationTree] = {}
        self._lock = RWLock()

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"TranslationStore(locales={self.available_locales()!r}, "
            f"default={self._default_locale!r}, fallbacks={self._fallbacks})"
        )

    @property
    def default_locale(self) -> LocaleCode | None:
        """Locale used when no LocaleScope is active."""
        return self._default_locale

    @default_locale.setter
    def default_locale(self, locale: LocaleCode | None) -> None:
        self._default_locale = locale

    @property
    def fallbacks_enabled(self) -> bool:
        """Whether lookups consult fallback chains by default."""
        return self._fallbacks

    @property
    def current_locale(self) -> LocaleCode | None:
        """Locale of the innermost active LocaleScope, else the default."""
        locale = _current_locale.get()
        return locale if locale is not None else self._default_locale

    def use_locale(self, locale: LocaleCode) -> LocaleScope:
        """Scope guard making ``locale`` current for a ``with`` block."""
        return LocaleScope(locale)

    def available_locales(self) -> tuple[LocaleCode, ...]:
        """Locales with at least one loaded translation, sorted."""
        with self._lock.read():
            return tuple(sorted(self._translations))

    def load_files(self, files: Iterable[LocaleDataFile]) -> None:
        """Replace all translations with the contents of ``files``.

        Files that cannot be parsed are skipped with a warning so that one
        broken file does not take every locale down during a live reload.
        """
        self._files = tuple(files)
        merged: dict[LocaleCode, TranslationTree] = {}
        for data_file in self._files:
            try:
                parsed = parse_locale_file(data_file)
            except LocaleDataError as e:
                logger.warning("Skipping locale data file %s: %s", data_file.relative_path, e)
                continue
            for locale, tree in parsed.items():
                _deep_merge(merged.setdefault(locale, {}), tree)

        with self._lock.write():
            self._translations = merged
        logger.debug(
            "Loaded translations for %d locale(s) from %d file(s)",
            len(merged),
            len(self._files),
        )

    def reload(self, files: Iterable[LocaleDataFile] | None = None) -> None:
        """Reload translations, from ``files`` or the previously loaded ones."""
        self.load_files(self._files if files is None else files)

    def add_translations(self, locale: LocaleCode, translations: Mapping[str, Any]) -> None:
        """Merge a translation tree into one locale.

        Thread-safe via internal RWLock.
        """
        locale = canonical_locale(locale)
        with self._lock.write():
            updated = dict(self._translations)
            merged: TranslationTree = {}
            _deep_merge(merged, updated.get(locale, {}))
            _deep_merge(merged, translations)
            updated[locale] = merged
            self._translations = updated

    def lookup(self, key: TranslationKey, locale: LocaleCode) -> str | None:
        """Look up ``key`` in exactly one locale, without fallbacks.

        Returns:
            The translated string, or None when the key is missing or
            names a subtree rather than a leaf
        """
        with self._lock.read():
            node: Any = self._translations.get(locale)
        for part in key.split("."):
            if not isinstance(node, dict):
                return None
            node = node.get(part)
        if node is None or isinstance(node, dict | list):
            return None
        return str(node)

    def chain_for(
        self,
        locale: LocaleCode,
        fallback: bool | Sequence[LocaleCode] = True,
    ) -> tuple[LocaleCode, ...]:
        """Locales consulted for a lookup in ``locale``.

        Args:
            locale: Requested locale
            fallback: True for the derived chain, False or an empty sequence
                to suppress fallbacks, or an explicit sequence of fallback
                locales tried after ``locale``
        """
        if isinstance(fallback, bool):
            if fallback and self._fallbacks:
                return fallback_chain(locale, self._default_locale)
            return (locale,)
        return tuple(dict.fromkeys((locale, *fallback)))

    def translate(
        self,
        key: TranslationKey,
        *,
        default: str | None = None,
        fallback: bool | Sequence[LocaleCode] = True,
        locale: LocaleCode | None = None,
    ) -> str:
        """Translate ``key`` for ``locale`` (default: the current locale).

        Args:
            key: Dotted translation key
            default: Returned when no locale in the chain has the key;
                None returns the key itself
            fallback: See chain_for()
            locale: Overrides the current locale

        Returns:
            Translated string, or the default
        """
        target = locale if locale is not None else self.current_locale
        if target is not None:
            for candidate in self.chain_for(target, fallback):
                value = self.lookup(key, candidate)
                if value is not None:
                    return value
        return key if default is None else default
