"""Configuration for site localization.

Provides a single frozen dataclass that encapsulates every recognized
localization option, validated at construction time, plus a factory that
builds it from a site configuration mapping.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from pathlib import PurePosixPath
from typing import Any

from sitei18n.constants import (
    DEFAULT_DATA_DIR,
    DEFAULT_INDEX_FILE,
    DEFAULT_PATH_TEMPLATE,
    DEFAULT_TEMPLATES_DIR,
    LOCALE_PLACEHOLDER,
)
from sitei18n.diagnostics import ConfigurationError, Diagnostic, DiagnosticCode
from sitei18n.locale_utils import canonical_locale, canonical_locales

__all__ = ["I18nOptions"]

# Site configs written against the language-neutral option names.
_OPTION_ALIASES: dict[str, str] = {
    "disableFallbacks": "no_fallbacks",
    "explicitLocales": "langs",
    "localeDisplayAliasMap": "lang_map",
    "urlPrefixTemplate": "path",
    "localizableTemplatesDir": "templates_dir",
    "mountAtRootLocale": "mount_at_root",
    "localeDataDir": "data",
    "indexFile": "index_file",
}


def _option_error(message: str, hint: str | None = None) -> ConfigurationError:
    return ConfigurationError(
        Diagnostic(code=DiagnosticCode.INVALID_OPTION, message=message, hint=hint)
    )


def _require_relative_dir(name: str, value: str) -> None:
    if not value or not value.strip("/"):
        msg = f"{name} must be a non-empty directory name, got {value!r}"
        raise _option_error(msg)
    if PurePosixPath(value).is_absolute() or ".." in PurePosixPath(value).parts:
        msg = f"{name} must be relative to the site root, got {value!r}"
        raise _option_error(msg)


@dataclass(frozen=True, slots=True)
class I18nOptions:
    """Immutable localization options.

    All fields have sensible defaults; ``I18nOptions()`` autodiscovers
    locales from ``locales/*.yml`` and mounts the first one at the root.

    Attributes:
        no_fallbacks: Disable translation fallback chains (default: False).
        langs: Explicit locale list; None autodiscovers from locale data files.
        lang_map: Locale -> display alias used in URL prefixes
            (e.g. ``{"en_GB": "uk"}`` serves en_GB under /uk/).
        path: URL prefix template; ``:locale`` is replaced by the alias.
        templates_dir: Folder whose resources are expanded once per locale.
        mount_at_root: Locale served without URL prefix; None mounts the
            first known locale.
        data: Directory holding the locale data files.
        index_file: Filename appended to directory links before lookups.

    Example:
        >>> options = I18nOptions(langs=("en", "fr"), lang_map={"fr": "francais"})
        >>> options.prefix_for("fr")
        '/francais/'
    """

    no_fallbacks: bool = False
    langs: tuple[str, ...] | None = None
    lang_map: Mapping[str, str] = field(default_factory=dict, hash=False)
    path: str = DEFAULT_PATH_TEMPLATE
    templates_dir: str = DEFAULT_TEMPLATES_DIR
    mount_at_root: str | None = None
    data: str = DEFAULT_DATA_DIR
    index_file: str = DEFAULT_INDEX_FILE

    def __post_init__(self) -> None:
        """Validate and canonicalize option values.

        Raises:
            ConfigurationError: If the path template lacks the locale
                placeholder, a directory option is empty or escapes the site
                root, the index file is empty, or a locale is invalid.
        """
        if LOCALE_PLACEHOLDER not in self.path:
            msg = f"path must contain '{LOCALE_PLACEHOLDER}' placeholder, got {self.path!r}"
            raise _option_error(msg, hint="Use a template such as '/:locale/'")
        _require_relative_dir("templates_dir", self.templates_dir)
        _require_relative_dir("data", self.data)
        if not self.index_file.strip("/"):
            msg = "index_file cannot be empty"
            raise _option_error(msg)

        try:
            if isinstance(self.langs, str):
                object.__setattr__(self, "langs", canonical_locales((self.langs,)))
            elif self.langs is not None:
                object.__setattr__(self, "langs", canonical_locales(self.langs))
            if self.mount_at_root is not None:
                object.__setattr__(self, "mount_at_root", canonical_locale(self.mount_at_root))
            lang_map = {canonical_locale(k): str(v) for k, v in self.lang_map.items()}
        except ValueError as e:
            raise _option_error(str(e)) from e
        object.__setattr__(self, "templates_dir", self.templates_dir.strip("/"))
        object.__setattr__(self, "data", self.data.strip("/"))
        object.__setattr__(self, "lang_map", lang_map)

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> I18nOptions:
        """Build options from a site configuration mapping.

        Accepts both the snake_case field names and their camelCase aliases
        (``explicitLocales``, ``urlPrefixTemplate``, ...).

        Args:
            config: Mapping of option name to value

        Returns:
            Validated I18nOptions

        Raises:
            ConfigurationError: If an option is unknown or invalid
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in config.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in known:
                msg = f"Unknown localization option: {key!r}"
                raise ConfigurationError(
                    Diagnostic(
                        code=DiagnosticCode.UNKNOWN_OPTION,
                        message=msg,
                        hint=f"Known options: {', '.join(sorted(known))}",
                    )
                )
            kwargs[name] = value

        langs = kwargs.get("langs")
        if langs is not None:
            kwargs["langs"] = (langs,) if isinstance(langs, str) else tuple(langs)
        return cls(**kwargs)

    @property
    def autodiscover(self) -> bool:
        """True when locales come from locale data files rather than config."""
        return self.langs is None

    def alias_for(self, locale: str) -> str:
        """Display alias used for a locale in URL prefixes."""
        return self.lang_map.get(locale, locale)

    def prefix_for(self, locale: str) -> str:
        """URL prefix for a locale that is not mounted at the root."""
        return self.path.replace(LOCALE_PLACEHOLDER, self.alias_for(locale), 1)
