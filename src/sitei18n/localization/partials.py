"""Locale-aware partial template lookup.

PartialLocator wraps the pipeline's own partial lookup and tries locale
specific variants first::

    _nav.fr.html -> localizable/_nav.fr.html -> localizable/_nav.html -> _nav.html

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import posixpath
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from sitei18n.localization.types import LocaleCode

__all__ = ["PartialLocator", "PartialLookup", "localized_partial_name"]


class PartialLookup(Protocol):
    """Protocol for the pipeline's partial template lookup."""

    def locate(self, name: str, *, try_static: bool = False) -> str | None:
        """Return the partial's file path, or None when it does not exist."""


def localized_partial_name(name: str, locale: LocaleCode) -> str:
    """Insert a locale token before the partial's extension.

    Example:
        >>> localized_partial_name("_nav.html", "fr")
        '_nav.fr.html'
        >>> localized_partial_name("_nav", "fr")
        '_nav.fr'
    """
    stem, extension = posixpath.splitext(name)
    if extension:
        return f"{stem}.{locale}{extension}"
    return f"{name}.{locale}"


class PartialLocator:
    """Partial lookup preferring locale variants and the templates folder.

    Args:
        base: The pipeline's partial lookup
        templates_dir: Localizable templates folder
    """

    __slots__ = ("_base", "_templates_dir")

    def __init__(self, base: PartialLookup, templates_dir: str) -> None:
        self._base = base
        self._templates_dir = templates_dir

    def candidates(
        self,
        name: str,
        locale: LocaleCode | None,
        *,
        try_static: bool = False,
    ) -> tuple[tuple[str, bool], ...]:
        """Names tried for ``name`` in order, each with its try_static flag.

        A name with an extension may be a static file, so its locale
        variants are looked up as static files too. The templates-folder and
        plain lookups use ``try_static``.
        """
        in_templates_dir = posixpath.join(self._templates_dir, name)
        if locale is None:
            return ((in_templates_dir, try_static), (name, try_static))

        suffixed = localized_partial_name(name, locale)
        maybe_static = bool(posixpath.splitext(name)[1])
        return (
            (suffixed, maybe_static),
            (posixpath.join(self._templates_dir, suffixed), maybe_static),
            (in_templates_dir, try_static),
            (name, try_static),
        )

    def locate_partial(
        self,
        name: str,
        locale: LocaleCode | None,
        *,
        try_static: bool = False,
    ) -> str | None:
        """Locate a partial for the page being rendered in ``locale``.

        Args:
            name: Partial name as written in the template (``_nav.html``)
            locale: Current locale; None skips the locale variants
            try_static: Passed to the templates-folder and plain lookups

        Returns:
            First path the base lookup finds, or None
        """
        for candidate, static in self.candidates(name, locale, try_static=try_static):
            found = self._base.locate(candidate, try_static=static)
            if found is not None:
                return found
        return None
