"""Sitemap resource types consumed and produced by the localization core.

The surrounding build pipeline owns the resource list. The localization
core only reads resource paths, marks claimed resources as ignored and
appends proxy resources carrying locale metadata.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

__all__ = ["LocalizedProxyResource", "ProxyResource", "Resource"]


@dataclass(slots=True, eq=False)
class Resource:
    """One content item in the sitemap.

    Attributes:
        path: Destination path relative to the site root, without a leading
            slash (e.g. ``localizable/about.html``)
        source_file: Template the resource is rendered from
            (e.g. ``localizable/about.html.haml``), if any
        metadata: Free-form metadata; localization writes ``options`` and
            ``locals`` sub-mappings
        ignored: True once the resource is excluded from the final output
    """

    path: str
    source_file: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    ignored: bool = False

    def ignore(self) -> None:
        """Exclude this resource from the final output."""
        self.ignored = True

    def add_metadata(self, **sections: dict[str, Any]) -> None:
        """Merge metadata sections (``options=...``, ``locals=...``)."""
        for name, values in sections.items():
            self.metadata.setdefault(name, {}).update(values)

    @property
    def url(self) -> str:
        """Root-relative URL of the resource."""
        return "/" + self.path.lstrip("/")

    @property
    def locale(self) -> str | None:
        """Locale attached by localization, if any."""
        lang = self.metadata.get("options", {}).get("lang")
        return None if lang is None else str(lang)


@dataclass(slots=True, eq=False)
class ProxyResource(Resource):
    """Resource that serves another resource's content under a new path.

    Attributes:
        target: Path of the resource whose content is served
    """

    target: str = ""

    def __post_init__(self) -> None:
        """Validate that a proxy points somewhere.

        Raises:
            ValueError: If target is empty or equal to path
        """
        if not self.target:
            msg = f"Proxy resource '{self.path}' needs a target path"
            raise ValueError(msg)
        if self.target == self.path:
            msg = f"Proxy resource '{self.path}' cannot target itself"
            raise ValueError(msg)


@dataclass(slots=True, eq=False)
class LocalizedProxyResource(ProxyResource):
    """Proxy generated by a localization expansion pass.

    Expansion drops these from its input, so re-running it over its own
    output regenerates them instead of duplicating them.
    """

    @property
    def page_id(self) -> str | None:
        """Untranslated page id the proxy was generated for."""
        page_id = self.metadata.get("locals", {}).get("page_id")
        return None if page_id is None else str(page_id)
