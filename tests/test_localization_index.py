"""Tests for the immutable lookup indexes.

Tests verify:
- Round trip: every descriptor's path is found under its canonical key
- Directory links resolve through the index file
- Collisions keep the last descriptor
- Indexes are read-only mappings
"""

from __future__ import annotations

import pytest

from sitei18n.enums import LocalizationStrategy
from sitei18n.localization.index import LookupIndex, PageIndex
from sitei18n.localization.localizer import LocalizedPageDescriptor


def _descriptor(
    canonical: str, locale: str, path: str, page_id: str = "about"
) -> LocalizedPageDescriptor:
    return LocalizedPageDescriptor(
        path=path,
        source_path=f"localizable{canonical}",
        locale=locale,
        page_id=page_id,
        canonical_path=canonical,
        strategy=LocalizationStrategy.FOLDER,
    )


DESCRIPTORS = [
    _descriptor("/about.html", "en", "/about.html"),
    _descriptor("/about.html", "fr", "/fr/a-propos.html"),
    _descriptor("/blog/index.html", "en", "/blog/index.html", page_id="index"),
    _descriptor("/blog/index.html", "fr", "/fr/journal/index.html", page_id="index"),
]


class TestLookupIndex:
    """LookupIndex lookups."""

    def test_round_trip(self) -> None:
        """Each descriptor is found under its canonical path and locale."""
        index = LookupIndex.from_descriptors(DESCRIPTORS)
        for descriptor in DESCRIPTORS:
            assert index.localized_path(descriptor.canonical_path, descriptor.locale) == (
                descriptor.path
            )

    def test_missing_path_or_locale(self) -> None:
        """Unknown paths and locales return None."""
        index = LookupIndex.from_descriptors(DESCRIPTORS)
        assert index.localized_path("/contact.html", "fr") is None
        assert index.localized_path("/about.html", "de") is None

    def test_trailing_slash_uses_index_file(self) -> None:
        """/blog/ is looked up as /blog/index.html."""
        index = LookupIndex.from_descriptors(DESCRIPTORS)
        assert index.localized_path("/blog/", "fr") == "/fr/journal/index.html"

    def test_custom_index_file(self) -> None:
        """The index filename is configurable."""
        index = LookupIndex({"/docs/default.htm": {"fr": "/fr/docs/default.htm"}})
        assert index.localized_path("/docs/", "fr", index_file="default.htm") == (
            "/fr/docs/default.htm"
        )
        assert index.localized_path("/docs/", "fr") is None

    def test_last_write_wins(self) -> None:
        """A later descriptor for the same key and locale replaces the earlier one."""
        index = LookupIndex.from_descriptors(
            [
                _descriptor("/about.html", "fr", "/fr/first.html"),
                _descriptor("/about.html", "fr", "/fr/second.html"),
            ]
        )
        assert index.localized_path("/about.html", "fr") == "/fr/second.html"

    def test_locales_for(self) -> None:
        """locales_for() lists the locales with a variant."""
        index = LookupIndex.from_descriptors(DESCRIPTORS)
        assert index.locales_for("/about.html") == ("en", "fr")
        assert index.locales_for("/nothing.html") == ()

    def test_mapping_protocol(self) -> None:
        """The index behaves as a read-only nested mapping."""
        index = LookupIndex.from_descriptors(DESCRIPTORS)
        assert len(index) == 2
        assert set(index) == {"/about.html", "/blog/index.html"}
        assert index["/about.html"]["fr"] == "/fr/a-propos.html"
        with pytest.raises(TypeError):
            index["/about.html"]["fr"] = "/fr/other.html"  # type: ignore[index]
        assert repr(index) == "LookupIndex(paths=2)"

    def test_copies_input_table(self) -> None:
        """Mutating the source table does not change the index."""
        table = {"/a.html": {"fr": "/fr/a.html"}}
        index = LookupIndex(table)
        table["/a.html"]["fr"] = "/fr/changed.html"
        assert index.localized_path("/a.html", "fr") == "/fr/a.html"

    def test_empty(self) -> None:
        """An empty index finds nothing."""
        assert LookupIndex().localized_path("/about.html", "en") is None


class TestPageIndex:
    """PageIndex lookups."""

    def test_path_for(self) -> None:
        """Page ids map to each locale's path."""
        pages = PageIndex.from_descriptors(DESCRIPTORS)
        assert pages.path_for("about", "fr") == "/fr/a-propos.html"
        assert pages.path_for("index", "en") == "/blog/index.html"
        assert pages.path_for("about", "de") is None
        assert pages.path_for("missing", "en") is None
        assert len(pages) == 2
        assert repr(pages) == "PageIndex(pages=2)"
