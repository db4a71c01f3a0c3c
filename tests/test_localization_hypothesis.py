"""Property-based tests for resource expansion and lookup.

Properties:
- One descriptor per (folder resource, known locale); one per extension resource
- Extension-localized resources are claimed for exactly their filename's locale
- Every non-mount locale path starts with that locale's URL prefix
- Lookup round trip: each key/locale maps to its last descriptor's path
- Re-expansion is idempotent

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from sitei18n.config import I18nOptions
from sitei18n.enums import LocalizationStrategy
from sitei18n.localization.expander import ResourceExpander, parse_locale_extension
from sitei18n.localization.localizer import PathLocalizer, normalize_path
from sitei18n.localization.translations import TranslationStore
from sitei18n.sitemap import Resource
from tests.strategies import known_locale_sets, resource_paths


def _expander(locales: tuple[str, ...]) -> tuple[ResourceExpander, PathLocalizer]:
    options = I18nOptions()
    localizer = PathLocalizer(options, TranslationStore(), locales[0])
    return ResourceExpander(options, localizer, locales), localizer


@st.composite
def sites(draw: st.DrawFn) -> tuple[tuple[str, ...], list[str]]:
    """Known locales plus a resource path list drawn against them."""
    locales = draw(known_locale_sets())
    paths = draw(st.lists(resource_paths(locales), min_size=0, max_size=8))
    return locales, paths


class TestExpansionProperties:
    """Invariants of ResourceExpander.expand()."""

    @given(site=sites())
    def test_descriptor_counts(self, site: tuple[tuple[str, ...], list[str]]) -> None:
        """PROPERTY: folder resources x locales + extension resources."""
        locales, paths = site
        expander, _ = _expander(locales)
        result = expander.expand([Resource(path=p) for p in paths])

        extension = [p for p in paths if parse_locale_extension(p, locales) is not None]
        folder = [
            p for p in paths if p.startswith("localizable/") and p not in set(extension)
        ]
        event(f"descriptors={len(result.descriptors)}")
        assert len(result.descriptors) == len(folder) * len(locales) + len(extension)

    @given(site=sites())
    def test_extension_claims_its_locale_only(
        self, site: tuple[tuple[str, ...], list[str]]
    ) -> None:
        """PROPERTY: each extension descriptor has its filename's locale."""
        locales, paths = site
        expander, _ = _expander(locales)
        result = expander.expand([Resource(path=p) for p in paths])

        for descriptor in result.descriptors:
            if descriptor.strategy is LocalizationStrategy.EXTENSION:
                parsed = parse_locale_extension(descriptor.source_path, locales)
                assert parsed is not None
                assert descriptor.locale == parsed.locale

    @given(site=sites())
    def test_prefixes(self, site: tuple[tuple[str, ...], list[str]]) -> None:
        """PROPERTY: untranslated paths are prefix + canonical path."""
        locales, paths = site
        expander, localizer = _expander(locales)
        result = expander.expand([Resource(path=p) for p in paths])

        for descriptor in result.descriptors:
            prefix = localizer.prefix_for(descriptor.locale)
            assert descriptor.path == normalize_path(prefix + descriptor.canonical_path)
            if descriptor.locale != locales[0]:
                assert descriptor.path.startswith(f"/{descriptor.locale}/")

    @given(site=sites())
    def test_lookup_round_trip(self, site: tuple[tuple[str, ...], list[str]]) -> None:
        """PROPERTY: index[key][locale] is the last descriptor's path."""
        locales, paths = site
        expander, _ = _expander(locales)
        result = expander.expand([Resource(path=p) for p in paths])

        last: dict[tuple[str, str], str] = {}
        for descriptor in result.descriptors:
            last[(descriptor.canonical_path, descriptor.locale)] = descriptor.path
        for (key, locale), path in last.items():
            assert result.index.localized_path(key, locale) == path

    @given(site=sites())
    def test_idempotent(self, site: tuple[tuple[str, ...], list[str]]) -> None:
        """PROPERTY: expanding the output again changes nothing."""
        locales, paths = site
        expander, _ = _expander(locales)
        first = expander.expand([Resource(path=p) for p in paths])
        second = expander.expand(first.resources)

        assert dict(second.index) == dict(first.index)
        assert [d.path for d in second.descriptors] == [d.path for d in first.descriptors]
        assert [r.ignored for r in second.resources] == [r.ignored for r in first.resources]


@pytest.mark.fuzz
class TestExpansionFuzz:
    """Larger resource lists (run with -m fuzz)."""

    @given(
        locales=known_locale_sets(min_size=1, max_size=6),
        data=st.data(),
    )
    def test_all_claimed_resources_ignored(
        self, locales: tuple[str, ...], data: st.DataObject
    ) -> None:
        """PROPERTY: every descriptor's source resource is ignored."""
        paths = data.draw(st.lists(resource_paths(locales), max_size=40))
        resources = [Resource(path=p) for p in paths]
        expander, _ = _expander(locales)
        result = expander.expand(resources)

        claimed = {d.source_path for d in result.descriptors}
        for resource in resources:
            assert resource.ignored == (resource.path in claimed)
