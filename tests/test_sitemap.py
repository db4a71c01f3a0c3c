"""Tests for sitemap resource types.

Tests verify:
- Resource URL and locale accessors
- Metadata merging by section
- Proxy target validation
- Localized proxies expose the page id they were generated for
"""

from __future__ import annotations

import pytest

from sitei18n.sitemap import LocalizedProxyResource, ProxyResource, Resource


class TestResource:
    """Plain Resource behavior."""

    def test_url_has_single_leading_slash(self) -> None:
        """url is root-relative regardless of the stored path."""
        assert Resource(path="about.html").url == "/about.html"
        assert Resource(path="/about.html").url == "/about.html"

    def test_ignore(self) -> None:
        """ignore() excludes the resource from output."""
        resource = Resource(path="about.html")
        assert resource.ignored is False
        resource.ignore()
        assert resource.ignored is True

    def test_add_metadata_merges_sections(self) -> None:
        """Sections are merged, not replaced."""
        resource = Resource(path="about.html", metadata={"options": {"layout": "page"}})
        resource.add_metadata(options={"lang": "fr"}, locals={"page_id": "about"})
        assert resource.metadata == {
            "options": {"layout": "page", "lang": "fr"},
            "locals": {"page_id": "about"},
        }

    def test_locale_from_options(self) -> None:
        """locale reads the lang option; None when absent."""
        resource = Resource(path="about.html")
        assert resource.locale is None
        resource.add_metadata(options={"lang": "fr"})
        assert resource.locale == "fr"

    def test_identity_equality(self) -> None:
        """Resources compare by identity, so equal paths stay distinct."""
        assert Resource(path="a.html") != Resource(path="a.html")


class TestProxyResource:
    """ProxyResource validation."""

    def test_valid_proxy(self) -> None:
        """A proxy serves its target under another path."""
        proxy = ProxyResource(path="fr/a-propos.html", target="localizable/about.html")
        assert proxy.target == "localizable/about.html"

    def test_empty_target_rejected(self) -> None:
        """A proxy must point somewhere."""
        with pytest.raises(ValueError, match="needs a target"):
            ProxyResource(path="fr/a-propos.html")

    def test_self_target_rejected(self) -> None:
        """A proxy cannot serve itself."""
        with pytest.raises(ValueError, match="cannot target itself"):
            ProxyResource(path="about.html", target="about.html")


class TestLocalizedProxyResource:
    """LocalizedProxyResource accessors."""

    def test_page_id_from_locals(self) -> None:
        """page_id reads the page_id local."""
        proxy = LocalizedProxyResource(path="fr/a-propos.html", target="localizable/about.html")
        assert proxy.page_id is None
        proxy.add_metadata(locals={"page_id": "about"})
        assert proxy.page_id == "about"

    def test_is_proxy(self) -> None:
        """Localized proxies are proxies and resources."""
        proxy = LocalizedProxyResource(path="fr/a.html", target="localizable/a.html")
        assert isinstance(proxy, ProxyResource)
        assert isinstance(proxy, Resource)
