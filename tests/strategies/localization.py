"""Hypothesis strategies for site localization property-based testing.

Provides reusable strategies for generating localization test data:
- Locale codes and ordered known-locale sets
- Resource paths for the folder, extension and plain layouts
- Path-segment translation tables

Event-Emitting Strategies (HypoFuzz-Optimized):
- known_locale_sets: Emits known_locales_size=N
- resource_paths: Emits resource_layout=folder|extension|plain

Python 3.13+.
"""

from __future__ import annotations

import string
from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn

# Locale identifiers as they appear in filenames (fr.yml, about.fr.html).
_LOCALE_POOL = [
    "en", "en_US", "en_GB",
    "de", "de_AT",
    "fr", "fr_CA",
    "es", "es_MX",
    "lv", "lt", "et",
    "ja", "ko", "zh",
    "pt", "pt_BR",
    "it", "nl", "pl",
]

# Path segments: lowercase slugs without dots, so they never look like a
# locale extension.
_SEGMENT_CHARS = string.ascii_lowercase + string.digits + "-_"

_EXTENSIONS = ["html", "xml", "txt", "json"]


def locale_codes() -> st.SearchStrategy[str]:
    """Locale identifiers from a realistic pool."""
    return st.sampled_from(_LOCALE_POOL)


@st.composite
def known_locale_sets(draw: DrawFn, min_size: int = 1, max_size: int = 4) -> tuple[str, ...]:
    """Ordered tuple of distinct known locales.

    Events emitted:
    - known_locales_size=N
    """
    locales = draw(st.lists(locale_codes(), min_size=min_size, max_size=max_size, unique=True))
    event(f"known_locales_size={len(locales)}")
    return tuple(locales)


def path_segments() -> st.SearchStrategy[str]:
    """One URL path segment (no dots, no slashes)."""
    return st.text(alphabet=_SEGMENT_CHARS, min_size=1, max_size=12).filter(
        lambda s: s not in {"localizable"}
    )


@st.composite
def page_paths(draw: DrawFn) -> str:
    """Relative page path: ``dir/.../page.ext``."""
    directories = draw(st.lists(path_segments(), min_size=0, max_size=3))
    page = draw(path_segments())
    extension = draw(st.sampled_from(_EXTENSIONS))
    return "/".join([*directories, f"{page}.{extension}"])


@st.composite
def resource_paths(draw: DrawFn, known_locales: tuple[str, ...]) -> str:
    """Resource path in one of the three layouts.

    Events emitted:
    - resource_layout=folder|extension|plain
    """
    layout = draw(st.sampled_from(["folder", "extension", "plain"]))
    event(f"resource_layout={layout}")
    path = draw(page_paths())
    if layout == "folder":
        return f"localizable/{path}"
    if layout == "extension":
        base, _, extension = path.rpartition(".")
        locale = draw(st.sampled_from(known_locales))
        return f"{base}.{locale}.{extension}"
    return path


@st.composite
def path_translations(draw: DrawFn) -> dict[str, str]:
    """Segment -> translated segment table for a ``paths`` subtree."""
    return draw(
        st.dictionaries(path_segments(), path_segments(), min_size=0, max_size=5)
    )
