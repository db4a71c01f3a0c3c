"""Enumerations for sitei18n type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so they log and serialize cleanly.

Python 3.13+.
"""

from enum import StrEnum


class LocalizationStrategy(StrEnum):
    """How a source resource declares that it is localizable.

    StrEnum provides automatic string conversion: str(LocalizationStrategy.FOLDER) == "folder"
    """

    EXTENSION = "extension"
    """Locale token in the filename: about.fr.html"""

    FOLDER = "folder"
    """Resource below the localizable templates folder: localizable/about.html"""


class LocalizationPhase(StrEnum):
    """Lifecycle phase of a SiteLocalization.

    Expansion and lookups are only valid once locale data is READY.
    """

    CONFIGURED = "configured"
    """Options parsed; locale data not yet loaded."""

    READY = "ready"
    """Locale data loaded and the mount locale chosen."""


__all__ = [
    "LocalizationPhase",
    "LocalizationStrategy",
]
