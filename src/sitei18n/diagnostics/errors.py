"""sitei18n exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic for rich error information.
Builtin bases (LookupError, ValueError, RuntimeError) are mixed in where a
caller would naturally catch the builtin kind.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class I18nError(Exception):
    """Base exception for all sitei18n errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize I18nError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class LocalePathNotFoundError(I18nError, LookupError):
    """No localized path exists for a page id in the requested locale.

    Raised by locale_path(). Path absence is a caller bug, not an expected
    runtime condition, so there is no silent fallback.
    """


class NoOtherLocaleError(I18nError, ValueError):
    """switch_locale_path() called when no other locale exists."""


class PathResolutionError(I18nError):
    """A path resolver could not turn a path or resource into a URL.

    Raised by PathResolver implementations. LinkResolver recovers from it
    by resolving the original, non-localized reference.
    """


class ConfigurationError(I18nError, ValueError):
    """Invalid or unknown localization option."""


class LocaleDataError(I18nError):
    """A locale-data file could not be read or parsed.

    Attributes:
        source_path: Path of the offending file
    """

    def __init__(self, message: str | Diagnostic, *, source_path: str = "") -> None:
        """Initialize LocaleDataError.

        Args:
            message: Error message string OR Diagnostic object
            source_path: Path of the offending file
        """
        super().__init__(message)
        self.source_path = source_path


class LocaleDataNotReadyError(I18nError, RuntimeError):
    """Expansion or lookup attempted before locale data was prepared."""
