"""Tests for diagnostics and the exception hierarchy.

Tests verify:
- Diagnostic formatting (code name, path, locale, hint lines)
- I18nError accepts a plain message or a Diagnostic
- Builtin base classes are mixed in where callers catch builtins
"""

from __future__ import annotations

import pytest

from sitei18n.diagnostics import (
    ConfigurationError,
    Diagnostic,
    DiagnosticCode,
    I18nError,
    LocaleDataError,
    LocaleDataNotReadyError,
    LocalePathNotFoundError,
    NoOtherLocaleError,
    PathResolutionError,
)


class TestDiagnosticFormatting:
    """Diagnostic.format_error() output."""

    def test_minimal(self) -> None:
        """Only the header line without optional fields."""
        diagnostic = Diagnostic(code=DiagnosticCode.NO_OTHER_LOCALE, message="nothing else")
        assert diagnostic.format_error() == "error[NO_OTHER_LOCALE]: nothing else"
        assert str(diagnostic) == "nothing else"

    def test_all_fields(self) -> None:
        """Path, locale and hint each get their own line, in that order."""
        diagnostic = Diagnostic(
            code=DiagnosticCode.LOCALE_PATH_NOT_FOUND,
            message="No 'fr' path for page 'about'",
            hint="Check the localizable folder",
            locale="fr",
            path="localizable/about.html",
            severity="warning",
        )
        assert diagnostic.format_error().splitlines() == [
            "warning[LOCALE_PATH_NOT_FOUND]: No 'fr' path for page 'about'",
            "  --> localizable/about.html",
            "  = locale: fr",
            "  = help: Check the localizable folder",
        ]

    def test_codes_are_unique(self) -> None:
        """Every code has a distinct numeric value."""
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))


class TestI18nError:
    """I18nError construction."""

    def test_plain_message(self) -> None:
        """A string message leaves diagnostic unset."""
        error = I18nError("boom")
        assert str(error) == "boom"
        assert error.diagnostic is None

    def test_diagnostic_message(self) -> None:
        """A Diagnostic is stored and formatted into the message."""
        diagnostic = Diagnostic(code=DiagnosticCode.INVALID_OPTION, message="bad", hint="fix")
        error = ConfigurationError(diagnostic)
        assert error.diagnostic is diagnostic
        assert str(error) == diagnostic.format_error()

    def test_locale_data_error_source_path(self) -> None:
        """LocaleDataError remembers the offending file."""
        error = LocaleDataError("unreadable", source_path="locales/fr.yml")
        assert error.source_path == "locales/fr.yml"


class TestHierarchy:
    """Builtin mix-ins."""

    @pytest.mark.parametrize(
        ("error_type", "builtin"),
        [
            (LocalePathNotFoundError, LookupError),
            (NoOtherLocaleError, ValueError),
            (ConfigurationError, ValueError),
            (LocaleDataNotReadyError, RuntimeError),
        ],
    )
    def test_builtin_bases(self, error_type: type[I18nError], builtin: type[Exception]) -> None:
        """Errors can be caught as their natural builtin kind."""
        assert issubclass(error_type, builtin)
        assert issubclass(error_type, I18nError)

    @pytest.mark.parametrize("error_type", [PathResolutionError, LocaleDataError])
    def test_plain_subclasses(self, error_type: type[I18nError]) -> None:
        """Resolution and data errors only derive from I18nError."""
        assert issubclass(error_type, I18nError)
        assert not issubclass(error_type, ValueError)
