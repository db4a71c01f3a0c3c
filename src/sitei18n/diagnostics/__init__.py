"""Diagnostic system for sitei18n errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ConfigurationError,
    I18nError,
    LocaleDataError,
    LocaleDataNotReadyError,
    LocalePathNotFoundError,
    NoOtherLocaleError,
    PathResolutionError,
)

__all__ = [
    "ConfigurationError",
    "Diagnostic",
    "DiagnosticCode",
    "I18nError",
    "LocaleDataError",
    "LocaleDataNotReadyError",
    "LocalePathNotFoundError",
    "NoOtherLocaleError",
    "PathResolutionError",
]
