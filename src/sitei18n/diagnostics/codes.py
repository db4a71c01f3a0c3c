"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic carried by every
sitei18n exception.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Lookup errors (missing localized paths, missing locales)
        2000-2999: Resolution errors (path resolver failures)
        3000-3999: Configuration errors (invalid options, lifecycle misuse)
        4000-4999: Locale data errors (unreadable or malformed data files)
    """

    # Lookup errors (1000-1999)
    LOCALE_PATH_NOT_FOUND = 1001
    NO_OTHER_LOCALE = 1002

    # Resolution errors (2000-2999)
    PATH_RESOLUTION_FAILED = 2001

    # Configuration errors (3000-3999)
    INVALID_OPTION = 3001
    UNKNOWN_OPTION = 3002
    LOCALE_DATA_NOT_READY = 3003

    # Locale data errors (4000-4999)
    LOCALE_DATA_UNREADABLE = 4001
    LOCALE_DATA_MALFORMED = 4002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        locale: Locale involved in the failure, if any
        path: Resource or link path involved in the failure, if any
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    locale: str | None = None
    path: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic as a multi-line report.

        Example output:
            error[LOCALE_PATH_NOT_FOUND]: No 'fr' path for page 'about'
              = locale: fr
              = help: Check that the page lives under the localizable folder

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {self.message}"]
        if self.path is not None:
            lines.append(f"  --> {self.path}")
        if self.locale is not None:
            lines.append(f"  = locale: {self.locale}")
        if self.hint is not None:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
