"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic carried by every
choiceengine exception.

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
        1000-1999: Configuration errors (registry, locales, labels, options)
        2000-2999: Resolution errors (keyword functions failing at render time)
    """

    # Configuration errors (1000-1999)
    RULE_NOT_CALLABLE = 1001
    INVALID_RULE_NAME = 1002
    INVALID_LOCALE = 1003
    PLURAL_RULE_MISSING = 1004
    UNKNOWN_CLDR_LOCALE = 1005
    INVALID_LABEL_SPEC = 1006
    EMPTY_LABEL_SPEC = 1007
    INVALID_LABEL_TOKEN = 1008
    CONFLICTING_RESOLVERS = 1009
    FUNCTION_OPTION_NOT_CALLABLE = 1010
    UNKNOWN_TYPE_OVERRIDE = 1011

    # Resolution errors (2000-2999)
    FUNCTION_FAILED = 2001
    RULE_FAILED = 2002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        rule_name: Keyword rule involved (registry errors)
        locale_code: Locale involved (registry errors)
        received_type: Type name of an offending value
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None
    rule_name: str | None = None
    locale_code: str | None = None
    received_type: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[PLURAL_RULE_MISSING]: No 'getPluralKeyword' rule for locale 'fr'
              = locale: fr
              = help: Register a plural rule for 'fr' or for the default locale

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
