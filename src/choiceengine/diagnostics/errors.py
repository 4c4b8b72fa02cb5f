"""Choice exception hierarchy with structured diagnostics.

All exceptions optionally carry a Diagnostic object for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "ChoiceConfigurationError",
    "ChoiceError",
    "ChoiceResolutionError",
]


class ChoiceError(Exception):
    """Base exception for all choiceengine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ChoiceError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ChoiceConfigurationError(ChoiceError):
    """Invalid registry, locale, label or selector configuration.

    Raised at registration or template-authoring time, never for a keyword
    that simply matches nothing.
    """


class ChoiceResolutionError(ChoiceError):
    """Keyword computation failed at render time.

    Examples:
    - Override function rejected its arguments
    - Registered keyword rule rejected a number
    """
