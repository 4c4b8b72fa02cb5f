"""Diagnostic system for choiceengine errors.

Provides structured error diagnostics with codes, hints, and help URLs.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import ChoiceConfigurationError, ChoiceError, ChoiceResolutionError
from .formatter import DiagnosticFormatter
from .templates import ErrorTemplate

__all__ = [
    "ChoiceConfigurationError",
    "ChoiceError",
    "ChoiceResolutionError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
]
