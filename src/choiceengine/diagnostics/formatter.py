"""Diagnostic formatting service.

Renders diagnostics in Rust compiler style for exception messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from .codes import Diagnostic

__all__ = ["DiagnosticFormatter"]


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Example:
        >>> print(DiagnosticFormatter().format(ErrorTemplate.empty_label_spec()))
        error[EMPTY_LABEL_SPEC]: Label specification contains no labels
          = help: A choice block needs at least one label to match against
          = note: see https://choiceengine.readthedocs.io/en/latest/labels.html
    """

    def format(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[RULE_NOT_CALLABLE]: Keyword rule 'getPluralKeyword' is not callable
              = rule: getPluralKeyword
              = locale: en
              = received: str
              = help: Register a function taking the value and returning a keyword

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        severity = diagnostic.severity if diagnostic.severity == "warning" else "error"
        parts = [f"{severity}[{diagnostic.code.name}]: {diagnostic.message}"]

        if diagnostic.rule_name:
            parts.append(f"  = rule: {diagnostic.rule_name}")

        if diagnostic.locale_code:
            parts.append(f"  = locale: {diagnostic.locale_code}")

        if diagnostic.received_type:
            parts.append(f"  = received: {diagnostic.received_type}")

        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")

        if diagnostic.help_url:
            parts.append(f"  = note: see {diagnostic.help_url}")

        return "\n".join(parts)
