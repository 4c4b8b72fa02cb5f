"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps raise sites short and the wording testable in one place.
    """

    # Base documentation URL
    _DOCS_BASE = "https://choiceengine.readthedocs.io/en/latest"

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------

    @staticmethod
    def rule_not_callable(name: str, locale_code: str, received: object) -> Diagnostic:
        """Keyword rule registered with a non-callable value.

        Args:
            name: Rule name being registered
            locale_code: Locale the rule was registered under
            received: The offending value

        Returns:
            Diagnostic for RULE_NOT_CALLABLE
        """
        msg = f"Keyword rule '{name}' is not callable"
        return Diagnostic(
            code=DiagnosticCode.RULE_NOT_CALLABLE,
            message=msg,
            hint="Register a function taking the value and returning a keyword",
            help_url=f"{ErrorTemplate._DOCS_BASE}/registry.html",
            rule_name=name,
            locale_code=locale_code,
            received_type=type(received).__name__,
        )

    @staticmethod
    def invalid_rule_name(name: object) -> Diagnostic:
        """Rule name is empty or not a string."""
        msg = f"Invalid keyword rule name: {name!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_RULE_NAME,
            message=msg,
            hint="Rule names must be non-empty strings",
            help_url=f"{ErrorTemplate._DOCS_BASE}/registry.html",
            received_type=type(name).__name__,
        )

    @staticmethod
    def invalid_locale(locale_code: object) -> Diagnostic:
        """Locale identifier is empty or not a string."""
        msg = f"Invalid locale identifier: {locale_code!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LOCALE,
            message=msg,
            hint="Locales are non-empty strings such as 'default', 'en' or 'pt-BR'",
            help_url=f"{ErrorTemplate._DOCS_BASE}/locales.html",
            received_type=type(locale_code).__name__,
        )

    @staticmethod
    def plural_rule_missing(locale_code: str, rule_name: str) -> Diagnostic:
        """No plural rule reachable from the current locale.

        Args:
            locale_code: Locale whose lookup failed
            rule_name: Rule that was looked up

        Returns:
            Diagnostic for PLURAL_RULE_MISSING
        """
        msg = f"No '{rule_name}' rule for locale '{locale_code}' or the default locale"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_RULE_MISSING,
            message=msg,
            hint=f"Register a '{rule_name}' rule for '{locale_code}' or for 'default'",
            help_url=f"{ErrorTemplate._DOCS_BASE}/locales.html",
            rule_name=rule_name,
            locale_code=locale_code,
        )

    @staticmethod
    def unknown_cldr_locale(locale_code: str, reason: str) -> Diagnostic:
        """Babel has no CLDR data for the requested locale."""
        msg = f"No CLDR plural data for locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_CLDR_LOCALE,
            message=msg,
            hint="Use a locale code Babel recognizes, such as 'en_US' or 'pl'",
            help_url=f"{ErrorTemplate._DOCS_BASE}/locales.html",
            locale_code=locale_code,
        )

    # ------------------------------------------------------------------
    # Labels
    # ------------------------------------------------------------------

    @staticmethod
    def invalid_label_spec(spec: object) -> Diagnostic:
        """Label specification is neither a string nor a sequence of strings."""
        msg = f"Label specification must be a string or a sequence of strings, got {type(spec).__name__}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LABEL_SPEC,
            message=msg,
            hint='Write labels as "one" or "zero other", or pass a list of strings',
            help_url=f"{ErrorTemplate._DOCS_BASE}/labels.html",
            received_type=type(spec).__name__,
        )

    @staticmethod
    def empty_label_spec() -> Diagnostic:
        """Label specification tokenizes to nothing."""
        msg = "Label specification contains no labels"
        return Diagnostic(
            code=DiagnosticCode.EMPTY_LABEL_SPEC,
            message=msg,
            hint="A choice block needs at least one label to match against",
            help_url=f"{ErrorTemplate._DOCS_BASE}/labels.html",
        )

    @staticmethod
    def invalid_label_token(token: object) -> Diagnostic:
        """Label sequence contains a non-string or blank token."""
        msg = f"Label tokens must be non-empty strings, got {token!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LABEL_TOKEN,
            message=msg,
            hint="Remove the token or convert it to its keyword string",
            help_url=f"{ErrorTemplate._DOCS_BASE}/labels.html",
            received_type=type(token).__name__,
        )

    # ------------------------------------------------------------------
    # Selector options
    # ------------------------------------------------------------------

    @staticmethod
    def conflicting_resolvers() -> Diagnostic:
        """Both a positional resolver and a 'function' option were supplied."""
        msg = "Selector received both a positional resolver function and a 'function' option"
        return Diagnostic(
            code=DiagnosticCode.CONFLICTING_RESOLVERS,
            message=msg,
            hint="Pass the resolver either positionally or as function=..., not both",
            help_url=f"{ErrorTemplate._DOCS_BASE}/selectors.html",
        )

    @staticmethod
    def function_option_not_callable(received: object) -> Diagnostic:
        """'function' option is present but not callable."""
        msg = "Selector option 'function' must be callable"
        return Diagnostic(
            code=DiagnosticCode.FUNCTION_OPTION_NOT_CALLABLE,
            message=msg,
            hint="Pass a function returning the keyword to match",
            help_url=f"{ErrorTemplate._DOCS_BASE}/selectors.html",
            received_type=type(received).__name__,
        )

    @staticmethod
    def unknown_type_override(type_name: object) -> Diagnostic:
        """'type' option names a type the resolver cannot coerce to."""
        msg = f"Unknown selector type override: {type_name!r}"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_TYPE_OVERRIDE,
            message=msg,
            hint="The only supported override is type=\"boolean\"",
            help_url=f"{ErrorTemplate._DOCS_BASE}/selectors.html",
        )

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    @staticmethod
    def function_failed(function_name: str, error_msg: str) -> Diagnostic:
        """Selector override function raised while computing a keyword.

        Args:
            function_name: Name of the override function
            error_msg: Message of the underlying exception

        Returns:
            Diagnostic for FUNCTION_FAILED
        """
        msg = f"Keyword function '{function_name}' failed: {error_msg}"
        return Diagnostic(
            code=DiagnosticCode.FUNCTION_FAILED,
            message=msg,
            hint="Check the arguments the function expects: (value, options) or (options)",
            help_url=f"{ErrorTemplate._DOCS_BASE}/selectors.html",
        )

    @staticmethod
    def rule_failed(rule_name: str, locale_code: str, error_msg: str) -> Diagnostic:
        """Registered keyword rule raised for a value."""
        msg = f"Keyword rule '{rule_name}' failed for locale '{locale_code}': {error_msg}"
        return Diagnostic(
            code=DiagnosticCode.RULE_FAILED,
            message=msg,
            hint="Keyword rules must accept any number and return a keyword string",
            help_url=f"{ErrorTemplate._DOCS_BASE}/registry.html",
            rule_name=rule_name,
            locale_code=locale_code,
        )
