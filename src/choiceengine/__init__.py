"""choiceengine - choice resolution for template engines.

Picks which branch of a template applies to a runtime value. A ``choose``
block derives a keyword (custom function, boolean coercion, or the current
locale's plural rule) and nested ``choice`` blocks render when their labels
contain it.

Public API:
    resolve_selector - Resolve a ``choose`` block
    match_label - Resolve a ``choice`` block against the ambient keyword
    ChoiceHelpers - Host-facing ``choose``/``choice`` pair
    ChoiceContext - Immutable evaluation context carrying the keyword
    KeywordRegistry - Locale keyword rules (isolated instances)
    Value, Resolver - Explicit selector inputs

Process-wide administration (default registry):
    register, unregister, set_locale, get_locale, validate

Exceptions:
    ChoiceError - Base exception class
    ChoiceConfigurationError - Invalid registry, label or option setup
    ChoiceResolutionError - Keyword function failures at render time
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import ChoiceConfigurationError, ChoiceError, ChoiceResolutionError
from .runtime import (
    ChoiceContext,
    ChoiceHelpers,
    KeywordFunction,
    KeywordRegistry,
    Resolver,
    Value,
    get_default_registry,
    match_label,
    register_cldr_plural_rule,
    resolve_selector,
)

# Version information - Auto-populated from package metadata
try:
    __version__ = _get_version("choiceengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"


def register(locale: str, name: str, fn: KeywordFunction) -> None:
    """Register a keyword rule on the process-wide registry."""
    get_default_registry().register(locale, name, fn)


def unregister(locale: str, name: str) -> None:
    """Remove a keyword rule from the process-wide registry (no-op if absent)."""
    get_default_registry().unregister(locale, name)


def set_locale(locale: str) -> None:
    """Set the process-wide current locale."""
    get_default_registry().set_locale(locale)


def get_locale() -> str:
    """Return the process-wide current locale."""
    return get_default_registry().get_locale()


def validate() -> None:
    """Check the process-wide registry at startup; see KeywordRegistry.validate."""
    get_default_registry().validate()


__all__ = [
    "ChoiceConfigurationError",
    "ChoiceContext",
    "ChoiceError",
    "ChoiceHelpers",
    "ChoiceResolutionError",
    "KeywordRegistry",
    "Resolver",
    "Value",
    "__version__",
    "get_locale",
    "match_label",
    "register",
    "register_cldr_plural_rule",
    "resolve_selector",
    "set_locale",
    "unregister",
    "validate",
]
