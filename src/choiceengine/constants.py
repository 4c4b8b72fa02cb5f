"""Shared constants for choiceengine.

Centralizes the names and limits used by both the registry and the
selector runtime. Placing them here avoids circular imports between
``runtime.registry`` and ``runtime.keywords``.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale
    "DEFAULT_LOCALE",
    # Rule names
    "PLURAL_RULE",
    # Option names
    "FUNCTION_OPTION",
    "TYPE_OPTION",
    "TRIM_OPTION",
    "RESERVED_OPTIONS",
    "BOOLEAN_TYPE",
    # Keywords
    "TRUE_KEYWORD",
    "FALSE_KEYWORD",
    # Cache limits
    "MAX_LABEL_CACHE_SIZE",
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# LOCALE
# ============================================================================

# Locale every other locale falls back to when it has no rule of its own.
DEFAULT_LOCALE: str = "default"

# ============================================================================
# RULE NAMES
# ============================================================================

# Registry name of the numeric pluralization rule consulted for numbers.
PLURAL_RULE: str = "getPluralKeyword"

# ============================================================================
# SELECTOR OPTIONS
# ============================================================================

FUNCTION_OPTION: str = "function"
TYPE_OPTION: str = "type"
TRIM_OPTION: str = "trim"

# Control options never act as attribute shortcuts, even when the resolved
# keyword happens to equal one of them.
RESERVED_OPTIONS: frozenset[str] = frozenset({FUNCTION_OPTION, TYPE_OPTION, TRIM_OPTION})

BOOLEAN_TYPE: str = "boolean"

TRUE_KEYWORD: str = "true"
FALSE_KEYWORD: str = "false"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Distinct label strings cached after whitespace tokenization.
# Templates reuse a small, fixed set of label strings; 512 covers large sites.
MAX_LABEL_CACHE_SIZE: int = 512

# Maximum cached Babel Locale instances.
MAX_LOCALE_CACHE_SIZE: int = 128
