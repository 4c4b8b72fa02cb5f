"""Choice runtime package.

Provides the keyword registry, keyword resolution, label matching and the
selector dispatcher consumed by host template engines.

Python 3.13+.
"""

from .context import NO_KEYWORD, ChoiceContext
from .keywords import (
    MISSING,
    ChoiceInput,
    ResolutionOptions,
    Resolver,
    Value,
    as_choice_input,
    resolve_keyword,
)
from .labels import LabelSpec, matches, parse_labels
from .plural_rules import cldr_plural_rule, get_plural_keyword, register_cldr_plural_rule
from .registry import (
    KeywordFunction,
    KeywordRegistry,
    get_default_registry,
    reset_default_registry,
)
from .selector import BodyRenderer, ChoiceHelpers, match_label, resolve_selector

__all__ = [
    "MISSING",
    "NO_KEYWORD",
    "BodyRenderer",
    "ChoiceContext",
    "ChoiceHelpers",
    "ChoiceInput",
    "KeywordFunction",
    "KeywordRegistry",
    "LabelSpec",
    "ResolutionOptions",
    "Resolver",
    "Value",
    "as_choice_input",
    "cldr_plural_rule",
    "get_default_registry",
    "get_plural_keyword",
    "match_label",
    "matches",
    "parse_labels",
    "register_cldr_plural_rule",
    "reset_default_registry",
    "resolve_keyword",
    "resolve_selector",
]
