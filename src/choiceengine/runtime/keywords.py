"""Keyword resolution: turn a selector input into the keyword matchers compare.

Precedence, first match wins:
    1. Override function (positional Resolver or ``function`` option)
    2. ``type="boolean"`` override: "true" iff the value is True
    3. Native bool: "true" / "false"
    4. Native number: locale plural rule from the registry
    5. Anything else: the value itself

The order is load-bearing. ``bool`` is a subclass of ``int`` in Python, so
the boolean branch must run before the numeric one, while 0 and 1 must still
reach the plural rule rather than any truthiness test.

Python 3.13+. Indirect dependency: Babel (via plural_rules).
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from numbers import Real
from types import MappingProxyType
from typing import Any, Final

from choiceengine.constants import (
    BOOLEAN_TYPE,
    FALSE_KEYWORD,
    FUNCTION_OPTION,
    PLURAL_RULE,
    RESERVED_OPTIONS,
    TRIM_OPTION,
    TRUE_KEYWORD,
    TYPE_OPTION,
)
from choiceengine.diagnostics import (
    ChoiceConfigurationError,
    ChoiceResolutionError,
    ErrorTemplate,
)

from .registry import KeywordRegistry, get_default_registry

__all__ = [
    "MISSING",
    "ChoiceInput",
    "ResolutionOptions",
    "Resolver",
    "Value",
    "as_choice_input",
    "resolve_keyword",
]


class _Missing:
    """Sentinel type for "no positional argument was supplied"."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


@dataclass(frozen=True, slots=True)
class Value:
    """Plain selector input resolved by type."""

    value: Any = MISSING


@dataclass(frozen=True, slots=True)
class Resolver:
    """Selector input that is itself the keyword function."""

    fn: Callable[..., Any]


type ChoiceInput = Value | Resolver


def as_choice_input(arg: Any = MISSING) -> ChoiceInput:
    """Classify a raw positional selector argument.

    Callables become Resolver, everything else (including MISSING) Value.
    Already-classified inputs pass through.
    """
    if isinstance(arg, (Value, Resolver)):
        return arg
    if callable(arg):
        return Resolver(arg)
    return Value(arg)


@dataclass(frozen=True, slots=True)
class ResolutionOptions:
    """Named selector options split into control settings and shortcuts.

    Attributes:
        function: Override function from the ``function`` option
        type: Type override from the ``type`` option ("boolean" or None)
        trim: False only when the ``trim`` option is literally False
        shortcuts: Every non-reserved option, keyed by label
        raw: All options as given, passed to override functions
    """

    function: Callable[..., Any] | None = None
    type: str | None = None
    trim: bool = True
    shortcuts: Mapping[str, Any] = field(default_factory=dict)
    raw: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None) -> ResolutionOptions:
        """Parse a host's named-options mapping.

        Raises:
            ChoiceConfigurationError: If ``function`` is not callable or
                ``type`` names an unsupported override
        """
        options = dict(options or {})

        function = options.get(FUNCTION_OPTION)
        if function is not None and not callable(function):
            raise ChoiceConfigurationError(ErrorTemplate.function_option_not_callable(function))

        type_override = options.get(TYPE_OPTION)
        if type_override is not None and type_override != BOOLEAN_TYPE:
            raise ChoiceConfigurationError(ErrorTemplate.unknown_type_override(type_override))

        return cls(
            function=function,
            type=type_override,
            trim=options.get(TRIM_OPTION) is not False,
            shortcuts=MappingProxyType(
                {k: v for k, v in options.items() if k not in RESERVED_OPTIONS}
            ),
            raw=MappingProxyType(options),
        )


def resolve_keyword(
    choice_input: ChoiceInput,
    options: ResolutionOptions | None = None,
    *,
    registry: KeywordRegistry | None = None,
) -> Any:
    """Resolve one selector input to its keyword.

    Pure with respect to its inputs and the registry state at call time:
    resolving the same input twice with no registry change yields the same
    keyword.

    Args:
        choice_input: Value(...) or Resolver(...)
        options: Parsed selector options (default: none)
        registry: Keyword registry (default: process-wide registry)

    Returns:
        The keyword; a string except when a non-string value or an
        override function's result passes through verbatim

    Raises:
        ChoiceConfigurationError: Conflicting resolvers, or no plural rule
        ChoiceResolutionError: Override function or plural rule rejected its input
    """
    if options is None:
        options = ResolutionOptions()

    match choice_input:
        case Resolver(fn=fn):
            if options.function is not None:
                raise ChoiceConfigurationError(ErrorTemplate.conflicting_resolvers())
            return _call_override(fn, options.raw)
        case Value(value=value):
            if options.function is not None:
                if value is MISSING or value is None:
                    return _call_override(options.function, options.raw)
                return _call_override(options.function, value, options.raw)
            if options.type == BOOLEAN_TYPE or isinstance(value, bool):
                return TRUE_KEYWORD if value is True else FALSE_KEYWORD
            if isinstance(value, (Real, Decimal)):
                return _plural_keyword(value, registry or get_default_registry())
            return None if value is MISSING else value
        case _:
            msg = f"Expected Value or Resolver, got {type(choice_input).__name__}"
            raise TypeError(msg)


def _call_override(fn: Callable[..., Any], *args: Any) -> Any:
    # Only argument-shaped failures are wrapped; anything else is a bug in
    # the host's function and propagates unchanged.
    try:
        return fn(*args)
    except (TypeError, ValueError) as e:
        name = getattr(fn, "__name__", type(fn).__name__)
        raise ChoiceResolutionError(ErrorTemplate.function_failed(name, str(e))) from e


def _plural_keyword(num: Real | Decimal, registry: KeywordRegistry) -> Any:
    locale, rule = registry.current_rule(PLURAL_RULE)
    if rule is None:
        raise ChoiceConfigurationError(ErrorTemplate.plural_rule_missing(locale, PLURAL_RULE))
    try:
        return rule(num)
    except (TypeError, ValueError) as e:
        raise ChoiceResolutionError(
            ErrorTemplate.rule_failed(PLURAL_RULE, locale, str(e))
        ) from e
