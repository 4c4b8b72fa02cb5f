"""Plural keyword rules.

Two families of rules can sit under the ``getPluralKeyword`` registry name:

- ``get_plural_keyword``: the built-in zero/one/other rule registered for the
  "default" and "en" locales. Zero gets its own keyword so templates can say
  "no ducks" without a separate conditional.
- ``cldr_plural_rule(locale)``: Babel's CLDR plural rule for a real locale
  (zero, one, two, few, many, other), opt-in per locale through
  ``register_cldr_plural_rule``.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from babel.core import UnknownLocaleError

from choiceengine.constants import PLURAL_RULE
from choiceengine.diagnostics import ChoiceConfigurationError, ErrorTemplate
from choiceengine.locale_utils import get_babel_locale

if TYPE_CHECKING:
    from collections.abc import Callable

    from .registry import KeywordRegistry

__all__ = [
    "cldr_plural_rule",
    "get_plural_keyword",
    "register_cldr_plural_rule",
]


def get_plural_keyword(num: int | float | Decimal) -> str:
    """Return the built-in pluralization keyword for a number.

    Examples:
        >>> get_plural_keyword(0)
        'zero'
        >>> get_plural_keyword(1)
        'one'
        >>> get_plural_keyword(2.5)
        'other'
    """
    if num == 0:
        return "zero"
    if num == 1:
        return "one"
    return "other"


def cldr_plural_rule(locale_code: str) -> Callable[[int | float | Decimal], str]:
    """Build a keyword function from Babel's CLDR plural rule for a locale.

    The locale is parsed once, here, so an unknown locale is reported when
    the rule is created rather than in the middle of a render.

    Args:
        locale_code: Locale code (e.g., "pl", "ar-SA", "en_GB")

    Returns:
        Function mapping a number to a CLDR plural category

    Raises:
        ChoiceConfigurationError: If Babel has no data for the locale

    Examples:
        >>> cldr_plural_rule("pl")(5)
        'many'
        >>> cldr_plural_rule("en")(0)
        'other'
    """
    try:
        plural_form = get_babel_locale(locale_code).plural_form
    except (UnknownLocaleError, ValueError) as e:
        raise ChoiceConfigurationError(
            ErrorTemplate.unknown_cldr_locale(locale_code, str(e))
        ) from e

    def cldr_plural_keyword(num: int | float | Decimal) -> str:
        return plural_form(num)

    cldr_plural_keyword.__qualname__ = f"cldr_plural_keyword[{locale_code}]"
    return cldr_plural_keyword


def register_cldr_plural_rule(
    locale_code: str, registry: KeywordRegistry | None = None
) -> None:
    """Install Babel's CLDR plural rule as ``getPluralKeyword`` for a locale.

    Args:
        locale_code: Locale to register under (also used for the CLDR lookup)
        registry: Target registry (default: the process-wide registry)

    Raises:
        ChoiceConfigurationError: If Babel has no data for the locale
    """
    if registry is None:
        from .registry import get_default_registry  # noqa: PLC0415 - circular

        registry = get_default_registry()
    registry.register(locale_code, PLURAL_RULE, cldr_plural_rule(locale_code))
