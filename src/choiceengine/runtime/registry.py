"""Locale keyword registry.

Maps ``(locale, rule name)`` to keyword functions and holds the current
locale used for numeric resolution.

Architecture:
    - KeywordRegistry: explicit registry object; tests build isolated ones
    - get_default_registry(): lazily created process-wide instance used when
      callers do not inject a registry
    - Lookups fall back from the requested locale to the "default" locale

Thread Safety:
    Tables and the current locale are guarded by an RWLock. Resolutions take
    the shared side; register, unregister and set_locale take the exclusive
    side. Keyword functions are always invoked outside the lock, so a rule
    may itself consult the registry.

Configuration is process-local and never persisted: hosts re-apply their
registrations on every start.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from typing import Any

from choiceengine.constants import DEFAULT_LOCALE, PLURAL_RULE
from choiceengine.diagnostics import ChoiceConfigurationError, ErrorTemplate

from .plural_rules import get_plural_keyword
from .rwlock import RWLock

__all__ = [
    "KeywordFunction",
    "KeywordRegistry",
    "get_default_registry",
    "reset_default_registry",
]

logger = logging.getLogger(__name__)

type KeywordFunction = Callable[[Any], Any]

# Locales that ship with the built-in zero/one/other plural rule.
BUILTIN_PLURAL_LOCALES: tuple[str, ...] = (DEFAULT_LOCALE, "en")


def _check_locale(locale_code: object) -> str:
    if not isinstance(locale_code, str) or not locale_code:
        raise ChoiceConfigurationError(ErrorTemplate.invalid_locale(locale_code))
    return locale_code


class KeywordRegistry:
    """Table of keyword rules keyed by locale and rule name.

    Invariant: at most one rule per ``(locale, name)``; registering again
    overwrites silently.

    Supports dict-like introspection:
        - ``(locale, name) in registry``
        - ``len(registry)``: total number of rules across locales
        - ``iter(registry)``: ``(locale, name)`` pairs

    Example:
        >>> registry = KeywordRegistry()
        >>> registry.lookup("en", "getPluralKeyword")(1)
        'one'
        >>> registry.register("fr", "getPluralKeyword", lambda n: "other")
        >>> registry.set_locale("fr")
        >>> registry.get_locale()
        'fr'
    """

    __slots__ = ("_locale", "_lock", "_tables")

    def __init__(
        self,
        *,
        locale: str = DEFAULT_LOCALE,
        builtin_rules: bool = True,
    ) -> None:
        """Initialize registry.

        Args:
            locale: Initial current locale (keyword-only)
            builtin_rules: Pre-register the zero/one/other plural rule for
                "default" and "en" (keyword-only)
        """
        self._lock = RWLock()
        self._tables: dict[str, dict[str, KeywordFunction]] = {DEFAULT_LOCALE: {}}
        self._locale = _check_locale(locale)
        self._tables.setdefault(self._locale, {})

        if builtin_rules:
            for locale_code in BUILTIN_PLURAL_LOCALES:
                self.register(locale_code, PLURAL_RULE, get_plural_keyword)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, locale: str, name: str, fn: KeywordFunction) -> None:
        """Store ``fn`` under ``(locale, name)``, creating the locale table.

        Raises:
            ChoiceConfigurationError: If locale or name is empty, or fn is not callable
        """
        _check_locale(locale)
        if not isinstance(name, str) or not name:
            raise ChoiceConfigurationError(ErrorTemplate.invalid_rule_name(name))
        if not callable(fn):
            raise ChoiceConfigurationError(ErrorTemplate.rule_not_callable(name, locale, fn))

        with self._lock.write():
            table = self._tables.setdefault(locale, {})
            replaced = name in table
            table[name] = fn

        logger.debug(
            "%s keyword rule %s for locale %s",
            "Replaced" if replaced else "Registered",
            name,
            locale,
        )

    def unregister(self, locale: str, name: str) -> None:
        """Remove the rule under ``(locale, name)``; absent rules are ignored."""
        _check_locale(locale)
        with self._lock.write():
            table = self._tables.get(locale)
            removed = table.pop(name, None) if table is not None else None

        if removed is not None:
            logger.debug("Unregistered keyword rule %s for locale %s", name, locale)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def lookup(self, locale: str, name: str) -> KeywordFunction | None:
        """Return the locale's rule, else the default locale's, else None."""
        with self._lock.read():
            return self._lookup_unlocked(locale, name)

    def current_rule(self, name: str) -> tuple[str, KeywordFunction | None]:
        """Return ``(current locale, rule)`` from a single consistent snapshot."""
        with self._lock.read():
            return self._locale, self._lookup_unlocked(self._locale, name)

    def _lookup_unlocked(self, locale: str, name: str) -> KeywordFunction | None:
        table = self._tables.get(locale)
        if table is not None and name in table:
            return table[name]
        return self._tables.get(DEFAULT_LOCALE, {}).get(name)

    def has_rule(self, locale: str, name: str) -> bool:
        """Check whether ``locale`` itself (ignoring fallback) has the rule."""
        with self._lock.read():
            return name in self._tables.get(locale, {})

    def locales(self) -> list[str]:
        """List every locale that has a table, including empty ones."""
        with self._lock.read():
            return list(self._tables)

    def rules(self, locale: str) -> list[str]:
        """List rule names registered directly under ``locale``."""
        with self._lock.read():
            return list(self._tables.get(locale, {}))

    # ------------------------------------------------------------------
    # Current locale
    # ------------------------------------------------------------------

    def get_locale(self) -> str:
        """Return the current locale."""
        with self._lock.read():
            return self._locale

    def set_locale(self, locale: str) -> None:
        """Change the current locale; affects subsequent resolutions only.

        Raises:
            ChoiceConfigurationError: If locale is empty or not a string
        """
        _check_locale(locale)
        with self._lock.write():
            previous = self._locale
            self._locale = locale
            self._tables.setdefault(locale, {})

        if previous != locale:
            logger.info("Choice locale changed from %s to %s", previous, locale)

    def locale(self, locale: str | None = None) -> str:
        """Get the current locale, or set it first when ``locale`` is given."""
        if locale:
            self.set_locale(locale)
        return self.get_locale()

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self) -> None:
        """Check that numeric resolution can succeed for the current locale.

        Intended for host startup, so a missing plural rule is reported
        before the first render instead of during it.

        Raises:
            ChoiceConfigurationError: If no plural rule is reachable
        """
        locale, rule = self.current_rule(PLURAL_RULE)
        if rule is None:
            raise ChoiceConfigurationError(ErrorTemplate.plural_rule_missing(locale, PLURAL_RULE))

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def __contains__(self, key: object) -> bool:
        """Check ``(locale, name) in registry`` without fallback."""
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        locale, name = key
        return self.has_rule(locale, name)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        """Iterate over ``(locale, name)`` pairs (snapshot)."""
        with self._lock.read():
            pairs = [(loc, name) for loc, table in self._tables.items() for name in table]
        return iter(pairs)

    def __len__(self) -> int:
        """Total number of registered rules across all locales."""
        with self._lock.read():
            return sum(len(table) for table in self._tables.values())

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"KeywordRegistry(locale={self.get_locale()!r}, rules={len(self)})"


# Process-wide registry, created on first use.
_default_registry: KeywordRegistry | None = None
_default_registry_lock = threading.Lock()


def get_default_registry() -> KeywordRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _default_registry  # noqa: PLW0603 - process-wide singleton
    with _default_registry_lock:
        if _default_registry is None:
            _default_registry = KeywordRegistry()
        return _default_registry


def reset_default_registry() -> None:
    """Discard the process-wide registry; the next access rebuilds built-ins."""
    global _default_registry  # noqa: PLW0603 - process-wide singleton
    with _default_registry_lock:
        _default_registry = None
