"""Ambient evaluation context passed from a selector to its matchers.

A selector never mutates the caller's context. It builds a ChoiceContext:
a frozen shallow copy of the caller's fields plus the resolved keyword,
threaded explicitly into the body renderer. Nested matchers read the keyword
back from whatever context they are rendered with, and nested selectors
extend their own copy, so sibling and parent invocations never observe each
other's keywords.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any, Final

__all__ = ["NO_KEYWORD", "ChoiceContext"]


class _NoKeyword:
    """Sentinel type for contexts created outside any selector."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "NO_KEYWORD"

    def __bool__(self) -> bool:
        return False


NO_KEYWORD: Final = _NoKeyword()


class ChoiceContext(Mapping[str, Any]):
    """Immutable evaluation context carrying the ambient keyword.

    Behaves as a read-only mapping of the caller's fields, so host engines
    can keep resolving ``{{name}}`` lookups against it. The keyword lives in
    a separate attribute and never collides with user data.

    Attributes:
        keyword: Resolved keyword of the innermost enclosing selector, or
            NO_KEYWORD outside any selector

    Example:
        >>> ctx = ChoiceContext.wrap({"count": 2}).extend(keyword="other")
        >>> ctx["count"], ctx.keyword
        (2, 'other')
    """

    __slots__ = ("_data", "_keyword")

    def __init__(self, data: Mapping[str, Any] | None = None, keyword: Any = NO_KEYWORD) -> None:
        """Initialize context with a shallow copy of ``data``."""
        self._data: Mapping[str, Any] = MappingProxyType(dict(data or {}))
        self._keyword = keyword

    @classmethod
    def wrap(cls, caller: Mapping[str, Any] | ChoiceContext | None) -> ChoiceContext:
        """Adopt a caller context; existing ChoiceContexts are returned as-is."""
        if isinstance(caller, ChoiceContext):
            return caller
        return cls(caller)

    def extend(self, keyword: Any = NO_KEYWORD, **fields: Any) -> ChoiceContext:
        """Return a new context with extra fields and, optionally, a new keyword.

        The receiver is left untouched. When ``keyword`` is omitted the
        current keyword carries over.
        """
        data = {**self._data, **fields}
        return ChoiceContext(data, self._keyword if keyword is NO_KEYWORD else keyword)

    @property
    def keyword(self) -> Any:
        """Ambient keyword (NO_KEYWORD outside a selector)."""
        return self._keyword

    @property
    def has_keyword(self) -> bool:
        """True when rendered inside a selector body."""
        return self._keyword is not NO_KEYWORD

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ChoiceContext):
            return self._keyword == other._keyword and dict(self._data) == dict(other._data)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ChoiceContext({dict(self._data)!r}, keyword={self._keyword!r})"
