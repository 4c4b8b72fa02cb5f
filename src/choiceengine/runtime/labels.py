"""Label specifications and keyword matching.

A matcher block accepts its labels either as one space-delimited string
("zero other") or as a ready-made sequence of tokens. A keyword matches when
it equals any token exactly; there is no case folding or normalization.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import functools
from collections.abc import Sequence
from typing import Any

from choiceengine.constants import MAX_LABEL_CACHE_SIZE
from choiceengine.diagnostics import ChoiceConfigurationError, ErrorTemplate

__all__ = ["LabelSpec", "matches", "parse_labels"]

type LabelSpec = str | Sequence[str]


@functools.lru_cache(maxsize=MAX_LABEL_CACHE_SIZE)
def _split_labels(spec: str) -> tuple[str, ...]:
    tokens = tuple(spec.split())
    if not tokens:
        raise ChoiceConfigurationError(ErrorTemplate.empty_label_spec())
    return tokens


def parse_labels(spec: LabelSpec) -> tuple[str, ...]:
    """Normalize a label specification to a tuple of tokens.

    Strings are split on runs of whitespace; sequences are taken token by
    token as given.

    Args:
        spec: "a b c" or ["a", "b", "c"]

    Returns:
        Tuple of label tokens, in authoring order

    Raises:
        ChoiceConfigurationError: If spec is not a string or sequence of
            strings, contains blank tokens, or has no tokens at all

    Example:
        >>> parse_labels("zero  other")
        ('zero', 'other')
    """
    if isinstance(spec, str):
        return _split_labels(spec)

    # bytes and bytearray are Sequences of ints, not of labels
    if not isinstance(spec, Sequence) or isinstance(spec, (bytes, bytearray)):
        raise ChoiceConfigurationError(ErrorTemplate.invalid_label_spec(spec))

    for token in spec:
        if not isinstance(token, str) or not token:
            raise ChoiceConfigurationError(ErrorTemplate.invalid_label_token(token))
    if not spec:
        raise ChoiceConfigurationError(ErrorTemplate.empty_label_spec())
    return tuple(spec)


def matches(keyword: Any, spec: LabelSpec) -> bool:
    """Return True iff ``keyword`` equals one of the spec's tokens.

    Non-string keywords (for example ``None`` passed straight through from
    the template data) never match.

    Raises:
        ChoiceConfigurationError: If the label specification is malformed

    Examples:
        >>> matches("b", "a b c")
        True
        >>> matches("B", "a b c")
        False
    """
    labels = parse_labels(spec)
    return isinstance(keyword, str) and keyword in labels
