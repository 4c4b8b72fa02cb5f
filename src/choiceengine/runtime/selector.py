"""Selector dispatch: the ``choose`` and ``choice`` block implementations.

A host template engine calls ``resolve_selector`` for an outer ``choose``
block and ``match_label`` for each nested ``choice`` block:

    {{#choose count}}
        {{count}}
        {{#choice "zero other"}} ducks {{/choice}}
        {{#choice "one"}} duck {{/choice}}
    {{/choose}}

The host supplies body renderers, ``Callable[[ChoiceContext], str]``, that
render a block's inner content against a context. Matchers are independent:
several can match the same keyword, and their output is concatenated in
document order with whatever static text surrounds them.

Python 3.13+. Indirect dependency: Babel (via plural_rules).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from .context import ChoiceContext
from .keywords import MISSING, ResolutionOptions, as_choice_input, resolve_keyword
from .labels import LabelSpec, matches, parse_labels
from .registry import KeywordRegistry

__all__ = [
    "BodyRenderer",
    "ChoiceHelpers",
    "match_label",
    "resolve_selector",
]

logger = logging.getLogger(__name__)

type BodyRenderer = Callable[[ChoiceContext], str]


def resolve_selector(
    arg: Any = MISSING,
    options: Mapping[str, Any] | None = None,
    body: BodyRenderer | None = None,
    context: Mapping[str, Any] | None = None,
    *,
    registry: KeywordRegistry | None = None,
) -> str:
    """Resolve one ``choose`` block to its output string.

    Args:
        arg: Positional selector argument: a value, a keyword function, or
            MISSING when the block was written without one
        options: Named options: ``function``, ``type``, ``trim`` and any
            number of label shortcuts (``foo="Option Foo"``)
        body: Renderer for the block body (None renders as empty)
        context: Caller's evaluation context; never mutated
        registry: Keyword registry (default: process-wide registry)

    Returns:
        Shortcut value if a non-reserved option is named after the keyword,
        otherwise the rendered body; stripped of surrounding whitespace
        unless ``trim=False``

    Raises:
        ChoiceConfigurationError: Invalid options or missing plural rule
        ChoiceResolutionError: Keyword function rejected its arguments

    Example:
        >>> resolve_selector("foo", {"foo": "Option Foo", "bar": "Option Bar"})
        'Option Foo'
    """
    parsed = ResolutionOptions.from_mapping(options)
    keyword = resolve_keyword(as_choice_input(arg), parsed, registry=registry)
    child = ChoiceContext.wrap(context).extend(keyword=keyword)
    logger.debug("Resolved choice keyword: %r", keyword)

    shortcut = parsed.shortcuts.get(keyword) if isinstance(keyword, str) else None
    if shortcut is not None:
        output = str(shortcut)
    elif body is not None:
        output = body(child)
    else:
        output = ""

    if parsed.trim:
        output = output.strip()
    return output


def match_label(
    context: Mapping[str, Any] | None,
    label_spec: LabelSpec,
    body: BodyRenderer | None = None,
) -> str:
    """Render a ``choice`` block if its labels contain the ambient keyword.

    Labels are validated even when nothing matches, so a malformed label
    fails the first render instead of silently producing nothing.

    Args:
        context: Context the matcher is rendered in (normally the
            ChoiceContext built by the enclosing selector)
        label_spec: "a b c" or a sequence of labels
        body: Renderer for the block body

    Returns:
        Rendered body on a match, otherwise ""

    Raises:
        ChoiceConfigurationError: If label_spec is malformed
    """
    labels = parse_labels(label_spec)
    ambient = ChoiceContext.wrap(context)

    if not ambient.has_keyword:
        logger.warning("choice block %s rendered outside a choose block", " ".join(labels))
        return ""

    if body is None or not matches(ambient.keyword, labels):
        return ""
    return body(ambient)


class ChoiceHelpers:
    """Host-facing pair of ``choose`` / ``choice`` callables.

    Binds an optional registry so a host can register isolated helper sets
    (one per tenant or test) alongside the process-wide default.

    Example:
        >>> helpers = ChoiceHelpers()
        >>> helpers.choose("bar", None, None, foo="Foo", bar="Bar")
        'Bar'
    """

    __slots__ = ("registry",)

    def __init__(self, registry: KeywordRegistry | None = None) -> None:
        """Initialize helpers.

        Args:
            registry: Registry to resolve numbers against (default: the
                process-wide registry, looked up at call time)
        """
        self.registry = registry

    def choose(
        self,
        arg: Any = MISSING,
        body: BodyRenderer | None = None,
        context: Mapping[str, Any] | None = None,
        /,
        **options: Any,
    ) -> str:
        """Selector helper; see resolve_selector."""
        return resolve_selector(arg, options, body, context, registry=self.registry)

    def choice(
        self,
        label_spec: LabelSpec,
        body: BodyRenderer | None = None,
        context: Mapping[str, Any] | None = None,
        /,
    ) -> str:
        """Matcher helper; see match_label."""
        return match_label(context, label_spec, body)

    def as_dict(self) -> dict[str, Callable[..., str]]:
        """Helpers keyed by the block names hosts register them under."""
        return {"choose": self.choose, "choice": self.choice}
