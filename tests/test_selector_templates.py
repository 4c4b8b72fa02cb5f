"""End-to-end choose/choice behavior through a minimal template host.

Each test mirrors a template a host engine would render, e.g.

    {{#choose x}}
        {{#choice "zero other"}}Choice zero/other{{/choice}}
        {{#choice "one"}}Choice one{{/choice}}
    {{/choose}}

Output is whitespace-collapsed the way the host would present it.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from unittest.mock import Mock

import pytest
from template_host import Var, choice, choose, render

from choiceengine import ChoiceConfigurationError, KeywordRegistry, resolve_selector
from choiceengine.runtime.keywords import MISSING

# ============================================================================
# PLAIN KEYWORDS
# ============================================================================


class TestStringChoices:
    """String values pass through as keywords."""

    TEMPLATE = staticmethod(
        choose(
            Var("x"),
            " ",
            choice("foo", "Choice foo"),
            " ",
            choice("bar", "Choice bar"),
            " ",
        )
    )

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("foo", "Choice foo"), ("bar", "Choice bar"), ("baz", "")],
    )
    def test_outputs_matching_choice(self, value: str, expected: str) -> None:
        assert render(self.TEMPLATE, {"x": value}) == expected

    def test_static_content_is_always_output(self) -> None:
        template = choose(
            Var("x"),
            " Output whatever the value ",
            choice("foo", "Choice foo"),
            choice("bar", "Choice bar"),
        )

        assert render(template, {"x": "foo"}) == "Output whatever the value Choice foo"
        assert render(template, {"x": "bar"}) == "Output whatever the value Choice bar"
        assert render(template, {"x": "baz"}) == "Output whatever the value"

    def test_missing_variable_matches_nothing(self) -> None:
        assert render(self.TEMPLATE, {}) == ""


class TestMultiTokenLabels:
    """A label with several tokens matches any of them."""

    def test_any_token_matches(self) -> None:
        template = choose(
            Var("place"),
            choice("pile", "Pile 42"),
            choice("xocoa opera cantrevinou postal", "Xocoa et al"),
        )

        assert render(template, {"place": "pile"}) == "Pile 42"
        assert render(template, {"place": "xocoa"}) == "Xocoa et al"
        assert render(template, {"place": "opera"}) == "Xocoa et al"
        assert render(template, {"place": "laparra"}) == ""

    def test_labels_as_list(self) -> None:
        template = choose(Var("x"), choice(["a", "b"], "AB"), choice(("c",), "C"))

        assert render(template, {"x": "b"}) == "AB"
        assert render(template, {"x": "c"}) == "C"

    @pytest.mark.parametrize(
        ("zone", "expected"),
        [("a", "1 2 3"), ("b", "1"), ("c", "1 3"), ("d", "")],
    )
    def test_overlapping_labels_all_render_in_order(self, zone: str, expected: str) -> None:
        template = choose(
            Var("zone"),
            choice("a b c", "1"),
            " ",
            choice("a", "2"),
            " ",
            choice("a c", "3"),
        )

        assert render(template, {"zone": zone}) == expected


# ============================================================================
# BOOLEANS
# ============================================================================


class TestBooleanChoices:
    """Booleans map to "true"/"false"; type="boolean" forces the mapping."""

    def test_native_booleans(self) -> None:
        template = choose(
            Var("x"),
            choice("true", "Choice true"),
            choice("false", "Choice false"),
        )

        assert render(template, {"x": True}) == "Choice true"
        assert render(template, {"x": False}) == "Choice false"
        assert render(template, {"x": "baz"}) == ""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (True, "Choice true"),
            (False, "Choice false"),
            ("baz", "Choice false"),
            (1, "Choice false"),
            ("true", "Choice false"),
            (None, "Choice false"),
        ],
    )
    def test_type_override(self, value: Any, expected: str) -> None:
        template = choose(
            Var("x"),
            choice("true", "Choice true"),
            choice("false", "Choice false"),
            type="boolean",
        )

        assert render(template, {"x": value}) == expected


# ============================================================================
# NUMBERS
# ============================================================================


class TestNumberChoices:
    """Numbers resolve through the locale plural rule."""

    TEMPLATE = staticmethod(
        choose(
            Var("x"),
            choice("zero other", "Choice zero/other"),
            choice("one", "Choice one"),
        )
    )

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, "Choice zero/other"),
            (1, "Choice one"),
            (2, "Choice zero/other"),
            (5, "Choice zero/other"),
            ("zero", "Choice zero/other"),
            ("other", "Choice zero/other"),
            ("one", "Choice one"),
            ("two", ""),
        ],
    )
    def test_number_map(self, value: Any, expected: str) -> None:
        assert render(self.TEMPLATE, {"x": value}) == expected

    def test_count_interpolated_with_inflection(self) -> None:
        template = choose(
            Var("x"),
            Var("x"),
            " ",
            choice("zero other", "ducks"),
            choice("one", "duck"),
        )

        assert render(template, {"x": 0}) == "0 ducks"
        assert render(template, {"x": 1}) == "1 duck"
        assert render(template, {"x": 3}) == "3 ducks"

    def test_injected_registry_rule(self) -> None:
        registry = KeywordRegistry(locale="xx")
        registry.register("xx", "getPluralKeyword", lambda n: "many" if n > 4 else "few")
        template = choose(
            Var("x"),
            choice("few", "Few"),
            choice("many", "Many"),
            registry=registry,
        )

        assert render(template, {"x": 2}) == "Few"
        assert render(template, {"x": 7}) == "Many"


# ============================================================================
# ATTRIBUTE SHORTCUTS
# ============================================================================


class TestAttributeShortcuts:
    """Options named after the keyword replace the body entirely."""

    def test_shortcut_without_body(self) -> None:
        template = choose(Var("x"), foo="Option Foo", bar="Option Bar")

        assert render(template, {"x": "foo"}) == "Option Foo"
        assert render(template, {"x": "bar"}) == "Option Bar"
        assert render(template, {"x": "baz"}) == ""

    def test_body_is_fallback(self) -> None:
        template = choose(Var("x"), "Fallback option", foo="Option Foo", bar="Option Bar")

        assert render(template, {"x": "foo"}) == "Option Foo"
        assert render(template, {"x": "bar"}) == "Option Bar"
        assert render(template, {"x": "baz"}) == "Fallback option"

    def test_shortcut_skips_body_rendering(self) -> None:
        body = Mock(return_value="Fallback")

        result = resolve_selector("foo", {"foo": "Option Foo", "bar": "Option Bar"}, body)

        assert result == "Option Foo"
        body.assert_not_called()

    def test_fallback_body_receives_keyword(self) -> None:
        body = Mock(return_value=" Fallback ")

        result = resolve_selector("baz", {"foo": "Option Foo"}, body, {"user": "ann"})

        assert result == "Fallback"
        (ctx,), _ = body.call_args
        assert ctx.keyword == "baz"
        assert ctx["user"] == "ann"

    def test_numeric_keyword_shortcuts(self) -> None:
        template = choose(Var("n"), "some", zero="none", one="a single one")

        assert render(template, {"n": 0}) == "none"
        assert render(template, {"n": 1}) == "a single one"
        assert render(template, {"n": 9}) == "some"

    def test_reserved_option_is_not_a_shortcut(self) -> None:
        result = resolve_selector("trim", {"trim": True}, lambda ctx: "body")

        assert result == "body"


# ============================================================================
# OVERRIDE FUNCTIONS
# ============================================================================


def under_ten(x: Any, params: Mapping[str, Any] | None = None) -> str:
    """Keyword function accepting (value, options) or (options)."""
    if params is None and isinstance(x, Mapping):
        params = x
        x = params["x"]
    return "a" if x < 10 else "b"


class TestOverrideFunctions:
    """All three ways of supplying a keyword function are equivalent."""

    BRANCHES = (choice("a", "Choice a"), choice("b", "Choice b"))

    @pytest.mark.parametrize(
        "template",
        [
            choose(Var("fn"), *BRANCHES, x=Var("x")),
            choose(Var("x"), *BRANCHES, function=Var("fn")),
            choose(MISSING, *BRANCHES, x=Var("x"), function=Var("fn")),
        ],
        ids=["positional", "function-option", "function-option-no-value"],
    )
    @pytest.mark.parametrize(("x", "expected"), [(1, "Choice a"), (10, "Choice b")])
    def test_supplied_function(self, template: Any, x: int, expected: str) -> None:
        assert render(template, {"fn": under_ten, "x": x}) == expected

    def test_both_positional_and_option_is_rejected(self) -> None:
        template = choose(Var("fn"), *self.BRANCHES, function=Var("fn"), x=Var("x"))

        with pytest.raises(ChoiceConfigurationError):
            render(template, {"fn": under_ten, "x": 1})


# ============================================================================
# TRIMMING AND NESTING
# ============================================================================


class TestTrimAndNesting:
    """Single trim of the combined output; nested selectors are isolated."""

    def test_output_is_trimmed_once(self) -> None:
        result = resolve_selector("a", None, lambda ctx: "  \n a  b \n ")

        assert result == "a  b"

    def test_trim_false_keeps_whitespace(self) -> None:
        result = resolve_selector("a", {"trim": False}, lambda ctx: "  a  ")

        assert result == "  a  "

    def test_trim_false_keeps_shortcut_whitespace(self) -> None:
        result = resolve_selector("a", {"trim": False, "a": " A "})

        assert result == " A "

    def test_nested_selector_does_not_leak_keyword(self) -> None:
        template = choose(
            Var("outer"),
            choice("x", "[outer x]"),
            choose(Var("inner"), choice("y", "[inner y]"), choice("x", "[inner x]")),
            choice("x", "[outer x again]"),
        )

        assert render(template, {"outer": "x", "inner": "y"}) == "[outer x][inner y][outer x again]"

    def test_selector_inside_choice_body(self) -> None:
        template = choose(
            Var("kind"),
            choice(
                "fruit",
                choose(Var("n"), Var("n"), " ", choice("one", "apple"), choice("zero other", "apples")),
            ),
            choice("veg", "vegetables"),
        )

        assert render(template, {"kind": "fruit", "n": 1}) == "1 apple"
        assert render(template, {"kind": "fruit", "n": 4}) == "4 apples"
        assert render(template, {"kind": "veg", "n": 4}) == "vegetables"

    def test_choice_outside_choose_renders_nothing(self) -> None:
        assert render(choice("a", "A"), {"x": "a"}) == ""
