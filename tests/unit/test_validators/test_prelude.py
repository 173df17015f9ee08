"""Tests for prelude decomposition and combinator splitting."""

import pytest

from seass.validators.combinators import SEPARATOR_RULES, split_combinators
from seass.validators.diagnostics import (
    ADJACENT_SIBLING_SELECTOR,
    ATTRIBUTE_SELECTOR,
    CHILD_SELECTOR,
    DESCENDANT_SELECTOR,
    GENERAL_SIBLING_SELECTOR,
    SELECTOR_LIST,
)
from seass.validators.prelude import decompose_prelude


class TestDecomposePrelude:
    """Test cases for stripping brackets and parentheses."""

    def test_plain_selector_is_unchanged(self):
        result = decompose_prelude(".card-title")

        assert result.text == ".card-title"
        assert result.messages == []

    def test_attribute_selector_is_removed_and_reported(self):
        result = decompose_prelude("a[href]")

        assert result.text == "a"
        assert result.messages == [ATTRIBUTE_SELECTOR]

    def test_every_bracket_is_reported(self):
        result = decompose_prelude(".a[x][y]")

        assert result.text == ".a"
        assert result.messages == [ATTRIBUTE_SELECTOR, ATTRIBUTE_SELECTOR]

    def test_pseudo_class_arguments_are_removed_silently(self):
        result = decompose_prelude(".row:nth-child(2n + 1)")

        assert result.text == ".row:nth-child"
        assert result.messages == []

    def test_quoted_bracket_inside_attribute_value(self):
        result = decompose_prelude('.a[data-x="]"]')

        assert result.text == ".a"
        assert result.messages == [ATTRIBUTE_SELECTOR]

    def test_escaped_quote_inside_attribute_value(self):
        result = decompose_prelude(".a[title='it\\'s]']")

        assert result.text == ".a"

    def test_nested_parentheses_close_early(self):
        # Flat tracking: the first ")" ends the argument
        result = decompose_prelude(".a:not(:is(.b))")

        assert result.text == ".a:not)"


class TestSplitCombinators:
    """Test cases for the ordered separator fold."""

    def test_rule_order(self):
        assert [rule.separator for rule in SEPARATOR_RULES] == [",", ">", "+", "~", " "]

    def test_single_class(self):
        assert split_combinators(".a") == ([".a"], [])

    def test_selector_list(self):
        assert split_combinators(".a, .b") == ([".a", ".b"], [SELECTOR_LIST])

    def test_child(self):
        assert split_combinators(".a > .b") == ([".a", ".b"], [CHILD_SELECTOR])

    def test_siblings(self):
        fragments, messages = split_combinators(".a+.b ~ .c")

        assert fragments == [".a", ".b", ".c"]
        assert messages == [ADJACENT_SIBLING_SELECTOR, GENERAL_SIBLING_SELECTOR]

    def test_descendant(self):
        assert split_combinators(".a .b") == ([".a", ".b"], [DESCENDANT_SELECTOR])

    def test_mixed_combinators_report_each_kind_once(self):
        fragments, messages = split_combinators(".a > .b > .c .d")

        assert fragments == [".a", ".b", ".c", ".d"]
        assert messages == [CHILD_SELECTOR, DESCENDANT_SELECTOR]

    def test_all_kinds(self):
        _, messages = split_combinators(".a, .b > .c + .d ~ .e .f")

        assert messages == [
            SELECTOR_LIST,
            CHILD_SELECTOR,
            ADJACENT_SIBLING_SELECTOR,
            GENERAL_SIBLING_SELECTOR,
            DESCENDANT_SELECTOR,
        ]

    def test_empty_fragments_are_dropped(self):
        assert split_combinators(".a  .b") == ([".a", ".b"], [DESCENDANT_SELECTOR])
        assert split_combinators(".a,") == ([".a"], [SELECTOR_LIST])
        assert split_combinators("") == ([], [])

    @pytest.mark.parametrize("text", [".a\t.b", ".a\n.b"])
    def test_only_a_literal_space_is_a_descendant_combinator(self, text):
        assert split_combinators(text) == ([text], [])

    def test_trailing_space_left_by_decomposition(self):
        assert split_combinators("a ") == (["a"], [])
