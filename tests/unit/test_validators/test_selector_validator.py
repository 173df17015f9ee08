"""Tests for selector classification and the per-prelude pipeline."""

import pytest

from seass.validators.diagnostics import (
    ATTRIBUTE_SELECTOR,
    CHILD_SELECTOR,
    ELEMENT_SELECTOR,
    ID_SELECTOR,
    Diagnostic,
    DiagnosticSet,
    DuplicateTracker,
)
from seass.validators.position import SourcePosition, SourceSpan
from seass.validators.scanner import Prelude
from seass.validators.selector_validator import (
    AtomicSelector,
    SelectorKind,
    SelectorValidator,
    classify_selector,
)


def span(file: str = "a.css", line: int = 1) -> SourceSpan:
    return SourceSpan(file, SourcePosition(line, 1), SourcePosition(line, 4))


class TestClassifySelector:
    """Test cases for atomic selector kinds."""

    @pytest.mark.parametrize(
        "selector, kind",
        [
            ("#main", SelectorKind.ID),
            (".a#b", SelectorKind.ID),
            ("div#b", SelectorKind.ID),
            (".button", SelectorKind.CLASS),
            (".a.b", SelectorKind.CLASS),
            (".a:hover", SelectorKind.CLASS),
            (":root", SelectorKind.PSEUDO_CLASS),
            ("::before", SelectorKind.PSEUDO_CLASS),
            ("div", SelectorKind.ELEMENT),
            ("*", SelectorKind.ELEMENT),
            ("a:hover", SelectorKind.ELEMENT),
        ],
    )
    def test_kinds(self, selector, kind):
        assert classify_selector(selector) is kind


class TestCheckSelector:
    """Test cases for SelectorValidator.check_selector."""

    def setup_method(self):
        """Set up test fixtures."""
        self.validator = SelectorValidator()

    def test_single_class_is_valid(self):
        result = self.validator.check_selector(".foo")

        assert result.valid is True
        assert result.selectors == [AtomicSelector(".foo", SelectorKind.CLASS)]

    def test_id(self):
        result = self.validator.check_selector("#foo")

        assert result.messages == [ID_SELECTOR]

    def test_element(self):
        result = self.validator.check_selector("div")

        assert result.messages == [ELEMENT_SELECTOR]

    def test_attribute_selector_also_reports_element(self):
        result = self.validator.check_selector("a[href]")

        assert result.messages == [ATTRIBUTE_SELECTOR, ELEMENT_SELECTOR]
        assert result.selectors == [AtomicSelector("a", SelectorKind.ELEMENT)]

    def test_attribute_only_selector(self):
        result = self.validator.check_selector("[disabled]")

        assert result.messages == [ATTRIBUTE_SELECTOR]
        assert result.selectors == []

    def test_pseudo_class_is_allowed(self):
        result = self.validator.check_selector(":root")

        assert result.valid is True
        assert result.selectors[0].kind is SelectorKind.PSEUDO_CLASS

    def test_messages_are_in_pipeline_order(self):
        result = self.validator.check_selector("div.x#y > p")

        assert result.messages == [CHILD_SELECTOR, ID_SELECTOR, ELEMENT_SELECTOR]


class TestDuplicateTracker:
    """Test cases for duplicate chaining."""

    def test_first_occurrence_is_not_reported(self):
        tracker = DuplicateTracker()

        assert tracker.register(".a", span()) == []
        assert ".a" in tracker

    def test_second_occurrence_reports_both(self):
        tracker = DuplicateTracker()
        tracker.register(".a", span(line=1))

        result = tracker.register(".a", span(line=2))

        assert [str(d) for d in result] == [
            "a.css:1:1-1:4 - duplicate selector '.a'",
            "a.css:2:1-2:4 - duplicate selector '.a'",
        ]

    def test_third_occurrence_pairs_with_second(self):
        tracker = DuplicateTracker()
        tracker.register(".a", span(line=1))
        tracker.register(".a", span(line=2))

        result = tracker.register(".a", span(line=3))

        assert [d.span.start.line for d in result] == [2, 3]

    def test_different_names_are_independent(self):
        tracker = DuplicateTracker()

        assert tracker.register(".a", span()) == []
        assert tracker.register(".b", span()) == []
        assert len(tracker) == 2


class TestDiagnosticSet:
    """Test cases for the aggregator."""

    def test_deduplicates_by_string(self):
        diagnostics = DiagnosticSet()
        diagnostics.add(Diagnostic(span(), ELEMENT_SELECTOR))
        diagnostics.add(Diagnostic(span(), ELEMENT_SELECTOR))

        assert len(diagnostics) == 1
        assert "a.css:1:1-1:4 - element selector not allowed" in diagnostics

    def test_sorted_output(self):
        diagnostics = DiagnosticSet()
        diagnostics.update(
            [
                Diagnostic(span("b.css"), ID_SELECTOR),
                Diagnostic(span("a.css", line=2), ELEMENT_SELECTOR),
                Diagnostic(span("a.css"), ELEMENT_SELECTOR),
            ]
        )

        result = diagnostics.sorted()

        assert result == sorted(result)
        assert result[0].startswith("a.css:1:")
        assert list(diagnostics) == result


class TestValidatePrelude:
    """Test cases for SelectorValidator.validate_prelude."""

    def setup_method(self):
        """Set up test fixtures."""
        self.validator = SelectorValidator()
        self.tracker = DuplicateTracker()

    def test_diagnostics_carry_prelude_span(self):
        prelude = Prelude(".foo > .bar", span())

        result = self.validator.validate_prelude(prelude, self.tracker)

        assert [str(d) for d in result] == ["a.css:1:1-1:4 - child selector '>' not allowed"]
        assert ".foo" in self.tracker
        assert ".bar" in self.tracker

    def test_repeated_class_within_one_prelude(self):
        prelude = Prelude(".a .a", span())

        result = {str(d) for d in self.validator.validate_prelude(prelude, self.tracker)}

        assert result == {
            "a.css:1:1-1:4 - decendant selector ' ' not allowed",
            "a.css:1:1-1:4 - duplicate selector '.a'",
        }

    def test_pseudo_class_and_id_are_not_tracked(self):
        self.validator.validate_prelude(Prelude(":root", span()), self.tracker)
        self.validator.validate_prelude(Prelude("#x", span()), self.tracker)

        assert len(self.tracker) == 0
