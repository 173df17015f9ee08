"""Stylesheet scanning and selector validation components."""

from .position import SourcePosition, SourceSpan
from .scanner import Prelude, ScannerState, ScanState, scan_preludes, step
from .prelude import DecomposedPrelude, decompose_prelude
from .combinators import SEPARATOR_RULES, SeparatorRule, split_combinators
from .selector_validator import (
    AtomicSelector,
    SelectorKind,
    SelectorValidationResult,
    SelectorValidator,
    classify_selector,
)
from .diagnostics import Diagnostic, DiagnosticSet, DuplicateTracker

__all__ = [
    "SourcePosition",
    "SourceSpan",
    "Prelude",
    "ScannerState",
    "ScanState",
    "scan_preludes",
    "step",
    "DecomposedPrelude",
    "decompose_prelude",
    "SEPARATOR_RULES",
    "SeparatorRule",
    "split_combinators",
    "AtomicSelector",
    "SelectorKind",
    "SelectorValidationResult",
    "SelectorValidator",
    "classify_selector",
    "Diagnostic",
    "DiagnosticSet",
    "DuplicateTracker",
]
