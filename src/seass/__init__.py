"""SeaSS - a linter that keeps every CSS rule down to a single class selector."""

__version__ = "0.1.0"

from .linter import LintSession, collect_css_files, lint_directory, lint_sources

__all__ = [
    "LintSession",
    "collect_css_files",
    "lint_directory",
    "lint_sources",
    "__version__",
]
