"""Linting runs: sessions, file collection and whole-directory linting."""

import time
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from .config import SeassConfig, load_project_config
from .utils.errors import SourceReadError
from .utils.logging_config import (
    get_logger,
    log_file_linted,
    log_lint_result,
    log_path_ignored,
)
from .validators.diagnostics import DiagnosticSet, DuplicateTracker
from .validators.scanner import scan_preludes
from .validators.selector_validator import SelectorValidator


CSS_SUFFIX = ".css"

logger = get_logger("linter")


class LintSession:
    """State of a single linting run.

    Duplicate detection depends on the order sources are linted in, so a
    session must not be shared between concurrent scans.
    """

    def __init__(self, validator: Optional[SelectorValidator] = None):
        self.validator = validator or SelectorValidator()
        self.duplicates = DuplicateTracker()
        self.diagnostics = DiagnosticSet()
        self.files_linted = 0

    def lint_source(self, path: str, chars: Iterable[str]) -> int:
        """
        Lint one stylesheet.

        Args:
            path: Path reported in diagnostics
            chars: Character stream of the stylesheet

        Returns:
            Number of rule preludes found

        Raises:
            SourceReadError: If reading the stream fails
        """
        preludes = 0
        known = len(self.diagnostics)
        try:
            for prelude in scan_preludes(path, chars):
                preludes += 1
                self.diagnostics.update(self.validator.validate_prelude(prelude, self.duplicates))
        except OSError as e:
            raise SourceReadError(path, f"failed to read css file: {e}")

        self.files_linted += 1
        log_file_linted(path, preludes, len(self.diagnostics) - known)
        return preludes

    def lint_file(self, root: Path, relative_path: str) -> int:
        """Read ``root / relative_path`` and lint it under its relative path."""
        try:
            content = (root / relative_path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(relative_path, f"failed to read css file: {e}")
        return self.lint_source(relative_path, content)

    def results(self) -> List[str]:
        """Return the collected diagnostics in ascending order."""
        return self.diagnostics.sorted()


def lint_sources(sources: Iterable[Tuple[str, Iterable[str]]]) -> List[str]:
    """
    Lint already collected sources in the order given.

    Args:
        sources: ``(relative_path, characters)`` pairs

    Returns:
        Sorted, de-duplicated diagnostic strings

    Raises:
        SourceReadError: If any stream fails; nothing is returned for the run
    """
    session = LintSession()
    for path, chars in sources:
        session.lint_source(path, chars)
    return session.results()


def collect_css_files(root: Path, ignore: Sequence[str] = ()) -> List[str]:
    """
    Walk ``root`` depth-first in name order and collect stylesheet paths.

    An entry whose relative path equals an ignore entry is skipped; for a
    directory this prunes its whole subtree. Symlinked directories are not
    followed.

    Args:
        root: Directory to walk
        ignore: Relative paths to leave out

    Returns:
        Relative ``/``-separated paths of the ``.css`` files found

    Raises:
        SourceReadError: If a directory cannot be listed
    """
    ignored = set(ignore)
    files: List[str] = []

    def walk(directory: Path, prefix: str) -> None:
        try:
            entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
        except OSError as e:
            raise SourceReadError(prefix or str(directory), f"failed to walk directory: {e}")

        for entry in entries:
            relative = prefix + entry.name
            if relative in ignored:
                log_path_ignored(relative)
                continue
            if entry.is_dir() and not entry.is_symlink():
                walk(entry, relative + "/")
            elif relative.endswith(CSS_SUFFIX):
                files.append(relative)

    walk(root, "")
    return files


def lint_directory(
    directory: Union[str, Path], config: Optional[SeassConfig] = None
) -> List[str]:
    """
    Lint every stylesheet below a project root.

    Args:
        directory: Project root; must contain a SeaSS configuration file
            unless ``config`` is given
        config: Configuration to use instead of the project's file

    Returns:
        Sorted diagnostic strings with paths relative to ``directory``

    Raises:
        ConfigurationError: If the project configuration is missing or invalid
        SourceReadError: If a directory or stylesheet cannot be read
    """
    start_time = time.time()
    root = Path(directory)
    if config is None:
        config = load_project_config(root)

    files = collect_css_files(root, config.ignore)
    logger.info(f"Linting {len(files)} stylesheets in {root}")

    session = LintSession()
    for relative_path in files:
        session.lint_file(root, relative_path)

    results = session.results()
    log_lint_result(session.files_linted, len(results), time.time() - start_time)
    return results
