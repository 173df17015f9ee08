"""Pytest configuration and fixtures for SeaSS tests."""

import pytest
import tempfile
import os
from pathlib import Path
from typing import Callable, Dict, Generator, Optional

from seass.config import SeassConfig, LoggingConfig
from seass.linter import LintSession
from seass.validators.selector_validator import SelectorValidator


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def make_project(temp_dir: Path) -> Callable[..., Path]:
    """Build a project tree from a mapping of relative paths to contents."""

    def _make(files: Dict[str, str], config: Optional[str] = "ignore: []\n") -> Path:
        if config is not None:
            (temp_dir / "seass.yaml").write_text(config)
        for relative_path, content in files.items():
            path = temp_dir / relative_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
        return temp_dir

    return _make


@pytest.fixture
def sample_css() -> str:
    """Stylesheet that follows the convention."""
    return """
@charset "utf-8";
@import url("theme.css");

/* .legacy > div { } */
.button {
    color: red;
    content: "} div {";
}

.button:hover {
    color: blue;
}

@media screen and (min-width: 800px) {
    .card {
        padding: 1em;
    }
}

@keyframes spin {
    from { transform: rotate(0deg); }
    to { transform: rotate(360deg); }
}

@font-face {
    font-family: "Inter";
}
"""


@pytest.fixture
def test_config() -> SeassConfig:
    """Test configuration."""
    return SeassConfig(
        ignore=["vendor"],
        logging=LoggingConfig(level="CRITICAL"),
    )


@pytest.fixture
def selector_validator() -> SelectorValidator:
    """Selector validator instance for testing."""
    return SelectorValidator()


@pytest.fixture
def session() -> LintSession:
    """Fresh linting session."""
    return LintSession()


# Environment setup
@pytest.fixture(autouse=True)
def setup_test_environment():
    """Set up test environment variables."""
    # Disable logging during tests
    os.environ["LOG_LEVEL"] = "CRITICAL"

    yield

    os.environ.pop("LOG_LEVEL", None)
    os.environ.pop("SEASS_IGNORE", None)
