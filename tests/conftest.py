"""Shared pytest fixtures for the express-mvc test suite.

Provides reusable fixtures for:
- Capturing Rich console output
- Scaffolder configuration pointed at a temporary directory
- A mocked package-manager install step
"""

from __future__ import annotations

import io
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from express_mvc.config import ScaffoldConfig
from express_mvc.utils import console


# ---------------------------------------------------------------------------
# Console
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def console_output(monkeypatch: pytest.MonkeyPatch) -> io.StringIO:
    """Redirect the shared Rich console into a buffer for every test."""
    buffer = io.StringIO()
    monkeypatch.setattr(console, "file", buffer)
    monkeypatch.setattr(console, "width", 200)
    yield buffer


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Parent directory that generated projects are written into."""
    out = tmp_path / "workspace"
    out.mkdir()
    yield out


@pytest.fixture
def offline_config(output_dir: Path) -> ScaffoldConfig:
    """Config that writes into ``output_dir`` and never runs the installer."""
    return ScaffoldConfig(output_dir=output_dir, skip_install=True)


@pytest.fixture
def install_config(output_dir: Path) -> ScaffoldConfig:
    """Config that writes into ``output_dir`` and runs the (mocked) installer."""
    return ScaffoldConfig(output_dir=output_dir, skip_install=False)


# ---------------------------------------------------------------------------
# Installer
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_installer():
    """Patch ``shutil.which`` and ``run_command`` as seen by the generator.

    Yields the ``run_command`` mock; set ``return_value`` to change the exit
    code reported by the fake package manager.
    """
    with (
        patch(
            "express_mvc.scaffolder.generator.shutil.which",
            side_effect=lambda name: f"/usr/bin/{name}",
        ),
        patch(
            "express_mvc.scaffolder.generator.run_command",
            new_callable=AsyncMock,
            return_value=0,
        ) as mock_run,
    ):
        yield mock_run
