"""Shared pytest fixtures for integration and unit tests."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path
from typing import Callable

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
ENTRYPOINT = PROJECT_ROOT / "main.py"


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Expose the repository root path to tests."""

    return PROJECT_ROOT


@pytest.fixture(name="run_entrypoint")
def _run_entrypoint(
    tmp_path: Path,
) -> Callable[..., subprocess.CompletedProcess[str]]:
    """Run main.py in a subprocess with logs redirected to a temp file."""

    log_file = tmp_path / "mock-server.log"

    def _run(*args: str) -> subprocess.CompletedProcess[str]:
        env = {
            **os.environ,
            "MOCK_SERVER_LOG_DESTINATION": str(log_file),
            "PYTHONPATH": str(PROJECT_ROOT),
        }
        return subprocess.run(
            [sys.executable, str(ENTRYPOINT), *args],
            cwd=PROJECT_ROOT,
            env=env,
            capture_output=True,
            text=True,
            timeout=30,
            check=False,
        )

    _run.log_file = log_file  # type: ignore[attr-defined]
    return _run
