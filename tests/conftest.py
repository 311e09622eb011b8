"""Shared test fixtures for docsync-engine."""

import shutil
from pathlib import Path

import pytest

from docsync_engine.config import load_config

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def project(tmp_path):
    """A writable copy of the sample crate."""
    root = tmp_path / "project"
    shutil.copytree(FIXTURES / "project", root)
    return root


@pytest.fixture
def config(project):
    return load_config(project / "docsync.yaml")
