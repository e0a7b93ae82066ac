"""Root test configuration: isolate tests from the developer's environment"""

import os
import sys

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Run each test in a temp cwd without MDTREE_* env vars; restore loguru's default sink afterwards."""
    for name in list(os.environ):
        if name.startswith("MDTREE_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    yield
    logger.remove()
    logger.add(sys.stderr)
