"""
Pytest configuration for endpoint tests.
"""

import os
import sys
from pathlib import Path

import pytest


# Add app directory to path
APP_DIR = Path(__file__).parent.parent / "app"
sys.path.insert(0, str(APP_DIR))


@pytest.fixture
def clean_env(monkeypatch):
    """Remove KUBE_ENDPOINT_ overrides inherited from the environment."""
    for key in list(os.environ):
        if key.startswith("KUBE_ENDPOINT_"):
            monkeypatch.delenv(key)
    return monkeypatch
