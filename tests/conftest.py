"""Test configuration for the color suggest server."""

import sys
from pathlib import Path

import pytest

# Project root on path so "colorSuggest", "routers" and "main" import when run uninstalled
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from main import app

    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
