import os

import pytest

# Settings are read at import time, so this must run before the app is imported.
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ.setdefault("ALLOW_DEFAULT_DENSITY", "true")

from fastapi.testclient import TestClient

from recetario.main import app


@pytest.fixture
def client():
    """Test client for the API."""
    with TestClient(app) as c:
        yield c
