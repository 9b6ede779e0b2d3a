"""
Fixtures partagées
Run: cd backend && pytest tests/ -v
"""

import sys
from pathlib import Path

import pytest

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture(scope="module")
def client():
    """Client HTTP in-process sur l'app FastAPI"""
    from fastapi.testclient import TestClient
    from server import app

    with TestClient(app) as c:
        yield c
