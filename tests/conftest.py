"""
Shared test fixtures: FastAPI test client and answer-set builders.
"""

import os
import pytest
from fastapi.testclient import TestClient

# Settings are read at import time
os.environ.setdefault("LOG_LEVEL", "WARNING")

from backend.answers import AnswerSet
from backend.main import app


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def coarse_fields():
    """Room, size and work only: priced from the replace/resin/standard cell."""
    return {
        "room_type": "detached",
        "size": "six",
        "work": "replace",
    }


@pytest.fixture
def complete_fields():
    """All six answers + premium grade (kids room, health priority, domestic igusa)."""
    return {
        "room_type": "detached",
        "size": "six",
        "work": "replace",
        "usage": "kids",
        "priority": "health",
        "material": "igusa_jp",
        "grade": "premium",
    }


@pytest.fixture
def complete_answers(complete_fields):
    return AnswerSet.from_fields(complete_fields)
