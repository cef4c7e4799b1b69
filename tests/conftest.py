"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports.
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from main import app  # noqa: E402
from api.dependencies import get_db  # noqa: E402


@pytest.fixture
def fake_db():
    """
    A MagicMock standing in for the pymongo Database handed to every route.

    ``fake_db[name]`` returns the same mock collection for every name, so
    tests configure ``fake_db[...]`` return values directly.
    """
    db = MagicMock(name="Database")
    app.dependency_overrides[get_db] = lambda: db
    yield db
    app.dependency_overrides.pop(get_db, None)
