"""
Shared fixtures: a fake requests.Session so no test touches the network.
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from silver_diamond.config import Config
from silver_diamond.constants import BASE_URL


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Ignore whatever SILVER_DIAMOND_* variables the machine has set"""
    monkeypatch.setattr(Config, "API_KEY", None)
    monkeypatch.setattr(Config, "BASE_URL", BASE_URL)
    monkeypatch.setattr(Config, "REQUEST_TIMEOUT", None)
    monkeypatch.setattr(Config, "VERIFY_SSL", None)


def make_response(body=None, status_code=200, json_error=None):
    """Build a fake requests.Response returning `body` from .json()"""
    response = MagicMock()
    response.status_code = status_code
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = body
    return response


@pytest.fixture
def session():
    """Fake session answering every POST with an empty JSON object"""
    fake = MagicMock()
    fake.post.return_value = make_response({})
    return fake


@pytest.fixture
def respond(session):
    """Set the body the fake session answers with"""
    def _respond(body=None, status_code=200, json_error=None):
        session.post.return_value = make_response(body, status_code, json_error)
        return session
    return _respond


@pytest.fixture
def sd(session):
    """SilverDiamond facade wired to the fake session"""
    from silver_diamond import SilverDiamond
    return SilverDiamond(api_key="test-key", session=session)


