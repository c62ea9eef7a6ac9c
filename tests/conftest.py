"""
Pytest configuration for Feedback Pulse tests.
Points the service at a throwaway SQLite database and a dummy API key.
"""

import os
import tempfile

# Must be set before any project imports - config is read at import time
_test_data_dir = tempfile.mkdtemp(prefix="feedback_pulse_test_")
os.environ["DATABASE_URL"] = f"sqlite:///{_test_data_dir}/test.db"
os.environ["ANTHROPIC_API_KEY"] = "sk-ant-test-key"

import json

import pytest
from unittest.mock import MagicMock

from pulse.database import Base, engine, init_db
from feedback import analysis
from feedback.app import app


def make_response(text):
    """Create a mock Anthropic Messages response."""
    block = MagicMock()
    block.text = text
    resp = MagicMock()
    resp.content = [block]
    return resp


@pytest.fixture(autouse=True)
def fresh_db():
    """Empty feedback and digests tables for every test."""
    Base.metadata.drop_all(bind=engine)
    init_db()
    yield


@pytest.fixture
def claude(monkeypatch):
    """Mock Anthropic client; set claude.reply(...) or claude.fail(...)."""
    mock_client = MagicMock()
    mock_client.messages.create.return_value = make_response("")

    def reply(payload):
        text = payload if isinstance(payload, str) else json.dumps(payload)
        mock_client.messages.create.return_value = make_response(text)
        mock_client.messages.create.side_effect = None

    def fail(exc):
        mock_client.messages.create.side_effect = exc

    mock_client.reply = reply
    mock_client.fail = fail
    monkeypatch.setattr(analysis, "get_anthropic_client", lambda: mock_client)
    return mock_client


@pytest.fixture
def client():
    app.config["TESTING"] = True
    return app.test_client()
