"""Shared test fixtures."""

from unittest.mock import AsyncMock

import pytest

from travelchat.backend import ExecutionResult, IntentResolution
from travelchat.conversation import session as session_mod


@pytest.fixture(autouse=True)
def _reset_sessions():
    """Start every test with an empty session registry."""
    session_mod._reset()
    yield
    session_mod._reset()


@pytest.fixture
def nlu():
    """An intent resolution client that resolves to search_flights."""
    client = AsyncMock()
    client.resolve.return_value = IntentResolution(
        intent="search_flights",
        confidence=0.92,
        entities={"origin": "NYC", "destination": "Paris"},
        matched_keywords=["flights"],
    )
    return client


@pytest.fixture
def executor():
    """An execution client that returns an empty flight list."""
    client = AsyncMock()
    client.execute.return_value = ExecutionResult(result={"flights": []})
    return client
