import pytest
from unittest.mock import MagicMock

from google.genai import types

from gemini_relay.ai_service.client import GeminiClient
from gemini_relay.ai_service.config import Settings
from gemini_relay.gateway.server import create_app


@pytest.fixture
def make_result():
    """
    Factory for GenerateContentResponse objects with one candidate.
    Pass None to build a text-less part.
    """
    def _make(*texts):
        parts = [types.Part(text=t) for t in texts]
        return types.GenerateContentResponse(
            candidates=[types.Candidate(content=types.Content(role="model", parts=parts))]
        )
    return _make


@pytest.fixture
def gemini():
    """
    Mocked inference client injected into the app.
    """
    return MagicMock(spec=GeminiClient)


@pytest.fixture
def app(gemini):
    app = create_app(client=gemini, settings=Settings())
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
