from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from engine.ai_client import GroqTravelClient


def chat_response(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


@pytest.fixture
def groq_sdk():
    """Stand-in for groq.Groq; set .chat.completions.create.return_value / side_effect."""
    return MagicMock()


@pytest.fixture
def ai_client(groq_sdk):
    return GroqTravelClient(api_key="test-key", client=groq_sdk)
