"""Tests for ideaforge.llm.openai module."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
from openai import APIConnectionError

from ideaforge.llm import TextStream
from ideaforge.llm.openai import OpenAIClient
from ideaforge.models import ChatMessage

from .conftest import chunk_source


def create_mock_completion(content):
    """Create a mock chat completion response."""
    mock = MagicMock()
    mock.choices = [MagicMock(message=MagicMock(content=content))]
    return mock


class TestOpenAIClient:
    """Tests for OpenAIClient class."""

    @pytest.fixture
    def mock_openai(self):
        """Create mock AsyncOpenAI client."""
        mock = MagicMock()
        mock.chat.completions.create = AsyncMock()
        return mock

    @pytest.fixture
    def client(self, settings, mock_openai):
        """Create OpenAIClient with mocked dependencies."""
        with patch("ideaforge.llm.openai.AsyncOpenAI", return_value=mock_openai):
            return OpenAIClient(settings)

    @pytest.fixture
    def messages(self):
        return [
            ChatMessage(role="system", content="Be brief."),
            ChatMessage(role="user", content="Question?"),
        ]

    def test_init(self, settings):
        """Test client initialization."""
        with patch("ideaforge.llm.openai.AsyncOpenAI") as mock_class:
            client = OpenAIClient(settings)

        mock_class.assert_called_once_with(
            api_key="test-api-key",
            timeout=settings.openai_timeout,
            max_retries=settings.openai_max_retries,
        )
        assert client.client is mock_class.return_value

    async def test_complete(self, client, mock_openai, messages):
        mock_openai.chat.completions.create.return_value = create_mock_completion("Medical")

        result = await client.complete("fast-model", messages)

        assert result == "Medical"
        mock_openai.chat.completions.create.assert_awaited_once_with(
            model="fast-model",
            messages=[
                {"role": "system", "content": "Be brief."},
                {"role": "user", "content": "Question?"},
            ],
        )

    async def test_complete_empty_content(self, client, mock_openai, messages):
        mock_openai.chat.completions.create.return_value = create_mock_completion(None)

        assert await client.complete("fast-model", messages) == ""

    async def test_complete_propagates_errors(self, client, mock_openai, messages):
        mock_openai.chat.completions.create.side_effect = APIConnectionError(
            request=httpx.Request("POST", "https://api.test")
        )

        with pytest.raises(APIConnectionError):
            await client.complete("fast-model", messages)

    async def test_stream(self, client, mock_openai, messages):
        mock_openai.chat.completions.create.return_value = chunk_source(["Hi", " there"])
        observer = MagicMock()

        stream = await client.stream("primary-model", messages, on_error=observer)

        assert isinstance(stream, TextStream)
        kwargs = mock_openai.chat.completions.create.await_args.kwargs
        assert kwargs["model"] == "primary-model"
        assert kwargs["stream"] is True
        assert len(kwargs["messages"]) == 2
        assert await stream.text() == "Hi there"
        observer.assert_not_called()

    async def test_stream_initiation_error_propagates(self, client, mock_openai, messages):
        mock_openai.chat.completions.create.side_effect = APIConnectionError(
            request=httpx.Request("POST", "https://api.test")
        )

        with pytest.raises(APIConnectionError):
            await client.stream("primary-model", messages)
