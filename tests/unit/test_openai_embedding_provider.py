"""Unit tests for OpenAIEmbeddingProvider."""

import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import numpy as np
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from recipe_search.embeddings.models import EMBEDDING_DIM, EMBEDDING_MODEL
from recipe_search.embeddings.openai_client import OpenAIEmbeddingProvider
from recipe_search.errors import EmbeddingDimensionError


def _response(values: list[float]) -> MagicMock:
    item = MagicMock()
    item.embedding = values
    response = MagicMock()
    response.data = [item]
    return response


class TestOpenAIEmbeddingProviderInitialization:
    """Test client construction."""

    def test_client_created_with_api_key(self) -> None:
        """Test the OpenAI client receives the provided key."""
        with patch("recipe_search.embeddings.openai_client.OpenAI") as mock_openai:
            provider = OpenAIEmbeddingProvider(api_key="sk-test")

            mock_openai.assert_called_once_with(api_key="sk-test")
            assert provider.model == EMBEDDING_MODEL
            assert provider.dimension == EMBEDDING_DIM


class TestOpenAIEmbeddingProviderEmbed:
    """Test embed() request and response handling."""

    def setup_method(self) -> None:
        """Set up provider with mocked OpenAI client."""
        with patch("recipe_search.embeddings.openai_client.OpenAI") as mock_openai:
            self.mock_client = MagicMock()
            mock_openai.return_value = self.mock_client
            self.provider = OpenAIEmbeddingProvider(api_key="sk-test")

    @pytest.mark.asyncio
    async def test_embed_returns_first_embedding_as_float32(self) -> None:
        """Test embed returns the first vector of the response."""
        values = [0.001 * i for i in range(EMBEDDING_DIM)]
        self.mock_client.embeddings.create.return_value = _response(values)

        embedding = await self.provider.embed("vanilla ice cream")

        self.mock_client.embeddings.create.assert_called_once_with(
            model=EMBEDDING_MODEL, input="vanilla ice cream"
        )
        assert embedding.shape == (EMBEDDING_DIM,)
        assert embedding.dtype == np.float32
        assert embedding[10] == pytest.approx(0.01)

    @pytest.mark.asyncio
    async def test_embed_uses_configured_model(self) -> None:
        """Test a custom model name is sent to the API."""
        with patch("recipe_search.embeddings.openai_client.OpenAI") as mock_openai:
            mock_client = MagicMock()
            mock_openai.return_value = mock_client
            provider = OpenAIEmbeddingProvider(api_key="sk-test", model="other-model")
        mock_client.embeddings.create.return_value = _response([0.0] * EMBEDDING_DIM)

        await provider.embed("soup")

        mock_client.embeddings.create.assert_called_once_with(
            model="other-model", input="soup"
        )

    @pytest.mark.asyncio
    async def test_embed_empty_text_raises_value_error(self) -> None:
        """Test empty text is rejected without calling the API."""
        with pytest.raises(ValueError, match="Text cannot be empty"):
            await self.provider.embed("   ")

        self.mock_client.embeddings.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_embed_wrong_dimension_raises(self) -> None:
        """Test a vector of unexpected length is rejected."""
        self.mock_client.embeddings.create.return_value = _response([0.5] * 768)

        with pytest.raises(EmbeddingDimensionError, match="has dimension 768, expected 1536"):
            await self.provider.embed("soup")

    @pytest.mark.asyncio
    async def test_remote_error_propagates_unchanged(self) -> None:
        """Test SDK errors reach the caller as the same exception object."""
        error = RuntimeError("429 rate limit exceeded")
        self.mock_client.embeddings.create.side_effect = error

        with pytest.raises(RuntimeError) as exc_info:
            await self.provider.embed("soup")

        assert exc_info.value is error
        assert self.mock_client.embeddings.create.call_count == 1
