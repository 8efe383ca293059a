"""OpenAI embeddings provider implementation."""

import asyncio
import logging

from openai import OpenAI

from .base import EmbeddingProvider
from .models import EMBEDDING_DIM, EMBEDDING_MODEL, Embedding

logger = logging.getLogger(__name__)


class OpenAIEmbeddingProvider(EmbeddingProvider):
    """OpenAI embeddings provider.

    Sends one request per ``embed`` call. Errors raised by the OpenAI SDK
    (authentication, rate limiting, connection failures) are not caught
    here and reach the caller unchanged.
    """

    def __init__(
        self,
        api_key: str,
        model: str = EMBEDDING_MODEL,
        dimension: int = EMBEDDING_DIM,
    ) -> None:
        """Initialize the OpenAI provider.

        Args:
            api_key: OpenAI API key
            model: Embedding model identifier
            dimension: Expected length of every returned vector
        """
        self.model = model
        self.dimension = dimension
        self._client = OpenAI(api_key=api_key)

    async def embed(self, text: str) -> Embedding:
        """Generate an embedding for one text.

        Args:
            text: Text to embed

        Returns:
            Float32 array with shape (dimension,)

        Raises:
            ValueError: If text is empty
            EmbeddingDimensionError: If the service returns a vector of
                unexpected length
        """
        if not text or not text.strip():
            raise ValueError("Text cannot be empty")

        def _sync_create():
            response = self._client.embeddings.create(model=self.model, input=text)
            return response.data[0].embedding

        # Run synchronous OpenAI client in thread to avoid blocking event loop
        values = await asyncio.to_thread(_sync_create)
        logger.debug(f"Embedded {len(text)} chars with {self.model}")

        return self._to_embedding(values)
