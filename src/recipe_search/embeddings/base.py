"""Abstract base class for embedding providers.

This module defines the interface that embedding services must implement,
so the orchestrator can run against a hosted service or a test double.
"""

from abc import ABC, abstractmethod

import numpy as np

from ..errors import EmbeddingDimensionError
from .models import EMBEDDING_DIM, Embedding


class EmbeddingProvider(ABC):
    """Abstract base class for embedding providers.

    Implementations turn text into a fixed-length vector. Every vector
    returned by ``embed`` must have ``dimension`` values.
    """

    dimension: int = EMBEDDING_DIM

    @abstractmethod
    async def embed(self, text: str) -> Embedding:
        """Convert text to an embedding vector.

        Args:
            text: Non-empty text to embed

        Returns:
            Float32 array with shape (dimension,)

        Raises:
            ValueError: If text is empty
            Exception: Whatever the underlying service raises
        """
        pass

    def _to_embedding(self, values) -> Embedding:
        """Convert raw service output to a validated float32 vector."""
        embedding = np.asarray(values, dtype=np.float32)
        if embedding.shape != (self.dimension,):
            raise EmbeddingDimensionError(embedding.size, self.dimension)
        return embedding
