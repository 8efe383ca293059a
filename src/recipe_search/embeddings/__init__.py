"""Text embedding clients."""

from .base import EmbeddingProvider
from .models import EMBEDDING_DIM, EMBEDDING_METRIC, EMBEDDING_MODEL, Embedding
from .openai_client import OpenAIEmbeddingProvider

__all__ = [
    "EMBEDDING_DIM",
    "EMBEDDING_METRIC",
    "EMBEDDING_MODEL",
    "Embedding",
    "EmbeddingProvider",
    "OpenAIEmbeddingProvider",
]
