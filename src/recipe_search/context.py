"""Explicitly constructed clients shared by one run."""

from dataclasses import dataclass

from .config import RecipeSearchConfig
from .embeddings import EmbeddingProvider, OpenAIEmbeddingProvider
from .index import PineconeVectorStore, VectorIndexManager


@dataclass
class SearchContext:
    """Embedding provider and index manager used by the orchestrator.

    Build one with ``from_config`` for the hosted services, or pass test
    doubles to the constructor.
    """

    embedder: EmbeddingProvider
    index: VectorIndexManager

    @classmethod
    def from_config(cls, config: RecipeSearchConfig) -> "SearchContext":
        """Create OpenAI and Pinecone clients from loaded configuration."""
        embedder = OpenAIEmbeddingProvider(
            api_key=config.keys.openai,
            model=config.embedding.model,
            dimension=config.index.dimension,
        )
        store = PineconeVectorStore(api_key=config.keys.pinecone)
        return cls(embedder=embedder, index=VectorIndexManager(store, config.index))
