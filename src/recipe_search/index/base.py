"""Abstract base classes for vector stores.

A VectorStore manages named indexes; an IndexHandle reads and writes
records in one of them. Both are implemented against Pinecone and can be
replaced by in-memory doubles in tests.
"""

from abc import ABC, abstractmethod

from ..embeddings.models import Embedding
from .models import IndexDescription, IndexRecord, IndexSpec, Match


class IndexHandle(ABC):
    """Handle to a single remote index."""

    @abstractmethod
    async def upsert(self, records: list[IndexRecord]) -> None:
        """Insert records, replacing any with the same id.

        Args:
            records: Records to write
        """
        pass

    @abstractmethod
    async def query(
        self, vector: Embedding, top_k: int, include_metadata: bool = True
    ) -> list[Match]:
        """Return the nearest records to a vector.

        Args:
            vector: Query vector
            top_k: Maximum number of matches
            include_metadata: Whether stored metadata is attached to matches

        Returns:
            Matches ordered by descending similarity score
        """
        pass


class VectorStore(ABC):
    """Hosted vector database holding named indexes."""

    @abstractmethod
    async def list_index_names(self) -> list[str]:
        """Return the names of all existing indexes."""
        pass

    @abstractmethod
    async def create_index(self, spec: IndexSpec) -> None:
        """Create an index.

        Args:
            spec: Name, dimension, metric and deployment of the new index
        """
        pass

    @abstractmethod
    def index(self, name: str) -> IndexHandle:
        """Return a handle to an existing index without any network call."""
        pass

    @abstractmethod
    async def describe_index(self, name: str) -> IndexDescription:
        """Return the dimension and metric of an existing index."""
        pass
