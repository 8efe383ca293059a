"""Vector index manager - owns the single index the recipes live in."""

import logging
from typing import Any

from ..embeddings.models import Embedding
from ..errors import IndexMismatchError
from .base import IndexHandle, VectorStore
from .models import DEFAULT_TOP_K, MAX_TOP_K, IndexRecord, IndexSpec, Match

logger = logging.getLogger(__name__)


class VectorIndexManager:
    """Ensure a named index exists, then upsert into and query it.

    The index is created with the dimension and metric from ``spec`` the
    first time it is needed. Remote errors propagate unmodified.
    """

    def __init__(self, store: VectorStore, spec: IndexSpec) -> None:
        """Initialize the manager.

        Args:
            store: Vector store holding the index
            spec: Creation parameters of the index
        """
        self.store = store
        self.spec = spec
        self._handle: IndexHandle | None = None

    async def index_exists(self) -> bool:
        """Check whether the configured index exists remotely."""
        names = await self.store.list_index_names()
        return self.spec.name in names

    async def _check_existing(self) -> None:
        description = await self.store.describe_index(self.spec.name)
        if (description.dimension, description.metric) != (
            self.spec.dimension,
            self.spec.metric,
        ):
            raise IndexMismatchError(
                self.spec.name,
                description.dimension,
                description.metric,
                self.spec.dimension,
                self.spec.metric,
            )

    async def ensure_index(self) -> IndexHandle:
        """Return a handle to the index, creating the index if absent.

        The handle is cached after the first successful call, so later
        calls make no network request.

        Returns:
            Handle to the configured index

        Raises:
            IndexMismatchError: If an existing index has a different
                dimension or metric than ``spec``
        """
        if self._handle is not None:
            return self._handle

        if await self.index_exists():
            await self._check_existing()
        else:
            logger.info(f"Index {self.spec.name!r} not found, creating it")
            await self.store.create_index(self.spec)

        self._handle = self.store.index(self.spec.name)
        return self._handle

    async def upsert(
        self, id: str, vector: Embedding, metadata: dict[str, Any]
    ) -> None:
        """Write one record, replacing any record with the same id.

        Args:
            id: Record id
            vector: Embedding to store
            metadata: Metadata stored alongside the vector
        """
        index = await self.ensure_index()
        await index.upsert([IndexRecord(id=id, values=vector, metadata=metadata)])
        logger.debug(f"Upserted {id!r} into {self.spec.name!r}")

    async def query(self, vector: Embedding, top_k: int = DEFAULT_TOP_K) -> list[Match]:
        """Return the records nearest to a vector.

        Args:
            vector: Query embedding
            top_k: Maximum number of matches (1 to 10,000)

        Returns:
            Matches with metadata, ordered by descending score

        Raises:
            ValueError: If top_k is out of range
        """
        if not 1 <= top_k <= MAX_TOP_K:
            raise ValueError(f"top_k must be between 1 and {MAX_TOP_K}, got {top_k}")

        index = await self.ensure_index()
        matches = await index.query(vector, top_k=top_k, include_metadata=True)
        logger.debug(f"Query returned {len(matches)} matches")

        # Stable sort keeps the store's order among equal scores
        return sorted(matches, key=lambda match: match.score, reverse=True)
