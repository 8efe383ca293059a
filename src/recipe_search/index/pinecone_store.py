"""Pinecone vector store implementation."""

import asyncio
import logging

from pinecone import Pinecone, ServerlessSpec

from ..embeddings.models import Embedding
from .base import IndexHandle, VectorStore
from .models import IndexDescription, IndexRecord, IndexSpec, Match

logger = logging.getLogger(__name__)


class PineconeIndexHandle(IndexHandle):
    """Reads and writes records in one Pinecone index.

    SDK errors are not caught here and reach the caller unchanged.
    """

    def __init__(self, index) -> None:
        self._index = index

    async def upsert(self, records: list[IndexRecord]) -> None:
        payload = [record.to_dict() for record in records]
        await asyncio.to_thread(self._index.upsert, vectors=payload)

    async def query(
        self, vector: Embedding, top_k: int, include_metadata: bool = True
    ) -> list[Match]:
        # Run synchronous Pinecone client in thread to avoid blocking event loop
        response = await asyncio.to_thread(
            self._index.query,
            vector=[float(v) for v in vector],
            top_k=top_k,
            include_metadata=include_metadata,
        )
        return [
            Match(
                id=match.id,
                score=float(match.score),
                metadata=dict(match.metadata or {}),
            )
            for match in response.matches
        ]


class PineconeVectorStore(VectorStore):
    """Pinecone vector database.

    Provides index listing and serverless index creation using the
    Pinecone API.
    """

    def __init__(self, api_key: str) -> None:
        """Initialize Pinecone store.

        Args:
            api_key: Pinecone API key
        """
        self._client = Pinecone(api_key=api_key)

    async def list_index_names(self) -> list[str]:
        indexes = await asyncio.to_thread(self._client.list_indexes)
        return list(indexes.names())

    async def create_index(self, spec: IndexSpec) -> None:
        logger.debug(
            f"Creating index {spec.name!r} ({spec.dimension} dims, {spec.metric}) "
            f"in {spec.cloud}/{spec.region}"
        )
        # create_index blocks until the index is ready
        await asyncio.to_thread(
            self._client.create_index,
            name=spec.name,
            dimension=spec.dimension,
            metric=spec.metric,
            spec=ServerlessSpec(cloud=spec.cloud, region=spec.region),
        )

    async def describe_index(self, name: str) -> IndexDescription:
        description = await asyncio.to_thread(self._client.describe_index, name)
        return IndexDescription(
            name=name,
            dimension=int(description.dimension),
            metric=str(description.metric),
        )

    def index(self, name: str) -> PineconeIndexHandle:
        return PineconeIndexHandle(self._client.Index(name))
