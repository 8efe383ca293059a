"""Vector index access."""

from .base import IndexHandle, VectorStore
from .manager import VectorIndexManager
from .models import (
    DEFAULT_TOP_K,
    MAX_TOP_K,
    IndexDescription,
    IndexRecord,
    IndexSpec,
    Match,
    SearchResult,
    truncate_content,
)
from .pinecone_store import PineconeVectorStore

__all__ = [
    "DEFAULT_TOP_K",
    "MAX_TOP_K",
    "IndexDescription",
    "IndexHandle",
    "IndexRecord",
    "IndexSpec",
    "Match",
    "PineconeVectorStore",
    "SearchResult",
    "VectorIndexManager",
    "VectorStore",
    "truncate_content",
]
