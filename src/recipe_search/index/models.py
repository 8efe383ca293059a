"""Data models for the vector index."""

from dataclasses import dataclass, field
from typing import Any

from ..embeddings.models import EMBEDDING_DIM, EMBEDDING_METRIC, Embedding

# Pinecone rejects queries asking for more matches than this
MAX_TOP_K = 10_000
DEFAULT_TOP_K = 3

CONTENT_PREVIEW_CHARS = 50
ELLIPSIS = "…"


@dataclass(frozen=True)
class IndexSpec:
    """Creation parameters for a serverless index.

    Attributes:
        name: Index name
        dimension: Vector length, must match the embedding model
        metric: Similarity metric used by the index
        cloud: Cloud provider hosting the serverless index
        region: Cloud region hosting the serverless index
    """

    name: str
    dimension: int = EMBEDDING_DIM
    metric: str = EMBEDDING_METRIC
    cloud: str = "aws"
    region: str = "us-east-1"


@dataclass(frozen=True)
class IndexDescription:
    """Dimension and metric an existing index was created with."""

    name: str
    dimension: int
    metric: str


@dataclass
class IndexRecord:
    """A vector stored under a recipe id, with its metadata."""

    id: str
    values: Embedding
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the upsert payload shape."""
        return {
            "id": self.id,
            "values": [float(v) for v in self.values],
            "metadata": dict(self.metadata),
        }


@dataclass(frozen=True)
class Match:
    """A record returned by a similarity query."""

    id: str
    score: float
    metadata: dict[str, Any] = field(default_factory=dict)


def truncate_content(text: str, limit: int = CONTENT_PREVIEW_CHARS) -> str:
    """Shorten text for display.

    Slicing is by code point, so multi-byte characters are never split.
    The ellipsis is always appended.
    """
    return text[:limit] + ELLIPSIS


@dataclass(frozen=True)
class SearchResult:
    """A search hit prepared for display."""

    id: str
    title: str
    content: str
    score: float

    @classmethod
    def from_match(cls, match: Match) -> "SearchResult":
        metadata = match.metadata or {}
        return cls(
            id=match.id,
            title=str(metadata.get("title", "")),
            content=truncate_content(str(metadata.get("content", ""))),
            score=float(match.score),
        )
