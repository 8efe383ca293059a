"""Pytest configuration and fixtures for recipe-search tests."""

import sys
from pathlib import Path

import pytest

# Make the package and test helpers importable without installation
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent))

from recipe_search.context import SearchContext
from recipe_search.index.manager import VectorIndexManager
from recipe_search.index.models import IndexSpec
from test_helpers import FakeEmbeddingProvider, FakeVectorStore

ENV_VARS = (
    "OPENAI_API_KEY",
    "OPEN_AI_API_KEY",
    "PINECONE_API_KEY",
    "RECIPE_SEARCH_INDEX",
    "RECIPE_SEARCH_CLOUD",
    "RECIPE_SEARCH_REGION",
    "RECIPE_SEARCH_EMBEDDING_MODEL",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path) -> None:
    """Automatically clear recipe-search env vars and leave any real .env behind."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def api_keys(monkeypatch) -> None:
    """Set both API keys to dummy values."""
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("PINECONE_API_KEY", "pc-test")


@pytest.fixture
def fake_store() -> FakeVectorStore:
    """Empty in-memory vector store."""
    return FakeVectorStore()


@pytest.fixture
def fake_context(fake_store) -> SearchContext:
    """Search context wired to in-memory fakes."""
    manager = VectorIndexManager(fake_store, IndexSpec(name="recipes"))
    return SearchContext(embedder=FakeEmbeddingProvider(), index=manager)
