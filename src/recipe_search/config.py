"""Configuration management for recipe-search.

API keys are read from environment variables only. A ``.env`` file in the
working directory is loaded first, without overriding variables that are
already set. Non-secret settings have defaults that env vars can override:

    RECIPE_SEARCH_INDEX            index name (default "recipes")
    RECIPE_SEARCH_CLOUD            serverless cloud (default "aws")
    RECIPE_SEARCH_REGION           serverless region (default "us-east-1")
    RECIPE_SEARCH_EMBEDDING_MODEL  embedding model (default ada-002)
"""

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from .embeddings.models import EMBEDDING_MODEL
from .errors import MissingAPIKeyError
from .index.models import IndexSpec

# First match wins; the second name is kept for older .env files
OPENAI_KEY_VARS = ("OPENAI_API_KEY", "OPEN_AI_API_KEY")
PINECONE_KEY_VAR = "PINECONE_API_KEY"

DEFAULT_INDEX_NAME = "recipes"
DEFAULT_CLOUD = "aws"
DEFAULT_REGION = "us-east-1"


@dataclass(frozen=True)
class APIKeys:
    """Secrets for the two hosted services."""

    openai: str
    pinecone: str

    def __repr__(self) -> str:
        return "APIKeys(openai='***', pinecone='***')"


@dataclass(frozen=True)
class EmbeddingConfig:
    """Embedding service configuration."""

    model: str


@dataclass(frozen=True)
class RecipeSearchConfig:
    """Top-level recipe-search configuration.

    Dimension and metric in ``index`` are pinned to the embedding model
    and are never read from the environment.
    """

    keys: APIKeys
    index: IndexSpec
    embedding: EmbeddingConfig


def _read_openai_key() -> str:
    for var in OPENAI_KEY_VARS:
        value = os.getenv(var)
        if value:
            return value
    raise MissingAPIKeyError("OpenAI", OPENAI_KEY_VARS[0])


def _read_pinecone_key() -> str:
    value = os.getenv(PINECONE_KEY_VAR)
    if not value:
        raise MissingAPIKeyError("Pinecone", PINECONE_KEY_VAR)
    return value


def load_config(load_env_file: bool = True) -> RecipeSearchConfig:
    """Load configuration from the environment.

    Args:
        load_env_file: Whether to load a ``.env`` file before reading
            the environment.

    Returns:
        Loaded RecipeSearchConfig.

    Raises:
        MissingAPIKeyError: If the Pinecone or OpenAI API key is not set.
    """
    if load_env_file:
        load_dotenv(find_dotenv(usecwd=True), override=False)

    # Both keys are checked before anything else is built
    pinecone_key = _read_pinecone_key()
    openai_key = _read_openai_key()

    return RecipeSearchConfig(
        keys=APIKeys(openai=openai_key, pinecone=pinecone_key),
        index=IndexSpec(
            name=os.getenv("RECIPE_SEARCH_INDEX", DEFAULT_INDEX_NAME),
            cloud=os.getenv("RECIPE_SEARCH_CLOUD", DEFAULT_CLOUD),
            region=os.getenv("RECIPE_SEARCH_REGION", DEFAULT_REGION),
        ),
        embedding=EmbeddingConfig(
            model=os.getenv("RECIPE_SEARCH_EMBEDDING_MODEL", EMBEDDING_MODEL),
        ),
    )
