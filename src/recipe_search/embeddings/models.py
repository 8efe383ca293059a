"""Embedding models and constants for semantic search."""

from typing import TypeAlias

import numpy as np

# Model configuration constants
EMBEDDING_MODEL = "text-embedding-ada-002"
EMBEDDING_DIM = 1536  # ada-002 output dimension
EMBEDDING_METRIC = "cosine"

# Type aliases for clarity
Embedding: TypeAlias = np.ndarray  # Shape: (1536,)
