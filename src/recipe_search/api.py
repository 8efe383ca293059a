"""High-level API for recipe-search library usage."""

from pathlib import Path

from .config import load_config
from .context import SearchContext
from .core import DEFAULT_QUERY, run
from .index.models import DEFAULT_TOP_K, SearchResult
from .recipes import load_recipes


async def search(
    query: str = DEFAULT_QUERY,
    top_k: int = DEFAULT_TOP_K,
    index: bool = True,
    recipes: str | Path | None = None,
) -> list[SearchResult]:
    """Search recipes by meaning.

    Args:
        query: Text to search for
        top_k: Number of results to return
        index: Whether to (re-)index the recipes before searching
        recipes: Path to a recipe JSON file (bundled corpus if None)

    Returns:
        Search results ordered by descending score

    Raises:
        MissingAPIKeyError: If an API key is not configured
        RecipeCorpusError: If the recipe file is malformed
        ValueError: If query is empty or top_k is out of range
    """
    config = load_config()
    context = SearchContext.from_config(config)
    corpus = load_recipes(Path(recipes) if recipes else None) if index else []

    return await run(context, corpus, query=query, top_k=top_k, skip_index=not index)
