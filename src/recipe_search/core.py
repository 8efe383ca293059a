"""Core functionality for recipe-search - orchestrates embedding and indexing."""

import logging
from collections.abc import Callable, Iterable

from .context import SearchContext
from .index.models import DEFAULT_TOP_K, SearchResult
from .recipes import Recipe

logger = logging.getLogger(__name__)

DEFAULT_QUERY = "recipes with ice cream"

RESULT_COLUMNS = ("id", "title", "content", "score")


async def index_recipe(context: SearchContext, recipe: Recipe) -> None:
    """Embed one recipe's content and upsert it under the recipe id."""
    embedding = await context.embedder.embed(recipe.content)
    await context.index.upsert(recipe.id, embedding, recipe.metadata())


async def index_recipes(
    context: SearchContext,
    recipes: Iterable[Recipe],
    on_progress: Callable[[Recipe], None] | None = None,
) -> int:
    """Index recipes one at a time, in order.

    Stops at the first error. Recipes indexed before the failure stay in
    the index.

    Args:
        context: Clients to use
        recipes: Recipes to index
        on_progress: Called with each recipe before it is indexed

    Returns:
        Number of recipes indexed
    """
    await context.index.ensure_index()

    count = 0
    for recipe in recipes:
        if on_progress:
            on_progress(recipe)
        logger.info(f"Indexing recipe: {recipe.title}")
        await index_recipe(context, recipe)
        count += 1
    return count


async def semantic_search(
    context: SearchContext, query: str, top_k: int = DEFAULT_TOP_K
) -> list[SearchResult]:
    """Search the index for recipes similar to a query.

    Args:
        context: Clients to use
        query: Text turned into the query embedding
        top_k: Number of results to return (maximum 10,000)

    Returns:
        Results ordered by descending score, content truncated for display

    Raises:
        ValueError: If query is empty or top_k is out of range
    """
    vector = await context.embedder.embed(query)
    matches = await context.index.query(vector, top_k=top_k)
    return [SearchResult.from_match(match) for match in matches]


async def run(
    context: SearchContext,
    recipes: Iterable[Recipe],
    query: str = DEFAULT_QUERY,
    top_k: int = DEFAULT_TOP_K,
    skip_index: bool = False,
    on_progress: Callable[[Recipe], None] | None = None,
) -> list[SearchResult]:
    """Index recipes, then run one search.

    Args:
        context: Clients to use
        recipes: Recipes to index
        query: Search query
        top_k: Number of results to return
        skip_index: Search the existing index without re-indexing
        on_progress: Called with each recipe before it is indexed

    Returns:
        Search results
    """
    # Index problems surface before any embedding is requested
    await context.index.ensure_index()
    if not skip_index:
        await index_recipes(context, recipes, on_progress=on_progress)
    return await semantic_search(context, query, top_k=top_k)


def _cell(value: str) -> str:
    return " ".join(value.split())


def render_results(results: list[SearchResult]) -> str:
    """Render search results as a plain-text table.

    Line breaks and tabs inside a cell become single spaces so each
    result stays on one row.
    """
    rows = [RESULT_COLUMNS] + [
        tuple(_cell(value) for value in (r.id, r.title, r.content))
        + (f"{r.score:.4f}",)
        for r in results
    ]
    widths = [max(len(row[i]) for row in rows) for i in range(len(RESULT_COLUMNS))]

    def _line(row: tuple[str, ...]) -> str:
        return " | ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip()

    lines = [_line(rows[0]), "-+-".join("-" * width for width in widths)]
    lines.extend(_line(row) for row in rows[1:])
    if not results:
        lines.append("(no results)")
    return "\n".join(lines)
