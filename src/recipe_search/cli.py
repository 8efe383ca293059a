"""Typer CLI definition for recipe-search."""

import asyncio
import logging
from pathlib import Path
from typing import NoReturn

import typer

from .config import load_config
from .context import SearchContext
from .core import DEFAULT_QUERY, render_results, run
from .errors import ConfigError, RecipeCorpusError
from .index.models import DEFAULT_TOP_K, MAX_TOP_K
from .recipes import Recipe, load_recipes

app = typer.Typer(help="Index recipes into a vector database and search them")


def _fail(message: str, error: Exception, debug: bool) -> NoReturn:
    if debug:
        typer.echo(f"Debug - {message}: {error!r}", err=True)
    else:
        typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(1) from None


def announce_recipe(recipe: Recipe) -> None:
    """Print the per-recipe progress line."""
    label = typer.style("Indexing recipe:", fg=typer.colors.BLUE)
    typer.echo(f"{label} {recipe.title}")


@app.command()
def search(
    query: str = typer.Option(
        DEFAULT_QUERY, "-q", "--query", help="Text to search the recipes for"
    ),
    top_k: int = typer.Option(
        DEFAULT_TOP_K,
        "-k",
        "--top-k",
        min=1,
        max=MAX_TOP_K,
        help="Number of results to return",
    ),
    recipes_file: Path | None = typer.Option(
        None, "-r", "--recipes", help="Recipe JSON file (bundled recipes if omitted)"
    ),
    skip_index: bool = typer.Option(
        False, "--skip-index", help="Search the existing index without re-indexing"
    ),
    debug: bool = typer.Option(
        False, "--debug", help="Show debug logging and verbose error messages"
    ),
) -> None:
    """Index the recipes, then print the closest matches to a query."""
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

    # Configuration is checked before any client exists
    try:
        config = load_config()
    except ConfigError as e:
        _fail("Configuration error", e, debug)

    recipes: list[Recipe] = []
    if not skip_index:
        try:
            recipes = load_recipes(recipes_file)
        except (RecipeCorpusError, OSError) as e:
            _fail("Recipe file error", e, debug)

    try:
        context = SearchContext.from_config(config)
        results = asyncio.run(
            run(
                context,
                recipes,
                query=query,
                top_k=top_k,
                skip_index=skip_index,
                on_progress=announce_recipe,
            )
        )
    except Exception as e:
        _fail("Search failed", e, debug)

    typer.echo(render_results(results))
