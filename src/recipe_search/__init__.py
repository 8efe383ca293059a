"""recipe-search - semantic recipe search over a hosted vector index."""

__version__ = "0.1.0"
__all__ = ["search"]


def __getattr__(name: str):  # type: ignore[no-untyped-def]
    if name == "search":
        from .api import search

        return search
    raise AttributeError(f"module 'recipe_search' has no attribute {name!r}")
