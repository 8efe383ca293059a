"""Test package structure and imports."""

import sys
from pathlib import Path

import pytest

# Add src to path for testing
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))


def test_package_imports() -> None:
    """Test that recipe_search package can be imported."""
    import recipe_search

    assert recipe_search.__version__ == "0.1.0"


def test_main_module_imports() -> None:
    """Test that main module can be imported without error."""
    from recipe_search.__main__ import main

    assert callable(main)


def test_search_is_lazily_exported() -> None:
    """Test that the library search function is reachable from the package."""
    import recipe_search
    from recipe_search.api import search

    assert recipe_search.search is search


def test_unknown_attribute_raises() -> None:
    import recipe_search

    with pytest.raises(AttributeError, match="has no attribute 'nope'"):
        recipe_search.nope  # noqa: B018
