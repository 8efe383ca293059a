"""Recipe corpus bundled with recipe-search."""

import json
from dataclasses import dataclass
from importlib import resources
from pathlib import Path

from ..errors import RecipeCorpusError

BUNDLED_RECIPES = "recipes.json"


@dataclass(frozen=True)
class Recipe:
    """A recipe document.

    Attributes:
        id: Unique identifier, also the vector record id
        title: Human-readable title
        content: Text that gets embedded
    """

    id: str
    title: str
    content: str

    def metadata(self) -> dict[str, str]:
        """Metadata stored alongside the recipe's vector."""
        return {"title": self.title, "content": self.content}


def parse_recipes(data: object) -> list[Recipe]:
    """Build recipes from decoded JSON.

    Args:
        data: A list of objects with id, title and content strings

    Returns:
        Recipes in input order

    Raises:
        RecipeCorpusError: If the data is malformed or ids repeat
    """
    if not isinstance(data, list):
        raise RecipeCorpusError("Recipe corpus must be a JSON list")

    recipes = []
    seen: set[str] = set()
    for position, item in enumerate(data):
        if not isinstance(item, dict):
            raise RecipeCorpusError(f"Recipe #{position} is not an object")

        missing = [
            key
            for key in ("id", "title", "content")
            if not isinstance(item.get(key), str) or not item[key]
        ]
        if missing:
            raise RecipeCorpusError(
                f"Recipe #{position} is missing fields: {', '.join(missing)}"
            )

        if item["id"] in seen:
            raise RecipeCorpusError(f"Duplicate recipe id: {item['id']!r}")
        seen.add(item["id"])

        recipes.append(
            Recipe(id=item["id"], title=item["title"], content=item["content"])
        )

    return recipes


def load_recipes(path: Path | None = None) -> list[Recipe]:
    """Load recipes from a JSON file, or the bundled corpus by default.

    Args:
        path: Optional path to an alternative corpus file

    Returns:
        Recipes in file order

    Raises:
        RecipeCorpusError: If the file is not valid JSON or is malformed
        OSError: If the file cannot be read
    """
    if path is None:
        text = resources.files(__package__).joinpath(BUNDLED_RECIPES).read_text(
            encoding="utf-8"
        )
    else:
        text = Path(path).read_text(encoding="utf-8")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise RecipeCorpusError(f"Invalid recipe JSON: {e}") from e

    return parse_recipes(data)


__all__ = ["Recipe", "load_recipes", "parse_recipes"]
