"""Entry point for running recipe-search as a module."""

from .cli import app


def main() -> None:
    """Main entry point for the recipe-search CLI application."""
    app()


if __name__ == "__main__":
    main()
