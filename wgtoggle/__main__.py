"""Entry point for wg-toggle CLI."""

from .cli import app


def main():
    """Run the CLI application."""
    app()


if __name__ == "__main__":
    main()
