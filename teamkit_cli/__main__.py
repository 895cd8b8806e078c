"""Entry point for python -m teamkit_cli."""

from teamkit_cli.cli import app

if __name__ == "__main__":
    app()
