"""Allow ``python -m frontend_components``."""

from frontend_components.cli.app import app

if __name__ == "__main__":
    app()
