"""Allow running gitwok with `python -m gitwok`."""

from gitwok.cli import app

if __name__ == "__main__":
    app()
