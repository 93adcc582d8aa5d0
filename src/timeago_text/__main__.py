"""Allow running as python -m timeago_text."""

from timeago_text.cli import app

if __name__ == "__main__":
    app()
