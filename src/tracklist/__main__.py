"""Entry point for ``python -m tracklist``."""

from tracklist.ui.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
