"""CLI entry point for wpslug."""

from __future__ import annotations

from wpslug.cli import main

if __name__ == "__main__":
    main()
