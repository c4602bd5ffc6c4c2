"""Module entrypoint for running Text Processor as ``python -m textprocessor``."""

from __future__ import annotations

from textprocessor.cli import main


if __name__ == "__main__":
    main()
