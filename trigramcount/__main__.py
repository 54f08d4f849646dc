"""Module entrypoint for running trigramcount as ``python -m trigramcount``."""

from __future__ import annotations

from trigramcount.cli import main


if __name__ == "__main__":
    main()
