"""Module entrypoint for running cutr as ``python -m cutr``."""

from __future__ import annotations

from cutr.cli import main


if __name__ == "__main__":
    main()
