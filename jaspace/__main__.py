"""Module entrypoint for running jaspace as ``python -m jaspace``."""

from __future__ import annotations

from jaspace.cli import main


if __name__ == "__main__":
    main()
