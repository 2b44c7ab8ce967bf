"""Module entrypoint for running teiplain as ``python -m teiplain``."""

from __future__ import annotations

from teiplain.cli import main


if __name__ == "__main__":
    main()
