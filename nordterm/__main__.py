"""`python -m nordterm` entrypoint.

Kept for convenient local development runs from the repository root.
For installed usage, prefer the `nordterm` console script.
"""

from __future__ import annotations

from .cli.entrypoint import main


if __name__ == "__main__":
    main()
