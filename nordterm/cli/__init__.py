"""Command-line front end.

`entrypoint.main` owns the process: argument parsing, the console logging
scope, abort signal handling and the exit status. `lifecycle` holds the
provisioning sequence itself.
"""

from .entrypoint import main, run

__all__ = ["main", "run"]
