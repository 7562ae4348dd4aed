"""Allow ``python -m sprintsync``."""

from sprintsync.cli import main

main()
