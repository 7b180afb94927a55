"""Entry point for ``python -m projsync``."""

from .saver import main

main()
