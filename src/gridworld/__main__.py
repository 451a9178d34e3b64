"""Allow running as ``python -m gridworld``."""

from .cli import main

main()
