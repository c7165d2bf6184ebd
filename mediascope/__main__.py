"""Allow ``python -m mediascope``."""

from mediascope.cli import run

run()
