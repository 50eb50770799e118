"""Allow ``python -m rmit``."""

from rmit.cli.main import run

run()
