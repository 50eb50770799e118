"""Interactive Refinement Package"""

from rmit.session.state import (
    Command, SessionOutcome, SessionState,
    COMMAND_ALIASES, REGENERATION_VARIANTS, parse_command,
)
from rmit.session.refinement import RefinementSession

__all__ = [
    "Command",
    "SessionOutcome",
    "SessionState",
    "COMMAND_ALIASES",
    "REGENERATION_VARIANTS",
    "parse_command",
    "RefinementSession",
]
