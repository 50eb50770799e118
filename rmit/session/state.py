"""Session state, user commands and outcomes."""

from dataclasses import dataclass
from enum import Enum

from rmit.git import DiffSnapshot
from rmit.prompts import Variant


class Command(Enum):
    ACCEPT = "accept"
    REJECT = "reject"
    DETAIL = "detail"
    RETRY = "retry"
    SHORTEN = "shorten"
    FEEDBACK = "feedback"
    INVALID = "invalid"


class SessionOutcome(Enum):
    COMMITTED = "committed"
    CANCELED = "canceled"


# Raw input -> command. Empty input accepts.
COMMAND_ALIASES = {
    '': Command.ACCEPT,
    'y': Command.ACCEPT,
    'yes': Command.ACCEPT,
    'n': Command.REJECT,
    'no': Command.REJECT,
    'g': Command.DETAIL,
    'r': Command.RETRY,
    's': Command.SHORTEN,
    'p': Command.FEEDBACK,
}

# Commands that regenerate, and the prompt variant each one uses
REGENERATION_VARIANTS = {
    Command.DETAIL: Variant.DETAILED,
    Command.RETRY: Variant.STANDARD,
    Command.SHORTEN: Variant.SUMMARIZE,
    Command.FEEDBACK: Variant.FEEDBACK_GUIDED,
}


def parse_command(raw: str) -> Command:
    return COMMAND_ALIASES.get(raw.strip().lower(), Command.INVALID)


@dataclass
class SessionState:
    current_message: str
    diff: DiffSnapshot
    model: str
