"""Prompt Construction Package"""

from rmit.prompts.context import ContextBuilder, ProjectContext, PROJECT_MARKERS
from rmit.prompts.composer import PromptComposer, Variant, DIRECTIVE

__all__ = [
    "ContextBuilder",
    "ProjectContext",
    "PROJECT_MARKERS",
    "PromptComposer",
    "Variant",
    "DIRECTIVE",
]
