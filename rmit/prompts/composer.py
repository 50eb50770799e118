"""Prompt Composer - Build the single instruction sent to the model."""

from enum import Enum

from rmit import COMMIT_TYPE_NAMES
from rmit.git import DiffSnapshot
from rmit.prompts.context import ProjectContext


class Variant(Enum):
    """How the payload under "Changes:" is shaped."""
    STANDARD = "standard"
    DETAILED = "detailed"
    SUMMARIZE = "summarize"
    FEEDBACK_GUIDED = "feedback"


DIRECTIVE = (
    "Generate a concise and descriptive git commit message based on the following changes. "
    f"Follow the conventional commit format (e.g., {', '.join(t + ':' for t in COMMIT_TYPE_NAMES)}). "
    "Only respond with the commit message, nothing else."
)

DETAIL_REQUEST = "Please provide a more detailed commit message with additional context and explanations."
SUMMARY_REQUEST = "Please summarize this commit message in 50 characters or less:"
FEEDBACK_TEMPLATE = (
    "Based on this diff:\n\n{diff}\n\n"
    "And considering this feedback: {feedback}\n\n"
    "Generate an appropriate commit message."
)


class PromptComposer:
    """Stateless: the same inputs always give the same prompt."""

    def compose(
        self,
        variant: Variant,
        diff: DiffSnapshot,
        context: ProjectContext | None = None,
        changed_files: list[str] | tuple[str, ...] | None = None,
        feedback: str | None = None,
        previous_message: str | None = None,
    ) -> str:
        sections = [
            DIRECTIVE,
            self._build_context_section(context),
            self._build_files_section(changed_files),
            "Changes:\n" + self._build_payload(variant, diff, feedback, previous_message),
        ]
        return "\n\n".join(filter(None, sections))

    def _build_context_section(self, context: ProjectContext | None) -> str:
        if not context:
            return ""
        return f"Project information: {context.text}"

    def _build_files_section(self, changed_files) -> str:
        if not changed_files:
            return ""
        return f"Changed files: {', '.join(changed_files)}"

    def _build_payload(self, variant: Variant, diff: DiffSnapshot, feedback: str | None, previous_message: str | None) -> str:
        if variant is Variant.STANDARD:
            return diff.raw_text
        if variant is Variant.DETAILED:
            return f"{diff.raw_text}\n\n{DETAIL_REQUEST}"
        if variant is Variant.SUMMARIZE:
            if not previous_message:
                raise ValueError("Summarizing requires a previous commit message")
            # Diff is not included here
            return f"{SUMMARY_REQUEST}\n\n{previous_message}"
        if variant is Variant.FEEDBACK_GUIDED:
            if feedback is None:
                raise ValueError("Feedback-guided generation requires feedback text")
            return FEEDBACK_TEMPLATE.format(diff=diff.raw_text, feedback=feedback)
        raise ValueError(f"Unknown prompt variant: {variant}")
