"""Refinement Session - Interactive accept/regenerate loop."""

import time
from typing import Callable, Optional

from rmit.git import CommitExecutor, DiffSnapshot
from rmit.llm import LLMClient, GenerationResult
from rmit.output import (
    accent, dim, error, success, warning, rule,
    print_commit_message, print_success,
)
from rmit.prompts import PromptComposer, ProjectContext, Variant
from rmit.session.state import (
    Command, SessionOutcome, SessionState,
    REGENERATION_VARIANTS, parse_command,
)

COMMAND_PROMPT = "Create commit with this message? [y/n/g/r/s/p]: "
FEEDBACK_PROMPT = "> "

INITIAL_TITLE = "GENERATED COMMIT MESSAGE:"

# Command -> (progress line, title shown above the new message)
REGENERATION_LABELS = {
    Command.DETAIL: ("Generating a more detailed commit message...", "GENERATED DETAILED COMMIT MESSAGE:"),
    Command.RETRY: ("Retrying with a new generation...", "REGENERATED COMMIT MESSAGE:"),
    Command.SHORTEN: ("Summarizing the commit message...", "SUMMARIZED COMMIT MESSAGE:"),
    Command.FEEDBACK: ("Generating commit message based on your feedback...", "FEEDBACK-BASED COMMIT MESSAGE:"),
}

OPTIONS = [
    ("y/yes", "Create commit with this message", success),
    ("n/no", "Cancel commit", error),
    ("g", "Generate more detailed message", accent),
    ("r", "Retry with new generation", accent),
    ("s", "Summarize message", accent),
    ("p", "Provide feedback for the message", accent),
]

INVALID_OPTION = (
    "Invalid option. Please choose y (yes), n (no), g (generate detailed), "
    "r (retry), s (shorter), or p (custom prompt)."
)


class RefinementSession:
    """Drives generation and refinement of one commit message.

    Every regeneration composes one prompt and makes exactly one completion
    call. ``current_message`` changes only after a call succeeds; generation
    and commit errors propagate to the caller.
    """

    def __init__(
        self,
        diff: DiffSnapshot,
        client: LLMClient,
        committer: CommitExecutor,
        model: str,
        context: Optional[ProjectContext] = None,
        composer: Optional[PromptComposer] = None,
        ask: Optional[Callable[[str], str]] = None,
        verbose: bool = False,
    ):
        self.diff = diff
        self.client = client
        self.committer = committer
        self.model = model
        self.context = context or ProjectContext()
        self.composer = composer or PromptComposer()
        self.ask = ask or input
        self.verbose = verbose
        self.state: Optional[SessionState] = None

    def start(self) -> SessionState:
        """Initial standard generation."""
        print(f"\n{warning('Generating commit message...')}")
        result = self._generate(Variant.STANDARD)
        self.state = SessionState(current_message=result.text, diff=self.diff, model=self.model)
        print_commit_message(INITIAL_TITLE, result.text)
        return self.state

    def run(self) -> SessionOutcome:
        self.start()
        self._print_options()

        while True:
            line = self._read(warning(COMMAND_PROMPT))
            if line is None:
                return self._cancel()
            outcome = self.handle(parse_command(line))
            if outcome is not None:
                return outcome

    def run_auto(self) -> SessionOutcome:
        """Generate once and commit without asking."""
        self.start()
        return self._commit()

    def handle(self, command: Command) -> Optional[SessionOutcome]:
        """Apply one command. Returns the outcome once the session is over."""
        if self.state is None:
            raise RuntimeError("Session has not been started")

        if command is Command.ACCEPT:
            return self._commit()
        if command is Command.REJECT:
            return self._cancel()
        if command in REGENERATION_VARIANTS:
            return self._regenerate(command)

        print(error(INVALID_OPTION))
        return None

    def _read(self, prompt: str) -> Optional[str]:
        """One line of input, or None once input is closed or interrupted."""
        try:
            return self.ask(prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            return None

    def _regenerate(self, command: Command) -> Optional[SessionOutcome]:
        feedback = None
        if command is Command.FEEDBACK:
            print(accent("Enter your feedback for the commit message:"))
            feedback = self._read(FEEDBACK_PROMPT)
            if feedback is None:
                return self._cancel()
            feedback = feedback.strip()

        progress, title = REGENERATION_LABELS[command]
        print(accent(progress))
        result = self._generate(REGENERATION_VARIANTS[command], feedback=feedback)
        self.state.current_message = result.text
        print_commit_message(title, result.text)
        return None

    def _generate(self, variant: Variant, feedback: Optional[str] = None) -> GenerationResult:
        prompt = self.composer.compose(
            variant,
            self.diff,
            context=self.context,
            changed_files=self.diff.changed_files,
            feedback=feedback,
            previous_message=self.state.current_message if self.state else None,
        )
        t0 = time.time()
        result = self.client.generate(prompt, model=self.model)
        if self.verbose:
            self._print_verbose_stats(variant, prompt, result, time.time() - t0)
        return result

    def _commit(self) -> SessionOutcome:
        output = self.committer.commit(self.state.current_message)
        if output and output.strip():
            print(dim(output.strip()))
        print_success("Commit created successfully")
        return SessionOutcome.COMMITTED

    def _cancel(self) -> SessionOutcome:
        print(warning("Commit canceled"))
        return SessionOutcome.CANCELED

    def _print_options(self) -> None:
        print(f"\n{warning('OPTIONS:')}")
        print(rule())
        for keys, description, color in OPTIONS:
            print(f"  {color(keys)} - {description}")
        print(rule())

    def _print_verbose_stats(self, variant: Variant, prompt: str, result: GenerationResult, elapsed: float) -> None:
        print(dim(f"  Variant: {variant.value}"))
        print(dim(f"  Prompt: ~{len(prompt)//4} tokens ({len(prompt)} chars)"))
        print(dim(f"  Response: {result.tokens_used} tokens from {result.model or self.model}"))
        print(dim(f"  Generate: {elapsed:.2f}s"))
