"""CLI Main Entry Point"""

import sys
from pathlib import Path

from rmit import __version__
from rmit.config import Config, ConfigManager
from rmit.git import CommitError, CommitExecutor, DiffCollector, GitError
from rmit.llm import GenerationError, get_client
from rmit.output import print_banner, print_error, print_model, print_warning
from rmit.prompts import ContextBuilder
from rmit.session import RefinementSession

from rmit.cli.args import parse_args
from rmit.cli.commands import run_get, run_set


def _handle_subcommands(args, manager):
    """Handle config subcommands that exit early.

    Returns:
        tuple: (exit_code, should_exit) - exit_code if should_exit is True
    """
    if args.command == 'set':
        return run_set(manager, args.key, args.value), True
    if args.command == 'get':
        return run_get(manager, args.key), True
    return 0, False


def _generate_commit_flow(args, config: Config) -> int:
    """Collect the diff, generate a message and refine or commit it.

    Returns:
        int: Exit code
    """
    model = args.model or config.default_model

    try:
        diff = DiffCollector().collect()
    except GitError as e:
        print_error(f"Error getting git diff: {e}")
        return 1

    context = ContextBuilder().describe(Path.cwd())

    try:
        client = get_client(config, model=model)
    except GenerationError as e:
        print_error(str(e))
        return 1

    print_model(model)

    session = RefinementSession(
        diff=diff,
        client=client,
        committer=CommitExecutor(),
        model=model,
        context=context,
        verbose=args.verbose,
    )

    try:
        if args.commit:
            session.run_auto()
        else:
            session.run()
    except GenerationError as e:
        print_error(f"Error generating commit message: {e}")
        return 1
    except CommitError as e:
        print_error(f"Error creating commit: {e}")
        return 1
    except KeyboardInterrupt:
        print()
        print_warning("Interrupted. Changes may already be staged.")
        return 130

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)
    manager = ConfigManager()

    exit_code, should_exit = _handle_subcommands(args, manager)
    if should_exit:
        return exit_code

    print_banner(__version__)
    config = manager.load()
    return _generate_commit_flow(args, config)


def run() -> None:
    sys.exit(main())
