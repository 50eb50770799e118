"""CLI Argument Parsing"""

import argparse
import argcomplete

from rmit import __version__
from rmit.config import CONFIG_KEYS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='rmit',
        description='Generate git commit messages with AI',
        epilog='Example: rmit -m anthropic/claude-3-haiku'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    # Generation options
    parser.add_argument('-c', '--commit', action='store_true', help='Automatically create commit with generated message')
    parser.add_argument('-m', '--model', type=str, metavar='MODEL', help='OpenRouter model to use (overrides default_model from config)')
    parser.add_argument('--verbose', action='store_true', help='Show debug info (prompt size, tokens used, timing)')

    # Config subcommands
    subparsers = parser.add_subparsers(dest='command', metavar='{set,get}')

    set_parser = subparsers.add_parser('set', help='Set configuration values')
    set_parser.add_argument('key', metavar='KEY', help=f"One of: {', '.join(CONFIG_KEYS)}")
    set_parser.add_argument('value', metavar='VALUE', help='New value')

    get_parser = subparsers.add_parser('get', help='Get configuration values')
    get_parser.add_argument('key', metavar='KEY', nargs='?', help=f"One of: {', '.join(CONFIG_KEYS)} (all when omitted)")

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
