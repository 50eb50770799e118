"""Terminal Output Formatting Package"""

import os
import re
import sys


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    BLUE = '\033[34m'
    MAGENTA = '\033[35m'
    CYAN = '\033[36m'


def _supports_color() -> bool:
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    if not hasattr(sys.stdout, 'isatty') or not sys.stdout.isatty():
        return False
    if sys.platform == 'win32':
        try:
            import ctypes
            kernel32 = ctypes.windll.kernel32
            kernel32.SetConsoleMode(kernel32.GetStdHandle(-11), 7)
            return True
        except (AttributeError, OSError):
            return False
    return True


def _supports_unicode() -> bool:
    try:
        '✓━'.encode(sys.stdout.encoding or 'utf-8')
        return True
    except (UnicodeEncodeError, LookupError):
        return False


COLORS_ENABLED = _supports_color()
UNICODE_ENABLED = _supports_unicode()

CHECK = '✓' if UNICODE_ENABLED else '[OK]'
CROSS = '✗' if UNICODE_ENABLED else '[X]'
RULE_CHAR = '━' if UNICODE_ENABLED else '='
RULE_WIDTH = 52

BANNER = r"""
 ____  __  __ ___ _____
|  _ \|  \/  |_ _|_   _|
| |_) | |\/| || |  | |
|  _ <| |  | || |  | |
|_| \_\_|  |_|___| |_|
"""


def _colorize(text: str, *codes: str) -> str:
    if not COLORS_ENABLED:
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"


def success(text: str) -> str:
    return _colorize(text, Colors.GREEN)


def error(text: str) -> str:
    return _colorize(text, Colors.RED)


def warning(text: str) -> str:
    return _colorize(text, Colors.YELLOW)


def info(text: str) -> str:
    return _colorize(text, Colors.CYAN)


def accent(text: str) -> str:
    return _colorize(text, Colors.BLUE)


def dim(text: str) -> str:
    return _colorize(text, Colors.DIM)


def bold(text: str) -> str:
    return _colorize(text, Colors.BOLD)


def highlight(text: str) -> str:
    return _colorize(text, Colors.MAGENTA)


def rule() -> str:
    return highlight(RULE_CHAR * RULE_WIDTH)


def print_success(message: str) -> None:
    print(f"{success(CHECK)} {message}")


def print_error(message: str) -> None:
    print(f"{error(CROSS)} {error(message)}", file=sys.stderr)


def print_warning(message: str) -> None:
    prefix = '⚠' if UNICODE_ENABLED else '[!]'
    print(f"{warning(prefix)} {warning(message)}", file=sys.stderr)


def print_banner(version: str) -> None:
    print(accent(BANNER.strip('\n')))
    print()
    print(f"{info('RMIT')} {success('v' + version)}")
    print(warning("AI-powered commit message generator"))
    print(rule())


def print_model(model: str) -> None:
    print(f"\n{rule()}")
    print(f"{success('USING MODEL:')} {info(model)}")
    print(rule())


COMMIT_TYPE_COLORS = {
    'feat': Colors.GREEN,
    'fix': Colors.RED,
    'refactor': Colors.YELLOW,
    'docs': Colors.CYAN,
    'test': Colors.MAGENTA,
    'chore': Colors.DIM,
    'style': Colors.DIM,
}


def colorize_commit_type(message: str) -> str:
    """Color the commit type prefix on the first line of a commit message."""
    if not COLORS_ENABLED:
        return message
    lines = message.split('\n')
    match = re.match(r'^(\w+)(\([^)]*\))?(!?:)', lines[0])
    if match:
        color = COMMIT_TYPE_COLORS.get(match.group(1))
        if color:
            prefix = match.group(0)
            lines[0] = _colorize(prefix, Colors.BOLD, color) + lines[0][len(prefix):]
    return '\n'.join(lines)


def print_commit_message(title: str, message: str) -> None:
    """Show a generated message between rules, subject line in bold."""
    lines = colorize_commit_type(message).split('\n')
    print(f"\n{rule()}")
    print(accent(title))
    print(rule())
    print()
    print(bold(lines[0]))
    for line in lines[1:]:
        print(line)
    print()
    print(rule())


__all__ = [
    "Colors", "COLORS_ENABLED", "UNICODE_ENABLED",
    "CHECK", "CROSS", "BANNER",
    "success", "error", "warning", "info", "accent", "dim", "bold", "highlight", "rule",
    "print_success", "print_error", "print_warning", "print_banner", "print_model",
    "print_commit_message", "colorize_commit_type", "COMMIT_TYPE_COLORS",
]
