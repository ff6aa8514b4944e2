import sys

from smallsh.config import PROMPT


def get_prompt():
    return PROMPT


def init_readline():
    """Emacs-style editing and in-session recall on a terminal"""
    if not sys.stdin.isatty():
        return

    try:
        import readline

        readline.parse_and_bind("set editing-mode emacs")
        # arguments are paths more often than not
        readline.set_completer_delims(" \t\n<>&")
        readline.parse_and_bind("tab: complete")
    except Exception as e:
        print(f"Warning: line editing unavailable: {e}", file=sys.stderr)


def read_line():
    """
    Prompt and read one line.
    Raises: EOFError at end of input
    """
    return input(get_prompt())
