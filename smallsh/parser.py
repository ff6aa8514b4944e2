from dataclasses import dataclass, field
from typing import Optional

from smallsh.config import (
    BACKGROUND_MARKER,
    COMMENT_PREFIX,
    MAX_REDIRECTS,
    PID_TOKEN,
    REDIRECT_IN,
    REDIRECT_OUT,
)


@dataclass
class Command:
    """One parsed input line.

    argv[0] is the program name. ``background`` is the flag as requested on
    the line; whether it is honored is decided at launch time.
    """

    argv: list = field(default_factory=list)
    redir_in: Optional[str] = None
    redir_out: Optional[str] = None
    background: bool = False

    @property
    def name(self):
        return self.argv[0]

    @property
    def args(self):
        return self.argv[1:]

    def __str__(self):
        return " ".join(self.argv)


def expand_pid(line, pid):
    """Replace every ``$$`` in the raw line with the shell's pid."""
    return line.replace(PID_TOKEN, str(pid))


def split_words(line):
    return line.split()


def _take_background(words):
    if len(words) > 1 and words[-1] == BACKGROUND_MARKER:
        words.pop()
        return True
    return False


def _take_redirect(words, cmd):
    """
    Consume one trailing ``< file`` or ``> file`` pair.
    Returns: True if a pair was consumed
    """
    # program name has to survive in front of the pair
    if len(words) < 3:
        return False

    op = words[-2]
    if op == REDIRECT_IN:
        cmd.redir_in = words.pop()
    elif op == REDIRECT_OUT:
        cmd.redir_out = words.pop()
    else:
        return False
    words.pop()
    return True


def parse_words(words):
    """
    Resolve a token sequence into a Command.
    Returns: Command, or None for a blank or comment line
    """
    if not words or words[0].startswith(COMMENT_PREFIX):
        return None

    words = list(words)
    cmd = Command()
    cmd.background = _take_background(words)

    for _ in range(MAX_REDIRECTS):
        if not _take_redirect(words, cmd):
            break

    cmd.argv = words
    return cmd


def parse_command(line, pid):
    """
    Parse one raw input line.
    Returns: Command, or None for a blank or comment line
    """
    return parse_words(split_words(expand_pid(line, pid)))
