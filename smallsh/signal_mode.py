"""
Foreground-only mode switch.

SIGTSTP delivered to the shell toggles between normal and foreground-only
mode. SIGINT is ignored by the shell itself; children pick their own
dispositions at launch (see executor).
"""
import os
import signal
import sys

from smallsh.config import FOREGROUND_ONLY_OFF, FOREGROUND_ONLY_ON

# Only written by handle_sigtstp
_foreground_only = False


def foreground_only():
    return _foreground_only


def _notify(text):
    # Runs inside the signal handler: one raw write, no buffered stdio
    try:
        os.write(sys.stdout.fileno(), text.encode())
    except (OSError, ValueError):
        pass


def handle_sigtstp(signum, frame):
    """Toggle foreground-only mode and announce the new state"""
    global _foreground_only
    _foreground_only = not _foreground_only
    _notify(FOREGROUND_ONLY_ON if _foreground_only else FOREGROUND_ONLY_OFF)


def reset_mode():
    global _foreground_only
    _foreground_only = False


def init_signal_handlers():
    """Shell ignores SIGINT and handles SIGTSTP"""
    signal.signal(signal.SIGINT, signal.SIG_IGN)
    signal.signal(signal.SIGTSTP, handle_sigtstp)


def child_foreground():
    """preexec hook: foreground child dies on SIGINT, ignores SIGTSTP"""
    signal.signal(signal.SIGINT, signal.SIG_DFL)
    signal.signal(signal.SIGTSTP, signal.SIG_IGN)


def child_background():
    """preexec hook: background child ignores SIGINT and SIGTSTP"""
    signal.signal(signal.SIGINT, signal.SIG_IGN)
    signal.signal(signal.SIGTSTP, signal.SIG_IGN)
