import signal
import subprocess
import sys
from dataclasses import dataclass
from typing import Optional

from smallsh.config import SHELL_NAME
from smallsh.signal_mode import child_background, child_foreground, foreground_only


@dataclass(frozen=True)
class ExitRecord:
    """Outcome of the last foreground command."""

    value: int = 0
    signaled: bool = False

    @classmethod
    def from_returncode(cls, returncode):
        # Popen reports death by signal N as -N
        if returncode < 0:
            return cls(value=-returncode, signaled=True)
        return cls(value=returncode)

    def __str__(self):
        if self.signaled:
            return f"terminated by signal {self.value}"
        return f"exit value {self.value}"


# Launch outcomes

@dataclass
class Background:
    proc: subprocess.Popen

    @property
    def pid(self):
        return self.proc.pid


@dataclass
class Completed:
    record: ExitRecord


@dataclass
class Failed:
    message: str
    # set for foreground launches, None when nothing was waited on
    record: Optional[ExitRecord] = None


def resolve_background(cmd):
    """A requested '&' is dropped while foreground-only mode is on."""
    return cmd.background and not foreground_only()


class RedirectError(Exception):
    """A redirect target could not be opened."""

    def __init__(self, path, direction, reason):
        super().__init__(f"cannot open {path} for {direction}: {reason}")
        self.path = path
        self.direction = direction


def open_redirects(cmd, background):
    """
    Open redirect targets for a command.
    Returns: (stdin, stdout) suitable for Popen; opened files are left open
    """
    stdin = stdout = None
    if cmd.redir_in:
        try:
            stdin = open(cmd.redir_in, "rb")
        except OSError as e:
            raise RedirectError(cmd.redir_in, "input", e.strerror) from e
    elif background:
        stdin = subprocess.DEVNULL

    if cmd.redir_out:
        try:
            stdout = open(cmd.redir_out, "wb")
        except OSError as e:
            if hasattr(stdin, "close"):
                stdin.close()
            raise RedirectError(cmd.redir_out, "output", e.strerror) from e
    elif background:
        stdout = subprocess.DEVNULL

    return stdin, stdout


def run_external(cmd, background, stdin=None, stdout=None):
    """
    Start the program with the dispositions for its mode.
    Returns: Popen object
    Raises: FileNotFoundError / PermissionError / OSError if exec fails
    """
    return subprocess.Popen(
        cmd.argv,
        stdin=stdin,
        stdout=stdout,
        preexec_fn=child_background if background else child_foreground,
    )


def wait_foreground(proc):
    """Block until the foreground child ends and announce SIGINT deaths"""
    record = ExitRecord.from_returncode(proc.wait())
    if record.signaled and record.value == signal.SIGINT:
        print(record, flush=True)
    return record


def execute_command(cmd):
    """
    Launch an external command.
    Returns: Background, Completed or Failed
    Raises: OSError if a child process cannot be created at all
    """
    background = resolve_background(cmd)
    failed_record = None if background else ExitRecord(1)

    try:
        stdin, stdout = open_redirects(cmd, background)
    except RedirectError as e:
        return Failed(f"{SHELL_NAME}: {e}", failed_record)

    opened_files = [f for f in (stdin, stdout) if hasattr(f, "close")]
    try:
        try:
            proc = run_external(cmd, background, stdin=stdin, stdout=stdout)
        except OSError as e:
            # exec failures carry the program name; fork failures do not
            if e.filename is None:
                raise
            return Failed(f"{cmd.name}: {e.strerror}", failed_record)
        except ValueError as e:
            # argv with an embedded NUL byte
            return Failed(f"{cmd.name}: {e}", failed_record)
    finally:
        for f in opened_files:
            f.close()

    if background:
        print(f"background pid is {proc.pid}", flush=True)
        return Background(proc)

    return Completed(wait_foreground(proc))


def report_failure(outcome):
    print(outcome.message, file=sys.stderr, flush=True)
