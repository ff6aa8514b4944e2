import os
import sys
from dataclasses import dataclass, field

from smallsh.builtin import execute_builtin
from smallsh.config import SHELL_NAME
from smallsh.executor import Background, Completed, ExitRecord, execute_command, report_failure
from smallsh.job_control import JobRegistry
from smallsh.parser import parse_command
from smallsh.prompt import init_readline, read_line
from smallsh.signal_mode import init_signal_handlers


@dataclass
class Session:
    """State carried from one input line to the next."""

    pid: int = field(default_factory=os.getpid)
    jobs: JobRegistry = field(default_factory=JobRegistry)
    last_status: ExitRecord = field(default_factory=ExitRecord)


def run_line(line, session):
    """Parse one input line and run it as a built-in or external command"""
    cmd = parse_command(line, session.pid)
    if cmd is None:
        return

    if execute_builtin(cmd, session):
        return

    outcome = execute_command(cmd)
    if isinstance(outcome, Background):
        session.jobs.add(outcome.proc, str(cmd))
    elif isinstance(outcome, Completed):
        session.last_status = outcome.record
    else:
        report_failure(outcome)
        if outcome.record is not None:
            session.last_status = outcome.record


def main_loop(session=None):
    """Main shell loop"""
    if session is None:
        session = Session()

    init_signal_handlers()
    init_readline()
    # undecodable bytes reach argv unchanged through os.fsencode
    for stream in (sys.stdin, sys.stdout):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(errors="surrogateescape")

    try:
        while True:
            session.jobs.reap()
            try:
                line = read_line()
            except EOFError:
                print()
                break

            run_line(line, session)
    finally:
        session.jobs.shutdown()


def main():
    try:
        main_loop()
    except OSError as e:
        print(f"{SHELL_NAME}: fatal: {e}", file=sys.stderr)
        sys.exit(1)
    sys.exit(0)
