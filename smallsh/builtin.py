import os


def builtin_cd(args):
    """Change directory; errors leave the cwd as it was"""
    path = args[0] if args else os.path.expanduser("~")
    try:
        os.chdir(path)
    except (OSError, ValueError):
        pass


def builtin_status(session):
    print(session.last_status, flush=True)


def builtin_jobs(session):
    session.jobs.show()


def execute_builtin(cmd, session):
    """
    Execute built-in command if it matches.
    Returns: True if cmd was a built-in
    Raises: SystemExit for 'exit', after every background job is reaped
    """
    if cmd.name == "exit":
        session.jobs.shutdown()
        raise SystemExit(0)
    elif cmd.name == "cd":
        builtin_cd(cmd.args)
    elif cmd.name == "status":
        builtin_status(session)
    elif cmd.name == "jobs":
        builtin_jobs(session)
    else:
        return False
    return True
