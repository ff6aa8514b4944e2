import signal

import psutil

from smallsh.executor import ExitRecord


class JobRegistry:
    """Background processes that have not been reaped yet.

    Keyed by pid in launch order. The Popen object is kept so that the
    process can only be collected through this registry.
    """

    def __init__(self):
        self._jobs = {}

    def __len__(self):
        return len(self._jobs)

    def __contains__(self, pid):
        return pid in self._jobs

    def pids(self):
        return list(self._jobs)

    def add(self, proc, cmdline=""):
        self._jobs[proc.pid] = (proc, cmdline)

    def remove(self, pid):
        self._jobs.pop(pid, None)

    def reap(self):
        """
        Collect every finished background job without blocking.
        Returns: list of (pid, ExitRecord) for the jobs removed
        """
        done = []
        for pid, (proc, _) in list(self._jobs.items()):
            returncode = proc.poll()
            if returncode is None:
                continue
            record = ExitRecord.from_returncode(returncode)
            self.remove(pid)
            print(f"background pid {pid} is done: {record}", flush=True)
            done.append((pid, record))
        return done

    def shutdown(self):
        """SIGTERM every tracked job and wait for each one"""
        for pid, (proc, _) in list(self._jobs.items()):
            # send_signal is a no-op for a process that already ended
            proc.send_signal(signal.SIGTERM)
            proc.wait()
            self.remove(pid)

    def show(self):
        """Print tracked jobs with their live state"""
        if not self._jobs:
            print("no background jobs", flush=True)
            return

        for pid, (_, cmd) in self._jobs.items():
            try:
                status = psutil.Process(pid).status()
            except psutil.NoSuchProcess:
                status = "terminated"
            except psutil.AccessDenied:
                status = "unknown"
            print(f"{pid} {status}: {cmd}")
