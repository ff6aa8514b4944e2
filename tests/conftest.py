"""Shared fixtures for the smallsh test suite."""

from __future__ import annotations

import signal

import pytest

from smallsh import signal_mode


@pytest.fixture(autouse=True)
def normal_mode():
    """Every test starts outside foreground-only mode."""
    signal_mode.reset_mode()
    yield
    signal_mode.reset_mode()


@pytest.fixture
def restore_signals():
    """Put SIGINT/SIGTSTP back the way pytest had them."""
    saved = {sig: signal.getsignal(sig) for sig in (signal.SIGINT, signal.SIGTSTP)}
    yield
    for sig, handler in saved.items():
        signal.signal(sig, handler)


@pytest.fixture
def foreground_only():
    """Switch foreground-only mode on for one test."""
    signal_mode.handle_sigtstp(signal.SIGTSTP, None)
    assert signal_mode.foreground_only()
    yield
