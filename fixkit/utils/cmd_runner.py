"""Central, test-injectable subprocess runner for maintenance commands.

This module exposes:
- run(cmd, **kwargs): proxy to the current runner (defaults to subprocess.run)
- run_checked(cmd, ok_codes=(0,)): run with captured text output and raise
  OperationFailure on a missing executable or an unexpected exit status
- set_runner(runner) / reset_runner(): swap the runner in tests

Tests inject a lightweight callable (see tests/utils/fake_subprocess.py) that
accepts the same parameters as subprocess.run and returns an object with
returncode, stdout and stderr attributes.
"""
from __future__ import annotations

import subprocess
from typing import Callable, Iterable, Sequence

from fixkit.core.errors import OperationFailure

_runner: Callable = subprocess.run


def run(cmd, **kwargs):
    """Run command via the currently configured runner."""
    return _runner(cmd, **kwargs)


def run_checked(cmd: Sequence[str], ok_codes: Iterable[int] = (0,)):
    """Run ``cmd`` capturing text output; raise OperationFailure on error.

    Console tools such as sfc and DISM write in the OEM code page, so decode
    errors are replaced rather than raised.
    """
    command = " ".join(cmd)
    try:
        result = run(
            list(cmd),
            capture_output=True,
            text=True,
            errors="replace",
            check=False,
        )
    except FileNotFoundError:
        raise OperationFailure(f"command not found: {cmd[0]}")
    except OSError as exc:
        raise OperationFailure(f"{command}: {exc}")

    if result.returncode not in tuple(ok_codes):
        raise OperationFailure(f"{command} exited with code {result.returncode}{_last_line(result)}")
    return result


def _last_line(result) -> str:
    for stream in (result.stderr, result.stdout):
        lines = [line.strip() for line in (stream or "").splitlines() if line.strip()]
        if lines:
            return f": {lines[-1]}"
    return ""


def set_runner(runner: Callable):
    """Set custom runner for tests.

    runner: callable(cmd, **kwargs) -> CompletedProcess-like
    """
    global _runner
    _runner = runner


def reset_runner():
    """Reset runner to subprocess.run."""
    global _runner
    _runner = subprocess.run
