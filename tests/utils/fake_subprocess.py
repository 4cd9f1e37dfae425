"""Test helper: fake subprocess runner for maintenance commands.

Provides:
- make_completed_process(cmd, returncode=0, stdout='', stderr='') -> CompletedProcess
- FakeSubprocess: callable object mapping command substrings to results

Usage example in tests:

    from tests.utils.fake_subprocess import FakeSubprocess
    from fixkit.utils import cmd_runner

    fake = FakeSubprocess()
    fake.when("sfc /scannow").then_stdout("Windows Resource Protection did not find any integrity violations.")
    fake.when("chkdsk").then_stdout("", returncode=3, stderr="Errors found.")
    cmd_runner.set_runner(fake)

Rules match on a substring of the space-joined command; the first matching
rule wins. Unmatched commands succeed with empty output. Every call is kept
in ``calls`` for assertions.
"""
from __future__ import annotations

import subprocess
from typing import Callable, List, Tuple


def make_completed_process(cmd, returncode: int = 0, stdout: str = "", stderr: str = ""):
    return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr=stderr)


class FakeSubprocess:
    """A small callable object faking subprocess.run."""

    def __init__(self):
        self._rules: List[Tuple[str, Callable[[list], subprocess.CompletedProcess]]] = []
        self.calls: List[str] = []

    def when(self, cmd_substring: str):
        parent = self

        class _Then:
            def then_stdout(self, stdout: str, returncode: int = 0, stderr: str = ""):
                parent._rules.append(
                    (cmd_substring, lambda cmd: make_completed_process(cmd, returncode, stdout=stdout, stderr=stderr))
                )
                return parent

            def then_raise(self, exc: BaseException):
                def factory(cmd):
                    raise exc

                parent._rules.append((cmd_substring, factory))
                return parent

        return _Then()

    def ran(self, cmd_substring: str) -> bool:
        return any(cmd_substring in joined for joined in self.calls)

    def __call__(self, cmd, **kwargs):
        joined = " ".join(cmd) if isinstance(cmd, (list, tuple)) else str(cmd)
        self.calls.append(joined)
        for substr, factory in self._rules:
            if substr in joined:
                return factory(cmd)
        return make_completed_process(cmd, 0, stdout="", stderr="")
