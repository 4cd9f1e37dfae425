"""Test configuration and fixtures."""
import io

import pytest
import yaml
from rich.console import Console

from fixkit.core.config import FixConfig
from fixkit.core.context import RunContext
from fixkit.utils import cmd_runner
from tests.utils.fake_subprocess import FakeSubprocess


@pytest.fixture
def console():
    """Console writing to an in-memory buffer, no colour codes."""
    return Console(file=io.StringIO(), width=120, color_system=None, force_terminal=False)


@pytest.fixture
def config(tmp_path):
    raw = FixConfig.defaults().raw
    raw.update({"log_dir": str(tmp_path / "logs"), "clear_screen": False, "temp_dirs": []})
    return FixConfig(raw=raw)


@pytest.fixture
def make_context(console, config):
    """Build a RunContext whose prompts read the given lines in order."""

    def factory(*lines: str) -> RunContext:
        stream = io.StringIO("".join(f"{line}\n" for line in lines))
        return RunContext.create(config, console=console, input_stream=stream)

    return factory


@pytest.fixture
def fake_runner():
    fake = FakeSubprocess()
    cmd_runner.set_runner(fake)
    yield fake
    cmd_runner.reset_runner()


@pytest.fixture
def config_file(tmp_path):
    """Write a fixkit.yaml with a custom confirmation token."""
    data = {
        "log_dir": str(tmp_path / "logs"),
        "confirm_token": "OK",
        "critical_services": ["Dnscache", "EventLog"],
        "clear_screen": False,
    }
    path = tmp_path / "fixkit.yaml"
    path.write_text(yaml.safe_dump(data))
    return path
