import io

from rich.console import Console

from fixctl import cli
from fixctl.cli import EXIT_USAGE


def make_console():
    return Console(file=io.StringIO(), width=140, color_system=None)


def test_list_prints_catalog(config_file):
    console = make_console()
    assert cli.cmd_list(str(config_file), console=console) == 0
    out = console.file.getvalue()
    assert "Show system information" in out
    assert "Repair Microsoft Store" in out
    assert "View session log" in out


def test_main_list(capsys, config_file):
    assert cli.main(["--config", str(config_file), "list"]) == 0
    assert "Repair operations" in capsys.readouterr().out


def test_run_unknown_selector(config_file):
    console = make_console()
    assert cli.cmd_run("42", str(config_file), None, console=console) == EXIT_USAGE
    assert "Invalid choice: 42" in console.file.getvalue()


def test_run_single_operation(config_file, fake_runner, tmp_path):
    console = make_console()
    log_file = tmp_path / "run.log"
    code = cli.cmd_run(
        "1",
        str(config_file),
        str(log_file),
        console=console,
        input_stream=io.StringIO("\n"),
        privilege_check=lambda: True,
    )
    assert code == 0
    assert fake_runner.ran("systeminfo")
    text = log_file.read_text(encoding="utf-8")
    assert "1. SUCCESS: Show system information" in text
    assert text.rstrip().endswith("Exiting fixkit")


def test_run_uses_configured_confirmation_token(config_file, fake_runner, tmp_path):
    console = make_console()
    code = cli.cmd_run(
        "5",
        str(config_file),
        str(tmp_path / "run.log"),
        console=console,
        input_stream=io.StringIO("OK\n\n"),
        privilege_check=lambda: True,
    )
    assert code == 0
    assert fake_runner.ran("sfc /scannow")


def test_menu_without_privileges(config_file, tmp_path):
    console = make_console()
    code = cli.cmd_menu(
        str(config_file),
        str(tmp_path / "menu.log"),
        console=console,
        input_stream=io.StringIO("\n"),
        privilege_check=lambda: False,
    )
    assert code == 1
    assert "Administrator privileges are required" in console.file.getvalue()


def test_bad_config_reports_error(tmp_path, capsys):
    bad = tmp_path / "bad.yaml"
    bad.write_text("[unclosed")
    assert cli.main(["--config", str(bad), "list"]) == 1
    assert "Error starting repair console" in capsys.readouterr().err
