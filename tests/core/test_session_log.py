import tempfile
from datetime import datetime

import pytest

from fixkit.core.session_log import (
    LogEntry,
    SessionLogger,
    Severity,
    default_log_path,
    validate_log_path,
)

FIXED = datetime(2026, 3, 14, 9, 26, 53)


def make_logger(console, tmp_path):
    return SessionLogger(console, fallback_dir=tmp_path / "fallback", clock=lambda: FIXED)


def test_entry_format():
    entry = LogEntry(FIXED, Severity.WARN, "Action cancelled by user")
    assert entry.format() == "2026-03-14 09:26:53 [WARN] Action cancelled by user"


def test_log_writes_file_and_echoes_console(console, tmp_path):
    logger = make_logger(console, tmp_path)
    path = logger.open(tmp_path / "nested" / "dir" / "session.log")
    logger.info("first")
    logger.error("second")
    logger.close()

    assert path == tmp_path / "nested" / "dir" / "session.log"
    assert path.read_text(encoding="utf-8").splitlines() == [
        "2026-03-14 09:26:53 [INFO] first",
        "2026-03-14 09:26:53 [ERROR] second",
    ]
    echoed = console.file.getvalue()
    assert "[INFO] first" in echoed
    assert "[ERROR] second" in echoed


def test_open_appends_to_existing_file(console, tmp_path):
    path = tmp_path / "session.log"
    path.write_text("earlier line\n", encoding="utf-8")

    logger = make_logger(console, tmp_path)
    logger.open(path)
    logger.warn("later")
    logger.close()

    assert path.read_text(encoding="utf-8").splitlines() == [
        "earlier line",
        "2026-03-14 09:26:53 [WARN] later",
    ]


def test_console_only_until_opened(console, tmp_path):
    logger = make_logger(console, tmp_path)
    logger.error("no admin")
    assert logger.path is None
    assert [e.severity for e in logger.entries] == [Severity.ERROR]
    assert not (tmp_path / "fallback").exists()


@pytest.fixture
def temp_dir(tmp_path, monkeypatch):
    """Point tempfile.gettempdir() at a per-test directory."""
    path = tmp_path / "tmp"
    monkeypatch.setattr(tempfile, "tempdir", str(path))
    return path


def test_unwritable_path_falls_back_to_temp_dir(console, tmp_path, temp_dir):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("x")

    logger = make_logger(console, tmp_path)
    path = logger.open(blocker / "session.log")
    logger.info("still logging")
    logger.close()

    assert path == temp_dir / "fixkit_20260314_092653.log"
    assert "still logging" in path.read_text(encoding="utf-8")
    assert console.file.getvalue().count("Cannot write log file") == 1


def test_unusable_log_dir_falls_back_to_temp_dir(console, tmp_path, temp_dir):
    blocker = tmp_path / "blocker"
    blocker.write_text("x")

    logger = SessionLogger(console, fallback_dir=blocker / "logs", clock=lambda: FIXED)
    path = logger.open(None)
    logger.info("still logging")
    logger.close()

    assert path == temp_dir / "fixkit_20260314_092653.log"
    assert "still logging" in path.read_text(encoding="utf-8")
    assert "Log file disabled" not in console.file.getvalue()


def test_tail_reads_last_lines(console, tmp_path):
    logger = make_logger(console, tmp_path)
    logger.open(tmp_path / "session.log")
    for i in range(5):
        logger.info(f"line {i}")

    tail = logger.tail(2)
    logger.close()
    assert tail == [
        "2026-03-14 09:26:53 [INFO] line 3",
        "2026-03-14 09:26:53 [INFO] line 4",
    ]


def test_default_log_path_is_run_specific(tmp_path):
    path = default_log_path(tmp_path, now=FIXED)
    assert path == tmp_path / "fixkit_20260314_092653.log"


@pytest.mark.parametrize("text", ["C:\\Logs\\repair.log", "logs/repair.log", '"D:\\quoted path\\r.log"'])
def test_validate_log_path_accepts_legal_paths(text):
    assert validate_log_path(text).name.endswith(".log")


@pytest.mark.parametrize("text", ["", "   ", "bad|name.log", "what?.log", "a<b.log", "logs/a:b.log", "C:\\x:y.log"])
def test_validate_log_path_rejects_illegal_paths(text):
    with pytest.raises(ValueError):
        validate_log_path(text)
