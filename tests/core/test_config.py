from pathlib import Path

import pytest

from fixkit.core.config import CONFIG_ENV, DEFAULTS, FixConfig, load_config


def test_packaged_config_loads():
    config = load_config()
    assert config.confirm_token == "Y"
    assert config.system_drive == "C:"
    assert "EventLog" in config.critical_services
    assert config.log_dir is None


def test_file_overrides_defaults(config_file):
    config = load_config(config_file)
    assert config.confirm_token == "OK"
    assert config.critical_services == ["Dnscache", "EventLog"]
    assert config.clear_screen is False
    assert config.log_view_lines == DEFAULTS["log_view_lines"]


def test_env_var_selects_config(config_file, monkeypatch):
    monkeypatch.setenv(CONFIG_ENV, str(config_file))
    assert load_config().confirm_token == "OK"


def test_non_mapping_root_is_rejected(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("- just\n- a list\n")
    with pytest.raises(ValueError):
        FixConfig.from_file(path)


def test_require_missing_key():
    with pytest.raises(KeyError):
        FixConfig(raw={}).require("confirm_token")


def test_temp_dirs_expand_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("FIXKIT_TEST_TMP", str(tmp_path))
    config = FixConfig(raw={"temp_dirs": ["$FIXKIT_TEST_TMP", "%FIXKIT_UNSET_VAR%"]})
    assert config.temp_dirs == [tmp_path]


def test_update_log_path_default():
    config = FixConfig.defaults()
    assert config.update_log_path == Path.home() / "Desktop" / "WindowsUpdate.log"
