from pathlib import Path

import pytest

from sshc.adapters.config.loader import ConfigLoader
from sshc.core.exceptions import ConfigError
from sshc.core.settings import Settings


def test_defaults_live_under_home(isolated_home):
    settings = ConfigLoader().load_settings()

    assert settings.data_file == isolated_home / ".sshc" / "data" / "ssh.json"
    assert settings.ssh_binary == "ssh"
    assert settings.ssh_config == isolated_home / ".ssh" / "config"
    assert settings.log_level == "INFO"
    assert settings.log_file is None


def test_toml_file_values(tmp_path):
    config = tmp_path / "sshc.toml"
    config.write_text(
        'data_file = "~/book.json"\nssh_binary = "/opt/ssh"\nunrelated = 1\n',
        encoding="utf-8",
    )

    merged = ConfigLoader().load(toml_path=config)

    assert merged == {"data_file": "~/book.json", "ssh_binary": "/opt/ssh"}


def test_default_toml_is_read_when_present(isolated_home):
    (isolated_home / ".sshc").mkdir()
    (isolated_home / ".sshc" / "config.toml").write_text('ssh_binary = "autossh"\n', encoding="utf-8")

    assert ConfigLoader().load_settings().ssh_binary == "autossh"


def test_priority_cli_over_env_over_toml(tmp_path, monkeypatch):
    config = tmp_path / "sshc.toml"
    config.write_text('data_file = "/from/toml.json"\nssh_binary = "toml-ssh"\nlog_level = "ERROR"\n', encoding="utf-8")
    monkeypatch.setenv("SSHC_DATA_FILE", "/from/env.json")
    monkeypatch.setenv("SSHC_SSH_BINARY", "env-ssh")

    settings = ConfigLoader().load_settings(
        toml_path=config,
        cli_overrides={"data_file": Path("/from/cli.json"), "ssh_binary": None},
    )

    assert settings.data_file == Path("/from/cli.json")
    assert settings.ssh_binary == "env-ssh"
    assert settings.log_level == "ERROR"


def test_missing_explicit_toml_raises(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        ConfigLoader().load(toml_path=tmp_path / "absent.toml")


def test_invalid_toml_raises(tmp_path):
    config = tmp_path / "broken.toml"
    config.write_text("data_file = ", encoding="utf-8")

    with pytest.raises(ConfigError) as exc_info:
        ConfigLoader().load(toml_path=config)

    assert exc_info.value.exit_code == 78


def test_relative_paths_become_absolute(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    settings = Settings.from_dict({"data_file": "book.json", "log_file": "logs/sshc.log"})

    assert settings.data_file == tmp_path / "book.json"
    assert settings.log_file == tmp_path / "logs" / "sshc.log"
