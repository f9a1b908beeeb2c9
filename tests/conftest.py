import json

import pytest
from typer.testing import CliRunner

from sshc.adapters.cli import commands
from sshc.adapters.cli.app import app
from sshc.core.interfaces import PromptProvider

ENV_KEYS = ("SSHC_DATA_FILE", "SSHC_SSH_BINARY", "SSHC_SSH_CONFIG", "SSHC_LOG_LEVEL", "SSHC_LOG_FILE")


class ScriptedPrompts(PromptProvider):
    """Prompt provider that replays canned answers and records what was asked"""

    def __init__(self):
        self.answers = []
        self.confirm_answer = True
        self.pick = None
        self.interrupt = False
        self.prompts = []
        self.confirms = []
        self.selections = []
        self.sources = []

    def prompt(self, message, default=None):
        self.prompts.append((message, default))
        if self.interrupt:
            raise KeyboardInterrupt
        answer = self.answers.pop(0)
        if answer == "" and default is not None:
            return default
        return answer

    def confirm(self, message, default=False):
        self.confirms.append((message, default))
        return self.confirm_answer

    def select(self, message, source):
        self.sources.append(source)
        choices = list(source(""))
        self.selections.append(choices)
        if self.interrupt:
            raise KeyboardInterrupt
        if self.pick is None:
            return choices[0].key
        return self.pick


class FakeProcess:
    def __init__(self, command):
        self.command = command
        self.waited = False

    def wait(self):
        self.waited = True
        return 0


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return home


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "data" / "ssh.json"


@pytest.fixture
def write_store(data_file):
    def _write(entries):
        data_file.parent.mkdir(parents=True, exist_ok=True)
        data_file.write_text(json.dumps(entries, indent=2), encoding="utf-8")
        return data_file

    return _write


@pytest.fixture
def read_store(data_file):
    def _read():
        return json.loads(data_file.read_text(encoding="utf-8"))

    return _read


@pytest.fixture
def prompts(monkeypatch):
    scripted = ScriptedPrompts()
    monkeypatch.setattr(commands, "prompt_provider", scripted)
    return scripted


@pytest.fixture
def spawned(monkeypatch):
    """Replace process creation in the launcher; yields the started fakes"""
    started = []

    def fake_popen(command, **kwargs):
        assert kwargs == {}
        process = FakeProcess(command)
        started.append(process)
        return process

    monkeypatch.setattr("sshc.infrastructure.launcher.subprocess.Popen", fake_popen)
    return started


@pytest.fixture
def invoke(data_file):
    runner = CliRunner()

    def _invoke(*args, env=None):
        return runner.invoke(app, ["--data-file", str(data_file), *args], env=env)

    return _invoke
