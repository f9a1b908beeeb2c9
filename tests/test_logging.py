import logging

import pytest

from sshc.core.logging import get_logger, setup_logging


@pytest.fixture(autouse=True)
def reset_app_logger():
    yield
    app_logger = logging.getLogger("sshc")
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()


def test_file_receives_records_from_module_loggers(tmp_path):
    log_file = tmp_path / "logs" / "sshc.log"

    setup_logging(level="DEBUG", log_file=log_file)
    get_logger("sshc.infrastructure.state.file_store").debug("Loaded %d connection(s)", 2)

    text = log_file.read_text(encoding="utf-8")
    assert "sshc.infrastructure.state.file_store - DEBUG - Loaded 2 connection(s)" in text


def test_level_filters_file_records(tmp_path):
    log_file = tmp_path / "sshc.log"

    setup_logging(level="WARNING", log_file=log_file)
    get_logger("sshc.adapters.cli.commands").info("quiet")
    get_logger("sshc.adapters.cli.commands").warning("loud")

    text = log_file.read_text(encoding="utf-8")
    assert "quiet" not in text
    assert "loud" in text


def test_root_logger_is_left_alone():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level

    app_logger = setup_logging(level="DEBUG")

    assert app_logger.name == "sshc"
    assert app_logger.propagate is False
    assert root.handlers == handlers
    assert root.level == level


def test_repeated_setup_replaces_handlers(tmp_path):
    setup_logging(log_file=tmp_path / "first.log")
    app_logger = setup_logging()

    assert len(app_logger.handlers) == 1


def test_unknown_level_falls_back_to_info():
    assert setup_logging(level="chatty").level == logging.INFO


def test_cli_log_file_option(invoke, tmp_path):
    log_file = tmp_path / "cli.log"

    result = invoke("--log-file", str(log_file), "-l", "DEBUG", "list")

    assert result.exit_code == 0
    assert "Created empty connection store" in log_file.read_text(encoding="utf-8")
