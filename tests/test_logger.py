# tests/test_logger.py

import logging
import logging.handlers

import pytest

from passive_view.utils import logger as logger_module
from passive_view.utils.logger import CONSOLE_HANDLER_NAME, LoggerManager, set_console_level


@pytest.fixture
def isolated_logger(request):
    """A logger detached from the root, so pytest's own capture handlers don't interfere."""
    log = logging.getLogger(f"passive_view.tests.{request.node.name}")
    log.propagate = False
    yield log
    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()


def test_log_file_defaults_to_working_directory(tmp_path, monkeypatch, isolated_logger):
    monkeypatch.chdir(tmp_path)
    manager = LoggerManager(logger=isolated_logger)

    manager.setup()
    isolated_logger.debug("hello from the test")

    assert manager.log_file_path == tmp_path / "passive_view.log"
    for handler in isolated_logger.handlers:
        handler.flush()
    assert "hello from the test" in manager.log_file_path.read_text(encoding="utf-8")


def test_setup_twice_does_not_duplicate_handlers(tmp_path, isolated_logger):
    manager = LoggerManager(log_dir=tmp_path, logger=isolated_logger)
    manager.setup()
    manager.setup()
    assert len(isolated_logger.handlers) == 2


def test_unwritable_log_location_falls_back_to_console(tmp_path, monkeypatch, isolated_logger):
    def refuse(*args, **kwargs):
        raise PermissionError("read-only file system")

    monkeypatch.setattr(logger_module.logging.handlers, "RotatingFileHandler", refuse)
    manager = LoggerManager(log_dir=tmp_path, logger=isolated_logger)

    manager.setup()

    assert [h.get_name() for h in isolated_logger.handlers] == [CONSOLE_HANDLER_NAME]
    assert not (tmp_path / "passive_view.log").exists()


def test_set_console_level_only_touches_console_handler(tmp_path, isolated_logger):
    LoggerManager(log_dir=tmp_path, logger=isolated_logger).setup()

    set_console_level("DEBUG", logger=isolated_logger)

    levels = {h.get_name(): h.level for h in isolated_logger.handlers}
    assert levels[CONSOLE_HANDLER_NAME] == logging.DEBUG
    file_handlers = [h for h in isolated_logger.handlers
                     if isinstance(h, logging.handlers.RotatingFileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].level == logging.DEBUG


def test_set_console_level_without_console_handler_is_harmless(isolated_logger):
    set_console_level("WARNING", logger=isolated_logger)
    assert isolated_logger.handlers == []
