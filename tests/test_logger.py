# tests/test_logger.py
import logging

from utils.logger import get_logger


def test_logfile_gets_its_own_handler(tmp_path):
    logfile = tmp_path / "logs" / "unit.log"
    logger = get_logger("test_logger_file", logfile=str(logfile))

    logger.debug("written at debug")
    for handler in logger.handlers:
        handler.flush()

    assert logfile.exists()
    assert "written at debug" in logfile.read_text()
    assert any(isinstance(h, logging.FileHandler) for h in logger.handlers)


def test_debug_is_default_level(monkeypatch):
    monkeypatch.delenv("MOGA_LOG_LEVEL", raising=False)
    logger = get_logger("test_logger_default")
    assert logger.level == logging.DEBUG


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv("MOGA_LOG_LEVEL", "warning")
    logger = get_logger("test_logger_env")
    assert logger.level == logging.WARNING


def test_configured_once():
    first = get_logger("test_logger_once")
    second = get_logger("test_logger_once", logfile="unused.log")
    assert first is second
    assert len(second.handlers) == 1


def test_engine_modules_log_to_files():
    import evolution.moga
    import evolution.operators
    import evolution.pareto

    for module in (evolution.moga, evolution.operators, evolution.pareto):
        assert any(isinstance(h, logging.FileHandler) for h in module.logger.handlers)
