"""
Tests for environment-driven configuration and logger setup.
"""
import logging

from error_handler import validate_environment_variable
from logger import setup_logger, setup_navigation_logger


def test_env_var_default_when_unset(monkeypatch):
    monkeypatch.delenv('PAGE_WINDOW_PAGE_SIZE', raising=False)
    assert validate_environment_variable('PAGE_WINDOW_PAGE_SIZE', 5, converter=int) == 5


def test_env_var_converted(monkeypatch):
    monkeypatch.setenv('PAGE_WINDOW_PAGE_SIZE', '25')
    assert validate_environment_variable('PAGE_WINDOW_PAGE_SIZE', 5, converter=int) == 25


def test_env_var_bad_value_falls_back(monkeypatch):
    """Test unconvertible or failing values fall back to the default."""
    monkeypatch.setenv('PAGE_WINDOW_SIBLING_COUNT', 'many')
    assert validate_environment_variable('PAGE_WINDOW_SIBLING_COUNT', 1, converter=int) == 1
    monkeypatch.setenv('PAGE_WINDOW_SIBLING_COUNT', '-3')
    assert validate_environment_variable('PAGE_WINDOW_SIBLING_COUNT', 1,
                                         validator=lambda v: v >= 0, converter=int) == 1


def test_logger_console_only_without_log_dir(monkeypatch):
    monkeypatch.delenv('PAGE_WINDOW_LOG_DIR', raising=False)
    monkeypatch.setenv('LOG_LEVEL', 'DEBUG')
    logger = setup_logger()
    assert logger.name == 'page_window'
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_logger_writes_files_with_log_dir(monkeypatch, tmp_path):
    """Test PAGE_WINDOW_LOG_DIR adds the rotating file handlers."""
    monkeypatch.setenv('PAGE_WINDOW_LOG_DIR', str(tmp_path))
    monkeypatch.delenv('LOG_LEVEL', raising=False)
    logger = setup_logger()
    try:
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 3
        assert (tmp_path / 'page_window.log').exists()
        assert (tmp_path / 'errors.log').exists()
    finally:
        monkeypatch.delenv('PAGE_WINDOW_LOG_DIR')
        for handler in logger.handlers:
            handler.close()
        setup_logger()


def test_navigation_logger():
    logger = setup_navigation_logger()
    assert logger.name == 'page_window.navigation'
    assert logger.propagate is False


def test_max_sibling_count_env_var(monkeypatch):
    """Test PAGE_WINDOW_MAX_SIBLING_COUNT rejects negatives and keeps the default."""
    monkeypatch.setenv('PAGE_WINDOW_MAX_SIBLING_COUNT', '4')
    assert validate_environment_variable('PAGE_WINDOW_MAX_SIBLING_COUNT', 10,
                                         validator=lambda v: v >= 0, converter=int) == 4
    monkeypatch.setenv('PAGE_WINDOW_MAX_SIBLING_COUNT', '-1')
    assert validate_environment_variable('PAGE_WINDOW_MAX_SIBLING_COUNT', 10,
                                         validator=lambda v: v >= 0, converter=int) == 10
