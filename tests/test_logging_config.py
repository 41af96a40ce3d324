import logging

import pytest

from lathecad.logging_config import setup_logging


@pytest.fixture
def reset_logger():
    yield
    logger = logging.getLogger('lathecad')
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_console_only(reset_logger):
    logger = setup_logging(logging.WARNING)
    assert logger.name == 'lathecad'
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1


def test_repeated_setup_does_not_stack_handlers(reset_logger):
    setup_logging()
    logger = setup_logging()
    assert len(logger.handlers) == 1


def test_level_by_name_and_log_file(tmp_path, reset_logger):
    log_file = tmp_path / 'run.log'
    logger = setup_logging('debug', log_file=str(log_file))
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2

    logging.getLogger('lathecad.revolve').info('revolving')
    for handler in logger.handlers:
        handler.flush()

    text = log_file.read_text()
    assert 'lathecad - DEBUG - Logging initialized.' in text
    assert 'lathecad.revolve - INFO - revolving' in text
