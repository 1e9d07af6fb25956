import logging

import pytest

from hexwordpuzzle.logging_config import setup_logging


@pytest.fixture(autouse=True)
def restore_package_logger():
    yield
    logger = logging.getLogger("hexwordpuzzle")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_setup_logging_is_repeatable(tmp_path):
    log_file = tmp_path / "app.log"
    setup_logging(level="debug", log_file=str(log_file))
    logger = setup_logging(level=logging.INFO)

    assert logger.name == "hexwordpuzzle"
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "app.log"
    logger = setup_logging(level=logging.DEBUG, log_file=str(log_file))
    logging.getLogger("hexwordpuzzle.model.ring").debug("ring laid out")
    for handler in logger.handlers:
        handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "Logging initialized." in text
    assert "hexwordpuzzle.model.ring - DEBUG - ring laid out" in text


def test_unknown_level_name():
    with pytest.raises(ValueError):
        setup_logging(level="loud")
