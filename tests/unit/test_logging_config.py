"""
Тесты для настройки логирования

Проверяет:
1. setup_logging настраивает логгер пространства 'matrixkit'
2. Повторный вызов не дублирует handlers
3. Опциональный файловый handler
4. Операции Matrix пишут DEBUG записи и не пишут ничего при ошибках
"""

import logging

import pytest

from matrixkit import FormatError, Matrix
from matrixkit.logging_config import LOG_FORMAT, LOGGER_NAMESPACE, setup_logging


@pytest.fixture(autouse=True)
def reset_matrixkit_logger():
    logger = logging.getLogger("matrixkit")
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    yield
    for handler in logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


class TestSetupLogging:
    """Тесты для setup_logging"""

    def test_configures_package_logger(self) -> None:
        logger = setup_logging(logging.DEBUG)
        assert logger.name == "matrixkit"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_repeated_calls_do_not_duplicate(self) -> None:
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_file_handler(self, tmp_path) -> None:
        log_file = tmp_path / "matrixkit.log"
        logger = setup_logging(logging.DEBUG, log_file=str(log_file))
        assert len(logger.handlers) == 2

        Matrix([[1, 2]])
        for handler in logger.handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "matrixkit.core.domain.matrix" in content
        assert "Constructed generic matrix (1 x 2)" in content

    def test_handlers_share_format(self, tmp_path) -> None:
        logger = setup_logging(log_file=str(tmp_path / "matrixkit.log"))
        assert logger.name == LOGGER_NAMESPACE
        for handler in logger.handlers:
            assert handler.formatter is not None
            assert handler.formatter._fmt == LOG_FORMAT

    def test_file_overwritten_on_setup(self, tmp_path) -> None:
        log_file = tmp_path / "matrixkit.log"
        log_file.write_text("stale record\n", encoding="utf-8")
        logger = setup_logging(logging.DEBUG, log_file=str(log_file))
        for handler in logger.handlers:
            handler.flush()
        assert "stale record" not in log_file.read_text(encoding="utf-8")


class TestLibraryLogging:
    """Тесты для DEBUG записей библиотеки"""

    def test_construction_logged(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="matrixkit"):
            Matrix.parse("1, 2; 3, 4")
        messages = [record.getMessage() for record in caplog.records]
        assert "Parsed notation into 2 row(s)" in messages
        assert "Constructed generic matrix (2 x 2)" in messages

    def test_formulate_logged(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="matrixkit"):
            Matrix.formulate(1, 2, 1, 2)
        assert any("Formulated 2 entries" in r.getMessage() for r in caplog.records)

    def test_errors_not_logged(self, caplog) -> None:
        """Ошибки пробрасываются, а не логируются"""
        with caplog.at_level(logging.DEBUG, logger="matrixkit"):
            with pytest.raises(FormatError):
                Matrix.parse("1, x")
        assert not any(record.levelno >= logging.WARNING for record in caplog.records)
