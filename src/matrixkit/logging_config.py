"""
Logging Config — Настройка логирования matrixkit

Библиотека по умолчанию молчит: пакет вешает NullHandler на логгер
"matrixkit", а модули пишут только DEBUG записи через
logging.getLogger(__name__):
- matrixkit.core.domain.notation: "Parsed notation into N row(s)"
- matrixkit.core.domain.matrix: "Constructed <kind> matrix (R x C)",
  "Formulated N entries into R x C"

Ошибки (ShapeError, FormatError, MatrixIndexError) не логируются,
они пробрасываются вызывающему коду.

setup_logging предназначен для приложений и отладки: включает вывод
записей пространства "matrixkit" в stdout и, опционально, в файл.
"""

import logging
import sys
from typing import Final

# =============================================================================
# CONSTANTS
# =============================================================================

# Корневой логгер пакета, все модульные логгеры являются его потомками
LOGGER_NAMESPACE: Final[str] = "matrixkit"

LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT: Final[str] = "%H:%M:%S"


# =============================================================================
# SETUP
# =============================================================================


def _build_handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    return handler


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> logging.Logger:
    """
    Настройка логгера пространства "matrixkit".

    Повторный вызов заменяет handlers, а не добавляет новые: каждая
    запись выводится ровно один раз.

    Args:
        level: Уровень логирования (logging.DEBUG показывает создание матриц)
        log_file: Путь к файлу журнала (перезаписывается, UTF-8)

    Returns:
        Настроенный логгер "matrixkit"

    Examples:
        >>> logger = setup_logging(logging.DEBUG)
        >>> Matrix.parse("1, 2; 3, 4")  # doctest: +SKIP
        12:00:00 - matrixkit.core.domain.notation - DEBUG - Parsed notation into 2 row(s)
    """
    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(level)
    logger.handlers.clear()

    logger.addHandler(_build_handler(logging.StreamHandler(sys.stdout), level))
    if log_file:
        logger.addHandler(
            _build_handler(logging.FileHandler(log_file, mode="w", encoding="utf-8"), level)
        )

    logger.debug("Logging configured at level %s", logging.getLevelName(level))
    return logger
