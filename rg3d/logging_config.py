"""
Налаштування логування для простору імен 'rg3d'.
Бібліотека сама хендлерів не ставить: це викликають демо-скрипти/застосунки.
"""
import logging
import sys
from typing import Optional

FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATEFMT = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Налаштовує логер 'rg3d': stdout-хендлер і (опційно) файл.

    Args:
        level: рівень логування (logging.DEBUG, logging.INFO, ...)
        log_file: необов'язковий шлях до файлу логу.
    """
    logger = logging.getLogger("rg3d")
    logger.setLevel(level)

    # повторний виклик не дублює вивід
    if logger.handlers:
        for h in list(logger.handlers):
            logger.removeHandler(h)
            h.close()

    formatter = logging.Formatter(FORMAT, datefmt=DATEFMT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized.")
    return logger
