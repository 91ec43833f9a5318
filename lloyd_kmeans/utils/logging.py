import logging
from typing import Any, Dict, TextIO

LOGGER_NAME = "lloyd_kmeans"


def setup_logger(
    level: int = logging.INFO,
    name: str = LOGGER_NAME,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Настраивает логгер пакета для консольного запуска.

    Обработчик добавляется один раз; повторный вызов меняет уровень, а при
    переданном ``stream`` перенаправляет уже существующий обработчик.

    :param level: минимальный уровень логирования
    :param name: имя логгера, по умолчанию корневой логгер пакета
    :param stream: поток вывода, по умолчанию sys.stderr
    :return: настроенный экземпляр :class:`logging.Logger`
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(
            logging.Formatter(
                "[%(asctime)s] %(levelname)s: %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        logger.addHandler(handler)
    elif stream is not None:
        for handler in logger.handlers:
            if isinstance(handler, logging.StreamHandler):
                handler.setStream(stream)

    # Сообщения пакета не дублируются через root-логгер
    logger.propagate = False

    return logger


def format_run_prefix(meta: Dict[str, Any]) -> str:
    """
    Формирует текстовый префикс для логов одного запуска кластеризации.

    Ожидается словарь с ключами ``N``, ``D``, ``K`` и опциональным ``limit``.
    """
    limit = meta.get("limit")
    return (
        f"[N={meta['N']} D={meta['D']} K={meta['K']} "
        f"limit={'inf' if limit is None else limit}]"
    )
