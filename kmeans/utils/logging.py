import logging


def setup_logger(level: int = logging.INFO) -> logging.Logger:
    """
    Создаёт и настраивает корневой логгер проекта ``kmeans``.

    Логгеры модулей (``kmeans.data.dataset`` и т.п.) являются его потомками
    и пишут через тот же обработчик.

    :param level: минимальный уровень логирования
    :return: настроенный экземпляр :class:`logging.Logger`
    """
    logger = logging.getLogger("kmeans")
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "[%(asctime)s] %(levelname)s: %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    # Чтобы сообщения не дублировались через root-логгер
    logger.propagate = False

    return logger


def format_run_prefix(N: int, D: int, K: int) -> str:
    """Текстовый префикс для логов прогона: размер датасета, размерность, K."""
    return f"[N={N} D={D} K={K}]"
