import logging

LOGGER_NAME = "app"


def _make_formatter() -> logging.Formatter:
    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(module)s.%(funcName)s | %(message)s"
    return logging.Formatter(fmt, datefmt="%Y-%m-%d %H:%M:%S")


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the package logger once. Module loggers created with
    logging.getLogger(__name__) under app.* propagate here.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    if not logger.handlers:
        ch = logging.StreamHandler()
        ch.setFormatter(_make_formatter())
        logger.addHandler(ch)

    return logger
