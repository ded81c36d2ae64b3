import logging

ROOT_TAG = "payriff"

# библиотека не трогает корневой логгер
logging.getLogger(ROOT_TAG).addHandler(logging.NullHandler())


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(ROOT_TAG).setLevel(level.upper())


def log_debug(message, tag):
    logger = logging.getLogger(tag)
    logger.debug(message)


def log_error(message, tag):
    logger = logging.getLogger(tag)
    logger.error(message)


def log_warning(message, tag):
    logger = logging.getLogger(tag)
    logger.warning(message)
