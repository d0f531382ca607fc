import logging
from logging.config import dictConfig

from config import LOG_FORMAT, LOG_LEVEL


def setup_logging(level=LOG_LEVEL):
    """配置全局日志（控制台输出）"""
    level = str(level).upper()
    dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": LOG_FORMAT},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "level": level,
            },
        },
        "root": {
            "handlers": ["console"],
            "level": level,
        },
    })
    logger = logging.getLogger("cliphis")
    logger.debug("日志已初始化")
    return logger
