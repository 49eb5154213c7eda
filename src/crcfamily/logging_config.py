# logging_config.py
from __future__ import annotations

import logging
import logging.config
import sys


def setup_logging(default_level=logging.WARNING) -> None:
    """
    Opt-in logging for scripts and tools. The library itself never calls this;
    it only logs through get_logger() and leaves handlers to the application.
    """
    logging_config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'standard': {
                'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
            },
        },
        'handlers': {
            'default': {
                'level': default_level,
                'formatter': 'standard',
                'class': 'logging.StreamHandler',
                'stream': sys.stderr,
            },
        },
        'loggers': {
            'crcfamily': {
                'handlers': ['default'],
                'level': default_level,
                'propagate': False,
            }
        }
    }

    logging.config.dictConfig(logging_config)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
