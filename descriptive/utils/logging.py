import sys
import logging
from typing import TextIO


def configure_logger(debug_loggers: list[str] | None = None,
                     stream: TextIO | None = None):
    root_logger = logging.getLogger()
    handler = logging.StreamHandler(
        stream=stream if stream is not None else sys.stdout)
    formatter = logging.Formatter(
        "%(asctime)s %(name)-12s %(levelname)-8s %(message)s")
    handler.setFormatter(formatter)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    if debug_loggers is not None:
        for name in debug_loggers:
            logging.getLogger(name).setLevel(logging.DEBUG)
