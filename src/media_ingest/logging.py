import logging
import sys

from pythonjsonlogger.json import JsonFormatter


def setup_logging():
    """
    Configures and sets up structured JSON logging for the application.

    Installs a single stdout handler with a JSON formatter (timestamp, level,
    logger name, message, trace_id and span_id) on the root logger, replacing
    whatever handlers were there. Safe to call from every module.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    formatter = JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
    )
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)
    root_logger.handlers = []
    root_logger.addHandler(stream_handler)

    for logger_name in ["urllib3", "moviepy"]:
        lib_logger = logging.getLogger(logger_name)
        lib_logger.setLevel(logging.WARNING)

    return root_logger
