import logging
import sys

from pythonjsonlogger.json import JsonFormatter


def setup_logging():
    """
    Configures and sets up structured JSON logging for the service.

    Installs a JSON formatter carrying timestamp, level, logger name, message
    and the Datadog trace/span ids on the root logger, and routes the Uvicorn
    loggers of the start API through the same handler so every line the
    service emits has one format.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    formatter = JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(dd.trace_id)s %(dd.span_id)s"
    )
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)
    root_logger.handlers = []
    root_logger.addHandler(stream_handler)

    for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error"]:
        u_logger = logging.getLogger(logger_name)
        u_logger.setLevel(logging.INFO)
        u_logger.handlers = []
        u_logger.addHandler(stream_handler)
        u_logger.propagate = False

    return root_logger
