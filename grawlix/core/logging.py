import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"

# loggers that follow LOG_LEVEL instead of their library defaults
_SERVICE_LOGGERS = ("grawlix", "uvicorn", "uvicorn.error")


def setup_logging(level: str = "INFO", access_log: bool = True) -> None:
    """
    Send every record to stdout in LOG_FORMAT at ``level``.

    Request bodies are never logged by this service; with ``access_log`` off
    the uvicorn per-request lines are dropped as well (only warnings remain).
    """
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    for name in _SERVICE_LOGGERS:
        logging.getLogger(name).setLevel(level)

    access_level = level if access_log else logging.WARNING
    logging.getLogger("uvicorn.access").setLevel(access_level)
