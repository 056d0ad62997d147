import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> None:
    """Attach a single stdout handler to the ``app`` logger tree."""
    logger = logging.getLogger("app")
    logger.setLevel(getattr(logging, (level or "INFO").upper(), logging.INFO))

    # create_app() may run more than once (tests); don't stack handlers
    logger.handlers = []

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
