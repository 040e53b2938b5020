import logging
import sys


class PackageStreamHandler(logging.StreamHandler):
    """Stdout handler installed by ``setup_logging``."""


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Attach a stdout handler to the ``densetensor`` logger.
    
    Records use the format "timestamp - logger name - level - message".
    Calling this again replaces the handler instead of adding a second one.
    """
    logger = logging.getLogger("densetensor")
    for handler in list(logger.handlers):
        if isinstance(handler, PackageStreamHandler):
            logger.removeHandler(handler)
    handler = PackageStreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    )
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
