import logging
import time

LOG_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(message)s'
ROOT_LOGGER = "gamerelease"

def configure_logging(level: str) -> logging.Logger:
    """Sets the level every gamerelease.* logger inherits."""
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(level.upper())
    return root

def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        fmt = logging.Formatter(LOG_FORMAT)
        handler.setFormatter(fmt)
        logger.addHandler(handler)
    root = logging.getLogger(ROOT_LOGGER)
    # INFO until settings are applied
    if root.level == logging.NOTSET:
        root.setLevel(logging.INFO)
    return logger

class timeblock:
    def __init__(self, logger: logging.Logger, msg: str):
        self.logger = logger
        self.msg = msg
    def __enter__(self):
        self.start = time.perf_counter()
        return self
    def __exit__(self, exc_type, exc, tb):
        dt = (time.perf_counter() - self.start)*1000
        if exc_type is None:
            self.logger.info(f"{self.msg} took {dt:.1f} ms")
        else:
            self.logger.warning(f"{self.msg} failed after {dt:.1f} ms")
