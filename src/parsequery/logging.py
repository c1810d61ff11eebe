"""Logging helpers for the command line and configuration loaders."""
import logging
import sys


class _StderrStream:
    """Writes to whatever ``sys.stderr`` is at the time of the write."""

    def write(self, data):
        return sys.stderr.write(data)

    def flush(self):
        return sys.stderr.flush()


stderr_stream = _StderrStream()

default_handler = logging.StreamHandler(stderr_stream)
default_handler.setFormatter(
    logging.Formatter("[%(asctime)s] %(levelname)s in %(module)s: %(message)s")
)


def has_level_handler(logger):
    level = logger.getEffectiveLevel()
    current = logger
    while current:
        if any(handler.level <= level for handler in current.handlers):
            return True
        if not current.propagate:
            break
        current = current.parent
    return False


def create_logger(name="parsequery", debug=False):
    """Return the named logger, adding :data:`default_handler` if needed."""
    logger = logging.getLogger(name)
    if debug and not logger.level:
        logger.setLevel(logging.DEBUG)
    if not has_level_handler(logger):
        logger.addHandler(default_handler)
    return logger
