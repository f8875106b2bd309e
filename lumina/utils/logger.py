import logging


def get_logger(name: str) -> logging.Logger:
    """Return a module logger. Handlers/format are configured once in ``lumina.main``."""
    return logging.getLogger(name)
