import logging
import sys

from app.core.config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logger(name: str = "machineshop") -> logging.Logger:
    """Configura el logger principal de la aplicación (una sola vez)."""
    _logger = logging.getLogger(name)
    if not _logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        _logger.addHandler(handler)
    _logger.setLevel(settings.log_level.upper())
    _logger.propagate = False
    return _logger


logger = setup_logger()
