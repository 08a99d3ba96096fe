"""
Logging setup for Rewards360.

Called once from the application factory before any extension is
initialized so that import-time log records are formatted consistently.
"""
import logging
import os
import sys

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'

# Third-party loggers that are too chatty at INFO
QUIET_LOGGERS = ('sqlalchemy.engine', 'werkzeug', 'urllib3')


def setup_logging(level: str = None) -> None:
    """
    Configure the root logger.

    Args:
        level: Log level name. Defaults to the LOG_LEVEL environment
            variable, then INFO.
    """
    level_name = (level or os.getenv('LOG_LEVEL', 'INFO')).upper()
    root = logging.getLogger()
    root.setLevel(getattr(logging, level_name, logging.INFO))

    # Avoid stacking handlers when create_app() runs more than once (tests)
    if not any(getattr(h, '_rewards360', False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._rewards360 = True
        root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
