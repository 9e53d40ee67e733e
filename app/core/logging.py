"""로깅 설정"""

import logging

LOGGER_NAMESPACE = "app"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stream handler to the application logger namespace."""
    app_logger = logging.getLogger(LOGGER_NAMESPACE)
    app_logger.setLevel(level.upper())
    app_logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    app_logger.addHandler(handler)
    app_logger.propagate = False
    return app_logger
