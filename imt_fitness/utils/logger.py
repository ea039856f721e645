import os
import logging
from logging.handlers import RotatingFileHandler

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(app):
    """Attach level, console format and an optional rotating file to the app logger.

    The package logger ``imt_fitness`` shares the same handlers so service
    modules can log through ``logging.getLogger(__name__)``.
    """
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    package_logger = logging.getLogger("imt_fitness")
    package_logger.setLevel(level)
    app.logger.setLevel(level)

    if not package_logger.handlers:
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        package_logger.addHandler(console)

    log_file = app.config.get("LOG_FILE")
    if log_file and not any(isinstance(h, RotatingFileHandler) for h in app.logger.handlers):
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(log_file, maxBytes=1024 * 1024, backupCount=7, encoding="utf-8")
        file_handler.setFormatter(formatter)
        app.logger.addHandler(file_handler)
        package_logger.addHandler(file_handler)

    return app.logger
