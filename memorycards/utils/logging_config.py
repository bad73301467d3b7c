"""
Logging setup for the memorycards logger tree.

Every module logs through logging.getLogger(__name__), so configuring the
"memorycards" logger here covers the whole package.
"""
import logging
import logging.handlers
import os

FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(app) -> logging.Logger:
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    formatter = logging.Formatter(FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    logger = logging.getLogger("memorycards")
    logger.setLevel(level)
    logger.handlers.clear()

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)

    log_file = app.config.get("LOG_FILE")
    if log_file:
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Request lines from the dev server are noise below WARNING
    logging.getLogger("werkzeug").setLevel(max(level, logging.WARNING))
    return logger
