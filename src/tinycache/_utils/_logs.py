import logging
import sys

LOGGER_NAME = "tinycache"


def setup_logging(should_debug: bool = False) -> logging.Logger:
    """Configure the ``tinycache`` logger.

    Logs go to stderr so they never mix with the response printed on stdout.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if should_debug else logging.WARNING)

    # bind to the current stderr on every call
    logger.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
    )
    logger.addHandler(handler)

    logger.propagate = False
    return logger


def mask_secret(value: str | None) -> str:
    if not value:
        return ""
    if len(value) <= 4:
        return "***"
    return f"{value[:2]}***{value[-2:]}"
