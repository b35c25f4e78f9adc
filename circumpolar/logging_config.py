import logging
import sys
from environs import Env
from .log_filters import TruncatingFilter


def setup_logging(env: Env) -> None:
    """Set up logging configuration."""
    if logging.root.handlers:  # Check if logging is already configured
        return

    log_level_str = env.str("LOGGING_LEVEL", "WARNING").upper()

    # DEBUG flag overrides log level when set to True
    debug_mode = env.bool("DEBUG", default=False)
    if debug_mode:
        log_level_str = "DEBUG"

    numeric_level = getattr(logging, log_level_str, None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {log_level_str}")

    # stdout carries the results (possibly JSON), so logs go to stderr
    logging.basicConfig(
        level=numeric_level,
        format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
        stream=sys.stderr,
    )

    # Set the level for the httpx logger, add the truncating filter, and disable propagation
    httpx_logger = logging.getLogger("httpx")
    httpx_logger.setLevel(numeric_level)
    httpx_logger.addFilter(TruncatingFilter(max_length=105))
    httpx_logger.propagate = False

    # Set the level for the httpcore logger
    logging.getLogger("httpcore").setLevel(numeric_level)

    # Set the level for our API client logger
    api_clients_logger = logging.getLogger("circumpolar.infrastructure.api.clients")
    api_clients_logger.setLevel(numeric_level)
    api_clients_logger.addFilter(TruncatingFilter(max_length=105))


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
