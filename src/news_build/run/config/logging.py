"""
Centralized logging configuration.

Entry points call bootstrap_logging() so build tasks log consistently,
using Python's native INI format when a logging.ini is present.
"""

import logging
import logging.config
import os
import sys
from pathlib import Path
from typing import Optional

VALID_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def _find_logging_config() -> Optional[Path]:
    """
    Find the logging configuration file.

    Looks for logging.ini in the current working directory, then in config/.
    """
    for candidate in (Path('logging.ini'), Path('config/logging.ini')):
        if candidate.exists():
            return candidate
    return None


def _resolve_level(debug: bool = False) -> str:
    """Level from --debug, else LOG_LEVEL, else WARNING."""
    if debug:
        return 'DEBUG'
    log_level = os.environ.get('LOG_LEVEL', '').strip().upper()
    if not log_level:
        return 'WARNING'
    if log_level not in VALID_LEVELS:
        print(f"Warning: Invalid LOG_LEVEL '{log_level}', using WARNING", file=sys.stderr)
        return 'WARNING'
    return log_level


def bootstrap_logging(debug: bool = False) -> None:
    """
    Bootstrap logging for build tasks.

    Loads logging.ini through logging.config.fileConfig() when one exists,
    otherwise configures a stderr handler. The level comes from ``debug``
    or the LOG_LEVEL environment variable and is applied after loading.

    Args:
        debug: Force DEBUG level for the news_build loggers
    """
    level = _resolve_level(debug)
    config_path = _find_logging_config()

    if config_path is not None:
        try:
            logging.config.fileConfig(str(config_path), disable_existing_loggers=False)
        except Exception as e:
            print(f"Warning: Failed to load logging config from {config_path}: {e}", file=sys.stderr)
            config_path = None

    if config_path is None:
        logging.basicConfig(
            level=getattr(logging, level),
            format='%(levelname)s: %(name)s: %(message)s',
            stream=sys.stderr
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level))
    for handler in root_logger.handlers:
        if isinstance(handler, logging.StreamHandler):
            handler.setLevel(getattr(logging, level))
    logging.getLogger('news_build').setLevel(getattr(logging, level))

    if config_path is not None:
        logging.debug(f"Logging configured from {config_path}")

