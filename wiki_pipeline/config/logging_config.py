"""
Logging Configuration
=====================

One-time logging setup for the chunking runner.
"""

import logging
import sys
from typing import Iterable, Optional

DEFAULT_LOGGER_NAME = "wiki_pipeline"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Loggers pulled in by tokenizer downloads; chatty at INFO
NOISY_LOGGERS = ("transformers", "huggingface_hub", "filelock", "urllib3")


def setup_logging(
    level: int = logging.INFO,
    log_format: Optional[str] = None,
    logger_name: str = DEFAULT_LOGGER_NAME,
    quiet: Iterable[str] = NOISY_LOGGERS,
) -> logging.Logger:
    """
    Configure logging for the chunking pipeline.

    Args:
        level: Logging level for the pipeline loggers (default: INFO)
        log_format: Custom format string (optional)
        logger_name: Name of the package logger to configure
        quiet: Third-party loggers held at WARNING unless ``level`` is stricter

    Returns:
        The package logger
    """
    logging.basicConfig(
        level=level,
        format=log_format or DEFAULT_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    for name in quiet:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    return logger
