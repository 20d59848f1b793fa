# Path: keyseg/core/logger/ipo_logging.py
"""
IPO-Aware Logging for keyseg

Input-Process-Output separated logging for grammar-driven segmentation.

This module sets up logging with separate files for:
- INPUT layer (grammar files, CLI arguments)
- PROCESS layer (activation enumeration, token assignment, ranking)
- OUTPUT layer (result rendering)
- Full activity (everything combined)
"""

import logging
import sys
from pathlib import Path
from typing import Optional

IPO_LAYERS = ('input', 'process', 'output')


class IPOFilter(logging.Filter):
    """Filter logs by IPO layer prefix."""

    def __init__(self, layer: str):
        """
        Initialize filter for specific IPO layer.

        Args:
            layer: 'input', 'process', or 'output'
        """
        super().__init__()
        self.layer = layer

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter records by logger name prefix."""
        return record.name.startswith(self.layer)


def setup_ipo_logging(
    log_dir: Optional[Path] = None,
    log_level: str = 'INFO',
    console_output: bool = True
) -> None:
    """
    Set up IPO-aware logging for keyseg.

    When a log directory is given, creates:
    - input_activity.log (INPUT layer)
    - process_activity.log (PROCESS layer)
    - output_activity.log (OUTPUT layer)
    - full_activity.log (all activities combined)

    Args:
        log_dir: Directory for log files; None logs to console only
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console_output: Whether to also output to console (stderr)

    Raises:
        ValueError: If log_level is not a known level name

    Example:
        setup_ipo_logging(
            log_dir=Path('/var/log/keyseg'),
            log_level='DEBUG',
            console_output=False
        )
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        '[%(asctime)s] [%(levelname)s] %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)

        full_handler = logging.FileHandler(log_dir / 'full_activity.log', encoding='utf-8')
        full_handler.setLevel(logging.DEBUG)
        full_handler.setFormatter(formatter)
        root_logger.addHandler(full_handler)

        for layer in IPO_LAYERS:
            layer_handler = logging.FileHandler(
                log_dir / f'{layer}_activity.log', encoding='utf-8'
            )
            layer_handler.setLevel(logging.DEBUG)
            layer_handler.setFormatter(formatter)
            layer_handler.addFilter(IPOFilter(layer))
            root_logger.addHandler(layer_handler)

    if console_output:
        # stdout carries CLI results
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(
            '[%(levelname)s] %(name)s - %(message)s'
        ))
        root_logger.addHandler(console_handler)


def get_input_logger(name: str) -> logging.Logger:
    """
    Get logger for INPUT layer.

    Args:
        name: Logger name (e.g., 'grammar_loader', 'cli')

    Returns:
        Logger configured for INPUT layer
    """
    return logging.getLogger(f'input.{name}')


def get_process_logger(name: str) -> logging.Logger:
    """
    Get logger for PROCESS layer (matching engine).

    Args:
        name: Logger name (e.g., 'matcher.keyword_matcher')

    Returns:
        Logger configured for PROCESS layer

    Example:
        logger = get_process_logger('matcher.term_aggregator')
        logger.debug("Dispatching input to 3 terms")
    """
    return logging.getLogger(f'process.{name}')


def get_output_logger(name: str) -> logging.Logger:
    """
    Get logger for OUTPUT layer.

    Args:
        name: Logger name (e.g., 'json_renderer')

    Returns:
        Logger configured for OUTPUT layer
    """
    return logging.getLogger(f'output.{name}')


__all__ = [
    'IPOFilter',
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
