# Path: keyseg/core/logger/__init__.py
"""
keyseg Logger Package

IPO-aware logging for the segmentation engine.

Provides separate log streams for:
- INPUT layer (grammar loading, CLI input)
- PROCESS layer (matching and ranking)
- OUTPUT layer (result rendering)
"""

from .ipo_logging import (
    setup_ipo_logging,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
