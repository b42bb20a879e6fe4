"""
Utility modules for pagequery.
"""

from pagequery.utils.config import Config, get_config
from pagequery.utils.url import URL, resolve
from pagequery.utils.logging import (setup_logging, setup_logging_from_config, log_exception,
                                     PerformanceLogger)

__all__ = [
    'Config',
    'get_config',
    'URL',
    'resolve',
    'setup_logging',
    'setup_logging_from_config',
    'log_exception',
    'PerformanceLogger',
]
