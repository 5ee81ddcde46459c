"""
witsh Core Module

Configuration loading shared by every subsystem.
"""

from .config_loader import (
    ConfigLoader,
    Config,
    ShellConfig,
    LoggingConfig,
    ConfigValidationError,
    get_config,
)

__all__ = [
    'ConfigLoader',
    'Config',
    'ShellConfig',
    'LoggingConfig',
    'ConfigValidationError',
    'get_config',
]
