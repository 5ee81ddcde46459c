"""
witsh Configuration Loader

Configuration management for the interpreter:
- JSON configuration file loading
- Configuration validation
- Default value handling
- Runtime configuration updates

Author: YSNRFD
Version: 1.0.0
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, List
import threading

from witsh.exceptions import ShellException


class ConfigValidationError(ShellException):
    """Raised when configuration loading or validation fails."""

    def __init__(self, message: str) -> None:
        super().__init__(message, error_code=3001)


@dataclass
class ShellConfig:
    """Interpreter behaviour settings."""
    prompt: str = "witsshell> "
    default_path: List[str] = field(default_factory=lambda: ["/bin"])
    error_message: str = "An error has occurred"
    max_parallel_segments: int = 0  # 0 = unbounded


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "WARNING"
    log_file: Optional[str] = None
    console_output: bool = False


@dataclass
class Config:
    """
    Main configuration container.

    Holds all configuration settings for the interpreter.
    """
    shell: ShellConfig = field(default_factory=ShellConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigLoader:
    """
    Configuration loader and manager.

    Handles loading configuration from JSON files, validating
    settings, and providing exposing the active configuration.

    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load('witsh.json')
        >>> print(config.shell.prompt)
        witsshell>
    """

    _instance: Optional['ConfigLoader'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'ConfigLoader':
        """Singleton pattern for configuration access."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._config = Config()
                cls._instance._loaded = False
            return cls._instance

    def load(self, config_path: str) -> Config:
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Config object with loaded settings

        Raises:
            ConfigValidationError: If the file cannot be read, parsed or
                holds values of the wrong type
        """
        path = Path(config_path)

        if not path.exists():
            raise ConfigValidationError(f"Configuration file not found: {config_path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid JSON in configuration file: {e}")
        except OSError as e:
            raise ConfigValidationError(f"Cannot read configuration file: {e}")

        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration root must be an object")

        self._config = self._parse_config(data)
        self._loaded = True
        return self._config

    def _parse_config(self, data: dict[str, Any]) -> Config:
        """Parse configuration data into a Config object."""
        config = Config()

        if 'shell' in data:
            shell_data = self._section(data, 'shell')
            config.shell = ShellConfig(
                prompt=self._typed(shell_data, 'shell.prompt', config.shell.prompt, str),
                default_path=self._path_list(
                    shell_data.get('default_path', config.shell.default_path)
                ),
                error_message=self._typed(
                    shell_data, 'shell.error_message', config.shell.error_message, str
                ),
                max_parallel_segments=self._typed(
                    shell_data, 'shell.max_parallel_segments',
                    config.shell.max_parallel_segments, int
                ),
            )
            if config.shell.max_parallel_segments < 0:
                raise ConfigValidationError("shell.max_parallel_segments must be >= 0")

        if 'logging' in data:
            log_data = self._section(data, 'logging')
            log_file = log_data.get('log_file', config.logging.log_file)
            if log_file is not None and not isinstance(log_file, str):
                raise ConfigValidationError("logging.log_file must be a string")
            config.logging = LoggingConfig(
                level=self._typed(log_data, 'logging.level', config.logging.level, str),
                log_file=log_file,
                console_output=self._typed(
                    log_data, 'logging.console_output', config.logging.console_output, bool
                ),
            )

        return config

    @staticmethod
    def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
        section = data[name]
        if not isinstance(section, dict):
            raise ConfigValidationError(f"Section '{name}' must be an object")
        return section

    @staticmethod
    def _typed(section: dict[str, Any], key: str, default: Any, expected: type) -> Any:
        value = section.get(key.split('.')[-1], default)
        # bool is a subclass of int
        if expected is int and isinstance(value, bool):
            raise ConfigValidationError(f"{key} must be an integer")
        if not isinstance(value, expected):
            raise ConfigValidationError(f"{key} must be of type {expected.__name__}")
        return value

    @staticmethod
    def _path_list(value: Any) -> List[str]:
        if not isinstance(value, list) or not all(isinstance(d, str) for d in value):
            raise ConfigValidationError("shell.default_path must be a list of strings")
        return list(value)

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        if not self._loaded:
            return Config()
        return self._config

    def reset(self) -> None:
        """Drop any loaded configuration and go back to the defaults."""
        self._config = Config()
        self._loaded = False


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config object with current settings
    """
    loader = ConfigLoader()
    return loader.config
