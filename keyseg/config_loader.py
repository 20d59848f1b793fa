# Path: keyseg/config_loader.py
"""
Configuration Loader for keyseg

Loads configuration from environment variables, optionally seeded from a
.env file. Singleton pattern ensures consistent configuration across the
CLI and the grammar loader.

Engine objects never read configuration themselves; entry points pass the
values they need explicitly.
"""

import os
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from .constants import (
    DEFAULT_JSON_INDENT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_WORKERS,
    DEFAULT_SEPARATOR,
    DEFAULT_TIEBREAKER,
    ENV_PREFIX,
    TiebreakerType,
)


class ConfigLoader:
    """
    Singleton configuration loader for keyseg.

    Loads configuration from environment variables with validation,
    type conversion, and defaults from constants.py.

    Example:
        config = ConfigLoader()
        grammar_dir = config.get('grammar_dir')    # Path or None
        workers = config.get('max_workers')        # int
    """

    _instance: Optional['ConfigLoader'] = None
    _initialized: bool = False

    def __new__(cls) -> 'ConfigLoader':
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """
        Initialize configuration loader.

        Only runs once due to singleton pattern. Loads a .env file from the
        current working directory, then the project root, when present.
        Variables already set in the environment win.
        """
        if ConfigLoader._initialized:
            return

        project_root = Path(__file__).resolve().parent.parent
        for env_path in (Path.cwd() / '.env', project_root / '.env'):
            if env_path.exists():
                load_dotenv(dotenv_path=env_path, interpolate=True)
                break

        self._config = self._load_configuration()
        ConfigLoader._initialized = True

    def _load_configuration(self) -> dict[str, Any]:
        """
        Load and validate all configuration from environment.

        Returns:
            Dictionary of validated configuration values with proper types

        Raises:
            ValueError: If a value cannot be interpreted
        """
        config = {
            # ================================================================
            # ENVIRONMENT & DEBUG
            # ================================================================
            'environment': self._get_env('ENVIRONMENT', 'development'),
            'debug': self._get_bool('DEBUG', False),

            # ================================================================
            # GRAMMAR
            # ================================================================
            'grammar_dir': self._get_path('GRAMMAR_DIR'),
            'default_separator': self._get_env('DEFAULT_SEPARATOR', DEFAULT_SEPARATOR),

            # ================================================================
            # AGGREGATION
            # ================================================================
            'max_workers': max(1, self._get_int('MAX_WORKERS', DEFAULT_MAX_WORKERS)),
            'tiebreaker': self._get_tiebreaker('TIEBREAKER', DEFAULT_TIEBREAKER),

            # ================================================================
            # LOGGING CONFIGURATION
            # ================================================================
            'log_dir': self._get_path('LOG_DIR'),
            'log_level': self._get_env('LOG_LEVEL', DEFAULT_LOG_LEVEL).upper(),
            'log_console': self._get_bool('LOG_CONSOLE', True),

            # ================================================================
            # OUTPUT CONFIGURATION
            # ================================================================
            'json_indent': self._get_int('JSON_INDENT', DEFAULT_JSON_INDENT),
        }

        if config['debug']:
            config['log_level'] = 'DEBUG'

        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return self._config.get(key, default)

    def _get_path(self, key: str, required: bool = False) -> Optional[Path]:
        """
        Get path from environment variable.

        Args:
            key: Variable name without the KEYSEG_ prefix
            required: If True, raise error when missing

        Returns:
            Path object or None

        Raises:
            ValueError: If required and missing
        """
        value = os.getenv(ENV_PREFIX + key)

        if value is None or value == '':
            if required:
                raise ValueError(f"Required path not configured: {ENV_PREFIX + key}")
            return None

        if '${' in value:
            value = os.path.expandvars(value)

        return Path(value).expanduser()

    def _get_env(self, key: str, default: str = '') -> str:
        """Get string environment variable."""
        return os.getenv(ENV_PREFIX + key, default)

    def _get_int(self, key: str, default: int) -> int:
        """Get integer environment variable."""
        value = os.getenv(ENV_PREFIX + key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            return default

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(ENV_PREFIX + key)
        if value is None:
            return default
        return value.lower() in ('true', '1', 'yes', 'on')

    def _get_tiebreaker(self, key: str, default: TiebreakerType) -> TiebreakerType:
        """Get tiebreaker strategy; unknown names raise."""
        value = os.getenv(ENV_PREFIX + key)
        if value is None:
            return default
        try:
            return TiebreakerType(value.lower())
        except ValueError:
            choices = ', '.join(t.value for t in TiebreakerType)
            raise ValueError(
                f"{ENV_PREFIX + key} must be one of: {choices} (got {value!r})"
            )


__all__ = ['ConfigLoader']
