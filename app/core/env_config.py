"""
Environment Configuration Manager
Handles loading environment-specific configurations with proper fallbacks
"""

import os
from typing import Optional
from dotenv import load_dotenv
import logging

logger = logging.getLogger(__name__)


class ConfigurationError(RuntimeError):
    """Raised when required configuration is missing at startup"""

    def __init__(self, missing_vars: list):
        self.missing_vars = missing_vars
        super().__init__(
            f"Missing required environment variables: {', '.join(missing_vars)}"
        )


class EnvConfigManager:
    """Manages environment-specific configuration loading with fallbacks"""

    def __init__(self, env: Optional[str] = None):
        self.env = env or os.getenv('ENVIRONMENT', 'development')
        self.loaded_files = []
        self.load_env_configs()

    def load_env_configs(self):
        """Load environment configurations with fallback chain"""
        # Most specific first; real environment variables always win
        config_files = [
            f'.env.{self.env}',
            '.env.local',
            '.env',
        ]

        for config_file in config_files:
            if os.path.exists(config_file):
                load_dotenv(config_file, override=False)
                self.loaded_files.append(config_file)
                logger.info(f"Loaded configuration from: {config_file}")

        if not self.loaded_files:
            logger.warning("No environment configuration files found, using system environment variables only")

    def get_loaded_files(self) -> list:
        """Get list of loaded configuration files"""
        return self.loaded_files.copy()

    def missing_vars(self, required_vars: list) -> list:
        return [var for var in required_vars if not os.getenv(var)]

    def validate_required_vars(self, required_vars: list) -> None:
        """Raise ConfigurationError unless all required environment variables are set"""
        missing = self.missing_vars(required_vars)
        if missing:
            logger.critical(f"Missing required environment variables: {missing}")
            raise ConfigurationError(missing)


env_manager = EnvConfigManager()

REQUIRED_VARS = [
    'DATABASE_URL',
    'SECRET_KEY',
    'ACCESS_TOKEN_EXPIRE_MINUTES',
]
