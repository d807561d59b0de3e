"""
Configuration management for the Task Text Analyzer.

This module provides a centralized configuration system that loads settings
from YAML files and environment variables.
"""

import os
import yaml
import logging
from typing import Dict, Any, Optional
from pathlib import Path
from dataclasses import dataclass, asdict


SENTIMENT_BACKENDS = ('vader', 'transformer')


@dataclass
class AnalyzerConfig:
    """Configuration for the text analyzer."""
    max_keywords: int = 5
    min_keyword_length: int = 4
    default_duration_minutes: int = 30
    sentiment_backend: str = 'vader'
    transformer_model: str = 'distilbert-base-uncased-finetuned-sst-2-english'
    download_nltk_data: bool = True


class Settings:
    """
    Main settings class that manages all configuration.
    """

    def __init__(self):
        """Initialize settings with default values."""
        self.analyzer = AnalyzerConfig()

        # General settings
        self.log_level = "INFO"
        self.log_file: Optional[str] = None

        self.environment = os.getenv('ENVIRONMENT', 'development')
        self.debug = self.environment == 'development'

        self._load_from_env()

    @classmethod
    def from_yaml(cls, config_path: str) -> 'Settings':
        """
        Load settings from a YAML configuration file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            Settings instance with loaded configuration
        """
        settings = cls()

        try:
            config_file = Path(config_path)
            if config_file.exists():
                with open(config_file, 'r') as f:
                    config_data = yaml.safe_load(f) or {}

                if isinstance(config_data, dict):
                    settings._update_from_dict(config_data)
                    # Environment variables win over the file
                    settings._load_from_env()
                    logging.info(f"Configuration loaded from {config_path}")
                else:
                    logging.error(
                        f"Failed to load configuration from {config_path}: "
                        f"expected a mapping, got {type(config_data).__name__}"
                    )
                    logging.info("Using default configuration")
            else:
                logging.warning(f"Configuration file {config_path} not found, using defaults")

        except (OSError, yaml.YAMLError) as e:
            logging.error(f"Failed to load configuration from {config_path}: {e}")
            logging.info("Using default configuration")

        return settings

    def _load_from_env(self):
        """Load settings from environment variables."""
        self.log_level = os.getenv('LOG_LEVEL', self.log_level)
        self.log_file = os.getenv('LOG_FILE', self.log_file)

        self.analyzer.sentiment_backend = os.getenv(
            'SENTIMENT_BACKEND', self.analyzer.sentiment_backend
        )

        if os.getenv('MAX_KEYWORDS'):
            try:
                self.analyzer.max_keywords = int(os.getenv('MAX_KEYWORDS'))
            except ValueError:
                logging.error(f"Ignoring non-integer MAX_KEYWORDS: {os.getenv('MAX_KEYWORDS')!r}")

        if os.getenv('DOWNLOAD_NLTK_DATA'):
            self.analyzer.download_nltk_data = os.getenv('DOWNLOAD_NLTK_DATA').lower() in ('1', 'true', 'yes')

    def _update_from_dict(self, config_dict: Dict[str, Any]):
        """Update settings from a dictionary."""
        if 'analyzer' in config_dict:
            analyzer_config = config_dict['analyzer'] or {}
            for key, value in analyzer_config.items():
                if hasattr(self.analyzer, key):
                    setattr(self.analyzer, key, value)

        general = config_dict.get('general') or {}
        for key in ['log_level', 'log_file', 'environment', 'debug']:
            if key in config_dict:
                setattr(self, key, config_dict[key])
            elif key in general:
                setattr(self, key, general[key])

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary format."""
        return {
            'analyzer': asdict(self.analyzer),
            'general': {
                'log_level': self.log_level,
                'log_file': self.log_file,
                'environment': self.environment,
                'debug': self.debug,
            }
        }

    def save_to_yaml(self, output_path: str):
        """
        Save current settings to a YAML file.

        Args:
            output_path: Path where to save the configuration
        """
        try:
            output_file = Path(output_path)
            output_file.parent.mkdir(parents=True, exist_ok=True)

            with open(output_file, 'w') as f:
                yaml.dump(self.to_dict(), f, default_flow_style=False, indent=2)

            logging.info(f"Configuration saved to {output_path}")

        except OSError as e:
            logging.error(f"Failed to save configuration to {output_path}: {e}")
            raise

    def validate(self) -> bool:
        """
        Validate the current configuration.

        Returns:
            True if configuration is valid, False otherwise
        """
        errors = []

        if self.analyzer.max_keywords < 0:
            errors.append("max_keywords must not be negative")

        if self.analyzer.min_keyword_length < 1:
            errors.append("min_keyword_length must be at least 1")

        if self.analyzer.default_duration_minutes <= 0:
            errors.append("default_duration_minutes must be positive")

        if self.analyzer.sentiment_backend not in SENTIMENT_BACKENDS:
            errors.append(
                f"sentiment_backend must be one of {', '.join(SENTIMENT_BACKENDS)}"
            )

        if not isinstance(logging.getLevelName(str(self.log_level).upper()), int):
            errors.append(f"Unknown log level: {self.log_level}")

        if errors:
            for error in errors:
                logging.error(f"Configuration validation error: {error}")
            return False

        logging.info("Configuration validation passed")
        return True


def load_settings(config_path: Optional[str] = None) -> Settings:
    """
    Load settings from an optional configuration file.

    Args:
        config_path: Optional path to configuration file

    Returns:
        Settings from the file, or defaults plus environment overrides
    """
    if config_path:
        return Settings.from_yaml(config_path)
    return Settings()
