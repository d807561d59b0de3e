"""Configuration for the analyzer and the command-line demo."""

from .settings import AnalyzerConfig, Settings, load_settings

__all__ = ['AnalyzerConfig', 'Settings', 'load_settings']
