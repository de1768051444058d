"""
Utils module for FlavorSheet
============================
"""

from .config import ConfigManager, ExtractionSettings, OutputSettings

__all__ = [
    'ConfigManager', 'ExtractionSettings', 'OutputSettings'
]
