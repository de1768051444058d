"""
Configuration Manager
====================

Manages extraction and output settings stored as JSON.
"""

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from flavorsheet.core.exceptions import ConfigError


@dataclass
class ExtractionSettings:
    """Where and how the script source is read."""
    source_file: str = "./db_creature.hsp"
    source_encoding: str = "utf-8"
    # Creatures are independent; >1 parses them on a thread pool
    parser_workers: int = 1


@dataclass
class OutputSettings:
    """Spreadsheet output settings."""
    output_file: str = "db_2_elin.xlsx"
    output_format: str = "xlsx"  # 'xlsx' or 'csv'
    only_with_texts: bool = False
    sheet_title: str = "CharaText"
    min_column_width: float = 5.0
    max_column_width: float = 50.0


SECTIONS = {
    'extraction': 'extraction_settings',
    'output': 'output_settings',
}


def _known_fields(settings_cls, data: Dict[str, Any], logger: logging.Logger) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ConfigError(f"{settings_cls.__name__} must be a JSON object, got {type(data).__name__}")

    names = {f.name for f in fields(settings_cls)}
    unknown = set(data) - names
    if unknown:
        logger.warning(f"Ignoring unknown {settings_cls.__name__} keys: {sorted(unknown)}")

    known = {}
    for f in fields(settings_cls):
        if f.name not in data:
            continue
        value = data[f.name]
        if not _matches_type(value, f.type):
            raise ConfigError(
                f"{settings_cls.__name__}.{f.name} must be {_type_name(f.type)}, got {value!r}"
            )
        known[f.name] = float(value) if _type_name(f.type) == 'float' else value
    return known


def _type_name(annotation) -> str:
    return annotation if isinstance(annotation, str) else annotation.__name__


def _matches_type(value: Any, annotation) -> bool:
    expected = _type_name(annotation)
    # bool is an int subclass but never a valid count or width
    if expected == 'bool':
        return isinstance(value, bool)
    if isinstance(value, bool):
        return False
    if expected == 'int':
        return isinstance(value, int)
    if expected == 'float':
        return isinstance(value, (int, float))
    if expected == 'str':
        return isinstance(value, str)
    return True


class ConfigManager:
    """Manages application configuration."""

    def __init__(self, config_file: Optional[str] = "config.json"):
        self.logger = logging.getLogger(__name__)
        self.config_file = Path(config_file) if config_file else None

        self.extraction_settings = ExtractionSettings()
        self.output_settings = OutputSettings()

        if self.config_file is not None:
            self.load_config()

    def load_config(self) -> bool:
        """Load configuration from file. Keeps defaults on any error."""
        if self.config_file is None or not self.config_file.exists():
            self.logger.info("Config file doesn't exist, using defaults")
            return False

        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                config_data = json.load(f)
            self.apply_overrides(config_data)
            self.logger.info("Configuration loaded successfully")
            return True
        except (OSError, ValueError, TypeError, ConfigError) as e:
            self.logger.error(f"Error loading configuration: {e}")
            self.reset_to_defaults()
            return False

    def apply_overrides(self, overrides: Dict[str, Any]) -> None:
        """Apply a ``{"extraction_settings": {...}, "output_settings": {...}}`` dict."""
        if not isinstance(overrides, dict):
            raise ConfigError("Configuration must be a JSON object")
        if 'extraction_settings' in overrides:
            data = _known_fields(ExtractionSettings, overrides['extraction_settings'], self.logger)
            self.extraction_settings = ExtractionSettings(**{**asdict(self.extraction_settings), **data})
        if 'output_settings' in overrides:
            data = _known_fields(OutputSettings, overrides['output_settings'], self.logger)
            self.output_settings = OutputSettings(**{**asdict(self.output_settings), **data})

    def save_config(self) -> bool:
        """Save configuration to file."""
        if self.config_file is None:
            return False

        config_data = {
            'extraction_settings': asdict(self.extraction_settings),
            'output_settings': asdict(self.output_settings),
        }
        try:
            with open(self.config_file, 'w', encoding='utf-8') as f:
                json.dump(config_data, f, indent=4, ensure_ascii=False)
            self.logger.info("Configuration saved successfully")
            return True
        except OSError as e:
            self.logger.error(f"Error saving configuration: {e}")
            return False

    def get_setting(self, key: str, default: Any = None) -> Any:
        """Get a setting value using dot notation (e.g., 'output.output_file')."""
        parts = key.split('.')
        if len(parts) != 2 or parts[0] not in SECTIONS:
            return default
        section, setting = parts
        return getattr(getattr(self, SECTIONS[section]), setting, default)

    def set_setting(self, key: str, value: Any) -> None:
        """Set a setting value using dot notation (e.g., 'output.output_file')."""
        parts = key.split('.')
        if len(parts) != 2 or parts[0] not in SECTIONS:
            raise ConfigError(f"Unknown setting: {key}")
        section, setting = parts
        target = getattr(self, SECTIONS[section])
        if not hasattr(target, setting):
            raise ConfigError(f"Unknown setting: {key}")
        setattr(target, setting, value)

    def reset_to_defaults(self) -> None:
        """Reset configuration to defaults."""
        self.extraction_settings = ExtractionSettings()
        self.output_settings = OutputSettings()
        self.logger.info("Configuration reset to defaults")


def load_config_override(config_path: str) -> dict:
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigError(f"Error loading config file {config_path}: {e}") from e
