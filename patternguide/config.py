"""
Configuration system for PatternGuide

Provides configuration management with support for files and environment variables.
Includes validation, default value handling, and configuration merging.
"""

import os
import json
import yaml
from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional, Any
import logging

from .errors import PatternGuideError

logger = logging.getLogger(__name__)

DEMO_KEYS = ["singleton", "factory-method", "abstract-factory", "builder", "prototype"]
OUTPUT_FORMATS = ["text", "json"]
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONFIG_SECTIONS = ["demos", "output", "logging"]

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")


class ConfigurationError(PatternGuideError):
    """Raised when configuration validation fails."""

    pass


def _env_flag(name: str) -> Optional[bool]:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return None
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    logger.warning(f"Invalid {name} value, using default")
    return None


class ConfigurationManager:
    """Manages configuration loading, validation, and merging."""

    DEFAULT_CONFIG_PATHS = [
        "patternguide.json",
        "patternguide.yaml",
        "patternguide.yml",
        ".patternguide.json",
        ".patternguide.yaml",
        ".patternguide.yml",
        os.path.expanduser("~/.patternguide.json"),
        os.path.expanduser("~/.patternguide.yaml"),
    ]

    @staticmethod
    def find_config_file(search_paths: Optional[List[str]] = None) -> Optional[str]:
        """Find the first existing configuration file."""
        paths = search_paths or ConfigurationManager.DEFAULT_CONFIG_PATHS

        for path in paths:
            if os.path.exists(path):
                return path
        return None

    @staticmethod
    def load_config_file(config_path: str) -> Dict[str, Any]:
        """Load configuration from file (JSON or YAML)."""
        if not os.path.exists(config_path):
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                if config_path.endswith((".yaml", ".yml")):
                    data = yaml.safe_load(f) or {}
                else:
                    data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Invalid configuration file format: {e}")
        except OSError as e:
            raise ConfigurationError(f"Error reading configuration file: {e}")

        if not isinstance(data, dict):
            raise ConfigurationError("Configuration file must contain a mapping at the top level")
        return data

    @staticmethod
    def load_env_config() -> Dict[str, Any]:
        """Load configuration from environment variables."""
        config = {}

        # Demo settings
        demos = {}
        if os.getenv("PATTERNGUIDE_ENABLED_DEMOS"):
            demos["enabled_demos"] = [
                key.strip().lower()
                for key in os.getenv("PATTERNGUIDE_ENABLED_DEMOS").split(",")
                if key.strip()
            ]

        stop_on_error = _env_flag("PATTERNGUIDE_STOP_ON_ERROR")
        if stop_on_error is not None:
            demos["stop_on_error"] = stop_on_error

        if demos:
            config["demos"] = demos

        # Output settings
        output = {}
        use_rich = _env_flag("PATTERNGUIDE_USE_RICH")
        if use_rich is not None:
            output["use_rich"] = use_rich

        show_source = _env_flag("PATTERNGUIDE_SHOW_SOURCE")
        if show_source is not None:
            output["show_source"] = show_source

        if os.getenv("PATTERNGUIDE_OUTPUT_FORMAT"):
            output_format = os.getenv("PATTERNGUIDE_OUTPUT_FORMAT").lower()
            if output_format in OUTPUT_FORMATS:
                output["format"] = output_format
            else:
                logger.warning("Invalid PATTERNGUIDE_OUTPUT_FORMAT value, using default")

        if output:
            config["output"] = output

        # Logging settings
        if os.getenv("PATTERNGUIDE_LOG_LEVEL"):
            level = os.getenv("PATTERNGUIDE_LOG_LEVEL").upper()
            if level in LOG_LEVELS:
                config["logging"] = {"level": level}
            else:
                logger.warning("Invalid PATTERNGUIDE_LOG_LEVEL value, using default")

        return config

    @staticmethod
    def merge_configs(*configs: Dict[str, Any]) -> Dict[str, Any]:
        """Merge multiple configuration dictionaries, with later ones taking precedence."""
        result = {}

        for config in configs:
            if not config:
                continue

            for key, value in config.items():
                if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                    result[key] = ConfigurationManager.merge_configs(result[key], value)
                else:
                    result[key] = value

        return result

    @staticmethod
    def check_sections(config_data: Dict[str, Any]) -> None:
        """Ensure every known section is a mapping."""
        for name in CONFIG_SECTIONS:
            if name in config_data and not isinstance(config_data[name], dict):
                raise ConfigurationError(f"{name} must be a mapping")

    @staticmethod
    def validate_config(config_data: Dict[str, Any]) -> None:
        """Validate configuration data."""
        ConfigurationManager.check_sections(config_data)

        if "demos" in config_data:
            demos = config_data["demos"]

            if "enabled_demos" in demos:
                enabled = demos["enabled_demos"]
                if not isinstance(enabled, list):
                    raise ConfigurationError("enabled_demos must be a list")
                unknown = [key for key in enabled if str(key).lower() not in DEMO_KEYS]
                if unknown:
                    raise ConfigurationError(
                        f"enabled_demos contains unknown demos {unknown}; valid: {DEMO_KEYS}"
                    )

            if "stop_on_error" in demos and not isinstance(demos["stop_on_error"], bool):
                raise ConfigurationError("stop_on_error must be a boolean")

        if "output" in config_data:
            output = config_data["output"]

            if "format" in output and output["format"] not in OUTPUT_FORMATS:
                raise ConfigurationError(f"output format must be one of: {OUTPUT_FORMATS}")

            for flag in ("use_rich", "show_source"):
                if flag in output and not isinstance(output[flag], bool):
                    raise ConfigurationError(f"{flag} must be a boolean")

        if "logging" in config_data:
            logging_data = config_data["logging"]

            if "level" in logging_data and str(logging_data["level"]).upper() not in LOG_LEVELS:
                raise ConfigurationError(f"logging level must be one of: {LOG_LEVELS}")


@dataclass
class DemoConfig:
    """Configuration for the demo harness."""

    enabled_demos: List[str] = field(default_factory=lambda: list(DEMO_KEYS))
    stop_on_error: bool = False


@dataclass
class OutputConfig:
    """Configuration for terminal output."""

    use_rich: bool = True
    show_source: bool = False
    format: str = "text"


@dataclass
class LoggingConfig:
    """Configuration for the logging module."""

    level: str = "WARNING"
    format: str = DEFAULT_LOG_FORMAT


@dataclass
class PatternGuideConfig:
    """Main configuration class for PatternGuide."""

    demo_settings: DemoConfig = field(default_factory=DemoConfig)
    output_settings: OutputConfig = field(default_factory=OutputConfig)
    logging_settings: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def default(cls) -> "PatternGuideConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def load(
        cls,
        config_path: Optional[str] = None,
        use_env: bool = True,
        validate: bool = True,
    ) -> "PatternGuideConfig":
        """
        Load configuration from multiple sources with precedence:
        1. Default values
        2. Configuration file
        3. Environment variables (if use_env=True)

        Args:
            config_path: Path to configuration file. If None, searches for default files.
            use_env: Whether to load environment variables
            validate: Whether to validate the configuration
        """
        configs_to_merge = []

        file_config = {}
        if config_path:
            file_config = ConfigurationManager.load_config_file(config_path)
        else:
            found_config = ConfigurationManager.find_config_file()
            if found_config:
                file_config = ConfigurationManager.load_config_file(found_config)
                logger.info(f"Loaded configuration from: {found_config}")

        configs_to_merge.append(file_config)

        if use_env:
            configs_to_merge.append(ConfigurationManager.load_env_config())

        merged_config = ConfigurationManager.merge_configs(*configs_to_merge)

        if validate:
            ConfigurationManager.validate_config(merged_config)
        else:
            ConfigurationManager.check_sections(merged_config)

        demo_config = DemoConfig()
        for key, value in merged_config.get("demos", {}).items():
            if hasattr(demo_config, key):
                if key == "enabled_demos":
                    value = [str(item).lower() for item in value]
                setattr(demo_config, key, value)

        output_config = OutputConfig()
        for key, value in merged_config.get("output", {}).items():
            if hasattr(output_config, key):
                setattr(output_config, key, value)

        logging_config = LoggingConfig()
        for key, value in merged_config.get("logging", {}).items():
            if hasattr(logging_config, key):
                if key == "level":
                    value = str(value).upper()
                setattr(logging_config, key, value)

        return cls(
            demo_settings=demo_config,
            output_settings=output_config,
            logging_settings=logging_config,
        )

    @classmethod
    def from_file(cls, config_path: str) -> "PatternGuideConfig":
        """Load configuration from a JSON or YAML file, ignoring the environment."""
        return cls.load(config_path=config_path, use_env=False)

    @classmethod
    def from_env(cls) -> "PatternGuideConfig":
        """Load configuration from environment variables."""
        return cls.load(config_path=None, use_env=True)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "demos": asdict(self.demo_settings),
            "output": asdict(self.output_settings),
            "logging": asdict(self.logging_settings),
        }

    def to_file(self, config_path: str, format: str = "json") -> None:
        """
        Save configuration to file.

        Args:
            config_path: Path to save configuration
            format: File format ('json' or 'yaml')
        """
        config_data = self.to_dict()

        try:
            with open(config_path, "w", encoding="utf-8") as f:
                if format.lower() in ("yaml", "yml"):
                    yaml.dump(config_data, f, default_flow_style=False, indent=2)
                else:
                    json.dump(config_data, f, indent=2)
        except OSError as e:
            raise ConfigurationError(f"Error saving configuration file: {e}")

    def validate(self) -> None:
        """Validate the current configuration."""
        ConfigurationManager.validate_config(self.to_dict())

    def get_config_summary(self) -> str:
        """Get a human-readable summary of the configuration."""
        return f"""PatternGuide Configuration Summary:
Demos:
  - Enabled demos: {", ".join(self.demo_settings.enabled_demos) or "none"}
  - Stop on error: {self.demo_settings.stop_on_error}

Output:
  - Rich output: {self.output_settings.use_rich}
  - Show source: {self.output_settings.show_source}
  - Format: {self.output_settings.format}

Logging:
  - Level: {self.logging_settings.level}
"""


def load_config(config_path: Optional[str] = None, use_env: bool = True) -> PatternGuideConfig:
    """
    Load configuration from file and/or environment variables.

    Args:
        config_path: Path to configuration file
        use_env: Whether to load environment variables

    Returns:
        PatternGuideConfig: Loaded configuration
    """
    return PatternGuideConfig.load(config_path=config_path, use_env=use_env)
