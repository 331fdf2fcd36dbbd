"""
Config system - Layered typed configuration with validation.

Merge precedence (later overrides earlier):
config files > .env file > environment variables > manual overrides
"""

from typing import Any, Dict, List, Optional, Type, get_args, get_origin
from dataclasses import dataclass, field, fields, MISSING
from pathlib import Path
import json
import logging
import os

from .faults import Fault, FaultDomain
from .resources.search_path import (
    DEFAULT_ARCHIVE_SUFFIXES,
    SearchPathProvider,
    StaticSearchPath,
    SysPathSearchPath,
)

logger = logging.getLogger("quarry.config")


class ConfigError(Fault):
    """Raised when configuration cannot be read or validated."""

    def __init__(self, message: str, *, metadata: Optional[Dict[str, Any]] = None):
        super().__init__(
            code="CONFIG_INVALID",
            message=message,
            domain=FaultDomain.CONFIG,
            retryable=False,
            metadata=metadata,
        )


@dataclass
class ScanConfig:
    """
    Search-path configuration for resource scans.

    Attributes:
        search_path: Ordered directories and archives to consult
        archive_suffixes: File suffixes treated as zip archives
        use_sys_path: Consult the live ``sys.path`` instead of ``search_path``
    """
    search_path: List[str] = field(default_factory=list)
    archive_suffixes: List[str] = field(default_factory=lambda: list(DEFAULT_ARCHIVE_SUFFIXES))
    use_sys_path: bool = False


class ConfigLoader:
    """
    Loads and merges configuration from multiple sources with precedence:
    overrides > environment variables > .env file > config files > defaults
    """

    def __init__(self, env_prefix: str = "QUARRY_"):
        self.env_prefix = env_prefix
        self.config_data: Dict[str, Any] = {}

    @classmethod
    def load(
        cls,
        paths: Optional[list[str]] = None,
        env_prefix: str = "QUARRY_",
        env_file: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> "ConfigLoader":
        """
        Load configuration from multiple sources with proper merge strategy.

        Merge order (later overrides earlier):
        1. Config files (quarry.yaml / quarry.json auto-detected)
        2. .env file (QUARRY_* keys only)
        3. Environment variables (QUARRY_* prefix)
        4. Manual overrides

        Args:
            paths: List of config file paths (glob patterns supported)
            env_prefix: Prefix for environment variables
            env_file: Path to .env file
            overrides: Manual overrides (highest precedence)

        Returns:
            Configured ConfigLoader instance
        """
        loader = cls(env_prefix=env_prefix)

        if not paths:
            for candidate in ("quarry.yaml", "quarry.yml", "quarry.json"):
                if Path(candidate).exists():
                    paths = [candidate]
                    break

        for pattern in paths or []:
            loader._load_from_files(pattern)

        if env_file:
            loader._load_env_file(env_file)

        loader._load_from_env()

        if overrides:
            loader._merge_dict(loader.config_data, overrides)

        return loader

    def _load_from_files(self, pattern: str):
        """Load config from JSON or YAML files."""
        from glob import glob

        for path_str in sorted(glob(pattern)):
            path = Path(path_str)

            if path.suffix == ".json":
                self._load_json_file(path)
            elif path.suffix in (".yaml", ".yml"):
                self._load_yaml_file(path)
            else:
                logger.warning("Ignoring config file with unknown suffix: %s", path)

    def _load_json_file(self, path: Path):
        """Load config from JSON file."""
        with open(path) as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigError(f"Invalid JSON in config file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")
        self._merge_dict(self.config_data, data)

    def _load_yaml_file(self, path: Path):
        """Load config from YAML file."""
        import yaml
        with open(path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in config file {path}: {e}") from e
        if data:
            if not isinstance(data, dict):
                raise ConfigError(f"Config file {path} must contain a mapping")
            self._merge_dict(self.config_data, data)

    def _load_env_file(self, path: str):
        """Load prefixed keys from a .env file."""
        from dotenv import dotenv_values

        env_path = Path(path)
        if not env_path.exists():
            return

        for key, value in dotenv_values(env_path).items():
            if value is not None and key.startswith(self.env_prefix):
                self._set_nested(key, value)

    def _load_from_env(self):
        """Load config from environment variables."""
        for key, value in os.environ.items():
            if key.startswith(self.env_prefix):
                self._set_nested(key, value)

    def _set_nested(self, key: str, value: str):
        """Convert QUARRY_SCAN__SEARCH_PATH to nested dict."""
        key = key[len(self.env_prefix):]

        # Split by double underscore for nested keys
        parts = key.lower().split("__")

        current = self.config_data
        for part in parts[:-1]:
            if not isinstance(current.get(part), dict):
                current[part] = {}
            current = current[part]

        current[parts[-1]] = self._parse_value(value)

    def _parse_value(self, value: str) -> Any:
        """Parse string value to appropriate type."""
        if value.lower() in ("true", "yes"):
            return True
        if value.lower() in ("false", "no"):
            return False

        if value.startswith(("{", "[")):
            try:
                return json.loads(value)
            except json.JSONDecodeError:
                pass

        return value

    def _merge_dict(self, target: dict, source: dict):
        """Deep merge source into target."""
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                self._merge_dict(target[key], value)
            else:
                target[key] = value

    def get(self, path: str, default: Any = None) -> Any:
        """Get config value by dot-separated path."""
        parts = path.split(".")
        current = self.config_data

        for part in parts:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default

        return current

    def get_scan_config(self) -> ScanConfig:
        """
        Get the ``scan`` section as a validated ScanConfig.

        ``search_path`` may be given as a list or as one string joined
        with ``os.pathsep``; ``archive_suffixes`` as a list or a
        comma-separated string.

        Raises:
            ConfigError: If a field has the wrong type
        """
        section = self.get("scan", {}) or {}
        if not isinstance(section, dict):
            raise ConfigError("Config section 'scan' must be a mapping")
        data = dict(section)

        if isinstance(data.get("search_path"), str):
            data["search_path"] = [p for p in data["search_path"].split(os.pathsep) if p]
        if isinstance(data.get("archive_suffixes"), str):
            data["archive_suffixes"] = [s.strip() for s in data["archive_suffixes"].split(",") if s.strip()]

        return self._instantiate_dataclass(ScanConfig, data)

    def _instantiate_dataclass(self, config_class: Type, data: dict):
        """Instantiate dataclass config with validation."""
        kwargs = {}

        for field_info in fields(config_class):
            field_name = field_info.name
            field_type = field_info.type

            if field_name in data:
                value = data[field_name]

                if not self._check_type(value, field_type):
                    raise ConfigError(
                        f"Config field '{field_name}' expected {field_type}, "
                        f"got {type(value).__name__}"
                    )

                kwargs[field_name] = value
            elif field_info.default is not MISSING:
                kwargs[field_name] = field_info.default
            elif field_info.default_factory is not MISSING:
                kwargs[field_name] = field_info.default_factory()
            else:
                raise ConfigError(
                    f"Required config field '{field_name}' not provided"
                )

        return config_class(**kwargs)

    def _check_type(self, value: Any, expected_type: Type) -> bool:
        """Basic type checking."""
        origin = get_origin(expected_type)
        if origin is list:
            args = get_args(expected_type)
            if not isinstance(value, list):
                return False
            return all(self._check_type(v, args[0]) for v in value) if args else True

        if origin:
            return isinstance(value, origin)

        try:
            return isinstance(value, expected_type)
        except TypeError:
            # For complex types, skip validation
            return True

    def to_dict(self) -> dict:
        """Export all config as dictionary."""
        return self.config_data.copy()


def build_provider(config: ScanConfig) -> SearchPathProvider:
    """
    Factory: create the search-path provider described by ``config``.

    Falls back to the live ``sys.path`` when no entries are configured.
    """
    if config.use_sys_path or not config.search_path:
        logger.debug("Using sys.path search path")
        return SysPathSearchPath(archive_suffixes=config.archive_suffixes)

    logger.debug("Using static search path: %s", config.search_path)
    return StaticSearchPath(config.search_path, archive_suffixes=config.archive_suffixes)
