#!/usr/bin/env python3
"""
Project configuration.

Settings come from, in order of precedence:
1. CLI flags (applied by the caller through ProjectConfig.merged)
2. A YAML file: --config PATH, else strtab.yaml / .strtab.yaml in the project
3. Built-in defaults

Example strtab.yaml:
```yaml
locales: [fr, de]
backup: true
backup_suffix: .orig
delimiter: ";"
```
"""

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = ("strtab.yaml", ".strtab.yaml")


@dataclass
class ProjectConfig:
    """Settings for one localization run."""
    id_column: str = "id"
    default_locale: str = "def"
    values_dir: str = "values"
    strings_file: str = "strings.xml"
    resources_subdir: str = "app/src/main/res"
    locales: Optional[list[str]] = None  # explicit list disables discovery
    backup: bool = True
    backup_suffix: str = ".bak"
    delimiter: str = ","
    encoding: str = "utf-8"

    def __post_init__(self):
        for name in ("id_column", "default_locale", "values_dir", "strings_file", "encoding"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ConfigError(f"Config value '{name}' must be a non-empty string, got {value!r}")
        if not isinstance(self.resources_subdir, str):
            raise ConfigError(f"Config value 'resources_subdir' must be a string, got {self.resources_subdir!r}")
        if not isinstance(self.backup, bool):
            raise ConfigError(f"Config value 'backup' must be true or false, got {self.backup!r}")
        if not isinstance(self.backup_suffix, str) or not self.backup_suffix:
            raise ConfigError(f"Config value 'backup_suffix' must be a non-empty string, got {self.backup_suffix!r}")
        if not isinstance(self.delimiter, str) or len(self.delimiter) != 1:
            raise ConfigError(f"Config value 'delimiter' must be a single character, got {self.delimiter!r}")
        if self.locales is not None:
            if not isinstance(self.locales, list) or not all(isinstance(l, str) and l for l in self.locales):
                raise ConfigError(f"Config value 'locales' must be a list of locale names, got {self.locales!r}")

    @property
    def values_prefix(self) -> str:
        """Directory prefix of translated value folders (e.g. 'values-')."""
        return f"{self.values_dir}-"

    def merged(self, **overrides: Any) -> "ProjectConfig":
        """Copy with the given non-None overrides applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    @classmethod
    def from_dict(cls, data: dict) -> "ProjectConfig":
        """Create from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}")
        return cls(**data)


def find_config_file(project_dir: Union[str, Path]) -> Optional[Path]:
    """Return the first conventional config file present in project_dir."""
    for filename in CONFIG_FILENAMES:
        candidate = Path(project_dir) / filename
        if candidate.is_file():
            return candidate
    return None


def load_config(
    project_dir: Optional[Union[str, Path]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> ProjectConfig:
    """
    Load project configuration.

    Args:
        project_dir: Project directory searched for a conventional config file
        config_file: Explicit config file path (must exist)

    Returns:
        ProjectConfig (defaults when no file is found)
    """
    if config_file is not None:
        path = Path(config_file)
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")
    elif project_dir is not None:
        path = find_config_file(project_dir)
        if path is None:
            logger.debug("No config file in %s, using defaults", project_dir)
            return ProjectConfig()
    else:
        return ProjectConfig()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    logger.info("Loaded config from %s", path)
    return ProjectConfig.from_dict(data)
