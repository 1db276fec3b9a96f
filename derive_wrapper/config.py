"""
Generator configuration.

Defaults can be overridden from a YAML file::

    # dwrap.yaml
    no_std: true
    header: false

and then from CLI flags, which always win.
"""

from dataclasses import dataclass, fields, replace
from pathlib import Path

import yaml


class ConfigError(ValueError):
    """Raised for unreadable or invalid configuration files."""


@dataclass(frozen=True)
class GeneratorConfig:
    no_std: bool = False      # emit `::core` paths instead of `::std`
    header: bool = True       # prefix generated files with a banner comment
    fail_fast: bool = False   # stop at the first declaration with diagnostics

    @property
    def std(self) -> str:
        return "::core" if self.no_std else "::std"

    @classmethod
    def from_mapping(cls, data: dict) -> "GeneratorConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration key(s): {', '.join(unknown)}")
        for key, value in data.items():
            if not isinstance(value, bool):
                raise ConfigError(f"Configuration key '{key}' must be true or false, got {value!r}")
        return cls(**data)

    @classmethod
    def from_yaml(cls, path) -> "GeneratorConfig":
        path = Path(path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
        try:
            data = yaml.safe_load(path.read_text())
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(f"{path} must contain a mapping of configuration keys")
        return cls.from_mapping(data)

    def override(self, **overrides) -> "GeneratorConfig":
        """Apply the overrides that are not None (unset CLI flags)."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self
