"""
Configuration loading and validation for directus-typegen runs.

Values come from defaults, an optional YAML file and CLI flags,
in increasing order of precedence.
"""

from __future__ import annotations


from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Optional
import yaml

from ..core.defs import GeneratorOptions
from ..core.errors import ConfigError
from ..core.utils import to_snake_case


DEFAULT_CONFIG_PATH = "directus-typegen.yaml"


@dataclass
class TypegenConfig:
    """Settings of one generation run."""
    host: str = "http://0.0.0.0:8055"
    email: Optional[str] = None
    password: Optional[str] = None
    token: Optional[str] = None
    type_name: str = "DirectusTypes"
    out_file: str = "directus.ts"
    spec_out_file: Optional[str] = None
    legacy: bool = False
    new_types: bool = False
    timeout: float = 30.0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TypegenConfig":
        """
        Create config from dictionary.

        Keys may be snake_case or the camelCase flag names
        (typeName, outFile, newTypes, specOutFile).
        """
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in data.items():
            name = to_snake_case(key)
            if name not in known:
                raise ConfigError(f"Unknown configuration key '{key}'")
            values[name] = value
        return cls(**values)

    def merge(self, overrides: dict[str, Any]) -> "TypegenConfig":
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def validate(self) -> None:
        """Check that the run has everything it needs."""
        if not self.token and not (self.email and self.password):
            raise ConfigError("Either a token or both email and password are required")
        if not self.type_name.isidentifier():
            raise ConfigError(f"Type name '{self.type_name}' is not a valid identifier")

    def to_options(self) -> GeneratorOptions:
        """Generator options for the type pipeline."""
        return GeneratorOptions(
            type_name=self.type_name,
            legacy=self.legacy,
            new_types=self.new_types,
        )


def load_config(path: Path | str | None = None) -> TypegenConfig:
    """
    Load configuration from a YAML file.

    Without an explicit path the default file is read if it exists;
    an explicit path that does not exist is an error.
    """
    if path is None:
        path = Path(DEFAULT_CONFIG_PATH)
        if not path.exists():
            return TypegenConfig()
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Config file {path} not found")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return TypegenConfig.from_dict(data)
