"""
Configuration Loader
====================

Loads configuration for the long multiplication table.

Example config.yaml:

    output:
      mode: both
      file: tables/13597x8642.txt
    table:
      show_symbols: true
      show_author: false
      validate_product: true
"""

import sys
import yaml
from pathlib import Path
from dataclasses import dataclass
from typing import Optional

OUTPUT_MODES = ("display", "store", "both")


@dataclass
class OutputConfig:
    """Where the table goes."""
    mode: str = "display"
    file: str = "long-multiplication.txt"
    encoding: str = "utf-8"

    def __post_init__(self):
        if self.mode not in OUTPUT_MODES:
            raise ValueError(
                f"Loading the output mode failed because '{self.mode}' is not one of {', '.join(OUTPUT_MODES)}"
            )
        if not self.file:
            raise ValueError("Loading the output file failed because it is empty")

    @property
    def displays(self) -> bool:
        return self.mode in ("display", "both")

    @property
    def stores(self) -> bool:
        return self.mode in ("store", "both")


@dataclass
class TableConfig:
    """What goes around the grids."""
    show_symbols: bool = True
    show_author: bool = True
    validate_product: bool = False

    def __post_init__(self):
        for name in ("show_symbols", "show_author", "validate_product"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValueError(
                    f"Loading table.{name} failed because {value!r} is not true or false"
                )


@dataclass
class Config:
    """Complete system configuration."""
    output: OutputConfig
    table: TableConfig

    @classmethod
    def default(cls) -> "Config":
        return cls(
            output=OutputConfig(),
            table=TableConfig(),
        )


def _section(data: dict, name: str, config_path: str) -> dict:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"Loading {config_path} failed because '{name}' is not a mapping")
    return section


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from YAML file or return defaults.

    Args:
        config_path: Path to YAML config file (optional)

    Returns:
        Config object with all settings

    Raises:
        ValueError: If the file holds an invalid value
    """
    if config_path is None:
        return Config.default()

    path = Path(config_path)
    if not path.exists():
        print(f"[Config] Warning: {config_path} not found, using defaults", file=sys.stderr)
        return Config.default()

    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Loading {config_path} failed because {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Loading {config_path} failed because it is not a mapping")

    output_data = _section(data, "output", config_path)
    table_data = _section(data, "table", config_path)

    return Config(
        output=OutputConfig(
            mode=output_data.get("mode", "display"),
            file=output_data.get("file", "long-multiplication.txt"),
            encoding=output_data.get("encoding", "utf-8"),
        ),
        table=TableConfig(
            show_symbols=table_data.get("show_symbols", True),
            show_author=table_data.get("show_author", True),
            validate_product=table_data.get("validate_product", False),
        ),
    )
