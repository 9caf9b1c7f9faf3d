"""Configuration loading from .properties-reader.yml."""

from pathlib import Path

from pydantic import BaseModel
from pydantic_yaml import parse_yaml_file_as

from properties_reader.listing import to_list

CONFIG_FILE = ".properties-reader.yml"
DEFAULT_ENCODING = "utf-8"


class ReaderConfig(BaseModel):
    """Root configuration from .properties-reader.yml"""
    targets: dict[str, str | list[str] | None] = {}
    encoding: str = DEFAULT_ENCODING
    store: str | None = None

    def files_for(self, target: str) -> list[str]:
        """Get the ordered property files of a target. The first one is required."""
        if target not in self.targets:
            raise ValueError(f"Unknown target '{target}'")
        return to_list(self.targets[target])


class ConfigLoader:
    """Loads and validates .properties-reader.yml files"""

    @staticmethod
    def load(path: Path) -> ReaderConfig:
        """Load and validate a .properties-reader.yml file"""
        return parse_yaml_file_as(ReaderConfig, path)


def find_config(start: Path | None = None) -> Path | None:
    """Get the config file in the given directory (default: cwd), None if absent."""
    config_path = (start or Path.cwd()) / CONFIG_FILE
    if not config_path.is_file():
        return None
    return config_path
