"""Configuration stores that receive parsed property documents."""

from pathlib import Path
from typing import Any, Protocol

import yaml


class ConfigStore(Protocol):
    """Key/value store owned by the caller of a properties task."""

    def has(self, key: str) -> bool: ...

    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...


class MemoryConfigStore:
    """Config store kept in a plain dict."""

    def __init__(self, values: dict[str, Any] | None = None):
        self._values = dict(values or {})

    def has(self, key: str) -> bool:
        return self._values.get(key) is not None

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value

    def as_dict(self) -> dict[str, Any]:
        return dict(self._values)


class YamlConfigStore:
    """Config store persisted to a YAML file.

    A missing or empty file is an empty store. Every set() rewrites the
    whole file, so values written by one instance are visible to the next.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}

        try:
            content = yaml.safe_load(self.path.read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Config store {self.path} is not valid YAML: {e}") from e

        if not isinstance(content, dict):
            raise ValueError(f"Config store {self.path} does not contain a mapping")
        return content

    def has(self, key: str) -> bool:
        return self._load().get(key) is not None

    def get(self, key: str, default: Any = None) -> Any:
        return self._load().get(key, default)

    def set(self, key: str, value: Any) -> None:
        values = self._load()
        values[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(yaml.safe_dump(values, sort_keys=False))

    def as_dict(self) -> dict[str, Any]:
        return self._load()
