"""OrderConfig: the sparse, path-keyed sidebar ordering configuration.

Each key is a category path relative to the docs root (``"."`` for the
root); each value lists child keys (document filename stems or category
directory names) in the order they should appear. Paths without an entry
keep the loader's default order.

Example order file (YAML)::

    .:
      - intro
      - aem
      - javascript
    javascript/beginners-guide:
      - 01-introduction
      - 02-variables-and-types

JSON files use the same shape.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from sidebar_order.exceptions import ConfigError
from sidebar_order.tree.paths import normalize_path

logger = logging.getLogger(__name__)

_JSON_SUFFIXES = frozenset({".json"})
_YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def _validated(mapping: object) -> dict[str, tuple[str, ...]]:
    """Validate *mapping* and return it with normalised paths and tuple values.

    Raises:
        ConfigError: If the mapping is not ``{str: [str, ...]}``, a path is
            malformed, or two paths normalise to the same category.
    """
    if not isinstance(mapping, Mapping):
        raise ConfigError(
            f"Order config must be a mapping of path to key list, got {type(mapping).__name__}"
        )

    entries: dict[str, tuple[str, ...]] = {}
    for raw_path, keys in mapping.items():
        if not isinstance(raw_path, str):
            raise ConfigError(f"Order config path must be a string, got {raw_path!r}")
        try:
            path = normalize_path(raw_path)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc
        if path in entries:
            raise ConfigError(f"Order config defines {path!r} more than once")
        if isinstance(keys, str) or not isinstance(keys, Sequence):
            raise ConfigError(
                f"Order for {path!r} must be a list of keys, got {type(keys).__name__}"
            )
        for key in keys:
            if not isinstance(key, str) or not key:
                raise ConfigError(f"Order for {path!r} contains an invalid key {key!r}")
        entries[path] = tuple(keys)
    return entries


@dataclass(frozen=True)
class OrderConfig:
    """Immutable mapping from joined path string to an ordered key tuple.

    Every constructor validates and normalises the input, including direct
    construction. Root aliases (``""`` and ``"."``) collapse to ``"."``.
    """

    entries: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(_validated(self.entries)))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Sequence[str]]) -> OrderConfig:
        """Validate and normalise a plain mapping.

        Raises:
            ConfigError: If the mapping is not ``{str: [str, ...]}``, a path
                is malformed, or two paths normalise to the same category.
        """
        return cls(mapping)

    @classmethod
    def from_file(cls, path: str | Path) -> OrderConfig:
        """Load an order config from a ``.json``, ``.yaml`` or ``.yml`` file.

        An empty YAML document is an empty config.

        Raises:
            ConfigError: If the file cannot be read or parsed, has an
                unsupported suffix, or fails validation.
        """
        file_path = Path(path)
        suffix = file_path.suffix.lower()
        if suffix not in _JSON_SUFFIXES | _YAML_SUFFIXES:
            raise ConfigError(f"Unsupported order config format: {file_path.name}")

        try:
            with file_path.open("r", encoding="utf-8") as f:
                if suffix in _JSON_SUFFIXES:
                    data: Any = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except OSError as exc:
            raise ConfigError(f"Cannot read order config {file_path}: {exc}") from exc
        except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as exc:
            raise ConfigError(f"Cannot parse order config {file_path}: {exc}") from exc

        config = cls.from_mapping({} if data is None else data)
        logger.debug("Loaded %d order entries from %s", len(config), file_path)
        return config

    def lookup(self, path: str) -> tuple[str, ...] | None:
        """Return the explicit order for *path*, or None when it has no entry."""
        return self.entries.get(path)

    def paths(self) -> list[str]:
        """Configured paths in definition order."""
        return list(self.entries)

    def to_dict(self) -> dict[str, list[str]]:
        return {path: list(keys) for path, keys in self.entries.items()}

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, path: object) -> bool:
        return path in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)
