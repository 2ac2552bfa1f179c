"""Configuration file parser."""

import logging
from abc import ABC, abstractmethod
from io import StringIO
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, TextIO, Type, TypeVar

import yaml

T = TypeVar("T", bound="Config")

CONFIG_NAME = "tgraph.yml"

# Parsers available for vertex and edge values, by the name used in config
# files and on the command line.
VALUE_TYPES: Dict[str, Callable[[str], Any]] = {
    "str": str,
    "int": int,
    "float": float,
}


class Config(ABC):

    """Abstract base class for YAML configuration.

    Subclasses should override abstract properties "required" and "optional".

    Example usage:

        cfg = GraphConfig.load(Path("/path/to/tgraph.yml"))
        cfg.validate()

    The creator must call validate(). Extra defaults can be passed to it as
    keyword arguments when they depend on context.
    """

    def __init__(self, path: Path, data: Mapping[str, Any]):
        self.path = path
        self.data = data

    def __repr__(self) -> str:
        name = self.__class__.__name__
        return f"{name}(path={self.path!r}, data={self.data!r})"

    @property
    @abstractmethod
    def required(self) -> Dict[str, Any]:
        """Required configuration keys and their defaults."""

    @property
    @abstractmethod
    def optional(self) -> Dict[str, Any]:
        """Optional configuration keys and their defaults."""

    def validate(self, **defaults: Any):
        """Validate the loaded configuration.

        Logs an error for each missing required key, then fills in defaults.
        Keyword arguments override the defaults from "required" and "optional".
        """
        for key in self.required:
            if key not in self.data:
                logging.error("%s: missing %r", self.path, key)
        for key in self.data:
            if key not in self.required and key not in self.optional:
                logging.warning("%s: unknown key %r", self.path, key)
        self.data = {**self.required, **self.optional, **defaults, **self.data}

    @classmethod
    def load(cls: Type[T], path: Path) -> T:
        """Load configuration from a file."""
        with open(path) as f:
            return cls.load_from(path, f)

    @classmethod
    def loads(cls: Type[T], path: Path, content: str) -> T:
        """Load configuration from a string."""
        return cls.load_from(path, StringIO(content))

    @classmethod
    def load_from(cls: Type[T], path: Path, content: TextIO) -> T:
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as ex:
            logging.error("cannot parse %s: %s", path, ex)
            data = {}
        if data is None:
            data = {}
        if not isinstance(data, dict):
            logging.error("invalid YAML in %s: %s", path, type(data))
            data = {}
        return cls(path, data)

    def __getitem__(self, key: str) -> Any:
        """Get a configuration value."""
        return self.data[key]

    def get(self, key: str) -> Optional[Any]:
        """Get a configuration value, or None if it does not exist."""
        return self.data.get(key)


class GraphConfig(Config):

    required = {
        "input": "sample.tgf",
    }

    optional = {
        "vertex_type": "str",
        "edge_type": "str",
    }

    def input_path(self) -> Path:
        """Input file, relative to the directory of the config file."""
        return self.path.parent / self["input"]

    def value_type(self, key: str) -> Callable[[str], Any]:
        """Look up the parser named by "vertex_type" or "edge_type".

        Logs an error for unknown names.
        """
        name = self[key]
        parser = VALUE_TYPES.get(name)
        if parser is None:
            choices = ", ".join(VALUE_TYPES)
            logging.error("%s: %s must be one of %s, not %r", self.path, key, choices, name)
            return str
        return parser

    @staticmethod
    def default() -> "GraphConfig":
        """Configuration used when there is no config file."""
        cfg = GraphConfig(Path(CONFIG_NAME), dict(GraphConfig.required))
        cfg.validate()
        return cfg
