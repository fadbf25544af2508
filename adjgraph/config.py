"""Configuration file parser."""

import logging
from abc import ABC, abstractmethod
from io import StringIO
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, TextIO, Type, TypeVar

import yaml

T = TypeVar("T", bound="Config")


class Config(ABC):

    """Abstract base class for YAML configuration.

    Subclasses should override the class attributes "required" and "optional".

    Example usage:

        # Assuming MyConfig is a subclass of Config:
        cfg = MyConfig.load(Path("/path/to/graph.yml"))
        cfg.validate()

    The creator must call validate(). Errors are logged rather than raised, so
    whether they are fatal depends on the logging setup.
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

    def validate(self):
        """Validate the loaded configuration.

        Logs an error for each missing required key and a warning for each
        unknown key, then fills in defaults.
        """
        for key in self.required:
            if key not in self.data:
                logging.error("%s: missing %r", self.path, key)
        for key in self.data:
            if key not in self.required and key not in self.optional:
                logging.warning("%s: unknown key %r", self.path, key)
        self.data = {**self.required, **self.optional, **self.data}

    @classmethod
    def load(cls: Type[T], path: Path) -> T:
        """Load configuration from a file.

        A file that cannot be opened is logged and loads as empty.
        """
        try:
            with open(path, encoding="utf-8") as f:
                return cls.load_from(path, f)
        except OSError as ex:
            logging.error("cannot read %s: %s", path, ex)
            return cls(path, {})

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
        except UnicodeDecodeError as ex:
            logging.error("cannot read %s: %s", path, ex)
            data = {}
        if not isinstance(data, dict):
            logging.error("invalid YAML in %s: %s", path, type(data).__name__)
            data = {}
        return cls(path, data)

    def __getitem__(self, key: str) -> Any:
        """Get a configuration value."""
        return self.data[key]

    def get(self, key: str) -> Optional[Any]:
        """Get a configuration value, or None if it does not exist."""
        return self.data.get(key)
