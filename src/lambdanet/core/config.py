r"""Base class of dataclass configurations read from YAML or JSON files."""

from __future__ import annotations

from dataclasses import asdict, is_dataclass
import json
from pathlib import Path
from typing import Any, Dict, Mapping, Type, TypeVar

import dacite
import yaml

from .typing import PathStr


T = TypeVar("T", bound="DataclassConfig")


class DataclassConfig(object):
    r"""Mix-in of dataclass configuration entities.

    Subclasses must be decorated with ``@dataclass``. Configuration values are
    converted from plain Python dictionaries using ``dacite``, which checks the
    types of the values against the field annotations.

    """

    @classmethod
    def _dacite_config(cls) -> dacite.Config:
        return dacite.Config(strict=True)

    @classmethod
    def from_dict(cls: Type[T], arg: Mapping[str, Any]) -> T:
        r"""Create configuration from dictionary."""
        if not is_dataclass(cls):
            raise TypeError(f"{cls.__name__}.from_dict() must be called on a dataclass")
        if not isinstance(arg, Mapping):
            raise TypeError(f"{cls.__name__}.from_dict() 'arg' must be mapping")
        try:
            return dacite.from_dict(cls, dict(arg), config=cls._dacite_config())
        except dacite.UnexpectedDataError as error:
            raise ValueError(f"{cls.__name__}.from_dict() {error}") from error
        except dacite.MissingValueError as error:
            raise ValueError(f"{cls.__name__}.from_dict() {error}") from error
        except dacite.WrongTypeError as error:
            raise TypeError(f"{cls.__name__}.from_dict() {error}") from error

    @classmethod
    def read(cls: Type[T], path: PathStr) -> T:
        r"""Read configuration from YAML or JSON file."""
        return cls.from_dict(read_config_dict(path))

    def asdict(self) -> Dict[str, Any]:
        r"""Get dictionary of configuration values."""
        return asdict(self)

    def write(self, path: PathStr) -> None:
        r"""Write configuration to YAML or JSON file."""
        write_config_dict(self.asdict(), path)


def read_config_dict(path: PathStr) -> Dict[str, Any]:
    r"""Load configuration values from YAML or JSON file."""
    config_path = Path(path).absolute()
    config_text = config_path.read_text()
    if config_path.suffix == ".json":
        config = json.loads(config_text)
    else:
        config = yaml.safe_load(config_text)
    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ValueError(f"read_config_dict() file {config_path} must contain a dictionary")
    return config


def write_config_dict(config: Mapping[str, Any], path: PathStr) -> None:
    r"""Write configuration values to YAML or JSON file."""
    config = _plain(config)
    config_path = Path(path).absolute()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    if config_path.suffix == ".json":
        config_text = json.dumps(config, indent=4)
    else:
        config_text = yaml.safe_dump(config, sort_keys=False)
    config_path.write_text(config_text)


def _plain(value: Any) -> Any:
    # YAML safe_dump and JSON only support builtin containers
    if isinstance(value, Mapping):
        return {key: _plain(val) for key, val in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(val) for val in value]
    return value
