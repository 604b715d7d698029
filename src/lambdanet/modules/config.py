r"""Configuration of modules composed of named tensor operations."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from lambdanet.core.config import DataclassConfig

from .lambd import Functional
from .sequential import Sequential, functional


@dataclass
class FunctionalConfig(DataclassConfig):
    r"""Named tensor operation with bound arguments."""

    name: str
    args: List[Any] = field(default_factory=list)
    kwargs: Dict[str, Any] = field(default_factory=dict)

    def module(self) -> Functional:
        r"""Create module which applies the configured tensor operation."""
        return functional(self.name, *self.args, **self.kwargs)


@dataclass
class SequentialConfig(DataclassConfig):
    r"""Sequence of named tensor operations."""

    layers: List[FunctionalConfig] = field(default_factory=list)

    def module(self) -> Sequential:
        r"""Create sequence of configured tensor operations."""
        return Sequential(*[layer.module() for layer in self.layers])
