r"""Compose tensor operations and network modules."""

from collections import OrderedDict
import logging
from typing import Any, Mapping, Union

from torch import nn
from torch.nn import Module

from lambdanet.core.functions import func_name, tensor_func
from lambdanet.core.typing import TensorFuncArg

from .lambd import Functional


logger = logging.getLogger(__name__)


def functional(arg: TensorFuncArg, *args: Any, **kwargs: Any) -> Module:
    r"""Get module which applies a tensor operation.

    Args:
        arg: Custom tensor operation or module, name of tensor function (cf. ``lambdanet.core.tensor_func()``),
            mapping with ``"name"`` and keyword arguments of the function, or ``(name, kwargs)`` tuple.
        args: Positional arguments bound after the input tensor.
        kwargs: Keyword arguments bound to the function. Overrides keyword arguments given as second
            tuple item when ``arg`` is a ``(name, kwargs)`` tuple or contained in a mapping.

    Returns:
        Given module when ``arg`` is a ``torch.nn.Module`` and no arguments are to be bound,
        or a new ``Functional`` module otherwise.

    """
    if isinstance(arg, Module) and not args and not kwargs:
        return arg
    if callable(arg):
        return Functional(arg, *args, **kwargs)
    func_args = {}
    if isinstance(arg, str):
        name = arg
    elif isinstance(arg, Mapping):
        name = arg.get("name")
        if not name:
            raise ValueError("functional() 'arg' map must contain 'name'")
        if not isinstance(name, str):
            raise TypeError("functional() 'name' must be str")
        func_args = {key: value for key, value in arg.items() if key != "name"}
    elif isinstance(arg, (list, tuple)):
        if len(arg) != 2:
            raise ValueError("functional() 'arg' sequence must have length two")
        name, func_args = arg
        if not isinstance(name, str):
            raise TypeError("functional() first 'arg' sequence argument must be str")
        if not isinstance(func_args, Mapping):
            raise TypeError("functional() second 'arg' sequence argument must be dict")
        func_args = dict(func_args)
    else:
        raise TypeError("functional() 'arg' must be str, mapping, 2-tuple, or callable")
    func_args.update(kwargs)
    func = tensor_func(name)
    return Functional(func, *args, **func_args)


class Sequential(nn.Sequential):
    r"""Sequence of network modules and tensor operations.

    Layers which are not of type ``torch.nn.Module`` are wrapped by ``functional()``.

    .. code-block:: python

        model = Sequential(nn.Linear(3, 4), torch.relu, ("leaky_relu", {"negative_slope": 0.5}))

    """

    def __init__(self, *args: Any) -> None:
        if len(args) == 1 and isinstance(args[0], OrderedDict):
            layers = OrderedDict((key, self._as_module(value)) for key, value in args[0].items())
            super().__init__(layers)
        else:
            super().__init__(*[self._as_module(arg) for arg in args])

    def append(self, module: Union[Module, TensorFuncArg]) -> "Sequential":
        return super().append(self._as_module(module))

    def insert(self, index: int, module: Union[Module, TensorFuncArg]) -> "Sequential":
        return super().insert(index, self._as_module(module))

    def __setitem__(self, idx: int, module: Union[Module, TensorFuncArg]) -> None:
        super().__setitem__(idx, self._as_module(module))

    @staticmethod
    def _as_module(arg: Union[Module, TensorFuncArg]) -> Module:
        if isinstance(arg, Module):
            return arg
        module = functional(arg)
        logger.debug("Sequential() wrapped %s in Functional module", func_name(module.func))
        return module
