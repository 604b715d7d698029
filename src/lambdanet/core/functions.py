r"""Look up tensor functions by name and bind their arguments."""

import copy
from functools import partial
import logging
from typing import Any, Callable, List, Mapping, Optional, Sequence

import torch
from torch import Tensor
import torch.nn.functional as F

from .typing import TensorFunc


logger = logging.getLogger(__name__)


def identity(x: Tensor) -> Tensor:
    r"""Return input tensor."""
    return x


FUNCTION_ALIASES = {
    "identity": identity,
    "none": identity,
    "lrelu": F.leaky_relu,
    "leakyrelu": F.leaky_relu,
    "logsoftmax": F.log_softmax,
    "logsigmoid": F.logsigmoid,
    "abs": torch.abs,
    "exp": torch.exp,
    "log": torch.log,
    "neg": torch.neg,
    "sqrt": torch.sqrt,
    "square": torch.square,
    "sigmoid": torch.sigmoid,
    "tanh": torch.tanh,
}


def lookup_func(name: str) -> Optional[Callable[..., Any]]:
    r"""Get tensor function with given name, or ``None`` if unknown.

    The name is case insensitive. It is first looked up in ``FUNCTION_ALIASES``,
    then in ``torch.nn.functional``, and finally in the ``torch`` namespace.

    """
    key = name.lower()
    func = FUNCTION_ALIASES.get(key)
    if func is not None:
        return func
    if key.startswith("_"):
        return None
    for namespace in (F, torch):
        func = getattr(namespace, key, None)
        if callable(func) and not isinstance(func, type):
            return func
    return None


def tensor_func(arg: Any) -> TensorFunc:
    r"""Get callable tensor operation.

    Args:
        arg: Callable which is returned as is, or name of tensor function.

    Returns:
        Callable tensor operation.

    """
    if callable(arg):
        return arg
    if not isinstance(arg, str):
        raise TypeError("tensor_func() 'arg' must be str or callable")
    func = lookup_func(arg)
    if func is None:
        raise ValueError(
            f"tensor_func() 'arg' name {arg!r} is unknown."
            " Pass a callable tensor operation instead."
        )
    logger.debug("tensor_func() resolved %r to %s", arg, func_name(func))
    return func


def func_name(func: Callable[..., Any]) -> str:
    r"""Get display name of callable."""
    while isinstance(func, (partial, BoundFunc)):
        func = func.func
    name = getattr(func, "__name__", None)
    if not name:
        name = type(func).__name__
    return name


class BoundFunc(object):
    r"""Tensor operation with arguments bound after the input tensor.

    Unlike ``functools.partial``, which prepends bound positional arguments, the input
    tensor is passed as first argument, followed by the bound arguments. The bound
    values are copied when the object is created such that later changes of the
    objects passed in, including in-place modifications of tensors, have no effect.

    """

    def __init__(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
        if not callable(func):
            raise TypeError("BoundFunc() 'func' must be callable")
        self.func = func
        self.args = tuple(capture_value(arg) for arg in args)
        self.keywords = {name: capture_value(value) for name, value in kwargs.items()}

    def __call__(self, x: Tensor) -> Tensor:
        return self.func(x, *self.args, **self.keywords)

    def __repr__(self) -> str:
        args = ", ".join(bound_args_repr(self.args, self.keywords))
        return f"{type(self).__name__}({func_name(self.func)}, {args})"


def bind_args(func: Callable[..., Any], *args: Any, **kwargs: Any) -> TensorFunc:
    r"""Bind arguments following the input tensor of a tensor operation.

    Returns ``func`` itself when there are no arguments to bind.

    """
    if args or kwargs:
        return BoundFunc(func, *args, **kwargs)
    return func


def capture_value(value: Any) -> Any:
    r"""Copy bound argument value."""
    if isinstance(value, Tensor):
        return value.clone()
    if type(value) in (list, tuple):
        return type(value)(capture_value(item) for item in value)
    if type(value) is dict:
        return {key: capture_value(item) for key, item in value.items()}
    return copy.deepcopy(value)


def value_repr(value: Any) -> str:
    r"""Short string representation of bound argument value."""
    if isinstance(value, Tensor):
        if value.numel() == 1:
            return repr(value.item())
        return f"Tensor(shape={tuple(value.shape)})"
    return repr(value)


def bound_args_repr(args: Sequence[Any], kwargs: Mapping[str, Any]) -> List[str]:
    r"""String representations of bound positional and keyword arguments."""
    items = [value_repr(arg) for arg in args]
    items += [f"{name}={value_repr(value)}" for name, value in kwargs.items()]
    return items
