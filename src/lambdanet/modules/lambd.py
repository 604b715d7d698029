r"""Wrap any function in a torch.nn.Module."""

from __future__ import annotations

import copy
from functools import partial
from typing import Any, Callable

from torch import Tensor
from torch.nn import Module

from lambdanet.core.functions import BoundFunc, bind_args, bound_args_repr, func_name
from lambdanet.core.typing import TensorFunc


class Functional(Module):
    r"""Wrap any tensor operation in a network module.

    The ``Functional`` module is primarily handy for use in ``torch.nn.Sequential``:

    .. code-block:: python

        model = torch.nn.Sequential(
            torch.nn.Linear(3, 4),
            Functional(torch.relu),
            torch.nn.BatchNorm1d(4),
            Functional(torch.nn.functional.leaky_relu, 0.5),
        )

    While the module only accepts a single tensor as input, the wrapped function may
    have further parameters. Their values must be bound at construction time. They are
    passed to the function after the input tensor. Bound values are copied once when the
    module is created and stored within the module. Later changes of the objects that
    were passed in do not affect the output of the module.

    """

    def __init__(self, func: Callable[..., Tensor], *args: Any, **kwargs: Any) -> None:
        r"""Set callable tensor operation.

        Args:
            func: Callable tensor operation. Must be instance of ``torch.nn.Module``
                if it contains learnable parameters. In this case, however, the
                ``Functional`` wrapper becomes redundant. Main use is to wrap
                non-learnable Python functions.
            args: Positional arguments following the input tensor.
            kwargs: Keyword arguments of ``func``.

        """
        if not callable(func):
            raise TypeError("Functional() 'func' must be callable")
        super().__init__()
        self.func: TensorFunc = bind_args(func, *args, **kwargs)

    def reset(self) -> None:
        r"""Reset module state. There is none."""

    def forward(self, input: Tensor) -> Tensor:
        r"""Forward input tensor to the wrapped function."""
        return self.func(input)

    def is_serializable(self) -> bool:
        r"""Whether module state can be saved. Always ``False`` for a bound callable."""
        return False

    def clone(self) -> Functional:
        r"""Create copy of this module.

        The wrapped function is shared with the copy unless it is a ``torch.nn.Module``,
        which is copied such that changes of its state do not affect the original.

        """
        memo = {} if isinstance(self.func, Module) else {id(self.func): self.func}
        module = copy.deepcopy(self, memo)
        module.reset()
        return module

    def extra_repr(self) -> str:
        func = self.func
        args, kwargs = (), {}
        if isinstance(func, BoundFunc):
            args, kwargs = func.args, func.keywords
        elif isinstance(func, partial):
            args, kwargs = func.args, func.keywords
        return ", ".join([func_name(func)] + bound_args_repr(args, kwargs))


def is_functional(arg: Any) -> bool:
    r"""Whether given object is a module which wraps a tensor function."""
    return isinstance(arg, Functional)
