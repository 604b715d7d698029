r"""Test module which wraps a tensor function."""

from functools import partial

import pytest

import torch
from torch import Tensor, nn
import torch.nn.functional as F

from lambdanet.modules import Functional, is_functional, is_serializable


def test_functional_forward() -> None:
    r"""Test forwarding of input to wrapped function."""

    double = Functional(lambda a: 2 * a)
    assert isinstance(double, nn.Module)
    assert is_functional(double)
    assert not list(double.parameters())
    assert not list(double.children())

    y = double(torch.tensor(3))
    assert isinstance(y, Tensor)
    assert y.item() == 6
    y = double(torch.tensor(5))
    assert y.item() == 10

    x = torch.tensor([[1.0, -2.0, 3.0, 4.0, -5.0]])
    relu = Functional(torch.relu)
    assert relu.func is torch.relu
    assert relu(x).equal(torch.relu(x))

    def func(a: Tensor) -> Tensor:
        return a.square().sum()

    module = Functional(func)
    assert module.func is func
    assert module.forward(x).equal(func(x))

    with pytest.raises(TypeError):
        Functional(None)  # type: ignore
    with pytest.raises(TypeError):
        Functional("relu")  # type: ignore


def test_functional_bound_args() -> None:
    r"""Test arguments bound at construction time."""

    x = torch.tensor([-4.0, -2.0, 0.0, 2.0])

    slope = 0.5
    lrelu = Functional(F.leaky_relu, slope)
    slope = 2.0
    assert slope == 2.0
    assert lrelu(x).equal(torch.tensor([-2.0, -1.0, 0.0, 2.0]))
    assert lrelu(-x).equal(torch.tensor([4.0, 2.0, 0.0, -1.0]))

    lrelu = Functional(F.leaky_relu, negative_slope=0.1)
    assert lrelu(x).allclose(F.leaky_relu(x, negative_slope=0.1))

    scale = torch.tensor(3.0)
    mul = Functional(torch.mul, scale)
    assert mul(x).equal(3 * x)
    scale.fill_(7.0)
    assert mul(x).equal(3 * x)
    assert mul(torch.ones(2)).equal(torch.tensor([3.0, 3.0]))

    dims = [0]
    flip = Functional(torch.flip, dims=dims)
    dims.append(1)
    assert flip(x).equal(x.flip(0))

    # functools.partial prepends its positional arguments
    sub = Functional(partial(torch.sub, torch.tensor(1.0)))
    assert sub(x).equal(1 - x)


def test_functional_error_propagation() -> None:
    r"""Test that errors of wrapped function are not caught."""

    class CustomError(Exception):
        pass

    def fail(a: Tensor) -> Tensor:
        raise CustomError("failed")

    module = Functional(fail)
    with pytest.raises(CustomError, match="failed"):
        module(torch.zeros(1))

    module = Functional(torch.matmul, torch.ones(3, 2))
    with pytest.raises(RuntimeError):
        module(torch.ones(2, 2))


def test_functional_reset() -> None:
    r"""Test that reset does not change result."""

    x = torch.arange(5, dtype=torch.float)
    module = Functional(torch.add, 1)
    y = module(x)
    assert module.reset() is None
    module.reset()
    assert module(x).equal(y)


def test_functional_clone() -> None:
    r"""Test creating a copy of a module."""

    x = torch.arange(5, dtype=torch.float)
    module = Functional(torch.add, 2)
    module.eval()

    other = module.clone()
    assert isinstance(other, Functional)
    assert other is not module
    assert other.func is module.func
    assert other.training is False
    assert other(x).equal(module(x))

    other.train()
    assert module.training is False


def test_functional_is_serializable() -> None:
    r"""Test that module state is never saved."""

    assert Functional(torch.relu).is_serializable() is False
    assert Functional(lambda a: a).is_serializable() is False
    assert Functional(F.leaky_relu, 0.5).is_serializable() is False

    model = nn.Sequential(nn.Linear(3, 4), Functional(torch.relu))
    assert is_serializable(model) is False
    assert is_serializable(nn.Sequential(nn.Linear(3, 4), nn.ReLU())) is True


def test_functional_repr() -> None:
    r"""Test string representation of module."""

    assert repr(Functional(torch.relu)) == "Functional(relu)"
    assert repr(Functional(F.leaky_relu, 0.5)) == "Functional(leaky_relu, 0.5)"
    assert repr(Functional(F.softmax, dim=1)) == "Functional(softmax, dim=1)"
    assert repr(Functional(torch.mul, torch.tensor(2.0))) == "Functional(mul, 2.0)"
    assert repr(Functional(torch.mul, torch.ones(2, 3))) == "Functional(mul, Tensor(shape=(2, 3)))"

    def scale(a: Tensor) -> Tensor:
        return 2 * a

    assert repr(Functional(scale)) == "Functional(scale)"
    assert repr(Functional(lambda a: a)) == "Functional(<lambda>)"

    model = nn.Sequential(Functional(torch.relu))
    assert "(0): Functional(relu)" in repr(model)


def test_functional_clone_of_wrapped_module() -> None:
    r"""Test that copy of module wrapping another module is independent."""

    module = Functional(nn.Dropout(0.5))
    other = module.clone()
    assert isinstance(other.func, nn.Dropout)
    assert other.func is not module.func

    other.eval()
    assert other.func.training is False
    assert module.training is True
    assert module.func.training is True

    x = torch.ones(4)
    assert other(x).equal(x)
