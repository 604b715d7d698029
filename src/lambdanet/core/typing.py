r"""Type annotations for tensor functions and configurations."""

from pathlib import Path
from typing import Any, Callable, Mapping, Tuple, Union

from torch import Tensor


TensorFunc = Callable[[Tensor], Tensor]

# Name of function, mapping with "name" key and bound keyword arguments,
# or (name, kwargs) tuple. See ``lambdanet.modules.functional()``.
TensorFuncArg = Union[TensorFunc, str, Mapping[str, Any], Tuple[str, Mapping[str, Any]]]

PathStr = Union[Path, str]
