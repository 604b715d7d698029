r"""Common types and functions used by the network modules.

Besides type annotations, this core library defines the lookup of tensor operations by name,
and the base class of configuration entities.

"""

from .config import DataclassConfig
from .config import read_config_dict
from .config import write_config_dict

from .functions import FUNCTION_ALIASES
from .functions import BoundFunc
from .functions import bind_args
from .functions import capture_value
from .functions import func_name
from .functions import identity
from .functions import lookup_func
from .functions import tensor_func

from .typing import PathStr
from .typing import TensorFunc
from .typing import TensorFuncArg


__all__ = (
    "bind_args",
    "BoundFunc",
    "capture_value",
    "DataclassConfig",
    "func_name",
    "FUNCTION_ALIASES",
    "identity",
    "lookup_func",
    "PathStr",
    "read_config_dict",
    "tensor_func",
    "TensorFunc",
    "TensorFuncArg",
    "write_config_dict",
)
