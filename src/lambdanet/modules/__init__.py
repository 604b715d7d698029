r"""Network modules which wrap tensor operations.

Modules in this library are ``torch.nn.Module`` subclasses which can be composed with any
other PyTorch module, e.g., in a ``torch.nn.Sequential``. The ``Functional`` module wraps a
tensor function, optionally with further arguments bound at construction time.

"""

from .config import FunctionalConfig
from .config import SequentialConfig

from .lambd import Functional
from .lambd import is_functional

from .sequential import Sequential
from .sequential import functional

from .utilities import has_children
from .utilities import is_serializable


__all__ = (
    "Functional",
    "FunctionalConfig",
    "functional",
    "has_children",
    "is_functional",
    "is_serializable",
    "Sequential",
    "SequentialConfig",
)
