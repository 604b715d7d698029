r"""Auxiliary functions for torch.nn.Module instances."""

from torch.nn import Module


def has_children(module: Module) -> bool:
    r"""Check if module has other modules as children."""
    try:
        next(iter(module.children()))
    except StopIteration:
        return False
    return True


def is_serializable(module: Module) -> bool:
    r"""Check if state of module and all its submodules can be saved.

    Modules which define an ``is_serializable()`` method returning ``False``, such as
    ``Functional`` modules, make the entire module tree non-serializable.

    """
    for submodule in module.modules():
        check = getattr(submodule, "is_serializable", None)
        if callable(check) and not check():
            return False
    return True
