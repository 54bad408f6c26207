# gplite/__init__.py

from . import config
from . import num
from . import errors
from . import kernel
from . import core
from .core import GP, CompiledGP
from .kernel import Kernel, RBF
from .errors import (
    GPLiteError,
    InvalidParameterError,
    ShapeMismatchError,
    IncompatibleShapeError,
    GPCompilationError,
)

__version__ = config.__version__

__all__ = [
    "num",
    "kernel",
    "core",
    "GP",
    "CompiledGP",
    "Kernel",
    "RBF",
    "GPLiteError",
    "InvalidParameterError",
    "ShapeMismatchError",
    "IncompatibleShapeError",
    "GPCompilationError",
    "__version__",
]
