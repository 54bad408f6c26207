# gplite/kernel/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Gaussian Process kernels.

Modules
-------
base
    Abstract kernel contract used by the GP engine.
rbf
    Anisotropic radial basis function kernel.
utils
    Input conversion and parameter validation helpers.

Public API
-----------
- Kernel contract:
    Kernel
- RBF kernel:
    RBF, rbf_kernel, rbf_covariance
"""

from .base import Kernel
from .rbf import RBF, rbf_kernel, rbf_covariance

__all__ = [
    "Kernel",
    "RBF",
    "rbf_kernel",
    "rbf_covariance",
]
