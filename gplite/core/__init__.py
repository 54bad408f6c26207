# gplite/core/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------

"""
Core components of the gplite package.

This subpackage contains the Gaussian Process engine: compilation of
training data through a Cholesky factorization, and posterior mean,
variance and covariance computations.

Public API
----------
GP : class
    Uncompiled model holding a kernel and a noise variance.
CompiledGP : class
    Immutable fitted model returned by `GP.compile`.
"""

from .model import GP, CompiledGP

__all__ = ["GP", "CompiledGP"]
