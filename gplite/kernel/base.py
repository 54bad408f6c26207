# gplite/kernel/base.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Kernel contract.

A kernel is a covariance function k(x, y) with fixed, validated
parameters and a fixed input dimension d. `gplite.core.GP` only relies
on `call`, and uses `symmetric` and `diagonal` when they are available.
"""
from abc import ABC, abstractmethod

import gplite.num as gnp
from gplite.errors import ShapeMismatchError
from .utils import as_batch


class Kernel(ABC):
    """Abstract covariance function over points in dimension `input_dim`.

    Subclasses validate their parameters in `__init__`, raising
    `gplite.errors.InvalidParameterError`, and implement `call` and
    `params`. Parameters are immutable once the kernel is built.
    """

    def __init__(self, input_dim):
        self._input_dim = int(input_dim)

    @property
    def input_dim(self):
        """Dimension d of the points accepted by the kernel."""
        return self._input_dim

    @property
    @abstractmethod
    def params(self):
        """Copy of the kernel parameters."""

    @abstractmethod
    def call(self, x, y):
        """Covariance matrix between two batches of points.

        Parameters
        ----------
        x : array_like, shape (n, d)
        y : array_like, shape (m, d)

        Returns
        -------
        gnp.array, shape (n, m)
            Entry (i, j) is k(x_i, y_j).

        Raises
        ------
        ShapeMismatchError
            If x or y do not have d columns.
        """

    def __call__(self, x, y):
        return self.call(x, y)

    def symmetric(self, x):
        """Covariance matrix k(x, x), shape (n, n)."""
        return self.call(x, x)

    def diagonal(self, x):
        """Vector of variances k(x_i, x_i), shape (n,)."""
        x = self.check_input(x)
        return gnp.asarray(
            [self.call(x[i : i + 1], x[i : i + 1])[0, 0] for i in range(x.shape[0])]
        ).reshape(-1)

    def check_input(self, x):
        """Convert `x` to an (n, d) array and check d against `input_dim`."""
        x = as_batch(x)
        if x.shape[1] != self._input_dim:
            raise ShapeMismatchError(
                f"{type(self).__name__} expects points of dimension "
                f"{self._input_dim}, got shape {x.shape}"
            )
        return x
