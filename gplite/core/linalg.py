# gplite/core/linalg.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Linear-algebra utilities shared across gplite.core modules.

This file isolates small helpers (built on top of `gplite.num as gnp`)
used to factorize the covariance matrix of the observations.
"""
import gplite.num as gnp
from gplite.errors import GPCompilationError


def add_to_diagonal(K, value):
    """Return K + value * I as a new matrix."""
    K = gnp.copy(K)
    idx = gnp.arange(K.shape[0])
    K[idx, idx] += value
    return K


def cholesky_factor(K):
    """Lower-triangular Cholesky factor C of K, with K = C Cᵀ.

    Parameters
    ----------
    K : array_like, shape (n, n)
        Symmetric covariance matrix.

    Returns
    -------
    C : gnp.array, shape (n, n)

    Raises
    ------
    GPCompilationError
        If K contains non-finite values or is not positive definite.
    """
    if not gnp.all(gnp.isfinite(K)):
        raise GPCompilationError(
            "covariance matrix contains non-finite values", reason="not_finite"
        )
    try:
        C = gnp.cholesky(K)
    except Exception as exc:
        if gnp.is_linalg_exception(exc):
            raise GPCompilationError(
                "covariance matrix is not positive definite "
                "(duplicated points with zero noise?). Consider adding noise.",
                reason="not_positive_definite",
            ) from exc
        raise
    return C


def cholesky_alpha(C, zi):
    """Solve K alpha = zi given the lower Cholesky factor C of K."""
    return gnp.cho_solve((C, True), zi)
