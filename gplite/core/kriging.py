# gplite/core/kriging.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Posterior mean, variance and covariance computations.

This module contains the numerical routines used by
`gplite.core.CompiledGP`. With C the lower Cholesky factor of
K = k(xi, xi) + noise * I and alpha = K^{-1} zi, the posterior at xt is

    mean = k(xi, xt)ᵀ alpha
    cov  = k(xt, xt) - Vᵀ V,  with V = C^{-1} k(xi, xt)

and the posterior variance is the diagonal of cov, computed from the
columns of V without forming the (m, m) matrix.

Functions
---------
prior_covariance(kernel, xt)
    k(xt, xt), through `kernel.symmetric` when available.
prior_variance(kernel, xt)
    k(xt_j, xt_j), through `kernel.diagonal` when available.
solve_cross_covariance(C, Kit)
    V = C^{-1} k(xi, xt).
posterior_mean(Kit, alpha)
posterior_variance(zt_prior_variance, V)
posterior_covariance(Ktt, V)
clip_negative_variances(zt_posterior_variance, zt_prior_variance, zero_neg_variances)
"""
import warnings
import gplite.num as gnp

# Negative variances above -NEG_VARIANCE_RTOL * prior variance are rounding noise
NEG_VARIANCE_RTOL = 1e-8


def prior_covariance(kernel, xt):
    symmetric = getattr(kernel, "symmetric", None)
    if callable(symmetric):
        return symmetric(xt)
    return kernel.call(xt, xt)


def prior_variance(kernel, xt):
    diagonal = getattr(kernel, "diagonal", None)
    if callable(diagonal):
        return gnp.asarray(diagonal(xt)).reshape(-1)
    return gnp.asarray(
        [kernel.call(xt[j : j + 1], xt[j : j + 1])[0, 0] for j in range(xt.shape[0])]
    ).reshape(-1)


def solve_cross_covariance(C, Kit):
    """Return V = C^{-1} Kit, shape (n, m)."""
    return gnp.solve_triangular(C, Kit, lower=True)


def posterior_mean(Kit, alpha):
    """Posterior mean Kitᵀ alpha, shape (m,)."""
    return gnp.einsum("i..., i...", Kit, alpha)


def posterior_variance(zt_prior_variance, V):
    """Posterior variances k(xt_j, xt_j) - ||V[:, j]||², shape (m,)."""
    return zt_prior_variance - gnp.einsum("i..., i...", V, V)


def posterior_covariance(Ktt, V):
    """Posterior covariance Ktt - Vᵀ V, shape (m, m)."""
    return Ktt - gnp.matmul(V.T, V)


def clip_negative_variances(zt_posterior_variance, zt_prior_variance, zero_neg_variances=True):
    """Warn about significantly negative variances and optionally set them to zero."""
    tol = NEG_VARIANCE_RTOL * gnp.maximum(zt_prior_variance, 1.0)
    if gnp.any(zt_posterior_variance < -tol):
        warnings.warn(
            "Negative variances detected. Consider adding noise.",
            RuntimeWarning,
        )
    if zero_neg_variances:
        zt_posterior_variance = gnp.maximum(zt_posterior_variance, 0.0)
    return zt_posterior_variance
