# gplite/kernel/utils.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Input conversion and parameter validation helpers for kernels.

Batches of points are laid out as rows: an array of shape (n, d)
holds n points in dimension d. A 1D array is read as a single point.
"""
import gplite.num as gnp
from gplite.errors import InvalidParameterError, ShapeMismatchError


def as_batch(x, error=ShapeMismatchError):
    """Convert `x` to a 2D (n, d) backend array.

    Parameters
    ----------
    x : array_like
        Points as rows, or a single point given as a 1D array.
    error : type, optional
        Exception class raised when `x` cannot be read as a batch.

    Returns
    -------
    gnp.array, shape (n, d)
    """
    try:
        x = gnp.asarray(x)
    except (TypeError, ValueError) as exc:
        raise error(f"cannot convert input to a numeric array: {exc}") from exc
    if x.ndim <= 1:
        x = x.reshape(1, -1)
    elif x.ndim != 2:
        raise error(f"expected a 2D (n, d) array, got shape {x.shape}")
    if x.dtype.kind != "f":
        raise error(f"expected real-valued inputs, got dtype {x.dtype}")
    return x


def positive_vector(values, name):
    """Validate a non-empty 1D vector of finite, strictly positive reals."""
    try:
        v = gnp.asarray(values, dtype=gnp.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidParameterError(f"{name} must be real numbers: {exc}") from exc
    if v.ndim == 0:
        v = v.reshape(1)
    if v.ndim != 1:
        raise InvalidParameterError(f"{name} must be a 1D sequence, got shape {v.shape}")
    if v.shape[0] == 0:
        raise InvalidParameterError(f"{name} must not be empty")
    if not gnp.all(gnp.isfinite(v)):
        raise InvalidParameterError(f"{name} must be finite, got {v}")
    if gnp.any(v <= 0.0):
        raise InvalidParameterError(f"{name} must be strictly positive, got {v}")
    return v


def positive_scalar(value, name):
    """Validate a finite, strictly positive real scalar."""
    try:
        s = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidParameterError(f"{name} must be a real number: {exc}") from exc
    if not gnp.isfinite(s) or s <= 0.0:
        raise InvalidParameterError(f"{name} must be finite and strictly positive, got {s}")
    return s
