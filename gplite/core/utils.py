# gplite/core/utils.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Small utilities used across `gplite.core` modules.

This file hosts:
- Shape/type validation & conversion helpers for (xi, zi, xt)
- Kernel and noise validation at construction time
"""
import gplite.num as gnp
from gplite.errors import (
    GPCompilationError,
    IncompatibleShapeError,
    InvalidParameterError,
)
from gplite.kernel.utils import as_batch


def ensure_training_data(xi, zi, input_dim=None):
    """Validate and convert training data.

    Parameters
    ----------
    xi : array_like, shape (n, d)
        Observation points. A 1D array is read as a single point.
    zi : array_like, shape (n,) or (n, 1)
        Observed values.
    input_dim : int, optional
        Expected dimension d, usually the kernel's `input_dim`.

    Returns
    -------
    xi : gnp.array, shape (n, d)
    zi : gnp.array, shape (n,)

    Raises
    ------
    GPCompilationError
        If the data are empty, not finite, or have inconsistent shapes.
    """
    xi = as_batch(xi, error=_shape_error)
    try:
        zi = gnp.asarray(zi, dtype=gnp.float64)
    except (TypeError, ValueError) as exc:
        raise GPCompilationError(
            f"cannot convert zi to a numeric array: {exc}", reason="shape"
        ) from exc

    if zi.ndim == 0:
        zi = zi.reshape(1)
    elif zi.ndim == 2 and zi.shape[1] == 1:
        zi = zi.reshape(-1)  # (n,1) -> (n,)
    elif zi.ndim != 1:
        raise GPCompilationError(
            f"zi should be 1D or a 2D column array, got shape {zi.shape}",
            reason="shape",
        )

    if xi.shape[0] != zi.shape[0]:
        raise GPCompilationError(
            f"xi and zi must have the same number of rows, "
            f"got {xi.shape[0]} and {zi.shape[0]}",
            reason="shape",
        )
    if xi.shape[0] == 0:
        raise GPCompilationError("cannot compile with zero observations", reason="empty")
    if input_dim is not None and xi.shape[1] != input_dim:
        raise GPCompilationError(
            f"xi has {xi.shape[1]} columns, kernel expects {input_dim}",
            reason="shape",
        )
    if not (gnp.all(gnp.isfinite(xi)) and gnp.all(gnp.isfinite(zi))):
        raise GPCompilationError("xi and zi must be finite", reason="not_finite")

    return xi, zi


def ensure_query_points(xt, input_dim):
    """Convert prediction points to (m, d) and check d against the training data.

    Raises
    ------
    IncompatibleShapeError
        If `xt` cannot be read as a batch of points of dimension `input_dim`.
    """
    xt = as_batch(xt, error=IncompatibleShapeError)
    if xt.shape[1] != input_dim:
        raise IncompatibleShapeError(
            f"model was compiled on points of dimension {input_dim}, "
            f"got query points of shape {xt.shape}"
        )
    return xt


def validate_kernel(kernel):
    """Check that `kernel` provides a callable `call(x, y)`.

    Raises
    ------
    TypeError
        If the kernel contract is not satisfied.
    """
    if not callable(getattr(kernel, "call", None)):
        raise TypeError(
            f"kernel must provide a call(x, y) method, got {type(kernel).__name__}"
        )


def validate_noise(noise):
    """Return `noise` as a float after checking it is finite and nonnegative."""
    try:
        noise = float(noise)
    except (TypeError, ValueError) as exc:
        raise InvalidParameterError(f"noise must be a real number: {exc}") from exc
    if not gnp.isfinite(noise) or noise < 0.0:
        raise InvalidParameterError(
            f"noise must be finite and nonnegative, got {noise}"
        )
    return noise


def _shape_error(message):
    return GPCompilationError(message, reason="shape")
