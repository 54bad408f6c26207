# gplite/num/numpy_backend.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""NumPy numerical backend for gplite.

This module defines the NumPy/SciPy implementation of the gplite.num API.
"""

from typing import Any, Optional
from gplite.config import get_config, init_backend, get_logger

ArrayLike = Any

_gplite_backend_: str = init_backend()
_config = get_config()
_logger = get_logger()
_logger.debug("Using backend: %s", _gplite_backend_)


# -----------------------------------------------------
#
#                      NUMPY
#
# -----------------------------------------------------

import numpy
from numpy.typing import NDArray

_np_dtype = numpy.float64
_config.dtype_resolved = _np_dtype

ndarray = NDArray[numpy.floating]
from numpy import (
    copy,
    array_equal,
    where,
    any,
    isinf,
    isfinite,
    isclose,
    allclose,
    concatenate,
    diag,
    arange,
    sqrt,
    exp,
    log,
    sum,
    min,
    maximum,
    einsum,
    matmul,
    all,
)
from numpy.linalg import cholesky, eigvalsh
from numpy import inf
from numpy import float64
from scipy.linalg import solve_triangular, cho_solve
from scipy.spatial.distance import cdist, pdist, squareform

# ..................................................

fmax = numpy.finfo(_np_dtype).max

# ..................................................

def array(x, dtype=None):
    if dtype is not None:
        return numpy.array(x, dtype=dtype)
    out = numpy.array(x)
    if numpy.issubdtype(out.dtype, numpy.floating):
        return out.astype(_np_dtype, copy=False)
    return out

def asarray(x, dtype=None):
    if dtype is not None:
        return numpy.asarray(x, dtype=dtype)
    if isinstance(x, numpy.ndarray):
        if numpy.issubdtype(x.dtype, numpy.floating):
            return x.astype(_np_dtype, copy=False)
        if numpy.issubdtype(x.dtype, numpy.integer):
            return x.astype(_np_dtype)
        return x
    elif isinstance(x, (int, float)):
        return numpy.array([x], dtype=_np_dtype)
    else:
        out = numpy.asarray(x)
        if numpy.issubdtype(out.dtype, numpy.integer):
            return out.astype(_np_dtype)
        if numpy.issubdtype(out.dtype, numpy.floating):
            return out.astype(_np_dtype, copy=False)
        return out

def zeros(shape, dtype=None):
    return numpy.zeros(shape, dtype=_np_dtype if dtype is None else dtype)

def ones(shape, dtype=None):
    return numpy.ones(shape, dtype=_np_dtype if dtype is None else dtype)

def eye(n, m=None, k=0, dtype=None):
    return numpy.eye(n, M=m, k=k, dtype=_np_dtype if dtype is None else dtype)

def to_scalar(x):
    return x.item()

def readonly(x):
    """Return a read-only copy of `x`."""
    out = numpy.array(x, dtype=_np_dtype, copy=True)
    out.setflags(write=False)
    return out

def inftobigf(a, bigf=fmax / 1000.0):
    a = where(numpy.isinf(a), numpy.full_like(a, bigf), a)
    return a

# ..................................................

def _sqweights(invrho):
    return numpy.minimum(invrho, numpy.sqrt(fmax / 1000.0)) ** 2

def scaled_sqdistance(invrho: ArrayLike, x: ArrayLike, y: ArrayLike) -> ArrayLike:
    """Squared Euclidean distances between the rows of x and y, each
    coordinate difference being scaled by invrho."""
    return cdist(x, y, "sqeuclidean", w=_sqweights(invrho))

def scaled_sqdistance_sym(invrho: ArrayLike, x: ArrayLike) -> ArrayLike:
    """Symmetric version of `scaled_sqdistance` with zeros on the diagonal."""
    if x.shape[0] < 2:
        return zeros((x.shape[0], x.shape[0]))
    return squareform(pdist(x, "sqeuclidean", w=_sqweights(invrho)))

def scaled_sqdistance_elementwise(
    invrho: ArrayLike, x: ArrayLike, y: Optional[ArrayLike]
) -> ArrayLike:
    if x is y or y is None:
        d = zeros((x.shape[0],))
    else:
        d = sum((invrho * (x - y)) ** 2, axis=1)
    return d

# ..................................................

_np_rng = numpy.random.default_rng(seed=1234)

def set_seed(seed: int) -> None:
    """Set the global NumPy generator seed."""
    global _np_rng
    _np_rng = numpy.random.default_rng(seed=seed)

def randn(*shape: int) -> ArrayLike:
    return _np_rng.normal(loc=0, scale=1, size=shape).astype(_np_dtype, copy=False)
