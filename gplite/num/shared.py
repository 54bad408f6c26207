# gplite/num/shared.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""Backend-independent helpers for gplite.num."""

import builtins

from gplite.config import get_config


_LINALG_ERROR_KEYWORDS = (
    "singular",
    "not positive definite",
    "not positive-definite",
    "leading minor",
    "cholesky",
    "decomposition",
    "factorization",
    "lapack",
)


def get_dtype():
    return get_config().dtype_resolved


def is_linalg_exception(exc: Exception) -> bool:
    """Tell whether `exc` reports a failed factorization or solve."""
    # numpy.linalg.LinAlgError and scipy.linalg.LinAlgError are the same class
    if type(exc).__name__ == "LinAlgError":
        return True
    msg = str(exc).lower()
    return builtins.any(keyword in msg for keyword in _LINALG_ERROR_KEYWORDS)
