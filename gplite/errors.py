# gplite/errors.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Exceptions raised by gplite.

All exceptions derive from both `GPLiteError` and `ValueError`, so
that code catching `ValueError` around numerical calls keeps working.
"""


class GPLiteError(Exception):
    """Base exception for all gplite errors."""
    pass


class InvalidParameterError(GPLiteError, ValueError):
    """Raised when a kernel or GP parameter is out of its domain."""
    pass


class ShapeMismatchError(GPLiteError, ValueError):
    """Raised when a kernel is called with inputs of the wrong dimension."""
    pass


class IncompatibleShapeError(ShapeMismatchError):
    """Raised when query points do not match the training dimension."""
    pass


class GPCompilationError(GPLiteError, ValueError):
    """Raised when training data cannot be compiled into a model.

    Attributes
    ----------
    reason : str
        One of 'shape', 'empty', 'not_finite',
        'not_positive_definite' or 'already_compiled'.
    """

    def __init__(self, message, reason=None):
        super().__init__(message)
        self.reason = reason
