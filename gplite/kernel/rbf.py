# gplite/kernel/rbf.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Anisotropic radial basis function (squared exponential) kernel.
"""
import gplite.num as gnp
from gplite.errors import InvalidParameterError
from .base import Kernel
from .utils import positive_vector, positive_scalar


def rbf_kernel(h2):
    """Squared exponential kernel.

    .. math::
        k(h) = \\exp(-h^2 / 2)

    Parameters
    ----------
    h2 : gnp.array
        Squared scaled distances between points.

    Returns
    -------
    gnp.array
        Kernel values, same shape as `h2`.
    """
    return gnp.exp(-0.5 * gnp.inftobigf(h2))


def _rbf(sigma2, invrho, x, y, pairwise):
    if y is x or y is None:
        if pairwise:
            return sigma2 * gnp.ones((x.shape[0],))
        return sigma2 * rbf_kernel(gnp.scaled_sqdistance_sym(invrho, x))
    if pairwise:
        H2 = gnp.scaled_sqdistance_elementwise(invrho, x, y)
    else:
        H2 = gnp.scaled_sqdistance(invrho, x, y)
    return sigma2 * rbf_kernel(H2)


def rbf_covariance(x, y, covparam, pairwise=False):
    """RBF covariance from a log-parameter vector.

    .. math::
        K_{ij} = \\sigma^2 \\exp\\Big(-\\sum_k \\frac{(x_{ik} - y_{jk})^2}{2 \\rho_k^2}\\Big)

    Parameters
    ----------
    x : gnp.array, shape (nx, d)
    y : gnp.array, shape (ny, d), or None
        If None (or `y is x`), the symmetric covariance of x is returned.
    covparam : gnp.array, shape (1 + d,)
        [log(sigma2), log(1/rho_1), ..., log(1/rho_d)].
    pairwise : bool
        If True, return the elementwise vector k(x_i, y_i); else the
        (nx, ny) matrix.

    Returns
    -------
    gnp.array
        (nx, ny) matrix or (nx,) vector if pairwise.
    """
    covparam = gnp.asarray(covparam)
    sigma2 = gnp.exp(covparam[0])
    invrho = gnp.exp(covparam[1:])
    return _rbf(sigma2, invrho, x, y, pairwise)


class RBF(Kernel):
    """Anisotropic RBF kernel.

    .. math::
        k(x, x') = \\sigma^2 \\exp\\Big(-\\sum_{k=1}^d \\frac{(x_k - x'_k)^2}{2 \\ell_k^2}\\Big)

    Parameters
    ----------
    length_scales : sequence of float, length d
        Strictly positive length scales, one per input dimension. A
        scalar gives a one-dimensional kernel.
    sigma : float, optional
        Strictly positive amplitude (default 1.0). The variance of the
        process is sigma**2.

    Raises
    ------
    InvalidParameterError
        If a length scale or sigma is not a finite positive number.

    Examples
    --------
    >>> from gplite.kernel import RBF
    >>> kern = RBF([1.0, 2.0], sigma=1.0)
    >>> x = [[1.8, 5.5], [1.5, 4.5], [2.3, 4.6]]
    >>> y = [[2.2, 3.0], [1.8, 5.5], [1.5, 4.5], [2.3, 4.6]]
    >>> kern.call(x, y).shape
    (3, 4)
    """

    def __init__(self, length_scales, sigma=1.0):
        rho = positive_vector(length_scales, "length_scales")
        sigma = positive_scalar(sigma, "sigma")
        super().__init__(rho.shape[0])
        self._length_scales = gnp.readonly(rho)
        self._invrho = gnp.readonly(1.0 / rho)
        self._sigma = sigma
        self._sigma2 = sigma**2

    @classmethod
    def from_covparam(cls, covparam):
        """Build a kernel from [log(sigma2), log(1/rho_1), ..., log(1/rho_d)]."""
        covparam = gnp.asarray(covparam, dtype=gnp.float64).reshape(-1)
        if covparam.shape[0] < 2:
            raise InvalidParameterError(
                "covparam must hold log(sigma2) and at least one log inverse length scale"
            )
        if not gnp.all(gnp.isfinite(covparam)):
            raise InvalidParameterError(f"covparam must be finite, got {covparam}")
        sigma = gnp.sqrt(gnp.exp(covparam[0]))
        return cls(gnp.exp(-covparam[1:]), sigma=sigma)

    @property
    def length_scales(self):
        return self._length_scales

    @property
    def sigma(self):
        return self._sigma

    @property
    def params(self):
        return {"length_scales": gnp.copy(self._length_scales), "sigma": self._sigma}

    @property
    def covparam(self):
        """Parameters in log form: [log(sigma2), -log(rho_1), ..., -log(rho_d)]."""
        return gnp.concatenate(
            (gnp.array([gnp.log(self._sigma2)]), -gnp.log(self._length_scales))
        )

    def __repr__(self):
        return (
            f"RBF(length_scales={self._length_scales.tolist()}, sigma={self._sigma})"
        )

    def call(self, x, y):
        x = self.check_input(x)
        y = self.check_input(y)
        return _rbf(self._sigma2, self._invrho, x, y, pairwise=False)

    def symmetric(self, x):
        x = self.check_input(x)
        return _rbf(self._sigma2, self._invrho, x, None, pairwise=False)

    def diagonal(self, x):
        x = self.check_input(x)
        return _rbf(self._sigma2, self._invrho, x, None, pairwise=True)
