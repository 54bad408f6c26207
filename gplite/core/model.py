# gplite/core/model.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Gaussian Process model classes.
"""
import gplite.num as gnp
from gplite.config import get_logger
from gplite.errors import GPCompilationError, ShapeMismatchError

from . import kriging
from . import linalg
from . import utils

_logger = get_logger()


class GP:
    """Gaussian Process (GP) regression model with zero prior mean.

    A `GP` holds a kernel and a noise variance. Calling `compile` on
    training data factorizes the covariance matrix of the observations
    and returns an immutable `CompiledGP` that answers prediction
    queries. A `GP` instance can be compiled only once.

    Definition::

        mean = K*ᵀ [K + noise I]^{-1} y
        cov  = K** - K*ᵀ [K + noise I]^{-1} K*

    Attributes
    ----------
    kernel : gplite.kernel.Kernel or kernel-like
        Covariance function. Any object with a `call(x, y)` method
        returning the (n, m) covariance matrix is accepted; `symmetric`
        and `diagonal` are used when provided.
    noise : float
        Nonnegative variance added to the diagonal of the covariance
        matrix of the observations. Use 0.0 for noiseless interpolation.

    Public API (methods)
    --------------------
    compile
        Factorize the training covariance and return a CompiledGP.

    Examples
    --------
    >>> from gplite.kernel import RBF
    >>> from gplite.core import GP
    >>> gp = GP(RBF([1.0, 2.0], sigma=1.0), noise=0.0)
    >>> xi = [[1.8, 5.5], [1.5, 4.5], [2.3, 4.6]]
    >>> zi = [2.2, 1.8, 1.5]
    >>> model = gp.compile(xi, zi)
    >>> zt_mean, zt_var = model.call([[1.8, 5.5], [2.0, 5.0]])
    """

    def __init__(self, kernel, noise=0.0):
        """
        Parameters
        ----------
        kernel : kernel-like
            Object providing `call(x, y)`.
        noise : float, optional
            Nonnegative noise variance (default 0.0).

        Raises
        ------
        TypeError
            If `kernel` has no `call` method.
        InvalidParameterError
            If `noise` is negative or not finite.
        """
        utils.validate_kernel(kernel)
        self._kernel = kernel
        self._noise = utils.validate_noise(noise)
        self._compiled = False

    def __repr__(self):
        output = str("<gplite.core.GP object> " + hex(id(self)))
        return output

    def __str__(self):
        return (
            f"GP Model:\n"
            f"  Kernel: {self._kernel!r}\n"
            f"  Noise: {self._noise}\n"
            f"  Compiled: {self._compiled}"
        )

    @property
    def kernel(self):
        return self._kernel

    @property
    def noise(self):
        return self._noise

    @property
    def is_compiled(self):
        return self._compiled

    def compile(self, xi, zi):
        """Fit the model to the data (xi, zi).

        Parameters
        ----------
        xi : array_like, shape (n, d)
            Observation points. A 1D array is read as a single point.
        zi : array_like, shape (n,) or (n, 1)
            Observed values.

        Returns
        -------
        CompiledGP
            Immutable fitted model.

        Raises
        ------
        GPCompilationError
            If the GP was already compiled, if xi and zi do not have the
            same number of rows, if there are no observations, if the
            dimension of xi does not match the kernel, or if
            k(xi, xi) + noise * I is not positive definite.
        """
        if self._compiled:
            raise GPCompilationError(
                "this GP has already been compiled; create a new GP to fit new data",
                reason="already_compiled",
            )

        # Step 1: Prepare the data.
        xi, zi = utils.ensure_training_data(
            xi, zi, input_dim=getattr(self._kernel, "input_dim", None)
        )
        n, d = xi.shape
        _logger.debug("Compiling GP on %d points in dimension %d", n, d)

        # Step 2: Covariance matrix of the observations.
        try:
            K = kriging.prior_covariance(self._kernel, xi)
        except ShapeMismatchError as exc:
            raise GPCompilationError(str(exc), reason="shape") from exc
        K = linalg.add_to_diagonal(K, self._noise)

        # Step 3: Factorization and weights for the posterior mean.
        C = linalg.cholesky_factor(K)
        alpha = linalg.cholesky_alpha(C, zi)

        self._compiled = True
        return CompiledGP(self._kernel, self._noise, xi, zi, C, alpha)


class CompiledGP:
    """GP conditioned on training data.

    Created by `GP.compile`. Holds read-only copies of the training
    data, the lower Cholesky factor of k(xi, xi) + noise * I and
    alpha = [k(xi, xi) + noise * I]^{-1} zi. Predictions never modify
    the object, so a `CompiledGP` can be shared across threads.

    Public API (methods)
    --------------------
    mean
        Posterior mean at target points.
    var
        Posterior variance at target points.
    cov
        Posterior covariance matrix of target points (most expensive).
    call
        Posterior mean and variance, sharing intermediate computations.
    """

    def __init__(self, kernel, noise, xi, zi, chol, alpha):
        self._kernel = kernel
        self._noise = noise
        self._xi = gnp.readonly(xi)
        self._zi = gnp.readonly(zi)
        self._chol = gnp.readonly(chol)
        self._alpha = gnp.readonly(alpha)

    def __repr__(self):
        output = str("<gplite.core.CompiledGP object> " + hex(id(self)))
        return output

    def __str__(self):
        return (
            f"Compiled GP Model:\n"
            f"  Kernel: {self._kernel!r}\n"
            f"  Noise: {self._noise}\n"
            f"  Observations: {self.n} points in dimension {self.input_dim}"
        )

    @property
    def kernel(self):
        return self._kernel

    @property
    def noise(self):
        return self._noise

    @property
    def x(self):
        return self._xi

    @property
    def y(self):
        return self._zi

    @property
    def chol(self):
        return self._chol

    @property
    def alpha(self):
        return self._alpha

    @property
    def n(self):
        return self._xi.shape[0]

    @property
    def input_dim(self):
        return self._xi.shape[1]

    # ------------------------------------------------------------------
    # Predictions
    # ------------------------------------------------------------------
    def mean(self, xt):
        """Posterior mean at xt.

        Parameters
        ----------
        xt : array_like, shape (m, d)
            Target points. A 1D array is read as a single point.

        Returns
        -------
        zt_posterior_mean : gnp.array, shape (m,)

        Raises
        ------
        IncompatibleShapeError
            If d differs from the dimension of the training points.
        """
        xt = utils.ensure_query_points(xt, self.input_dim)
        Kit = self._kernel.call(self._xi, xt)
        return kriging.posterior_mean(Kit, self._alpha)

    def var(self, xt, zero_neg_variances=True):
        """Posterior variance at xt.

        Only the diagonal of the posterior covariance is computed.

        Parameters
        ----------
        xt : array_like, shape (m, d)
            Target points. A 1D array is read as a single point.
        zero_neg_variances : bool, optional
            Whether to replace negative posterior variances with zeros,
            by default True. Negative variances can occur due to
            numerical errors.

        Returns
        -------
        zt_posterior_variance : gnp.array, shape (m,)

        Raises
        ------
        IncompatibleShapeError
            If d differs from the dimension of the training points.
        """
        xt = utils.ensure_query_points(xt, self.input_dim)
        Kit = self._kernel.call(self._xi, xt)
        return self._variance(xt, Kit, zero_neg_variances)

    def cov(self, xt):
        """Posterior covariance matrix of xt.

        This is the most expensive query: it forms an (m, m) matrix.

        Parameters
        ----------
        xt : array_like, shape (m, d)
            Target points. A 1D array is read as a single point.

        Returns
        -------
        zt_posterior_covariance : gnp.array, shape (m, m)

        Raises
        ------
        IncompatibleShapeError
            If d differs from the dimension of the training points.
        """
        xt = utils.ensure_query_points(xt, self.input_dim)
        Kit = self._kernel.call(self._xi, xt)
        V = kriging.solve_cross_covariance(self._chol, Kit)
        Ktt = kriging.prior_covariance(self._kernel, xt)
        return kriging.posterior_covariance(Ktt, V)

    def call(self, xt, zero_neg_variances=True):
        """Posterior mean and variance at xt.

        The cross-covariance k(xi, xt) is computed once and shared by
        both outputs, which is cheaper than calling `mean` and `var`.

        Returns
        -------
        zt_posterior_mean : gnp.array, shape (m,)
        zt_posterior_variance : gnp.array, shape (m,)

        Raises
        ------
        IncompatibleShapeError
            If d differs from the dimension of the training points.
        """
        xt = utils.ensure_query_points(xt, self.input_dim)
        Kit = self._kernel.call(self._xi, xt)
        zt_posterior_mean = kriging.posterior_mean(Kit, self._alpha)
        zt_posterior_variance = self._variance(xt, Kit, zero_neg_variances)
        return zt_posterior_mean, zt_posterior_variance

    def __call__(self, xt, zero_neg_variances=True):
        return self.call(xt, zero_neg_variances)

    def _variance(self, xt, Kit, zero_neg_variances):
        V = kriging.solve_cross_covariance(self._chol, Kit)
        zt_prior_variance = kriging.prior_variance(self._kernel, xt)
        zt_posterior_variance = kriging.posterior_variance(zt_prior_variance, V)
        return kriging.clip_negative_variances(
            zt_posterior_variance, zt_prior_variance, zero_neg_variances
        )
