import warnings

import pytest

import gplite.num as gnp
from gplite.core import kriging, linalg
from gplite.errors import GPCompilationError


def test_add_to_diagonal_returns_new_matrix():
    K = gnp.ones((3, 3))
    K2 = linalg.add_to_diagonal(K, 0.5)
    assert gnp.allclose(gnp.diag(K2), 1.5)
    assert gnp.allclose(K2[0, 1], 1.0)
    assert gnp.allclose(K, 1.0)


def test_cholesky_factor():
    K = gnp.array([[4.0, 2.0], [2.0, 3.0]])
    C = linalg.cholesky_factor(K)
    assert gnp.allclose(gnp.matmul(C, C.T), K)
    assert C[0, 1] == 0.0

    alpha = linalg.cholesky_alpha(C, gnp.array([1.0, 2.0]))
    assert gnp.allclose(gnp.matmul(K, alpha), [1.0, 2.0])


def test_cholesky_factor_not_positive_definite():
    with pytest.raises(GPCompilationError) as excinfo:
        linalg.cholesky_factor(gnp.ones((2, 2)))
    assert excinfo.value.reason == "not_positive_definite"


def test_cholesky_factor_not_finite():
    K = gnp.eye(2)
    K[0, 0] = gnp.inf
    with pytest.raises(GPCompilationError) as excinfo:
        linalg.cholesky_factor(K)
    assert excinfo.value.reason == "not_finite"


def test_posterior_formulas():
    K = gnp.array([[2.0, 0.5], [0.5, 1.0]])
    zi = gnp.array([1.0, -1.0])
    Kit = gnp.array([[0.3, 1.0, 0.0], [0.2, 0.0, 1.0]])
    Ktt = gnp.eye(3)
    C = linalg.cholesky_factor(K)
    alpha = linalg.cholesky_alpha(C, zi)

    V = kriging.solve_cross_covariance(C, Kit)
    Kinv_Kit = gnp.cho_solve((C, True), Kit)

    assert gnp.allclose(kriging.posterior_mean(Kit, alpha), gnp.matmul(Kit.T, alpha))
    expected_cov = Ktt - gnp.matmul(Kit.T, Kinv_Kit)
    assert gnp.allclose(kriging.posterior_covariance(Ktt, V), expected_cov)
    assert gnp.allclose(
        kriging.posterior_variance(gnp.ones(3), V), gnp.diag(expected_cov)
    )


def test_clip_negative_variances():
    prior = gnp.ones(3)
    v = gnp.array([-1e-3, 0.5, -1e-14])
    with pytest.warns(RuntimeWarning):
        clipped = kriging.clip_negative_variances(v, prior)
    assert gnp.allclose(clipped, [0.0, 0.5, 0.0])

    with pytest.warns(RuntimeWarning):
        raw = kriging.clip_negative_variances(v, prior, zero_neg_variances=False)
    assert gnp.allclose(raw, v)

    with warnings.catch_warnings():
        warnings.simplefilter("error", RuntimeWarning)
        clipped = kriging.clip_negative_variances(gnp.array([-1e-14, 0.2]), prior[:2])
    assert gnp.allclose(clipped, [0.0, 0.2])
