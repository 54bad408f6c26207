import pytest

import gplite.num as gnp
from gplite.errors import InvalidParameterError, ShapeMismatchError
from gplite.kernel import Kernel, RBF, rbf_covariance


def make_points(n=6, d=2, seed=0):
    gnp.set_seed(seed)
    return 3.0 * gnp.randn(n, d)


def test_1d_identity():
    kern = RBF([1.0])
    k = kern.call([[1.0]], [[1.0]])
    assert k.shape == (1, 1)
    assert k[0, 0] == 1.0


def test_1d_correctness():
    # exponent is -(3 - 1)^2 / (2 * 0.5^2) = -8
    kern = RBF([0.5])
    k = kern.call([[1.0]], [[3.0]])
    assert gnp.isclose(k[0, 0], gnp.exp(-8.0))


def test_2d_correctness():
    # exponent is -(4 / (2 * 0.25) + 9 / (2 * 4)) = -9.125
    kern = RBF([0.5, 2.0])
    k = kern.call([[1.0, 1.0]], [[3.0, 4.0]])
    assert gnp.isclose(k[0, 0], gnp.exp(-9.125))


def test_sigma_scales_covariance():
    x = make_points()
    k1 = RBF([1.0, 2.0], sigma=1.0).call(x, x)
    k3 = RBF([1.0, 2.0], sigma=3.0).call(x, x)
    assert gnp.allclose(k3, 9.0 * k1)


def test_output_shape():
    kern = RBF([1.0, 2.0])
    x = [[1.8, 5.5], [1.5, 4.5], [2.3, 4.6]]
    y = [[2.2, 3.0], [1.8, 5.5], [1.5, 4.5], [2.3, 4.6]]
    assert kern.call(x, y).shape == (3, 4)
    assert kern(x, y).shape == (3, 4)


def test_single_point_as_vector():
    kern = RBF([1.0, 2.0])
    x = [[1.8, 5.5], [1.5, 4.5], [2.3, 4.6]]
    k = kern.call(x, [1.8, 5.5])
    assert k.shape == (3, 1)
    assert gnp.isclose(k[0, 0], 1.0)
    assert kern.call([1.8, 5.5], [1.8, 5.5]).shape == (1, 1)


def test_cross_covariance_symmetry():
    kern = RBF([0.7, 1.9], sigma=1.3)
    x = make_points(5, seed=1)
    y = make_points(4, seed=2)
    assert gnp.allclose(kern.call(x, y), kern.call(y, x).T)


def test_covariance_matrix_properties():
    kern = RBF([0.7, 1.9], sigma=1.5)
    x = make_points(8)
    K = kern.call(x, x)
    assert gnp.allclose(K, K.T)
    assert gnp.allclose(gnp.diag(K), 1.5**2)
    assert gnp.min(gnp.eigvalsh(K)) > -1e-10


def test_symmetric_and_diagonal_agree_with_call():
    kern = RBF([0.7, 1.9], sigma=1.5)
    x = make_points(7)
    K = kern.call(x, x)
    assert gnp.allclose(kern.symmetric(x), K)
    assert gnp.allclose(kern.diagonal(x), gnp.diag(K))
    assert kern.symmetric([[0.0, 1.0]]).shape == (1, 1)


def test_far_points_do_not_overflow():
    kern = RBF([1e-3])
    k = kern.call([[0.0]], [[1e200]])
    assert gnp.all(gnp.isfinite(k))
    assert k[0, 0] == 0.0


def test_identical_far_points():
    kern = RBF([1e-10], sigma=2.0)
    x = [[1e300], [-1e300]]
    K = kern.call(x, x)
    assert gnp.allclose(gnp.diag(K), 4.0)
    assert gnp.allclose(kern.symmetric(x), K)
    assert gnp.allclose(kern.diagonal(x), gnp.diag(K))
    assert K[0, 1] == 0.0

    kern = RBF([1e-200, 1.0])
    x = [[1e300, 0.0], [1e300, 1.0]]
    K = kern.call(x, x)
    assert gnp.all(gnp.isfinite(K))
    assert gnp.allclose(K, kern.symmetric(x))
    assert gnp.allclose(gnp.diag(K), 1.0)
    assert gnp.isclose(K[0, 1], gnp.exp(-0.5))


@pytest.mark.parametrize(
    "length_scales, sigma",
    [
        ([1.0, -2.0], 1.0),
        ([0.0], 1.0),
        ([1.0], 0.0),
        ([1.0], -1.0),
        ([], 1.0),
        ([1.0, float("nan")], 1.0),
        ([1.0], float("inf")),
        ([[1.0, 2.0]], 1.0),
        (["a"], 1.0),
    ],
)
def test_invalid_parameters(length_scales, sigma):
    with pytest.raises(InvalidParameterError):
        RBF(length_scales, sigma=sigma)


def test_scalar_length_scale():
    kern = RBF(2.0)
    assert kern.input_dim == 1
    assert kern.call([[0.0]], [[2.0]]).shape == (1, 1)


def test_dimension_mismatch():
    kern = RBF([1.0])
    with pytest.raises(ShapeMismatchError):
        kern.call([[1.0, 1.0]], [[1.0]])
    with pytest.raises(ShapeMismatchError):
        kern.call([[1.0]], [[1.0, 1.0]])
    with pytest.raises(ShapeMismatchError):
        kern.diagonal([[1.0, 1.0]])
    with pytest.raises(ShapeMismatchError):
        kern.call(gnp.zeros((2, 1, 1)), [[1.0]])


def test_parameters_are_read_only():
    kern = RBF([1.0, 2.0], sigma=0.5)
    with pytest.raises(ValueError):
        kern.length_scales[0] = 3.0
    p = kern.params
    p["length_scales"][0] = 3.0
    assert gnp.allclose(kern.length_scales, [1.0, 2.0])
    assert kern.sigma == 0.5


def test_covparam():
    kern = RBF([0.5, 4.0], sigma=2.0)
    covparam = kern.covparam
    assert gnp.allclose(covparam, [gnp.log(4.0), gnp.log(2.0), -gnp.log(4.0)])

    kern2 = RBF.from_covparam(covparam)
    assert gnp.allclose(kern2.length_scales, kern.length_scales)
    assert gnp.isclose(kern2.sigma, kern.sigma)

    with pytest.raises(InvalidParameterError):
        RBF.from_covparam([0.0])


def test_rbf_covariance_function():
    kern = RBF([0.7, 1.9], sigma=1.5)
    x = make_points(5, seed=3)
    y = make_points(3, seed=4)
    covparam = kern.covparam
    assert gnp.allclose(rbf_covariance(x, y, covparam), kern.call(x, y))
    assert gnp.allclose(rbf_covariance(x, None, covparam), kern.call(x, x))
    assert gnp.allclose(rbf_covariance(x, None, covparam, pairwise=True), 1.5**2)
    pairwise = rbf_covariance(x[:3], y, covparam, pairwise=True)
    assert gnp.allclose(pairwise, gnp.diag(kern.call(x[:3], y)))


class ConstantShiftKernel(Kernel):
    """k(x, y) = c + <x, y>, used to exercise the base class."""

    def __init__(self, input_dim, c=1.0):
        super().__init__(input_dim)
        self._c = c

    @property
    def params(self):
        return {"c": self._c}

    def call(self, x, y):
        x = self.check_input(x)
        y = self.check_input(y)
        return self._c + gnp.matmul(x, y.T)


def test_base_class_defaults():
    kern = ConstantShiftKernel(2)
    x = make_points(4)
    K = kern.call(x, x)
    assert gnp.allclose(kern.symmetric(x), K)
    assert gnp.allclose(kern.diagonal(x), gnp.diag(K))
    with pytest.raises(ShapeMismatchError):
        kern.call(x, [[1.0, 2.0, 3.0]])


def test_kernel_is_abstract():
    with pytest.raises(TypeError):
        Kernel(2)
