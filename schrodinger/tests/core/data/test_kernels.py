"""
Tests of the data-layer kernels against their numpy equivalents, for every
combination of storage kinds.
"""

import numpy as np
import pytest
import scipy.linalg
import scipy.sparse
from hypothesis import given, strategies as st

from schrodinger import StorageMismatch, CoreOptions
from schrodinger.core import data as _data
from schrodinger.tests import strategies as qst


def _random(shape, kind, density=0.5):
    array = np.random.random(shape) + 1j * np.random.random(shape)
    array[np.random.random(shape) > density] = 0
    return _data.to(kind, _data.create(array))


@pytest.fixture(params=[_data.SPARSE, _data.DENSE], ids=["sparse", "dense"])
def other_storage(request):
    return request.param


def _expected_kind(*kinds):
    return _data.SPARSE if set(kinds) == {_data.SPARSE} else _data.DENSE


class TestBinary:
    def test_add(self, storage, other_storage):
        left = _random((3, 4), storage)
        right = _random((3, 4), other_storage)
        out = _data.add(left, right)
        assert _data.kind(out) == _expected_kind(storage, other_storage)
        qst.assert_allclose(out, _data.to_dense(left) + _data.to_dense(right))
        scaled = _data.add(left, right, scale=2j)
        qst.assert_allclose(
            scaled, _data.to_dense(left) + 2j * _data.to_dense(right)
        )

    def test_sub(self, storage, other_storage):
        left = _random((3, 3), storage)
        right = _random((3, 3), other_storage)
        out = _data.sub(left, right)
        assert _data.kind(out) == _expected_kind(storage, other_storage)
        qst.assert_allclose(out, _data.to_dense(left) - _data.to_dense(right))

    def test_shape_mismatch(self, storage):
        with pytest.raises(ValueError):
            _data.add(_random((2, 2), storage), _random((3, 3), storage))
        with pytest.raises(ValueError):
            _data.matmul(_random((2, 3), storage), _random((2, 3), storage))

    def test_matmul(self, storage, other_storage):
        left = _random((3, 4), storage)
        right = _random((4, 2), other_storage)
        out = _data.matmul(left, right)
        assert _data.kind(out) == _expected_kind(storage, other_storage)
        assert isinstance(out, np.ndarray) or scipy.sparse.isspmatrix_csc(out)
        qst.assert_allclose(out, _data.to_dense(left) @ _data.to_dense(right))

    def test_kron(self, storage, other_storage):
        left = _random((2, 3), storage)
        right = _random((2, 2), other_storage)
        out = _data.kron(left, right)
        if _data.DENSE == storage == other_storage:
            assert _data.kind(out) == _data.DENSE
        else:
            assert scipy.sparse.isspmatrix_csc(out)
        qst.assert_allclose(
            out, np.kron(_data.to_dense(left), _data.to_dense(right))
        )

    def test_inner(self, storage, other_storage):
        left = _random((4, 1), storage)
        right = _random((4, 1), other_storage)
        expected = np.vdot(_data.to_dense(left), _data.to_dense(right))
        assert _data.inner(left, right) == pytest.approx(expected)
        with pytest.raises(ValueError):
            _data.inner(left, _random((3, 1), other_storage))

    def test_contract(self, storage):
        row = _data.to(storage, np.array([[1, 2j]]))
        column = _data.to(storage, np.array([[1j], [1]]))
        assert _data.contract(row, column) == pytest.approx(3j)
        with pytest.raises(ValueError):
            _data.contract(column, row)


class TestUnary:
    def test_neg(self, storage):
        matrix = _random((3, 3), storage)
        out = _data.neg(matrix)
        assert _data.kind(out) == storage
        qst.assert_allclose(out, -_data.to_dense(matrix))

    @pytest.mark.parametrize(["function", "expected"], [
        pytest.param(_data.adjoint, lambda x: x.conj().T, id="adjoint"),
        pytest.param(_data.transpose, lambda x: x.T, id="transpose"),
        pytest.param(_data.conj, np.conj, id="conj"),
    ])
    def test_adjoints(self, storage, function, expected):
        matrix = _random((2, 3), storage)
        out = function(matrix)
        assert _data.kind(out) == storage
        if storage == _data.SPARSE:
            assert scipy.sparse.isspmatrix_csc(out)
        qst.assert_allclose(out, expected(_data.to_dense(matrix)))

    @pytest.mark.parametrize("function", [
        pytest.param(_data.adjoint, id="adjoint"),
        pytest.param(_data.transpose, id="transpose"),
        pytest.param(_data.conj, id="conj"),
    ])
    @pytest.mark.parametrize("shape", [(3, 1), (1, 3), (2, 2)],
                             ids=["column", "row", "square"])
    def test_adjoints_real_dense_copy(self, function, shape):
        matrix = np.arange(np.prod(shape), dtype=np.float64).reshape(shape)
        out = function(matrix)
        assert not np.shares_memory(out, matrix)
        assert out.flags.c_contiguous

    @pytest.mark.parametrize("value", [np.inf, -np.inf, np.nan],
                             ids=["inf", "-inf", "nan"])
    def test_mul_non_finite(self, value):
        array = np.array([[1., 0], [0, -2]])
        from_sparse = _data.mul(_data.to_sparse(array), value)
        from_dense = _data.mul(array, value)
        assert _data.kind(from_sparse) == _data.DENSE
        np.testing.assert_array_equal(from_sparse, from_dense)
        assert np.isnan(from_dense[0, 1])

    def test_mul_div(self, storage):
        matrix = _random((3, 3), storage)
        dense = _data.to_dense(matrix)
        qst.assert_allclose(_data.mul(matrix, 2 - 1j), dense * (2 - 1j))
        qst.assert_allclose(_data.div(matrix, 4j), dense / 4j)
        assert _data.kind(_data.mul(matrix, 0)) == storage

    def test_div_zero(self, storage):
        matrix = _data.to(storage, np.array([[1., 0], [-2, 0]]))
        with qst.ignore_arithmetic_warnings():
            out = _data.div(matrix, 0)
        assert _data.kind(out) == _data.DENSE
        assert out[0, 0] == np.inf
        assert out[1, 0] == -np.inf
        assert np.isnan(out[0, 1])

    def test_add_scalar(self, storage):
        matrix = _data.to(storage, np.array([[1., 0], [0, 0]]))
        out = _data.add_scalar(matrix, 1j)
        assert _data.kind(out) == _data.DENSE
        np.testing.assert_array_equal(out, [[1 + 1j, 1j], [1j, 1j]])

    def test_trace(self, storage):
        matrix = _random((4, 4), storage)
        assert _data.trace(matrix) == pytest.approx(
            np.trace(_data.to_dense(matrix))
        )

    @pytest.mark.parametrize(["function", "expected"], [
        pytest.param(_data.elementwise.real, np.real, id="real"),
        pytest.param(_data.elementwise.imag, np.imag, id="imag"),
        pytest.param(_data.elementwise.abs, np.abs, id="abs"),
        pytest.param(_data.elementwise.abs2,
                     lambda x: np.abs(x)**2, id="abs2"),
    ])
    def test_elementwise(self, storage, function, expected):
        matrix = _random((3, 3), storage)
        out = function(matrix)
        assert _data.kind(out) == storage
        assert out.dtype == np.float64
        qst.assert_allclose(out, expected(_data.to_dense(matrix)))


class TestPow:
    @pytest.mark.parametrize("n", [0, 1, 2, 3, 5, 6])
    def test_pow(self, storage, n):
        matrix = _random((4, 4), storage, density=0.8)
        out = _data.pow(matrix, n)
        assert _data.kind(out) == storage
        expected = np.linalg.matrix_power(_data.to_dense(matrix), n)
        qst.assert_allclose(out, expected, atol=1e-8, rtol=1e-8)

    def test_pow_does_not_share(self, storage):
        matrix = _random((3, 3), storage)
        out = _data.pow(matrix, 1)
        assert out is not matrix

    @pytest.mark.parametrize("n", [-1, 0.5])
    def test_pow_bad_exponent(self, storage, n):
        with pytest.raises(ValueError):
            _data.pow(_random((2, 2), storage), n)

    def test_pow_not_square(self, storage):
        with pytest.raises(ValueError):
            _data.pow(_random((2, 3), storage), 2)

    def test_fractional_pow(self):
        matrix = np.array([[4., 1], [0, 9]])
        out = _data.fractional_pow(matrix, 0.5)
        np.testing.assert_allclose(out @ out, matrix, atol=1e-12)
        with pytest.raises(StorageMismatch):
            _data.fractional_pow(_data.to_sparse(matrix), 0.5)


class TestMatrixFunctions:
    @pytest.mark.parametrize(["function", "expected"], [
        pytest.param(_data.expm, scipy.linalg.expm, id="expm"),
        pytest.param(_data.logm, scipy.linalg.logm, id="logm"),
        pytest.param(_data.sqrtm, scipy.linalg.sqrtm, id="sqrtm"),
    ])
    def test_against_scipy(self, storage, function, expected):
        array = np.array([[2, 1j], [0.5, 3]])
        matrix = _data.to(storage, array)
        out = function(matrix)
        assert isinstance(out, np.ndarray)
        np.testing.assert_allclose(out, expected(array), atol=1e-12)

    def test_not_square(self):
        with pytest.raises(ValueError):
            _data.expm(np.ones((2, 3)))

    def test_eigh_apply(self, storage):
        array = np.array([[2, 1j], [-1j, 2]])
        out, isreal = _data.eigh_apply(_data.to(storage, array), np.exp)
        assert isreal
        np.testing.assert_allclose(out, scipy.linalg.expm(array), atol=1e-12)
        with np.errstate(invalid='ignore'):
            out, isreal = _data.eigh_apply(-np.eye(2), np.sqrt)
        assert not isreal
        np.testing.assert_allclose(out, 1j * np.eye(2), atol=1e-12)


class TestNorms:
    def test_vector_norms(self, storage):
        vector = _data.to(storage, np.array([[3], [-4j], [0]]))
        assert _data.norm.l2(vector) == pytest.approx(5)
        assert _data.norm.max(vector) == pytest.approx(4)

    def test_matrix_norms(self, storage):
        matrix = _random((4, 4), storage)
        dense = _data.to_dense(matrix)
        assert _data.norm.frobenius(matrix) == pytest.approx(
            np.linalg.norm(dense, 'fro')
        )
        assert _data.norm.trace_norm(matrix) == pytest.approx(
            np.linalg.norm(dense, 'nuc')
        )
        assert _data.norm.max(matrix) == pytest.approx(np.max(np.abs(dense)))

    def test_zero(self, storage):
        zero = _data.zeros(3, 3, kind=storage)
        assert _data.norm.l2(zero) == 0
        assert _data.norm.max(zero) == 0
        assert _data.norm.trace_norm(zero) == 0


class TestProperties:
    def test_isequal(self, storage, other_storage):
        array = np.array([[1, 0], [0, 1e-3]])
        left = _data.to(storage, array)
        right = _data.to(other_storage, array + 1e-13)
        assert _data.isequal(left, right)
        assert not _data.isequal(left, _data.to(other_storage, array * 1.1))
        assert not _data.isequal(left, _data.to(other_storage, np.eye(3)))

    def test_isequal_explicit_tolerances(self, storage):
        left = _data.to(storage, np.array([[1., 0], [0, 1]]))
        right = _data.to(storage, np.array([[1.01, 0], [0, 1]]))
        assert not _data.isequal(left, right)
        assert _data.isequal(left, right, atol=0.1)
        assert _data.isequal(left, right, atol=0, rtol=0.1)

    def test_isequal_settings(self, storage, core_settings):
        left = _data.to(storage, np.eye(2))
        right = _data.to(storage, np.eye(2) * (1 + 1e-6))
        assert not _data.isequal(left, right)
        with CoreOptions(rtol=1e-4):
            assert _data.isequal(left, right)

    def test_iszero(self, storage):
        assert _data.iszero(_data.to(storage, np.array([[1e-14, 0]])))
        assert not _data.iszero(_data.to(storage, np.array([[1e-3, 0]])))
        assert _data.iszero(_data.to(storage, np.array([[1e-3, 0]])),
                            atol=1e-2)


class TestTidyup:
    def test_tidyup(self, storage):
        array = np.array([[1, 1e-16j], [1e-15 + 1j, 1e-20]])
        out = _data.tidyup(_data.to(storage, array))
        np.testing.assert_array_equal(_data.to_dense(out),
                                      [[1, 0], [1j, 0]])
        if storage == _data.SPARSE:
            assert out.nnz == 2

    def test_tidyup_tol(self, storage):
        matrix = _data.to(storage, np.array([[0.5, 0.01]]))
        out = _data.tidyup(matrix, 0.1)
        np.testing.assert_array_equal(_data.to_dense(out), [[0.5, 0]])
        np.testing.assert_array_equal(_data.to_dense(matrix), [[0.5, 0.01]])


@given(qst.datas(shape=(3, 3)), qst.datas(shape=(3, 3)))
def test_add_commutes(left, right):
    qst.note(left=left, right=right)
    assert _data.isequal(_data.add(left, right), _data.add(right, left))


@given(qst.datas(shape=(2, 3)), st.integers(1, 3))
def test_adjoint_involution(matrix, times):
    out = matrix
    for _ in range(2 * times):
        out = _data.adjoint(out)
    assert _data.kind(out) == _data.kind(matrix)
    assert _data.isequal(out, matrix)
