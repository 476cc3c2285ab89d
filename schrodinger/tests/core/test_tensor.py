import numpy as np
import pytest
from hypothesis import given, strategies as st

import schrodinger
from schrodinger import (
    Ket, Bra, Operator, Dims, basis, create, qeye, sigmax, sigmay, tensor,
    VariantMismatch,
)
from schrodinger.tests import strategies as qst


def test_tensor_data():
    g = Ket([1, 0])
    sigma = create(4).to("dense")
    out = Operator(g) & sigma
    expected = np.zeros((8, 8))
    expected[:4, :4] = sigma.full()
    np.testing.assert_array_equal(out.full(), expected)
    assert out.dims == Dims(2, 4)


def test_tensor_forms():
    a, b, c = sigmax(), sigmay(), qeye(3)
    expected = tensor(a, b, c)
    assert tensor([a, b, c]) == expected
    assert tensor((a, b, c)) == expected
    assert (a & b) & c == expected
    assert a & (b & c) == expected
    assert expected.dims == Dims(2, 2, 3)


def test_tensor_kets():
    out = basis(2, 1) & basis(3, 0)
    assert out.isket
    assert out == basis(6, 3, dims=(2, 3))
    bra = basis(2, 1).dag() & basis(3, 0).dag()
    assert bra.isbra
    assert bra == out.dag()


def test_tensor_hint():
    assert tensor(sigmax(), sigmay()).isherm
    assert not tensor(sigmax(), create(2)).isherm


def test_tensor_storage():
    assert tensor(qeye(2), qeye(2)).storage == "sparse"
    assert tensor(qeye(2).to("dense"), qeye(2)).storage == "sparse"
    assert tensor(qeye(2), qeye(2).to("dense")).storage == "sparse"
    dense = tensor(qeye(2).to("dense"), qeye(2).to("dense"))
    assert dense.storage == "dense"


def test_tensor_single():
    a = sigmax()
    out = tensor(a)
    assert out == a
    assert out is not a
    assert tensor([a]) == a


def test_tensor_errors():
    with pytest.raises(TypeError):
        tensor()
    with pytest.raises(TypeError):
        tensor([])
    with pytest.raises(TypeError):
        tensor(qeye(2), np.eye(2))
    with pytest.raises(VariantMismatch):
        tensor(basis(2), qeye(2))
    with pytest.raises(VariantMismatch):
        Bra([1, 0]) & qeye(4)
    with pytest.raises(VariantMismatch):
        basis(2) & basis(2).dag()


def test_mixed_product_property():
    A, B = sigmax(), create(3)
    psi, phi = basis(2, 0), basis(3, 1)
    assert (A & B) @ (psi & phi) == (A @ psi) & (B @ phi)


@given(qst.operators(N=st.integers(1, 3)), qst.operators(N=st.integers(1, 3)))
def test_tensor_matches_kron(left, right):
    qst.note(left=left, right=right)
    out = left & right
    assert out.dims == left.dims & right.dims
    qst.assert_allclose(out, np.kron(left.full(), right.full()))
    expected_kind = (
        "dense" if left.storage == right.storage == "dense" else "sparse"
    )
    assert out.storage == expected_kind


def test_tensor_of_tensors_keeps_structure():
    out = tensor(qeye(4, (2, 2)), qeye(3))
    assert out.dims == Dims(2, 2, 3)
    assert str(out.dims) == "2⊗2⊗3"
    assert out == schrodinger.qeye(12, (2, 2, 3))
