import numpy as np
import pytest

from schrodinger import Dims, ConstructionError


@pytest.mark.parametrize(["args", "expected"], [
    pytest.param((2,), (2,), id="int"),
    pytest.param((2, 3), (2, 3), id="varargs"),
    pytest.param(([2, 3],), (2, 3), id="list"),
    pytest.param(((2, 3),), (2, 3), id="tuple"),
    pytest.param((np.array([2, 3]),), (2, 3), id="ndarray"),
    pytest.param((np.int64(4),), (4,), id="numpy int"),
])
def test_construction(args, expected):
    dims = Dims(*args)
    assert dims.as_tuple() == expected
    assert all(type(d) is int for d in dims)
    assert dims.size == int(np.prod(expected))


@pytest.mark.parametrize("args", [
    pytest.param((), id="empty"),
    pytest.param(([],), id="empty list"),
    pytest.param((0,), id="zero"),
    pytest.param((2, -1), id="negative"),
    pytest.param((2.5,), id="float"),
    pytest.param((True,), id="bool"),
    pytest.param(("2",), id="str"),
])
def test_bad_construction(args):
    with pytest.raises(ConstructionError):
        Dims(*args)


def test_interned():
    assert Dims(2, 2) is Dims((2, 2))
    assert Dims(2, 2) is Dims([2, 2])
    assert Dims(Dims(3)) is Dims(3)


def test_equality():
    assert Dims(2, 2) == Dims(2, 2)
    assert Dims(2, 2) == (2, 2)
    assert Dims(2, 2) == [2, 2]
    assert Dims(4) != Dims(2, 2)
    assert Dims(4).size == Dims(2, 2).size
    assert Dims(2, 3) != Dims(3, 2)
    assert Dims(2) != "2"
    assert hash(Dims(2, 3)) == hash(Dims([2, 3]))


def test_sequence_protocol():
    dims = Dims(2, 3, 4)
    assert len(dims) == 3
    assert list(dims) == [2, 3, 4]
    assert dims[1] == 3
    assert dims[-1] == 4
    with pytest.raises(TypeError):
        dims[0] = 5


def test_tensor():
    assert Dims(2) & Dims(3) == Dims(2, 3)
    assert Dims(2, 2) & Dims(3) is Dims(2, 2, 3)
    assert Dims(2).tensor(4) == Dims(2, 4)
    assert (Dims(2) & Dims(3)).size == 6


def test_str_repr():
    assert str(Dims(2, 2)) == "2⊗2"
    assert str(Dims(5)) == "5"
    assert repr(Dims(2, 2)) == "Dims(2, 2)"


def test_step():
    assert Dims(2, 3, 4).step() == [12, 4, 1]
    assert Dims(7).step() == [1]


@pytest.mark.parametrize(["dims", "indices", "flat"], [
    pytest.param((2, 2), [1, 0], 2, id="qubits"),
    pytest.param((2, 3), [1, 2], 5, id="last"),
    pytest.param((3, 2, 4), [2, 1, 3], 23, id="three factors"),
    pytest.param((5,), 3, 3, id="single factor"),
])
def test_dims2idx_idx2dims(dims, indices, flat):
    dims = Dims(dims)
    assert dims.dims2idx(indices) == flat
    expected = [indices] if np.isscalar(indices) else indices
    assert dims.idx2dims(flat) == expected


def test_index_roundtrip_kronecker_order():
    dims = Dims(2, 3)
    flat = [dims.dims2idx([i, j]) for i in range(2) for j in range(3)]
    assert flat == list(range(6))


def test_index_errors():
    dims = Dims(2, 3)
    with pytest.raises(ValueError):
        dims.dims2idx([1])
    with pytest.raises(TypeError):
        dims.dims2idx([1, 0.5])
    with pytest.raises(IndexError):
        dims.dims2idx([2, 0])
    with pytest.raises(IndexError):
        dims.idx2dims(6)
