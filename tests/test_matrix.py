import pytest

from neuranet.matrix import Matrix, multiply


def _from_rows(rows):
    m = Matrix(len(rows), len(rows[0]), False)
    for r, row in enumerate(rows):
        for c, value in enumerate(row):
            m[r, c] = value
    return m


def _to_rows(m):
    return [[m[r, c] for c in range(m.num_cols)] for r in range(m.num_rows)]


def test_zero_initialised():
    m = Matrix(2, 3, False)
    assert (m.num_rows, m.num_cols) == (2, 3)
    assert _to_rows(m) == [[0.0, 0.0, 0.0], [0.0, 0.0, 0.0]]


def test_random_values_in_range():
    m = Matrix(10, 10, True)
    values = [v for row in _to_rows(m) for v in row]
    assert all(-0.0001 <= v <= 0.0001 for v in values)
    assert any(v != 0.0 for v in values)


def test_set_and_get():
    m = Matrix(2, 2, False)
    m[1, 0] = 4.25
    assert m[1, 0] == 4.25
    assert m[0, 1] == 0.0


@pytest.mark.parametrize("key", [(2, 0), (0, 2), (-1, 0), (0, -1)])
def test_out_of_range_raises(key):
    m = Matrix(2, 2, False)
    m[1, 1] = 3.0
    with pytest.raises(IndexError):
        _ = m[key]
    with pytest.raises(IndexError):
        m[key] = 1.0
    assert _to_rows(m) == [[0.0, 0.0], [0.0, 3.0]]


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        Matrix(-1, 2, False)


def test_transpose_swaps():
    m = _from_rows([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
    t = m.transpose()
    assert (t.num_rows, t.num_cols) == (3, 2)
    for r in range(2):
        for c in range(3):
            assert t[c, r] == m[r, c]


def test_transpose_round_trip():
    m = Matrix(4, 3, True)
    assert _to_rows(m.transpose().transpose()) == _to_rows(m)


def test_copy_is_independent():
    m = _from_rows([[1.0, 2.0]])
    c = m.copy()
    assert _to_rows(c) == _to_rows(m)
    c[0, 0] = 9.0
    assert m[0, 0] == 1.0


def test_multiply_by_identity():
    m = Matrix(3, 3, True)
    identity = Matrix(3, 3, False)
    for i in range(3):
        identity[i, i] = 1.0
    assert _to_rows(multiply(m, identity)) == _to_rows(m)
    assert _to_rows(multiply(identity, m)) == _to_rows(m)


def test_multiply_dot_product():
    a = _from_rows([[1.0, 2.0]])
    b = _from_rows([[3.0], [4.0]])
    product = multiply(a, b)
    assert (product.num_rows, product.num_cols) == (1, 1)
    assert product[0, 0] == 11.0


def test_multiply_transpose_identity():
    a = _from_rows([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
    b = _from_rows([[7.0, 8.0], [9.0, 10.0], [11.0, 12.0]])
    left = multiply(a, b).transpose()
    right = multiply(b.transpose(), a.transpose())
    assert _to_rows(left) == _to_rows(right)


def test_multiply_shape_mismatch():
    with pytest.raises(ValueError):
        multiply(Matrix(2, 3, False), Matrix(2, 3, False))


def test_str_format():
    m = _from_rows([[1.5, 0.0]])
    assert str(m) == "1.5\t\t0\t\t"