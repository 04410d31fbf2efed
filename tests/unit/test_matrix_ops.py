import numpy as np
import pytest

from shallownet.core import matrix
from shallownet.core.errors import InvalidAxis


def test_column_sums_of_known_matrix():
    m = np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
    out = matrix.sum_along_axis(matrix.AXIS_COLUMNS, m)
    assert out.shape == (1, 3)
    assert np.array_equal(out, np.array([[5.0, 7.0, 9.0]]))


def test_row_sums_cover_every_row():
    m = np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
    out = matrix.sum_along_axis(matrix.AXIS_ROWS, m)
    assert out.shape == (2, 1)
    assert np.array_equal(out, np.array([[6.0], [15.0]]))


@pytest.mark.parametrize("axis", [2, -1, "columns", None, True, 0.0, 1.0, np.float64(0)])
def test_sum_rejects_unknown_axis(axis):
    with pytest.raises(InvalidAxis):
        matrix.sum_along_axis(axis, np.ones((2, 2)))


def test_invalid_axis_is_a_value_error():
    with pytest.raises(ValueError):
        matrix.sum_along_axis(5, np.ones((2, 2)))


def test_sum_accepts_numpy_integer_axis():
    m = np.array([[1.0, 2.0], [3.0, 4.0]])
    out = matrix.sum_along_axis(np.int64(matrix.AXIS_COLUMNS), m)
    assert np.array_equal(out, np.array([[4.0, 6.0]]))


def test_apply_passes_row_col_value():
    m = np.zeros((2, 3))
    out = matrix.apply(lambda row, col, v: v + 10 * row + col, m)
    assert np.array_equal(out, np.array([[0.0, 1.0, 2.0], [10.0, 11.0, 12.0]]))
    assert np.array_equal(m, np.zeros((2, 3)))


def test_apply_broadcasts_constant_results():
    out = matrix.apply(lambda _, __, v: 3.0, np.zeros((2, 2)))
    assert np.array_equal(out, np.full((2, 2), 3.0))


def test_add_row_bias_is_pure():
    m = np.array([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
    bias = np.array([[10.0, 20.0]])
    out = matrix.add_row_bias(m, bias)
    assert np.array_equal(out, np.array([[11.0, 22.0], [13.0, 24.0], [15.0, 26.0]]))
    assert np.array_equal(m, np.array([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]]))


def test_add_row_bias_rejects_wrong_width():
    with pytest.raises(ValueError):
        matrix.add_row_bias(np.ones((2, 3)), np.ones((1, 2)))


def test_elementwise_and_matrix_products():
    a = np.array([[1.0, 2.0], [3.0, 4.0]])
    b = np.array([[2.0, 0.0], [1.0, 2.0]])
    assert np.array_equal(matrix.mul_elem(a, b), np.array([[2.0, 0.0], [3.0, 8.0]]))
    assert np.array_equal(matrix.mul(a, b), np.array([[4.0, 4.0], [10.0, 8.0]]))
    assert np.array_equal(matrix.transpose(a), np.array([[1.0, 3.0], [2.0, 4.0]]))
    assert np.array_equal(matrix.add(a, b), a + b)
    assert np.array_equal(matrix.sub(a, b), a - b)
    assert np.array_equal(matrix.scale(0.5, a), a * 0.5)


def test_shape_mismatches_raise():
    with pytest.raises(ValueError):
        matrix.mul_elem(np.ones((2, 3)), np.ones((3, 2)))
    with pytest.raises(ValueError):
        matrix.mul(np.ones((2, 3)), np.ones((2, 3)))
    with pytest.raises(ValueError):
        matrix.as_matrix(np.ones(3))
