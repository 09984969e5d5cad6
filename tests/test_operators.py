import numpy
import pytest

from DenseMatrix.Exceptions import DimensionMismatchError, ShapeMismatchError
from DenseMatrix.Matrix import FMatrix, IMatrix, Matrix


@pytest.fixture
def a():
	return Matrix([[1, 2], [2, 3]])


@pytest.fixture
def b():
	return Matrix([[4, 3], [3, 2]])


def test_concrete_sum_and_product(a, b):
	assert (a + b).to_nested() == [[5, 5], [5, 5]]
	assert (a * b).to_nested() == [[10, 7], [17, 12]]
	assert (a @ b).to_nested() == [[10, 7], [17, 12]]


def test_binary_operators_do_not_mutate(a, b):
	_ = a + b
	_ = a - b
	_ = a * b
	_ = a * 3
	_ = 3 * a
	_ = a / 2
	assert a.to_nested() == [[1, 2], [2, 3]]
	assert b.to_nested() == [[4, 3], [3, 2]]


def test_add_subtract_properties(a, b):
	assert (a + b) - b == a
	assert a + b == b + a


def test_in_place_operators_return_self(a, b):
	c = a.copy()
	result = c.__iadd__(b)
	assert result is c
	c -= b
	assert c == a
	c *= 2
	assert c.to_nested() == [[2, 4], [4, 6]]
	c /= 2
	assert c == a


@pytest.mark.parametrize('other', [Matrix(2, 3, 0), Matrix(3, 2, 0), Matrix(1, 0)])
def test_shape_mismatch(a, other):
	with pytest.raises(ShapeMismatchError):
		a + other

	with pytest.raises(ShapeMismatchError):
		a - other

	with pytest.raises(ShapeMismatchError):
		a += other

	assert a.to_nested() == [[1, 2], [2, 3]]


def test_scalar_round_trip():
	a = Matrix([[1.5, -2.0], [0.25, 8.0]])
	assert (a * 4) / 4 == a
	i = IMatrix([[2, 4], [6, 8]])
	assert (i * 3) / 3 == i


def test_scalar_multiplication_commutes(a):
	assert 3 * a == a * 3
	assert 0.5 * a == a * 0.5
	assert numpy.float32(2) * FMatrix(a) == FMatrix(a) * numpy.float32(2)


def test_division_by_zero_follows_element_type():
	with pytest.raises(ZeroDivisionError):
		Matrix(2, 1) / 0

	with numpy.errstate(divide='ignore'):
		result = FMatrix(1, 1, 1.0) / numpy.float32(0)

	assert numpy.isinf(result.at(0, 0))


def test_product_shape():
	a = Matrix(2, 3, 1)
	b = Matrix(3, 4, 2)
	product = a * b
	assert product.shape == (2, 4)
	assert product.size == 8
	assert all(x == 6 for x in product.flattened())


def test_identity_product_leaves_matrix_unchanged():
	m = Matrix([[1, 2, 3], [4, 5, 6]])
	assert Matrix([[1, 0], [0, 1]]) * m == m
	assert Matrix.identity(2) * m == m


def test_dimension_mismatch():
	a = Matrix(2, 3, 1)
	b = Matrix(2, 2, 1)

	with pytest.raises(DimensionMismatchError):
		a * b

	with pytest.raises(DimensionMismatchError):
		a *= b

	assert a.shape == (2, 3)


def test_in_place_product_replaces_shape():
	a = Matrix(2, 3, 1)
	a *= Matrix(3, 1, 1)
	assert a.shape == (2, 1)
	assert a.to_nested() == [[3], [3]]


def test_product_with_itself():
	a = Matrix([[1, 1], [0, 1]])
	a *= a
	assert a.to_nested() == [[1, 2], [0, 1]]


def test_empty_inner_dimension_yields_zeros():
	product = Matrix(2, 0, 1) * Matrix(0, 3, 1)
	assert product.shape == (2, 3)
	assert product.flattened() == (0,) * 6


def test_negation(a):
	assert (-a).to_nested() == [[-1, -2], [-2, -3]]


def test_unsupported_operands(a):
	with pytest.raises(TypeError):
		a + 1

	with pytest.raises(TypeError):
		a * 'x'

	with pytest.raises(TypeError):
		a / a


class Scaled:
	"""
	Element type defining only the left-hand arithmetic operators
	"""

	def __init__(self, value=0):
		self.value = value

	def __eq__(self, other):
		return isinstance(other, Scaled) and self.value == other.value

	def __add__(self, other):
		return Scaled(self.value + other.value)

	def __sub__(self, other):
		return Scaled(self.value - other.value)

	def __mul__(self, other):
		return Scaled(self.value * (other.value if isinstance(other, Scaled) else other))

	def __truediv__(self, other):
		return Scaled(self.value / (other.value if isinstance(other, Scaled) else other))


def test_scalar_left_multiplication_uses_element_multiplication():
	m = Matrix(2, Scaled(3))
	assert 2 * m == m * 2
	assert (2 * m).at(1, 1) == Scaled(6)
	assert m.at(0, 0) == Scaled(3)
