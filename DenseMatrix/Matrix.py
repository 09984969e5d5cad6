from __future__ import annotations

import collections.abc
import copy
import numpy
import typing

from . import Exceptions
from . import Logger
from .Decorators import Overload


@typing.runtime_checkable
class Element(typing.Protocol):
	"""
	Protocol describing a value usable as a matrix element
	Elements must support '+', '-', '*' and '/'
	The element's type must default-construct to its zero value
	"""

	def __add__(self, other): ...

	def __sub__(self, other): ...

	def __mul__(self, other): ...

	def __truediv__(self, other): ...


N = typing.TypeVar('N', bound=Element)


class Matrix(typing.Generic[N]):
	"""
	Class representing a dense two-dimensional matrix
	Elements are stored row-major in a single flat list
	"""

	__element__: typing.Optional[type] = None
	__array_ufunc__ = None

	@classmethod
	def identity(cls, size: int, element_type: typing.Optional[type] = None) -> Matrix:
		"""
		Creates a square identity matrix
		:param size: The number of rows and columns
		:param element_type: The element type (defaults to the class's element type or int)
		:return: The identity matrix
		"""

		element_type = element_type if element_type is not None else cls.__element__ if cls.__element__ is not None else int
		instance: Matrix = cls(size, element_type(), element_type=element_type)

		for i in range(instance.__rows__):
			instance.__array__[i * instance.__cols__ + i] = element_type(1)

		return instance

	@staticmethod
	def __is_scalar__(value: typing.Any) -> bool:
		"""
		INTERNAL METHOD
		:param value: The value to check
		:return: Whether the value can scale a matrix
		"""

		return isinstance(value, Element) and not isinstance(value, (Matrix, numpy.ndarray))

	@Overload
	def __init__(self, size: int, fill: Element, *, element_type: typing.Optional[type] = None):
		"""
		Class representing a dense two-dimensional matrix
		- Constructor -
		Creates a square matrix with every element set to 'fill'
		:param size: The number of rows and columns
		:param fill: The value of every element
		:param element_type: The element type; values are converted to it when given
		"""

		self.__setup__(size, size, element_type, fill)
		self.__array__: list = [self.__coerce__(fill, Matrix.__init__, 'fill')] * self.__size__

	@Overload
	def __init__(self, rows: int, cols: int, fill: Element, *, element_type: typing.Optional[type] = None):
		"""
		Class representing a dense two-dimensional matrix
		- Constructor -
		Creates a matrix with every element set to 'fill'
		:param rows: The number of rows
		:param cols: The number of columns
		:param fill: The value of every element
		:param element_type: The element type; values are converted to it when given
		"""

		self.__setup__(rows, cols, element_type, fill)
		self.__array__: list = [self.__coerce__(fill, Matrix.__init__, 'fill')] * self.__size__

	@Overload
	def __init__(self, data: collections.abc.Sequence, *, element_type: typing.Optional[type] = None):
		"""
		Class representing a dense two-dimensional matrix
		- Constructor -
		Creates a matrix from nested rows; the shape is taken from the number of rows and the first row's length
		:param data: The source rows
		:param element_type: The element type; values are converted to it when given
		"""

		rows: int = len(data)

		if rows > 0 and (not isinstance(data[0], collections.abc.Sequence) or isinstance(data[0], str)):
			raise Exceptions.InvalidArgumentException(Matrix.__init__, 'data', type(data[0]), (collections.abc.Sequence,))

		self.__copy_from__(rows, len(data[0]) if rows > 0 else 0, data, element_type)

	@Overload
	def __init__(self, size: int, data: collections.abc.Sequence, *, element_type: typing.Optional[type] = None):
		"""
		Class representing a dense two-dimensional matrix
		- Constructor -
		Creates a square matrix from the leading block of nested rows
		:param size: The number of rows and columns
		:param data: The source rows
		:param element_type: The element type; values are converted to it when given
		:raises DimensionMismatchError: If 'data' is smaller than 'size' x 'size'
		"""

		self.__copy_from__(size, size, data, element_type)

	@Overload
	def __init__(self, rows: int, cols: int, data: collections.abc.Sequence, *, element_type: typing.Optional[type] = None):
		"""
		Class representing a dense two-dimensional matrix
		- Constructor -
		Creates a matrix from the leading block of nested rows
		:param rows: The number of rows
		:param cols: The number of columns
		:param data: The source rows
		:param element_type: The element type; values are converted to it when given
		:raises DimensionMismatchError: If 'data' is smaller than 'rows' x 'cols'
		"""

		self.__copy_from__(rows, cols, data, element_type)

	@Overload
	def __init__(self, matrix: Matrix):
		"""
		Class representing a dense two-dimensional matrix
		- Constructor -
		Copies a matrix into this one
		:param matrix: The source matrix
		"""

		matrix.__copy_into__(self)

	@Overload
	def __init__(self, array: numpy.ndarray, *, element_type: typing.Optional[type] = None):
		"""
		Class representing a dense two-dimensional matrix
		- Constructor -
		Copies a two-dimensional numpy array into this one
		:param array: The source array
		:param element_type: The element type (defaults to the array's numeric dtype)
		:raises DimensionMismatchError: If the array is not two-dimensional
		"""

		if array.ndim != 2:
			raise Exceptions.DimensionMismatchError(f'Cannot build a matrix from a {array.ndim}-dimensional array')

		if element_type is None and array.dtype.kind in 'iufc':
			element_type = array.dtype.type

		rows, cols = array.shape
		self.__copy_from__(rows, cols, array.tolist(), element_type)

	def __setup__(self, rows: int, cols: int, element_type: typing.Optional[type], sample: typing.Any) -> None:
		"""
		INTERNAL METHOD
		Sets the shape and element type of a new matrix
		:param rows: The number of rows
		:param cols: The number of columns
		:param element_type: The explicit element type or None
		:param sample: A source value to infer the element type from or None
		:raises ValueError: If either dimension is negative
		"""

		if rows < 0 or cols < 0:
			raise ValueError(f'Matrix dimensions must be non-negative; got {rows}x{cols}')

		pinned: typing.Optional[type] = element_type if element_type is not None else type(self).__element__
		self.__rows__: int = int(rows)
		self.__cols__: int = int(cols)
		self.__size__: int = self.__rows__ * self.__cols__
		self.__pinned__: bool = pinned is not None
		self.__element_type__: type = pinned if pinned is not None else float if sample is None else type(sample)
		Logger.emit('debug', f'Allocated {self.__rows__}x{self.__cols__} matrix of \'{self.__element_type__.__name__}\'')

	def __copy_from__(self, rows: int, cols: int, data: collections.abc.Sequence, element_type: typing.Optional[type]) -> None:
		"""
		INTERNAL METHOD
		Validates and copies the leading 'rows' x 'cols' block of nested rows
		:param rows: The number of rows
		:param cols: The number of columns
		:param data: The source rows
		:param element_type: The explicit element type or None
		:raises DimensionMismatchError: If 'data' is smaller than 'rows' x 'cols'
		"""

		if isinstance(data, str):
			raise Exceptions.InvalidArgumentException(Matrix.__init__, 'data', type(data), (collections.abc.Sequence,))
		elif len(data) < rows:
			Logger.emit('error', f'Source data has {len(data)} rows; expected at least {rows}')
			raise Exceptions.DimensionMismatchError(f'Source data has {len(data)} rows; expected at least {rows}')

		for r in range(rows):
			row: typing.Any = data[r]

			if not isinstance(row, collections.abc.Sequence) or isinstance(row, str):
				raise Exceptions.InvalidArgumentException(Matrix.__init__, 'data', type(row), (collections.abc.Sequence,))
			elif len(row) < cols:
				Logger.emit('error', f'Source row {r} has {len(row)} elements; expected at least {cols}')
				raise Exceptions.DimensionMismatchError(f'Source row {r} has {len(row)} elements; expected at least {cols}')

		self.__setup__(rows, cols, element_type, data[0][0] if rows > 0 and cols > 0 else None)
		self.__array__: list = [self.__coerce__(data[r][c], Matrix.__init__, 'data') for r in range(rows) for c in range(cols)]

	def __copy_into__(self, target: Matrix) -> None:
		"""
		INTERNAL METHOD
		Deep-copies this matrix's shape and elements into another instance
		Values are converted only when the target pins a different element type
		:param target: The (uninitialized) target matrix
		"""

		pinned: typing.Optional[type] = type(target).__element__
		target.__rows__ = self.__rows__
		target.__cols__ = self.__cols__
		target.__size__ = self.__size__

		if pinned is None or pinned is self.__element_type__:
			target.__pinned__ = self.__pinned__
			target.__element_type__ = self.__element_type__
			target.__array__ = self.__array__.copy()
		else:
			target.__pinned__ = True
			target.__element_type__ = pinned
			target.__array__ = [pinned(x) for x in self.__array__]

	def __coerce__(self, value: typing.Any, caller: typing.Callable, parameter_name: str) -> typing.Any:
		"""
		INTERNAL METHOD
		Validates a value for storage in this matrix
		:param value: The value to store
		:param caller: The public callable the value was passed to
		:param parameter_name: The parameter the value was passed as
		:return: The value, converted to the element type if it is pinned
		:raises InvalidArgumentException: If the value does not support matrix arithmetic
		"""

		if not isinstance(value, Element) or isinstance(value, (Matrix, numpy.ndarray)):
			raise Exceptions.InvalidArgumentException(caller, parameter_name, type(value), (Element,))

		return self.__element_type__(value) if self.__pinned__ else value

	def __shape_name__(self) -> str:
		return f'{self.__rows__}x{self.__cols__}'

	def __check_row__(self, r: int) -> None:
		"""
		INTERNAL METHOD
		:param r: The row index
		:raises InvalidArgumentException: If 'r' is not an int
		:raises OutOfRangeError: If 'r' is outside [0, rows)
		"""

		if not isinstance(r, int):
			raise Exceptions.InvalidArgumentException(Matrix.at, 'r', type(r), (int,))
		elif r < 0 or r >= self.__rows__:
			Logger.emit('error', f'Row index {r} out of range for {self.__shape_name__()} matrix')
			raise Exceptions.OutOfRangeError(f'Row index {r} out of range [0, {self.__rows__})')

	def __check_col__(self, c: int) -> None:
		"""
		INTERNAL METHOD
		:param c: The column index
		:raises InvalidArgumentException: If 'c' is not an int
		:raises OutOfRangeError: If 'c' is outside [0, cols)
		"""

		if not isinstance(c, int):
			raise Exceptions.InvalidArgumentException(Matrix.at, 'c', type(c), (int,))
		elif c < 0 or c >= self.__cols__:
			Logger.emit('error', f'Column index {c} out of range for {self.__shape_name__()} matrix')
			raise Exceptions.OutOfRangeError(f'Column index {c} out of range [0, {self.__cols__})')

	def __check_same_shape__(self, other: Matrix, operation: str) -> None:
		if self.__rows__ != other.__rows__ or self.__cols__ != other.__cols__:
			Logger.emit('error', f'Cannot {operation} {other.__shape_name__()} matrix and {self.__shape_name__()} matrix')
			raise Exceptions.ShapeMismatchError(f'Cannot {operation} matrix of shape {other.__shape_name__()} and matrix of shape {self.__shape_name__()}')

	def __len__(self) -> int:
		"""
		:return: The number of elements in this matrix (rows * cols)
		Iteration yields rows, so this is not the number of items iterated
		"""

		return self.__size__

	def __iter__(self) -> typing.Iterator[list]:
		"""
		:return: An iterator over copies of this matrix's rows
		"""

		for r in range(self.__rows__):
			yield self.row(r)

	def __eq__(self, other: typing.Any) -> bool:
		if not isinstance(other, Matrix):
			return NotImplemented

		return self.shape == other.shape and self.__array__ == other.__array__

	__hash__ = None

	def __repr__(self) -> str:
		return f'<{type(self).__name__} {self.__shape_name__()} @ {hex(id(self))}>'

	def __str__(self) -> str:
		rows: list[str] = ['[' + ', '.join(str(x) for x in row) + ']' for row in self]
		return '[' + ', '.join(rows) + ']'

	def __copy__(self) -> Matrix:
		return self.copy()

	def __deepcopy__(self, memo: dict) -> Matrix:
		instance: Matrix = self.copy()
		instance.__array__ = copy.deepcopy(self.__array__, memo)
		return instance

	def __getitem__(self, position: tuple[int, int] | int) -> typing.Any:
		"""
		Gets either an element or a copy of a row
		:param position: The (row, column) position or a row index
		:return: The element or row copy
		"""

		if isinstance(position, tuple) and len(position) == 2:
			return self.at(*position)
		elif isinstance(position, int):
			return self.row(position)
		else:
			raise Exceptions.InvalidArgumentException(Matrix.__getitem__, 'position', type(position), ('tuple[int, int]', int))

	def __setitem__(self, position: tuple[int, int], value: typing.Any) -> None:
		if not isinstance(position, tuple) or len(position) != 2:
			raise Exceptions.InvalidArgumentException(Matrix.__setitem__, 'position', type(position), ('tuple[int, int]',))

		self.set(*position, value)

	def __iadd__(self, other: Matrix) -> Matrix:
		"""
		Adds another matrix to this one element-wise in-place
		:param other: The matrix to add
		:return: This matrix
		:raises ShapeMismatchError: If the shapes differ
		"""

		if not isinstance(other, Matrix):
			return NotImplemented

		self.__check_same_shape__(other, 'add')
		self.__array__ = [a + b for a, b in zip(self.__array__, other.__array__)]
		return self

	def __isub__(self, other: Matrix) -> Matrix:
		"""
		Subtracts another matrix from this one element-wise in-place
		:param other: The matrix to subtract
		:return: This matrix
		:raises ShapeMismatchError: If the shapes differ
		"""

		if not isinstance(other, Matrix):
			return NotImplemented

		self.__check_same_shape__(other, 'subtract')
		self.__array__ = [a - b for a, b in zip(self.__array__, other.__array__)]
		return self

	def __imul__(self, other: Element | Matrix) -> Matrix:
		"""
		Multiplies this matrix in-place
		A scalar scales every element; a matrix replaces this one with the matrix product
		:param other: The scalar or right-hand matrix
		:return: This matrix
		:raises DimensionMismatchError: If 'other' is a matrix whose row count differs from this column count
		"""

		if isinstance(other, Matrix):
			return self.__product__(other)
		elif Matrix.__is_scalar__(other):
			self.__array__ = [x * other for x in self.__array__]
			return self
		else:
			return NotImplemented

	def __imatmul__(self, other: Matrix) -> Matrix:
		if not isinstance(other, Matrix):
			return NotImplemented

		return self.__product__(other)

	def __itruediv__(self, other: Element) -> Matrix:
		"""
		Divides every element of this matrix by a scalar in-place
		The divisor is not checked; a zero divisor behaves as the element type defines
		:param other: The scalar divisor
		:return: This matrix
		"""

		if not Matrix.__is_scalar__(other):
			return NotImplemented

		self.__array__ = [x / other for x in self.__array__]
		return self

	def __product__(self, other: Matrix) -> Matrix:
		"""
		INTERNAL METHOD
		Replaces this matrix with the matrix product of this matrix and another
		:param other: The right-hand matrix
		:return: This matrix
		:raises DimensionMismatchError: If the inner dimensions differ
		"""

		if self.__cols__ != other.__rows__:
			Logger.emit('error', f'Cannot multiply {self.__shape_name__()} matrix by {other.__shape_name__()} matrix')
			raise Exceptions.DimensionMismatchError(f'Cannot multiply matrix of shape {self.__shape_name__()} by matrix of shape {other.__shape_name__()}; inner dimensions differ')

		rows, inner, cols = self.__rows__, self.__cols__, other.__cols__
		left, right = self.__array__, other.__array__
		zero: typing.Any = self.__element_type__()
		result: list = []

		for r in range(rows):
			for c in range(cols):
				total: typing.Any = zero

				for i in range(inner):
					total = total + left[r * inner + i] * right[i * cols + c]

				result.append(total)

		self.__array__ = result
		self.__cols__ = cols
		self.__size__ = rows * cols
		Logger.emit('debug', f'Computed {rows}x{inner} by {inner}x{cols} matrix product')
		return self

	def __add__(self, other: Matrix) -> Matrix:
		"""
		Adds this matrix with another matrix element-wise
		:param other: The matrix to add
		:return: The added matrix
		:raises ShapeMismatchError: If the shapes differ
		"""

		if not isinstance(other, Matrix):
			return NotImplemented

		result: Matrix = self.copy()
		result += other
		return result

	def __sub__(self, other: Matrix) -> Matrix:
		"""
		Subtracts another matrix from this matrix element-wise
		:param other: The matrix to subtract
		:return: The subtracted matrix
		:raises ShapeMismatchError: If the shapes differ
		"""

		if not isinstance(other, Matrix):
			return NotImplemented

		result: Matrix = self.copy()
		result -= other
		return result

	def __mul__(self, other: Element | Matrix) -> Matrix:
		"""
		Multiplies this matrix by a scalar or by another matrix (matrix product)
		:param other: The scalar or right-hand matrix
		:return: The multiplied matrix
		:raises DimensionMismatchError: If 'other' is a matrix whose row count differs from this column count
		"""

		if not isinstance(other, Matrix) and not Matrix.__is_scalar__(other):
			return NotImplemented

		result: Matrix = self.copy()
		result *= other
		return result

	def __rmul__(self, other: Element) -> Matrix:
		"""
		Multiplies a scalar by this matrix
		:param other: The scalar
		:return: The scaled matrix
		"""

		if not Matrix.__is_scalar__(other):
			return NotImplemented

		result: Matrix = self.copy()
		result *= other
		return result

	def __matmul__(self, other: Matrix) -> Matrix:
		if not isinstance(other, Matrix):
			return NotImplemented

		result: Matrix = self.copy()
		result @= other
		return result

	def __truediv__(self, other: Element) -> Matrix:
		"""
		Divides every element of this matrix by a scalar
		:param other: The scalar divisor
		:return: The divided matrix
		"""

		if not Matrix.__is_scalar__(other):
			return NotImplemented

		result: Matrix = self.copy()
		result /= other
		return result

	def __neg__(self) -> Matrix:
		"""
		:return: A copy of this matrix with every element negated
		"""

		result: Matrix = self.copy()
		result.__array__ = [-x for x in result.__array__]
		return result

	def __pos__(self) -> Matrix:
		"""
		:return: A copy of this matrix
		"""

		return self.copy()

	def at(self, r: int, c: int) -> typing.Any:
		"""
		Gets the element at the specified zero-indexed position
		:param r: The row index
		:param c: The column index
		:return: The element
		:raises OutOfRangeError: If 'r' or 'c' is outside this matrix's shape
		"""

		self.__check_row__(r)
		self.__check_col__(c)
		return self.__array__[r * self.__cols__ + c]

	def set(self, r: int, c: int, val: Element) -> None:
		"""
		Sets the element at the specified zero-indexed position
		:param r: The row index
		:param c: The column index
		:param val: The new value
		:raises OutOfRangeError: If 'r' or 'c' is outside this matrix's shape
		:raises InvalidArgumentException: If 'val' does not support matrix arithmetic
		"""

		self.__check_row__(r)
		self.__check_col__(c)
		self.__array__[r * self.__cols__ + c] = self.__coerce__(val, Matrix.set, 'val')

	def row(self, r: int) -> list:
		"""
		:param r: The row index
		:return: A copy of the specified row
		:raises OutOfRangeError: If 'r' is outside [0, rows)
		"""

		self.__check_row__(r)
		return self.__array__[r * self.__cols__:(r + 1) * self.__cols__]

	def col(self, c: int) -> list:
		"""
		:param c: The column index
		:return: A copy of the specified column
		:raises OutOfRangeError: If 'c' is outside [0, cols)
		"""

		self.__check_col__(c)
		return self.__array__[c::self.__cols__]

	def transpose(self) -> Matrix:
		"""
		Transposes this matrix in-place
		Matrices with no rows or no columns are left unchanged
		:return: This matrix
		"""

		if self.__rows__ == 0 or self.__cols__ == 0:
			return self

		rows, cols = self.__rows__, self.__cols__
		self.__array__ = [self.__array__[r * cols + c] for c in range(cols) for r in range(rows)]
		self.__rows__, self.__cols__ = cols, rows
		Logger.emit('debug', f'Transposed {rows}x{cols} matrix')
		return self

	def transposed(self) -> Matrix:
		"""
		:return: A transposed copy of this matrix
		"""

		return self.copy().transpose()

	def copy(self) -> Matrix:
		"""
		:return: A copy of this matrix
		"""

		instance: Matrix = type(self).__new__(type(self))
		self.__copy_into__(instance)
		return instance

	def is_square(self) -> bool:
		"""
		:return: Whether this matrix has as many rows as columns
		"""

		return self.__rows__ == self.__cols__

	def flattened(self) -> tuple:
		"""
		:return: All elements in row-major order
		"""

		return tuple(self.__array__)

	def to_nested(self) -> list[list]:
		"""
		:return: This matrix converted to a list of row lists
		"""

		return [self.row(r) for r in range(self.__rows__)]

	def to_numpy(self) -> numpy.ndarray:
		"""
		The dtype is derived from the element type; element types numpy does not know map to 'object'
		Values no longer of the element type (such as int elements after division) let numpy infer the dtype
		:return: This matrix converted to a two-dimensional numpy array
		"""

		if not all(isinstance(x, self.__element_type__) for x in self.__array__):
			return numpy.array(self.__array__).reshape(self.shape)

		try:
			dtype: numpy.dtype = numpy.dtype(self.__element_type__)
		except TypeError:
			dtype: numpy.dtype = numpy.dtype(object)

		return numpy.array(self.__array__, dtype=dtype).reshape(self.shape)

	@property
	def shape(self) -> tuple[int, int]:
		"""
		:return: The (rows, cols) pair of this matrix
		"""

		return self.__rows__, self.__cols__

	@property
	def rows(self) -> int:
		return self.__rows__

	@property
	def cols(self) -> int:
		return self.__cols__

	@property
	def size(self) -> int:
		"""
		:return: The number of elements (rows * cols)
		"""

		return self.__size__

	@property
	def element_type(self) -> type:
		"""
		:return: The element type of this matrix
		"""

		return self.__element_type__


class IMatrix(Matrix[int]):
	"""
	Class representing a dense matrix of integers
	"""

	__element__ = int


class FMatrix(Matrix[numpy.float32]):
	"""
	Class representing a dense matrix of single-precision floats
	"""

	__element__ = numpy.float32


class DMatrix(Matrix[float]):
	"""
	Class representing a dense matrix of double-precision floats
	"""

	__element__ = float
