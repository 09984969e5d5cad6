import typing
import types


class InvalidArgumentException(TypeError):
	"""
	[InvalidArgumentException(TypeError)] - Exception representing an invalid type passed to a parameter
	"""

	def __init__(self, caller: typing.Callable | types.FunctionType | types.MethodType = None, parameter_name: str = None, argument_type: type = None, parameter_types: typing.Iterable[type | str] = None):
		"""
		[InvalidArgumentException(TypeError)] - Exception representing an invalid type passed to a parameter
		- Constructor -
		:param caller: (CALLABLE) The callable that raised this exception
		:param parameter_name: (str) The name of the parameter
		:param argument_type: (type) The type of the argument passed in
		:param parameter_types: (ITERABLE[type]) The types this parameter accepts
		"""

		if caller is None or parameter_name is None or argument_type is None:
			super().__init__()
			return

		if parameter_types is None:
			type_list: str = '<UNKNOWN>'
		else:
			names: tuple[str, ...] = tuple(f"'{x.__name__ if isinstance(x, type) else x}'" for x in parameter_types)
			type_list: str = f'either {", ".join(names[:-1])} or {names[-1]}' if len(names) > 1 else names[0]

		super().__init__(f'{caller.__qualname__.replace(".", "::")} - parameter \'{parameter_name}\' must be {type_list}; got \'{argument_type.__name__}\'')


class AmbiguousError(ValueError):
	"""
	[AmbiguousError(ValueError)] - Exception representing ambiguous data or state
	"""

	def __init__(self, what: str = ''):
		"""
		[AmbiguousError(ValueError)] - Exception representing ambiguous data or state
		- Constructor -
		:param what: The message
		"""

		super().__init__(what)


class OutOfRangeError(IndexError):
	"""
	[OutOfRangeError(IndexError)] - Exception representing a row or column index outside a matrix's shape
	"""

	def __init__(self, what: str = ''):
		"""
		[OutOfRangeError(IndexError)] - Exception representing a row or column index outside a matrix's shape
		- Constructor -
		:param what: The message
		"""

		super().__init__(what)


class ShapeMismatchError(ValueError):
	"""
	[ShapeMismatchError(ValueError)] - Exception representing an element-wise operation on differently shaped matrices
	"""

	def __init__(self, what: str = ''):
		"""
		[ShapeMismatchError(ValueError)] - Exception representing an element-wise operation on differently shaped matrices
		- Constructor -
		:param what: The message
		"""

		super().__init__(what)


class DimensionMismatchError(ValueError):
	"""
	[DimensionMismatchError(ValueError)] - Exception representing incompatible inner dimensions or undersized source data
	"""

	def __init__(self, what: str = ''):
		"""
		[DimensionMismatchError(ValueError)] - Exception representing incompatible inner dimensions or undersized source data
		- Constructor -
		:param what: The message
		"""

		super().__init__(what)
