from __future__ import annotations

import functools
import inspect
import typing
import typeguard

from . import Exceptions


class __OverloadCaller__:
	"""
	INTERNAL CLASS; DO NOT USE
	Class for handling function overloads and delegation
	"""

	__FunctionOverloads__: dict[str, __OverloadCaller__] = {}

	@classmethod
	def new(cls, function: typing.Callable) -> __OverloadCaller__:
		"""
		Creates or extends the overload set for the specified function
		:param function: (CALLABLE) The function to overload
		:return: (__OverloadCaller__) The delegator
		"""

		qualname: str = f'{function.__module__}.{function.__qualname__}'

		if qualname not in cls.__FunctionOverloads__:
			cls.__FunctionOverloads__[qualname] = cls(qualname)

		caller: __OverloadCaller__ = cls.__FunctionOverloads__[qualname]
		caller.__overloads__.append(function)
		return caller

	@staticmethod
	def __matches__(value: typing.Any, annotation: typing.Any) -> bool:
		"""
		INTERNAL METHOD
		:param value: The argument value
		:param annotation: The resolved parameter annotation
		:return: Whether the value satisfies the annotation
		"""

		if typing.Protocol in getattr(annotation, '__mro__', ()):
			return isinstance(value, annotation)

		try:
			typeguard.check_type(value, annotation)
			return True
		except typeguard.TypeCheckError:
			return False

	def __init__(self, qualname: str):
		"""
		INTERNAL CLASS; DO NOT USE
		[__OverloadCaller__] - Class for handling function overloads and delegation
		- Constructor -
		SHOULD NOT BE CALLED DIRECTLY; USE '__OverloadCaller__.new'
		:param qualname: (str) The qualified name shared by all overloads
		"""

		self.__function_name__: str = qualname
		self.__overloads__: list[typing.Callable] = []
		self.__hints__: dict[typing.Callable, dict[str, typing.Any]] = {}

	def __accepts__(self, function: typing.Callable, args: tuple, kwargs: dict) -> bool:
		"""
		INTERNAL METHOD
		Checks whether a single overload accepts the specified arguments
		:param function: The overload to check
		:param args: The positional arguments
		:param kwargs: The keyword arguments
		:return: Whether all arguments bind and satisfy their annotations
		"""

		signature: inspect.Signature = inspect.signature(function)

		try:
			bound: inspect.BoundArguments = signature.bind(*args, **kwargs)
		except TypeError:
			return False

		if function not in self.__hints__:
			self.__hints__[function] = typing.get_type_hints(function)

		hints: dict[str, typing.Any] = self.__hints__[function]

		for name, value in bound.arguments.items():
			if name not in hints:
				continue

			parameter: inspect.Parameter = signature.parameters[name]
			values: tuple = tuple(value) if parameter.kind == parameter.VAR_POSITIONAL else tuple(value.values()) if parameter.kind == parameter.VAR_KEYWORD else (value,)

			if not all(self.__matches__(x, hints[name]) for x in values):
				return False

		return True

	def __call__(self, *args, **kwargs) -> typing.Any:
		"""
		Calls the overloaded function based on argument types
		:param args: The arguments to call with
		:param kwargs: The keyword arguments to call with
		:return: (ANY) The function result
		:raises AmbiguousError: If multiple matches are found
		:raises TypeError: If no matches are found
		"""

		matches: list[typing.Callable] = [function for function in self.__overloads__ if self.__accepts__(function, args, kwargs)]

		if len(matches) > 1:
			signatures: str = '\n'.join(str(inspect.signature(x)) for x in matches)
			raise Exceptions.AmbiguousError(f'Multiple matches found for function \'{self.__function_name__}\':\n{signatures}')
		elif len(matches) == 0:
			signatures: str = '\n'.join(f' - {inspect.signature(x)}' for x in self.__overloads__)
			received: str = ', '.join(type(x).__name__ for x in args)
			raise TypeError(f'No matches found for function \'{self.__function_name__}\' with arguments ({received}); accepted signatures:\n{signatures}')

		return matches[0](*args, **kwargs)


def Overload(*function: typing.Callable) -> typing.Callable:
	"""
	Decorator for overloading functions
	Function parameters must be type hinted (unannotated parameters accept anything)
	Exactly one overload must accept a call's arguments
	This decorator is not suitable for pickling
	:param function: The function to decorate
	:return: The redirect or binder if used as a decorator factory
	:raises InvalidArgumentException: If callback is not callable
	"""

	def binder(callback: typing.Callable) -> typing.Callable:
		if not callable(callback):
			raise Exceptions.InvalidArgumentException(Overload, 'function', type(callback))

		caller: __OverloadCaller__ = __OverloadCaller__.new(callback)

		@functools.wraps(callback)
		def redirect(*args, **kwargs):
			return caller(*args, **kwargs)

		return redirect

	if len(function) == 0:
		return binder
	elif callable(function[0]):
		return binder(function[0])
	else:
		raise Exceptions.InvalidArgumentException(Overload, 'function', type(function[0]))
