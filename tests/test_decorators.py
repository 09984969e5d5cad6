import pytest

from DenseMatrix.Decorators import Overload
from DenseMatrix.Exceptions import AmbiguousError, InvalidArgumentException


@Overload
def describe(value: int) -> str:
	return f'int {value}'


@Overload
def describe(value: str) -> str:
	return f'str {value}'


@Overload
def describe(first: int, second: int) -> str:
	return f'pair {first} {second}'


@Overload
def overlapping(value: int) -> str:
	return 'int'


@Overload
def overlapping(value: object) -> str:
	return 'object'


def test_dispatch_by_type_and_arity():
	assert describe(1) == 'int 1'
	assert describe('a') == 'str a'
	assert describe(1, 2) == 'pair 1 2'
	assert describe(first=3, second=4) == 'pair 3 4'


def test_no_match_raises_type_error():
	with pytest.raises(TypeError):
		describe(1.5)

	with pytest.raises(TypeError):
		describe(1, 2, 3)


def test_multiple_matches_are_ambiguous():
	assert overlapping('x') == 'object'

	with pytest.raises(AmbiguousError):
		overlapping(1)


def test_non_callable_is_rejected():
	with pytest.raises(InvalidArgumentException):
		Overload(5)
