import io

import pytest

from DenseMatrix.Exceptions import InvalidArgumentException, OutOfRangeError, ShapeMismatchError
from DenseMatrix.Logger import Logger
from DenseMatrix.Matrix import Matrix


def test_logger_writes_banner_and_levels():
	stream = io.StringIO()
	logger = Logger(stream, 'INFO')
	logger.debug('hidden').info('shown').error('failure')
	text = stream.getvalue()
	assert text.startswith('==========[ Log Opened ]==========')
	assert 'hidden' not in text
	assert '[ INFO ]: shown' in text
	assert '[ ERROR ]: failure' in text


def test_logger_rejects_bad_arguments():
	with pytest.raises(InvalidArgumentException):
		Logger('not a stream')

	with pytest.raises(ValueError):
		Logger(io.StringIO(), 'VERBOSE')

	closed = io.StringIO()
	closed.close()

	with pytest.raises(IOError):
		Logger(closed)


def test_detached_logger_refuses_writes():
	stream = io.StringIO()
	logger = Logger(stream)
	logger.detach()
	assert logger.closed
	assert stream.getvalue().endswith('==========[ Log Closed ]==========')

	with pytest.raises(IOError):
		logger.info('late')


def test_install_and_uninstall():
	logger = Logger(io.StringIO())
	previous = Logger.install(logger)

	try:
		assert Logger.installed() is logger
	finally:
		assert Logger.uninstall() is logger

		if previous is not None:
			Logger.install(previous)


def test_matrix_reports_to_installed_logger(log_stream):
	a = Matrix(2, 3, 0)
	a.transpose()

	with pytest.raises(OutOfRangeError):
		a.at(5, 0)

	with pytest.raises(ShapeMismatchError):
		a + Matrix(2, 0)

	text = log_stream.getvalue()
	assert '[ DEBUG ]: Allocated 2x3 matrix of \'int\'' in text
	assert '[ DEBUG ]: Transposed 2x3 matrix' in text
	assert '[ ERROR ]: Row index 5 out of range for 3x2 matrix' in text
	assert '[ ERROR ]: Cannot add 2x2 matrix and 3x2 matrix' in text


def test_closing_installed_logger_uninstalls_it():
	logger = Logger(io.StringIO())
	previous = Logger.install(logger)
	logger.close()
	assert Logger.installed() is None
	Matrix(1, 0)

	if previous is not None:
		Logger.install(previous)
