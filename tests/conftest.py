import io

import pytest

from DenseMatrix.Logger import Logger


@pytest.fixture
def log_stream():
	stream: io.StringIO = io.StringIO()
	previous = Logger.install(Logger(stream))
	yield stream
	Logger.uninstall()

	if previous is not None:
		Logger.install(previous)
