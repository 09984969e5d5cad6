from __future__ import annotations

import datetime
import io
import typing

from . import Exceptions


class Logger:
	"""
	Class representing a log file writer
	A single logger may be installed process-wide; matrix operations report to it
	"""

	LEVELS: tuple[str, ...] = ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL')
	__INSTALLED__: typing.Optional[Logger] = None

	@classmethod
	def install(cls, logger: Logger) -> typing.Optional[Logger]:
		"""
		Installs the specified logger as the process-wide log writer
		:param logger: The logger to install
		:return: The previously installed logger or None
		:raises InvalidArgumentException: If 'logger' is not a Logger
		"""

		if not isinstance(logger, Logger):
			raise Exceptions.InvalidArgumentException(Logger.install, 'logger', type(logger), (Logger,))

		previous: typing.Optional[Logger] = Logger.__INSTALLED__
		Logger.__INSTALLED__ = logger
		return previous

	@classmethod
	def uninstall(cls) -> typing.Optional[Logger]:
		"""
		Removes the process-wide log writer
		The logger itself is left open
		:return: The previously installed logger or None
		"""

		previous: typing.Optional[Logger] = Logger.__INSTALLED__
		Logger.__INSTALLED__ = None
		return previous

	@classmethod
	def installed(cls) -> typing.Optional[Logger]:
		"""
		:return: The process-wide log writer or None
		"""

		return Logger.__INSTALLED__

	def __init__(self, stream: io.IOBase, level: str = 'DEBUG', timezone: datetime.timezone = datetime.timezone.utc):
		"""
		Class representing a log file writer
		- Constructor -
		:param stream: The stream to write results to
		:param level: The minimum level written, one of 'Logger.LEVELS'
		:param timezone: The timezone to log with
		:raises InvalidArgumentException: If any argument is of the wrong type
		:raises IOError: If the stream is closed or not writable
		"""

		if not isinstance(stream, io.IOBase):
			raise Exceptions.InvalidArgumentException(Logger.__init__, 'stream', type(stream), (io.IOBase,))
		elif not isinstance(timezone, datetime.timezone):
			raise Exceptions.InvalidArgumentException(Logger.__init__, 'timezone', type(timezone), (datetime.timezone,))

		if stream.closed:
			raise IOError('Stream is closed')
		elif not stream.writable():
			raise IOError('Target stream is not writable')

		self.__stream__: typing.Optional[io.IOBase] = stream
		self.__timezone__: datetime.timezone = timezone
		self.__level__: int = 0
		self.__state__: bool = True
		self.level = level
		self.__stream__.write('==========[ Log Opened ]==========\n\n')

	def __write__(self, level: str, msg: typing.Any) -> Logger:
		"""
		INTERNAL METHOD
		Writes a message to the log if the level passes the filter
		:param level: The message level
		:param msg: The message to write
		:return: This log writer instance
		:raises IOError: If log is closed
		"""

		if self.__state__ is False:
			raise IOError('Log is closed')
		elif Logger.LEVELS.index(level) >= self.__level__:
			self.__stream__.write(f'{datetime.datetime.now(self.__timezone__).strftime("%m/%d/%Y %H:%M:%S.%f")} [ {self.__timezone__} ] [ {level} ]: {str(msg).strip()}\n')

		return self

	def close(self) -> None:
		"""
		Closes the log writer
		Any further write is erroneous
		:raises IOError: If log is already closed
		"""

		if self.__state__ is False:
			raise IOError('Log is closed')

		self.__stream__.write('\n==========[ Log Closed ]==========')
		self.__state__ = False
		self.__stream__.flush()
		self.__stream__.close()
		self.__stream__ = None

		if Logger.__INSTALLED__ is self:
			Logger.__INSTALLED__ = None

	def detach(self) -> None:
		"""
		Detaches the log writer
		The underlying stream is not closed
		Any further write is erroneous
		:raises IOError: If log is already closed
		"""

		if self.__state__ is False:
			raise IOError('Log is closed')

		self.__stream__.write('\n==========[ Log Closed ]==========')
		self.__state__ = False
		self.__stream__ = None

		if Logger.__INSTALLED__ is self:
			Logger.__INSTALLED__ = None

	def debug(self, msg: typing.Any) -> Logger:
		"""
		Writes a message to the log on DEBUG level
		:param msg: The message to write
		:return: This log writer instance
		:raises IOError: If log is closed
		"""

		return self.__write__('DEBUG', msg)

	def info(self, msg: typing.Any) -> Logger:
		"""
		Writes a message to the log on INFO level
		:param msg: The message to write
		:return: This log writer instance
		:raises IOError: If log is closed
		"""

		return self.__write__('INFO', msg)

	def warn(self, msg: typing.Any) -> Logger:
		"""
		Writes a message to the log on WARN level
		:param msg: The message to write
		:return: This log writer instance
		:raises IOError: If log is closed
		"""

		return self.__write__('WARN', msg)

	def error(self, msg: typing.Any) -> Logger:
		"""
		Writes a message to the log on ERROR level
		:param msg: The message to write
		:return: This log writer instance
		:raises IOError: If log is closed
		"""

		return self.__write__('ERROR', msg)

	def critical(self, msg: typing.Any) -> Logger:
		"""
		Writes a message to the log on CRITICAL level
		:param msg: The message to write
		:return: This log writer instance
		:raises IOError: If log is closed
		"""

		return self.__write__('CRITICAL', msg)

	@property
	def closed(self) -> bool:
		"""
		:return: Whether this log writer is closed or detached
		"""

		return not self.__state__

	@property
	def level(self) -> str:
		"""
		:return: The minimum level written
		"""

		return Logger.LEVELS[self.__level__]

	@level.setter
	def level(self, level: str) -> None:
		"""
		Sets the minimum level written
		:param level: One of 'Logger.LEVELS' (case-insensitive)
		:raises InvalidArgumentException: If 'level' is not a string
		:raises ValueError: If 'level' is not a known level
		"""

		if not isinstance(level, str):
			raise Exceptions.InvalidArgumentException(Logger.level.fset, 'level', type(level), (str,))
		elif level.upper() not in Logger.LEVELS:
			raise ValueError(f'Unknown log level \'{level}\', expected one of {", ".join(Logger.LEVELS)}')

		self.__level__ = Logger.LEVELS.index(level.upper())


def emit(level: str, msg: typing.Any) -> None:
	"""
	Writes a message to the installed log writer, if any
	:param level: The message level, one of 'Logger.LEVELS' (case-insensitive)
	:param msg: The message to write
	"""

	logger: typing.Optional[Logger] = Logger.installed()

	if logger is not None and not logger.closed:
		logger.__write__(level.upper(), msg)
