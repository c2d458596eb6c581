import typing

import subdivide.constants


def _format_number (value: float) -> str:

	"""
	Format a count or ratio value without a trailing ``.0``.
	"""

	return f"{value:g}"


class NotationError (Exception):

	"""
	Base class for every malformed-notation failure.
	"""

	pass


class EmptyNotation (NotationError):

	def __init__ (self) -> None:

		super().__init__("The notation is empty.")


class MalformedNotation (NotationError):

	"""
	The notation's delimiters do not form a single balanced group.
	"""

	pass


class UnwrappedNotation (MalformedNotation):

	def __init__ (self) -> None:

		super().__init__(f"The notation must be encapsulated by {subdivide.constants.NODE_DELIMITERS_NAME}.")


class UnbalancedGroups (MalformedNotation):

	def __init__ (self, index: typing.Optional[int] = None) -> None:

		self.index = index

		message = f"The notation's {subdivide.constants.NODE_DELIMITERS_NAME} are not balanced."

		if index is not None:
			message += f" Unexpected delimiter at index {index}."

		super().__init__(message)


class MalformedRatio (NotationError):

	def __init__ (self, ratio: str, index: int) -> None:

		self.ratio = ratio
		self.index = index

		super().__init__(f"The notation ratio '{ratio}' at index {index} is malformed.")


class InvalidDataToken (NotationError):

	def __init__ (self, token: str) -> None:

		self.token = token

		super().__init__(f"The notation data token '{token}' contains illegal characters.")


class RatioCountMismatch (NotationError):

	"""
	An explicit ratio numerator disagrees with the weighted token count of its group.
	"""

	def __init__ (self, index: int, expected: float, found: float) -> None:

		self.index = index
		self.expected = expected
		self.found = found

		super().__init__(
			f"The notation ratio numerator at index {index} checks for "
			f"{_format_number(expected)} data tokens, but {_format_number(found)} were found."
		)


# Label preprocessing


class MalformedLabel (NotationError):

	def __init__ (self, label: str, index: typing.Optional[int] = None) -> None:

		self.label = label
		self.index = index

		if index is None:
			super().__init__(f"The notation label '{label}' is malformed.")
		else:
			super().__init__(f"The notation label '{label}' at index {index} is malformed.")


class DanglingLabel (NotationError):

	def __init__ (self, label: str, index: int) -> None:

		self.label = label
		self.index = index

		super().__init__(f"The notation label '{label}' at index {index} must be followed by a node.")


class DuplicateLabel (NotationError):

	def __init__ (self, label: str) -> None:

		self.label = label

		super().__init__(f"The notation label '{label}' is defined multiple times.")


class UndefinedLabel (NotationError):

	def __init__ (self, label: str) -> None:

		self.label = label

		super().__init__(f"The notation label '{label}' is not defined.")
