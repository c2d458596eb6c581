import typing

import subdivide.constants
import subdivide.errors


def find_imbalance (text: str, start: str = subdivide.constants.NODE_START_DELIMITER, end: str = subdivide.constants.NODE_END_DELIMITER) -> typing.Optional[int]:

	"""
	Return the index of the first delimiter that breaks the nesting, or None.

	A close delimiter with no open to match is reported at its own index. An
	open delimiter left unclosed at the end of the text is reported at the
	index where it was opened.
	"""

	open_indices: typing.List[int] = []

	for index, char in enumerate(text):

		if char == start:
			open_indices.append(index)

		elif char == end:
			if not open_indices:
				return index
			open_indices.pop()

	if open_indices:
		return open_indices[0]

	return None


def is_balanced (text: str, start: str = subdivide.constants.NODE_START_DELIMITER, end: str = subdivide.constants.NODE_END_DELIMITER) -> bool:

	"""
	Check that every close delimiter matches a preceding unmatched open.
	"""

	return find_imbalance(text, start, end) is None


def validate_delimiters (notation: str, require_wrapping: bool = True) -> str:

	"""
	Validate group delimiters and return the notation ready for node extraction.

	Parameters:
		notation: Whitespace-normalized notation.
		require_wrapping: If True, the notation must open with the start
			delimiter and close with the end delimiter, and everything in
			between must be balanced. If False, the whole notation must be
			balanced and it is wrapped in one outer group here.

	Raises:
		UnwrappedNotation: The outer delimiters are missing.
		UnbalancedGroups: The nesting inside is inconsistent.
	"""

	start = subdivide.constants.NODE_START_DELIMITER
	end = subdivide.constants.NODE_END_DELIMITER

	if not require_wrapping:

		imbalance = find_imbalance(notation)

		if imbalance is not None:
			raise subdivide.errors.UnbalancedGroups(imbalance)

		return start + notation + end

	if len(notation) < 2 or notation[0] != start or notation[-1] != end:
		raise subdivide.errors.UnwrappedNotation()

	imbalance = find_imbalance(notation[1:-1])

	if imbalance is not None:
		# Report the position in the full notation, not in its interior.
		raise subdivide.errors.UnbalancedGroups(imbalance + 1)

	return notation
