"""Label substitution.

A notation may define groups under a label and reuse them later by reference.
Label definitions sit at the top level, each label directly before the group
it names, and the last top-level group is the notation that gets parsed:

	@beat (kick hat) @fill (snare snare snare) (@beat @beat @fill)

expands to::

	((kick hat) (kick hat) (snare snare snare))

References are expanded in order, so a group may use any label defined before
it, including labels whose groups themselves hold references. A group cannot
refer to its own label.

When wrapping is not required, everything after the definitions is the body:

	@beat (kick hat) @beat snare

expands to ``((kick hat) snare)``.
"""

import dataclasses
import logging
import re
import typing

import subdivide.constants
import subdivide.delimiters
import subdivide.errors


logger = logging.getLogger(__name__)


@dataclasses.dataclass
class TopLevelItem:

	"""
	A label or a group found at the top level of a notation.
	"""

	kind: str			# 'label' or 'node'
	text: str
	start_index: int


def split_top_level (notation: str) -> typing.List[TopLevelItem]:

	"""
	Split a balanced notation into its top-level labels and groups.

	Groups are kept whole, delimiters included. Anything else between
	whitespace and groups is returned as a label candidate.
	"""

	items: typing.List[TopLevelItem] = []
	depth = 0
	token = ""
	token_start = 0

	def flush_label () -> None:
		nonlocal token
		if token:
			items.append(TopLevelItem(kind="label", text=token, start_index=token_start))
			token = ""

	for index, char in enumerate(notation):

		if char == subdivide.constants.NODE_START_DELIMITER:
			if depth == 0:
				flush_label()
				token_start = index
			depth += 1
			token += char

		elif char == subdivide.constants.NODE_END_DELIMITER:
			depth -= 1
			token += char
			if depth == 0:
				items.append(TopLevelItem(kind="node", text=token, start_index=token_start))
				token = ""

		elif depth == 0 and char.isspace():
			flush_label()

		else:
			if depth == 0 and not token:
				token_start = index
			token += char

	flush_label()

	return items


def _validate_definitions (items: typing.List[TopLevelItem]) -> None:

	"""
	Check that every top-level label is well formed, unique, and names a group.
	"""

	seen: typing.Set[str] = set()

	for position, item in enumerate(items):

		if item.kind != "label":
			continue

		if subdivide.constants.LABEL_PATTERN.fullmatch(item.text) is None:
			raise subdivide.errors.MalformedLabel(item.text, item.start_index)

		if position + 1 >= len(items) or items[position + 1].kind != "node":
			raise subdivide.errors.DanglingLabel(item.text, item.start_index)

		if item.text in seen:
			raise subdivide.errors.DuplicateLabel(item.text)

		seen.add(item.text)


def _wrap_body (notation: str, items: typing.List[TopLevelItem]) -> typing.List[TopLevelItem]:

	"""
	Gather everything after the leading label definitions into one wrapped group.

	Used when the notation does not have to be wrapped: the leading run of
	labels directly followed by a group are definitions, and the rest, bare
	tokens and groups alike, is the body.
	"""

	position = 0

	while (
		position + 1 < len(items)
		and items[position].kind == "label"
		and items[position].text.startswith(subdivide.constants.LABEL_PREFIX)
		and items[position + 1].kind == "node"
	):
		position += 2

	body_start = items[position].start_index if position < len(items) else len(notation)
	body = subdivide.constants.NODE_START_DELIMITER + notation[body_start:].strip() + subdivide.constants.NODE_END_DELIMITER

	return items[:position] + [TopLevelItem(kind="node", text=body, start_index=body_start)]


def expand_labels (notation: str, require_wrapping: bool = True) -> str:

	"""
	Replace label references with the groups they name.

	Parameters:
		notation: Whitespace-normalized notation, possibly holding label
			definitions before its final group.
		require_wrapping: If False, whatever follows the label definitions is
			the body and is wrapped in a group before references are expanded.

	Returns:
		The final top-level group with every reference expanded. A notation
		with no top-level items is returned unchanged.

	Raises:
		UnbalancedGroups: The notation's delimiters are not balanced, or an
			unlabelled group comes before the final group.
		MalformedLabel: A label or reference does not match ``@[a-z]+``.
		DanglingLabel: A label is not directly followed by a group.
		DuplicateLabel: A label is defined more than once.
		UndefinedLabel: A reference names no label defined before it.
	"""

	imbalance = subdivide.delimiters.find_imbalance(notation)

	if imbalance is not None:
		raise subdivide.errors.UnbalancedGroups(imbalance)

	items = split_top_level(notation)

	if not items:
		return notation

	if not require_wrapping:
		items = _wrap_body(notation, items)

	_validate_definitions(items)

	definitions: typing.Dict[str, str] = {}

	def substitute (match: re.Match) -> str:
		reference = match.group(0)
		if subdivide.constants.LABEL_PATTERN.fullmatch(reference) is None:
			raise subdivide.errors.MalformedLabel(reference)
		if reference not in definitions:
			raise subdivide.errors.UndefinedLabel(reference)
		return definitions[reference]

	expanded = ""

	for position, item in enumerate(items):

		if item.kind != "node":
			continue

		expanded = subdivide.constants.LABEL_REFERENCE_PATTERN.sub(substitute, item.text)

		if position > 0 and items[position - 1].kind == "label":
			definitions[items[position - 1].text] = expanded
			logger.debug(f"Label {items[position - 1].text} defined at index {item.start_index}")

		elif position < len(items) - 1:
			# Only the final group may go without a label.
			raise subdivide.errors.UnbalancedGroups(item.start_index)

	logger.debug(f"Expanded {len(definitions)} labels")

	return expanded
