"""Node extraction.

A node is one parenthesized group of the notation. Extraction scans the
notation once and returns the nodes in document order (the order of their open
delimiters), each knowing its depth, the character range of its content and
its place in the group tree.

For ``(a (3:2 a (2 a a a)) a)``::

	index  depth  start  end  content                  parent  children
	0      0      1      21   a (3:2 a (2 a a a)) a    None    [1]
	1      1      4      18   3:2 a (2 a a a)          0       [2]
	2      2      11     17   2 a a a                  1       []

``end_index`` is inclusive. Tokenization fills in the chunk and ratio fields and
rendering fills in ``event_time_span``.
"""

import dataclasses
import logging
import typing

import subdivide.constants
import subdivide.errors


logger = logging.getLogger(__name__)


@dataclasses.dataclass
class Node:

	"""
	One group of the notation and its tokenized metadata.
	"""

	depth: int
	start_index: int
	end_index: typing.Optional[int] = None
	content: str = ""

	parent: typing.Optional[int] = None
	children: typing.List[int] = dataclasses.field(default_factory=list)

	data_chunks: typing.List[typing.List[str]] = dataclasses.field(default_factory=list)
	ratio: typing.Optional[str] = None
	ratio_numerator: typing.Optional[float] = None		# None means the count is unchecked
	ratio_denominator: float = 1.0
	num_data_tokens: float = 0.0

	event_time_span: float = 0.0


def extract_nodes (notation: str) -> typing.Tuple[typing.List[Node], int]:

	"""
	Find every group of a validated notation.

	Returns the nodes in document order and the deepest depth observed. A
	close delimiter always closes the most recently opened group that is still
	open, so sibling groups pair up correctly however deep their own children
	go.

	Raises:
		UnbalancedGroups: A close has no matching open, or a group is never closed.
		UnwrappedNotation: There is no group, or more than one top-level group.
	"""

	nodes: typing.List[Node] = []
	open_stack: typing.List[int] = []
	deepest_depth = -1

	for index, char in enumerate(notation):

		if char == subdivide.constants.NODE_START_DELIMITER:

			depth = len(open_stack)

			if depth == 0 and nodes:
				# A second top-level group: the notation is not one wrapped group.
				raise subdivide.errors.UnwrappedNotation()

			parent = open_stack[-1] if open_stack else None

			node = Node(depth=depth, start_index=index + 1, parent=parent)
			nodes.append(node)

			if parent is not None:
				nodes[parent].children.append(len(nodes) - 1)

			open_stack.append(len(nodes) - 1)
			deepest_depth = max(deepest_depth, depth)

		elif char == subdivide.constants.NODE_END_DELIMITER:

			if not open_stack:
				raise subdivide.errors.UnbalancedGroups(index)

			node = nodes[open_stack.pop()]
			node.end_index = index - 1
			node.content = notation[node.start_index:index]

	if open_stack:
		raise subdivide.errors.UnbalancedGroups(nodes[open_stack[0]].start_index - 1)

	if not nodes:
		raise subdivide.errors.UnwrappedNotation()

	logger.debug(f"Extracted {len(nodes)} nodes, deepest depth {deepest_depth}")

	return nodes, deepest_depth
