import logging
import typing

import subdivide.constants
import subdivide.errors
import subdivide.nodes


logger = logging.getLogger(__name__)


def split_chunks (content: str) -> typing.List[typing.List[str]]:

	"""
	Split a node's content into data chunks around its direct children.

	Text inside child groups is skipped, so ``a (b (c) d) e`` gives
	``[["a"], ["e"]]``. A node with n direct children always has n + 1 chunks,
	some of which may be empty.
	"""

	chunks: typing.List[typing.List[str]] = []
	depth = 0
	data = ""

	for char in content:

		if char == subdivide.constants.NODE_START_DELIMITER:
			depth += 1
			if depth == 1:
				chunks.append(data.split())
				data = ""

		if depth == 0:
			data += char

		if char == subdivide.constants.NODE_END_DELIMITER:
			depth -= 1

	chunks.append(data.split())

	return chunks


def cut_ratio (node: subdivide.nodes.Node) -> None:

	"""
	Move a leading ratio token from the node's first chunk to ``node.ratio``.

	Only a first token starting with a digit is treated as a ratio, and it
	must then match the ratio grammar completely.
	"""

	node.ratio = None

	if not node.data_chunks or not node.data_chunks[0]:
		return

	token = node.data_chunks[0][0]

	if not token[0].isdigit():
		return

	if subdivide.constants.RATIO_TOKEN_PATTERN.fullmatch(token) is None:
		raise subdivide.errors.MalformedRatio(token, node.start_index)

	node.ratio = token
	node.data_chunks[0].pop(0)


def split_ratio (ratio: typing.Optional[str]) -> typing.Tuple[typing.Optional[float], float]:

	"""
	Separate a ratio into its numerator and denominator.

	``None`` gives ``(None, 1.0)``, ``"2"`` gives ``(None, 2.0)`` and
	``"3:2"`` gives ``(3.0, 2.0)``.
	"""

	if ratio is None:
		return None, 1.0

	numbers = ratio.split(subdivide.constants.RATIO_NUMBERS_SEPARATOR)

	if len(numbers) == 1:
		return None, float(numbers[0])

	return float(numbers[0]), float(numbers[1])


def count_data_tokens (nodes: typing.List[subdivide.nodes.Node], index: int) -> float:

	"""
	Validate a node's literal tokens and return its weighted token count.

	Each direct child counts as its ratio denominator: a child takes that many
	of the parent's slots, whatever it holds inside.
	"""

	node = nodes[index]
	count = 0.0

	for chunk in node.data_chunks:
		for token in chunk:
			if subdivide.constants.DATA_TOKEN_PATTERN.fullmatch(token) is None:
				raise subdivide.errors.InvalidDataToken(token)
			count += 1

	for child in node.children:
		count += nodes[child].ratio_denominator

	return count


def tokenize_node (nodes: typing.List[subdivide.nodes.Node], index: int) -> None:

	"""
	Fill in the chunk, ratio and count fields of one node.

	Every direct child must already be tokenized.
	"""

	node = nodes[index]

	node.data_chunks = split_chunks(node.content)
	cut_ratio(node)
	node.ratio_numerator, node.ratio_denominator = split_ratio(node.ratio)
	node.num_data_tokens = count_data_tokens(nodes, index)

	# The numerator is an optional check on the number of slots the group holds.
	if node.ratio_numerator is not None and node.ratio_numerator != node.num_data_tokens:
		raise subdivide.errors.RatioCountMismatch(node.start_index, node.ratio_numerator, node.num_data_tokens)


def tokenize_nodes (nodes: typing.List[subdivide.nodes.Node], deepest_depth: int) -> None:

	"""
	Tokenize all nodes from the deepest depth to the shallowest.

	Within a depth, nodes are handled in document order, so the first
	malformed group reported is always the same for a given notation.
	"""

	by_depth: typing.List[typing.List[int]] = [[] for _ in range(deepest_depth + 1)]

	for index, node in enumerate(nodes):
		by_depth[node.depth].append(index)

	for depth in range(deepest_depth, -1, -1):
		for index in by_depth[depth]:
			tokenize_node(nodes, index)

	logger.debug(f"Tokenized {len(nodes)} nodes")
