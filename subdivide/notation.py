import logging
import re
import typing

import subdivide.config
import subdivide.constants
import subdivide.delimiters
import subdivide.errors
import subdivide.labels
import subdivide.nodes
import subdivide.renderer
import subdivide.tokenizer


logger = logging.getLogger(__name__)


def clean_whitespace (notation: str) -> str:

	"""
	Collapse runs of whitespace into single spaces and strip both ends.
	"""

	return re.sub(r"\s+", " ", notation).strip()


def parse (notation: str, time_offset: float = 0.0, time_span: typing.Optional[float] = None, require_wrapping: bool = True) -> typing.List[subdivide.renderer.Event]:

	"""
	Parse a rhythm notation into a list of timed events.

	Groups in parentheses subdivide the slot they sit in. A group may start
	with a ratio ``p:q``: it takes ``q`` slots of its parent (default 1) and
	must hold ``p`` weighted tokens, where each child group counts as its own
	``q``. Either part may be fractional; ``q`` alone is also allowed.

	Parameters:
		notation: The notation to parse, e.g. ``"(a (2 b c d) e)"``.
		time_offset: Added to every event time (default 0).
		time_span: If set, the timeline is stretched so the terminator lands
			this far after the first event.
		require_wrapping: If True (the default), the notation must be one
			group wrapped in parentheses. If False, it is wrapped here.

	Returns:
		A list of `Event` objects in time order. The last is always the
		terminator, whose data is ``"$"`` and whose time marks the end of the
		timeline.

	Raises:
		NotationError: A subclass naming the first malformed part found.
		ValueError: ``time_span`` is negative.

	Example:
		```python
		parse("(a b c d)")
		# a@0.0, b@0.25, c@0.5, d@0.75, $@1.0

		parse("(4:2 a b c d)")
		# a@0.0, b@0.5, c@1.0, d@1.5, $@2.0
		```
	"""

	subdivide.config.ParseOptions(time_offset=time_offset, time_span=time_span, require_wrapping=require_wrapping).validate()

	notation = clean_whitespace(notation)

	if notation == "":
		raise subdivide.errors.EmptyNotation()

	if subdivide.constants.LABEL_PREFIX in notation:
		notation = subdivide.labels.expand_labels(notation, require_wrapping=require_wrapping)
		# Expansion always leaves a single wrapped group.
		require_wrapping = True

	notation = subdivide.delimiters.validate_delimiters(notation, require_wrapping=require_wrapping)

	nodes, deepest_depth = subdivide.nodes.extract_nodes(notation)
	subdivide.tokenizer.tokenize_nodes(nodes, deepest_depth)

	events = subdivide.renderer.render_events(nodes, time_offset=time_offset, time_span=time_span)

	logger.debug(f"Parsed {len(nodes)} groups into {len(events) - 1} events")

	return events
