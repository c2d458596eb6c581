import dataclasses
import logging
import typing

import subdivide.constants
import subdivide.nodes
import subdivide.scaling


logger = logging.getLogger(__name__)


@dataclasses.dataclass
class Event:

	"""
	A single timed event of the rendered timeline.
	"""

	time: float
	data: str


class TimelineRenderer:

	"""
	Walks tokenized nodes in document order and emits timed events.

	A time needle starts at zero and moves forward by one node's
	``event_time_span`` for every slot that node fills. Each node drains its
	first chunk, then renders its first child, then drains its second chunk,
	and so on, so the tokens written between two children are emitted
	between them.
	"""

	def __init__ (self, nodes: typing.List[subdivide.nodes.Node], time_offset: float = 0.0) -> None:

		"""
		Prepare a renderer over nodes that have already been tokenized.
		"""

		if not nodes:
			raise ValueError("Cannot render an empty node list")

		self.nodes = nodes
		self.time_offset = time_offset
		self.time_needle = 0.0
		self.events: typing.List[Event] = []


	def add_event (self, time: float, data: str) -> None:

		"""
		Append an event, shifted by the time offset.
		"""

		self.events.append(Event(time=time + self.time_offset, data=data))


	def set_event_time_span (self, index: int) -> None:

		"""
		Compute the span of one slot of a node from its parent's slot.
		"""

		node = self.nodes[index]

		if node.parent is None:
			parent_span = 1.0
		else:
			parent_span = self.nodes[node.parent].event_time_span

		# A group with nothing in it still fills one slot of its own size.
		num_data_tokens = node.num_data_tokens if node.num_data_tokens != 0 else 1

		node.event_time_span = parent_span * node.ratio_denominator / num_data_tokens


	def drain_chunk (self, index: int, position: int, silenced: bool = False) -> None:

		"""
		Emit the tokens of one data chunk of a node at the time needle.

		A silenced node, one with a zero denominator or inside such a group,
		still moves the needle but emits nothing.
		"""

		node = self.nodes[index]

		if node.num_data_tokens == 0:
			# Silent slot: counted once for the whole group, however many
			# zero-width children split it into chunks.
			if position == 0:
				self.time_needle += node.event_time_span
			return

		for data in node.data_chunks[position]:

			if not silenced and node.ratio_denominator > 0:
				self.add_event(self.time_needle, data)

			self.time_needle += node.event_time_span


	def render (self) -> typing.List[Event]:

		"""
		Render every node and append the terminator event.
		"""

		self.set_event_time_span(0)

		# Each entry is a node index, the position of its next chunk to drain
		# and whether a zero-denominator group encloses it.
		stack: typing.List[typing.Tuple[int, int, bool]] = [(0, 0, self.nodes[0].ratio_denominator == 0)]

		while stack:

			index, position, silenced = stack.pop()
			node = self.nodes[index]

			self.drain_chunk(index, position, silenced)

			if position < len(node.children):

				# Come back to this node for its next chunk once the child is done.
				stack.append((index, position + 1, silenced))

				child = node.children[position]
				self.set_event_time_span(child)
				stack.append((child, 0, silenced or self.nodes[child].ratio_denominator == 0))

		# The terminator marks where the last event ends.
		self.add_event(self.nodes[0].ratio_denominator, subdivide.constants.EVENTS_TERMINATOR)

		return self.events


def render_events (nodes: typing.List[subdivide.nodes.Node], time_offset: float = 0.0, time_span: typing.Optional[float] = None) -> typing.List[Event]:

	"""
	Render tokenized nodes into a flat, time-ordered list of events.

	Parameters:
		nodes: Tokenized nodes in document order, the root first.
		time_offset: Added to every event time, the terminator included.
		time_span: If set, the timeline is stretched so the terminator lands
			this far after the first event.

	Returns:
		The events, ending with the terminator event.
	"""

	events = TimelineRenderer(nodes, time_offset=time_offset).render()

	if time_span is not None:
		events = subdivide.scaling.rescale_events(events, time_span)

	logger.debug(f"Rendered {len(events)} events")

	return events
