"""Linear rescaling of event times.

``scale_number()`` maps a value from one interval onto another by plain linear
interpolation, without clamping, so values outside the input interval land
proportionally outside the output interval.

``rescale_events()`` stretches a rendered timeline so the terminator lands
``time_span`` after the first event:

	events = subdivide.parse("(a b c d)")
	subdivide.scaling.rescale_events(events, 5.0)
	# a@0, b@1.25, c@2.5, d@3.75, $@5
"""

from __future__ import annotations

import dataclasses
import typing

if typing.TYPE_CHECKING:
	import subdivide.renderer


def scale_number (value: float, in_min: float, in_max: float, out_min: float, out_max: float) -> float:

	"""
	Map *value* from ``[in_min, in_max]`` onto ``[out_min, out_max]``.

	A zero-width input interval maps every value to *out_min*.
	"""

	if in_min == in_max:
		return out_min

	return out_min + (value - in_min) * (out_max - out_min) / (in_max - in_min)


def rescale_events (events: typing.List[subdivide.renderer.Event], time_span: float) -> typing.List[subdivide.renderer.Event]:

	"""
	Return the events remapped so the last one sits ``time_span`` after the first.

	The first event keeps its time. The input interval runs from the first
	event to the last (the terminator), so all relative proportions are kept.
	If that interval has no width the events are returned unchanged, as
	copies.

	Raises:
		ValueError: ``time_span`` is negative.
	"""

	if time_span < 0:
		raise ValueError(f"time_span must not be negative, got {time_span}")

	if not events:
		return []

	in_min = events[0].time
	in_max = events[-1].time

	if in_min == in_max:
		return [dataclasses.replace(event) for event in events]

	out_max = in_min + time_span

	return [
		dataclasses.replace(event, time=scale_number(event.time, in_min, in_max, in_min, out_max))
		for event in events
	]
