import pytest

import subdivide.renderer
import subdivide.scaling


def test_scale_number ():

	"""Values map linearly between intervals, without clamping."""

	assert subdivide.scaling.scale_number(0.5, 0.0, 1.0, 0.0, 10.0) == pytest.approx(5.0)
	assert subdivide.scaling.scale_number(2.0, 1.0, 3.0, 10.0, 20.0) == pytest.approx(15.0)
	assert subdivide.scaling.scale_number(2.0, 0.0, 1.0, 0.0, 10.0) == pytest.approx(20.0)

	# Reversed output interval.
	assert subdivide.scaling.scale_number(0.25, 0.0, 1.0, 1.0, 0.0) == pytest.approx(0.75)


def test_scale_number_zero_width_input ():

	"""A zero-width input interval maps everything to the output minimum."""

	assert subdivide.scaling.scale_number(3.0, 1.0, 1.0, 5.0, 9.0) == 5.0


def test_rescale_events ():

	"""The first event stays put and the last lands at first + span."""

	events = [
		subdivide.renderer.Event(time=2.0, data="a"),
		subdivide.renderer.Event(time=2.5, data="b"),
		subdivide.renderer.Event(time=3.0, data="$"),
	]

	rescaled = subdivide.scaling.rescale_events(events, 4.0)

	assert [(event.time, event.data) for event in rescaled] == [(2.0, "a"), (4.0, "b"), (6.0, "$")]

	# The input is left untouched.
	assert events[1].time == 2.5


def test_rescale_zero_width_timeline ():

	"""A timeline whose first event is at the terminator's time is left as it is."""

	events = [subdivide.renderer.Event(time=1.0, data="$")]

	assert subdivide.scaling.rescale_events(events, 5.0) == events
	assert subdivide.scaling.rescale_events([], 5.0) == []


def test_rescale_to_zero_span ():

	"""A zero span collapses every event onto the first one's time."""

	events = [
		subdivide.renderer.Event(time=0.0, data="a"),
		subdivide.renderer.Event(time=1.0, data="$"),
	]

	assert [event.time for event in subdivide.scaling.rescale_events(events, 0.0)] == [0.0, 0.0]


def test_rescale_negative_span ():

	"""Negative spans are rejected."""

	with pytest.raises(ValueError):
		subdivide.scaling.rescale_events([subdivide.renderer.Event(time=0.0, data="$")], -1.0)
