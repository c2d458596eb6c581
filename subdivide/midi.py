"""Conversion of rendered events to MIDI messages.

Rendered times live on a unit timeline; ``beats`` says how many beats that
unit lasts (4.0 by default, one bar of 4/4). Each event plays until the next
one starts, and the terminator closes the last note:

	events = subdivide.parse("(kick (2 hat hat hat) snare)")
	midi_file = subdivide.midi.events_to_midi_file(
		events,
		note_map = {"kick": 36, "hat": 42, "snare": 38},
		bpm = 120
	)
	midi_file.save("groove.mid")

Data tokens resolve through ``note_map`` first. A token of the form ``n60``
(the letter ``n`` and a MIDI note number) is accepted without a map, since
data tokens cannot start with a digit.

Nothing here writes files or opens ports; the caller decides what to do with
the returned ``mido`` objects.
"""

import logging
import re
import typing

import mido

import subdivide.constants
import subdivide.renderer


logger = logging.getLogger(__name__)


DEFAULT_TICKS_PER_BEAT = 480
DEFAULT_VELOCITY = 100

NOTE_NUMBER_PATTERN = re.compile(r"n([0-9]+)")


def resolve_note (data: str, note_map: typing.Optional[typing.Dict[str, int]] = None) -> int:

	"""
	Resolve a data token to a MIDI note number.
	"""

	if note_map is not None and data in note_map:
		note = note_map[data]

	else:
		match = NOTE_NUMBER_PATTERN.fullmatch(data)

		if match is None:
			raise ValueError(f"Unknown note name '{data}' - not found in note_map")

		note = int(match.group(1))

	if not 0 <= note <= 127:
		raise ValueError(f"Note '{data}' resolves to {note}, outside the MIDI range 0-127")

	return note


def events_to_track (
	events: typing.List[subdivide.renderer.Event],
	note_map: typing.Optional[typing.Dict[str, int]] = None,
	beats: float = 4.0,
	ticks_per_beat: int = DEFAULT_TICKS_PER_BEAT,
	velocity: int = DEFAULT_VELOCITY,
	channel: int = 0
) -> mido.MidiTrack:

	"""
	Convert rendered events into a track of note on/off messages.

	Parameters:
		events: Events as returned by ``subdivide.parse()``, terminator last.
		note_map: Optional mapping of data tokens to MIDI note numbers.
		beats: Length of the unit timeline in beats (default 4.0).
		ticks_per_beat: MIDI resolution (default 480).
		velocity: Note-on velocity (default 100).
		channel: MIDI channel, 0-15 (default 0).

	Returns:
		A ``mido.MidiTrack`` whose message times are delta ticks.

	Raises:
		ValueError: The events do not end with the terminator, a token has no
			note, or an event falls before time zero.
	"""

	if not events or events[-1].data != subdivide.constants.EVENTS_TERMINATOR:
		raise ValueError("Events must end with the terminator event")

	if beats <= 0:
		raise ValueError("beats must be positive")

	def to_ticks (time: float) -> int:
		return int(round(time * beats * ticks_per_beat))

	# (tick, order, message): note_off sorts before note_on at the same tick.
	timed: typing.List[typing.Tuple[int, int, mido.Message]] = []

	for event, next_event in zip(events, events[1:]):

		start = to_ticks(event.time)
		end = to_ticks(next_event.time)

		if start < 0:
			raise ValueError(f"Event '{event.data}' at time {event.time} falls before time zero")

		if end <= start:
			logger.debug(f"Skipping zero-length event '{event.data}' at time {event.time}")
			continue

		note = resolve_note(event.data, note_map)

		timed.append((start, 1, mido.Message('note_on', channel=channel, note=note, velocity=velocity)))
		timed.append((end, 0, mido.Message('note_off', channel=channel, note=note, velocity=0)))

	timed.sort(key=lambda x: (x[0], x[1]))

	track = mido.MidiTrack()
	last_tick = 0

	for tick, _, message in timed:
		message.time = tick - last_tick
		track.append(message)
		last_tick = tick

	return track


def events_to_midi_file (
	events: typing.List[subdivide.renderer.Event],
	bpm: float = 120,
	ticks_per_beat: int = DEFAULT_TICKS_PER_BEAT,
	**kwargs: typing.Any
) -> mido.MidiFile:

	"""
	Build a one-track MIDI file holding the events and a tempo message.

	Extra keyword arguments are passed to ``events_to_track()``.
	"""

	midi_file = mido.MidiFile(type=1, ticks_per_beat=ticks_per_beat)

	track = events_to_track(events, ticks_per_beat=ticks_per_beat, **kwargs)
	track.insert(0, mido.MetaMessage('set_tempo', tempo=mido.bpm2tempo(bpm), time=0))

	midi_file.tracks.append(track)

	return midi_file
