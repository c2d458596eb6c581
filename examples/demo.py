import logging

import subdivide
import subdivide.midi

logging.basicConfig(level=logging.INFO)

DRUM_MAP = {
	"kick": 36,
	"snare": 38,
	"hat": 42,
}

# Two bars: a straight bar, then a bar whose third beat is a triplet of hats.
# The labelled groups are defined once and reused by reference.
NOTATION = """
	@straight (kick hat snare hat)
	@triplet (kick hat (3:1 hat hat hat) snare)
	(@straight @triplet)
"""

events = subdivide.parse(NOTATION, time_span=8.0)

for event in events:
	print(f"{event.time:7.4f}  {event.data}")

# Eight beats of timeline, one unit per beat.
midi_file = subdivide.midi.events_to_midi_file(events, note_map=DRUM_MAP, beats=1.0, bpm=100)
midi_file.save("demo.mid")
