"""
Subdivide - nested rhythm notation to timed events.

A rhythm is written as nested groups in parentheses. Each group fills one
slot of the group around it and divides that slot evenly among its own
tokens and child groups. The result is a flat list of events, each with a
time on a unit timeline and the token that sounds there:

    ```python
    import subdivide

    subdivide.parse("(a b c d)")
    # [Event(time=0.0, data='a'), Event(time=0.25, data='b'),
    #  Event(time=0.5, data='c'), Event(time=0.75, data='d'),
    #  Event(time=1.0, data='$')]
    ```

The last event is always the terminator (data ``"$"``). Its time marks the
end of the timeline, so the length of the last real event is the difference
between the two.

Notation:

- **Tokens.** Letters, digits, ``_``, ``-`` and ``.``, not starting with a
  digit: ``kick``, ``c4``, ``hh_open``, ``-``.
- **Groups.** ``(a (b c) d)`` - ``b`` and ``c`` share the middle slot.
- **Ratios.** A leading ``p:q`` on a group: the group takes ``q`` slots of
  its parent and must hold ``p`` weighted tokens, where each child group
  weighs its own ``q``. ``(a (2 b c d) e)`` gives ``b c d`` two slots,
  ``(3:2 a b c)`` checks for three tokens. Fractions are allowed
  (``(3.5:1 a (1.5 b c) d)``), and ``0`` makes a group take no time at all.
- **Labels.** ``@beat (kick hat) (@beat @beat snare)`` defines a group once
  and reuses it by name.

Options:

- ``time_offset`` shifts every event time.
- ``time_span`` stretches the timeline so the terminator lands that far
  after the first event.
- ``require_wrapping=False`` accepts ``a b (c d)`` without outer parentheses.

Malformed notation raises a subclass of ``subdivide.NotationError`` whose
message names the offending text and its index.

Package-level exports: ``parse``, ``Event``, ``ParseOptions``, ``NotationError``,
``MalformedNotation``.
"""

import subdivide.config
import subdivide.errors
import subdivide.notation
import subdivide.renderer


parse = subdivide.notation.parse
Event = subdivide.renderer.Event
ParseOptions = subdivide.config.ParseOptions
NotationError = subdivide.errors.NotationError
MalformedNotation = subdivide.errors.MalformedNotation
