"""Command-line entry point.

Usage:
    python -m subdivide NOTATION [--offset X] [--span Y] [--no-wrap]
                                 [--config PATH] [--json] [--verbose]

Options are read from the ``parse:`` section of the config file first
(``subdivide.yaml`` by default) and then overridden by any flags given.
Events are printed one per line as ``time<TAB>data``, or as a JSON list.
"""

import argparse
import json
import logging
import sys
import typing

import subdivide.config
import subdivide.errors
import subdivide.notation


logger = logging.getLogger(__name__)


def build_parser () -> argparse.ArgumentParser:

	"""
	Build the argument parser for the command line.
	"""

	parser = argparse.ArgumentParser(prog="subdivide", description="Render a nested rhythm notation into timed events.")

	parser.add_argument("notation", help="The notation, e.g. \"(a (2 b c d) e)\"")
	parser.add_argument("--offset", type=float, default=None, help="Add this to every event time")
	parser.add_argument("--span", type=float, default=None, help="Stretch the timeline to this length")
	parser.add_argument("--no-wrap", action="store_true", help="Accept a notation without outer parentheses")
	parser.add_argument("--config", default=subdivide.config.DEFAULT_CONFIG_PATH, help="YAML config file (default: %(default)s)")
	parser.add_argument("--json", action="store_true", help="Print the events as a JSON list")
	parser.add_argument("--verbose", action="store_true", help="Log debug output")

	return parser


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Parse the command line, render the notation and print the events.
	"""

	args = build_parser().parse_args(argv)

	logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

	try:
		options = subdivide.config.load_options(args.config)
	except ValueError as exc:
		logger.error(f"Invalid config: {exc}")
		return 1

	if args.offset is not None:
		options.time_offset = args.offset

	if args.span is not None:
		options.time_span = args.span

	if args.no_wrap:
		options.require_wrapping = False

	try:
		events = subdivide.notation.parse(args.notation, **options.as_kwargs())
	except (subdivide.errors.NotationError, ValueError) as exc:
		logger.error(str(exc))
		return 1

	if args.json:
		print(json.dumps([{"time": event.time, "data": event.data} for event in events]))
	else:
		for event in events:
			print(f"{event.time}\t{event.data}")

	return 0


if __name__ == "__main__":
	sys.exit(main())
