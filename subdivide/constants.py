"""Notation grammar constants.

This module defines the characters and regular expressions that make up the
rhythm notation grammar:
- `NODE_START_DELIMITER` / `NODE_END_DELIMITER` - open and close a group.
- `RATIO_NUMBERS_SEPARATOR` - splits a ratio into numerator and denominator (`3:2`).
- `EVENTS_TERMINATOR` - data of the final event; no data token can match it.
- `LABEL_PREFIX` - marks a label definition or reference (`@verse`).

The regular expressions are unanchored; callers anchor them with `re.fullmatch`.
"""

import re

# Delimiters

NODE_START_DELIMITER = "("
NODE_END_DELIMITER = ")"
NODE_DELIMITERS_NAME = "parentheses"

# Ratios and events

RATIO_NUMBERS_SEPARATOR = ":"
EVENTS_TERMINATOR = "$"

# Labels

LABEL_PREFIX = "@"

# Grammar

RATIO_TOKEN_PATTERN = re.compile(r"(0|[1-9][0-9]*)(\.[0-9]+)?(:(0|[1-9][0-9]*)(\.[0-9]+)?)?")
DATA_TOKEN_PATTERN = re.compile(r"[a-zA-Z_.\-][0-9a-zA-Z_.\-]*")
LABEL_PATTERN = re.compile(re.escape(LABEL_PREFIX) + r"[a-z]+")

# A label reference inside a group: the prefix after whitespace or an open delimiter.
LABEL_REFERENCE_PATTERN = re.compile(r"(?<=[\s(])" + re.escape(LABEL_PREFIX) + r"[^()\s]*")
