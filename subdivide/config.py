import dataclasses
import logging
import os
import typing

import yaml


logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = "subdivide.yaml"


@dataclasses.dataclass
class ParseOptions:

	"""
	Options for one parse call.
	"""

	time_offset: float = 0.0
	time_span: typing.Optional[float] = None
	require_wrapping: bool = True


	def validate (self) -> None:

		"""
		Reject option values the renderer cannot honour.
		"""

		if self.time_span is not None and self.time_span < 0:
			raise ValueError(f"time_span must not be negative, got {self.time_span}")


	def as_kwargs (self) -> typing.Dict[str, typing.Any]:

		"""
		Return the options as keyword arguments for ``subdivide.parse()``.
		"""

		return dataclasses.asdict(self)


def options_from_dict (data: typing.Optional[typing.Dict[str, typing.Any]]) -> ParseOptions:

	"""
	Build parse options from a plain mapping, such as a YAML ``parse:`` section.
	"""

	if not data:
		return ParseOptions()

	if not isinstance(data, dict):
		raise ValueError(f"Parse options must be a mapping, got {data!r}")

	known = {field.name for field in dataclasses.fields(ParseOptions)}
	unknown = sorted(set(data) - known)

	if unknown:
		raise ValueError(f"Unknown parse options: {unknown}. Known options: {sorted(known)}")

	options = ParseOptions(**data)

	if not isinstance(options.time_offset, (int, float)) or isinstance(options.time_offset, bool):
		raise ValueError(f"time_offset must be a number, got {options.time_offset!r}")

	if options.time_span is not None and (not isinstance(options.time_span, (int, float)) or isinstance(options.time_span, bool)):
		raise ValueError(f"time_span must be a number or null, got {options.time_span!r}")

	if not isinstance(options.require_wrapping, bool):
		raise ValueError(f"require_wrapping must be true or false, got {options.require_wrapping!r}")

	options.validate()

	return options


def load_options (config_path: str = DEFAULT_CONFIG_PATH) -> ParseOptions:

	"""
	Load parse options from the ``parse:`` section of a YAML file.

	A missing file is not an error: a warning is logged and the defaults are
	returned.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return ParseOptions()

	with open(config_path, 'r') as f:
		config = yaml.safe_load(f) or {}

	if not isinstance(config, dict):
		raise ValueError(f"Config file {config_path} must hold a mapping")

	return options_from_dict(config.get('parse'))
