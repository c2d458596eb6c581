import pathlib
import typing

import pytest


@pytest.fixture
def write_config (tmp_path: pathlib.Path) -> typing.Callable[[str], str]:

	"""Return a helper that writes YAML text to a temporary config file and returns its path."""

	def _write (text: str) -> str:

		path = tmp_path / "subdivide.yaml"
		path.write_text(text)
		return str(path)

	return _write
