import json
import typing

import pytest

import subdivide.__main__


def test_prints_events (tmp_path, capsys: pytest.CaptureFixture):

	"""Events print as time and data, one per line."""

	code = subdivide.__main__.main(["(a b c d)", "--config", str(tmp_path / "absent.yaml")])

	assert code == 0
	assert capsys.readouterr().out.splitlines() == ["0.0\ta", "0.25\tb", "0.5\tc", "0.75\td", "1.0\t$"]


def test_json_output (tmp_path, capsys: pytest.CaptureFixture):

	"""--json prints a list of time/data objects."""

	code = subdivide.__main__.main(["(a b)", "--json", "--config", str(tmp_path / "absent.yaml")])

	assert code == 0
	assert json.loads(capsys.readouterr().out) == [
		{"time": 0.0, "data": "a"},
		{"time": 0.5, "data": "b"},
		{"time": 1.0, "data": "$"},
	]


def test_flags_override_config (write_config: typing.Callable[[str], str], capsys: pytest.CaptureFixture):

	"""Config values apply unless a flag replaces them."""

	path = write_config("parse:\n  time_offset: 10\n  time_span: 4\n")

	assert subdivide.__main__.main(["(a b)", "--config", path]) == 0
	assert capsys.readouterr().out.splitlines() == ["10.0\ta", "12.0\tb", "14.0\t$"]

	assert subdivide.__main__.main(["(a b)", "--config", path, "--offset", "0", "--span", "1"]) == 0
	assert capsys.readouterr().out.splitlines() == ["0.0\ta", "0.5\tb", "1.0\t$"]


def test_no_wrap (tmp_path, capsys: pytest.CaptureFixture):

	"""--no-wrap accepts a bare token list."""

	assert subdivide.__main__.main(["a b", "--no-wrap", "--config", str(tmp_path / "absent.yaml")]) == 0
	assert capsys.readouterr().out.splitlines() == ["0.0\ta", "0.5\tb", "1.0\t$"]


def test_notation_error_exit_status (tmp_path, capsys: pytest.CaptureFixture):

	"""Malformed notation exits with status 1 and prints no events."""

	assert subdivide.__main__.main(["(05 a b)", "--config", str(tmp_path / "absent.yaml")]) == 1
	assert capsys.readouterr().out == ""


def test_invalid_config_exit_status (write_config: typing.Callable[[str], str], capsys: pytest.CaptureFixture):

	"""A broken config exits with status 1."""

	assert subdivide.__main__.main(["(a)", "--config", write_config("parse:\n  nope: 1\n")]) == 1
	assert capsys.readouterr().out == ""
