"""Unit tests for reading and writing JSON, JSON5 and YAML documents."""

import io
import json
from pathlib import Path

import pytest
import yaml

from rigidtf.errors import ParseError
from rigidtf.io.files import (
    FileFormat,
    dump,
    dumps,
    guess_format,
    load,
    loads,
)
from rigidtf.rotation.model import AxisAngle, Euler, Quaternion
from rigidtf.transform.model import Transform
from rigidtf.units.angle import AngleValue


class TestGuessFormat:
    """Tests for extension-based format guessing."""

    @pytest.mark.parametrize("path,expected", [
        ("rotation.json", FileFormat.JSON),
        ("rotation.yaml", FileFormat.YAML),
        ("rotation.yml", FileFormat.YAML),
        ("rotation.json5", FileFormat.JSON5),
        ("ROTATION.JSON", FileFormat.JSON),
        (Path("dir/tf.yaml"), FileFormat.YAML),
    ])
    def test_known_extensions(self, path, expected):
        """Known extensions map to their format."""
        assert guess_format(path) is expected

    @pytest.mark.parametrize("path", ["-", "rotation.txt", "rotation"])
    def test_unknown(self, path):
        """Stdio and unknown extensions give None."""
        assert guess_format(path) is None


class TestTextRoundTrip:
    """Tests for loads() and dumps()."""

    def test_json_pretty(self, quarter_turn_z: Transform):
        """Pretty JSON is indented and newline-terminated."""
        text = dumps(quarter_turn_z, FileFormat.JSON)

        assert text.endswith("\n")
        assert "\n  " in text
        assert json.loads(text)["t"] == [1.0, 0.0, 0.0]

    def test_json_compact(self, quarter_turn_z: Transform):
        """Compact JSON is a single line."""
        text = dumps(quarter_turn_z, "json", pretty=False)

        assert "\n" not in text

    def test_yaml_block_style(self):
        """YAML keeps key order and block style."""
        text = dumps(Euler.from_degrees("rpy", [1, 2, 3]), FileFormat.YAML)

        assert text.splitlines()[0] == "format: euler"
        assert yaml.safe_load(text) == {"format": "euler", "order": "rpy", "angles": ["1.0d", "2.0d", "3.0d"]}

    @pytest.mark.parametrize("fmt", list(FileFormat))
    def test_roundtrip(self, fmt, sample_rotations: dict):
        """dumps then loads gives back the same value."""
        for rotation in sample_rotations.values():
            for value in (rotation, Transform(rotation, (0.5, -1.0, 2.0))):
                assert loads(dumps(value, fmt), fmt) == value

    def test_invalid_json(self):
        """Broken JSON raises ParseError."""
        with pytest.raises(ParseError) as exc_info:
            loads("{format: euler", FileFormat.JSON)

        assert "json" in str(exc_info.value).lower()

    def test_invalid_yaml(self):
        """Broken YAML raises ParseError."""
        with pytest.raises(ParseError):
            loads("format: [euler", FileFormat.YAML)

    def test_json5_relaxed_syntax(self):
        """JSON5 accepts comments, unquoted keys and trailing commas."""
        text = """
        // quarter turn about Z
        {
            format: 'axis-angle',
            axis: [0, 0, 1,],
            angle: "90d",
        }
        """

        value = loads(text, FileFormat.JSON5)

        assert value == AxisAngle((0, 0, 1), AngleValue.from_degrees(90.0))

    def test_invalid_json5(self):
        """Broken JSON5 raises ParseError."""
        with pytest.raises(ParseError) as exc_info:
            loads("{format: euler", FileFormat.JSON5)

        assert "json5" in str(exc_info.value).lower()

    def test_yaml_flow_style_input(self):
        """JSON-like YAML flow mappings are accepted."""
        value = loads("{format: quaternion, ijkw: [0, 0, 0, 1]}", FileFormat.YAML)

        assert value == Quaternion.identity()


class TestFiles:
    """Tests for load() and dump() on paths and stdio."""

    def test_load_json_file(self, example_config_dir: Path):
        """Load a transform from a JSON file."""
        value = load(example_config_dir / "tf_euler.json")

        assert isinstance(value, Transform)
        assert value.translation == (1.0, -2.0, 0.3)

    def test_dump_and_load_yaml(self, tmp_path: Path, quarter_turn_z: Transform):
        """Write YAML guessed from the extension and read it back."""
        path = tmp_path / "out.yml"

        dump(quarter_turn_z, path)

        assert load(path) == quarter_turn_z

    def test_dump_and_load_json5(self, tmp_path: Path, quarter_turn_z: Transform):
        """Write JSON5 guessed from the extension and read it back."""
        path = tmp_path / "out.json5"

        dump(quarter_turn_z, path)

        assert load(path) == quarter_turn_z

    def test_explicit_format_overrides_extension(self, tmp_path: Path):
        """An explicit format is used regardless of the extension."""
        path = tmp_path / "rotation.txt"

        dump(Quaternion.identity(), path, fmt="yaml")

        assert load(path, FileFormat.YAML) == Quaternion.identity()

    def test_unknown_extension(self, tmp_path: Path):
        """Without a format or known extension, loading fails."""
        path = tmp_path / "rotation.txt"
        path.write_text("{}")

        with pytest.raises(ParseError) as exc_info:
            load(path)

        assert "file format" in str(exc_info.value).lower()

    def test_missing_file(self, tmp_path: Path):
        """Missing files raise OSError."""
        with pytest.raises(OSError):
            load(tmp_path / "missing.json")

    def test_stdin(self, monkeypatch):
        """'-' reads from stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO('{"format": "quaternion", "ijkw": [0, 0, 0, 1]}'))

        assert load("-", "json") == Quaternion.identity()

    def test_stdout(self, capsys):
        """'-' writes to stdout."""
        dump(Quaternion.identity(), "-", FileFormat.JSON, pretty=False)

        assert capsys.readouterr().out == '{"format": "quaternion", "ijkw": [0.0, 0.0, 0.0, 1.0]}'

    def test_stdio_needs_format(self):
        """Stdio has no extension to guess from."""
        with pytest.raises(ParseError):
            dump(Quaternion.identity(), "-")
