"""Unit tests for document kind detection."""

import pytest

from rigidtf.errors import UnrecognizedFormatError
from rigidtf.io.detect import DocumentKind, detect


class TestDetect:
    """Tests for detect()."""

    def test_rotation(self, example_documents: dict):
        """A 'format' key marks a bare rotation."""
        assert detect(example_documents["rot_euler"]) is DocumentKind.ROTATION

    def test_transform(self, example_documents: dict):
        """An 'r' key marks a transform."""
        assert detect(example_documents["tf_euler"]) is DocumentKind.TRANSFORM

    def test_transform_without_translation(self):
        """The translation is optional."""
        assert detect({"r": {"format": "quaternion", "ijkw": [0, 0, 0, 1]}}) is DocumentKind.TRANSFORM

    def test_transform_wins_over_format(self):
        """'r' is checked before 'format'."""
        assert detect({"r": {}, "format": "euler"}) is DocumentKind.TRANSFORM

    def test_values_not_inspected(self):
        """Only top-level keys matter."""
        assert detect({"format": "not-a-format"}) is DocumentKind.ROTATION

    def test_unrecognized_keys(self):
        """Documents with neither key are rejected with the keys found."""
        with pytest.raises(UnrecognizedFormatError) as exc_info:
            detect({"rotation": [0, 0, 0, 1], "t": [0, 0, 0]})

        message = str(exc_info.value)
        assert "'rotation'" in message
        assert "'t'" in message

    def test_empty_mapping(self):
        """An empty document is unrecognized."""
        with pytest.raises(UnrecognizedFormatError) as exc_info:
            detect({})

        assert "none" in str(exc_info.value).lower()

    @pytest.mark.parametrize("data", [None, [1, 2, 3], "format", 42])
    def test_non_mapping(self, data):
        """Only mappings can be documents."""
        with pytest.raises(UnrecognizedFormatError):
            detect(data)
