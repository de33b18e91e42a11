"""Pytest fixtures for rotation and transform tests."""

import json
from pathlib import Path

import numpy as np
import pytest

from rigidtf.rotation.model import (
    AxisAngle,
    Euler,
    Quaternion,
    Rodrigues,
    RotationMatrix,
)
from rigidtf.transform.model import Transform
from rigidtf.units.angle import AngleValue


@pytest.fixture
def sample_quaternion() -> np.ndarray:
    """90-degree rotation around Z-axis as [i, j, k, w]."""
    angle = np.pi / 2
    return np.array([
        0,                   # i
        0,                   # j
        np.sin(angle / 2),   # k
        np.cos(angle / 2),   # w
    ])


@pytest.fixture
def sample_matrix() -> np.ndarray:
    """Rotation matrix for 90 degrees around Z: x -> y, y -> -x."""
    return np.array([
        [0, -1, 0],
        [1, 0, 0],
        [0, 0, 1],
    ], dtype=np.float64)


@pytest.fixture
def quarter_turn_z() -> Transform:
    """90-degree rotation around Z followed by a unit step along X."""
    return Transform(
        AxisAngle((0.0, 0.0, 1.0), AngleValue.from_degrees(90.0)),
        (1.0, 0.0, 0.0),
    )


@pytest.fixture
def sample_rotations() -> dict:
    """One valid rotation of every variant, keyed by format tag."""
    return {
        "euler": Euler.from_degrees("rpy", [10.0, -5.0, 3.0]),
        "quaternion": Quaternion(0.1, -0.2, 0.3, np.sqrt(1 - 0.14)),
        "axis-angle": AxisAngle((0.6, -0.8, 0.0), AngleValue.from_degrees(45.0)),
        "rodrigues": Rodrigues((0.2, -0.4, 0.9)),
        "rotation-matrix": RotationMatrix(((0.0, 1.0, 0.0), (0.0, 0.0, 1.0), (1.0, 0.0, 0.0))),
    }


@pytest.fixture
def example_documents() -> dict:
    """Serialized example documents, keyed by file stem."""
    return {
        "rot_euler": {
            "format": "euler",
            "order": "rpy",
            "angles": ["10d", "-5deg", "3d"],
        },
        "rot_axis_angle": {
            "format": "axis-angle",
            "axis": [0.6, -0.8, 0.0],
            "angle": "45d",
        },
        "rot_quaternion": {
            "format": "quaternion",
            "ijkw": [0.0, 0.0, 0.0, 1.0],
        },
        "rot_matrix": {
            "format": "rotation-matrix",
            "matrix": [[0.0, 1.0, 0.0], [0.0, 0.0, 1.0], [1.0, 0.0, 0.0]],
        },
        "rot_rodrigues": {
            "format": "rodrigues",
            "params": [0.0, 0.0, 1.5707963267948966],
        },
        "tf_euler": {
            "r": {
                "format": "euler",
                "order": "ypr",
                "angles": ["-3.14r", "27d", "-30rad"],
            },
            "t": [1.0, -2.0, 0.3],
        },
    }


@pytest.fixture
def example_config_dir(tmp_path: Path, example_documents: dict) -> Path:
    """Directory holding every example document as a JSON file."""
    for stem, document in example_documents.items():
        (tmp_path / f"{stem}.json").write_text(json.dumps(document))
    return tmp_path


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow-running"
    )
