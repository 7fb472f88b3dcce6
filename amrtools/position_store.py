"""Persisting the robot's last known pose to a YAML storage file."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from typing import Any

import yaml

DEFAULT_FRAME = "map"
COVARIANCE_SIZE = 36
LAST_POSITION_KEY = "last_position"


@dataclass
class StoredPosition:
    """A pose with covariance, as received from the localizer."""

    frame_id: str = DEFAULT_FRAME
    stamp: float = 0.0
    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    orientation: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    covariance: tuple[float, ...] = field(
        default_factory=lambda: (0.0,) * COVARIANCE_SIZE
    )

    def __post_init__(self) -> None:
        self.position = tuple(float(v) for v in self.position)
        self.orientation = tuple(float(v) for v in self.orientation)
        self.covariance = tuple(float(v) for v in self.covariance)
        if len(self.position) != 3:
            raise ValueError("position needs 3 values")
        if len(self.orientation) != 4:
            raise ValueError("orientation needs 4 values")
        if len(self.covariance) != COVARIANCE_SIZE:
            raise ValueError(f"covariance needs {COVARIANCE_SIZE} values")


def position_to_node(position: StoredPosition) -> dict[str, Any]:
    """The YAML mapping stored under ``last_position`` for a pose."""
    px, py, pz = position.position
    ox, oy, oz, ow = position.orientation
    return {
        "pos": {"x": px, "y": py, "z": pz},
        "ori": {"x": ox, "y": oy, "z": oz, "w": ow},
        "covariance": list(position.covariance),
    }


def store_position(path: str | PathLike[str], position: StoredPosition) -> dict[str, Any]:
    """Write the pose into an existing storage file, keeping its other keys.

    Returns the document as written. The file must already exist.
    """
    with open(path, encoding="utf-8") as handle:
        document = yaml.safe_load(handle)
    if document is None:
        document = {}
    if not isinstance(document, dict):
        raise ValueError("position storage file must hold a mapping")

    document[LAST_POSITION_KEY] = position_to_node(position)
    with open(path, "w", encoding="utf-8") as handle:
        yaml.safe_dump(document, handle, sort_keys=False)
    return document