"""Named navigation goal points loaded from a YAML file."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Iterable

import yaml


class NavPointsError(ValueError):
    """The navigation points file holds no usable points."""


@dataclass(frozen=True)
class NavPoint:
    """A named goal in the map frame: position x, y and orientation w."""

    name: str
    x: float
    y: float
    w: float


def _parse_point(entry: object) -> NavPoint:
    if not isinstance(entry, dict):
        raise NavPointsError(f"navigation point must be a mapping, got {entry!r}")
    try:
        name = entry["point_name"]
        x, y, w = entry["c_x"], entry["c_y"], entry["c_w"]
    except KeyError as exc:
        raise NavPointsError(f"navigation point is missing {exc.args[0]!r}") from exc
    if name is None or isinstance(name, (dict, list)):
        raise NavPointsError(f"invalid point name {name!r}")
    try:
        return NavPoint(name=str(name), x=float(x), y=float(y), w=float(w))
    except (TypeError, ValueError) as exc:
        raise NavPointsError(f"invalid coordinate in point {name!r}") from exc


def load_nav_points(path: str | PathLike[str]) -> list[NavPoint]:
    """Read the ``nav_points`` list from a YAML file.

    Raises NavPointsError if the file holds no points.
    """
    with open(path, encoding="utf-8") as handle:
        document = yaml.safe_load(handle)

    entries = document.get("nav_points") if isinstance(document, dict) else None
    if entries is None:
        entries = []
    if not isinstance(entries, list):
        raise NavPointsError("'nav_points' must be a list")

    points = [_parse_point(entry) for entry in entries]
    if not points:
        raise NavPointsError(f"no navigation points found in {path}")
    return points


def find_nav_point(points: Iterable[NavPoint], name: str) -> NavPoint:
    """Return the first point with the given name.

    Raises ValueError for an empty name and KeyError if no point matches.
    """
    if not name:
        raise ValueError("empty point name")
    for point in points:
        if point.name == name:
            return point
    raise KeyError(f"can't find map point with name {name}")