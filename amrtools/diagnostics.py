"""Status tracking for a set of monitored nodes."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from os import PathLike
from typing import Iterable, Sequence

import yaml

MASTER_KEY = "master"
MASTER_LABEL = "ROS Master"
UPDATE_INTERVAL_S = 1.0


class NodeStatus(enum.Enum):
    """Status of a monitored node, valued by its display text."""

    UNKNOWN = "Unknown"
    INACTIVE = "Inactive"
    ACTIVE = "Active"


def load_nodes_to_monitor(path: str | PathLike[str]) -> list[str]:
    """Read the ``nodes_to_monitor`` list of node names from a YAML file."""
    with open(path, encoding="utf-8") as handle:
        document = yaml.safe_load(handle)

    names = document.get("nodes_to_monitor") if isinstance(document, dict) else None
    if not isinstance(names, list):
        raise ValueError("'nodes_to_monitor' must be a list of node names")
    for name in names:
        if name is None or isinstance(name, (dict, list)):
            raise ValueError(f"invalid node name {name!r}")
    return [str(name) for name in names]


@dataclass
class NodeMonitor:
    """Tracks the master and each monitored node as unknown, inactive or active."""

    node_names: list[str]
    statuses: dict[str, NodeStatus] = field(default_factory=dict, init=False)
    display_names: dict[str, str] = field(default_factory=dict, init=False)

    def __post_init__(self) -> None:
        self.node_names = list(self.node_names)
        if not self.node_names:
            return
        self.display_names[MASTER_KEY] = MASTER_LABEL
        self.statuses[MASTER_KEY] = NodeStatus.UNKNOWN
        for name in self.node_names:
            self.display_names[name] = name
            self.statuses[name] = NodeStatus.UNKNOWN

    def filter_active(self, nodes: Iterable[str]) -> list[str]:
        """Keep only the monitored names among the master's running nodes."""
        monitored = set(self.node_names)
        return [node for node in nodes if node in monitored]

    def find_inactive(self, active_nodes: Sequence[str]) -> list[str]:
        """Monitored nodes missing from ``active_nodes``, in monitoring order."""
        if len(active_nodes) == len(set(self.node_names)):
            return []
        active = set(active_nodes)
        return [name for name in self.node_names if name not in active]

    def update(self, active_nodes: Iterable[str] | None) -> dict[str, NodeStatus]:
        """Refresh statuses from the master's node list; None means no master.

        Returns a copy of the statuses.
        """
        if not self.statuses:
            return {}

        active = self.filter_active(active_nodes) if active_nodes is not None else []
        if not active:
            self.statuses[MASTER_KEY] = NodeStatus.INACTIVE
            return dict(self.statuses)

        self.statuses[MASTER_KEY] = NodeStatus.ACTIVE

        inactive = self.find_inactive(active)
        if not inactive:
            for name in self.node_names:
                self.statuses[name] = NodeStatus.ACTIVE
        else:
            for name in inactive:
                self.statuses[name] = NodeStatus.INACTIVE
        return dict(self.statuses)