import pytest

from amrtools.diagnostics import (
    MASTER_KEY,
    MASTER_LABEL,
    NodeMonitor,
    NodeStatus,
    load_nodes_to_monitor,
)

NAMES = ["/amcl", "/move_base", "/map_server"]


@pytest.fixture
def monitor():
    return NodeMonitor(NAMES)


def test_status_text(monitor):
    assert monitor.statuses["/amcl"].value == "Unknown"
    assert monitor.update(None)[MASTER_KEY].value == "Inactive"
    assert monitor.update(list(NAMES))["/amcl"].value == "Active"


def test_load_nodes(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("nodes_to_monitor:\n  - /amcl\n  - /move_base\n", encoding="utf-8")
    assert load_nodes_to_monitor(path) == ["/amcl", "/move_base"]


def test_load_missing_key_raises(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("other: 1\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_nodes_to_monitor(path)


def test_load_nested_entry_raises(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("nodes_to_monitor:\n  - {a: 1}\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_nodes_to_monitor(path)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_nodes_to_monitor(tmp_path / "absent.yaml")


def test_initial_statuses_unknown(monitor):
    assert set(monitor.statuses) == {MASTER_KEY, *NAMES}
    assert all(s is NodeStatus.UNKNOWN for s in monitor.statuses.values())
    assert monitor.display_names[MASTER_KEY] == MASTER_LABEL


def test_empty_monitor_tracks_nothing():
    empty = NodeMonitor([])
    assert empty.statuses == {}
    assert empty.update(["/amcl"]) == {}


def test_filter_active_drops_unmonitored(monitor):
    nodes = ["/rosout", "/other", "/amcl", "/x", "/y", "/move_base"]
    assert monitor.filter_active(nodes) == ["/amcl", "/move_base"]


def test_find_inactive_all_running(monitor):
    assert monitor.find_inactive(list(NAMES)) == []


def test_find_inactive_keeps_order(monitor):
    assert monitor.find_inactive(["/move_base"]) == ["/amcl", "/map_server"]


def test_update_without_master(monitor):
    statuses = monitor.update(None)
    assert statuses[MASTER_KEY] is NodeStatus.INACTIVE
    assert all(statuses[n] is NodeStatus.UNKNOWN for n in NAMES)


def test_update_no_monitored_nodes_marks_master_inactive(monitor):
    statuses = monitor.update(["/rosout"])
    assert statuses[MASTER_KEY] is NodeStatus.INACTIVE


def test_update_all_active(monitor):
    statuses = monitor.update(["/rosout", *NAMES])
    assert all(s is NodeStatus.ACTIVE for s in statuses.values())


def test_update_partial(monitor):
    statuses = monitor.update(["/amcl"])
    assert statuses[MASTER_KEY] is NodeStatus.ACTIVE
    assert statuses["/move_base"] is NodeStatus.INACTIVE
    assert statuses["/map_server"] is NodeStatus.INACTIVE
    assert statuses["/amcl"] is NodeStatus.UNKNOWN


def test_update_recovers_to_active(monitor):
    monitor.update(["/amcl"])
    statuses = monitor.update(list(NAMES))
    assert all(statuses[n] is NodeStatus.ACTIVE for n in NAMES)


def test_update_returns_copy(monitor):
    statuses = monitor.update(None)
    statuses[MASTER_KEY] = NodeStatus.ACTIVE
    assert monitor.statuses[MASTER_KEY] is NodeStatus.INACTIVE