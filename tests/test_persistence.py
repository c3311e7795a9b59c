import json
from pathlib import Path

from dispatchdesk.models.domain import BusinessLocation, Destination, Point
from dispatchdesk.persistence.filesystem import FileStorage
from dispatchdesk.services.routing.batcher import batch
from dispatchdesk.services.routing.models import BatchRun


def test_file_storage_creates_run_directory(tmp_path: Path) -> None:
    storage = FileStorage(root=tmp_path)
    run_dir = storage.make_run_directory(prefix="routes_test")

    assert run_dir.exists()
    assert run_dir.is_dir()
    assert run_dir.parent == tmp_path / "outputs"


def test_consecutive_run_directories_do_not_collide(tmp_path: Path) -> None:
    storage = FileStorage(root=tmp_path)

    first = storage.make_run_directory()
    second = storage.make_run_directory()

    assert first != second


def test_file_storage_writes_json_and_csv(tmp_path: Path) -> None:
    storage = FileStorage(root=tmp_path)
    run_dir = storage.make_run_directory(prefix="routes_test")

    summary_path = run_dir / "summary.json"
    routes_path = run_dir / "routes.csv"

    storage.write_json(summary_path, {"route_id": "route_1"})
    storage.write_csv(routes_path, "route_id,sequence\nroute_1,1\n")

    assert summary_path.read_text(encoding="utf-8") == '{\n  "route_id": "route_1"\n}'
    assert routes_path.read_text(encoding="utf-8") == "route_id,sequence\nroute_1,1\n"


def test_write_run_stores_summary_and_stop_rows(tmp_path: Path) -> None:
    origin = BusinessLocation(name="Square Bistro", address="123 Main Street", latitude=0.0, longitude=0.0)
    routes = batch(
        origin.point,
        [Destination("A", Point(0.0, 0.01), 12.5), Destination("B", Point(0.0, 0.02), 7.5)],
        origin_address=origin.address,
    )
    run = BatchRun(origin=origin, routes=routes, metadata={"source": "request"})

    run_dir = FileStorage(root=tmp_path).write_run(run)

    assert run_dir.parent == tmp_path / "outputs"
    assert run_dir.name.startswith("routes_")
    summary = json.loads((run_dir / "summary.json").read_text(encoding="utf-8"))
    assert summary["metadata"] == {"source": "request"}
    assert [stop["destination_id"] for stop in summary["routes"][0]["stops"]] == ["A", "B"]
    rows = (run_dir / "routes.csv").read_text(encoding="utf-8").splitlines()
    assert rows[0].startswith("route_id,sequence,destination_id")
    assert [row.split(",")[:3] for row in rows[1:]] == [["route_1", "1", "A"], ["route_1", "2", "B"]]
