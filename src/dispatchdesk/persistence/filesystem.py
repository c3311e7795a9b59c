"""File-based persistence for batching runs."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from ..config import settings
from ..services.outputs.routing_formatter import batch_run_to_csv, batch_run_to_json
from ..services.routing.models import BatchRun

SUMMARY_FILENAME = "summary.json"
ROUTES_FILENAME = "routes.csv"


class FileStorage:
    """Run directories under ``<data_root>/outputs`` holding batching artifacts."""

    def __init__(self, root: Path | None = None) -> None:
        self.root = (root or settings.data_root).resolve()
        self.output_root = self.root / "outputs"
        self.output_root.mkdir(parents=True, exist_ok=True)

    def make_run_directory(self, prefix: str = "routes") -> Path:
        # microseconds keep back-to-back runs in separate directories
        timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")
        path = self.output_root / f"{prefix}_{timestamp}"
        path.mkdir(parents=True, exist_ok=False)
        return path

    def write_run(self, run: BatchRun, *, prefix: str = "routes") -> Path:
        """Write one batching run as a JSON summary plus a per-stop CSV.

        Returns the new run directory.
        """
        run_dir = self.make_run_directory(prefix=prefix)
        self.write_json(run_dir / SUMMARY_FILENAME, batch_run_to_json(run))
        self.write_csv(run_dir / ROUTES_FILENAME, batch_run_to_csv(run))
        return run_dir

    def write_json(self, path: Path, data: Any, *, indent: int = 2) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as handle:
            json.dump(data, handle, ensure_ascii=False, indent=indent)

    def write_csv(self, path: Path, content: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(content)
