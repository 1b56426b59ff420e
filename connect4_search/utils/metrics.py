"""Metrics logging utilities."""

from collections import defaultdict
from typing import Any, Dict, List, Optional
import csv
import os
from datetime import datetime


class MetricsLogger:
    """Appends per-game metrics to a timestamped CSV file."""

    def __init__(self, log_dir: str = "data/logs", prefix: str = "match"):
        """
        Initialize metrics logger.

        Args:
            log_dir: Directory to save logs
            prefix: File name prefix for the CSV file
        """
        self.log_dir = log_dir
        os.makedirs(log_dir, exist_ok=True)

        self.metrics: Dict[str, List[Any]] = defaultdict(list)
        self.current_step = 0

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        self.csv_path = os.path.join(log_dir, f"{prefix}_{timestamp}.csv")
        self.csv_file = open(self.csv_path, "w", newline="")
        self.csv_writer: Optional[csv.DictWriter] = None
        self.csv_fieldnames: List[str] = ["step"]

    def log_dict(self, metrics_dict: Dict[str, Any], step: Optional[int] = None) -> None:
        """
        Log multiple metrics at once.

        The CSV header is fixed by the first call; later keys that were not in
        it are kept in memory only.

        Args:
            metrics_dict: Dictionary of metric names to values
            step: Step/game number (uses the internal counter if None)
        """
        if step is None:
            step = self.current_step

        if self.csv_writer is None:
            self.csv_fieldnames.extend(metrics_dict.keys())
            self.csv_writer = csv.DictWriter(
                self.csv_file, fieldnames=self.csv_fieldnames, extrasaction="ignore"
            )
            self.csv_writer.writeheader()

        row = {"step": step, **metrics_dict}
        self.csv_writer.writerow(row)
        self.csv_file.flush()

        for key, value in metrics_dict.items():
            self.metrics[key].append((step, value))
        self.current_step = step + 1

    def get_metric(self, key: str) -> List[Any]:
        """Logged ``(step, value)`` pairs for ``key``."""
        return list(self.metrics.get(key, []))

    def close(self) -> None:
        """Close the CSV file."""
        if not self.csv_file.closed:
            self.csv_file.close()

    def __enter__(self) -> "MetricsLogger":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
