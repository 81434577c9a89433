"""
Metrics - duration recording for image operations
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from threading import RLock
from typing import Any, Dict, Iterator, List, Optional

from core.constants import MetricsConstants
from core.enums import MetricKind
from core.utils.decorators import timer

logger = logging.getLogger(__name__)


@dataclass
class MetricUpdate:
    """Single metric observation"""

    name: str
    kind: MetricKind
    duration: float  # seconds
    scope: str = ""
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "kind": self.kind.value,
            "duration_ms": round(self.duration * 1000, 3),
            "scope": self.scope,
            "timestamp": self.timestamp.isoformat(),
        }


class MetricsRecorder(ABC):
    """Write-only sink for metric observations"""

    @abstractmethod
    def update(self, option: MetricUpdate) -> None:
        """Record a single observation"""


class NullMetrics(MetricsRecorder):
    """Recorder that discards everything"""

    def update(self, option: MetricUpdate) -> None:
        pass


def record_duration(recorder: MetricsRecorder, name: str, seconds: float, scope: str = "") -> None:
    """
    Send a duration to the recorder.

    Recorder failures are logged and never reach the caller.
    """
    option = MetricUpdate(name=name, kind=MetricKind.DURATION, duration=seconds, scope=scope)
    try:
        recorder.update(option)
    except Exception as e:
        logger.warning(f"Failed to record metric {name}: {e}")


@contextmanager
def track_duration(recorder: MetricsRecorder, name: str, scope: str = "") -> Iterator[None]:
    """
    Time a block and record it under `name` if the block succeeds.

    Example:
        >>> with track_duration(metrics, MetricNames.CROP, scope="api"):
        ...     data = processor.crop(data, 100, 100, CropPoint.CENTER)
    """
    with timer() as t:
        yield
    logger.debug(f"{name} [{scope or '-'}]: {t['seconds'] * 1000:.2f} ms")
    record_duration(recorder, name, t["seconds"], scope)


class MetricsBuffer(MetricsRecorder):
    """Circular buffer keeping the most recent metric observations"""

    def __init__(self, max_size: int = MetricsConstants.DEFAULT_BUFFER_SIZE):
        """
        Initialize Metrics Buffer

        Args:
            max_size: Maximum number of observations to keep
        """
        self.max_size = max_size
        self.buffer: deque = deque(maxlen=max_size)

        # Totals survive buffer eviction
        self.total_updates = 0

        # Thread safety (RLock allows reentrant locking)
        self.lock = RLock()

        logger.info(f"Metrics Buffer initialized with max size: {max_size}")

    def update(self, option: MetricUpdate) -> None:
        with self.lock:
            self.buffer.append(option)
            self.total_updates += 1

    def get_recent(
        self,
        limit: int = MetricsConstants.DEFAULT_RECENT_LIMIT,
        name: Optional[str] = None,
        scope: Optional[str] = None,
    ) -> List[MetricUpdate]:
        """
        Get recent observations

        Args:
            limit: Maximum number of records to return
            name: Filter by metric name
            scope: Filter by scope

        Returns:
            List of observations, newest first
        """
        with self.lock:
            records = list(self.buffer)

        if name:
            records = [r for r in records if r.name == name]
        if scope is not None:
            records = [r for r in records if r.scope == scope]

        records.reverse()
        return records[:limit]

    def get_statistics(self, scope: Optional[str] = None) -> Dict[str, Any]:
        """
        Aggregate buffered durations per metric name

        Args:
            scope: Only include observations with this scope

        Returns:
            Dict with per-name count and avg/min/max in milliseconds
        """
        with self.lock:
            records = list(self.buffer)
            total = self.total_updates
            usage = len(records)

        if scope is not None:
            records = [r for r in records if r.scope == scope]

        grouped: Dict[str, List[float]] = {}
        for record in records:
            grouped.setdefault(record.name, []).append(record.duration * 1000)

        metrics = {
            name: {
                "count": len(values),
                "avg_ms": round(sum(values) / len(values), 3),
                "min_ms": round(min(values), 3),
                "max_ms": round(max(values), 3),
            }
            for name, values in sorted(grouped.items())
        }

        return {
            "total_updates": total,
            "buffer_usage": len(records) if scope is not None else usage,
            "buffer_max": self.max_size,
            "metrics": metrics,
        }

    def clear(self):
        """Clear all observations"""
        with self.lock:
            self.buffer.clear()
            self.total_updates = 0

            logger.info("Metrics buffer cleared")

    def export_to_dict(self) -> Dict[str, Any]:
        """Export buffered observations to dictionary"""
        with self.lock:
            return {
                "updates": [r.to_dict() for r in self.buffer],
                "statistics": self.get_statistics(),
            }
