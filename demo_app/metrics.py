"""Helpers for collecting process and host health metrics."""
from __future__ import annotations

import datetime as dt
import logging
import socket
import sys
import time
from typing import Any, Dict, List, Optional, Protocol

import psutil

from .models import HealthReport

logger = logging.getLogger(__name__)


class SystemMetricsProvider(Protocol):
    def collect_health_metrics(self) -> HealthReport:
        ...


def _as_dict(stats_obj: Any) -> Dict[str, Any]:
    """Normalize psutil namedtuple output to plain dicts."""
    if hasattr(stats_obj, "_asdict"):
        return dict(stats_obj._asdict())
    return dict(stats_obj)


def utc_timestamp(now: Optional[dt.datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-01-01T12:00:00.000Z."""
    now = now or dt.datetime.now(dt.timezone.utc)
    return now.astimezone(dt.timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def process_uptime(process: Optional[psutil.Process] = None) -> float:
    """Seconds elapsed since the current process was started."""
    try:
        started = (process or psutil.Process()).create_time()
    except psutil.Error as exc:
        logger.warning("Process start time unavailable: %s", exc)
        return 0.0
    return max(0.0, time.time() - started)


def process_memory(process: Optional[psutil.Process] = None) -> Dict[str, int]:
    """Memory usage of the current process in bytes (rss, vms and platform extras)."""
    try:
        return {key: int(value) for key, value in _as_dict((process or psutil.Process()).memory_info()).items()}
    except psutil.Error as exc:
        logger.warning("Process memory info unavailable: %s", exc)
        return {}


def load_average() -> List[float]:
    """1, 5 and 15 minute load averages, or an empty list when the platform has none."""
    try:
        return [float(sample) for sample in psutil.getloadavg()]
    except (AttributeError, OSError) as exc:
        logger.debug("Load average unavailable: %s", exc)
        return []


class PsutilMetricsProvider:
    """Reads fresh metrics from psutil on every call."""

    def collect_health_metrics(self) -> HealthReport:
        # psutil.Process objects cache per-instance state, so each report gets its own.
        process = psutil.Process()
        return HealthReport(
            timestamp=utc_timestamp(),
            uptime_seconds=process_uptime(process),
            memory=process_memory(process),
            cpu_load=load_average(),
            hostname=socket.gethostname(),
            platform=sys.platform,
        )


def collect_health_metrics() -> HealthReport:
    """Gather uptime, memory, load average and host identity for the health page."""
    return PsutilMetricsProvider().collect_health_metrics()
