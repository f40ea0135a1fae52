import datetime as dt
import socket
import sys

import psutil

from demo_app import metrics
from demo_app.metrics import PsutilMetricsProvider, collect_health_metrics, utc_timestamp


def parse_iso(value: str) -> dt.datetime:
    return dt.datetime.fromisoformat(value.replace("Z", "+00:00"))


def test_report_fields_are_populated():
    report = collect_health_metrics()

    assert report.status == "OK"
    assert parse_iso(report.timestamp).tzinfo is not None
    assert report.uptime_seconds >= 0
    assert report.memory["rss"] > 0
    assert report.hostname == socket.gethostname()
    assert report.platform == sys.platform
    if hasattr(psutil, "getloadavg"):
        assert len(report.cpu_load) == 3
        assert all(isinstance(sample, float) for sample in report.cpu_load)


def test_timestamp_format_matches_iso_with_millis():
    moment = dt.datetime(2024, 1, 2, 3, 4, 5, 678901, tzinfo=dt.timezone.utc)
    assert utc_timestamp(moment) == "2024-01-02T03:04:05.678Z"


def test_load_average_sentinel_when_unsupported(monkeypatch):
    def unsupported():
        raise OSError("no load average here")

    monkeypatch.setattr(metrics.psutil, "getloadavg", unsupported, raising=False)
    assert metrics.load_average() == []
    assert PsutilMetricsProvider().collect_health_metrics().cpu_load == []


def test_memory_sentinel_when_process_unreadable():
    class BrokenProcess:
        def memory_info(self):
            raise psutil.AccessDenied()

        def create_time(self):
            raise psutil.AccessDenied()

    assert metrics.process_memory(BrokenProcess()) == {}
    assert metrics.process_uptime(BrokenProcess()) == 0.0


def test_each_call_returns_a_fresh_report():
    provider = PsutilMetricsProvider()
    first = provider.collect_health_metrics()
    second = provider.collect_health_metrics()
    assert first is not second
    assert second.uptime_seconds >= first.uptime_seconds
    assert first.as_dict()["cpu"] is not second.as_dict()["cpu"]
