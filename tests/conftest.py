import pytest
from fastapi.testclient import TestClient

from demo_app.api import create_app
from demo_app.models import HealthReport


class FakeMetricsProvider:
    def __init__(self, **overrides):
        self.fields = {
            "timestamp": "2024-05-01T12:00:00.000Z",
            "uptime_seconds": 42.5,
            "memory": {"rss": 50 * 1024 * 1024, "vms": 200 * 1024 * 1024},
            "cpu_load": [0.25, 0.5, 0.75],
            "hostname": "demo-host",
            "platform": "linux",
        }
        self.fields.update(overrides)
        self.calls = 0

    def collect_health_metrics(self) -> HealthReport:
        self.calls += 1
        return HealthReport(**self.fields)


@pytest.fixture
def fake_metrics():
    return FakeMetricsProvider()


@pytest.fixture
def client(fake_metrics):
    with TestClient(create_app(metrics=fake_metrics)) as test_client:
        yield test_client
