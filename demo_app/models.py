"""Per-request view models handed to the templates."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

STATUS_OK = "OK"


@dataclass(frozen=True)
class TimeView:
    current_time: str

    def as_dict(self) -> Dict[str, Any]:
        return {"currentTime": self.current_time}


@dataclass(frozen=True)
class HealthReport:
    """Point-in-time snapshot of process and host metrics."""

    timestamp: str
    uptime_seconds: float
    hostname: str
    platform: str
    memory: Dict[str, int] = field(default_factory=dict)
    cpu_load: List[float] = field(default_factory=list)
    status: str = STATUS_OK

    def as_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "timestamp": self.timestamp,
            "uptime": self.uptime_seconds,
            "memory": dict(self.memory),
            "cpu": list(self.cpu_load),
            "hostname": self.hostname,
            "platform": self.platform,
        }
