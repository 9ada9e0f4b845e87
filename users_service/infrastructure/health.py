import resource
import sys
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone

PROCESS_STARTED = time.monotonic()


def memory_usage() -> dict[str, int]:
    usage = resource.getrusage(resource.RUSAGE_SELF)
    # ru_maxrss: байты на macOS, килобайты на Linux
    max_rss = usage.ru_maxrss if sys.platform == "darwin" else usage.ru_maxrss * 1024
    return {"maxRss": max_rss, "allocatedBlocks": sys.getallocatedblocks()}


@dataclass(frozen=True)
class HealthReport:
    uptime: float
    timestamp: str
    memory_usage: dict[str, int] = field(default_factory=dict)
    status: str = "ok"


class HealthReporter:
    def __init__(self, started_at: float = PROCESS_STARTED, clock=time.monotonic):
        self._started_at = started_at
        self._clock = clock

    def report(self) -> HealthReport:
        return HealthReport(
            uptime=round(self._clock() - self._started_at, 3),
            timestamp=datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            memory_usage=memory_usage(),
        )
