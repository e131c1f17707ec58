from dataclasses import dataclass, field
from queue import Queue, Empty
from typing import Dict, List, Optional, Tuple
import time

from errors import ParseError


@dataclass(frozen=True)
class ProbeConfig:
    """Read-only view of the settings for one collection cycle."""
    urls: Tuple[str, ...] = ()
    count: int = 1
    ping_interval: float = 1.0
    timeout: float = 1.0
    deadline: int = 10
    interface: str = ""
    binary: str = "ping"
    # when non-empty, every tuning field above is ignored
    arguments: Tuple[str, ...] = ()

    def __post_init__(self):
        if self.count < 1:
            raise ValueError(f"count must be at least 1, got {self.count}")


@dataclass(frozen=True)
class PingStats:
    transmitted: int
    received: int
    ttl: Optional[int] = None
    min_ms: Optional[float] = None
    avg_ms: Optional[float] = None
    max_ms: Optional[float] = None
    stddev_ms: Optional[float] = None

    def percent_packet_loss(self) -> float:
        if self.transmitted == 0:
            raise ParseError("ping summary reports 0 packets transmitted")
        return (self.transmitted - self.received) / self.transmitted * 100.0


# outcome attribute -> field name on the sink
FIELD_NAMES = (
    ("result_code", "result_code"),
    ("packets_transmitted", "packets_transmitted"),
    ("packets_received", "packets_received"),
    ("percent_packet_loss", "percent_packet_loss"),
    ("ttl", "ttl"),
    ("min_ms", "minimum_response_ms"),
    ("avg_ms", "average_response_ms"),
    ("max_ms", "maximum_response_ms"),
    ("stddev_ms", "standard_deviation_ms"),
)


@dataclass
class ProbeOutcome:
    target: str
    result_code: int = 0
    packets_transmitted: Optional[int] = None
    packets_received: Optional[int] = None
    percent_packet_loss: Optional[float] = None
    ttl: Optional[int] = None
    min_ms: Optional[float] = None
    avg_ms: Optional[float] = None
    max_ms: Optional[float] = None
    stddev_ms: Optional[float] = None
    error: Optional[str] = None

    @classmethod
    def from_stats(cls, target: str, stats: PingStats) -> "ProbeOutcome":
        return cls(
            target=target,
            result_code=0,
            packets_transmitted=stats.transmitted,
            packets_received=stats.received,
            percent_packet_loss=stats.percent_packet_loss(),
            ttl=stats.ttl,
            min_ms=stats.min_ms,
            avg_ms=stats.avg_ms,
            max_ms=stats.max_ms,
            stddev_ms=stats.stddev_ms,
        )

    @classmethod
    def failed(cls, target: str, result_code: int, error: str) -> "ProbeOutcome":
        return cls(target=target, result_code=result_code, error=error)

    @property
    def ok(self) -> bool:
        return self.result_code == 0

    def tags(self) -> Dict[str, str]:
        return {"url": self.target}

    def fields(self) -> Dict[str, object]:
        """Sink field set; values that were never observed are left out."""
        out = {}
        for attr, name in FIELD_NAMES:
            value = getattr(self, attr)
            if value is not None:
                out[name] = value
        return out


@dataclass
class Metric:
    measurement: str
    tags: Dict[str, str]
    fields: Dict[str, object]
    ts: float = field(default_factory=time.time)


class Accumulator:
    """
    Write-only sink shared by every probe worker of a cycle.
    Both channels are queues, so concurrent writers need no extra locking.
    """

    def __init__(self):
        self.metrics: "Queue[Metric]" = Queue()
        self.errors: "Queue[str]" = Queue()

    def add_fields(self, measurement: str, fields: Dict[str, object], tags: Dict[str, str]):
        self.metrics.put(Metric(measurement=measurement, tags=dict(tags), fields=dict(fields)))

    def add_error(self, err):
        self.errors.put(str(err))

    def drain(self) -> Tuple[List[Metric], List[str]]:
        """Take everything reported so far, leaving both channels empty."""
        return _drain(self.metrics), _drain(self.errors)


def _drain(q: Queue) -> list:
    out = []
    while True:
        try:
            out.append(q.get_nowait())
        except Empty:
            return out
