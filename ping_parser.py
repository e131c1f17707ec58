"""
Parser for the statistics block printed by the system ping utility.

Typical input (Darwin / FreeBSD):

    PING www.google.com (173.194.115.84): 56 data bytes
    64 bytes from 173.194.115.84: icmp_seq=0 ttl=54 time=52.172 ms
    64 bytes from 173.194.115.84: icmp_seq=1 ttl=54 time=34.843 ms

    --- www.google.com ping statistics ---
    2 packets transmitted, 2 packets received, 0.0% packet loss
    round-trip min/avg/max/stddev = 34.843/43.508/52.172/8.664 ms

iputils prints "rtt min/avg/max/mdev = ..." and BusyBox leaves out the
fourth (stddev) value; both are handled by the same rules.
"""
import re
from typing import Optional, Tuple

from errors import ParseError
from models import PingStats

TTL_RE = re.compile(r"ttl=(\d+)")


def _leading_int(token: str, line: str) -> int:
    head = token.strip().split(" ")[0]
    try:
        count = int(head)
    except ValueError:
        raise ParseError(f"invalid packet count {head!r} in {line.strip()!r}") from None
    if count < 0:
        raise ParseError(f"negative packet count {head!r} in {line.strip()!r}")
    return count


def parse_packet_stats(line: str) -> Tuple[int, int]:
    """'2 packets transmitted, 2 packets received, ...' -> (2, 2)"""
    stats = line.split(", ")
    if len(stats) < 2:
        raise ParseError(f"malformed packet statistics line: {line.strip()!r}")
    return _leading_int(stats[0], line), _leading_int(stats[1], line)


def parse_round_trip(line: str) -> Tuple[float, float, float, Optional[float]]:
    """'round-trip min/avg/max/stddev = 1/2/3/0.5 ms' -> (1.0, 2.0, 3.0, 0.5)"""
    tokens = line.split()
    if len(tokens) < 4:
        raise ParseError(f"malformed round-trip line: {line.strip()!r}")
    data = tokens[3].split("/")
    if len(data) < 3:
        raise ParseError(f"malformed round-trip line: {line.strip()!r}")
    try:
        values = [float(v) for v in data[:4]]
    except ValueError:
        raise ParseError(f"invalid round-trip value in {line.strip()!r}") from None
    stddev = values[3] if len(values) == 4 else None
    return values[0], values[1], values[2], stddev


def parse_ttl(line: str) -> Optional[int]:
    m = TTL_RE.search(line)
    return int(m.group(1)) if m else None


def parse_ping_output(out: str) -> PingStats:
    """
    Single pass over the output. The first line of each shape wins:
    the first reply carrying ttl=, the first transmitted/received summary
    and the first min/avg/max line. Raises ParseError on malformed numbers
    or when no summary line is found at all.
    """
    packets = None
    ttl = None
    rtt = (None, None, None, None)
    seen_rtt = False

    for line in out.splitlines():
        if ttl is None and "ttl=" in line:
            ttl = parse_ttl(line)
        elif "transmitted" in line and "received" in line:
            if packets is None:
                packets = parse_packet_stats(line)
        elif "min/avg/max" in line:
            if not seen_rtt:
                rtt = parse_round_trip(line)
                seen_rtt = True

    if packets is None:
        raise ParseError("Fatal error processing ping output")

    mn, avg, mx, stddev = rtt
    return PingStats(
        transmitted=packets[0],
        received=packets[1],
        ttl=ttl,
        min_ms=mn,
        avg_ms=avg,
        max_ms=mx,
        stddev_ms=stddev,
    )
