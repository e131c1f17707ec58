from decimal import Decimal
from typing import Dict, List, NamedTuple

from models import ProbeConfig

PAYLOAD_SIZE = 16


class Dialect(NamedTuple):
    timeout_flag: str
    timeout_scale: float   # multiplier from seconds to the flag's unit
    deadline_flag: str
    interface_flag: str


LINUX = Dialect(timeout_flag="-W", timeout_scale=1, deadline_flag="-w", interface_flag="-I")
DARWIN = Dialect(timeout_flag="-W", timeout_scale=1000, deadline_flag="-t", interface_flag="-I")
BSD = Dialect(timeout_flag="-W", timeout_scale=1000, deadline_flag="-t", interface_flag="-s")

DIALECTS: Dict[str, Dialect] = {
    "linux": LINUX,
    "darwin": DARWIN,
    "freebsd": BSD,
    "netbsd": BSD,
    "openbsd": BSD,
}


def dialect_for(os_family: str) -> Dialect:
    # anything we don't know gets GNU ping flags
    return DIALECTS.get((os_family or "").lower(), LINUX)


def format_number(value: float) -> str:
    """1.0 -> '1', 0.2 -> '0.2', 1e-05 -> '0.00001', the way ping expects its arguments."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if "e" in text:
        text = format(Decimal(text), "f")
    return text


def build_args(target: str, os_family: str, config: ProbeConfig) -> List[str]:
    """Arguments for one ping invocation against `target`, target last."""
    if config.arguments:
        return list(config.arguments) + [target]

    d = dialect_for(os_family)
    args = ["-c", str(config.count), "-n", "-s", str(PAYLOAD_SIZE)]
    if config.ping_interval > 0:
        args += ["-i", format_number(config.ping_interval)]
    if config.timeout > 0:
        args += [d.timeout_flag, format_number(config.timeout * d.timeout_scale)]
    if config.deadline > 0:
        args += [d.deadline_flag, str(config.deadline)]
    if config.interface:
        args += [d.interface_flag, config.interface]
    args.append(target)
    return args
