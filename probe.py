import logging
from typing import Callable, List, Tuple

from errors import ExecutionError, ProbeError
from models import ProbeConfig, ProbeOutcome
from ping_command import build_args
from ping_parser import parse_ping_output
from utils import resolve_host, run_command

logger = logging.getLogger(__name__)

# ceiling used when the user supplies the raw argument list
ARGUMENTS_TIMEOUT = 60.0

Resolver = Callable[[str], None]
Runner = Callable[[str, List[str], float], Tuple[str, int]]


def total_timeout(config: ProbeConfig) -> float:
    """Longest time ping should need on its own pacing, in seconds."""
    if config.arguments:
        return ARGUMENTS_TIMEOUT
    return config.count * config.timeout + (config.count - 1) * config.ping_interval


def _execute(target: str, config: ProbeConfig, os_family: str, runner: Runner) -> str:
    args = build_args(target, os_family, config)
    try:
        out, status = runner(config.binary, args, total_timeout(config))
    except ExecutionError as e:
        raise ExecutionError(f"host {target}: {e}") from e

    # exit status 1 means ping ran but lost packets; keep the output
    if status in (0, 1):
        return out
    code = status if status > 0 else 2
    out = out.strip()
    if out:
        raise ExecutionError(f"host {target}: {out}, exit status {status}", result_code=code)
    raise ExecutionError(f"host {target}: exit status {status}", result_code=code)


def probe_target(target: str, config: ProbeConfig, os_family: str,
                 resolver: Resolver = resolve_host, runner: Runner = run_command) -> ProbeOutcome:
    """Resolve, ping and parse one target. Failures come back as outcomes, never raised."""
    try:
        resolver(target)
    except ProbeError as e:
        logger.warning("%s: name resolution failed: %s", target, e)
        return ProbeOutcome.failed(target, e.result_code, str(e))

    try:
        out = _execute(target, config, os_family, runner)
        outcome = ProbeOutcome.from_stats(target, parse_ping_output(out))
    except ExecutionError as e:
        logger.warning("%s", e)
        return ProbeOutcome.failed(target, e.result_code, str(e))
    except ProbeError as e:
        msg = f"{e}: {target}"
        logger.warning("%s", msg)
        return ProbeOutcome.failed(target, e.result_code, msg)

    logger.debug("%s: %s", target, outcome.fields())
    return outcome
