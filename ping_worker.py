
import logging, threading, time
from typing import List, Optional
from models import Accumulator, ProbeConfig, ProbeOutcome
from probe import Resolver, Runner, probe_target
from utils import os_family as current_os_family, resolve_host, run_command

logger = logging.getLogger(__name__)

MEASUREMENT = "ping"


class ProbeWorker(threading.Thread):
    """Probes one target once and reports exactly one outcome to the accumulator."""

    def __init__(self, target: str, config: ProbeConfig, os_family: str, acc: Accumulator,
                 resolver: Resolver = resolve_host, runner: Runner = run_command):
        super().__init__(daemon=True, name=f"probe-{target}")
        self.target=target; self.config=config; self.os_family=os_family; self.acc=acc
        self.resolver=resolver; self.runner=runner; self.outcome: Optional[ProbeOutcome] = None

    def run(self):
        try:
            outcome = probe_target(self.target, self.config, self.os_family, self.resolver, self.runner)
        except Exception as e:
            logger.exception("probe of %s crashed", self.target)
            outcome = ProbeOutcome.failed(self.target, 2, f"host {self.target}: {e}")
        if outcome.error:
            self.acc.add_error(outcome.error)
        self.acc.add_fields(MEASUREMENT, outcome.fields(), outcome.tags())
        self.outcome = outcome


def gather(config: ProbeConfig, acc: Accumulator, os_family: Optional[str] = None,
           resolver: Resolver = resolve_host, runner: Runner = run_command) -> List[ProbeOutcome]:
    """
    Run one collection cycle: one worker per url, all started up front,
    then wait for every one of them. Outcomes come back in config order.
    """
    family = os_family or current_os_family()
    workers = [ProbeWorker(url, config, family, acc, resolver, runner) for url in config.urls]
    started = time.monotonic()
    logger.debug("probing %d target(s) as %s", len(workers), family)
    for w in workers:
        w.start()
    for w in workers:
        w.join()
    outcomes = [w.outcome for w in workers]
    failed = sum(1 for o in outcomes if not o.ok)
    logger.info("cycle done: %d target(s), %d failed, %.2fs", len(outcomes), failed, time.monotonic() - started)
    return outcomes
