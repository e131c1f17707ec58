
import logging
import threading
import time

import click

from export import format_line, plot_outcomes, write_csv
from logging_config import setup_logging
from models import Accumulator
from ping_worker import gather
from settings import Settings, sample_config

APP_NAME = "ZestyProbe"
APP_VERSION = "0.3.0"

logger = logging.getLogger(__name__)


def run_cycle(settings: Settings, acc: Accumulator, gather_fn=None):
    """One collection cycle: probe every url, then print what the accumulator got."""
    gather_fn = gather_fn or gather
    outcomes = gather_fn(settings.to_config(), acc)
    metrics, errors = acc.drain()
    for err in errors:
        click.echo(f"E! [inputs.ping] {err}", err=True)
    for m in metrics:
        click.echo(format_line(m))
    return outcomes


def run_loop(settings: Settings, stop_event: threading.Event, max_cycles=None, on_cycle=None, gather_fn=None):
    acc = Accumulator()
    outcomes = []
    cycles = 0
    next_tick = time.time()
    while not stop_event.is_set():
        outcomes = run_cycle(settings, acc, gather_fn)
        if on_cycle is not None:
            on_cycle(outcomes)
        cycles += 1
        if max_cycles is not None and cycles >= max_cycles:
            break
        next_tick += settings.collection_interval
        stop_event.wait(timeout=max(0, next_tick - time.time()))
    return outcomes


@click.group()
@click.version_option(APP_VERSION, prog_name=APP_NAME)
def cli():
    """Ping a set of hosts and report loss, TTL and round-trip statistics."""


@cli.command()
@click.option("--config", "config_path", type=click.Path(dir_okay=False), default=None,
              help="Settings JSON file (default: config.json or $ZESTYPROBE_CONFIG).")
@click.option("--once", is_flag=True, help="Run a single collection cycle and exit.")
@click.option("--interval", type=click.FloatRange(min=0, min_open=True), default=None,
              help="Seconds between cycles.")
@click.option("--csv", "csv_path", type=click.Path(dir_okay=False), default=None,
              help="Write the last cycle's outcomes to this CSV file.")
@click.option("--plot", "plot_path", type=click.Path(dir_okay=False), default=None,
              help="Save a latency chart of the last cycle to this PNG file.")
@click.option("--log-level", default="WARNING", show_default=True,
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False))
@click.option("--log-file", type=click.Path(dir_okay=False), default=None)
def run(config_path, once, interval, csv_path, plot_path, log_level, log_file):
    """Probe the configured urls, once or every collection interval."""
    setup_logging(log_level, log_file)
    try:
        settings = Settings.load(config_path)
        settings.to_config()
    except (TypeError, ValueError) as e:
        raise click.BadParameter(str(e), param_hint="config") from e
    if not settings.urls:
        raise click.UsageError("no urls configured")
    if interval is not None:
        settings.collection_interval = interval

    def export(outcomes):
        if csv_path:
            write_csv(outcomes, csv_path)
        if plot_path:
            plot_outcomes(outcomes, plot_path)

    stop_event = threading.Event()
    try:
        run_loop(settings, stop_event, max_cycles=1 if once else None, on_cycle=export)
    except KeyboardInterrupt:
        stop_event.set()
        logger.info("interrupted")


@cli.command("sample-config")
def sample_config_cmd():
    """Print a settings file with every option at its default."""
    click.echo(sample_config())


def main():
    cli()


if __name__ == "__main__":
    main()
