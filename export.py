import csv
from typing import List, Sequence

from matplotlib.figure import Figure

from models import FIELD_NAMES, Metric, ProbeOutcome

CSV_COLUMNS = ["url"] + [name for _, name in FIELD_NAMES]


def _escape_tag(value: str) -> str:
    return value.replace("\\", "\\\\").replace(",", "\\,").replace("=", "\\=").replace(" ", "\\ ")


def _format_value(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return f"{value}i"
    if isinstance(value, float):
        return repr(value)
    return '"' + str(value).replace('"', '\\"') + '"'


def format_line(metric: Metric) -> str:
    """InfluxDB line protocol, e.g. 'ping,url=example.org result_code=0i 1700000000000000000'."""
    tags = "".join(f",{_escape_tag(k)}={_escape_tag(v)}" for k, v in sorted(metric.tags.items()))
    fields = ",".join(f"{_escape_tag(k)}={_format_value(v)}" for k, v in metric.fields.items())
    return f"{_escape_tag(metric.measurement)}{tags} {fields} {int(metric.ts * 1e9)}"


def write_csv(outcomes: Sequence[ProbeOutcome], path: str):
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(CSV_COLUMNS)
        for o in outcomes:
            fields = o.fields()
            writer.writerow([o.target] + [fields.get(name, "") for name in CSV_COLUMNS[1:]])


def plot_outcomes(outcomes: Sequence[ProbeOutcome], path: str) -> Figure:
    """
    Bar chart of average latency per target with min/max whiskers.
    Targets that produced no latency get an empty slot labelled with their result code.
    """
    fig = Figure(figsize=(max(6, 1.2 * len(outcomes)), 4), dpi=100)
    ax = fig.add_subplot(111)
    ax.set_xlabel("Target")
    ax.set_ylabel("Latency (ms)")
    ax.grid(True, axis="y", alpha=0.3)

    xs: List[int] = list(range(len(outcomes)))
    avgs = [o.avg_ms if o.avg_ms is not None else 0.0 for o in outcomes]
    lower = [o.avg_ms - o.min_ms if o.avg_ms is not None and o.min_ms is not None else 0.0 for o in outcomes]
    upper = [o.max_ms - o.avg_ms if o.avg_ms is not None and o.max_ms is not None else 0.0 for o in outcomes]
    colors = ["tab:green" if o.ok and (o.percent_packet_loss or 0) == 0 else
              "tab:orange" if o.ok else "tab:red" for o in outcomes]
    if outcomes:
        ax.bar(xs, avgs, yerr=[lower, upper], capsize=4, color=colors)

    top = max([a + u for a, u in zip(avgs, upper)] + [1.0])
    for x, o in zip(xs, outcomes):
        if o.ok and o.avg_ms is not None:
            label = f"{o.percent_packet_loss:.0f}% loss"
        elif o.ok:
            label = "no reply"
        else:
            label = f"code {o.result_code}"
        ax.annotate(label, (x, top * 0.02), ha="center", va="bottom", fontsize=8, rotation=90)

    ax.set_xticks(xs)
    ax.set_xticklabels([o.target for o in outcomes], rotation=30, ha="right", fontsize=8)
    fig.tight_layout()
    fig.savefig(path)
    return fig
