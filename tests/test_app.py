import json

from click.testing import CliRunner

import app
from models import ProbeOutcome


def fake_gather(config, acc):
    out = []
    for url in config.urls:
        o = ProbeOutcome(url, 0, 1, 1, 0.0, 64, 1.0, 1.0, 1.0, 0.0)
        acc.add_fields("ping", o.fields(), o.tags())
        out.append(o)
    return out


def test_run_once(tmp_path, monkeypatch):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"urls": ["a.example", "b.example"]}), encoding="utf-8")
    csv_path = tmp_path / "out.csv"
    monkeypatch.setattr(app, "gather", fake_gather)

    result = CliRunner().invoke(app.cli, ["run", "--once", "--config", str(config), "--csv", str(csv_path)])

    assert result.exit_code == 0, result.output
    lines = [l for l in result.output.splitlines() if l.startswith("ping,")]
    assert len(lines) == 2
    assert lines[0].startswith("ping,url=a.example result_code=0i,")
    assert csv_path.exists()


def test_run_rejects_bad_count(tmp_path):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"count": 0}), encoding="utf-8")
    result = CliRunner().invoke(app.cli, ["run", "--once", "--config", str(config)])
    assert result.exit_code != 0
    assert "count" in result.output


def test_sample_config():
    result = CliRunner().invoke(app.cli, ["sample-config"])
    assert result.exit_code == 0
    assert json.loads(result.output)["binary"] == "ping"


def test_run_rejects_string_urls(tmp_path):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"urls": "example.org"}), encoding="utf-8")
    result = CliRunner().invoke(app.cli, ["run", "--once", "--config", str(config)])
    assert result.exit_code != 0
    assert "urls" in result.output


def test_run_rejects_zero_interval(tmp_path, monkeypatch):
    monkeypatch.setattr(app, "gather", fake_gather)
    result = CliRunner().invoke(app.cli, ["run", "--interval", "0", "--config", str(tmp_path / "none.json")])
    assert result.exit_code == 2
    assert "--interval" in result.output
