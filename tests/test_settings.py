import json

import pytest

from models import ProbeConfig
from settings import DEFAULTS, Settings, sample_config


def test_defaults():
    s = Settings()
    assert s.urls == ["example.org"]
    assert (s.count, s.ping_interval, s.timeout, s.deadline) == (1, 1.0, 1.0, 10)
    assert s.binary == "ping"
    assert s.arguments == []


def test_missing_file_gives_defaults(tmp_path):
    s = Settings.load(str(tmp_path / "missing.json"))
    assert s.to_dict() == DEFAULTS


def test_invalid_json_gives_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert Settings.load(str(path)).to_dict() == DEFAULTS


def test_save_and_load(tmp_path):
    path = str(tmp_path / "config.json")
    Settings(urls=["a", "b"], count=3, timeout=0.5, interface="eth0").save(path)
    s = Settings.load(path)
    assert s.urls == ["a", "b"]
    assert s.count == 3
    assert s.timeout == 0.5
    assert s.interface == "eth0"
    assert s.deadline == 10


def test_to_config_is_frozen():
    config = Settings(urls=["a"], arguments=["-c", "2"]).to_config()
    assert config == ProbeConfig(urls=("a",), arguments=("-c", "2"))
    with pytest.raises(AttributeError):
        config.count = 5


def test_count_must_be_positive():
    with pytest.raises(ValueError):
        Settings(count=0).to_config()


def test_sample_config_loads_back(tmp_path):
    path = tmp_path / "sample.json"
    path.write_text(sample_config(), encoding="utf-8")
    assert Settings.load(str(path)).to_dict() == DEFAULTS
    assert "_urls" in json.loads(sample_config())


def test_urls_string_is_rejected():
    with pytest.raises(ValueError, match="urls"):
        Settings.from_dict({"urls": "example.org"})


def test_urls_string_in_file_is_rejected(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"urls": "example.org"}), encoding="utf-8")
    with pytest.raises(ValueError):
        Settings.load(str(path))


@pytest.mark.parametrize("interval", [0, -1.5])
def test_collection_interval_must_be_positive(interval):
    with pytest.raises(ValueError, match="collection_interval"):
        Settings(collection_interval=interval)
