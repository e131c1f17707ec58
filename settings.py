import json, logging, os

from models import ProbeConfig

logger = logging.getLogger(__name__)

DEFAULTS = {
    "urls": ["example.org"],
    "count": 1,
    "ping_interval": 1.0,
    "timeout": 1.0,
    "deadline": 10,
    "interface": "",
    "binary": "ping",
    "arguments": [],
    "collection_interval": 10.0,
}

SAMPLE_NOTES = {
    "urls": "List of urls to ping",
    "count": "Number of pings to send per collection (ping -c <COUNT>)",
    "ping_interval": "Interval, in s, at which to ping. 0 == default (ping -i <PING_INTERVAL>)",
    "timeout": "Per-ping timeout, in s. 0 == no timeout (ping -W <TIMEOUT>)",
    "deadline": "Total-ping deadline, in s. 0 == no deadline (ping -w <DEADLINE>)",
    "interface": "Interface or source address to send ping from (ping -I <INTERFACE/SRC_ADDR>); "
                 "the BSDs only accept a source address (ping -s <SRC_ADDR>)",
    "binary": "Ping executable binary",
    "arguments": "Arguments for the ping command; when not empty, "
                 "the other options (ping_interval, timeout, etc) are ignored",
    "collection_interval": "Seconds between collection cycles when running continuously",
}


class Settings:
    PATH = os.environ.get(
        "ZESTYPROBE_CONFIG", os.path.join(os.path.dirname(__file__), "config.json")
    )

    def __init__(
        self,
        urls=None,
        count=1,
        ping_interval=1.0,
        timeout=1.0,
        deadline=10,
        interface="",
        binary="ping",
        arguments=None,
        collection_interval=10.0,
    ):
        if isinstance(urls, str):
            raise ValueError(f"urls must be a list of hosts, got the string {urls!r}")
        self.urls = list(urls) if urls is not None else list(DEFAULTS["urls"])
        self.count = int(count)
        self.ping_interval = float(ping_interval)
        self.timeout = float(timeout)
        self.deadline = int(deadline)
        self.interface = interface or ""
        self.binary = binary or "ping"
        self.arguments = [str(a) for a in arguments] if arguments else []
        self.collection_interval = float(collection_interval)
        if self.collection_interval <= 0:
            raise ValueError(f"collection_interval must be positive, got {self.collection_interval}")

    @classmethod
    def from_dict(cls, data):
        return cls(**{k: data.get(k, DEFAULTS[k]) for k in DEFAULTS})

    @classmethod
    def load(cls, path=None):
        path = path or cls.PATH
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.debug("no settings at %s, using defaults", path)
            return cls()
        except (OSError, ValueError) as e:
            logger.warning("could not read settings from %s (%s), using defaults", path, e)
            return cls()
        if not isinstance(data, dict):
            logger.warning("settings in %s are not a JSON object, using defaults", path)
            return cls()
        # "_key" entries are notes, see sample_config()
        unknown = sorted(k for k in data if k not in DEFAULTS and not k.startswith("_"))
        if unknown:
            logger.warning("ignoring unknown settings in %s: %s", path, ", ".join(unknown))
        return cls.from_dict(data)

    def to_dict(self):
        return {
            "urls": self.urls,
            "count": self.count,
            "ping_interval": self.ping_interval,
            "timeout": self.timeout,
            "deadline": self.deadline,
            "interface": self.interface,
            "binary": self.binary,
            "arguments": self.arguments,
            "collection_interval": self.collection_interval,
        }

    def save(self, path=None):
        with open(path or self.PATH, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)

    def to_config(self) -> ProbeConfig:
        """Freeze the current values for one collection cycle."""
        return ProbeConfig(
            urls=tuple(self.urls),
            count=self.count,
            ping_interval=self.ping_interval,
            timeout=self.timeout,
            deadline=self.deadline,
            interface=self.interface,
            binary=self.binary,
            arguments=tuple(self.arguments),
        )


def sample_config() -> str:
    """Default settings as JSON, each key preceded by a '_<key>' note."""
    doc = {}
    for key, value in DEFAULTS.items():
        doc[f"_{key}"] = SAMPLE_NOTES[key]
        doc[key] = value
    return json.dumps(doc, indent=2)
