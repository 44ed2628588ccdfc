from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

SAMPLE_MEASURES: dict[str, Any] = {
    "wifi": -46,
    "serialno": "ecda3b1eaaaf",
    "rco2": 447,
    "pm01": 3,
    "pm02": 7,
    "pm10": 8,
    "pm003Count": 442,
    "atmp": 25.87,
    "rhum": 43,
    "atmpCompensated": 24.47,
    "rhumCompensated": 49,
    "tvocIndex": 100,
    "tvocRaw": 33051,
    "noxIndex": 1,
    "noxRaw": 16307,
    "boot": 6,
    "bootCount": 6,
    "ledMode": "pm",
    "firmware": "3.1.1",
    "model": "I-9PSL",
}

BASE_CONFIG = """\
[airgradient]
url = "http://airgradient.local"
delaysecs = 30

[influxdb]
url = "http://influx.local:8086"
org = "home"
bucket = "air"
token = "file-token"

[[influxdb.tags]]
key = "location"
val = "kitchen"
"""


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    # Keep a developer's .env and shell overrides out of the tests
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("INFLUXDB_TOKEN", raising=False)


@pytest.fixture
def sample_measures() -> dict[str, Any]:
    return dict(SAMPLE_MEASURES)


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., str]:
    def _write(text: str = BASE_CONFIG) -> str:
        path = tmp_path / "airgradient_monitor.toml"
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def base_config() -> str:
    return BASE_CONFIG
