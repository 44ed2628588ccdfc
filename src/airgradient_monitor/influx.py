import logging
import time
from typing import Final

from influxdb_client import InfluxDBClient, Point, WritePrecision
from influxdb_client.client.write_api import SYNCHRONOUS

from .config import InfluxSettings, InfluxTag
from .models import AirGradientData

MEASUREMENT: Final[str] = "airgradient"


def build_point(
    data: AirGradientData,
    aqi: int | None,
    tags: list[InfluxTag],
    timestamp_ns: int,
) -> Point:
    """Map a reading onto one InfluxDB point.

    Channels the device did not report are left out. Configured tags are
    applied after the device tags and win on a key collision.
    """
    fields: dict[str, int | float | None] = {
        "rco2": data.rco2,
        "pm01": data.pm01,
        "pm02": data.pm02,
        "pm10": data.pm10,
        "pm003Count": data.pm003_count,
        "temp": float(data.atmp_compensated) if data.atmp_compensated is not None else None,
        "humidity": data.rhum_compensated,
        "tvoc": data.tvoc_raw,
        "tvocIndex": data.tvoc_index,
        "nox": data.nox_raw,
        "noxIndex": data.nox_index,
        "aqi": aqi,
    }
    present = {name: value for name, value in fields.items() if value is not None}
    if not present:
        raise RuntimeError(f"Reading from {data.serialno} has no sensor values")

    point = Point(MEASUREMENT)
    for name, value in present.items():
        point = point.field(name, value)
    device_tags = {"firmware": data.firmware, "model": data.model, "serialno": data.serialno}
    for key, val in device_tags.items():
        if val:
            point = point.tag(key, val)
    for tag in tags:
        point = point.tag(tag.key, tag.val)
    return point.time(timestamp_ns, WritePrecision.NS)


class Influx:
    """Lazily connected InfluxDB writer.

    disconnect() drops the client; the next write_point() reconnects.
    """

    def __init__(self, cfg: InfluxSettings) -> None:
        self.cfg = cfg
        self._client: InfluxDBClient | None = None

    @property
    def connected(self) -> bool:
        return self._client is not None

    def connect(self) -> InfluxDBClient:
        if self._client is None:
            self._client = InfluxDBClient(url=self.cfg.url, token=self.cfg.token, org=self.cfg.org)
            logging.info("Connected to InfluxDB at %s", self.cfg.url)
        return self._client

    def disconnect(self) -> None:
        client, self._client = self._client, None
        if client is None:
            return
        try:
            client.close()
        except Exception as exc:
            logging.debug("Error closing InfluxDB client: %s", exc)

    def ping(self) -> bool:
        return bool(self.connect().ping())

    def write_point(self, data: AirGradientData, aqi: int | None) -> Point:
        client = self.connect()
        point = build_point(data, aqi, self.cfg.tags, time.time_ns())
        write_api = client.write_api(write_options=SYNCHRONOUS)
        write_api.write(bucket=self.cfg.bucket, org=self.cfg.org, record=point)
        return point
