import logging
import time

from .aqi import compute_aqi
from .config import Settings
from .device import fetch_current, measures_url
from .influx import Influx
from .models import AirGradientData


def poll_once(influx: Influx, url: str, timeout: float, user_agent: str) -> tuple[AirGradientData, int | None]:
    data = fetch_current(url, timeout=timeout, user_agent=user_agent)
    aqi = compute_aqi(data)
    influx.write_point(data, aqi)
    return data, aqi


def run_monitor(settings: Settings, influx: Influx) -> None:
    """Poll the device and write to InfluxDB every delaysecs, forever.

    A failed poll is logged and the InfluxDB client dropped so the next write
    starts from a fresh connection.
    """
    cfg = settings.airgradient
    tick = cfg.delaysecs
    url = measures_url(cfg.url)
    logging.info("Starting: polling %s every %ss", url, tick)

    first_written = False
    while True:
        started = time.monotonic()
        try:
            data, aqi = poll_once(influx, url, timeout=cfg.timeout_secs, user_agent=cfg.user_agent)
        except Exception as exc:
            logging.warning("Poll failed: %s", exc)
            influx.disconnect()
        else:
            logging.debug("Wrote reading from %s: %s", data.serialno, data.model_dump(exclude_none=True))
            if not first_written:
                logging.info(
                    "First reading written: serialno=%s co2=%sppm pm2.5=%s temp=%sC aqi=%s",
                    data.serialno,
                    data.rco2,
                    data.pm02,
                    data.atmp_compensated,
                    aqi,
                )
                first_written = True

        elapsed = time.monotonic() - started
        time.sleep(max(0.0, tick - elapsed))
