import logging
import sys

from .aqi import compute_aqi
from .config import load_settings, resolve_config_path
from .device import fetch_current, measures_url
from .influx import Influx


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    args = sys.argv[1:] if argv is None else argv
    cfg_path = resolve_config_path(args)

    try:
        settings = load_settings(cfg_path)
    except Exception as exc:  # noqa: BLE001
        print(f"Config error ({cfg_path}): {exc}", file=sys.stderr)
        sys.exit(1)

    cfg = settings.airgradient
    url = measures_url(cfg.url)
    logging.info("Checking AirGradient device at %s", url)

    try:
        data = fetch_current(url, timeout=cfg.timeout_secs, user_agent=cfg.user_agent)
    except Exception as exc:  # noqa: BLE001
        print(f"AirGradient fetch failed ({url}): {exc}", file=sys.stderr)
        sys.exit(1)

    print(
        "Sample: "
        f"serialno={data.serialno} "
        f"model={data.model} "
        f"firmware={data.firmware} "
        f"rco2={data.rco2} "
        f"pm02={data.pm02} "
        f"pm10={data.pm10} "
        f"temp={data.atmp_compensated} "
        f"humidity={data.rhum_compensated} "
        f"aqi={compute_aqi(data)}"
    )

    influx = Influx(settings.influxdb)
    try:
        reachable = influx.ping()
    except Exception as exc:  # noqa: BLE001
        logging.debug("InfluxDB ping raised: %s", exc)
        reachable = False
    finally:
        influx.disconnect()

    if reachable:
        logging.info("InfluxDB reachable at %s", settings.influxdb.url)
    else:
        print(
            f"Note: InfluxDB at {settings.influxdb.url} did not answer ping. Verify url/token before starting the monitor.",
            file=sys.stderr,
        )

    sys.exit(0)


if __name__ == "__main__":
    main()
