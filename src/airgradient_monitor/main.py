import logging
import sys

from .config import load_settings, resolve_config_path
from .influx import Influx
from .monitor import run_monitor


def _setup_logging(level: str) -> None:
    numeric = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=numeric, format="%(asctime)s %(levelname)s %(message)s")
    # basicConfig is a no-op once handlers exist; the level from config still applies
    logging.getLogger().setLevel(numeric)


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    cfg_path = resolve_config_path(args)
    _setup_logging("INFO")
    logging.info("Reading config file %s", cfg_path)
    settings = load_settings(cfg_path)
    _setup_logging(settings.log_level)
    logging.info("Settings: %s", settings.redacted())

    influx = Influx(settings.influxdb)
    influx.connect()
    try:
        run_monitor(settings, influx)
    except KeyboardInterrupt:
        logging.info("Interrupted; stopping")
    finally:
        influx.disconnect()


if __name__ == "__main__":
    main()
