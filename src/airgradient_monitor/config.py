import os
import tomllib
from enum import StrEnum
from typing import Any, Final

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

DEFAULT_CONFIG_PATH: Final[str] = "/etc/airgradient_monitor.toml"


class LogLevel(StrEnum):
    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"


class AirGradientSettings(BaseModel):
    url: str
    delaysecs: int = Field(default=60, ge=1)
    timeout_secs: float = Field(default=5, gt=0)
    user_agent: str = "airgradient-monitor/1.0"


class InfluxTag(BaseModel):
    # TOML numbers (val = 2) are valid tag values
    model_config = ConfigDict(coerce_numbers_to_str=True)

    key: str
    val: str


class InfluxSettings(BaseModel):
    url: str
    org: str
    bucket: str
    token: str
    tags: list[InfluxTag] = Field(default_factory=list)

    @field_validator("tags", mode="before")
    @classmethod
    def _tags_from_table(cls, value: Any) -> Any:
        # Accept [influxdb.tags] key = "val" as well as [[influxdb.tags]] key/val pairs
        if isinstance(value, dict):
            return [{"key": str(k), "val": str(v)} for k, v in value.items()]
        return value


class Settings(BaseModel):
    airgradient: AirGradientSettings
    influxdb: InfluxSettings
    log_level: LogLevel = LogLevel.INFO

    def redacted(self) -> dict[str, Any]:
        data = self.model_dump()
        data["influxdb"]["token"] = "***"
        return data


# Environment variable -> (section, key) it overrides; section None means top level
ENV_OVERRIDES: Final[dict[str, tuple[str | None, str]]] = {
    "LOG_LEVEL": (None, "log_level"),
    "INFLUXDB_TOKEN": ("influxdb", "token"),
}


def resolve_config_path(argv: list[str]) -> str:
    """First positional argument, or the system-wide default."""
    return argv[0] if argv else DEFAULT_CONFIG_PATH


def _read_toml(path: str) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except OSError as e:
        raise RuntimeError(f"Config file not found: {path} ({e.strerror})") from e
    except tomllib.TOMLDecodeError as e:
        raise RuntimeError(f"Config file {path} is not valid TOML: {e}") from e


def _apply_env_overrides(data: dict[str, Any]) -> None:
    for env_key, (section, key) in ENV_OVERRIDES.items():
        if env_key not in os.environ:
            continue
        target = data if section is None else data.setdefault(section, {})
        if isinstance(target, dict):
            target[key] = os.environ[env_key]


def _missing_keys(error: ValidationError) -> list[str]:
    return [".".join(str(p) for p in err["loc"]) for err in error.errors() if err["type"] == "missing"]


def load_settings(path: str) -> Settings:
    # Load .env if present (does nothing if file missing)
    load_dotenv()
    data = _read_toml(path)
    _apply_env_overrides(data)
    if isinstance(data.get("log_level"), str):
        data["log_level"] = data["log_level"].upper()

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        missing = _missing_keys(e)
        if missing:
            raise RuntimeError(f"Missing required configuration: {', '.join(missing)}") from e
        raise
