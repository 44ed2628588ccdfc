from pydantic import BaseModel, ConfigDict, Field


class AirGradientData(BaseModel):
    """Payload of the device's /measures/current endpoint.

    Channels for sensors the device does not carry are simply absent from the
    JSON, so everything except the serial number is optional.
    """

    model_config = ConfigDict(extra="ignore")

    serialno: str
    firmware: str | None = None
    model: str | None = None
    led_mode: str | None = Field(default=None, alias="ledMode")

    wifi: int | None = None
    boot: int | None = None
    boot_count: int | None = Field(default=None, alias="bootCount")

    rco2: int | None = None
    pm01: int | None = None
    pm02: int | None = None
    pm10: int | None = None
    pm003_count: int | None = Field(default=None, alias="pm003Count")

    atmp: float | None = None
    rhum: int | None = None
    atmp_compensated: float | None = Field(default=None, alias="atmpCompensated")
    rhum_compensated: int | None = Field(default=None, alias="rhumCompensated")

    tvoc_index: int | None = Field(default=None, alias="tvocIndex")
    tvoc_raw: int | None = Field(default=None, alias="tvocRaw")
    nox_index: int | None = Field(default=None, alias="noxIndex")
    nox_raw: int | None = Field(default=None, alias="noxRaw")
