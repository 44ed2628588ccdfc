"""US EPA Air Quality Index from particulate concentrations.

See https://en.wikipedia.org/wiki/Air_quality_index#United_States
"""

from typing import Final

from .models import AirGradientData

AQI_SCALE: Final[tuple[float, ...]] = (0.0, 50.0, 100.0, 150.0, 200.0, 300.0, 500.0)

PM02_BREAKPOINTS: Final[tuple[float, ...]] = (0.0, 9.0, 35.4, 55.4, 125.4, 225.4, 325.4)
PM10_BREAKPOINTS: Final[tuple[float, ...]] = (0.0, 54.0, 154.0, 254.0, 354.0, 424.0, 604.0)


def compute_one_aqi(datum: float, breakpoints: tuple[float, ...]) -> int:
    """Interpolate datum linearly within the breakpoint segment it falls in.

    A value sitting on a breakpoint belongs to the segment above it. Values
    past the last breakpoint clamp to the top of the scale.
    """
    if datum <= breakpoints[0]:
        return int(AQI_SCALE[0])
    i = 1
    while i < len(breakpoints) and datum >= breakpoints[i]:
        i += 1
    if i == len(breakpoints):
        return int(AQI_SCALE[-1])
    slope = (AQI_SCALE[i] - AQI_SCALE[i - 1]) / (breakpoints[i] - breakpoints[i - 1])
    return int(slope * (datum - breakpoints[i - 1]) + AQI_SCALE[i - 1])


def compute_aqi(data: AirGradientData) -> int | None:
    """Worst sub-index over PM2.5 and PM10, or None if neither is reported."""
    # noxRaw is not in ppb, so NO2 does not contribute
    sub_indices = []
    if data.pm02 is not None:
        sub_indices.append(compute_one_aqi(float(data.pm02), PM02_BREAKPOINTS))
    if data.pm10 is not None:
        sub_indices.append(compute_one_aqi(float(data.pm10), PM10_BREAKPOINTS))
    return max(sub_indices) if sub_indices else None
