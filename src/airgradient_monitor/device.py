from requests import Response, get

from .models import AirGradientData

MEASURES_PATH = "/measures/current"


def measures_url(base_url: str) -> str:
    return base_url.rstrip("/") + MEASURES_PATH


def fetch_current(url: str, timeout: float, user_agent: str) -> AirGradientData:
    """GET the current measures and validate them.

    Raises requests.HTTPError on a non-2xx status and pydantic.ValidationError
    when the body does not look like an AirGradient payload.
    """
    headers = {
        "Accept": "application/json",
        "User-Agent": user_agent,
    }
    resp: Response = get(url, headers=headers, timeout=timeout)
    resp.raise_for_status()
    return AirGradientData.model_validate(resp.json())
