"""SMHI open-data point forecast client."""

import logging

import httpx

from smhicast.config.schema import DEFAULT_USER_AGENT, SMHI_BASE_URL, Location
from smhicast.errors import NetworkError

logger = logging.getLogger(__name__)

POINT_FORECAST_PATH = (
    "/api/category/pmp3g/version/2/geotype/point/lon/{lon}/lat/{lat}/data.json"
)


class SmhiClient:
    def __init__(
        self,
        base_url: str = SMHI_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
    ):
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout

    def point_forecast_url(self, location: Location) -> str:
        path = POINT_FORECAST_PATH.format(lon=location.lon, lat=location.lat)
        return f"{self.base_url}{path}"

    def fetch(self, location: Location) -> str:
        """Fetch the raw point forecast body for a location.

        The body is returned whatever the status code; a non-2xx status is
        only logged, and the caller's parse or schema check rejects it.
        """
        url = self.point_forecast_url(location)
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        try:
            resp = httpx.get(url, headers=headers, timeout=self.timeout)
        except httpx.TimeoutException as e:
            logger.info("SMHI request timed out after %.1fs: %s", self.timeout, url)
            raise NetworkError(
                f"Request timed out after {self.timeout}s: {url}", url=url
            ) from e
        except httpx.RequestError as e:
            logger.info("SMHI request failed: %s -> %s", url, e)
            raise NetworkError(f"Request failed: {e}", url=url) from e

        if not resp.is_success:
            logger.info("SMHI %s returned %d", url, resp.status_code)
        logger.debug("Fetched %d bytes from %s", len(resp.content), url)
        return resp.text
