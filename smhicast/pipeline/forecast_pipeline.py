"""Forecast pipeline: fetch, parse and extract one point forecast."""

import logging
import time

from smhicast.config.defaults import DEFAULT_LOCATION
from smhicast.config.loader import config_hash
from smhicast.config.schema import AppConfig, Location
from smhicast.ingest.extractor import extract
from smhicast.ingest.parser import parse_body
from smhicast.ingest.smhi_client import SmhiClient
from smhicast.models.forecast import DisplayRecord

logger = logging.getLogger(__name__)


class ForecastPipeline:
    def __init__(
        self,
        config: AppConfig,
        client: SmhiClient | None = None,
        location: Location = DEFAULT_LOCATION,
    ):
        self.config = config
        self.location = location
        self.client = client or SmhiClient(
            base_url=config.client.base_url,
            user_agent=config.client.user_agent,
            timeout=config.client.timeout_seconds,
        )

    def run(self) -> list[DisplayRecord]:
        """Execute one forecast run.

        Any ForecastError raised by a stage propagates unchanged.
        """
        start_time = time.monotonic()
        logger.info(
            "Forecast run for %s (config %s)", self.location.name, config_hash(self.config)
        )

        # 1. FETCH
        body = self.client.fetch(self.location)

        # 2. PARSE
        doc = parse_body(body)

        # 3. EXTRACT
        records = extract(doc, limit=self.config.display.max_entries)

        logger.info(
            "Forecast run complete: %d records in %.2fs",
            len(records), time.monotonic() - start_time,
        )
        return records
