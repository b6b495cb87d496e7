"""Tests for the forecast pipeline with a mocked SMHI client."""

from unittest.mock import MagicMock

import pytest

from smhicast.config.defaults import DEFAULT_LOCATION
from smhicast.config.schema import AppConfig
from smhicast.errors import NetworkError, ParseError, SchemaError
from smhicast.ingest.smhi_client import SmhiClient
from smhicast.pipeline.forecast_pipeline import ForecastPipeline


def _client(body: str | None = None, error: Exception | None = None) -> MagicMock:
    mock_smhi = MagicMock(spec=SmhiClient)
    if error is not None:
        mock_smhi.fetch.side_effect = error
    else:
        mock_smhi.fetch.return_value = body
    return mock_smhi


class TestForecastPipeline:
    def test_run_success(self, default_config: AppConfig, karlskrona_body: str):
        mock_smhi = _client(karlskrona_body)
        records = ForecastPipeline(default_config, mock_smhi).run()

        assert len(records) == 8
        assert records[0].temperature == 9.4
        mock_smhi.fetch.assert_called_once_with(DEFAULT_LOCATION)

    def test_max_entries_from_config(self, karlskrona_body: str):
        config = AppConfig(display={"max_entries": 3})
        records = ForecastPipeline(config, _client(karlskrona_body)).run()
        assert len(records) == 3

    def test_builds_client_from_config(self):
        config = AppConfig(
            client={"base_url": "https://test-smhi.example.com", "timeout_seconds": 2.0}
        )
        pipeline = ForecastPipeline(config)
        assert pipeline.client.base_url == "https://test-smhi.example.com"
        assert pipeline.client.timeout == 2.0

    def test_network_error_propagates(self, default_config: AppConfig):
        pipeline = ForecastPipeline(default_config, _client(error=NetworkError("down")))
        with pytest.raises(NetworkError):
            pipeline.run()

    def test_malformed_body(self, default_config: AppConfig):
        pipeline = ForecastPipeline(default_config, _client("not json"))
        with pytest.raises(ParseError):
            pipeline.run()

    def test_missing_time_series(self, default_config: AppConfig):
        pipeline = ForecastPipeline(default_config, _client('{"message": "not found"}'))
        with pytest.raises(SchemaError):
            pipeline.run()
