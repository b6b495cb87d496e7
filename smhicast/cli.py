"""CLI entry point for the SMHI forecast printer."""

import argparse
import logging
import sys

import yaml
from pydantic import ValidationError

from smhicast.config.loader import load_config
from smhicast.errors import ForecastError
from smhicast.pipeline.forecast_pipeline import ForecastPipeline
from smhicast.reporting.formatters import format_forecast_json, header_for
from smhicast.reporting.presenter import present

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="smhicast",
        description="Print the next forecast entries from SMHI open data",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument(
        "--json", action="store_true", help="Print the forecast as JSON"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log progress to stderr"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except (OSError, UnicodeDecodeError, yaml.YAMLError, ValidationError) as e:
        print(f"Error: invalid config: {_one_line(e)}", file=sys.stderr)
        return 2
    logger.info("Loaded config from %s", args.config or "defaults")

    pipeline = ForecastPipeline(config)
    try:
        records = pipeline.run()
    except ForecastError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(format_forecast_json(records, pipeline.location))
    else:
        present(records, header_for(pipeline.location))
    return 0


def _one_line(e: Exception) -> str:
    """First validation error, or the message folded onto one line."""
    if isinstance(e, ValidationError):
        first = e.errors()[0]
        loc = ".".join(str(part) for part in first["loc"]) or "config"
        return f"{loc}: {first['msg']}"
    return " ".join(str(e).split())
