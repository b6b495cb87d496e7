"""Output formatters for forecast records."""

import json

from smhicast.config.schema import Location
from smhicast.models.forecast import DisplayRecord


def header_for(location: Location) -> str:
    return f"{location.name} väder idag:"


def format_record(r: DisplayRecord) -> str:
    """One console line; numbers keep the precision they were parsed with."""
    return f"{r.timestamp} | {r.temperature}°C, {r.precipitation} mm precipitation"


def format_forecast_text(records: list[DisplayRecord], header: str) -> str:
    """Plain text forecast: header line followed by one line per record."""
    lines = [header]
    lines.extend(format_record(r) for r in records)
    return "\n".join(lines)


def format_forecast_json(records: list[DisplayRecord], location: Location) -> str:
    """JSON forecast for programmatic consumption."""
    data = {
        "location": {
            "name": location.name,
            "lon": location.lon,
            "lat": location.lat,
        },
        "entries": [
            {
                "timestamp": r.timestamp,
                "temperature": r.temperature,
                "precipitation": r.precipitation,
            }
            for r in records
        ],
    }
    return json.dumps(data, indent=2, ensure_ascii=False)
