"""Console sink for forecast output."""

import sys
from typing import TextIO

from smhicast.models.forecast import DisplayRecord
from smhicast.reporting.formatters import format_forecast_text


def present(
    records: list[DisplayRecord], header: str, stream: TextIO | None = None
) -> None:
    out = stream if stream is not None else sys.stdout
    out.write(format_forecast_text(records, header) + "\n")
