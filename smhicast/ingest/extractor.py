"""Extract display records from a parsed SMHI point forecast."""

import logging
from typing import Any

from pydantic import StrictFloat, TypeAdapter, ValidationError

from smhicast.errors import SchemaError
from smhicast.models.forecast import DisplayRecord, ForecastDocument, ForecastEntry

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 8
TEMPERATURE = "t"
PRECIPITATION_MEAN = "pmean"

# JSON ints pass, strings and booleans do not
_NUMBER = TypeAdapter(StrictFloat)


def extract(doc: Any, limit: int = DEFAULT_LIMIT) -> list[DisplayRecord]:
    """Return one record per timeSeries entry, at most `limit` of them.

    Only the entries that are kept are validated, so a malformed entry past
    the limit does not abort the run. Raises SchemaError if the document is
    not a point forecast.
    """
    if limit < 1:
        raise ValueError(f"limit must be at least 1, got {limit}")

    try:
        document = ForecastDocument.model_validate(doc)
    except ValidationError as e:
        logger.info("Forecast document failed validation: %d error(s)", e.error_count())
        raise SchemaError(_summarize(e)) from e

    raw_entries = document.timeSeries[:limit]
    logger.info(
        "Extracting %d of %d forecast entries", len(raw_entries), len(document.timeSeries)
    )
    return [_to_record(raw, i) for i, raw in enumerate(raw_entries)]


def _to_record(raw: Any, index: int) -> DisplayRecord:
    prefix = ("timeSeries", index)
    try:
        entry = ForecastEntry.model_validate(raw)
    except ValidationError as e:
        logger.info("Forecast entry %d failed validation", index)
        raise SchemaError(_summarize(e, prefix)) from e

    temperature = 0.0
    precipitation = 0.0

    # Later duplicates overwrite earlier ones
    for j, p in enumerate(entry.parameters):
        if not p.values or p.name not in (TEMPERATURE, PRECIPITATION_MEAN):
            continue
        try:
            value = float(_NUMBER.validate_python(p.values[0]))
        except ValidationError as e:
            logger.info("Forecast entry %d has a non-numeric %r", index, p.name)
            raise SchemaError(
                _summarize(e, (*prefix, "parameters", j, "values", 0))
            ) from e
        if p.name == TEMPERATURE:
            temperature = value
        else:
            precipitation = value

    return DisplayRecord(
        timestamp=entry.validTime,
        temperature=temperature,
        precipitation=precipitation,
    )


def _summarize(e: ValidationError, prefix: tuple = ()) -> str:
    """First validation error as 'loc: msg', e.g. 'timeSeries: Field required'."""
    first = e.errors()[0]
    loc = ".".join(str(part) for part in (*prefix, *first["loc"])) or "document"
    more = e.error_count() - 1
    suffix = f" (+{more} more)" if more else ""
    return f"Unexpected forecast schema at {loc}: {first['msg']}{suffix}"
