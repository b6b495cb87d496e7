"""JSON parsing of raw forecast bodies."""

import json
import logging
from typing import Any

from smhicast.errors import ParseError

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant {name!r}")


def parse_body(body: str) -> Any:
    """Parse a response body into a generic JSON tree.

    NaN and Infinity are rejected, as strict JSON does.
    """
    try:
        return json.loads(body, parse_constant=_reject_constant)
    except ValueError as e:
        logger.info("Malformed forecast body (%d chars): %s", len(body), e)
        raise ParseError(f"Malformed JSON: {e}") from e
