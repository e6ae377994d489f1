"""
Document parsing.

Turns raw text into a JSON value, failing fast on anything that is not
strict JSON. Errors are returned, not raised, so callers can keep their
previous state.
"""

import json
import logging
import math

from .exceptions import InvalidJsonError
from .result import Err, Ok, Result
from .types import JSONValue

logger = logging.getLogger(__name__)


def _reject_constant(name: str):
    # The stdlib decoder accepts NaN/Infinity by default; JSON does not.
    raise ValueError(f"Non-standard JSON constant: {name}")


def _parse_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Number out of range: {text}")
    return value


def parse_document(text: str) -> Result[JSONValue, InvalidJsonError]:
    """
    Parse JSON text.

    Returns:
        Ok(value) for valid JSON, Err(InvalidJsonError) otherwise.
    """
    try:
        value = json.loads(text, parse_constant=_reject_constant, parse_float=_parse_float)
    except json.JSONDecodeError as e:
        logger.debug(f"Rejected document: {e}")
        return Err(InvalidJsonError(e.msg, line=e.lineno, column=e.colno))
    except ValueError as e:
        logger.debug(f"Rejected document: {e}")
        return Err(InvalidJsonError(str(e)))
    except RecursionError:
        return Err(InvalidJsonError("Document is nested too deeply"))
    except TypeError as e:
        return Err(InvalidJsonError(f"Expected JSON text, got {type(text).__name__}: {e}"))

    return Ok(value)
