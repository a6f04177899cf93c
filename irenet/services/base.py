"""Helpers shared by the resource services."""

import logging
import re
from typing import Iterable, Optional, Union

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from irenet.exceptions import DatabaseError, ValidationError

logger = logging.getLogger(__name__)

MISSING_FIELDS = "Missing required fields"

# Primary keys are 32-bit INTEGER columns
ID_MIN = -(2**31)
ID_MAX = 2**31 - 1

_INTEGER = re.compile(r"[+-]?\d+")


def row_id(value: Union[int, str]) -> Optional[int]:
    """
    Path identifier → integer key, or None when no row could have it.

    Non-numeric text and values outside the INTEGER column range cannot
    match a row, so callers treat None as "absent" rather than as bad input.
    """
    if isinstance(value, str):
        if not _INTEGER.fullmatch(value.strip()):
            return None
        value = int(value)
    if not ID_MIN <= value <= ID_MAX:
        return None
    return value


def require_fields(
    payload: BaseModel,
    fields: Iterable[str],
    message: str = MISSING_FIELDS,
) -> None:
    """
    Raises ValidationError unless every named field is truthy.

    Empty strings and a quantity of 0 count as missing. No format or type
    validation happens here.
    """
    missing = [name for name in fields if not getattr(payload, name, None)]
    if missing:
        raise ValidationError(message=message, context={"missing": missing})


def storage_error(exc: SQLAlchemyError, operation: str) -> DatabaseError:
    """Logs a failed statement and returns the DatabaseError to raise."""
    error = DatabaseError.from_sqlalchemy(exc, operation)
    logger.error("Database error during %s: %s", operation, error.message)
    return error
