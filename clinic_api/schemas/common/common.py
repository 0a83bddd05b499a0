# clinic_api/schemas/common.py
import json
from typing import Any, Dict

from pydantic import BaseModel

from ...exceptions import ParseError

__all__ = ["SuccessResponse", "is_present", "load_json_object"]


class SuccessResponse(BaseModel):
    success: bool = True


def is_present(value: Any) -> bool:
    """JavaScript truthiness for decoded JSON values: null, "", 0 and false are absent."""
    return value not in (None, "", 0, False)


def load_json_object(body: bytes, error_message: str) -> Dict[str, Any]:
    """Decode a request body into a dict of fields.

    Undecodable bodies and a literal ``null`` raise ``ParseError`` with
    ``error_message``. Arrays and scalars decode to an empty field set, so
    callers report them as missing fields.
    """
    try:
        data = json.loads(body)
    except (ValueError, RecursionError):
        raise ParseError(error_message)
    if data is None:
        raise ParseError(error_message)
    if not isinstance(data, dict):
        return {}
    return data
