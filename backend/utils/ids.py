# backend/utils/ids.py
from typing import Optional, Union

from fastapi import HTTPException

# Largest value an Integer primary key holds on both SQLite and Postgres
MAX_ID = 2**31 - 1


def to_id(value: Union[int, str, None]) -> Optional[int]:
    """Parse a record identifier, returning None when it is malformed."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        pk = value
    else:
        text = str(value).strip()
        if not (text.isascii() and text.isdigit()):
            return None
        pk = int(text)
    return pk if 0 < pk <= MAX_ID else None


def parse_id(value: Union[int, str, None], resource: str) -> int:
    """Like to_id, but a malformed identifier is a 400 for the caller."""
    pk = to_id(value)
    if pk is None:
        raise HTTPException(status_code=400, detail=f"Invalid {resource} id")
    return pk
