"""
Record identifier helpers.

Identifiers are version-1 (time-based) UUIDs rendered in the canonical
8-4-4-4-12 lowercase hexadecimal form.
"""

import re
import uuid
from decimal import Decimal
from typing import Union

ID_PATTERN = re.compile(r'[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}')


def generate_id() -> str:
    """Generate a new canonical record identifier."""
    return str(uuid.uuid1())


def is_valid_id(value: object) -> bool:
    """Check that a value is a string in canonical identifier format."""
    return isinstance(value, str) and ID_PATTERN.fullmatch(value) is not None


def decimal_to_number(value: Union[Decimal, int, float]) -> Union[int, float]:
    """Convert a numeric attribute read from DynamoDB back to a JSON number."""
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    return value
