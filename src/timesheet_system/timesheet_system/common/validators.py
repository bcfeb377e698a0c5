from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Optional

from ..core.constants import DAYS_PER_WEEK
from ..core.exceptions import FormValidationError

_EMAIL_LIST = re.compile(r"([\w+\-.%]+@[\w\-.]+\.[A-Za-z]{2,4}(,[ ]*)?)+")


def parse_int(value: Any) -> Optional[int]:
    """Integer value of an int or numeric string, None otherwise."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and re.fullmatch(r"\s*[+-]?\d+\s*", value):
        return int(value)
    return None


def require_mapping(value: Any, field_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise FormValidationError({field_name: "Must be an object"})
    return value


def require_list(value: Any, field_name: str) -> list:
    if not isinstance(value, list):
        raise FormValidationError({field_name: "Must be a list"})
    return value


def is_weekday_index(value: Any) -> bool:
    number = parse_int(value)
    return number is not None and 0 <= number < DAYS_PER_WEEK


def is_email_list(value: Any) -> bool:
    return isinstance(value, str) and _EMAIL_LIST.fullmatch(value) is not None
